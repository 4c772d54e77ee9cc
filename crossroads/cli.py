"""Command-line interface for the crossroad hop counter."""

from __future__ import annotations

import argparse
import json
import sys
import traceback
from typing import Any, Dict, List, Optional

from .exceptions import (
    CapacityError,
    ConfigError,
    CrossroadsError,
    GraphFormatError,
    InputError,
    MissingInputError,
)
from .generator import random_road_network
from .graph import RoadNetwork
from .io import DEFAULT_INPUT, read_network, write_network
from .logger import StdLogger
from .solver import MODES, SINGLE_PASS, LEGACY_UNREACHABLE, FordBellmanSolver, SolverConfig, crossings

EXAMPLE_INPUT = """4 3
1 3
3 4
4 2
"""

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_INTERNAL = 70
#: ``-1`` seen as an unsigned process status.
EXIT_FILE_NOT_FOUND = 255


def _build_parser() -> argparse.ArgumentParser:
    examples = (
        "Examples:\n"
        "  crossroads                        # read ./input.txt, route 1 -> 2\n"
        "  crossroads --input roads.txt --source 3 --target 7 --json\n"
        "  crossroads --random --n 12 --m 18 --seed 3 --plot roads.png\n"
    )
    p = argparse.ArgumentParser(
        prog="crossroads",
        description="Count the crossroads on the shortest route through a road network",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )

    src = p.add_mutually_exclusive_group()
    src.add_argument("--input", type=str, default=DEFAULT_INPUT, help="Path to the road network file")
    src.add_argument("--random", action="store_true", help="Use a random road network")
    src.add_argument(
        "--example",
        action="store_true",
        help="Print a sample input file to stdout and exit",
    )

    p.add_argument("--n", type=int, default=10, help="Crossroads (random mode)")
    p.add_argument("--m", type=int, default=12, help="Roads (random mode)")
    p.add_argument("--seed", type=int, default=0, help="Seed controlling random network generation")
    p.add_argument("--save", type=str, default=None, help="Write the network in input format")

    p.add_argument("--source", type=int, default=1, help="Starting crossroad")
    p.add_argument("--target", type=int, default=2, help="Destination crossroad")
    p.add_argument("--mode", choices=list(MODES), default=SINGLE_PASS, help="Relaxation strategy")
    p.add_argument("--max-sweeps", type=int, default=None, help="Sweep cap in converge mode")

    p.add_argument("--json", action="store_true", help="Print a JSON result instead of one number")
    p.add_argument("--plot", type=str, default=None, help="Save a drawing of the network and route")
    return p


def _report(args: argparse.Namespace, solver: FordBellmanSolver) -> str:
    hops = solver.distance(args.target)
    if not args.json:
        count = crossings(hops)
        return str(LEGACY_UNREACHABLE if count is None else count)
    out: Dict[str, Any] = {
        "source": args.source,
        "target": args.target,
        "mode": args.mode,
        "reachable": hops is not None,
        "hops": hops,
        "crossings": crossings(hops),
        "path": solver.path(args.target),
        "sweeps": solver.summary()["sweeps"],
    }
    return json.dumps(out)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``crossroads`` command-line tool."""
    args = _build_parser().parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_INPUT)
        return EXIT_OK

    try:
        G: RoadNetwork
        if args.random:
            G = random_road_network(args.n, args.m, seed=args.seed)
        else:
            G = read_network(args.input)
        if args.save:
            write_network(G, args.save)

        logger = StdLogger.for_cli(args.log_level, args.log_json)

        cfg = SolverConfig(mode=args.mode, max_sweeps=args.max_sweeps)
        solver = FordBellmanSolver(G, args.source, config=cfg, logger=logger)
        line = _report(args, solver)

        if args.plot:
            from .visualize import save_network_plot

            save_network_plot(G, args.plot, args.source, args.target, solver.path(args.target))

        logger.info(
            "run",
            n=G.n,
            m=G.m,
            source=args.source,
            target=args.target,
            **solver.summary(),
        )
        print(line)
        return EXIT_OK

    except MissingInputError:
        if args.verbose:
            traceback.print_exc()
        sys.stderr.write("File not found\n")
        return EXIT_FILE_NOT_FOUND
    except (InputError, ConfigError, GraphFormatError, CapacityError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_USAGE
    except CrossroadsError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL
    except Exception as exc:  # pragma: no cover - unexpected
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL


def entry() -> None:
    """Console-script wrapper that turns :func:`main`'s status into the exit code."""
    sys.exit(main())


if __name__ == "__main__":
    entry()
