"""Hop-count shortest paths by sweep relaxation over a road network."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from .exceptions import AlgorithmError, ConfigError
from .graph import RoadNetwork, Vertex
from .logger import BoundLogger, Logger, NoopLogger
from .path import reconstruct_path

Dist = Union[int, float]

SINGLE_PASS = "single-pass"
CONVERGE = "converge"
MODES = (SINGLE_PASS, CONVERGE)

#: Printed for an unreachable target: the 32-bit sentinel ``2**32 - 2`` plus one.
LEGACY_UNREACHABLE = 2**32 - 1


@dataclass(frozen=True)
class HopResult:
    """Distances and predecessors produced by the solver.

    Both lists are indexed by crossroad id; index 0 is unused.
    """

    source: Vertex
    distances: List[Optional[int]]
    predecessors: List[Optional[Vertex]]
    sweeps: int

    def hops(self, target: Vertex) -> Optional[int]:
        """Return the hop count to ``target`` or ``None`` if it was not reached."""
        if not (1 <= target < len(self.distances)):
            return None
        return self.distances[target]


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for the solver.

    Attributes:
        mode: ``"single-pass"`` visits every crossroad once in ascending
            order. ``"converge"`` repeats that sweep until nothing changes.
        max_sweeps: Upper bound on sweeps in ``"converge"`` mode. ``None``
            means ``n``. Ignored in ``"single-pass"`` mode.
    """

    mode: str = SINGLE_PASS
    max_sweeps: Optional[int] = None


class FordBellmanSolver:
    """Unit-weight relaxation over the slot adjacency of a :class:`RoadNetwork`.

    One sweep visits ``first = 1 .. n`` and, for every neighbour ``second`` in
    slot order, relaxes the pair in a single direction: ``first`` is tightened
    from ``second`` if possible, otherwise ``second`` from ``first``. A single
    sweep is not a full Bellman-Ford run; crossroads numbered below the
    source can stay unreached even when a route exists.
    """

    def __init__(
        self,
        G: RoadNetwork,
        source: Vertex,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the solver.

        Args:
            G: Road network.
            source: Crossroad the hop counts are measured from. A source
                outside ``[1, n]`` leaves every crossroad unreached.
            config: Optional solver configuration.
            logger: Optional event logger.

        Raises:
            ConfigError: If the configuration is invalid.
        """
        self.cfg = config or SolverConfig()
        if self.cfg.mode not in MODES:
            raise ConfigError(f"unknown mode {self.cfg.mode!r}; expected one of {MODES}")
        if self.cfg.max_sweeps is not None and self.cfg.max_sweeps < 0:
            raise ConfigError("max_sweeps must be non-negative.")
        self.G = G
        self.source = source
        self.logger = BoundLogger(logger or NoopLogger(), mode=self.cfg.mode)

        self.counters: Dict[str, int] = {
            "sweeps": 0,
            "pairs_scanned": 0,
            "relaxations": 0,
        }
        self.dist: List[Dist] = [math.inf] * (G.n + 1)
        self.pred: List[Optional[Vertex]] = [None] * (G.n + 1)
        if source in G:
            self.dist[source] = 0
        else:
            self.logger.debug("source_out_of_range", source=source, n=G.n)
        self._result: Optional[HopResult] = None

    # ---------- relaxation ------------------------------------------------

    def _relax_pair(self, first: Vertex, second: Vertex) -> bool:
        """Relax the pair ``(first, second)`` in at most one direction.

        Returns:
            ``True`` if either distance was tightened.
        """
        self.counters["pairs_scanned"] += 1
        d = self.dist
        if d[first] > d[second] + 1:
            d[first] = d[second] + 1
            self.pred[first] = second
        elif d[second] > d[first] + 1:
            d[second] = d[first] + 1
            self.pred[second] = first
        else:
            return False
        self.counters["relaxations"] += 1
        return True

    def _sweep(self) -> int:
        """Visit crossroads ``1`` .. ``n`` once and return the number of relaxations."""
        n = self.G.n
        slots = self.G.slots
        changed = 0
        for first in range(1, n + 1):
            for raw in slots[first]:
                second = int(raw)
                if second == 0:
                    break
                if second > n:
                    raise AlgorithmError(f"crossroad {first} holds out-of-range neighbour {second}")
                if self._relax_pair(first, second):
                    changed += 1
        self.counters["sweeps"] += 1
        return changed

    # ---------- public API ------------------------------------------------

    def solve(self) -> HopResult:
        """Run the configured sweeps and return the hop counts.

        Returns:
            Distances (``None`` for unreached crossroads) and predecessors.
        """
        if self._result is not None:
            return self._result

        if self.cfg.mode == SINGLE_PASS:
            changed = self._sweep()
            self.logger.debug("sweep", index=1, relaxed=changed)
        else:
            limit = self.G.n if self.cfg.max_sweeps is None else self.cfg.max_sweeps
            for i in range(limit):
                changed = self._sweep()
                self.logger.debug("sweep", index=i + 1, relaxed=changed)
                if changed == 0:
                    break

        distances: List[Optional[int]] = [None if math.isinf(x) else int(x) for x in self.dist]
        distances[0] = None
        self._result = HopResult(
            source=self.source,
            distances=distances,
            predecessors=list(self.pred),
            sweeps=self.counters["sweeps"],
        )
        self.logger.info(
            "solved",
            source=self.source,
            reached=sum(1 for x in distances if x is not None),
            **self.counters,
        )
        return self._result

    def distance(self, target: Vertex) -> Optional[int]:
        """Return the hop count from the source to ``target``, or ``None``."""
        return self.solve().hops(target)

    def path(self, target: Vertex) -> List[Vertex]:
        """Return the crossroads along the discovered route to ``target``.

        Returns:
            Crossroads from source to target inclusive, or an empty list if
            ``target`` was not reached.
        """
        res = self.solve()
        if res.hops(target) is None:
            return []
        return reconstruct_path(res.predecessors, self.source, target)

    def summary(self) -> Dict[str, int]:
        """Return a copy of the work counters."""
        return dict(self.counters)


def shortest_hops(
    G: RoadNetwork,
    source: Vertex = 1,
    target: Vertex = 2,
    config: Optional[SolverConfig] = None,
) -> Optional[int]:
    """Return the hop count between two crossroads.

    The defaults reproduce the fixed 1 to 2 query of the command-line tool.
    """
    return FordBellmanSolver(G, source, config=config).distance(target)


def crossings(hops: Optional[int]) -> Optional[int]:
    """Return the number of crossroads passed on a route of ``hops`` roads.

    The starting crossroad counts too, so this is ``hops + 1``.
    """
    if hops is None:
        return None
    return hops + 1


__all__ = [
    "FordBellmanSolver",
    "HopResult",
    "SolverConfig",
    "shortest_hops",
    "crossings",
    "LEGACY_UNREACHABLE",
    "SINGLE_PASS",
    "CONVERGE",
    "MODES",
]
