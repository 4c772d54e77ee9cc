"""Road network input/output helpers.

The on-disk format is a stream of whitespace-separated unsigned integers::

    n m
    a1 b1
    a2 b2
    ...

Line breaks carry no meaning; only the token order does.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Union

from .exceptions import GraphFormatError, MissingInputError
from .graph import RoadNetwork

PathLike = Union[str, Path]

DEFAULT_INPUT = "input.txt"

#: Largest value a token may hold; ids and counts are 32-bit unsigned.
UINT_MAX = 2**32 - 1


def _parse_uint(token: str, position: int) -> int:
    """Parse one token as an unsigned integer.

    Raises:
        GraphFormatError: If ``token`` is not a non-negative decimal integer
            or exceeds :data:`UINT_MAX`.
    """
    if not (token.isascii() and token.isdigit()):
        raise GraphFormatError(f"expected unsigned integer at token {position}, got {token!r}")
    value = int(token)
    if value > UINT_MAX:
        raise GraphFormatError(f"token {position} is out of range: {value} > {UINT_MAX}")
    return value


def _take(tokens: Iterator[str], count: int, what: str, offset: int) -> List[int]:
    values: List[int] = []
    for i in range(count):
        tok = next(tokens, None)
        if tok is None:
            raise GraphFormatError(f"input ended early while reading {what}")
        values.append(_parse_uint(tok, offset + i))
    return values


def parse_network(text: str) -> RoadNetwork:
    """Build a road network from the textual ``n m a1 b1 ...`` form.

    Tokens past the last road are ignored.

    Args:
        text: Input text.

    Returns:
        The populated road network.

    Raises:
        GraphFormatError: On a non-integer token or a truncated stream.
        InputError: If a road names a crossroad outside ``[1, n]``.
        CapacityError: If a crossroad would get a fifth road.
    """
    tokens = iter(text.split())
    n, m = _take(tokens, 2, "header", 0)
    g = RoadNetwork(n)
    for i in range(m):
        a, b = _take(tokens, 2, f"road {i + 1} of {m}", 2 + 2 * i)
        g.add_road(a, b)
    return g


def read_network(path: PathLike = DEFAULT_INPUT) -> RoadNetwork:
    """Read a road network from ``path``.

    Raises:
        MissingInputError: If ``path`` does not exist.
        GraphFormatError: If the file is not valid UTF-8 text.
    """
    p = Path(path)
    if not p.is_file():
        raise MissingInputError(f"input file not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"{p} is not UTF-8 text: {exc.reason} at byte {exc.start}") from exc
    return parse_network(text)


def format_network(G: RoadNetwork) -> str:
    """Return ``G`` in the textual input format."""
    lines = [f"{G.n} {G.m}"]
    lines.extend(f"{a} {b}" for a, b in G.roads)
    return "\n".join(lines) + "\n"


def write_network(G: RoadNetwork, path: PathLike) -> None:
    """Write ``G`` to ``path`` so that :func:`read_network` rebuilds it."""
    Path(path).write_text(format_network(G), encoding="utf-8")


__all__ = ["DEFAULT_INPUT", "UINT_MAX", "parse_network", "read_network", "format_network", "write_network"]
