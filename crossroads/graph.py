"""Road network with a fixed four-slot adjacency per crossroad."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

import networkx as nx
import numpy as np
import numpy.typing as npt

from .exceptions import CapacityError, InputError

Vertex = int
Road = Tuple[Vertex, Vertex]

#: Roads a single crossroad can hold.
SLOTS = 4
#: Marker for an unused slot; crossroad ids start at 1.
EMPTY = 0


@dataclass
class RoadNetwork:
    """Undirected road network indexed from one.

    Each crossroad owns a row of :data:`SLOTS` neighbour ids in ``slots``.
    Row 0 is never used, and :data:`EMPTY` marks a free slot. Rows are
    left-packed: a new road always lands in the first free slot.

    Attributes:
        n: Number of crossroads, identified by ``1`` .. ``n``.
        slots: ``(n + 1, SLOTS)`` array of neighbour ids.
        roads: Roads in insertion order.
    """

    n: int

    def __post_init__(self) -> None:
        """Validate the crossroad count and allocate slot storage."""
        if not isinstance(self.n, int) or self.n < 0:
            raise InputError("RoadNetwork.n must be a non-negative integer.")
        self.slots: npt.NDArray[np.uint32] = np.zeros((self.n + 1, SLOTS), dtype=np.uint32)
        self.roads: List[Road] = []

    def __contains__(self, u: object) -> bool:
        return isinstance(u, int) and 1 <= u <= self.n

    def add_road(self, a: Vertex, b: Vertex) -> None:
        """Connect crossroads ``a`` and ``b`` in both directions.

        Args:
            a: First crossroad.
            b: Second crossroad.

        Raises:
            InputError: If ``a`` or ``b`` is not in ``[1, n]``.
            CapacityError: If either crossroad has no free slot left. Nothing
                is inserted in that case.

        Examples:
            ```python
            >>> g = RoadNetwork(2)
            >>> g.add_road(1, 2)
            >>> g.neighbors(1), g.neighbors(2)
            ([2], [1])
            ```
        """
        if a not in self or b not in self:
            raise InputError(f"road ({a}, {b}) must join crossroads in [1, {self.n}]")
        needed = 2 if a == b else 1
        for u in {a, b}:
            if self.free_slots(u) < needed:
                raise CapacityError(
                    f"crossroad {u} already has {self.degree(u)} roads; "
                    f"cannot add road ({a}, {b})"
                )
        self._put(a, b)
        self._put(b, a)
        self.roads.append((a, b))

    def _put(self, u: Vertex, v: Vertex) -> None:
        free = np.flatnonzero(self.slots[u] == EMPTY)
        self.slots[u, free[0]] = v

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Road]) -> "RoadNetwork":
        """Create a network from an iterable of ``(a, b)`` roads.

        Args:
            n: Number of crossroads.
            edges: Roads to insert, in order.

        Returns:
            A network populated with the provided roads.
        """
        g = cls(int(n))
        for a, b in edges:
            g.add_road(int(a), int(b))
        return g

    def neighbors(self, u: Vertex) -> List[Vertex]:
        """Return the neighbours of ``u`` in slot order."""
        out: List[Vertex] = []
        for v in self.slots[u]:
            if v == EMPTY:
                break
            out.append(int(v))
        return out

    def degree(self, u: Vertex) -> int:
        return int(np.count_nonzero(self.slots[u]))

    def free_slots(self, u: Vertex) -> int:
        return SLOTS - self.degree(u)

    @property
    def m(self) -> int:
        return len(self.roads)

    def to_networkx(self) -> nx.MultiGraph:
        """Return the network as a :class:`networkx.MultiGraph` on ``1`` .. ``n``."""
        G = nx.MultiGraph()
        G.add_nodes_from(range(1, self.n + 1))
        G.add_edges_from(self.roads)
        return G


__all__ = ["RoadNetwork", "Road", "Vertex", "SLOTS", "EMPTY"]
