"""Utilities for reconstructing routes from predecessor arrays."""

from __future__ import annotations

from typing import List, Optional, Set

Vertex = int


def reconstruct_path(
    predecessors: List[Optional[Vertex]],
    source: Vertex,
    target: Vertex,
) -> List[Vertex]:
    """Return the crossroads from ``source`` to ``target`` using a predecessor array.

    Args:
        predecessors: Predecessor of each crossroad or ``None`` if unknown or
            unreached. Index 0 is unused.
        source: Source crossroad.
        target: Target crossroad.

    Returns:
        Crossroads from source to target (inclusive). Returns an empty list if
        no chain of predecessors joins them.

    Raises:
        ValueError: If ``source`` or ``target`` is outside ``[1, n]``.
    """
    last = len(predecessors) - 1
    if not (1 <= source <= last and 1 <= target <= last):
        raise ValueError("source/target out of range.")
    if source == target:
        return [source]

    chain: List[Vertex] = []
    cur: Optional[Vertex] = target
    seen: Set[Vertex] = set()
    while cur is not None:
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        if cur in seen:
            break
        seen.add(cur)
        cur = predecessors[cur]

    return []
