"""Random road networks that respect the four-road limit per crossroad.

Roads are undirected, without self-loops or duplicates. With
``ensure_connected=True`` a backbone chain ``1-2-...-n`` is laid first so
every crossroad is reachable from every other one; the remaining roads are
sampled uniformly among crossroads that still have a free slot.
"""

from __future__ import annotations

import random
from typing import List, Optional, Set, Tuple

from .exceptions import InputError
from .graph import SLOTS, Road, RoadNetwork

#: Sampling attempts allowed per requested road before giving up.
ATTEMPTS_PER_ROAD = 50


def max_roads(n: int) -> int:
    """Return the largest road count a simple network on ``n`` crossroads can hold."""
    return min(SLOTS * n // 2, n * (n - 1) // 2)


def random_road_network(
    n: int,
    m: int,
    *,
    seed: Optional[int] = 0,
    ensure_connected: bool = False,
) -> RoadNetwork:
    """Generate a random road network.

    Args:
        n: Number of crossroads.
        m: Number of roads.
        seed: Seed for :class:`random.Random`; equal seeds give equal networks.
        ensure_connected: Lay the ``i - (i+1)`` backbone before sampling.

    Returns:
        A network with exactly ``m`` roads.

    Raises:
        InputError: If ``m`` roads cannot fit, or sampling runs out of attempts.
    """
    if n < 0 or m < 0:
        raise InputError("n and m must be >= 0.")
    if m > max_roads(n):
        raise InputError(f"{m} roads cannot fit on {n} crossroads with at most {SLOTS} roads each")
    if ensure_connected and n >= 2 and m < n - 1:
        raise InputError(f"a connected network on {n} crossroads needs at least {n - 1} roads")

    rng = random.Random(seed)
    g = RoadNetwork(n)
    seen: Set[Tuple[int, int]] = set()

    def add(a: int, b: int) -> bool:
        key = (min(a, b), max(a, b))
        if a == b or key in seen:
            return False
        if g.free_slots(a) == 0 or g.free_slots(b) == 0:
            return False
        seen.add(key)
        g.add_road(a, b)
        return True

    if ensure_connected:
        for i in range(1, n):
            add(i, i + 1)

    attempts = ATTEMPTS_PER_ROAD * max(1, m)
    while g.m < m:
        if attempts == 0:
            raise InputError(f"could not place {m} roads on {n} crossroads (seed={seed})")
        attempts -= 1
        open_: List[int] = [u for u in range(1, n + 1) if g.free_slots(u) > 0]
        if len(open_) < 2:
            raise InputError(f"could not place {m} roads on {n} crossroads (seed={seed})")
        a, b = rng.sample(open_, 2)
        add(a, b)
    return g


def shuffled_roads(g: RoadNetwork, seed: Optional[int] = 0) -> List[Road]:
    """Return the roads of ``g`` in a random order.

    Relabelling the insertion order changes slot order and therefore what a
    single relaxation sweep discovers.
    """
    roads = list(g.roads)
    random.Random(seed).shuffle(roads)
    return roads


__all__ = ["random_road_network", "shuffled_roads", "max_roads", "ATTEMPTS_PER_ROAD"]
