"""
Weighted directed flight network.

Edges are stored as an adjacency mapping ``from -> {to: km}``.  A leg
``a -> b`` and its return ``b -> a`` are independent entries.  The graph
is frozen once built, so any number of concurrent searches may read it
without locking.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from .entities import NetworkConfigError


class FlightGraph:
    def __init__(self, routes: Mapping[str, Mapping[str, float]]):
        adjacency: dict[str, Mapping[str, float]] = {}
        locations: set[str] = set()
        for origin, legs in routes.items():
            checked: dict[str, float] = {}
            for destination, weight in legs.items():
                if origin == destination:
                    raise NetworkConfigError(f"Self-loop on {origin!r}")
                weight = float(weight)
                if not (weight > 0 and math.isfinite(weight)):
                    raise NetworkConfigError(
                        f"Leg {origin!r} -> {destination!r} has invalid "
                        f"distance {weight!r}"
                    )
                checked[destination] = weight
                locations.add(destination)
            adjacency[origin] = MappingProxyType(checked)
            locations.add(origin)

        self._adjacency = MappingProxyType(adjacency)
        self._locations = frozenset(locations)

    def neighbors(self, location: str) -> Sequence[tuple[str, float]]:
        """Outgoing legs of *location*; empty for unknown locations."""
        legs = self._adjacency.get(location)
        if legs is None:
            return ()
        return tuple(legs.items())

    def all_locations(self) -> list[str]:
        """Every location, sorted for deterministic enumeration."""
        return sorted(self._locations)

    def edge_weight(self, origin: str, destination: str) -> Optional[float]:
        legs = self._adjacency.get(origin)
        if legs is None:
            return None
        return legs.get(destination)

    def path_distance(self, path: Sequence[str]) -> Optional[float]:
        """Sum of leg distances along *path*, or ``None`` if a leg is missing."""
        total = 0.0
        for a, b in zip(path, path[1:]):
            weight = self.edge_weight(a, b)
            if weight is None:
                return None
            total += weight
        return total

    def __contains__(self, location: object) -> bool:
        return location in self._locations

    def __len__(self) -> int:
        return len(self._locations)
