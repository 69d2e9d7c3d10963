"""A* heuristic: straight-line ("as the crow flies") distance to the goal."""

from __future__ import annotations

import math

from .coordinates import CoordinateStore
from .distance import great_circle_km


class GreatCircleHeuristic:
    """
    Estimate remaining distance as the Haversine distance between two
    locations.

    A location without a coordinate estimates to ``math.inf``.  A* reads
    that as "no estimate" and searches the node unguided, so the route
    stays optimal and only the guidance is lost.
    """

    def __init__(self, coordinates: CoordinateStore):
        self.coordinates = coordinates

    def estimate(self, origin: str, destination: str) -> float:
        a = self.coordinates.lookup(origin)
        b = self.coordinates.lookup(destination)
        if a is None or b is None:
            return math.inf
        return great_circle_km(a, b)

    __call__ = estimate
