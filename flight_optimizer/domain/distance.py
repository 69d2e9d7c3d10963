"""
Great-circle ("as the crow flies") distance on a spherical Earth.

Used as the A* estimate of remaining flight distance.  Real flight legs
follow the great circle closely, so the estimate sits at or just below
the leg distances of the network.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math

from .coordinates import Coordinate

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Return the great-circle distance in **km** between two lat/lng points."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    half_dphi = math.radians(lat2 - lat1) / 2
    half_dlambda = math.radians(lng2 - lng1) / 2

    h = math.sin(half_dphi) ** 2 + (
        math.cos(phi1) * math.cos(phi2) * math.sin(half_dlambda) ** 2
    )
    h = min(1.0, max(0.0, h))  # rounding can push h past 1 near antipodes
    return 2 * radius_km * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def great_circle_km(
    a: Coordinate, b: Coordinate, radius_km: float = EARTH_RADIUS_KM
) -> float:
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude, radius_km)
