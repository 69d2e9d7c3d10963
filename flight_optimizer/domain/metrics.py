"""
Derived trip metrics
====================

Formula
-------
Time = Distance / Cruise_Speed          (hours)
Cost = Distance x Cost_Per_KM           (USD)

The defaults model an average commercial cruise speed and a flat
per-km fare.  Both are overridable so deployments can re-price routes
without touching the search code.

Complexity: O(1) per call.
"""

from __future__ import annotations

CRUISE_SPEED_KMH = 850.0
COST_PER_KM = 0.12


class MetricCalculator:
    def __init__(
        self,
        cruise_speed_kmh: float = CRUISE_SPEED_KMH,
        cost_per_km: float = COST_PER_KM,
    ):
        self.cruise_speed_kmh = cruise_speed_kmh
        self.cost_per_km = cost_per_km

    def flight_time(self, distance_km: float) -> float:
        return distance_km / self.cruise_speed_kmh

    def cost(self, distance_km: float) -> float:
        return distance_km * self.cost_per_km

    def derive(self, distance_km: float) -> tuple[float, float]:
        """Return ``(hours, cost)`` for a trip of *distance_km*."""
        return self.flight_time(distance_km), self.cost(distance_km)
