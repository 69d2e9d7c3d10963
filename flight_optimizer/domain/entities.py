"""
Domain value objects.

- ``NetworkConfig`` is the immutable dataset every query shares.
- ``SearchResult`` / ``ComparisonResult`` are created fresh per query and
  never cached.
- ``RequestError`` is returned (not raised) for bad input so callers can
  tell a rejected request apart from a search that found nothing.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .coordinates import Coordinate
from .enums import FailureReason, RequestErrorCode


class NetworkConfigError(Exception):
    """Raised when the route network dataset is malformed."""


# ── Configuration ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class NetworkConfig:
    routes: Mapping[str, Mapping[str, float]]
    coordinates: Mapping[str, Coordinate]


# ── Results ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SearchResult:
    algorithm: str
    path: list[str] = field(default_factory=list)
    distance: float = math.inf
    time: float = math.inf
    cost: float = math.inf
    nodes_explored: int = 0
    execution_time_ms: float = 0.0
    success: bool = False
    failure: Optional[FailureReason] = None


@dataclass(frozen=True)
class ComparisonMetrics:
    distance_difference: float
    time_difference: float
    cost_difference: float
    nodes_explored_difference: int
    execution_time_difference: float
    nodes_explored_ratio: float  # A* nodes as % of Dijkstra's
    time_efficiency: Optional[float]  # Dijkstra ms / A* ms


@dataclass(frozen=True)
class ComparisonResult:
    dijkstra: SearchResult
    astar: SearchResult
    metrics: Optional[ComparisonMetrics] = None

    @property
    def both_successful(self) -> bool:
        return self.dijkstra.success and self.astar.success


@dataclass(frozen=True)
class RequestError:
    code: RequestErrorCode
    message: str
    success: bool = False
