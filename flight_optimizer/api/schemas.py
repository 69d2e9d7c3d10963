"""
Pydantic request / response schemas for the REST API.

Responses use camelCase keys and the presentation rules of the public
API: distance in whole km, time to 0.1 h (``"6.5 hours"``), cost in
whole dollars (``"$668"``), execution time in ms with 3 decimals.
An infinite (unreachable) value is rendered as ``null``.
"""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel

from flight_optimizer.domain.entities import (
    ComparisonMetrics,
    ComparisonResult,
    RequestError,
    SearchResult,
)
from flight_optimizer.domain.enums import ALGORITHM_NAMES, Algorithm

CHARACTERISTICS = {
    ALGORITHM_NAMES[Algorithm.DIJKSTRA]: (
        "Explores all possible paths equally, guaranteed shortest path"
    ),
    ALGORITHM_NAMES[Algorithm.ASTAR]: (
        "Uses heuristic to guide search, more efficient for large networks"
    ),
}


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SparseCamelModel(CamelModel):
    """Drops ``None`` fields: comparison data is absent, not null, when missing."""

    @model_serializer(mode="wrap")
    def omit_missing(self, handler):
        return {k: v for k, v in handler(self).items() if v is not None}


# ── Formatting ────────────────────────────────────────────────────────


def format_distance(km: float) -> Optional[int]:
    return round(km) if math.isfinite(km) else None


def format_hours(hours: float) -> Optional[str]:
    return f"{round(hours, 1):.1f} hours" if math.isfinite(hours) else None


def format_cost(cost: float) -> Optional[str]:
    return f"${round(cost)}" if math.isfinite(cost) else None


def format_ms(ms: float, digits: int = 3) -> str:
    return f"{ms:.{digits}f} ms"


# ── Requests ──────────────────────────────────────────────────────────


class OptimizeRequest(BaseModel):
    origin: str
    destination: str
    algorithm: str


# ── Responses ─────────────────────────────────────────────────────────


class CitiesResponse(BaseModel):
    cities: list[str]


class SearchResultResponse(CamelModel):
    algorithm: str
    path: list[str]
    distance: Optional[int] = None
    time: Optional[str] = None
    cost: Optional[str] = None
    nodes_explored: int
    execution_time: str
    success: bool

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResultResponse":
        return cls(
            algorithm=result.algorithm,
            path=list(result.path),
            distance=format_distance(result.distance),
            time=format_hours(result.time),
            cost=format_cost(result.cost),
            nodes_explored=result.nodes_explored,
            execution_time=format_ms(result.execution_time_ms),
            success=result.success,
        )


class EfficiencyResponse(SparseCamelModel):
    nodes_explored_ratio: str
    time_efficiency: Optional[str] = None


class ComparisonSummary(SparseCamelModel):
    both_successful: bool
    distance_difference: Optional[int] = None
    time_difference: Optional[str] = None
    cost_difference: Optional[str] = None
    nodes_explored_difference: Optional[int] = None
    execution_time_difference: Optional[str] = None
    efficiency: Optional[EfficiencyResponse] = None
    characteristics: Optional[dict[str, str]] = None

    @classmethod
    def from_metrics(cls, metrics: Optional[ComparisonMetrics]) -> "ComparisonSummary":
        if metrics is None:
            return cls(both_successful=False)
        time_efficiency = None
        if metrics.time_efficiency is not None:
            time_efficiency = f"{metrics.time_efficiency:.2f}x faster"
        return cls(
            both_successful=True,
            distance_difference=round(metrics.distance_difference),
            time_difference=format_hours(metrics.time_difference),
            cost_difference=format_cost(metrics.cost_difference),
            nodes_explored_difference=metrics.nodes_explored_difference,
            execution_time_difference=format_ms(metrics.execution_time_difference, 2),
            efficiency=EfficiencyResponse(
                nodes_explored_ratio=f"{round(metrics.nodes_explored_ratio)}%",
                time_efficiency=time_efficiency,
            ),
            characteristics=dict(CHARACTERISTICS),
        )


class ComparisonResponse(CamelModel):
    dijkstra: SearchResultResponse
    a_star: SearchResultResponse
    comparison: ComparisonSummary

    @classmethod
    def from_result(cls, result: ComparisonResult) -> "ComparisonResponse":
        return cls(
            dijkstra=SearchResultResponse.from_result(result.dijkstra),
            a_star=SearchResultResponse.from_result(result.astar),
            comparison=ComparisonSummary.from_metrics(result.metrics),
        )


class ErrorResponse(BaseModel):
    success: bool = False
    error: str

    @classmethod
    def from_error(cls, error: RequestError) -> "ErrorResponse":
        return cls(error=error.message)


class HealthResponse(BaseModel):
    status: str = "healthy"
    message: str = "Flight Route Optimizer API is running"
