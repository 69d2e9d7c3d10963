"""
Algorithm comparison
====================

Runs Dijkstra then A* on the same query, each timed on its own, and
derives a differential record when both reach the destination:

* distance / time / cost deltas (absolute; time to 0.1 h, cost to 1 USD)
* nodes-explored and execution-time deltas (signed, Dijkstra - A*)
* ``nodes_explored_ratio`` -- A* pops as a percentage of Dijkstra's
* ``time_efficiency``      -- Dijkstra ms / A* ms ("times faster")

If either search fails the record is omitted, never zero-filled.
"""

from __future__ import annotations

import logging
from typing import Optional

from .entities import ComparisonMetrics, ComparisonResult, SearchResult
from .graph import FlightGraph
from .metrics import MetricCalculator
from .search import Heuristic, a_star, dijkstra

logger = logging.getLogger(__name__)


def compare(
    graph: FlightGraph,
    origin: str,
    destination: str,
    heuristic: Heuristic,
    metrics: Optional[MetricCalculator] = None,
) -> ComparisonResult:
    dijkstra_result = dijkstra(graph, origin, destination, metrics)
    astar_result = a_star(graph, origin, destination, heuristic, metrics)

    if not (dijkstra_result.success and astar_result.success):
        logger.debug(
            "Comparison %s -> %s skipped metrics (dijkstra=%s, astar=%s)",
            origin, destination, dijkstra_result.success, astar_result.success,
        )
        return ComparisonResult(dijkstra=dijkstra_result, astar=astar_result)

    return ComparisonResult(
        dijkstra=dijkstra_result,
        astar=astar_result,
        metrics=differential_metrics(dijkstra_result, astar_result),
    )


def differential_metrics(
    dijkstra_result: SearchResult, astar_result: SearchResult
) -> ComparisonMetrics:
    """Differential record for two successful searches."""
    d, a = dijkstra_result, astar_result

    time_efficiency: Optional[float] = None
    if a.execution_time_ms > 0:
        time_efficiency = round(d.execution_time_ms / a.execution_time_ms, 2)

    return ComparisonMetrics(
        distance_difference=round(abs(d.distance - a.distance)),
        time_difference=round(abs(d.time - a.time), 1),
        cost_difference=round(abs(d.cost - a.cost)),
        nodes_explored_difference=d.nodes_explored - a.nodes_explored,
        execution_time_difference=round(
            d.execution_time_ms - a.execution_time_ms, 2
        ),
        nodes_explored_ratio=round(a.nodes_explored / d.nodes_explored * 100),
        time_efficiency=time_efficiency,
    )
