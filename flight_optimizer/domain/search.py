"""
Shortest-path searches
======================

Both searches share one frontier / relaxation loop over a binary heap
(``heapq``) of ``(priority, location)`` entries:

* **Dijkstra** -- priority is the distance travelled so far, ``g``.
* **A\\***     -- priority is ``f = g + h``, where ``h`` is the great-circle
  distance to the destination.  A node with no usable estimate (``inf``)
  gets ``h = 0``: it loses guidance but never hides a shorter route.

Lazy deletion
-------------
Relaxing a node pushes a new entry instead of decreasing the old one.
When an entry is popped whose priority is worse than the best recorded
for that node it is stale and skipped.  No separate "visited" set exists.

``nodes_explored`` counts *every* pop, stale ones included; it is the
work metric reported to callers.

Failure values
--------------
Dijkstra reports an unreachable destination with ``distance = inf``;
A* reports ``distance = time = cost = 0``.

Complexity: O((V + E) log E) per search.
"""

from __future__ import annotations

import heapq
import logging
import math
import time
from typing import Callable, Optional

from .entities import SearchResult
from .enums import ALGORITHM_NAMES, Algorithm, FailureReason
from .graph import FlightGraph
from .metrics import MetricCalculator

logger = logging.getLogger(__name__)

Heuristic = Callable[[str, str], float]


# ── Public API ────────────────────────────────────────────────────────


def dijkstra(
    graph: FlightGraph,
    origin: str,
    destination: str,
    metrics: Optional[MetricCalculator] = None,
) -> SearchResult:
    """Uniform-cost search from *origin* to *destination*."""
    metrics = metrics or MetricCalculator()
    name = ALGORITHM_NAMES[Algorithm.DIJKSTRA]
    started = time.perf_counter()

    if origin not in graph or destination not in graph:
        return _failure(name, FailureReason.UNKNOWN_LOCATION, 0, started, math.inf)

    distances: dict[str, float] = {origin: 0.0}
    previous: dict[str, str] = {}
    frontier: list[tuple[float, str]] = [(0.0, origin)]
    nodes_explored = 0

    while frontier:
        current_dist, current = heapq.heappop(frontier)
        nodes_explored += 1

        if current == destination:
            break
        if current_dist > distances.get(current, math.inf):
            continue  # stale

        for neighbor, weight in graph.neighbors(current):
            new_dist = distances[current] + weight
            if new_dist < distances.get(neighbor, math.inf):
                distances[neighbor] = new_dist
                previous[neighbor] = current
                heapq.heappush(frontier, (new_dist, neighbor))

    elapsed_ms = _elapsed_ms(started)
    distance = distances.get(destination, math.inf)
    path = reconstruct_path(previous, origin, destination) if distance != math.inf else []

    logger.debug(
        "%s %s -> %s: distance=%s nodes_explored=%d",
        name, origin, destination, distance, nodes_explored,
    )
    if not path:
        return SearchResult(
            algorithm=name,
            nodes_explored=nodes_explored,
            execution_time_ms=elapsed_ms,
            failure=FailureReason.UNREACHABLE,
        )

    hours, cost = metrics.derive(distance)
    return SearchResult(
        algorithm=name,
        path=path,
        distance=distance,
        time=hours,
        cost=cost,
        nodes_explored=nodes_explored,
        execution_time_ms=elapsed_ms,
        success=True,
    )


def a_star(
    graph: FlightGraph,
    origin: str,
    destination: str,
    heuristic: Heuristic,
    metrics: Optional[MetricCalculator] = None,
) -> SearchResult:
    """Heuristic search ordered by ``g + heuristic(node, destination)``."""
    metrics = metrics or MetricCalculator()
    name = ALGORITHM_NAMES[Algorithm.ASTAR]
    started = time.perf_counter()

    if origin not in graph or destination not in graph:
        return _failure(name, FailureReason.UNKNOWN_LOCATION, 0, started, 0.0)

    def estimate(node: str) -> float:
        # inf means "no coordinate": search that node unguided (h = 0)
        h = heuristic(node, destination)
        return h if math.isfinite(h) else 0.0

    g_score: dict[str, float] = {origin: 0.0}
    f_score: dict[str, float] = {origin: estimate(origin)}
    previous: dict[str, str] = {}
    open_set: list[tuple[float, str]] = [(f_score[origin], origin)]
    nodes_explored = 0

    while open_set:
        current_f, current = heapq.heappop(open_set)
        nodes_explored += 1

        if current == destination:
            elapsed_ms = _elapsed_ms(started)
            path = reconstruct_path(previous, origin, destination)
            if not path:
                break
            distance = g_score[destination]
            hours, cost = metrics.derive(distance)
            logger.debug(
                "%s %s -> %s: distance=%s nodes_explored=%d",
                name, origin, destination, distance, nodes_explored,
            )
            return SearchResult(
                algorithm=name,
                path=path,
                distance=distance,
                time=hours,
                cost=cost,
                nodes_explored=nodes_explored,
                execution_time_ms=elapsed_ms,
                success=True,
            )
        if current_f > f_score.get(current, math.inf):
            continue  # stale

        for neighbor, weight in graph.neighbors(current):
            tentative = g_score[current] + weight
            if tentative < g_score.get(neighbor, math.inf):
                previous[neighbor] = current
                g_score[neighbor] = tentative
                f_score[neighbor] = tentative + estimate(neighbor)
                heapq.heappush(open_set, (f_score[neighbor], neighbor))

    logger.debug(
        "%s %s -> %s: unreachable after %d pops",
        name, origin, destination, nodes_explored,
    )
    return _failure(name, FailureReason.UNREACHABLE, nodes_explored, started, 0.0)


def reconstruct_path(
    previous: dict[str, str], origin: str, destination: str
) -> list[str]:
    """
    Walk predecessor links back from *destination* and reverse.

    Returns ``[]`` when the chain does not end at *origin*.
    """
    path = [destination]
    current = destination
    while current in previous:
        current = previous[current]
        path.append(current)
    path.reverse()
    if path[0] != origin:
        return []
    return path


# ── Internals ─────────────────────────────────────────────────────────


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


def _failure(
    name: str,
    reason: FailureReason,
    nodes_explored: int,
    started: float,
    sentinel: float,
) -> SearchResult:
    return SearchResult(
        algorithm=name,
        distance=sentinel,
        time=sentinel,
        cost=sentinel,
        nodes_explored=nodes_explored,
        execution_time_ms=_elapsed_ms(started),
        failure=reason,
    )
