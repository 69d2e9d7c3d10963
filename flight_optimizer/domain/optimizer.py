"""
Route optimizer facade
======================

The single entry point used by the API layer.  Owns the immutable graph,
coordinate store and heuristic built from one ``NetworkConfig``.

Every public operation returns a value: a ``SearchResult`` /
``ComparisonResult`` for a query that ran (successful or not), or a
``RequestError`` for a query that was rejected before dispatch.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .comparison import compare
from .coordinates import CoordinateStore
from .entities import ComparisonResult, NetworkConfig, RequestError, SearchResult
from .enums import Algorithm, RequestErrorCode
from .graph import FlightGraph
from .heuristics import GreatCircleHeuristic
from .metrics import MetricCalculator
from .search import a_star, dijkstra

logger = logging.getLogger(__name__)

SEARCH_ALGORITHMS = (Algorithm.DIJKSTRA, Algorithm.ASTAR)


class RouteOptimizer:
    def __init__(
        self,
        network: NetworkConfig,
        metrics: Optional[MetricCalculator] = None,
    ):
        self.graph = FlightGraph(network.routes)
        self.coordinates = CoordinateStore(network.coordinates)
        self.heuristic = GreatCircleHeuristic(self.coordinates)
        self.metrics = metrics or MetricCalculator()

        missing = [c for c in self.graph.all_locations() if c not in self.coordinates]
        if missing:
            logger.warning("Locations without coordinates: %s", ", ".join(missing))

    def list_locations(self) -> list[str]:
        return self.graph.all_locations()

    def find_path(
        self, origin: str, destination: str, algorithm: str
    ) -> Union[SearchResult, RequestError]:
        error = _check_endpoints(origin, destination)
        if error:
            return error
        if not algorithm:
            return RequestError(
                code=RequestErrorCode.MALFORMED_REQUEST,
                message="Missing required field: algorithm",
            )

        selected = _parse_algorithm(algorithm)
        if selected is None or selected not in SEARCH_ALGORITHMS:
            return _invalid_algorithm(algorithm)

        if selected is Algorithm.DIJKSTRA:
            return dijkstra(self.graph, origin, destination, self.metrics)
        return a_star(self.graph, origin, destination, self.heuristic, self.metrics)

    def compare(
        self, origin: str, destination: str
    ) -> Union[ComparisonResult, RequestError]:
        error = _check_endpoints(origin, destination)
        if error:
            return error
        return compare(self.graph, origin, destination, self.heuristic, self.metrics)

    def optimize(
        self, origin: str, destination: str, algorithm: str
    ) -> Union[SearchResult, ComparisonResult, RequestError]:
        """Dispatch on the selector: ``dijkstra``, ``astar`` or ``compare``."""
        if _parse_algorithm(algorithm) is Algorithm.COMPARE:
            return self.compare(origin, destination)
        return self.find_path(origin, destination, algorithm)


def _parse_algorithm(algorithm: str) -> Optional[Algorithm]:
    try:
        return Algorithm(algorithm)
    except ValueError:
        return None


def _invalid_algorithm(algorithm: str) -> RequestError:
    logger.warning("Rejected unknown algorithm selector %r", algorithm)
    return RequestError(
        code=RequestErrorCode.INVALID_ALGORITHM, message="Invalid algorithm"
    )


def _check_endpoints(origin: str, destination: str) -> Optional[RequestError]:
    for field_name, value in (("origin", origin), ("destination", destination)):
        if not value:
            return RequestError(
                code=RequestErrorCode.MALFORMED_REQUEST,
                message=f"Missing required field: {field_name}",
            )
    return None
