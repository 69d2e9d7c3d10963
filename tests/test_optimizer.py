"""Unit tests for the RouteOptimizer facade (list / find / compare)."""

import pytest

from flight_optimizer.domain.coordinates import Coordinate
from flight_optimizer.domain.entities import (
    ComparisonResult,
    NetworkConfig,
    RequestError,
    SearchResult,
)
from flight_optimizer.domain.enums import FailureReason, RequestErrorCode
from flight_optimizer.domain.metrics import MetricCalculator
from flight_optimizer.domain.optimizer import RouteOptimizer


class TestListLocations:
    def test_sorted(self, optimizer):
        cities = optimizer.list_locations()
        assert cities == sorted(cities)
        assert cities[0] == "Chicago"
        assert "Hong Kong" in cities


class TestFindPath:
    def test_dijkstra_fixture(self, optimizer):
        result = optimizer.find_path("New York", "London", "dijkstra")
        assert isinstance(result, SearchResult)
        assert result.path == ["New York", "London"]
        assert result.distance == 5567.0

    def test_astar_fixture(self, optimizer):
        result = optimizer.find_path("New York", "Sydney", "astar")
        assert result.success
        assert len(result.path) > 2
        assert result.distance == optimizer.find_path(
            "New York", "Sydney", "dijkstra"
        ).distance

    def test_unknown_location_is_a_failed_search(self, optimizer):
        result = optimizer.find_path("Nowhere", "Tokyo", "dijkstra")
        assert isinstance(result, SearchResult)
        assert not result.success
        assert result.path == []
        assert result.failure is FailureReason.UNKNOWN_LOCATION

    @pytest.mark.parametrize("algorithm", ["bfs", "compare", "DIJKSTRA"])
    def test_invalid_algorithm(self, optimizer, algorithm):
        result = optimizer.find_path("New York", "London", algorithm)
        assert isinstance(result, RequestError)
        assert result.code is RequestErrorCode.INVALID_ALGORITHM
        assert result.message == "Invalid algorithm"
        assert result.success is False

    @pytest.mark.parametrize(
        "origin,destination,algorithm",
        [("", "London", "astar"), ("New York", "", "astar"), ("New York", "London", "")],
    )
    def test_missing_field(self, optimizer, origin, destination, algorithm):
        result = optimizer.find_path(origin, destination, algorithm)
        assert isinstance(result, RequestError)
        assert result.code is RequestErrorCode.MALFORMED_REQUEST


class TestCompare:
    def test_compare(self, optimizer):
        result = optimizer.compare("Paris", "Frankfurt")
        assert isinstance(result, ComparisonResult)
        assert result.both_successful
        assert result.dijkstra.path == ["Paris", "London", "Frankfurt"]

    def test_optimize_dispatches_compare(self, optimizer):
        assert isinstance(
            optimizer.optimize("Paris", "Rome", "compare"), ComparisonResult
        )

    def test_optimize_dispatches_search(self, optimizer):
        result = optimizer.optimize("Paris", "Rome", "astar")
        assert isinstance(result, SearchResult)
        assert result.algorithm == "A*"

    def test_missing_origin(self, optimizer):
        assert isinstance(optimizer.compare("", "Rome"), RequestError)


class TestCustomNetwork:
    def test_overridden_metrics(self):
        network = NetworkConfig(
            routes={"X": {"Y": 1000}, "Y": {"X": 1000}},
            coordinates={"X": Coordinate(0.0, 0.0), "Y": Coordinate(0.0, 1.0)},
        )
        optimizer = RouteOptimizer(network, MetricCalculator(500.0, 1.0))
        result = optimizer.find_path("X", "Y", "dijkstra")
        assert (result.time, result.cost) == (2.0, 1000.0)

    def test_city_without_coordinate_is_still_routed_through(self):
        network = NetworkConfig(
            routes={"X": {"Z": 100}, "Z": {"Y": 100}},
            coordinates={"X": Coordinate(0.0, 0.0), "Y": Coordinate(0.0, 1.0)},
        )
        optimizer = RouteOptimizer(network)
        result = optimizer.find_path("X", "Y", "astar")
        assert result.success
        assert result.path == ["X", "Z", "Y"]
        assert result.distance == 200.0

    def test_destination_without_coordinate_matches_dijkstra(self):
        network = NetworkConfig(
            routes={"A": {"B": 10, "Y": 1}, "Y": {"B": 1}},
            coordinates={"A": Coordinate(0.0, 0.0), "Y": Coordinate(0.0, 0.001)},
        )
        optimizer = RouteOptimizer(network)
        astar_result = optimizer.find_path("A", "B", "astar")
        dijkstra_result = optimizer.find_path("A", "B", "dijkstra")
        assert astar_result.path == dijkstra_result.path == ["A", "Y", "B"]
        assert astar_result.distance == dijkstra_result.distance == 2.0

    def test_shorter_route_through_city_without_coordinate(self):
        network = NetworkConfig(
            routes={"X": {"Y": 300, "Z": 100}, "Z": {"Y": 100}},
            coordinates={"X": Coordinate(0.0, 0.0), "Y": Coordinate(0.0, 1.0)},
        )
        result = RouteOptimizer(network).find_path("X", "Y", "astar")
        assert result.path == ["X", "Z", "Y"]
        assert result.distance == 200.0
