"""Domain enumerations."""

import enum


class Algorithm(str, enum.Enum):
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    COMPARE = "compare"


# Display names reported in results
ALGORITHM_NAMES: dict[Algorithm, str] = {
    Algorithm.DIJKSTRA: "Dijkstra",
    Algorithm.ASTAR: "A*",
}


class FailureReason(str, enum.Enum):
    UNKNOWN_LOCATION = "UNKNOWN_LOCATION"
    UNREACHABLE = "UNREACHABLE"


class RequestErrorCode(str, enum.Enum):
    INVALID_ALGORITHM = "invalid_algorithm"
    MALFORMED_REQUEST = "malformed_request"
