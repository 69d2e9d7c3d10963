"""
Bundled flight network.

Leg distances are real flight distances in km; return legs are listed
separately.  Coordinates are city-centre positions in decimal degrees.
"""

ROUTES: dict[str, dict[str, float]] = {
    "New York": {
        "London": 5567,
        "Paris": 5834,
        "Tokyo": 10838,
        "Dubai": 11069,
        "Los Angeles": 3944,
        "Chicago": 1147,
    },
    "London": {
        "New York": 5567,
        "Paris": 344,
        "Dubai": 5492,
        "Singapore": 10876,
        "Frankfurt": 646,
    },
    "Paris": {
        "New York": 5834,
        "London": 344,
        "Dubai": 5232,
        "Tokyo": 9713,
        "Rome": 1106,
    },
    "Tokyo": {
        "New York": 10838,
        "Paris": 9713,
        "Dubai": 7820,
        "Singapore": 5308,
        "Sydney": 7816,
        "Los Angeles": 8807,
        "Seoul": 1157,
    },
    "Dubai": {
        "New York": 11069,
        "London": 5492,
        "Paris": 5232,
        "Tokyo": 7820,
        "Singapore": 5844,
        "Mumbai": 1934,
    },
    "Singapore": {
        "London": 10876,
        "Tokyo": 5308,
        "Dubai": 5844,
        "Sydney": 6302,
        "Hong Kong": 2588,
    },
    "Sydney": {
        "Singapore": 6302,
        "Tokyo": 7816,
        "Los Angeles": 12052,
    },
    "Los Angeles": {
        "New York": 3944,
        "Tokyo": 8807,
        "Sydney": 12052,
        "Chicago": 2806,
    },
    "Chicago": {
        "New York": 1147,
        "Los Angeles": 2806,
    },
    "Frankfurt": {
        "London": 646,
        "Paris": 486,
    },
    "Rome": {
        "Paris": 1106,
    },
    "Seoul": {
        "Tokyo": 1157,
    },
    "Mumbai": {
        "Dubai": 1934,
    },
    "Hong Kong": {
        "Singapore": 2588,
    },
}

COORDINATES: dict[str, tuple[float, float]] = {
    "New York": (40.7128, -74.0060),
    "London": (51.5074, -0.1278),
    "Paris": (48.8566, 2.3522),
    "Tokyo": (35.6762, 139.6503),
    "Dubai": (25.2048, 55.2708),
    "Singapore": (1.3521, 103.8198),
    "Sydney": (-33.8688, 151.2093),
    "Los Angeles": (34.0522, -118.2437),
    "Chicago": (41.8781, -87.6298),
    "Frankfurt": (50.1109, 8.6821),
    "Rome": (41.9028, 12.4964),
    "Seoul": (37.5665, 126.9780),
    "Mumbai": (19.0760, 72.8777),
    "Hong Kong": (22.3193, 114.1694),
}
