"""
Network dataset loading.

Builds the immutable ``NetworkConfig`` once at startup, either from the
bundled dataset or from a JSON file shaped like::

    {
      "routes": {"New York": {"London": 5567, ...}, ...},
      "coordinates": {"New York": [40.7128, -74.0060], ...}
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from flight_optimizer.domain.coordinates import Coordinate
from flight_optimizer.domain.entities import NetworkConfig, NetworkConfigError
from flight_optimizer.infrastructure.dataset import COORDINATES, ROUTES

logger = logging.getLogger(__name__)


def load_network(path: Optional[Union[str, Path]] = None) -> NetworkConfig:
    """Load the network from *path*, or the bundled dataset when ``None``."""
    if path is None:
        network = build_network(ROUTES, COORDINATES)
        source = "bundled dataset"
    else:
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise NetworkConfigError(f"Cannot read network file {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise NetworkConfigError("Network file must contain a JSON object")
        network = build_network(raw.get("routes", {}), raw.get("coordinates", {}))
        source = str(path)

    logger.info(
        "Loaded flight network from %s (%d origins, %d coordinates)",
        source, len(network.routes), len(network.coordinates),
    )
    return network


def build_network(
    routes: Mapping[str, Mapping[str, Any]],
    coordinates: Mapping[str, Any],
) -> NetworkConfig:
    """Validate raw mappings and copy them into a ``NetworkConfig``."""
    if not isinstance(routes, Mapping) or not isinstance(coordinates, Mapping):
        raise NetworkConfigError("'routes' and 'coordinates' must be objects")

    parsed_routes: dict[str, dict[str, float]] = {}
    for origin, legs in routes.items():
        if not isinstance(legs, Mapping):
            raise NetworkConfigError(f"Routes for {origin!r} must be an object")
        try:
            parsed_routes[origin] = {dest: float(km) for dest, km in legs.items()}
        except (TypeError, ValueError) as exc:
            raise NetworkConfigError(f"Bad distance in routes for {origin!r}") from exc

    parsed_coords: dict[str, Coordinate] = {}
    for city, position in coordinates.items():
        try:
            lat, lng = (float(v) for v in position)
        except (TypeError, ValueError) as exc:
            raise NetworkConfigError(f"Bad coordinate for {city!r}: {position!r}") from exc
        if not (-90 <= lat <= 90 and -180 <= lng <= 180):
            raise NetworkConfigError(f"Coordinate out of range for {city!r}")
        parsed_coords[city] = Coordinate(lat, lng)

    return NetworkConfig(routes=parsed_routes, coordinates=parsed_coords)
