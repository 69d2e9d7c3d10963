"""Read-only store mapping each location to its geographic position."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


class CoordinateStore:
    """Immutable ``location -> Coordinate`` lookup built once at startup."""

    def __init__(self, coordinates: Mapping[str, Coordinate]):
        self._coordinates = MappingProxyType(dict(coordinates))

    def lookup(self, location: str) -> Optional[Coordinate]:
        """Return the coordinate of *location*, or ``None`` if unknown."""
        return self._coordinates.get(location)

    def __contains__(self, location: object) -> bool:
        return location in self._coordinates

    def __iter__(self) -> Iterator[str]:
        return iter(self._coordinates)

    def __len__(self) -> int:
        return len(self._coordinates)
