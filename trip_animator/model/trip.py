"""Trip and MarkerPoint - the data atoms of the trip animator.

A Trip is a named path of (lon, lat) coordinates with one synthetic timestamp
per point. A MarkerPoint is an origin or destination derived from a selected
trip; it is never built by the UI directly.

Coordinate order is (lon, lat) everywhere, matching GeoJSON and Pydeck.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from trip_animator.model.errors import MalformedTripError

# (lon, lat) - GeoJSON/Pydeck order
LonLat = tuple[float, float]


@dataclass(frozen=True)
class Trip:
    """A named, timestamped path.

    Attributes:
        name: Unique key within the catalog
        path: Ordered (lon, lat) points, at least one
        timestamps: One strictly increasing timestamp per path point

    Example:
        trip = Trip(name="Ferry", path=((174.70, -36.72),), timestamps=(10,))
        trip.origin == trip.destination  # True for a single point
    """

    name: str
    path: tuple[LonLat, ...]
    timestamps: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate path/timestamp consistency."""
        if not self.name:
            raise MalformedTripError("missing name")
        if len(self.path) == 0:
            raise MalformedTripError("empty path", name=self.name)
        if len(self.timestamps) != len(self.path):
            raise MalformedTripError(
                f"{len(self.timestamps)} timestamps for {len(self.path)} path points",
                name=self.name,
            )
        if any(b <= a for a, b in zip(self.timestamps, self.timestamps[1:])):
            raise MalformedTripError("timestamps must be strictly increasing", name=self.name)
        if self.timestamps[0] < 0:
            raise MalformedTripError("timestamps must be non-negative", name=self.name)

    @property
    def length(self) -> int:
        """Number of points on the path."""
        return len(self.path)

    @property
    def origin(self) -> LonLat:
        return self.path[0]

    @property
    def destination(self) -> LonLat:
        return self.path[-1]

    def to_layer_row(self) -> dict[str, Any]:
        """Row for the animated trail layer (lists, not tuples, for JSON)."""
        return {
            "name": self.name,
            "path": [list(point) for point in self.path],
            "timestamps": list(self.timestamps),
        }

    def __repr__(self) -> str:
        return f"Trip({self.name!r}, points={self.length})"


class MarkerRole(Enum):
    """Which end of a trip a marker stands for."""

    ORIGIN = "orig"
    DESTINATION = "dest"


@dataclass(frozen=True)
class MarkerPoint:
    """Origin or destination marker derived from a selected trip."""

    role: MarkerRole
    coords: LonLat

    @property
    def is_origin(self) -> bool:
        return self.role is MarkerRole.ORIGIN


def markers_for(trips: tuple[Trip, ...]) -> tuple[MarkerPoint, ...]:
    """Derive origin/destination markers, two per trip, in trip order."""
    markers: list[MarkerPoint] = []
    for trip in trips:
        markers.append(MarkerPoint(role=MarkerRole.ORIGIN, coords=trip.origin))
        markers.append(MarkerPoint(role=MarkerRole.DESTINATION, coords=trip.destination))
    return tuple(markers)


def max_path_length(trips: tuple[Trip, ...]) -> int:
    """Longest path among the given trips, 0 when there are none."""
    return max((trip.length for trip in trips), default=0)
