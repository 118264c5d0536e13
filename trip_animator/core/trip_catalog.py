"""TripCatalog - immutable list of trips loaded once at startup.

Raw records come from a static JSON file:

    [{"name": "Ferry", "co-ordinates": [[lat, lon], [lat, lon], ...]}, ...]

Loading swaps every pair to (lon, lat), which the trail layer requires, and
stamps point i with (i + 1) * PlaybackConfig.TIME_STEP.
"""

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from trip_animator.constants import DataConfig, PlaybackConfig
from trip_animator.model.errors import MalformedTripError, UnknownTripError
from trip_animator.model.trip import LonLat, Trip

logger = logging.getLogger(__name__)


def _to_lon_lat(point: Any, index: int, name: str) -> LonLat:
    """Convert a raw [lat, lon] pair into (lon, lat)."""
    if not isinstance(point, (list, tuple)) or len(point) != 2:
        raise MalformedTripError(f"coordinate {point!r} is not a [lat, lon] pair", index=index, name=name)
    lat, lon = point
    try:
        return (float(lon), float(lat))
    except (TypeError, ValueError):
        raise MalformedTripError(f"coordinate {point!r} is not numeric", index=index, name=name) from None


def trip_from_record(record: Mapping[str, Any], index: int = 0) -> Trip:
    """Build one Trip from a raw record.

    Args:
        record: Raw mapping with "name" and "co-ordinates" keys
        index: Position in the source list (for error messages)

    Raises:
        MalformedTripError: Not a mapping, missing name, empty or malformed coordinate list.
    """
    if not isinstance(record, Mapping):
        raise MalformedTripError(f"expected an object, got {type(record).__name__}", index=index)

    name = record.get(DataConfig.NAME_KEY)
    if not name:
        raise MalformedTripError("missing name", index=index)

    coordinates = record.get(DataConfig.COORDINATES_KEY) or []
    if not isinstance(coordinates, (list, tuple)):
        raise MalformedTripError("coordinates must be a list of [lat, lon] pairs", index=index, name=name)
    if len(coordinates) == 0:
        raise MalformedTripError("empty coordinate list", index=index, name=name)

    path = tuple(_to_lon_lat(point, index=index, name=name) for point in coordinates)
    timestamps = tuple((i + 1) * PlaybackConfig.TIME_STEP for i in range(len(path)))
    return Trip(name=str(name), path=path, timestamps=timestamps)


def load_trips(raw_trips: Iterable[Mapping[str, Any]], strict: bool = True) -> tuple[Trip, ...]:
    """Map raw trip records into Trips.

    Args:
        raw_trips: Raw records in file order
        strict: If True, the first malformed record fails the whole load.
                If False, malformed records are logged and skipped.

    Returns:
        Trips in input order.

    Raises:
        MalformedTripError: In strict mode, on the first bad or duplicate record.
    """
    trips: list[Trip] = []
    seen: set[str] = set()

    for index, record in enumerate(raw_trips):
        try:
            trip = trip_from_record(record, index=index)
            if trip.name in seen:
                raise MalformedTripError("duplicate name", index=index, name=trip.name)
        except MalformedTripError as e:
            if strict:
                raise
            logger.warning(f"[CATALOG] Skipping {e}")
            continue
        seen.add(trip.name)
        trips.append(trip)

    logger.info(f"[CATALOG] Loaded {len(trips)} trip(s)")
    return tuple(trips)


def load_trips_from_file(path: Path, strict: bool = True) -> tuple[Trip, ...]:
    """Read a JSON trip file and load it with load_trips()."""
    with open(path, "r", encoding="utf-8") as fh:
        raw = json.load(fh)
    if not isinstance(raw, list):
        raise MalformedTripError(f"{path.name} must contain a list of trip records")
    return load_trips(raw, strict=strict)


class TripCatalog:
    """Read-only, name-indexed view over loaded trips.

    Example:
        catalog = TripCatalog.from_file(DataConfig.ROUTE_FILE)
        trip = catalog.get("Ferry")
    """

    def __init__(self, trips: Iterable[Trip]) -> None:
        self._trips = tuple(trips)
        self._by_name = {trip.name: trip for trip in self._trips}
        if len(self._by_name) != len(self._trips):
            raise MalformedTripError("duplicate trip names in catalog")

    @classmethod
    def from_records(cls, raw_trips: Iterable[Mapping[str, Any]], strict: bool = True) -> "TripCatalog":
        return cls(load_trips(raw_trips, strict=strict))

    @classmethod
    def from_file(cls, path: Path = DataConfig.ROUTE_FILE, strict: bool = True) -> "TripCatalog":
        return cls(load_trips_from_file(path, strict=strict))

    @property
    def trips(self) -> tuple[Trip, ...]:
        return self._trips

    @property
    def names(self) -> tuple[str, ...]:
        """Trip names in catalog order (the order the sidebar lists them)."""
        return tuple(trip.name for trip in self._trips)

    def get(self, name: str) -> Trip:
        """Look up a trip by name.

        Raises:
            UnknownTripError: If no trip has this name.
        """
        trip = self._by_name.get(name)
        if trip is None:
            raise UnknownTripError(name)
        return trip

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Trip]:
        return iter(self._trips)

    def __len__(self) -> int:
        return len(self._trips)

    def __repr__(self) -> str:
        return f"TripCatalog(trips={len(self._trips)})"
