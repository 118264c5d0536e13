"""Data model classes for the trip animator.

- Trip: Named (lon, lat) path with synthetic timestamps
- MarkerPoint / MarkerRole: Derived origin/destination markers
- Errors: MalformedTripError (load time), UnknownTripError (toggle)
- Messages: User-facing status, error and toast messages
"""

from trip_animator.model.errors import (
    MalformedTripError,
    TripAnimatorError,
    UnknownTripError,
)
from trip_animator.model.trip import (
    LonLat,
    MarkerPoint,
    MarkerRole,
    Trip,
    markers_for,
    max_path_length,
)

__all__ = [
    "Trip",
    "LonLat",
    "MarkerPoint",
    "MarkerRole",
    "markers_for",
    "max_path_length",
    "TripAnimatorError",
    "MalformedTripError",
    "UnknownTripError",
]
