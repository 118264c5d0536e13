"""SelectionStore - selected trips and their derived origin/destination markers.

The selection and its markers live together in one frozen SelectionSnapshot.
Every mutation builds a fresh snapshot from the resulting selection and swaps
it in with a single assignment, so the marker list always matches the
selection it was derived from.
"""

import logging
from dataclasses import dataclass, field

from trip_animator.core.trip_catalog import TripCatalog
from trip_animator.model.trip import MarkerPoint, Trip, markers_for, max_path_length

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionSnapshot:
    """Selected trips (in selection order) plus the markers derived from them."""

    trips: tuple[Trip, ...] = ()
    markers: tuple[MarkerPoint, ...] = field(default=())

    @classmethod
    def of(cls, trips: tuple[Trip, ...]) -> "SelectionSnapshot":
        """Derive a snapshot from scratch (never patched incrementally)."""
        return cls(trips=trips, markers=markers_for(trips))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(trip.name for trip in self.trips)


class SelectionStore:
    """Holds which trips the user has chosen.

    Example:
        store = SelectionStore(catalog=catalog)
        store.toggle("Ferry")
        store.markers  # (origin, destination) of "Ferry"
    """

    def __init__(self, catalog: TripCatalog) -> None:
        self.catalog = catalog
        self._snapshot = SelectionSnapshot()

    @property
    def snapshot(self) -> SelectionSnapshot:
        """Current selection and markers as one consistent unit."""
        return self._snapshot

    @property
    def markers(self) -> tuple[MarkerPoint, ...]:
        return self._snapshot.markers

    @property
    def selected_names(self) -> tuple[str, ...]:
        return self._snapshot.names

    def toggle(self, trip_name: str) -> bool:
        """Add the trip if unselected, remove it if selected.

        Args:
            trip_name: Catalog name of the trip

        Returns:
            True if the trip is selected after the toggle.

        Raises:
            UnknownTripError: If the catalog has no such trip (state unchanged).
        """
        trips = self._snapshot.trips
        if self.is_selected(trip_name):
            new_trips = tuple(t for t in trips if t.name != trip_name)
        else:
            new_trips = trips + (self.catalog.get(trip_name),)

        self._snapshot = SelectionSnapshot.of(new_trips)
        selected = self.is_selected(trip_name)
        logger.info(
            f"[SELECTION] {'+' if selected else '-'} {trip_name} -> {list(self.selected_names)} "
            f"({len(self.markers)} markers)"
        )
        return selected

    def is_selected(self, trip_name: str) -> bool:
        return any(trip.name == trip_name for trip in self._snapshot.trips)

    def current_selection(self) -> tuple[Trip, ...]:
        """Selected trips in the order they were selected."""
        return self._snapshot.trips

    def max_path_length(self) -> int:
        """Longest selected path, 0 when nothing is selected."""
        return max_path_length(self._snapshot.trips)

    def clear(self) -> None:
        """Deselect everything."""
        self._snapshot = SelectionSnapshot()
        logger.info("[SELECTION] Cleared")

    def __len__(self) -> int:
        return len(self._snapshot.trips)

    def __repr__(self) -> str:
        return f"SelectionStore(selected={list(self.selected_names)})"
