"""Tests for SelectionStore.

Tests: toggle, is_selected, current_selection, markers, clear
Focus: Marker derivation, involution, insertion-stable order, unknown names
"""

import pytest
from hypothesis import given, settings, strategies as st

from trip_animator.core.selection_store import SelectionStore
from trip_animator.core.trip_catalog import TripCatalog
from trip_animator.model.errors import UnknownTripError
from trip_animator.model.trip import MarkerPoint, MarkerRole, markers_for


class TestToggle:
    """toggle() adds/removes and rederives markers."""

    def test_toggle_adds_then_removes(self, selection_store: SelectionStore) -> None:
        assert selection_store.toggle("A") is True
        assert selection_store.is_selected("A")
        assert selection_store.toggle("A") is False
        assert not selection_store.is_selected("A")

    def test_markers_for_two_trips(self, selection_store: SelectionStore) -> None:
        """A=[[0,0],[1,1]], B=[[2,2]] -> origin/dest of A then origin/dest of B."""
        selection_store.toggle("A")
        selection_store.toggle("B")

        assert selection_store.markers == (
            MarkerPoint(role=MarkerRole.ORIGIN, coords=(0.0, 0.0)),
            MarkerPoint(role=MarkerRole.DESTINATION, coords=(1.0, 1.0)),
            MarkerPoint(role=MarkerRole.ORIGIN, coords=(2.0, 2.0)),
            MarkerPoint(role=MarkerRole.DESTINATION, coords=(2.0, 2.0)),
        )

    def test_selection_order_is_insertion_order(self, selection_store: SelectionStore) -> None:
        selection_store.toggle("C")
        selection_store.toggle("A")
        selection_store.toggle("D")
        selection_store.toggle("A")  # remove from the middle

        assert selection_store.selected_names == ("C", "D")
        assert [m.coords for m in selection_store.markers] == [
            (174.70, -36.72),
            (174.72, -36.74),
            (50.0, 5.0),
            (90.0, 9.0),
        ]

    def test_reselect_goes_to_the_end(self, selection_store: SelectionStore) -> None:
        selection_store.toggle("A")
        selection_store.toggle("B")
        selection_store.toggle("A")
        selection_store.toggle("A")
        assert selection_store.selected_names == ("B", "A")

    def test_unknown_trip_raises_and_leaves_state(self, selection_store: SelectionStore) -> None:
        selection_store.toggle("A")
        before = selection_store.snapshot

        with pytest.raises(UnknownTripError):
            selection_store.toggle("Nowhere")

        assert selection_store.snapshot is before

    def test_current_selection_returns_trips(self, selection_store: SelectionStore, catalog: TripCatalog) -> None:
        selection_store.toggle("D")
        selection_store.toggle("B")
        assert selection_store.current_selection() == (catalog.get("D"), catalog.get("B"))

    def test_max_path_length(self, selection_store: SelectionStore) -> None:
        assert selection_store.max_path_length() == 0
        selection_store.toggle("A")
        selection_store.toggle("C")
        assert selection_store.max_path_length() == 3

    def test_clear(self, selection_store: SelectionStore) -> None:
        selection_store.toggle("A")
        selection_store.toggle("B")
        selection_store.clear()
        assert selection_store.selected_names == ()
        assert selection_store.markers == ()
        assert len(selection_store) == 0


class TestSnapshotConsistency:
    """Selection and markers are swapped together."""

    def test_snapshot_markers_match_its_trips(self, selection_store: SelectionStore) -> None:
        selection_store.toggle("A")
        selection_store.toggle("D")
        snapshot = selection_store.snapshot
        assert snapshot.markers == markers_for(snapshot.trips)

    def test_old_snapshot_is_not_mutated(self, selection_store: SelectionStore) -> None:
        selection_store.toggle("A")
        old = selection_store.snapshot
        selection_store.toggle("B")
        assert old.names == ("A",)
        assert len(old.markers) == 2


NAMES = ["A", "B", "C", "D"]
CATALOG_RECORDS = [
    {"name": "A", "co-ordinates": [[0.0, 0.0], [1.0, 1.0]]},
    {"name": "B", "co-ordinates": [[2.0, 2.0]]},
    {"name": "C", "co-ordinates": [[-36.72, 174.70], [-36.73, 174.71], [-36.74, 174.72]]},
    {"name": "D", "co-ordinates": [[5.0, 50.0], [6.0, 60.0], [7.0, 70.0], [8.0, 80.0], [9.0, 90.0]]},
]


class TestSelectionHypothesis:
    """Property-based tests over random toggle sequences.

    Note: These tests build their own catalog since Hypothesis doesn't work well
    with function-scoped pytest fixtures.
    """

    @given(toggles=st.lists(st.sampled_from(NAMES), max_size=20))
    @settings(max_examples=50)
    def test_markers_always_two_per_selected_trip(self, toggles: list[str]) -> None:
        store = SelectionStore(catalog=TripCatalog.from_records(CATALOG_RECORDS))
        for name in toggles:
            store.toggle(name)
            assert len(store.markers) == 2 * len(store.selected_names)
            assert store.markers == markers_for(store.current_selection())

    @given(
        toggles=st.lists(st.sampled_from(NAMES), max_size=12),
        name=st.sampled_from(NAMES),
    )
    @settings(max_examples=50)
    def test_double_toggle_restores_selected_set(self, toggles: list[str], name: str) -> None:
        """Toggling twice restores the selected set; markers match the set."""
        store = SelectionStore(catalog=TripCatalog.from_records(CATALOG_RECORDS))
        for toggle_name in toggles:
            store.toggle(toggle_name)
        before_names = set(store.selected_names)

        store.toggle(name)
        store.toggle(name)

        assert set(store.selected_names) == before_names
        assert store.markers == markers_for(store.current_selection())

    @given(toggles=st.lists(st.sampled_from(NAMES), max_size=12))
    @settings(max_examples=30)
    def test_add_then_remove_restores_exact_state(self, toggles: list[str]) -> None:
        """Adding an unselected trip and removing it again restores order and markers."""
        store = SelectionStore(catalog=TripCatalog.from_records(CATALOG_RECORDS))
        for toggle_name in toggles:
            store.toggle(toggle_name)
        unselected = [n for n in NAMES if not store.is_selected(n)]
        if not unselected:
            return
        before = store.snapshot

        store.toggle(unselected[0])
        store.toggle(unselected[0])

        assert store.snapshot == before
