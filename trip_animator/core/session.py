"""ReplaySession - the owned state behind one map view.

Combines the SelectionStore and PlaybackScheduler behind two mutators:

    toggle(name)          - user ticked/unticked a trip checkbox
    set_playback(enabled) - user ticked/unticked "Show Trip"

Both run under one lock, and every selection change is forwarded to the
scheduler before the lock is released, so the bound always reflects the
selection that produced it.
"""

import logging
import threading

from trip_animator.core.frame_source import FrameSource, ManualFrameSource
from trip_animator.core.playback_scheduler import PlaybackScheduler, TransitionLogListener
from trip_animator.core.render_projector import LayerDescription, project
from trip_animator.core.selection_store import SelectionStore
from trip_animator.core.trip_catalog import TripCatalog
from trip_animator.model.errors import UnknownTripError
from trip_animator.model.message import PlaybackStatusMessage, ToastMessage, UnknownTripMessage
from trip_animator.model.trip import MarkerPoint, Trip

logger = logging.getLogger(__name__)


class ReplaySession:
    """Selection + playback for one user.

    Example:
        session = ReplaySession(catalog=catalog)
        session.toggle("Ferry")
        session.set_playback(enabled=True)
        session.frames.advance()
        deck = MapRenderer().render(session.layers())
    """

    def __init__(
        self,
        catalog: TripCatalog,
        frame_source: FrameSource | None = None,
        log_transitions: bool = True,
    ) -> None:
        self.catalog = catalog
        self.frames = frame_source if frame_source is not None else ManualFrameSource()
        self.selection = SelectionStore(catalog=catalog)
        self.scheduler = PlaybackScheduler(frame_source=self.frames)
        if log_transitions:
            self.scheduler.add_listener(TransitionLogListener())
        self._lock = threading.RLock()

    # =========================================================================
    # MUTATORS
    # =========================================================================

    def toggle(self, trip_name: str) -> ToastMessage | None:
        """Toggle a trip and resync playback.

        Returns:
            None on success, UnknownTripMessage if the name is not in the catalog
            (selection and playback are left untouched).
        """
        with self._lock:
            try:
                self.selection.toggle(trip_name)
            except UnknownTripError as e:
                logger.warning(f"[SELECTION] Ignoring toggle: {e}")
                return UnknownTripMessage(trip_name=trip_name)
            self.scheduler.on_selection_changed(self.selection.current_selection())
            return None

    def set_playback(self, enabled: bool) -> None:
        with self._lock:
            self.scheduler.set_playback(enabled=enabled, selection=self.selection.current_selection())

    def advance_frame(self) -> int:
        """Fire one frame on a ManualFrameSource (the Streamlit loop's clock).

        Returns:
            Number of frame callbacks invoked (0 when playback is idle).
        """
        if not isinstance(self.frames, ManualFrameSource):
            raise TypeError("advance_frame() needs a ManualFrameSource")
        with self._lock:
            return self.frames.advance()

    def close(self) -> None:
        """Teardown: stop playback and cancel the pending frame."""
        with self._lock:
            self.scheduler.shutdown()

    # =========================================================================
    # QUERIES
    # =========================================================================

    def is_selected(self, trip_name: str) -> bool:
        with self._lock:
            return self.selection.is_selected(trip_name)

    @property
    def playback_enabled(self) -> bool:
        with self._lock:
            return self.scheduler.enabled

    @property
    def is_playing(self) -> bool:
        with self._lock:
            return self.scheduler.is_running

    @property
    def time(self) -> int:
        with self._lock:
            return self.scheduler.time

    @property
    def markers(self) -> tuple[MarkerPoint, ...]:
        return self.selection.snapshot.markers

    def current_selection(self) -> tuple[Trip, ...]:
        return self.selection.snapshot.trips

    def layers(self) -> LayerDescription:
        """Project the current state; trails only show while playback is on."""
        with self._lock:
            snapshot = self.selection.snapshot
            return project(
                selected_trips=snapshot.trips,
                time=self.scheduler.time,
                markers=snapshot.markers,
                show_trails=self.scheduler.enabled,
            )

    def status(self) -> PlaybackStatusMessage:
        """Status line built from one consistent read of selection and cursor."""
        with self._lock:
            return PlaybackStatusMessage(
                enabled=self.scheduler.enabled,
                selected_count=len(self.selection),
                time=self.scheduler.time,
                bound=self.scheduler.bound,
            )

    def __repr__(self) -> str:
        return f"ReplaySession(selection={list(self.selection.selected_names)}, scheduler={self.scheduler!r})"
