"""Core classes for trip selection and animated playback.

- TripCatalog: Immutable trip list loaded once at startup
- SelectionStore: Selected trips and derived origin/destination markers
- PlaybackScheduler: Stopped/Running state machine owning the time cursor
- ManualFrameSource: Deterministic requestAnimationFrame stand-in
- project: Pure projection of selection + cursor into map layers
- ReplaySession: Selection and playback behind one lock
"""

from trip_animator.core.frame_source import FrameSource, ManualFrameSource
from trip_animator.core.playback_scheduler import (
    PlaybackContext,
    PlaybackScheduler,
    TransitionLogListener,
)
from trip_animator.core.render_projector import (
    LayerDescription,
    MarkerLayerSpec,
    TripsLayerSpec,
    project,
)
from trip_animator.core.selection_store import SelectionSnapshot, SelectionStore
from trip_animator.core.session import ReplaySession
from trip_animator.core.trip_catalog import (
    TripCatalog,
    load_trips,
    load_trips_from_file,
    trip_from_record,
)

__all__ = [
    "TripCatalog",
    "load_trips",
    "load_trips_from_file",
    "trip_from_record",
    "SelectionStore",
    "SelectionSnapshot",
    "FrameSource",
    "ManualFrameSource",
    "PlaybackScheduler",
    "PlaybackContext",
    "TransitionLogListener",
    "project",
    "LayerDescription",
    "TripsLayerSpec",
    "MarkerLayerSpec",
    "ReplaySession",
]
