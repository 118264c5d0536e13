"""Shared pytest fixtures for trip_animator tests.

Provides small raw trip records and the core objects built from them.
All fixtures use explicit values with documented rationale.

COORDINATE SYSTEM:
    Raw records are [lat, lon] pairs. Trips "A" and "B" use symmetric pairs so
    their (lon, lat) paths read the same as the raw input; trip "C" uses
    asymmetric pairs so the axis swap is visible.
"""

import pytest

from trip_animator.core.frame_source import ManualFrameSource
from trip_animator.core.playback_scheduler import PlaybackScheduler
from trip_animator.core.selection_store import SelectionStore
from trip_animator.core.session import ReplaySession
from trip_animator.core.trip_catalog import TripCatalog

# =============================================================================
# RAW RECORDS
# =============================================================================


@pytest.fixture
def raw_trips() -> list[dict]:
    """Four raw records.

    A: 2 points  -> bound 20
    B: 1 point   -> origin == destination
    C: 3 points  -> bound 30, asymmetric coordinates
    D: 5 points  -> bound 50
    """
    return [
        {"name": "A", "co-ordinates": [[0.0, 0.0], [1.0, 1.0]]},
        {"name": "B", "co-ordinates": [[2.0, 2.0]]},
        {"name": "C", "co-ordinates": [[-36.72, 174.70], [-36.73, 174.71], [-36.74, 174.72]]},
        {"name": "D", "co-ordinates": [[5.0, 50.0], [6.0, 60.0], [7.0, 70.0], [8.0, 80.0], [9.0, 90.0]]},
    ]


# =============================================================================
# CORE OBJECTS
# =============================================================================


@pytest.fixture
def catalog(raw_trips: list[dict]) -> TripCatalog:
    return TripCatalog.from_records(raw_trips)


@pytest.fixture
def selection_store(catalog: TripCatalog) -> SelectionStore:
    return SelectionStore(catalog=catalog)


@pytest.fixture
def frames() -> ManualFrameSource:
    return ManualFrameSource()


@pytest.fixture
def scheduler(frames: ManualFrameSource) -> PlaybackScheduler:
    return PlaybackScheduler(frame_source=frames)


@pytest.fixture
def session(catalog: TripCatalog) -> ReplaySession:
    """Session driven by its own ManualFrameSource (session.frames)."""
    return ReplaySession(catalog=catalog)
