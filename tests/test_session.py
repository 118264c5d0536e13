"""Tests for ReplaySession.

Tests: toggle, set_playback, advance_frame, layers, status, close
Focus: Selection changes reach the scheduler, unknown names are reported not raised
"""

import threading

import pytest

from trip_animator.core.frame_source import ManualFrameSource
from trip_animator.core.session import ReplaySession
from trip_animator.core.trip_catalog import TripCatalog
from trip_animator.model.message import MessageLevel, UnknownTripMessage


class _CountingFrameSource:
    """FrameSource that is not a ManualFrameSource."""

    def __init__(self) -> None:
        self.requested = 0

    def request_frame(self, callback) -> int:
        self.requested += 1
        return self.requested

    def cancel_frame(self, handle) -> None:
        pass


class TestToggle:
    def test_known_trip(self, session: ReplaySession) -> None:
        assert session.toggle("A") is None
        assert session.is_selected("A")
        assert len(session.markers) == 2

    def test_unknown_trip_returns_toast(self, session: ReplaySession) -> None:
        session.toggle("A")

        toast = session.toggle("Nowhere")

        assert isinstance(toast, UnknownTripMessage)
        assert "Nowhere" in toast.message
        assert [t.name for t in session.current_selection()] == ["A"]

    def test_toggle_while_playing_retargets(self, session: ReplaySession) -> None:
        session.toggle("A")
        session.set_playback(enabled=True)
        assert session.scheduler.bound == 20

        session.toggle("D")

        assert session.scheduler.bound == 50
        assert session.frames.pending_count == 1

    def test_deselecting_last_trip_stops_playback(self, session: ReplaySession) -> None:
        session.toggle("A")
        session.set_playback(enabled=True)
        session.advance_frame()

        session.toggle("A")

        assert session.playback_enabled
        assert not session.is_playing
        assert session.time == 0


class TestPlayback:
    def test_layers_follow_cursor(self, session: ReplaySession) -> None:
        session.toggle("C")
        session.set_playback(enabled=True)
        session.advance_frame()
        session.advance_frame()

        description = session.layers()

        assert description.trips is not None
        assert description.trips.current_time == 4

    def test_trails_hidden_while_playback_off(self, session: ReplaySession) -> None:
        session.toggle("C")

        description = session.layers()

        assert description.trips is None
        assert len(description.markers.data) == 2

    def test_disable_keeps_selection(self, session: ReplaySession) -> None:
        session.toggle("A")
        session.toggle("C")
        session.set_playback(enabled=True)
        session.advance_frame()

        session.set_playback(enabled=False)

        assert [t.name for t in session.current_selection()] == ["A", "C"]
        assert session.time == 0
        assert session.advance_frame() == 0

    def test_close(self, session: ReplaySession) -> None:
        session.toggle("A")
        session.set_playback(enabled=True)

        session.close()

        assert not session.playback_enabled
        assert not session.frames.has_pending()

    def test_advance_frame_needs_manual_source(self, catalog: TripCatalog) -> None:
        session = ReplaySession(catalog=catalog, frame_source=_CountingFrameSource())
        with pytest.raises(TypeError):
            session.advance_frame()

    def test_shared_frame_source(self, catalog: TripCatalog) -> None:
        frames = ManualFrameSource()
        session = ReplaySession(catalog=catalog, frame_source=frames, log_transitions=False)
        session.toggle("A")
        session.set_playback(enabled=True)

        frames.advance()

        assert session.time == 2


class TestStatus:
    @pytest.mark.parametrize(
        "names,enabled,level,fragment",
        [
            pytest.param(["A"], False, MessageLevel.INFO, "Paused", id="paused"),
            pytest.param([], True, MessageLevel.WARNING, "select at least one trip", id="waiting"),
            pytest.param(["A"], True, MessageLevel.INFO, "1 trip(s) — t = 0 / 20", id="playing"),
        ],
    )
    def test_status_message(
        self, session: ReplaySession, names: list[str], enabled: bool, level: MessageLevel, fragment: str
    ) -> None:
        for name in names:
            session.toggle(name)
        session.set_playback(enabled=enabled)

        status = session.status()

        assert status.level == level
        assert fragment in status.message


class TestLocking:
    """Queries wait for an in-progress mutation instead of reading half-updated state."""

    @pytest.mark.parametrize(
        "read",
        [
            pytest.param(lambda s: s.status(), id="status"),
            pytest.param(lambda s: s.layers(), id="layers"),
            pytest.param(lambda s: s.is_selected("A"), id="is_selected"),
            pytest.param(lambda s: s.time, id="time"),
            pytest.param(lambda s: s.is_playing, id="is_playing"),
            pytest.param(lambda s: s.playback_enabled, id="playback_enabled"),
        ],
    )
    def test_query_blocks_while_lock_is_held(self, session: ReplaySession, read) -> None:
        session.toggle("A")
        session.set_playback(enabled=True)
        results = []
        reader = threading.Thread(target=lambda: results.append(read(session)))

        session._lock.acquire()
        try:
            reader.start()
            reader.join(timeout=0.2)
            assert reader.is_alive()
            assert results == []
        finally:
            session._lock.release()

        reader.join(timeout=5)
        assert not reader.is_alive()
        assert len(results) == 1
