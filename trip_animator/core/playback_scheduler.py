"""Playback scheduler - the shared time cursor and its per-frame loop.

Uses python-statemachine for the Stopped/Running lifecycle:
- Clear state definitions
- Guarded transitions (conditions)
- Entry/exit hooks for frame scheduling and cursor reset
- Explicit event-driven transitions

States:
    STOPPED: Cursor pinned at 0, no frame pending (initial)
    RUNNING: One frame pending; each tick advances the cursor and requests the next

Transitions:
    STOPPED -> RUNNING: play (only with a non-zero bound)
    RUNNING -> RUNNING: retarget (selection changed, bound still non-zero)
    RUNNING -> STOPPED: retarget (selection emptied), halt (playback disabled/teardown)

Tick
----
Each frame moves the cursor by TICK_STEP. When the next value would pass the
bound (longest selected path * TIME_STEP) the cursor restarts at RESTART_TIME,
which is 1, not 0:

    bound=30: 0 -> 2 -> 4 -> ... -> 30 -> 1 -> 3 -> ... -> 29 -> 1 -> ...

Cancellation
------------
Every (re)entry cancels the pending frame before the new bound is applied, so a
tick computed against an old bound never lands. Leaving RUNNING cancels the
pending frame as well. Cancelling is idempotent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from trip_animator.constants import PlaybackConfig
from trip_animator.core.frame_source import FrameSource
from trip_animator.model.trip import Trip, max_path_length

logger = logging.getLogger(__name__)


@dataclass
class PlaybackContext:
    """Shared model for the playback state machine.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model. It stores the current state value.
    """

    # State managed by python-statemachine (model pattern)
    state: str | None = None

    enabled: bool = False
    time: int = 0
    bound: int = 0
    pending_frame: int | None = None
    frames: int = 0

    def __repr__(self) -> str:
        return (
            f"PlaybackContext(state={self.state}, enabled={self.enabled}, "
            f"time={self.time}, bound={self.bound}, pending={self.pending_frame})"
        )


class TransitionLogListener:
    """Listener that logs every playback state transition.

    Usage:
        scheduler.add_listener(TransitionLogListener())
    """

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.info(f"[STATE] {source.name} --({event})--> {target.name}")


class PlaybackScheduler(StateMachine):
    """Owns the playback cursor and drives it one frame at a time.

    See module docstring for the transition table and tick rule.

    Example:
        frames = ManualFrameSource()
        scheduler = PlaybackScheduler(frame_source=frames)
        scheduler.set_playback(enabled=True, selection=store.current_selection())
        frames.advance()
        scheduler.time  # 2
    """

    # ==========================================================================
    # State Definitions
    # ==========================================================================

    stopped = State("Stopped", initial=True)
    running = State("Running")

    # ==========================================================================
    # Transitions
    # ==========================================================================

    # Playback enabled with something to play
    play = stopped.to(running, cond="has_bound")
    # Selection changed while running: keep going, or stop if nothing is left
    retarget = running.to(running, cond="has_bound") | running.to(stopped, unless="has_bound")
    # Playback disabled or component torn down
    halt = running.to(stopped)

    # ==========================================================================
    # Guards (Conditions)
    # ==========================================================================

    def has_bound(self, bound: int) -> bool:
        """Guard: Check if there is any time range to play through."""
        return bound > 0

    # ==========================================================================
    # State Check Properties
    # ==========================================================================

    @property
    def is_running(self) -> bool:
        return self.running.is_active

    @property
    def is_stopped(self) -> bool:
        return self.stopped.is_active

    # ==========================================================================
    # Entry/Exit Hooks
    # ==========================================================================

    def on_enter_running(self) -> None:
        """Hook: Entering running state - schedule the first frame."""
        self._request_next_frame()

    def on_exit_running(self) -> None:
        """Hook: Leaving running state (including self-transitions)."""
        self._cancel_pending_frame()

    def on_enter_stopped(self) -> None:
        """Hook: Entering stopped state - pin cursor to 0."""
        self._cancel_pending_frame()
        self.context.time = 0
        self.context.bound = 0

    # ==========================================================================
    # Transition Actions (before_* hooks)
    # ==========================================================================

    def before_play(self, bound: int) -> None:
        self.context.bound = bound

    def before_retarget(self, bound: int) -> None:
        self.context.bound = bound

    # ==========================================================================
    # Initialization
    # ==========================================================================

    def __init__(
        self,
        frame_source: FrameSource,
        context: PlaybackContext | None = None,
        tick_step: int = PlaybackConfig.TICK_STEP,
        time_step: int = PlaybackConfig.TIME_STEP,
        restart_time: int = PlaybackConfig.RESTART_TIME,
    ) -> None:
        """Initialize scheduler with model pattern.

        Args:
            frame_source: Where frames are requested from (cancel handle based)
            context: Shared context/model (creates new if None)
            tick_step: Cursor advance per frame
            time_step: Time units per path point
            restart_time: Cursor value after wraparound
        """
        assert tick_step >= 0, f"tick_step must be non-negative, got {tick_step}"
        assert time_step >= 0, f"time_step must be non-negative, got {time_step}"
        self.frame_source = frame_source
        self.tick_step = tick_step
        self.time_step = time_step
        self.restart_time = restart_time
        model = context or PlaybackContext()
        super().__init__(model=model)

    @property
    def context(self) -> PlaybackContext:
        """Alias for model."""
        return self.model

    # ==========================================================================
    # Public API
    # ==========================================================================

    @property
    def time(self) -> int:
        """Current cursor value."""
        return self.context.time

    @property
    def bound(self) -> int:
        """Largest cursor value of the current cycle (0 while stopped)."""
        return self.context.bound

    @property
    def enabled(self) -> bool:
        return self.context.enabled

    def bound_for(self, selection: tuple[Trip, ...]) -> int:
        """Cursor bound for a selection: longest path * time_step."""
        bound = max_path_length(selection) * self.time_step
        assert bound >= 0, f"bound must be non-negative, got {bound}"
        return bound

    def set_playback(self, enabled: bool, selection: tuple[Trip, ...]) -> None:
        """Apply the playback-enabled flag.

        Enabling starts (or restarts) the loop for the given selection.
        Disabling stops it, cancels the pending frame and resets the cursor.
        """
        self.context.enabled = enabled
        logger.info(f"[PLAYBACK] Playback {'enabled' if enabled else 'disabled'}")
        if enabled:
            self._resume(selection)
        else:
            self._halt()

    def on_selection_changed(self, selection: tuple[Trip, ...]) -> None:
        """Recompute the bound after a selection change (no-op while disabled)."""
        if self.context.enabled:
            self._resume(selection)

    def tick(self) -> None:
        """Frame callback: advance the cursor and request the next frame."""
        ctx = self.context
        ctx.pending_frame = None
        if not self.is_running:
            logger.debug("[PLAYBACK] Ignoring frame while stopped")
            return

        assert self.tick_step >= 0 and ctx.bound >= 0, "negative step or bound"
        next_time = ctx.time + self.tick_step
        ctx.time = self.restart_time if next_time > ctx.bound else next_time
        ctx.frames += 1
        logger.debug(f"[PLAYBACK] tick {ctx.frames}: time={ctx.time}/{ctx.bound}")

        self._request_next_frame()

    def shutdown(self) -> None:
        """Teardown: disable playback and drop any pending frame."""
        self.context.enabled = False
        self._halt()
        logger.info("[PLAYBACK] Scheduler shut down")

    # ==========================================================================
    # Internals
    # ==========================================================================

    def _resume(self, selection: tuple[Trip, ...]) -> None:
        """Cancel the in-flight frame, then (re)enter RUNNING with a fresh bound."""
        self._cancel_pending_frame()
        bound = self.bound_for(selection)

        if self.is_stopped:
            if bound == 0:
                logger.info("[PLAYBACK] Nothing selected - staying stopped")
                return
            self.play(bound=bound)
        else:
            self.retarget(bound=bound)

        if self.is_running:
            self._request_next_frame()

    def _halt(self) -> None:
        self._cancel_pending_frame()
        if self.is_running:
            self.halt()

    def _request_next_frame(self) -> None:
        if self.context.pending_frame is None:
            self.context.pending_frame = self.frame_source.request_frame(self.tick)

    def _cancel_pending_frame(self) -> None:
        self.frame_source.cancel_frame(self.context.pending_frame)
        self.context.pending_frame = None

    # ==========================================================================
    # Utility Methods
    # ==========================================================================

    def get_state_name(self) -> str:
        """Get current state name for display."""
        return self.running.name if self.running.is_active else self.stopped.name

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure.

        Args:
            event: Transition event name
            **kwargs: Arguments for transition

        Returns:
            True if transition succeeded, False otherwise.
        """
        try:
            self.send(event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.warning(f"Transition '{event}' not allowed from {self.get_state_name()}")
            return False

    def __repr__(self) -> str:
        return f"PlaybackScheduler(state={self.get_state_name()}, model={self.context!r})"

    @staticmethod
    def create(frame_source: FrameSource, add_log_listener: bool = True) -> tuple["PlaybackScheduler", PlaybackContext]:
        """Factory method to create scheduler with context and optional log listener.

        Returns:
            Tuple of (PlaybackScheduler, PlaybackContext)
        """
        context = PlaybackContext()
        scheduler = PlaybackScheduler(frame_source=frame_source, context=context)
        if add_log_listener:
            scheduler.add_listener(TransitionLogListener())
        return scheduler, context
