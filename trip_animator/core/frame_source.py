"""Frame sources - where the playback scheduler gets its animation frames from.

A frame source hands out one callback invocation per requested frame, like a
browser's requestAnimationFrame. The scheduler only ever talks to the
FrameSource protocol, so tests and the Streamlit loop can drive frames
deterministically with ManualFrameSource instead of real timers.
"""

import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


class FrameSource(Protocol):
    """requestAnimationFrame-style scheduling interface."""

    def request_frame(self, callback: FrameCallback) -> int:
        """Schedule callback for the next frame and return a cancel handle."""
        ...

    def cancel_frame(self, handle: int | None) -> None:
        """Cancel a pending frame. Unknown, fired or None handles are ignored."""
        ...


class ManualFrameSource:
    """Frame source advanced explicitly by the caller.

    Callbacks requested while a frame is being fired land in the NEXT frame,
    so a self-rescheduling callback runs exactly once per advance().

    Example:
        frames = ManualFrameSource()
        handle = frames.request_frame(scheduler.tick)
        frames.advance()  # runs scheduler.tick once
    """

    def __init__(self) -> None:
        self._pending: dict[int, FrameCallback] = {}
        self._next_handle = 1
        self.frames_fired = 0

    def request_frame(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int | None) -> None:
        if handle is None:
            return
        self._pending.pop(handle, None)

    @property
    def pending_count(self) -> int:
        """Number of callbacks waiting for the next frame."""
        return len(self._pending)

    def has_pending(self) -> bool:
        return bool(self._pending)

    def advance(self, frames: int = 1) -> int:
        """Fire the given number of frames.

        Each frame runs the callbacks that were pending when it started.
        A callback cancelled by an earlier callback in the same frame is skipped.

        Returns:
            Total number of callbacks invoked.
        """
        invoked = 0
        for _ in range(frames):
            due = list(self._pending)
            for handle in due:
                callback = self._pending.pop(handle, None)
                if callback is None:
                    continue
                callback()
                invoked += 1
            self.frames_fired += 1
        return invoked
