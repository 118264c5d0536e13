"""Message - User-facing messages for the trip animator UI.

Architecture:
- LEFT (sidebar): ONE blue info message with the playback status
- CENTER (map): Red error message when the trip catalog cannot be loaded
- Toasts: Transient feedback for toggles that could not be applied

Design Principles:
- Maximum ONE message per panel location at any time
- Messages know their own display level; callers decide when to display
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class MessageLevel(Enum):
    """Display level for UI messages."""

    INFO = "info"  # Blue - context/status
    WARNING = "warning"  # Yellow - action instructions
    ERROR = "error"  # Red - load failures


@dataclass(frozen=True)
class Message(ABC):
    """Abstract base class for user-facing messages displayed inline (sidebars/panels).

    These messages are rendered as st.info/st.warning/st.error blocks that persist
    in the UI until replaced.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for display in Streamlit."""
        raise NotImplementedError

    @property
    @abstractmethod
    def level(self) -> MessageLevel:
        """Display level."""
        raise NotImplementedError

    def display(self) -> None:
        """Render this message using the appropriate Streamlit function."""
        import streamlit as st

        render_fn = {
            MessageLevel.INFO: st.info,
            MessageLevel.WARNING: st.warning,
            MessageLevel.ERROR: st.error,
        }[self.level]
        render_fn(self.message)


@dataclass(frozen=True)
class ToastMessage(ABC):
    """Abstract base class for transient popup notifications.

    Good for: stale or unknown toggles
    Bad for: status displays
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for the toast notification."""
        raise NotImplementedError

    @property
    @abstractmethod
    def icon(self) -> str:
        """Icon to show in toast. Override in subclasses."""
        raise NotImplementedError

    def display(self) -> None:
        """Show this message as a toast notification and log it."""
        import streamlit as st

        logger = logging.getLogger(__name__)
        logger.info(f"[TOAST] {self.icon} {self.message}")
        st.toast(f"{self.icon} {self.message}")


# =============================================================================
# TOAST MESSAGES
# =============================================================================


@dataclass(frozen=True)
class UnknownTripMessage(ToastMessage):
    """User toggled a trip that is not in the catalog (stale checkbox)."""

    trip_name: str

    @property
    def icon(self) -> str:
        return "⚠️"

    @property
    def message(self) -> str:
        return f"Unknown Trip — '{self.trip_name}' is not in the loaded trip list."


# =============================================================================
# CENTER - Load failures (RED)
# =============================================================================


@dataclass(frozen=True)
class CatalogLoadErrorMessage(Message):
    """Trip file could not be turned into a catalog."""

    error: str

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        return f"**Could not load trips** — {self.error}"


# =============================================================================
# LEFT PANEL (SIDEBAR) - Playback status
# =============================================================================


@dataclass(frozen=True)
class PlaybackStatusMessage(Message):
    """LEFT panel: what the playback cursor is doing right now."""

    enabled: bool
    selected_count: int
    time: int
    bound: int

    @property
    def level(self) -> MessageLevel:
        if self.enabled and self.selected_count == 0:
            return MessageLevel.WARNING
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        if not self.enabled:
            return f"⏸️ **Paused** — {self.selected_count} trip(s) selected. Tick *Show Trip* to replay."
        if self.selected_count == 0:
            return "▶️ **Waiting** — select at least one trip to start the replay."
        return f"▶️ **Playing** {self.selected_count} trip(s) — t = {self.time} / {self.bound}"
