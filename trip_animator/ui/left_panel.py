"""Sidebar UI renderer for the trip animator.

Renders the left sidebar with:
- "Show Trip" playback checkbox
- One checkbox per trip in the catalog
- Playback status message

The sidebar only writes into the session (toggle / set_playback); it never
reads the playback cursor except for the status line.
"""

import logging

import streamlit as st

from trip_animator.core.session import ReplaySession

logger = logging.getLogger(__name__)

SHOW_TRIP_KEY = "show_trip"
TRIP_KEY_PREFIX = "trip_"


def trip_checkbox_key(index: int) -> str:
    """Widget key for the index-th trip checkbox."""
    return f"{TRIP_KEY_PREFIX}{index}"


def _on_toggle_trip(session: ReplaySession, trip_name: str) -> None:
    message = session.toggle(trip_name)
    if message is not None:
        message.display()


def _on_toggle_playback(session: ReplaySession) -> None:
    session.set_playback(enabled=bool(st.session_state[SHOW_TRIP_KEY]))


class SidebarRenderer:
    """Renders the trip panel in the Streamlit sidebar.

    Example:
        SidebarRenderer(session=session).render()
    """

    def __init__(self, session: ReplaySession) -> None:
        self.session = session

    def render(self) -> None:
        with st.sidebar:
            st.header("Trips")
            st.checkbox(
                "Show Trip",
                value=self.session.playback_enabled,
                key=SHOW_TRIP_KEY,
                on_change=_on_toggle_playback,
                args=(self.session,),
            )
            st.divider()
            self._render_trip_list()
            st.divider()
            self.session.status().display()

    def _render_trip_list(self) -> None:
        """One checkbox per catalog trip; checked state mirrors the selection."""
        for index, name in enumerate(self.session.catalog.names):
            st.checkbox(
                name,
                value=self.session.is_selected(name),
                key=trip_checkbox_key(index),
                on_change=_on_toggle_trip,
                args=(self.session, name),
            )
