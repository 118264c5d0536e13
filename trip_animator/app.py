"""Trip Animator - replay named trips as animated trails on a map.

Tick trips in the sidebar to select them, tick "Show Trip" to replay them
along a shared time cursor. Origin and destination markers follow the selection.

Run: streamlit run trip_animator/app.py
"""

import logging
import time
import traceback

import streamlit as st

from trip_animator.constants import AppConfig, DataConfig, PlaybackConfig
from trip_animator.core.session import ReplaySession
from trip_animator.core.trip_catalog import TripCatalog
from trip_animator.model.errors import MalformedTripError
from trip_animator.model.message import CatalogLoadErrorMessage
from trip_animator.ui import MapRenderer, SidebarRenderer
from trip_animator.ui.left_panel import SHOW_TRIP_KEY

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


def init_session_state() -> bool:
    """Load the trip catalog once per browser session.

    Returns:
        True when a session is ready, False if the catalog failed to load.
    """
    if "session" in st.session_state:
        return True

    try:
        catalog = TripCatalog.from_file(DataConfig.ROUTE_FILE)
    except (MalformedTripError, OSError, ValueError) as e:
        logger.error(f"[CATALOG] Load failed: {e}")
        CatalogLoadErrorMessage(error=str(e)).display()
        return False

    st.session_state.session = ReplaySession(catalog=catalog)
    st.session_state.map_renderer = MapRenderer()
    return True


def reset_playback() -> None:
    """Stop playback after an error while preserving the selection."""
    logger.info("Resetting playback due to error recovery")
    session: ReplaySession = st.session_state.session
    session.close()
    # Drop the widget value so the checkbox is rebuilt from session.playback_enabled
    st.session_state.pop(SHOW_TRIP_KEY, None)


# =============================================================================
# MAP RENDERING
# =============================================================================


def _render_map() -> bool:
    """Draw the map and, while playing, run a batch of animation frames.

    Returns:
        True if playback is still running after the batch (caller reruns).
    """
    session: ReplaySession = st.session_state.session
    renderer: MapRenderer = st.session_state.map_renderer
    placeholder = st.empty()

    placeholder.pydeck_chart(renderer.render(session.layers()), height=AppConfig.MAP_HEIGHT_PX)
    if not session.is_playing:
        return False

    logger.info(f"[RENDER] Playing {len(session.current_selection())} trip(s) from t={session.time}")
    for _ in range(PlaybackConfig.FRAMES_PER_RUN):
        time.sleep(PlaybackConfig.FRAME_INTERVAL_S)
        if session.advance_frame() == 0:
            break
        placeholder.pydeck_chart(renderer.render(session.layers()), height=AppConfig.MAP_HEIGHT_PX)
    return session.is_playing


# =============================================================================
# MAIN
# =============================================================================


def main() -> None:
    """Application entry point."""
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    st.title(AppConfig.TITLE)

    if not init_session_state():
        return

    keep_playing = False
    try:
        SidebarRenderer(session=st.session_state.session).render()
        keep_playing = _render_map()
    except Exception as e:
        # Log full traceback for debugging
        error_msg = f"{type(e).__name__}: {e}"
        full_traceback = traceback.format_exc()
        logger.error(f"[UI] UI error caught: {error_msg}\n{full_traceback}")

        st.error(f"⚠️ Something went wrong: {error_msg}")
        reset_playback()

    # Outside the try block: st.rerun() works by raising
    if keep_playing:
        st.rerun()


if __name__ == "__main__":
    main()
