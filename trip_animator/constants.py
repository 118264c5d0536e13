"""Configuration constants for Trip Animator.

All configurable parameters are centralized here for easy tuning.

Classes:
    AppConfig: UI application settings
    MapConfig: Initial map view parameters
    DataConfig: Trip data file locations and raw record keys
    PlaybackConfig: Time cursor stepping and animation loop settings
    TripStyleConfig: Animated trail styling
    MarkerConfig: Origin/destination marker styling
"""

from pathlib import Path

# Package root directory (where trip_animator/ lives)
PACKAGE_DIR = Path(__file__).parent

# Sample data shipped with the package
DATA_DIR = PACKAGE_DIR / "data"


class AppConfig:
    """UI application settings."""

    TITLE = "Trip Animator"
    ICON = "🗺️"
    LAYOUT = "wide"
    MAP_HEIGHT_PX = 700


class MapConfig:
    """Initial map view parameters."""

    # Initial center: Auckland North Shore, New Zealand
    START_CENTER_LAT = -36.722
    START_CENTER_LON = 174.7078
    DEFAULT_ZOOM = 14.25
    DEFAULT_PITCH = 45.0  # 3D tilt angle (0=top-down)
    DEFAULT_BEARING = 0.0  # Map rotation (0=north up)

    # Carto basemaps need no access token
    MAP_PROVIDER = "carto"
    MAP_STYLE = "dark"


class DataConfig:
    """Trip data file locations and raw record keys."""

    ROUTE_FILE = DATA_DIR / "route.json"

    # Raw record schema (fixed, not versioned)
    NAME_KEY = "name"
    COORDINATES_KEY = "co-ordinates"


class PlaybackConfig:
    """Time cursor stepping and animation loop settings."""

    # Synthetic timestamp spacing: point i is stamped (i + 1) * TIME_STEP
    TIME_STEP = 10

    # Cursor advance per animation frame
    TICK_STEP = 2

    # Cursor value after wraparound (not 0)
    RESTART_TIME = 1

    # Trailing window rendered behind the cursor, in time units
    TRAIL_LENGTH = 180

    # Streamlit frame loop: ~30 fps, then hand control back with st.rerun()
    FRAME_INTERVAL_S = 1 / 30
    FRAMES_PER_RUN = 300


assert PlaybackConfig.TIME_STEP > 0, "TIME_STEP must be positive"
assert PlaybackConfig.TICK_STEP > 0, "TICK_STEP must be positive"
assert 0 < PlaybackConfig.RESTART_TIME <= PlaybackConfig.TIME_STEP, "RESTART_TIME must fall inside the first step"


class TripStyleConfig:
    """Animated trail styling (RGBA lists, 0-255)."""

    TRAIL_COLOR = [255, 255, 0, 255]
    OPACITY = 0.5
    WIDTH_MIN_PIXELS = 12
    ROUNDED = True
    SHADOW_ENABLED = False


class MarkerConfig:
    """Origin/destination marker styling."""

    ORIGIN_COLOR = [250, 250, 0]
    DESTINATION_COLOR = [0, 0, 255]

    ICON_ATLAS = "https://raw.githubusercontent.com/visgl/deck.gl-data/master/website/icon-atlas.png"
    ICON_NAME = "marker"
    ICON_MAPPING = {
        ICON_NAME: {"x": 0, "y": 0, "width": 128, "height": 128, "mask": True},
    }
    SIZE_SCALE = 5
    SIZE = 5
