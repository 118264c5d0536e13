"""MapRenderer - Pydeck map rendering for the trip animator.

Turns a LayerDescription into a deck.gl map:
- Animated trails for selected trips (TripsLayer)
- Origin/destination markers (IconLayer)

Key conventions:
- Uses [lon, lat] coordinate order (GeoJSON standard)
- Colors as RGB(A) lists (0-255)
- Data prepared as list[dict] for GPU streaming
"""

import logging
from dataclasses import dataclass, field

import pydeck as pdk

from trip_animator.constants import MapConfig
from trip_animator.core.render_projector import LayerDescription, MarkerLayerSpec, TripsLayerSpec

logger = logging.getLogger(__name__)


@dataclass
class LayerCollection:
    """Manages Pydeck layers with correct z-ordering.

    Z-order (back to front): trails → markers

    Markers are placed AFTER trails so origin/destination icons stay visible
    on top of the trail they belong to.
    """

    trails: list[pdk.Layer] = field(default_factory=list)
    markers: list[pdk.Layer] = field(default_factory=list)

    def get_ordered_layers(self) -> list[pdk.Layer]:
        """Return all layers in correct z-order (back to front)."""
        return self.trails + self.markers


class MapRenderer:
    """Renders a LayerDescription on a Pydeck map.

    Example:
        renderer = MapRenderer()
        deck = renderer.render(session.layers())
        st.pydeck_chart(deck)
    """

    def __init__(
        self,
        center_lat: float = MapConfig.START_CENTER_LAT,
        center_lon: float = MapConfig.START_CENTER_LON,
        zoom: float = MapConfig.DEFAULT_ZOOM,
        pitch: float = MapConfig.DEFAULT_PITCH,
        bearing: float = MapConfig.DEFAULT_BEARING,
    ) -> None:
        """Initialize map renderer.

        Args:
            center_lat: Initial map center latitude
            center_lon: Initial map center longitude
            zoom: Initial zoom level
            pitch: 3D tilt angle (0=top-down)
            bearing: Map rotation (0=north up)
        """
        self.center_lat = center_lat
        self.center_lon = center_lon
        self.zoom = zoom
        self.pitch = pitch
        self.bearing = bearing

    def get_view_state(self) -> pdk.ViewState:
        """Create Pydeck ViewState from current settings."""
        return pdk.ViewState(
            latitude=self.center_lat,
            longitude=self.center_lon,
            zoom=self.zoom,
            pitch=self.pitch,
            bearing=self.bearing,
        )

    def render(self, description: LayerDescription) -> pdk.Deck:
        """Render one frame.

        Args:
            description: Output of project() for the current state

        Returns:
            pdk.Deck object ready for display.
        """
        layer_collection = LayerCollection()

        if description.trips is not None:
            layer_collection.trails.append(self._create_trips_layer(spec=description.trips))

        layer_collection.markers.append(self._create_marker_layer(spec=description.markers))

        return pdk.Deck(
            map_provider=MapConfig.MAP_PROVIDER,
            map_style=MapConfig.MAP_STYLE,
            initial_view_state=self.get_view_state(),
            layers=layer_collection.get_ordered_layers(),
        )

    # =========================================================================
    # LAYERS
    # =========================================================================

    @staticmethod
    def _create_trips_layer(spec: TripsLayerSpec) -> pdk.Layer:
        """Animated trail layer; deck.gl computes the trailing window."""
        return pdk.Layer(
            "TripsLayer",
            spec.data,
            get_path="path",
            get_timestamps="timestamps",
            get_color="color",
            opacity=spec.opacity,
            width_min_pixels=spec.width_min_pixels,
            rounded=spec.rounded,
            trail_length=spec.trail_length,
            current_time=spec.current_time,
            shadow_enabled=spec.shadow_enabled,
            id=spec.id,
        )

    @staticmethod
    def _create_marker_layer(spec: MarkerLayerSpec) -> pdk.Layer:
        """Origin (yellow) and destination (blue) icons."""
        return pdk.Layer(
            "IconLayer",
            spec.data,
            icon_atlas=spec.icon_atlas,
            icon_mapping=spec.icon_mapping,
            get_icon="icon",
            get_position="coords",
            get_size="size",
            get_color="color",
            size_scale=spec.size_scale,
            pickable=True,
            id=spec.id,
        )
