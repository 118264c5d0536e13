"""RenderProjector - pure mapping from playback state to a layer description.

    project(selected_trips, time, markers) -> LayerDescription

The description is plain data (no pydeck objects) so it can be compared in
tests and handed to any renderer. The trailing-window math itself belongs to
the trail layer; this module only supplies consistent arguments.
"""

from dataclasses import dataclass, field
from typing import Any

from trip_animator.constants import MarkerConfig, PlaybackConfig, TripStyleConfig
from trip_animator.model.trip import MarkerPoint, MarkerRole, Trip


@dataclass(frozen=True)
class TripsLayerSpec:
    """Animated trail layer: one row per selected trip."""

    data: list[dict[str, Any]]
    current_time: int
    trail_length: int = PlaybackConfig.TRAIL_LENGTH
    color: list[int] = field(default_factory=lambda: list(TripStyleConfig.TRAIL_COLOR))
    opacity: float = TripStyleConfig.OPACITY
    width_min_pixels: int = TripStyleConfig.WIDTH_MIN_PIXELS
    rounded: bool = TripStyleConfig.ROUNDED
    shadow_enabled: bool = TripStyleConfig.SHADOW_ENABLED
    id: str = "trips"


@dataclass(frozen=True)
class MarkerLayerSpec:
    """Origin/destination icon layer: one row per marker."""

    data: list[dict[str, Any]]
    icon_atlas: str = MarkerConfig.ICON_ATLAS
    icon_mapping: dict[str, dict[str, Any]] = field(default_factory=lambda: dict(MarkerConfig.ICON_MAPPING))
    size_scale: int = MarkerConfig.SIZE_SCALE
    id: str = "icon-layer"


@dataclass(frozen=True)
class LayerDescription:
    """Everything the map renderer needs for one frame.

    Attributes:
        trips: Trail layer, or None when there is nothing to animate
        markers: Marker layer, always present (possibly with no rows)
    """

    trips: TripsLayerSpec | None
    markers: MarkerLayerSpec

    @property
    def has_trails(self) -> bool:
        return self.trips is not None


def marker_color(marker: MarkerPoint) -> list[int]:
    """Yellow for origins, blue for destinations."""
    if marker.role is MarkerRole.ORIGIN:
        return list(MarkerConfig.ORIGIN_COLOR)
    return list(MarkerConfig.DESTINATION_COLOR)


def project(
    selected_trips: tuple[Trip, ...],
    time: int,
    markers: tuple[MarkerPoint, ...],
    show_trails: bool = True,
) -> LayerDescription:
    """Build the layer description for one frame.

    Args:
        selected_trips: Trips to draw trails for, in selection order
        time: Playback cursor
        markers: Origin/destination markers for the same selection
        show_trails: False hides the trail layer (playback switched off)

    Returns:
        LayerDescription with the trail layer omitted when there are no
        selected trips or trails are hidden.
    """
    trips_layer = None
    if selected_trips and show_trails:
        trips_layer = TripsLayerSpec(
            data=[{**trip.to_layer_row(), "color": list(TripStyleConfig.TRAIL_COLOR)} for trip in selected_trips],
            current_time=time,
        )

    marker_rows = [
        {
            "role": marker.role.value,
            "coords": list(marker.coords),
            "icon": MarkerConfig.ICON_NAME,
            "size": MarkerConfig.SIZE,
            "color": marker_color(marker),
        }
        for marker in markers
    ]
    return LayerDescription(trips=trips_layer, markers=MarkerLayerSpec(data=marker_rows))
