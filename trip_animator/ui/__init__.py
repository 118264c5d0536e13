"""User interface components for the trip animator.

File Structure (layout-based naming):
- left_panel.py: Sidebar with the Show Trip checkbox and trip checkboxes
- center_map.py: Pydeck map with animated trails and origin/destination icons
"""

from trip_animator.ui.center_map import LayerCollection, MapRenderer
from trip_animator.ui.left_panel import SidebarRenderer

__all__ = [
    "MapRenderer",
    "LayerCollection",
    "SidebarRenderer",
]
