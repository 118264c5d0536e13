"""Trip Animator - Replay named trips as animated trails on a map.

A small Streamlit application featuring:
- Immutable trip catalog loaded from a static JSON file
- Selection store with origin/destination markers derived on every toggle
- State machine-based playback scheduler driving a shared time cursor
- Pure projection of selection + cursor into deck.gl layers

Modules:
    core: Catalog, selection, playback scheduling, layer projection, session
    model: Data structures (Trip, MarkerPoint), errors, user messages
    ui: Streamlit interface components (sidebar, pydeck map)

Example:
    from trip_animator.core import ReplaySession, TripCatalog
    from trip_animator.ui import MapRenderer
"""
