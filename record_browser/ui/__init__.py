"""
UI adapters for the browser.

Currently provides a Dash-based web UI via create_dash_app(). The core
pipeline only knows the RenderSink interface, so other surfaces can live
here later.
"""

from .dash_app import create_dash_app

__all__ = ["create_dash_app"]
