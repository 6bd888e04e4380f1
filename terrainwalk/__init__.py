"""Procedural chunked terrain with trees, water geometry and a walking player, with a map-view window."""

__version__ = "0.1.0"