"""
HTTP surface of the persistence gateway, mounted on the Dash Flask server.
"""

from .gateway import DEFAULT_ROUTE, register_snapshot_routes

__all__ = ["DEFAULT_ROUTE", "register_snapshot_routes"]
