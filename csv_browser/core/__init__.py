"""
Core domain layer: dataset schema, filter state, the filter/pagination
engine, CSV ingestion and the saved snapshot shape
"""

from .dataset import Dataset
from .filter_state import FilterState
from .roles import Role
from .snapshot import Snapshot
from .table_state import PageWindow, TableState

__all__ = ["Dataset", "FilterState", "Role", "Snapshot", "PageWindow", "TableState"]
