"""
Core domain layer: the filter specification, its update engine,
derived views and the live store
"""

from .filter_spec import FilterSpec, default_spec
from .derived import FilterTag, active_filter_count, tags
from .store import FilterStore

__all__ = ["FilterSpec", "default_spec", "FilterTag", "active_filter_count", "tags", "FilterStore"]
