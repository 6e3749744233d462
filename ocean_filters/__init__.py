"""
Top-level package for the ocean data filter core.

This package exposes the filter specification model, its update engine and
the derived views. Most code should import from submodules such as:
    ocean_filters.core
    ocean_filters.presets
    ocean_filters.metadata_io
"""

__all__: list[str] = []
