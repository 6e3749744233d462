"""
Named snapshots of the filter specification.
"""

from .registry import Preset, PresetRegistry, PresetSaveRequest

__all__ = ["Preset", "PresetRegistry", "PresetSaveRequest"]
