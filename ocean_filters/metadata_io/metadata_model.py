from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

from ocean_filters.core.filter_spec import FilterSpec

# -------------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------------

BUNDLE_SCHEMA_VERSION = 1

DEFAULT_FILTERS_FILENAME = "ocean-data-filters.json"
DEFAULT_PRESETS_FILENAME = "ocean-data-presets.json"


def now_iso() -> str:
    """
    Return a current UTC timestamp in ISO-8601 format.
    """
    return datetime.now(timezone.utc).isoformat()

# -------------------------------------------------------------------------
# Document shapes
# -------------------------------------------------------------------------

def spec_to_dict(spec: FilterSpec) -> Dict[str, Any]:
    """
    The exported filter document: every dimension keyed by its wire name,
    in declaration order.
    """
    return spec.to_dict()


def preset_entry(name: str, spec: FilterSpec, created_at: str, updated_at: str) -> Dict[str, Any]:
    return {
        "name": name,
        "filters": spec_to_dict(spec),
        "created_at": created_at,
        "updated_at": updated_at,
    }


def presets_bundle(entries: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Describes an exported presets file.

    - schema_version: version of this bundle schema (start at 1)
    - exported_at: when the bundle was written
    - presets: list of {name, filters, created_at, updated_at}
    """
    return {
        "schema_version": BUNDLE_SCHEMA_VERSION,
        "exported_at": now_iso(),
        "presets": entries,
    }
