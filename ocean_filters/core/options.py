"""
Dimension catalogue for the ocean data filter specification.

Holds the enumerations each list dimension may draw from, the default bounds
of every range dimension, and the grouping of dimensions by kind. Everything
here is static; nothing in this module depends on a live specification.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .exceptions import UnknownDimensionError

# ---- Enumerations ----

REGION_OPTIONS: Tuple[str, ...] = (
    "Global Ocean", "North Pacific", "South Pacific", "North Atlantic",
    "South Atlantic", "Indian Ocean", "Arctic Ocean", "Southern Ocean",
    "Mediterranean Sea", "Caribbean Sea", "Gulf of Mexico", "Baltic Sea",
    "Chukchi Sea", "Beaufort Sea", "Labrador Sea",
)

SEASON_OPTIONS: Tuple[str, ...] = ("Spring", "Summer", "Fall", "Winter")

QUALITY_FLAG_OPTIONS: Tuple[str, ...] = (
    "Good Data", "Probably Good", "Probably Bad", "Bad Data",
    "Changed Value", "Value Below Detection", "Value in Excess",
)

FLOAT_STATUS_OPTIONS: Tuple[str, ...] = (
    "Active", "Inactive", "Deployed", "Recovered", "Lost",
)

INSTRUMENT_TYPE_OPTIONS: Tuple[str, ...] = (
    "APEX", "SOLO", "NOVA", "ARVOR", "PROVOR", "NAVIS",
)

MEASUREMENT_OPTIONS: Tuple[str, ...] = (
    "Temperature", "Salinity", "Pressure", "Oxygen", "pH",
    "Nitrate", "Chlorophyll", "Backscatter", "CDOM",
)

PROFILE_OPTIONS: Tuple[str, ...] = ("CTD", "BGC", "Deep", "Shallow", "Surface")

TEMPERATURE_UNITS: Tuple[str, ...] = ("celsius", "fahrenheit")
DEPTH_UNITS: Tuple[str, ...] = ("meters", "feet")

# ---- Dimension names (declaration order = export order = tag order) ----

DIMENSIONS: Tuple[str, ...] = (
    "regions",
    "coordinates",
    "dateRange",
    "seasons",
    "temperature",
    "salinity",
    "depth",
    "qualityFlags",
    "dataCompleteness",
    "floatStatus",
    "instrumentTypes",
    "floatIds",
    "measurements",
    "profiles",
)

# None means free-form text
LIST_DIMENSIONS: Dict[str, Optional[Tuple[str, ...]]] = {
    "regions": REGION_OPTIONS,
    "seasons": SEASON_OPTIONS,
    "qualityFlags": QUALITY_FLAG_OPTIONS,
    "floatStatus": FLOAT_STATUS_OPTIONS,
    "instrumentTypes": INSTRUMENT_TYPE_OPTIONS,
    "floatIds": None,
    "measurements": MEASUREMENT_OPTIONS,
    "profiles": PROFILE_OPTIONS,
}

# Environmental ranges: counted as active and tagged as a single aggregate
RANGE_DIMENSIONS: Tuple[str, ...] = ("temperature", "salinity", "depth")

# Nested dimensions that are edited like ranges but never counted
BOUNDS_DIMENSIONS: Tuple[str, ...] = ("coordinates", "dateRange")

NESTED_DIMENSIONS: Tuple[str, ...] = BOUNDS_DIMENSIONS + RANGE_DIMENSIONS

SCALAR_DIMENSIONS: Tuple[str, ...] = ("dataCompleteness",)

# Sub-keys per nested dimension, in export order
NESTED_KEYS: Dict[str, Tuple[str, ...]] = {
    "coordinates": ("latMin", "latMax", "lonMin", "lonMax"),
    "dateRange": ("startDate", "endDate"),
    "temperature": ("min", "max", "unit"),
    "salinity": ("min", "max"),
    "depth": ("min", "max", "unit"),
}

UNIT_OPTIONS: Dict[str, Tuple[str, ...]] = {
    "temperature": TEMPERATURE_UNITS,
    "depth": DEPTH_UNITS,
}

# ---- Defaults ----

DEFAULT_LAT_MIN = -90
DEFAULT_LAT_MAX = 90
DEFAULT_LON_MIN = -180
DEFAULT_LON_MAX = 180

DEFAULT_START_DATE = "2024-01-01"
DEFAULT_END_DATE = "2024-12-31"

DEFAULT_TEMPERATURE_MIN = -2
DEFAULT_TEMPERATURE_MAX = 35
DEFAULT_TEMPERATURE_UNIT = "celsius"

DEFAULT_SALINITY_MIN = 0
DEFAULT_SALINITY_MAX = 40

DEFAULT_DEPTH_MIN = 0
DEFAULT_DEPTH_MAX = 6000
DEFAULT_DEPTH_UNIT = "meters"

DEFAULT_DATA_COMPLETENESS = 80

COMPLETENESS_MIN = 0
COMPLETENESS_MAX = 100


def dimension_kind(category: str) -> str:
    """
    Classify a dimension as "list", "nested" or "scalar".

    :raises UnknownDimensionError: if the name is not a filter dimension
    """
    if category in LIST_DIMENSIONS:
        return "list"
    if category in NESTED_DIMENSIONS:
        return "nested"
    if category in SCALAR_DIMENSIONS:
        return "scalar"
    raise UnknownDimensionError(f"Unknown filter dimension: {category!r}")
