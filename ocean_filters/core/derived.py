from __future__ import annotations

from dataclasses import dataclass
from typing import List

from . import options as opt
from .filter_spec import DEFAULT_SPEC, FilterSpec, Number


@dataclass(frozen=True)
class FilterTag:
    """
    A removable, user-facing chip for one active value.

    - category: wire name of the dimension the tag belongs to
    - value: the list element, or "<min>–<max>" for an aggregate range tag
    - label: display text
    - removable: whether the tag can be dismissed (always True today)
    """
    category: str
    value: str
    label: str
    removable: bool = True


@dataclass(frozen=True)
class FilterSummary:
    active_filter_count: int
    tags: List[FilterTag]


def format_number(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def _bounds(spec: FilterSpec, category: str) -> str:
    current = spec.get(category)
    return f"{format_number(current.min)}–{format_number(current.max)}"


def _range_label(spec: FilterSpec, category: str) -> str:
    current = spec.get(category)
    low, high = format_number(current.min), format_number(current.max)
    if category == "temperature":
        return f"Temp: {low}°-{high}°"
    if category == "salinity":
        return f"Salinity: {low}-{high} PSU"
    unit = "m" if current.unit == "meters" else "ft"
    return f"Depth: {low}-{high}{unit}"


def is_active(spec: FilterSpec, category: str) -> bool:
    """
    Whether a dimension counts towards the active-filter total.

    Coordinates and dateRange never count. Ranges count when min or max
    differ from the defaults; a unit change alone does not count.
    """
    if category in opt.BOUNDS_DIMENSIONS:
        return False
    if category in opt.LIST_DIMENSIONS:
        return len(spec.get(category)) > 0
    if category in opt.RANGE_DIMENSIONS:
        return not spec.get(category).is_default_bounds()
    return spec.get(category) != DEFAULT_SPEC.get(category)


def active_filter_count(spec: FilterSpec) -> int:
    return sum(1 for category in opt.DIMENSIONS if is_active(spec, category))


def tags(spec: FilterSpec) -> List[FilterTag]:
    """
    Tags in dimension declaration order, then list order within a dimension.
    Each active range gets one aggregate tag. dataCompleteness counts as
    active but has no tag.
    """
    out: List[FilterTag] = []
    for category in opt.DIMENSIONS:
        if not is_active(spec, category):
            continue

        if category in opt.LIST_DIMENSIONS:
            out.extend(FilterTag(category, item, item) for item in spec.get(category))
        elif category in opt.RANGE_DIMENSIONS:
            out.append(FilterTag(category, _bounds(spec, category), _range_label(spec, category)))
    return out


def summarize(spec: FilterSpec) -> FilterSummary:
    return FilterSummary(active_filter_count=active_filter_count(spec), tags=tags(spec))
