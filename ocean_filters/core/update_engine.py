"""
Pure update operations over a FilterSpec.

Every operation takes the current specification plus an edit and returns the
next specification. Nothing is mutated in place: untouched dimensions are
carried over by reference, and an edit that is rejected or changes nothing
returns the very same object it was given, so callers can use an identity
check to decide whether to notify.

User input problems (unparsable numbers, inverted ranges, values outside an
enumeration...) are logged and rejected. Naming a dimension or sub-key that
does not exist is a programming error and raises UnknownDimensionError.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Optional

from . import options as opt
from .exceptions import FilterValueError, UnknownDimensionError
from .filter_spec import (
    ATTRIBUTE_NAMES,
    DEFAULT_SPEC,
    NESTED_TYPES,
    FilterSpec,
    parse_dimension,
    resolve_dimension,
)

logger = logging.getLogger(__name__)


def _install(spec: FilterSpec, category: str, value: Any) -> FilterSpec:
    """Swap one dimension, returning `spec` itself when nothing changes."""
    attr = ATTRIBUTE_NAMES[category]
    if getattr(spec, attr) == value:
        return spec
    return dataclasses.replace(spec, **{attr: value})


def _reject(spec: FilterSpec, op: str, category: str, exc: FilterValueError) -> FilterSpec:
    logger.warning(
        "Rejected filter edit",
        extra={"operation": op, "category": category, "reason": str(exc)},
    )
    return spec


# -------------------------------------------------------------------------
# Operations
# -------------------------------------------------------------------------

def set_field(spec: FilterSpec, category: str, value: Any) -> FilterSpec:
    """
    Replace one top-level dimension. All sibling dimensions are carried over
    unchanged.

    List dimensions take any iterable of strings (de-duplicated, order kept);
    nested dimensions take a mapping of all their sub-keys or an instance of
    their value type; dataCompleteness takes a number or numeric text.
    """
    category = resolve_dimension(category)
    try:
        parsed = parse_dimension(category, value)
    except FilterValueError as exc:
        return _reject(spec, "set_field", category, exc)
    return _install(spec, category, parsed)


def set_nested_field(spec: FilterSpec, category: str, sub_key: str, value: Any) -> FilterSpec:
    """
    Replace exactly one key inside a nested dimension, keeping its other keys.

    e.g. set_nested_field(spec, "temperature", "unit", "fahrenheit") leaves
    temperature.min and temperature.max untouched.
    """
    category = resolve_dimension(category)
    if opt.dimension_kind(category) != "nested":
        raise UnknownDimensionError(f"{category} has no nested field {sub_key!r}")

    nested_type = NESTED_TYPES[category]
    current = spec.get(category)
    attr = nested_type.attribute_for(sub_key)
    try:
        parsed = nested_type.parse_value(sub_key, value)
        updated = dataclasses.replace(current, **{attr: parsed})
        updated.validate()
    except FilterValueError as exc:
        return _reject(spec, "set_nested_field", f"{category}.{sub_key}", exc)
    return _install(spec, category, updated)


def remove_value(spec: FilterSpec, category: str, value: Optional[str] = None) -> FilterSpec:
    """
    Remove a value from a dimension.

    - list dimensions: drop the matching element; a value that is not a
      member leaves the specification unchanged
    - value ranges (temperature, salinity, depth): reset min/max to their
      defaults, keeping the unit
    - coordinates, dateRange, dataCompleteness: reset to the default
    """
    category = resolve_dimension(category)
    kind = opt.dimension_kind(category)

    if kind == "list":
        members = spec.get(category)
        if value not in members:
            return spec
        return _install(spec, category, tuple(m for m in members if m != value))

    if kind == "scalar":
        return _install(spec, category, DEFAULT_SPEC.get(category))

    current = spec.get(category)
    if category in opt.RANGE_DIMENSIONS:
        reset = dataclasses.replace(current, min=current.DEFAULT_MIN, max=current.DEFAULT_MAX)
    else:
        reset = DEFAULT_SPEC.get(category)
    return _install(spec, category, reset)


def clear_all(spec: Optional[FilterSpec] = None) -> FilterSpec:
    """Full reset to the default specification."""
    return DEFAULT_SPEC


def toggle_value(spec: FilterSpec, category: str, value: str, selected: bool) -> FilterSpec:
    """
    Add (selected=True) or remove (selected=False) one member of a list
    dimension. New members append at the end; existing order never changes.
    """
    category = resolve_dimension(category)
    if opt.dimension_kind(category) != "list":
        raise UnknownDimensionError(f"{category} is not a list dimension")

    if not selected:
        return remove_value(spec, category, value)

    members = spec.get(category)
    if value in members:
        return spec
    try:
        parsed = parse_dimension(category, members + (value,))
    except FilterValueError as exc:
        return _reject(spec, "toggle_value", category, exc)
    return _install(spec, category, parsed)


def set_float_ids_from_text(spec: FilterSpec, text: str) -> FilterSpec:
    """Comma separated float IDs; blanks are dropped and entries are trimmed."""
    ids = [part.strip() for part in (text or "").split(",")]
    return set_field(spec, "floatIds", [i for i in ids if i])


def remove_tag(spec: FilterSpec, tag: Any) -> FilterSpec:
    """Remove whatever a derived tag stands for."""
    if not getattr(tag, "removable", False):
        return spec
    if tag.category in opt.LIST_DIMENSIONS:
        return remove_value(spec, tag.category, tag.value)
    return remove_value(spec, tag.category)

