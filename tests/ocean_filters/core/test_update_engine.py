from __future__ import annotations

import logging

import pytest

from ocean_filters.core import options as opt
from ocean_filters.core import update_engine as engine
from ocean_filters.core.derived import tags
from ocean_filters.core.exceptions import UnknownDimensionError
from ocean_filters.core.filter_spec import FilterSpec, default_spec


@pytest.fixture()
def spec() -> FilterSpec:
    return FilterSpec.with_overrides(
        {
            "regions": ["North Pacific", "Arctic Ocean"],
            "qualityFlags": ["Good Data", "Bad Data"],
            "temperature": {"min": 5, "max": 25, "unit": "fahrenheit"},
            "depth": {"min": 100, "max": 2000, "unit": "feet"},
            "salinity": {"min": 30, "max": 36},
            "dataCompleteness": 90,
            "floatIds": ["5904471", "2902746"],
        }
    )


def _assert_only_changed(before: FilterSpec, after: FilterSpec, attr: str) -> None:
    for name in before.__dataclass_fields__:
        if name == attr:
            continue
        assert getattr(after, name) is getattr(before, name), name


def test_set_field_replaces_only_that_dimension(spec):
    out = engine.set_field(spec, "seasons", ["Winter", "Spring"])
    assert out.seasons == ("Winter", "Spring")
    assert out is not spec
    _assert_only_changed(spec, out, "seasons")


def test_set_field_dedupes_keeping_order():
    out = engine.set_field(default_spec(), "regions", ["Baltic Sea", "Labrador Sea", "Baltic Sea"])
    assert out.regions == ("Baltic Sea", "Labrador Sea")


def test_set_field_rejects_values_outside_enumeration(spec, caplog):
    with caplog.at_level(logging.WARNING):
        out = engine.set_field(spec, "seasons", ["Monsoon"])
    assert out is spec
    assert "Rejected filter edit" in caplog.text


def test_set_field_with_same_value_returns_same_object(spec):
    assert engine.set_field(spec, "regions", ["North Pacific", "Arctic Ocean"]) is spec


def test_set_field_data_completeness_parses_and_bounds(spec):
    assert engine.set_field(spec, "dataCompleteness", "75").data_completeness == 75
    assert engine.set_field(spec, "dataCompleteness", 101) is spec
    assert engine.set_field(spec, "dataCompleteness", "lots") is spec


def test_set_field_range_needs_every_key(spec):
    assert engine.set_field(spec, "salinity", {"min": 1}) is spec
    out = engine.set_field(spec, "salinity", {"min": 1, "max": 2})
    assert out.salinity.to_dict() == {"min": 1, "max": 2}


def test_set_nested_field_changes_only_one_key(spec):
    out = engine.set_nested_field(spec, "temperature", "unit", "celsius")
    assert out.temperature.unit == "celsius"
    assert out.temperature.min == spec.temperature.min
    assert out.temperature.max == spec.temperature.max
    _assert_only_changed(spec, out, "temperature")


@pytest.mark.parametrize(
    "category, sub_key, value",
    [
        ("coordinates", "latMin", "not-a-number"),
        ("coordinates", "latMax", 91),
        ("coordinates", "lonMin", -181),
        ("temperature", "min", 30),
        ("temperature", "unit", "kelvin"),
        ("depth", "max", 50),
        ("dateRange", "startDate", "2024-13-01"),
        ("dateRange", "endDate", "2023-06-01"),
    ],
)
def test_set_nested_field_rejects_invalid_input(spec, category, sub_key, value):
    assert engine.set_nested_field(spec, category, sub_key, value) is spec


def test_set_nested_field_parses_numeric_text(spec):
    out = engine.set_nested_field(spec, "coordinates", "latMin", "12.5")
    assert out.coordinates.lat_min == 12.5


@pytest.mark.parametrize("huge", [10**400, -(10**400), "1" + "0" * 400])
def test_oversized_numbers_are_rejected_not_raised(spec, huge):
    assert engine.set_nested_field(spec, "temperature", "max", huge) is spec
    assert engine.set_field(spec, "dataCompleteness", huge) is spec


def test_large_integer_bounds_are_kept_exactly():
    out = engine.set_nested_field(default_spec(), "depth", "max", 2**53 + 1)
    assert out.depth.max == 9007199254740993
    assert isinstance(out.depth.max, int)
    assert engine.set_nested_field(default_spec(), "depth", "max", "9007199254740993").depth.max == 2**53 + 1


def test_set_nested_field_unknown_sub_key_raises(spec):
    with pytest.raises(UnknownDimensionError):
        engine.set_nested_field(spec, "temperature", "median", 3)
    with pytest.raises(UnknownDimensionError):
        engine.set_nested_field(spec, "regions", "min", 3)


def test_remove_value_keeps_order():
    spec = engine.set_field(default_spec(), "qualityFlags", ["Good Data", "Bad Data"])
    out = engine.remove_value(spec, "qualityFlags", "Bad Data")
    assert out.quality_flags == ("Good Data",)


@pytest.mark.parametrize("category", sorted(opt.LIST_DIMENSIONS))
def test_remove_value_of_non_member_is_noop(spec, category):
    assert engine.remove_value(spec, category, "definitely-not-present") is spec


def test_remove_value_resets_range_but_keeps_unit(spec):
    out = engine.remove_value(spec, "temperature")
    assert out.temperature.to_dict() == {"min": -2, "max": 35, "unit": "fahrenheit"}
    out = engine.remove_value(spec, "depth")
    assert out.depth.to_dict() == {"min": 0, "max": 6000, "unit": "feet"}
    out = engine.remove_value(spec, "salinity")
    assert out.salinity.to_dict() == {"min": 0, "max": 40}


def test_remove_value_resets_scalar_and_bounds(spec):
    moved = engine.set_nested_field(spec, "coordinates", "latMin", 10)
    assert engine.remove_value(moved, "coordinates").coordinates == default_spec().coordinates
    assert engine.remove_value(spec, "dataCompleteness").data_completeness == 80


def test_remove_value_on_default_range_is_noop():
    spec = default_spec()
    assert engine.remove_value(spec, "temperature") is spec


def test_clear_all_returns_defaults(spec):
    assert engine.clear_all(spec) == default_spec()


def test_toggle_value_appends_and_removes(spec):
    out = engine.toggle_value(spec, "regions", "Baltic Sea", True)
    assert out.regions == ("North Pacific", "Arctic Ocean", "Baltic Sea")
    assert engine.toggle_value(out, "regions", "Baltic Sea", True) is out
    back = engine.toggle_value(out, "regions", "North Pacific", False)
    assert back.regions == ("Arctic Ocean", "Baltic Sea")


def test_toggle_value_rejects_unknown_member(spec):
    assert engine.toggle_value(spec, "instrumentTypes", "BOGUS", True) is spec


def test_toggle_value_on_range_raises(spec):
    with pytest.raises(UnknownDimensionError):
        engine.toggle_value(spec, "temperature", "5", True)


def test_set_float_ids_from_text():
    out = engine.set_float_ids_from_text(default_spec(), " 5904471, ,2902746,,  ")
    assert out.float_ids == ("5904471", "2902746")


def test_remove_tag_routes_to_remove_value(spec):
    by_category = {t.category: t for t in tags(spec)}
    out = engine.remove_tag(spec, by_category["temperature"])
    assert out.temperature.min == -2 and out.temperature.max == 35

    region_tag = next(t for t in tags(spec) if t.value == "Arctic Ocean")
    assert engine.remove_tag(spec, region_tag).regions == ("North Pacific",)
