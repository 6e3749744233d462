from __future__ import annotations

import dataclasses

import pytest

from ocean_filters.core import options as opt
from ocean_filters.core.exceptions import FilterValueError, UnknownDimensionError
from ocean_filters.core.filter_spec import (
    Coordinates,
    FilterSpec,
    TemperatureRange,
    coerce_number,
    default_spec,
    resolve_dimension,
)


def test_defaults_match_catalogue():
    spec = default_spec()
    assert spec.regions == ()
    assert spec.coordinates.to_dict() == {"latMin": -90, "latMax": 90, "lonMin": -180, "lonMax": 180}
    assert spec.date_range.to_dict() == {"startDate": "2024-01-01", "endDate": "2024-12-31"}
    assert spec.temperature.to_dict() == {"min": -2, "max": 35, "unit": "celsius"}
    assert spec.salinity.to_dict() == {"min": 0, "max": 40}
    assert spec.depth.to_dict() == {"min": 0, "max": 6000, "unit": "meters"}
    assert spec.data_completeness == 80
    assert spec.is_default()


def test_to_dict_keys_follow_declaration_order():
    assert list(default_spec().to_dict()) == list(opt.DIMENSIONS)


def test_spec_is_immutable():
    spec = default_spec()
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.regions = ("Arctic Ocean",)
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.temperature.min = 5


def test_from_dict_roundtrip():
    spec = FilterSpec(
        regions=("Arctic Ocean", "Baltic Sea"),
        coordinates=Coordinates(lat_min=60, lat_max=85, lon_min=-30, lon_max=40.5),
        temperature=TemperatureRange(min=-1.5, max=8, unit="fahrenheit"),
        float_ids=("5904471",),
        data_completeness=95,
    )
    assert FilterSpec.from_dict(spec.to_dict()) == spec


def test_with_overrides_merges_over_defaults():
    spec = FilterSpec.with_overrides({"regions": ["Chukchi Sea"], "temperature": {"max": 10}})
    assert spec.regions == ("Chukchi Sea",)
    assert spec.temperature == TemperatureRange(min=-2, max=10, unit="celsius")
    assert spec.salinity == default_spec().salinity


def test_with_overrides_rejects_unknown_dimension():
    with pytest.raises(UnknownDimensionError):
        FilterSpec.with_overrides({"colour": "blue"})


@pytest.mark.parametrize(
    "raw, expected",
    [(10, 10), ("10", 10), (" 2.5 ", 2.5), (3.0, 3), ("-0.25", -0.25)],
)
def test_coerce_number_accepts_numbers_and_numeric_text(raw, expected):
    assert coerce_number(raw) == expected


@pytest.mark.parametrize("raw", ["not-a-number", "", None, True, float("nan"), "inf", [1]])
def test_coerce_number_rejects_garbage(raw):
    with pytest.raises(FilterValueError):
        coerce_number(raw)


def test_coerce_number_keeps_integral_values_as_int():
    assert isinstance(coerce_number("10.0"), int)


def test_resolve_dimension_accepts_wire_and_attribute_names():
    assert resolve_dimension("qualityFlags") == "qualityFlags"
    assert resolve_dimension("quality_flags") == "qualityFlags"
    with pytest.raises(UnknownDimensionError):
        resolve_dimension("bogus")


def test_coordinates_validate_bounds():
    with pytest.raises(FilterValueError):
        Coordinates.from_dict({"latMin": -91, "latMax": 90, "lonMin": -180, "lonMax": 180})
    with pytest.raises(FilterValueError):
        Coordinates.from_dict({"latMin": 10, "latMax": 0, "lonMin": -180, "lonMax": 180})
