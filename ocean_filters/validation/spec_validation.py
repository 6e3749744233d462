from __future__ import annotations

from typing import Any

from ocean_filters.core import options as opt
from ocean_filters.core.exceptions import FilterValueError
from ocean_filters.core.filter_spec import parse_dimension
from ocean_filters.validation.errors import ValidationIssue, ValidationError


def validate_spec_dict(obj: Any, *, where: str = "filters") -> None:
    """
    Validate a raw filter document BEFORE a FilterSpec is built from it.
    Every problem is collected so the caller sees them all at once; nothing
    is coerced.
    """
    issues: list[ValidationIssue] = []

    if not isinstance(obj, dict):
        raise ValidationError([ValidationIssue("SPEC_TYPE", f"{where} must be a JSON object.")])

    for key in obj:
        if key not in opt.DIMENSIONS:
            issues.append(ValidationIssue("SPEC_UNKNOWN_KEY", f"{where}.{key} is not a filter dimension."))

    for dim in opt.DIMENSIONS:
        if dim not in obj:
            issues.append(ValidationIssue("SPEC_MISSING_KEY", f"{where}.{dim} missing."))
            continue
        value = obj[dim]
        if opt.dimension_kind(dim) == "list" and not isinstance(value, list):
            issues.append(ValidationIssue("SPEC_LIST_TYPE", f"{where}.{dim} must be a list."))
            continue
        if opt.dimension_kind(dim) == "nested" and not isinstance(value, dict):
            issues.append(ValidationIssue("SPEC_OBJECT_TYPE", f"{where}.{dim} must be an object."))
            continue
        strict = _strict_type_issues(dim, value, where=where)
        if strict:
            issues.extend(strict)
            continue
        try:
            parse_dimension(dim, value)
        except FilterValueError as exc:
            issues.append(ValidationIssue("SPEC_VALUE", f"{where}.{dim}: {exc}"))

    if issues:
        raise ValidationError(issues)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _strict_type_issues(dim: str, value: Any, *, where: str) -> list[ValidationIssue]:
    """
    Checks the lenient parsers would otherwise paper over: numeric text,
    duplicate list entries and padded float IDs.
    """
    issues: list[ValidationIssue] = []
    kind = opt.dimension_kind(dim)

    if kind == "scalar" and not _is_number(value):
        issues.append(ValidationIssue("SPEC_NUMBER", f"{where}.{dim} must be a number."))

    elif kind == "nested":
        for key, item in value.items():
            if key in ("startDate", "endDate", "unit"):
                continue
            if not _is_number(item):
                issues.append(ValidationIssue("SPEC_NUMBER", f"{where}.{dim}.{key} must be a number."))

    elif kind == "list":
        if len(set(map(repr, value))) != len(value):
            issues.append(ValidationIssue("SPEC_DUPLICATE", f"{where}.{dim} contains duplicates."))
        if dim == "floatIds" and any(isinstance(v, str) and v != v.strip() for v in value):
            issues.append(ValidationIssue("SPEC_WHITESPACE", f"{where}.{dim} entries must be trimmed."))

    return issues


def validate_presets_bundle_dict(obj: Any) -> None:
    """
    Validate an uploaded presets bundle: a JSON object with a "presets" list
    whose entries carry a non-blank name and a valid filter document.
    """
    issues: list[ValidationIssue] = []

    if not isinstance(obj, dict):
        raise ValidationError([ValidationIssue("BUNDLE_TYPE", "Presets bundle must be a JSON object.")])

    presets = obj.get("presets")
    if not isinstance(presets, list):
        raise ValidationError([ValidationIssue("BUNDLE_PRESETS_TYPE", "presets must be a list.")])

    for i, entry in enumerate(presets):
        if not isinstance(entry, dict):
            issues.append(ValidationIssue("PRESET_TYPE", f"presets[{i}] must be an object."))
            continue
        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            issues.append(ValidationIssue("PRESET_NAME", f"presets[{i}].name missing."))
        try:
            validate_spec_dict(entry.get("filters"), where=f"presets[{i}].filters")
        except ValidationError as exc:
            issues.extend(exc.issues)

    if issues:
        raise ValidationError(issues)
