from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from ocean_filters.core.filter_spec import FilterSpec
from ocean_filters.presets.registry import Preset
from ocean_filters.validation.errors import ValidationError, ValidationIssue
from ocean_filters.validation.spec_validation import (
    validate_presets_bundle_dict,
    validate_spec_dict,
)

from .metadata_model import now_iso, preset_entry, presets_bundle, spec_to_dict

logger = logging.getLogger(__name__)


def _dumps(data: Dict[str, Any]) -> str:
    # Key order is the document's insertion order, never sorted
    return json.dumps(data, indent=2, ensure_ascii=False)


def _loads(text: str | bytes) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError) as exc:
        raise ValidationError([ValidationIssue("JSON_DECODE", f"Not valid JSON: {exc}")]) from None

# -------------------------------------------------------------------------
# Single specification
# -------------------------------------------------------------------------

def export_spec(spec: FilterSpec) -> str:
    """
    Deterministic JSON text for a specification, suitable for download.
    Same specification in, byte-identical text out.
    """
    return _dumps(spec_to_dict(spec))


def import_spec(text: str | bytes) -> FilterSpec:
    """
    Inverse of export_spec.

    :raises ValidationError: listing every problem in the document
    """
    raw = _loads(text)
    validate_spec_dict(raw)
    return FilterSpec.from_dict(raw)


def write_spec_file(spec: FilterSpec, path: Path) -> Path:
    logger.info("Writing filter specification to %s", path)
    path.write_text(export_spec(spec), encoding="utf-8")
    return path


def load_spec_from_file(path: Path) -> FilterSpec:
    logger.info("Loading filter specification from %s", path)
    try:
        return import_spec(path.read_text(encoding="utf-8"))
    except Exception:
        logger.exception("Failed to load filter specification from %s", path)
        raise

# -------------------------------------------------------------------------
# Preset bundles
# -------------------------------------------------------------------------

def export_presets(presets: Iterable[Preset]) -> str:
    entries = [
        preset_entry(p.name, p.snapshot, p.created_at, p.updated_at)
        for p in presets
    ]
    return _dumps(presets_bundle(entries))


def import_presets(text: str | bytes) -> List[Preset]:
    """
    Rebuild presets from an exported bundle, validating every snapshot
    before any Preset is built.

    :raises ValidationError: if the bundle or any snapshot is malformed
    """
    raw = _loads(text)
    validate_presets_bundle_dict(raw)

    presets: List[Preset] = []
    for entry in raw["presets"]:
        presets.append(
            Preset(
                name=entry["name"].strip(),
                snapshot=FilterSpec.from_dict(entry["filters"]),
                created_at=entry.get("created_at") or now_iso(),
                updated_at=entry.get("updated_at") or now_iso(),
            )
        )

    logger.info("Imported presets bundle (n=%d)", len(presets))
    return presets
