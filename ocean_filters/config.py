from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from ocean_filters.metadata_io.metadata_model import (
    DEFAULT_FILTERS_FILENAME,
    DEFAULT_PRESETS_FILENAME,
)

logger = logging.getLogger(__name__)

EXPORT_DIR_ENV = "OCEAN_FILTERS_EXPORT_DIR"


@dataclass(frozen=True)
class ExportConfig:
    """
    Where exported documents are handed off.

    - export_root: directory the local storage backend writes under
    - filters_filename: name of the exported specification document
    - presets_filename: name of the exported presets bundle
    """
    export_root: Path
    filters_filename: str = DEFAULT_FILTERS_FILENAME
    presets_filename: str = DEFAULT_PRESETS_FILENAME


def load_export_config(
        export_root: Optional[Path] = None,
        env: Optional[Mapping[str, str]] = None,
) -> ExportConfig:
    """
    Build the export configuration.

    Selection Order for export_root:
        1) export_root argument if provided
        2) env var OCEAN_FILTERS_EXPORT_DIR
        3) default = ./exports
    """
    env = os.environ if env is None else env

    if export_root is not None:
        root = Path(export_root)
    else:
        root = Path(env.get(EXPORT_DIR_ENV, "exports"))

    logger.debug("Export config resolved", extra={"export_root": str(root)})
    return ExportConfig(export_root=root)
