from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from ocean_filters.config import ExportConfig
from ocean_filters.core.filter_spec import FilterSpec
from ocean_filters.core.store import FilterStore
from ocean_filters.logging_config import configure_logging
from ocean_filters.presets.registry import PresetRegistry
from ocean_filters.services.export_service import FilterExportService

logger = logging.getLogger(__name__)


@dataclass
class FilterSession:
    """
    Everything one filtering session owns: the live store, its presets and
    the export sink. Nothing is shared between sessions.
    """
    store: FilterStore
    presets: PresetRegistry
    exports: FilterExportService

    def export_filters(self) -> str:
        return self.exports.export_filters(self.store.current())

    def export_presets(self) -> str:
        return self.exports.export_presets(self.presets)


def open_session(
        initial: Optional[Mapping[str, Any]] = None,
        *,
        on_filter_change: Optional[Callable[[FilterSpec], None]] = None,
        on_refresh: Optional[Callable[[], None]] = None,
        export_config: Optional[ExportConfig] = None,
        log_level: int = logging.INFO,
        log_format: Optional[str] = None,
        setup_logging: bool = True,
) -> FilterSession:
    """
    Entry point for a host application: configures logging (JSON by default,
    see logging_config.configure_logging) and wires a fresh store, preset
    registry and export service together.

    Pass setup_logging=False when the host already owns the root logger.
    """
    if setup_logging:
        configure_logging(level=log_level, force_format=log_format)

    session = FilterSession(
        store=FilterStore(initial, on_filter_change=on_filter_change, on_refresh=on_refresh),
        presets=PresetRegistry(),
        exports=FilterExportService.from_config(export_config),
    )
    logger.info(
        "Filter session opened",
        extra={"export_root": str(session.exports.config.export_root)},
    )
    return session
