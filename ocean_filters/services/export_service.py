from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ocean_filters.config import ExportConfig, load_export_config
from ocean_filters.core.filter_spec import FilterSpec
from ocean_filters.metadata_io.io import export_presets, export_spec, import_presets, import_spec
from ocean_filters.presets.registry import PresetRegistry
from ocean_filters.services.storage import LocalFileSystemStorage, StorageBackend

logger = logging.getLogger(__name__)


class FilterExportService:
    """
    Hands exported filter documents to a storage backend and reads them back.

    Exports are the only way a specification or the presets outlive the
    session; nothing here runs automatically.
    """

    def __init__(self, storage: StorageBackend, config: ExportConfig):
        self.storage = storage
        self.config = config

    @classmethod
    def from_config(cls, config: Optional[ExportConfig] = None) -> FilterExportService:
        config = config or load_export_config()
        return cls(LocalFileSystemStorage(config.export_root), config)

    def export_filters(self, spec: FilterSpec, filename: Optional[str] = None) -> str:
        """Write the specification document; returns the storage path used."""
        path = filename or self.config.filters_filename
        self.storage.write_bytes(path, export_spec(spec).encode("utf-8"))
        logger.info("Exported filter specification", extra={"path": path})
        return path

    def available_exports(self) -> List[str]:
        """Exported JSON documents currently in storage, sorted by path."""
        return self.storage.list_files("", ".json")

    def _read(self, path: str) -> str:
        if not self.storage.exists(path):
            raise FileNotFoundError(f"No export named {path!r} (available: {self.available_exports()})")
        return self.storage.read_bytes(path).decode("utf-8")

    def import_filters(self, filename: Optional[str] = None) -> FilterSpec:
        path = filename or self.config.filters_filename
        return import_spec(self._read(path))

    def export_presets(self, registry: PresetRegistry, filename: Optional[str] = None) -> str:
        path = filename or self.config.presets_filename
        self.storage.write_bytes(path, export_presets(registry).encode("utf-8"))
        logger.info("Exported presets bundle", extra={"path": path, "n_presets": len(registry)})
        return path

    def import_presets(
            self,
            registry: PresetRegistry,
            filename: Optional[str] = None,
            *,
            merge: bool = True,
    ) -> int:
        """
        Load a presets bundle into `registry`.

        With merge=True imported presets are upserted by name over the
        existing ones; otherwise the registry is replaced wholesale.
        Returns the number of presets read from the bundle.
        """
        path = filename or self.config.presets_filename
        presets = import_presets(self._read(path))

        if merge:
            for p in presets:
                registry.save(p.name, p.snapshot)
        else:
            registry.replace_all(presets)
        return len(presets)

    def local_path(self, filename: str) -> Optional[Path]:
        """Absolute path of an export on local disk (None for other backends)."""
        if isinstance(self.storage, LocalFileSystemStorage):
            return self.storage.root / filename
        return None
