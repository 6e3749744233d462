from __future__ import annotations

import copy
import logging
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional

from ocean_filters.core.exceptions import PresetNameError
from ocean_filters.core.filter_spec import FilterSpec
from ocean_filters.metadata_io.metadata_model import now_iso

if TYPE_CHECKING:
    from ocean_filters.core.store import FilterStore

logger = logging.getLogger(__name__)


def generate_request_id() -> str:
    return f"save-{uuid.uuid4().hex[:12]}"


def clean_preset_name(name: Optional[str]) -> Optional[str]:
    """Trimmed name, or None when nothing usable was entered."""
    if name is None:
        return None
    cleaned = str(name).strip()
    return cleaned or None


@dataclass(frozen=True)
class Preset:
    """
    A named snapshot of a filter specification.

    - name: unique within a registry
    - snapshot: copy of the specification taken at save time
    - created_at / updated_at: ISO8601 timestamps (UTC)
    """

    name: str
    snapshot: FilterSpec
    created_at: str = field(default_factory=now_iso)
    updated_at: str = field(default_factory=now_iso)


@dataclass(frozen=True)
class PresetSaveRequest:
    """
    First half of a save: the snapshot is captured here, the name arrives
    later through PresetRegistry.complete_save.
    """

    request_id: str
    snapshot: FilterSpec
    requested_at: str = field(default_factory=now_iso)


class PresetRegistry:
    """
    Ordered, in-memory collection of named specification snapshots.

    Saving under an existing name replaces that preset's snapshot in place
    (upsert); the preset keeps its position. Presets never reference the
    live specification.
    """

    def __init__(self) -> None:
        self._presets: List[Preset] = []
        self._pending: Dict[str, PresetSaveRequest] = {}

    def __len__(self) -> int:
        return len(self._presets)

    def __iter__(self) -> Iterator[Preset]:
        return iter(list(self._presets))

    def __contains__(self, name: object) -> bool:
        return self.get(name) is not None if isinstance(name, str) else False

    def names(self) -> List[str]:
        return [p.name for p in self._presets]

    def get(self, name: str) -> Optional[Preset]:
        name_clean = clean_preset_name(name)
        return next((p for p in self._presets if p.name == name_clean), None)

    def _index_of(self, name: str) -> Optional[int]:
        return next((i for i, p in enumerate(self._presets) if p.name == name), None)

    def save(self, name: str, spec: FilterSpec) -> Preset:
        """
        Store a copy of `spec` under `name`, overwriting any preset of that name.

        :raises PresetNameError: if the name is blank
        """
        name_clean = clean_preset_name(name)
        if name_clean is None:
            raise PresetNameError("Preset name must not be blank")

        snapshot = copy.deepcopy(spec)
        existing_idx = self._index_of(name_clean)

        if existing_idx is None:
            preset = Preset(name=name_clean, snapshot=snapshot)
            self._presets.append(preset)
            logger.info("Saved filter preset", extra={"preset_name": name_clean})
        else:
            previous = self._presets[existing_idx]
            preset = Preset(
                name=name_clean,
                snapshot=snapshot,
                created_at=previous.created_at,
                updated_at=now_iso(),
            )
            self._presets[existing_idx] = preset
            logger.info("Overwrote filter preset", extra={"preset_name": name_clean})

        return preset

    def load(self, name: str, store: FilterStore) -> bool:
        """Replace the store's live specification with the named preset."""
        return store.load_preset(self, name)

    def delete(self, name: str) -> bool:
        idx = self._index_of(clean_preset_name(name) or "")
        if idx is None:
            return False
        del self._presets[idx]
        logger.info("Deleted filter preset", extra={"preset_name": name})
        return True

    # ---------------------------------------------------------
    # Two-step save: capture now, name later
    # ---------------------------------------------------------

    def request_save(self, spec: FilterSpec) -> PresetSaveRequest:
        request = PresetSaveRequest(request_id=generate_request_id(), snapshot=copy.deepcopy(spec))
        self._pending[request.request_id] = request
        return request

    def complete_save(self, request_id: str, name: Optional[str]) -> Optional[Preset]:
        """
        Commit a pending save under `name`. A blank or missing name cancels
        the request, as does an unknown request id (returns None).
        """
        request = self._pending.pop(request_id, None)
        if request is None:
            logger.warning("Unknown preset save request", extra={"request_id": request_id})
            return None
        if clean_preset_name(name) is None:
            logger.info("Preset save cancelled", extra={"request_id": request_id})
            return None
        return self.save(name, request.snapshot)

    def cancel_save(self, request_id: str) -> None:
        self._pending.pop(request_id, None)

    def pending_requests(self) -> List[str]:
        return list(self._pending)

    def replace_all(self, presets: List[Preset]) -> None:
        """Swap the whole collection (used after importing a presets bundle)."""
        seen: Dict[str, Preset] = {}
        for p in presets:
            seen[p.name] = p
        self._presets = list(seen.values())
