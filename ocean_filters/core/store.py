from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, List, Mapping, Optional

from . import update_engine as engine
from .derived import FilterTag, active_filter_count, tags
from .filter_spec import FilterSpec

if TYPE_CHECKING:
    from ocean_filters.presets.registry import PresetRegistry

logger = logging.getLogger(__name__)

FilterListener = Callable[[FilterSpec], None]


class FilterStore:
    """
    Owns the live filter specification for one filtering session.

    The store never edits a specification in place: each edit runs an update
    engine function and, if it produced a different object, installs it with
    replace(), which notifies every listener synchronously before returning.
    Rejected or no-op edits install nothing and notify no one.

    Callers that fire queries from a listener own any debouncing.
    """

    def __init__(
            self,
            initial: Optional[Mapping[str, Any]] = None,
            *,
            on_filter_change: Optional[FilterListener] = None,
            on_refresh: Optional[Callable[[], None]] = None,
    ) -> None:
        self._spec = FilterSpec.with_overrides(initial)
        self._listeners: List[FilterListener] = []
        self._on_refresh = on_refresh
        # Caller-owned display flag; the store only carries it
        self.loading = False

        if on_filter_change is not None:
            self.subscribe(on_filter_change)

    # ---------------------------------------------------------
    # Core contract
    # ---------------------------------------------------------

    def current(self) -> FilterSpec:
        return self._spec

    def replace(self, next_spec: FilterSpec) -> None:
        """Install a new specification and notify listeners."""
        if not isinstance(next_spec, FilterSpec):
            raise TypeError(f"Expected FilterSpec, got {type(next_spec).__name__}")
        self._spec = next_spec
        self._notify(next_spec)

    def subscribe(self, listener: FilterListener) -> Callable[[], None]:
        """
        Register a change listener. Returns a callable that removes it again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, spec: FilterSpec) -> None:
        for listener in list(self._listeners):
            try:
                listener(spec)
            except Exception:
                logger.exception("Filter change listener %r failed", listener)

    def _apply(self, next_spec: FilterSpec) -> bool:
        if next_spec is self._spec:
            return False
        self.replace(next_spec)
        return True

    # ---------------------------------------------------------
    # Edits (True when the specification changed)
    # ---------------------------------------------------------

    def set_field(self, category: str, value: Any) -> bool:
        return self._apply(engine.set_field(self._spec, category, value))

    def set_nested_field(self, category: str, sub_key: str, value: Any) -> bool:
        return self._apply(engine.set_nested_field(self._spec, category, sub_key, value))

    def remove_value(self, category: str, value: Optional[str] = None) -> bool:
        return self._apply(engine.remove_value(self._spec, category, value))

    def toggle_value(self, category: str, value: str, selected: bool) -> bool:
        return self._apply(engine.toggle_value(self._spec, category, value, selected))

    def set_float_ids_from_text(self, text: str) -> bool:
        return self._apply(engine.set_float_ids_from_text(self._spec, text))

    def remove_tag(self, tag: FilterTag) -> bool:
        return self._apply(engine.remove_tag(self._spec, tag))

    def clear_all(self) -> None:
        """Reset everything; always notifies, even from the defaults."""
        self.replace(engine.clear_all(self._spec))

    def load_preset(self, registry: PresetRegistry, name: str) -> bool:
        """
        Replace the live specification with a saved preset. Unknown names are
        a no-op.
        """
        preset = registry.get(name)
        if preset is None:
            logger.info("Preset not found", extra={"preset_name": name})
            return False
        self.replace(preset.snapshot)
        return True

    # ---------------------------------------------------------
    # Derived views and refresh
    # ---------------------------------------------------------

    def active_filter_count(self) -> int:
        return active_filter_count(self._spec)

    def tags(self) -> List[FilterTag]:
        return tags(self._spec)

    def refresh(self) -> None:
        """Ask the external collaborator to re-run its query."""
        if self._on_refresh is None:
            return
        self._on_refresh()
