# portfolio_builder/editor/store.py
from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from portfolio_builder.domain.components import (
    ComponentRecord,
    create_component,
    new_component_id,
)

DEFAULT_PORTFOLIO_NAME = "Untitled Portfolio"


class EditorStore:
    """
    In-memory state of one editor: the document being built plus UI flags.

    Instances are created and passed around explicitly; two stores never
    share state. Every operation is synchronous and always succeeds. Ids
    that are not in the document make update/remove a silent no-op.

    Records are never mutated in place. An update swaps in a new record
    with merged props, so snapshots taken earlier (e.g. for a pending
    save) keep their contents.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.components: List[ComponentRecord] = []
        self.selected_component_id: Optional[str] = None
        self.dragged_component: Optional[ComponentRecord] = None
        self.is_preview_mode: bool = False
        self.portfolio_id: Optional[int] = None
        self.portfolio_name: str = DEFAULT_PORTFOLIO_NAME
        self.is_saving: bool = False

    # ------------------------
    # Document
    # ------------------------

    def add_component(self, component: ComponentRecord) -> None:
        self.components = [*self.components, component]

    def add_from_registry(self, component_type: str) -> ComponentRecord:
        """Instantiate a registry entry and append it (the drop handler)."""
        component = create_component(component_type)
        self.add_component(component)
        return component

    def update_component(self, component_id: str, props: Dict[str, Any]) -> None:
        self.components = [
            {**component, "props": {**(component.get("props") or {}), **props}}
            if component["id"] == component_id
            else component
            for component in self.components
        ]

    def remove_component(self, component_id: str) -> None:
        self.components = [c for c in self.components if c["id"] != component_id]
        if self.selected_component_id == component_id:
            self.selected_component_id = None

    def duplicate_component(self, component_id: str) -> Optional[ComponentRecord]:
        """Insert a deep copy with a fresh id right after the original."""
        for index, component in enumerate(self.components):
            if component["id"] == component_id:
                clone = copy.deepcopy(component)
                clone["id"] = new_component_id()
                self.components = [
                    *self.components[: index + 1],
                    clone,
                    *self.components[index + 1 :],
                ]
                return clone
        return None

    def get_component(self, component_id: Optional[str]) -> Optional[ComponentRecord]:
        return next((c for c in self.components if c["id"] == component_id), None)

    @property
    def selected_component(self) -> Optional[ComponentRecord]:
        return self.get_component(self.selected_component_id)

    def select_component(self, component_id: Optional[str]) -> None:
        self.selected_component_id = component_id

    # ------------------------
    # UI flags
    # ------------------------

    def set_dragged_component(self, component: Optional[ComponentRecord]) -> None:
        self.dragged_component = component

    def set_preview_mode(self, is_preview: bool) -> None:
        self.is_preview_mode = is_preview

    def set_portfolio_id(self, portfolio_id: Optional[int]) -> None:
        self.portfolio_id = portfolio_id

    def set_portfolio_name(self, name: str) -> None:
        self.portfolio_name = name

    def set_saving(self, is_saving: bool) -> None:
        self.is_saving = is_saving

    # ------------------------
    # Whole-document operations
    # ------------------------

    def load_portfolio(
        self,
        components: List[ComponentRecord],
        name: str,
        portfolio_id: Optional[int],
    ) -> None:
        """Replace document and bindings in one step and drop the selection."""
        self.components = list(components)
        self.portfolio_name = name
        self.portfolio_id = portfolio_id
        self.selected_component_id = None

    def clear_editor(self) -> None:
        # An in-flight save outlives the document it was started from
        is_saving = self.is_saving
        self._reset()
        self.is_saving = is_saving

    def to_layout(self, theme: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Serialize the document into the persisted layout shape."""
        layout: Dict[str, Any] = {"components": copy.deepcopy(self.components)}
        if theme:
            layout["theme"] = dict(theme)
        return layout
