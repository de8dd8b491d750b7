# compare/state.py
import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Optional, Tuple

from . import selection as sel
from . import window as win
from .entities import ComparableEntity
from .filters import MODE_ALL, coerce_mode, filter_sections
from .schema import AttributeSchema
from .sorting import SORT_NAME, coerce_sort, sort_entities

logger = logging.getLogger(__name__)

SelectionCallback = Callable[[str, str], None]


@dataclass(frozen=True)
class ViewState:
    mode: str = MODE_ALL
    sort_by: str = SORT_NAME
    window_offset: int = 0
    window_size: int = 3


@dataclass(frozen=True)
class CompareState:
    selection: sel.SelectionSet
    view: ViewState

    def with_offset(self, offset: int) -> "CompareState":
        return replace(self, view=replace(self.view, window_offset=offset))


class ComparisonEngine:
    """
    One comparison surface: a catalog snapshot plus the schema it is compared by.

    The engine keeps no mutable state. Every method takes a CompareState and
    returns a new one; the hosting screen owns and stores the state.
    """

    def __init__(self, catalog, schema: AttributeSchema, *, max_selected: int = 4,
                 min_selected: int = 0, window_size: int = 3,
                 on_selection_changed: Optional[SelectionCallback] = None):
        self.catalog = catalog
        self.schema = schema
        self.max_selected = max_selected
        self.min_selected = min(min_selected, max_selected)
        self.window_size = max(1, window_size)
        self.on_selection_changed = on_selection_changed

    # ---------- state lifecycle ----------
    def initial_state(self, ids: Iterable[str] = (), mode: str = MODE_ALL,
                      sort_by: str = SORT_NAME, window_offset: int = 0, *,
                      max_selected: Optional[int] = None,
                      window_size: Optional[int] = None) -> CompareState:
        """
        Seed a state from an externally persisted id list (unknown ids dropped).

        max_selected / window_size restore the limits the state was saved
        under; follow with resize() to move it to the current layout.
        """
        max_selected = max(1, max_selected or self.max_selected)
        window_size = max(1, window_size or self.window_size)
        selection = sel.set_from_external(
            sel.SelectionSet((), max_selected, min(self.min_selected, max_selected)),
            ids, self._known_ids(),
        )
        view = ViewState(coerce_mode(mode), coerce_sort(sort_by), 0, window_size)
        return self._reclamp(CompareState(selection, view).with_offset(window_offset))

    def resize(self, state: CompareState, *, max_selected: int, window_size: int) -> CompareState:
        """Apply a new layout signal; a smaller max truncates the selection."""
        selection = sel.with_limits(state.selection, max_selected,
                                    min(self.min_selected, max_selected))
        view = replace(state.view, window_size=max(1, window_size))
        return self._reclamp(CompareState(selection, view))

    # ---------- selection ----------
    def toggle(self, state: CompareState, entity_id: str) -> Tuple[CompareState, str]:
        result = sel.toggle(state.selection, entity_id, self._known_ids())
        if not result.changed:
            logger.debug("toggle %s on %s blocked: %s", entity_id, self.schema.name, result.outcome)
            return state, result.outcome

        new_state = self._reclamp(replace(state, selection=result.selection))
        self._notify(entity_id, result.outcome)
        return new_state, result.outcome

    def clear_all(self, state: CompareState) -> CompareState:
        return self._reclamp(replace(state, selection=sel.clear_all(state.selection)))

    def set_from_external(self, state: CompareState, ids: Iterable[str]) -> CompareState:
        selection = sel.set_from_external(state.selection, ids, self._known_ids())
        return self._reclamp(replace(state, selection=selection))

    # ---------- view ----------
    def set_mode(self, state: CompareState, mode: str) -> CompareState:
        return replace(state, view=replace(state.view, mode=coerce_mode(mode)))

    def set_sort(self, state: CompareState, sort_by: str) -> CompareState:
        return replace(state, view=replace(state.view, sort_by=coerce_sort(sort_by)))

    def next(self, state: CompareState) -> CompareState:
        v = state.view
        return state.with_offset(win.next_offset(v.window_offset, v.window_size, self._count(state)))

    def prev(self, state: CompareState) -> CompareState:
        v = state.view
        return state.with_offset(win.prev_offset(v.window_offset, v.window_size, self._count(state)))

    def go_to(self, state: CompareState, index: int) -> CompareState:
        v = state.view
        return state.with_offset(win.go_to_offset(index, v.window_size, self._count(state)))

    def go_to_entity(self, state: CompareState, entity_id: str) -> CompareState:
        v = state.view
        ids = [e.id for e in self.sorted_selection(state)]
        return state.with_offset(win.go_to_entity(v.window_offset, v.window_size, ids, entity_id))

    # ---------- read side ----------
    def current_selection(self, state: CompareState) -> Tuple[str, ...]:
        return state.selection.ids

    def selected_entities(self, state: CompareState) -> List[ComparableEntity]:
        return self.catalog.by_ids(state.selection.ids)

    def sorted_selection(self, state: CompareState) -> List[ComparableEntity]:
        return sort_entities(self.selected_entities(state), state.view.sort_by)

    def visible_entities(self, state: CompareState) -> List[ComparableEntity]:
        v = state.view
        return win.visible_window(self.sorted_selection(state), v.window_offset, v.window_size)

    def filtered_schema(self, state: CompareState) -> AttributeSchema:
        visible = self.visible_entities(state)
        if not visible:
            return self.schema.with_sections(())
        return filter_sections(self.schema, state.view.mode, visible)

    def can_go_next(self, state: CompareState) -> bool:
        v = state.view
        return win.can_go_next(v.window_offset, v.window_size, self._count(state))

    def can_go_prev(self, state: CompareState) -> bool:
        v = state.view
        return win.can_go_prev(v.window_offset, v.window_size, self._count(state))

    def position(self, state: CompareState) -> dict:
        v = state.view
        return win.window_position(v.window_offset, v.window_size, self._count(state))

    # ---------- helpers ----------
    def _known_ids(self):
        return set(self.catalog.ids())

    def _count(self, state: CompareState) -> int:
        # ids missing from the catalog are not rendered, so they don't count
        return len(self.selected_entities(state))

    def _reclamp(self, state: CompareState) -> CompareState:
        v = state.view
        return state.with_offset(win.clamp_offset(v.window_offset, v.window_size, self._count(state)))

    def _notify(self, entity_id: str, change: str) -> None:
        if self.on_selection_changed is None:
            return
        self.on_selection_changed(entity_id, change)
