# compare/selection.py
from dataclasses import dataclass, field
from typing import Container, Dict, Iterable, Optional, Tuple

ADDED = "added"
REMOVED = "removed"
LIMIT_REACHED = "limit_reached"
MINIMUM_REACHED = "minimum_reached"
UNKNOWN_ID = "unknown_id"

CHANGED = {ADDED, REMOVED}


@dataclass(frozen=True)
class SelectionSet:
    """Ordered, duplicate-free ids, never more than max_selected.

    min_selected only blocks toggling an id off; clear_all and
    set_from_external may go below it. Immutable: every operation returns a new set.
    """
    ids: Tuple[str, ...] = ()
    max_selected: int = 4
    min_selected: int = 0
    _index: Dict[str, int] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.max_selected < 1:
            raise ValueError("max_selected must be at least 1")
        if not 0 <= self.min_selected <= self.max_selected:
            raise ValueError("min_selected must be between 0 and max_selected")
        ids = _dedupe(self.ids)[:self.max_selected]
        object.__setattr__(self, "ids", ids)
        object.__setattr__(self, "_index", {pid: i for i, pid in enumerate(ids)})

    def __contains__(self, entity_id) -> bool:
        return entity_id in self._index

    def __len__(self) -> int:
        return len(self.ids)

    def __iter__(self):
        return iter(self.ids)

    def position(self, entity_id) -> Optional[int]:
        return self._index.get(entity_id)

    @property
    def is_full(self) -> bool:
        return len(self.ids) >= self.max_selected

    def _replace(self, ids) -> "SelectionSet":
        return SelectionSet(tuple(ids), self.max_selected, self.min_selected)


@dataclass(frozen=True)
class ToggleResult:
    selection: SelectionSet
    outcome: str

    @property
    def changed(self) -> bool:
        return self.outcome in CHANGED


def _dedupe(raw: Iterable) -> Tuple[str, ...]:
    # keep unique + stable order
    seen = set()
    uniq = []
    for v in raw or ():
        if v in seen:
            continue
        seen.add(v)
        uniq.append(v)
    return tuple(uniq)


def toggle(selection: SelectionSet, entity_id: str,
           known_ids: Optional[Container[str]] = None) -> ToggleResult:
    """
    Remove the id if selected, otherwise append it while there is room.

    Blocked toggles return the same selection with an outcome explaining why.
    known_ids (the catalog snapshot) lets removed-from-catalog ids be ignored.
    """
    if entity_id in selection:
        if len(selection) <= selection.min_selected:
            return ToggleResult(selection, MINIMUM_REACHED)
        return ToggleResult(
            selection._replace(i for i in selection.ids if i != entity_id), REMOVED
        )

    if known_ids is not None and entity_id not in known_ids:
        return ToggleResult(selection, UNKNOWN_ID)
    if selection.is_full:
        return ToggleResult(selection, LIMIT_REACHED)
    return ToggleResult(selection._replace(selection.ids + (entity_id,)), ADDED)


def clear_all(selection: SelectionSet) -> SelectionSet:
    return selection._replace(())


def set_from_external(selection: SelectionSet, ids: Iterable[str],
                      known_ids: Optional[Container[str]] = None) -> SelectionSet:
    """Replace the selection with ids (deduplicated, truncated to max, order kept)."""
    ids = _dedupe(ids)
    if known_ids is not None:
        ids = tuple(i for i in ids if i in known_ids)
    return selection._replace(ids)


def with_limits(selection: SelectionSet, max_selected: int,
                min_selected: Optional[int] = None) -> SelectionSet:
    """Same ids under new bounds; extra ids beyond the new max are dropped from the end."""
    if min_selected is None:
        min_selected = min(selection.min_selected, max_selected)
    return SelectionSet(selection.ids, max_selected, min_selected)
