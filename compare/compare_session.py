# compare/compare_session.py
from typing import List, Optional

from .filters import MODE_ALL
from .sorting import SORT_NAME
from .state import CompareState, ComparisonEngine

SESSION_PREFIX = "compare"


def surface_key(schema_name: str, model: Optional[str] = None) -> str:
    parts = [SESSION_PREFIX, schema_name]
    if model:
        parts.append(model)
    return ":".join(parts)


def _coerce_ids(raw) -> List[str]:
    if not isinstance(raw, (list, tuple)):
        return []
    out = []
    for v in raw:
        if isinstance(v, (str, int)) and not isinstance(v, bool):
            out.append(str(v))
    # keep unique + stable order
    seen = set()
    uniq = []
    for i in out:
        if i not in seen:
            seen.add(i)
            uniq.append(i)
    return uniq


def _coerce_int(raw, default=0) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def _stored(request, key: str) -> dict:
    raw = request.session.get(key)
    return raw if isinstance(raw, dict) else {}


def get_ids(request, key: str) -> List[str]:
    return _coerce_ids(_stored(request, key).get("ids"))


def load_state(request, key: str, engine: ComparisonEngine) -> CompareState:
    """
    Seed engine state from whatever this surface left in the session.

    The state comes back under the layout it was saved with and is then
    resized to the engine's layout, so a narrower screen drops the newest picks.
    """
    stored = _stored(request, key)
    state = engine.initial_state(
        _coerce_ids(stored.get("ids")),
        mode=stored.get("mode") or MODE_ALL,
        sort_by=stored.get("sort") or SORT_NAME,
        window_offset=_coerce_int(stored.get("offset")),
        max_selected=_coerce_int(stored.get("max"), engine.max_selected),
        window_size=_coerce_int(stored.get("window"), engine.window_size),
    )
    return engine.resize(state, max_selected=engine.max_selected, window_size=engine.window_size)


def save_state(request, key: str, state: CompareState) -> None:
    request.session[key] = {
        "ids": list(state.selection.ids),
        "mode": state.view.mode,
        "sort": state.view.sort_by,
        "offset": state.view.window_offset,
        "window": state.view.window_size,
        "max": state.selection.max_selected,
    }
    request.session.modified = True
