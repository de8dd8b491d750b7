# compare/window.py
"""
Sliding window over the sorted selection.

Offsets are plain ints; every helper returns an offset inside
[0, max(0, count - size)] so callers never have to re-check bounds.
"""
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def max_offset(size: int, count: int) -> int:
    return max(0, count - max(1, size))


def clamp_offset(offset: int, size: int, count: int) -> int:
    return min(max(int(offset), 0), max_offset(size, count))


def next_offset(offset: int, size: int, count: int) -> int:
    return min(clamp_offset(offset, size, count) + 1, max_offset(size, count))


def prev_offset(offset: int, size: int, count: int) -> int:
    return max(clamp_offset(offset, size, count) - 1, 0)


def go_to_offset(index: int, size: int, count: int) -> int:
    return clamp_offset(index, size, count)


def go_to_entity(offset: int, size: int, sorted_ids: Sequence[str], entity_id: str) -> int:
    """Bring entity_id to the front of the window; unknown ids leave the offset alone."""
    count = len(sorted_ids)
    try:
        index = list(sorted_ids).index(entity_id)
    except ValueError:
        return clamp_offset(offset, size, count)
    return clamp_offset(index, size, count)


def visible_window(sorted_items: Sequence[T], offset: int, size: int) -> List[T]:
    start = clamp_offset(offset, size, len(sorted_items))
    return list(sorted_items[start:start + max(1, size)])


def can_go_next(offset: int, size: int, count: int) -> bool:
    return clamp_offset(offset, size, count) < max_offset(size, count)


def can_go_prev(offset: int, size: int, count: int) -> bool:
    return clamp_offset(offset, size, count) > 0


def window_position(offset: int, size: int, count: int) -> dict:
    """Numbers for the "2 / 3" pager shown by carousel-style surfaces."""
    start = clamp_offset(offset, size, count)
    return {
        "page": start + 1 if count else 0,
        "pages": max_offset(size, count) + 1 if count else 0,
        "first": start + 1 if count else 0,
        "last": min(start + max(1, size), count),
        "total": count,
    }
