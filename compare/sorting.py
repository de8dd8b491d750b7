# compare/sorting.py
from decimal import Decimal, InvalidOperation
from typing import List, Sequence

from .entities import ComparableEntity

SORT_NAME = "name"
SORT_PRICE = "price"
SORT_CHOICES = [SORT_NAME, SORT_PRICE]


def coerce_sort(raw) -> str:
    key = raw.strip().lower() if isinstance(raw, str) else ""
    return key if key in SORT_CHOICES else SORT_NAME


def _price_key(entity: ComparableEntity):
    try:
        price = Decimal(str(entity.price))
    except (InvalidOperation, TypeError, ValueError):
        return Decimal("0")
    # NaN can't be ordered
    return Decimal("0") if price.is_nan() else price


def sort_entities(entities: Sequence[ComparableEntity], sort_by: str) -> List[ComparableEntity]:
    # sorted() is stable, so ties keep their incoming order
    if sort_by == SORT_PRICE:
        return sorted(entities, key=_price_key)
    return sorted(entities, key=lambda e: e.name.casefold())
