# catalog/providers.py
from functools import lru_cache
from typing import Dict, Iterable, List, Optional

from compare.entities import ComparableEntity

from .data import GRADES, VEHICLES
from .schemas import GRADE, VEHICLE


class InMemoryCatalog:
    """Ordered catalog snapshot. Ids are unique; lookups are O(1)."""

    def __init__(self, entities: Iterable[ComparableEntity]):
        self._entities: List[ComparableEntity] = []
        self._by_id: Dict[str, ComparableEntity] = {}
        for e in entities:
            if e.id in self._by_id:
                raise ValueError(f"Duplicate catalog id: {e.id}")
            self._entities.append(e)
            self._by_id[e.id] = e

    def all(self) -> List[ComparableEntity]:
        return list(self._entities)

    def ids(self) -> List[str]:
        return [e.id for e in self._entities]

    def get(self, entity_id: str) -> Optional[ComparableEntity]:
        return self._by_id.get(entity_id)

    def by_ids(self, ids: Iterable[str]) -> List[ComparableEntity]:
        # keep the caller's order; ids gone from the catalog are skipped
        return [self._by_id[i] for i in ids if i in self._by_id]

    def __contains__(self, entity_id) -> bool:
        return entity_id in self._by_id

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self):
        return iter(self._entities)


def _to_entity(row: dict) -> ComparableEntity:
    attrs = {k: v for k, v in row.items() if k not in ("id", "name", "price")}
    return ComparableEntity(id=row["id"], name=row["name"], price=row["price"], attributes=attrs)


@lru_cache(maxsize=None)
def vehicle_catalog() -> InMemoryCatalog:
    return InMemoryCatalog(_to_entity(r) for r in VEHICLES)


@lru_cache(maxsize=None)
def grade_catalog(model: str) -> Optional[InMemoryCatalog]:
    rows = GRADES.get(model)
    if rows is None:
        return None
    return InMemoryCatalog(_to_entity(r) for r in rows)


def grade_models() -> List[str]:
    return list(GRADES)


def catalog_for(schema_name: str, model: Optional[str] = None) -> Optional[InMemoryCatalog]:
    """Catalog feeding a comparison surface, or None if the surface is unknown."""
    if schema_name == VEHICLE and not model:
        return vehicle_catalog()
    if schema_name == GRADE and model:
        return grade_catalog(model)
    return None
