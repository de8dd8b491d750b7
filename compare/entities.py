# compare/entities.py
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping, Union

# Raw attribute value as extracted from an entity. None means "not available".
Value = Union[str, int, float, Decimal, bool, None]


@dataclass(frozen=True)
class ComparableEntity:
    """A vehicle or trim grade that can sit in a comparison.

    Owned by the catalog; the engine only reads it.
    """
    id: str
    name: str
    price: Union[int, float, Decimal]
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # freeze the bag so extractors can't mutate catalog data
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __hash__(self):
        # attributes is a mapping proxy, so hash on identity in the catalog
        return hash(self.id)

    def attr(self, key: str, default=None):
        return self.attributes.get(key, default)

    def __str__(self):
        return self.name
