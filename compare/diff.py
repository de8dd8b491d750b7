# compare/diff.py
from decimal import Decimal
from typing import List, Sequence

from .entities import ComparableEntity, Value
from .schema import AttributeSchema, Field


def normalize(value: Value):
    """
    Reduce a raw extracted value to something hashable and comparable.

    bool is checked before numbers (True would otherwise equal 1), numbers
    compare by value across int/float/Decimal, strings ignore outer whitespace.
    """
    if value is None:
        return ("none", None)
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, (int, float, Decimal)):
        return ("number", Decimal(str(value)))
    return ("text", str(value).strip())


def has_difference(field: Field, entities: Sequence[ComparableEntity]) -> bool:
    if len(entities) <= 1:
        return False
    values = {normalize(field.extract(e)) for e in entities}
    return len(values) > 1


def differing_labels(schema: AttributeSchema, entities: Sequence[ComparableEntity]) -> List[str]:
    return [f.label for f in schema.fields() if has_difference(f, entities)]
