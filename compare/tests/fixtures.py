from catalog.providers import InMemoryCatalog
from compare.entities import ComparableEntity
from compare.schema import AttributeSchema, Field, Section


def car(id, name=None, price=0, **attrs):
    return ComparableEntity(id=id, name=name or id, price=price, attributes=attrs)


A = car("A", "Alpha", 30000, engine_type="Hybrid", seats=5)
B = car("B", "Bravo", 20000, engine_type="Hybrid", seats=5)
C = car("C", "Charlie", 25000, engine_type="Petrol", seats=7)
D = car("D", "Delta", 40000, engine_type="Electric", seats=5)


def catalog(*entities):
    return InMemoryCatalog(entities or (A, B, C, D))


def sample_schema():
    return AttributeSchema("test", (
        Section("Pricing", (
            Field("Price", lambda e: e.price, highlight=True),
        )),
        Section("Specs", (
            Field("Engine Type", lambda e: e.attr("engine_type"), highlight=True),
            Field("Seats", lambda e: e.attr("seats")),
        )),
        Section("Warranty", (
            Field("Warranty", lambda e: "5 years"),
        )),
    ))
