# compare/schema.py
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .entities import ComparableEntity, Value


@dataclass(frozen=True)
class Field:
    label: str
    extract: Callable[[ComparableEntity], Value]
    highlight: bool = False
    format: Optional[Callable[[Value], str]] = None

    def value_for(self, entity: ComparableEntity) -> Value:
        return self.extract(entity)


@dataclass(frozen=True)
class Section:
    title: str
    fields: Tuple[Field, ...]

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))

    def find(self, label: str) -> Optional[Field]:
        for f in self.fields:
            if f.label == label:
                return f
        return None

    def with_fields(self, fields: Iterable[Field]) -> "Section":
        return Section(self.title, tuple(fields))


@dataclass(frozen=True)
class AttributeSchema:
    """Ordered sections describing what a comparison surface shows.

    A surface only has to supply one of these; selection, windowing, sorting
    and diffing are shared.
    """
    name: str
    sections: Tuple[Section, ...]

    def __post_init__(self):
        object.__setattr__(self, "sections", tuple(self.sections))

    def __iter__(self):
        return iter(self.sections)

    def __len__(self):
        return len(self.sections)

    def fields(self) -> List[Field]:
        return [f for s in self.sections for f in s.fields]

    def field_labels(self) -> List[str]:
        return [f.label for f in self.fields()]

    def section_titles(self) -> List[str]:
        return [s.title for s in self.sections]

    def with_sections(self, sections: Iterable[Section]) -> "AttributeSchema":
        return AttributeSchema(self.name, tuple(sections))

    def only_sections(self, titles: Iterable[str]) -> "AttributeSchema":
        """Keep just the named sections (schema order, unknown titles ignored)."""
        wanted = set(titles)
        return self.with_sections(s for s in self.sections if s.title in wanted)


class SchemaRegistry:
    def __init__(self):
        self._schemas: Dict[str, AttributeSchema] = {}

    def register(self, schema: AttributeSchema) -> AttributeSchema:
        self._schemas[schema.name] = schema
        return schema

    def get(self, name: str) -> AttributeSchema:
        try:
            return self._schemas[name]
        except KeyError:
            raise KeyError(f"No comparison schema named {name!r}") from None

    def names(self) -> List[str]:
        return list(self._schemas)

    def __contains__(self, name) -> bool:
        return name in self._schemas


# Shared registry; the catalog app fills it once when Django loads apps and
# views only read it afterwards.
registry = SchemaRegistry()
