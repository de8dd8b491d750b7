# compare/filters.py
from typing import Sequence

from .diff import has_difference
from .entities import ComparableEntity
from .schema import AttributeSchema

MODE_ALL = "all"
MODE_HIGHLIGHTS = "highlights"
MODE_DIFFERENCES = "differences"
MODE_CHOICES = [MODE_ALL, MODE_HIGHLIGHTS, MODE_DIFFERENCES]


def coerce_mode(raw) -> str:
    mode = (raw or MODE_ALL).strip().lower() if isinstance(raw, str) else MODE_ALL
    return mode if mode in MODE_CHOICES else MODE_ALL


def filter_sections(schema: AttributeSchema, mode: str,
                    visible_entities: Sequence[ComparableEntity]) -> AttributeSchema:
    """
    Fields to render for a view mode.

    'differences' compares only the entities passed in (the visible window).
    Sections left without fields are dropped; schema order is kept.
    """
    if mode == MODE_HIGHLIGHTS:
        keep = lambda f: f.highlight
    elif mode == MODE_DIFFERENCES:
        keep = lambda f: has_difference(f, visible_entities)
    else:
        return schema

    sections = []
    for section in schema.sections:
        fields = [f for f in section.fields if keep(f)]
        if fields:
            sections.append(section.with_fields(fields))
    return schema.with_sections(sections)
