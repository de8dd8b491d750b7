from django import template

from ..diff import has_difference
from ..formatting import format_value, money

register = template.Library()


@register.filter
def field_value(field, entity):
    """Usage: {{ field|field_value:car }}"""
    return format_value(field, field.value_for(entity))


@register.filter
def differs(field, entities):
    return has_difference(field, list(entities or ()))


@register.filter
def compare_money(value, code=None):
    return money(value, code)
