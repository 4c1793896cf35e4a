"""Attribute impact analysis."""

from specscope.impact.ops import (
    AttributeImpact,
    analyze_all_attributes,
    analyze_attribute,
    find_undefined_references,
    list_attributes,
)
from specscope.impact.report import format_attribute_list, format_impact

__all__ = [
    "AttributeImpact",
    "analyze_all_attributes",
    "analyze_attribute",
    "find_undefined_references",
    "format_attribute_list",
    "format_impact",
    "list_attributes",
]
