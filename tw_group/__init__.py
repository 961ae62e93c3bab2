"""Group Tailwind CSS utility classes into labeled categories."""

from .categories import CATEGORY_TABLE, Category, CategoryRule, label_for
from .classifier import classify
from .errors import ConfigError
from .formatter import FormatResult, format_class_string, format_classes
from .gate import gate_reason, should_group
from .grouping import Group, Grouping, group, grouping_to_dict
from .options import OutputFormat, RenderOptions, options_from_env
from .render import render

__all__ = [
    "CATEGORY_TABLE", "Category", "CategoryRule", "label_for",
    "classify",
    "ConfigError",
    "FormatResult", "format_class_string", "format_classes",
    "gate_reason", "should_group",
    "Group", "Grouping", "group", "grouping_to_dict",
    "OutputFormat", "RenderOptions", "options_from_env",
    "render",
]
