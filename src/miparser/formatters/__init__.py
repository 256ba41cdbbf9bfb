"""Output formatters for miparser."""

from .detailed import format_detailed
from .json import format_json, to_dict
from .summary import format_summary
from .yaml import format_yaml

__all__ = [
    "format_detailed",
    "format_summary",
    "format_yaml",
    "format_json",
    "to_dict",
]
