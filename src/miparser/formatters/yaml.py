"""YAML output formatter."""

import yaml

from miparser.models import MediaReport


def format_yaml(report: MediaReport, indent: int = 2) -> str:
    """Format a report as a YAML document.

    Fields that were not present in the report are omitted. Dates are
    written as ISO 8601 strings.

    Args:
        report: MediaReport object
        indent: YAML indentation level

    Returns:
        YAML formatted string
    """
    data = report.model_dump(mode="json", exclude_none=True)
    return yaml.safe_dump(data, indent=indent, sort_keys=False, allow_unicode=True)
