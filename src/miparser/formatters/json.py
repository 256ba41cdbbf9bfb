"""JSON output formatter."""

from typing import Any

from miparser.models import MediaReport


def format_json(report: MediaReport, indent: int = 2) -> str:
    """Format a report as JSON string.

    Args:
        report: MediaReport object
        indent: JSON indentation level

    Returns:
        JSON formatted string
    """
    return report.model_dump_json(indent=indent, exclude_none=True)


def to_dict(report: MediaReport) -> dict[str, Any]:
    """Convert a report to a JSON-compatible dictionary."""
    return report.model_dump(mode="json")
