"""Detailed output formatter - every parsed field, unit-formatted."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from miparser.models import MediaReport
from miparser.utils import format_bitrate, format_duration, format_frequency, format_size

# Fields stored in canonical units and how to display them
FIELD_FORMATTERS: dict[str, Callable[[Any], str]] = {
    "file_size": format_size,
    "stream_size": format_size,
    "duration": format_duration,
    "overall_bit_rate": format_bitrate,
    "bit_rate": format_bitrate,
    "maximum_bit_rate": format_bitrate,
    "sampling_rate": format_frequency,
}


def _format_value(name: str, value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    formatter = FIELD_FORMATTERS.get(name)
    if formatter and isinstance(value, (int, float)) and not isinstance(value, bool):
        return formatter(value)
    return str(value)


def _format_record(record: BaseModel, indent: int = 2) -> list[str]:
    """Format the populated fields of a record as indented lines."""
    lines = []
    prefix = " " * indent
    for name in type(record).model_fields:
        value = getattr(record, name)
        if value is None:
            continue
        lines.append(f"{prefix}{name}: {_format_value(name, value)}")
    return lines


def format_detailed(report: MediaReport) -> str:
    """Format a report with all populated fields of every section."""
    lines = []

    lines.append("=== DETAILED MEDIA INFO ===")
    lines.append("")

    lines.append("GENERAL:")
    lines.extend(_format_record(report.general))

    for title, tracks in (
        ("VIDEO", report.video),
        ("AUDIO", report.audio),
        ("TEXT", report.text),
    ):
        for index, track in enumerate(tracks, start=1):
            lines.append("")
            lines.append(f"{title} TRACK {index}:")
            lines.extend(_format_record(track))

    if report.menu:
        lines.append("")
        lines.append("CHAPTERS:")
        for index, chapter in enumerate(report.menu, start=1):
            lines.append(f"  {index}. {format_duration(chapter.timestamp)} - {chapter.title}")

    return "\n".join(lines)
