"""MediaInfo text report parser.

Usage:
    from miparser import parse_report

    report = parse_report(text)
    print(report.general.file_size)     # bytes
    print(report.video[0].resolution)   # "1920x1080"

The parser makes a single pass over the report. Blank lines close a
section, header lines ("Video", "Audio #2") open one, and "key : value"
lines fill the record of the open section. Unknown sections, keys and
malformed values are skipped; only non-text input is an error.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from miparser.fields import SECTION_FIELDS, apply_field
from miparser.models import AudioTrack, Chapter, MediaReport, TextTrack, VideoTrack

logger = logging.getLogger(__name__)

SECTION_HEADER = re.compile(r"^(General|Video|Audio|Text|Menu)(?: #\d+)?$")
CHAPTER_LINE = re.compile(r"(\d{2}:\d{2}:\d{2}\.\d{3})\s+:\s+.*?:(.*)")
KEY_VALUE_LINE = re.compile(r"^\s*([^:]+?)\s+:\s+(.*)$")

TRACK_SECTIONS = {
    "video": VideoTrack,
    "audio": AudioTrack,
    "text": TextTrack,
}
MENU_SECTION = "menu"


class LineKind(str, Enum):
    """Kinds of report lines."""

    BLANK = "blank"
    HEADER = "header"
    CHAPTER = "chapter"
    FIELD = "field"
    OTHER = "other"


@dataclass
class ScanState:
    """Parser position: open section and index of the track being filled."""

    section: str = ""
    track_index: int = -1


def parse_timestamp(timestamp: str) -> int:
    """Convert an HH:MM:SS.mmm timestamp into milliseconds."""
    hours, minutes, seconds, millis = (int(part) for part in re.split(r"[:.]", timestamp))
    return hours * 3_600_000 + minutes * 60_000 + seconds * 1_000 + millis


def _chapter_from_match(match: re.Match[str]) -> Chapter:
    return Chapter(timestamp=parse_timestamp(match.group(1)), title=match.group(2).strip())


def parse_chapter(line: str) -> Chapter | None:
    """Parse a Menu line such as "00:23:50.000 : en:Chapter 5"."""
    match = CHAPTER_LINE.search(line)
    if not match:
        return None
    return _chapter_from_match(match)


def classify_line(line: str, section: str) -> tuple[LineKind, re.Match[str] | None]:
    """Determine what a line is, given the currently open section.

    Returns:
        Tuple of the line kind and the regex match for it (None for
        blank and unrecognized lines)
    """
    if not line.strip():
        return LineKind.BLANK, None

    match = SECTION_HEADER.match(line)
    if match:
        return LineKind.HEADER, match

    if section == MENU_SECTION:
        match = CHAPTER_LINE.search(line)
        return (LineKind.CHAPTER, match) if match else (LineKind.OTHER, None)

    match = KEY_VALUE_LINE.match(line)
    if match:
        return LineKind.FIELD, match
    return LineKind.OTHER, None


def _open_section(name: str, state: ScanState, report: MediaReport) -> None:
    """Switch to a new section, starting a new track for track sections."""
    state.section = name.lower()
    track_cls = TRACK_SECTIONS.get(state.section)
    if track_cls is None:
        state.track_index = -1
        return

    tracks = getattr(report, state.section)
    tracks.append(track_cls())
    state.track_index = len(tracks) - 1


def _store_field(key: str, value: str, state: ScanState, report: MediaReport) -> None:
    """Hand a key/value pair to the field table of the open section."""
    table = SECTION_FIELDS.get(state.section)
    if table is None:
        return

    if state.section in TRACK_SECTIONS:
        if state.track_index < 0:
            return
        record = getattr(report, state.section)[state.track_index]
    else:
        record = report.general

    apply_field(record, table, key, value)


def parse_report(text: str | bytes) -> MediaReport:
    """Parse a MediaInfo text report.

    Args:
        text: Full report text. Bytes are decoded as UTF-8.

    Returns:
        MediaReport with all recognized fields in canonical units

    Raises:
        TypeError: If text is neither str nor bytes
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    if not isinstance(text, str):
        raise TypeError(f"Report text must be str or bytes, not {type(text).__name__}")

    report = MediaReport()
    state = ScanState()

    for line in text.split("\n"):
        line = line.rstrip("\r")
        kind, match = classify_line(line, state.section)

        if kind is LineKind.BLANK:
            state.section = ""
        elif kind is LineKind.HEADER:
            _open_section(match.group(1), state, report)
        elif kind is LineKind.CHAPTER:
            report.menu.append(_chapter_from_match(match))
        elif kind is LineKind.FIELD:
            _store_field(match.group(1).strip(), match.group(2).strip(), state, report)
        else:
            logger.debug("Skipping line %r", line)

    return report
