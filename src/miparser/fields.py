"""Per-section field tables.

Each section of a report has a closed vocabulary of keys. A key maps to a
FieldRule naming the model attribute it fills and, optionally, the
function converting the raw text value. Keys outside a table are ignored
so that reports from newer MediaInfo versions still parse.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from miparser.normalizers import (
    leading_float,
    leading_int,
    parse_bit_rate,
    parse_date,
    parse_duration,
    parse_frequency,
    parse_size,
)

logger = logging.getLogger(__name__)

_STREAM_SIZE = re.compile(r"(\d+\.?\d*\s+[A-Za-z]+)")


@dataclass(frozen=True)
class FieldRule:
    """Target attribute and optional converter for one report key."""

    field: str
    convert: Callable[[str], Any] | None = None


def parse_yes_no(value: str) -> bool:
    """Return True only for "Yes" (any case)."""
    return value.lower() == "yes"


def parse_grouped_int(value: str) -> int | None:
    """Parse an integer that may contain digit grouping ("1 920 pixels")."""
    return leading_int(re.sub(r"\s", "", value))


def parse_stream_size(value: str) -> int | None:
    """Parse the size prefix of a stream size ("393 MiB (6%)")."""
    match = _STREAM_SIZE.search(value)
    if not match:
        return None
    return parse_size(match.group(1))


GENERAL_FIELDS: dict[str, FieldRule] = {
    "Unique ID": FieldRule("unique_id"),
    "Complete name": FieldRule("complete_name"),
    "Format": FieldRule("format"),
    "Format version": FieldRule("format_version"),
    "File size": FieldRule("file_size", parse_size),
    "Duration": FieldRule("duration", parse_duration),
    "Overall bit rate mode": FieldRule("overall_bit_rate_mode"),
    "Overall bit rate": FieldRule("overall_bit_rate", parse_bit_rate),
    "Frame rate": FieldRule("frame_rate", leading_float),
    "Frame count": FieldRule("frame_count", parse_grouped_int),
    "Stream size": FieldRule("stream_size", parse_stream_size),
    "Encoded date": FieldRule("encoded_date", parse_date),
    "Writing application": FieldRule("writing_application"),
    "Writing library": FieldRule("writing_library"),
    "Attachments": FieldRule("attachments"),
}

VIDEO_FIELDS: dict[str, FieldRule] = {
    "ID": FieldRule("id", leading_int),
    "Format": FieldRule("format"),
    "Format/Info": FieldRule("format_info"),
    "Format profile": FieldRule("format_profile"),
    "Format settings": FieldRule("format_settings"),
    "Format settings, CABAC": FieldRule("format_settings_cabac"),
    "Format settings, Reference frames": FieldRule("format_settings_reference_frames"),
    "Codec ID": FieldRule("codec_id"),
    "Duration": FieldRule("duration", parse_duration),
    "Bit rate mode": FieldRule("bit_rate_mode"),
    "Bit rate": FieldRule("bit_rate", parse_bit_rate),
    "Maximum bit rate": FieldRule("maximum_bit_rate", parse_bit_rate),
    "Width": FieldRule("width", parse_grouped_int),
    "Height": FieldRule("height", parse_grouped_int),
    "Display aspect ratio": FieldRule("display_aspect_ratio"),
    "Frame rate mode": FieldRule("frame_rate_mode"),
    "Frame rate": FieldRule("frame_rate", leading_float),
    "Color space": FieldRule("color_space"),
    "Chroma subsampling": FieldRule("chroma_subsampling"),
    "Bit depth": FieldRule("bit_depth", leading_int),
    "Scan type": FieldRule("scan_type"),
    "Bits/(Pixel*Frame)": FieldRule("bits_per_pixel_frame", leading_float),
    "Stream size": FieldRule("stream_size", parse_stream_size),
    "Default": FieldRule("default", parse_yes_no),
    "Forced": FieldRule("forced", parse_yes_no),
}

AUDIO_FIELDS: dict[str, FieldRule] = {
    "ID": FieldRule("id", leading_int),
    "Format": FieldRule("format"),
    "Format settings": FieldRule("format_settings"),
    "Codec ID": FieldRule("codec_id"),
    "Duration": FieldRule("duration", parse_duration),
    "Bit rate mode": FieldRule("bit_rate_mode"),
    "Bit rate": FieldRule("bit_rate", parse_bit_rate),
    "Channel(s)": FieldRule("channels", leading_int),
    "Sampling rate": FieldRule("sampling_rate", parse_frequency),
    "Frame rate": FieldRule("frame_rate", leading_float),
    "Bit depth": FieldRule("bit_depth", leading_int),
    "Stream size": FieldRule("stream_size", parse_stream_size),
    "Title": FieldRule("title"),
    "Language": FieldRule("language"),
    "Default": FieldRule("default", parse_yes_no),
    "Forced": FieldRule("forced", parse_yes_no),
}

TEXT_FIELDS: dict[str, FieldRule] = {
    "ID": FieldRule("id", leading_int),
    "Format": FieldRule("format"),
    "Codec ID": FieldRule("codec_id"),
    "Codec ID/Info": FieldRule("codec_id_info"),
    "Duration": FieldRule("duration", parse_duration),
    "Bit rate": FieldRule("bit_rate", parse_bit_rate),
    "Frame rate": FieldRule("frame_rate", leading_float),
    "Count of elements": FieldRule("count_of_elements", leading_int),
    "Compression mode": FieldRule("compression_mode"),
    "Stream size": FieldRule("stream_size", parse_stream_size),
    "Title": FieldRule("title"),
    "Language": FieldRule("language"),
    "Default": FieldRule("default", parse_yes_no),
    "Forced": FieldRule("forced", parse_yes_no),
}

SECTION_FIELDS: dict[str, dict[str, FieldRule]] = {
    "general": GENERAL_FIELDS,
    "video": VIDEO_FIELDS,
    "audio": AUDIO_FIELDS,
    "text": TEXT_FIELDS,
}


def apply_field(record: BaseModel, table: dict[str, FieldRule], key: str, value: str) -> bool:
    """Store a key/value pair on record according to table.

    Args:
        record: Model instance being filled (modified in place)
        table: Field table of the record's section
        key: Report key, compared exactly
        value: Trimmed report value

    Returns:
        True if the key is part of the table
    """
    rule = table.get(key)
    if rule is None:
        logger.debug("Ignoring unknown key %r", key)
        return False

    converted = rule.convert(value) if rule.convert else value
    if converted is None:
        logger.debug("Could not convert %r value %r", key, value)
        return True

    setattr(record, rule.field, converted)
    return True
