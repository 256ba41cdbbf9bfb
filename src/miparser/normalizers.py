"""Unit normalizers for MediaInfo text values.

Each function turns a human-readable quantity ("1.50 GiB", "1 h 45 min",
"36.6 Mb/s", "48.0 kHz") into its canonical base unit. Malformed input
yields None instead of raising.
"""

import contextlib
import math
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

_LEADING_INT = re.compile(r"^[+-]?\d+")
_LEADING_FLOAT = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Size unit -> power of the multiplier
SIZE_POWERS = {
    "b": 0,
    "kib": 1,
    "mib": 2,
    "gib": 3,
    "tib": 4,
    "kb": 1,
    "mb": 2,
    "gb": 3,
    "tb": 4,
}

# Longest prefix first so "min" and "ms" are never read as "m..." or "s"
DURATION_UNITS = [
    ("min", 60_000),
    ("ms", 1),
    ("h", 3_600_000),
    ("s", 1_000),
]

# MediaInfo date formats
DATE_FORMATS = [
    "UTC %Y-%m-%d %H:%M:%S.%f",  # UTC 2023-01-15 12:34:56.789
    "UTC %Y-%m-%d %H:%M:%S",  # UTC 2023-01-15 12:34:56
    "%Y-%m-%d %H:%M:%S UTC",  # 2023-01-15 12:34:56 UTC
    "%Y-%m-%d %H:%M:%S.%f UTC",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
]


def leading_int(text: str) -> int | None:
    """Parse the integer at the start of text ("6 channels" -> 6)."""
    match = _LEADING_INT.match(text.strip())
    if not match:
        return None
    # int() refuses digit runs past sys.get_int_max_str_digits()
    with contextlib.suppress(ValueError):
        return int(match.group())
    return None


def _round_finite(value: float) -> int | None:
    """Round to int, or None for inf/nan."""
    if not math.isfinite(value):
        return None
    return round(value)


def leading_float(text: str) -> float | None:
    """Parse the number at the start of text ("23.976 (24000/1001) FPS" -> 23.976)."""
    match = _LEADING_FLOAT.match(text.strip())
    if not match:
        return None
    value = float(match.group())
    return value if math.isfinite(value) else None


def parse_size(size_str: str) -> int | None:
    """Parse a file size string (e.g. "6.10 GiB", "393 MiB") into bytes.

    Binary units (KiB, MiB, ...) step by 1024, decimal units (KB, MB, ...)
    by 1000. An unknown or missing unit is treated as bytes.
    """
    parts = size_str.split(" ")
    value = leading_float(parts[0].replace(",", ""))
    if value is None:
        return None

    unit = parts[1].lower() if len(parts) > 1 else ""
    power = SIZE_POWERS.get(unit, 0)
    multiplier = 1024 if "ib" in unit else 1000
    return _round_finite(value * multiplier**power)


def parse_duration(duration_str: str) -> int:
    """Parse a duration string (e.g. "23 min 50 s") into milliseconds.

    The string is read as alternating (number, unit) pairs. Pairs with an
    unrecognized unit or a non-numeric value contribute nothing.
    """
    parts = duration_str.split(" ")
    total_ms = 0
    for i in range(0, len(parts), 2):
        value = leading_int(parts[i])
        unit = parts[i + 1] if i + 1 < len(parts) else ""
        if value is None or not unit:
            continue
        for prefix, factor in DURATION_UNITS:
            if unit.startswith(prefix):
                total_ms += value * factor
                break
    return total_ms


def parse_bit_rate(bitrate_str: str) -> int | None:
    """Parse a bit rate string (e.g. "36.6 Mb/s", "2 304 kb/s") into bits per second."""
    clean = re.sub(r"\s", "", bitrate_str).lower()
    value = leading_float(clean)
    if value is None:
        return None

    if "mb/s" in clean:
        return _round_finite(value * 1_000_000)
    if "kb/s" in clean:
        return _round_finite(value * 1_000)
    return _round_finite(value)


def parse_frequency(frequency_str: str) -> int | None:
    """Parse a frequency string (e.g. "48.0 kHz") into Hz."""
    clean = re.sub(r"\s", "", frequency_str)
    value = leading_float(clean)
    if value is None:
        return None

    lowered = clean.lower()
    if "khz" in lowered:
        return _round_finite(value * 1_000)
    if "mhz" in lowered:
        return _round_finite(value * 1_000_000)
    return _round_finite(value)


def parse_date(date_str: str) -> datetime | None:
    """Parse a MediaInfo date string into a datetime.

    Accepts the forms MediaInfo writes ("UTC 2023-01-15 12:34:56",
    "2023-01-15 12:34:56 UTC"), ISO 8601 and RFC 2822. Dates carrying a
    UTC marker are returned timezone-aware.
    """
    if not date_str:
        return None
    text = date_str.strip()

    for fmt in DATE_FORMATS:
        with contextlib.suppress(ValueError):
            parsed = datetime.strptime(text, fmt)
            if "UTC" in fmt:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed

    with contextlib.suppress(ValueError):
        return datetime.fromisoformat(text.replace("Z", "+00:00"))

    with contextlib.suppress(TypeError, ValueError, IndexError):
        return parsedate_to_datetime(text)

    return None
