"""miparser - MediaInfo text report parser.

Turn the plain-text output of MediaInfo into typed records.

Usage:
    from miparser import format_yaml, read_report

    # Parse a report file
    report = read_report("movie.txt")

    # Canonical units: bytes, milliseconds, bits/s, Hz
    print(report.general.file_size)
    for track in report.audio:
        print(track.language, track.sampling_rate)

    # Export as YAML
    print(format_yaml(report))
"""

from miparser._version import __version__
from miparser.formatters import (
    format_detailed,
    format_json,
    format_summary,
    format_yaml,
    to_dict,
)
from miparser.models import (
    AudioTrack,
    Chapter,
    GeneralInfo,
    MediaReport,
    TextTrack,
    VideoTrack,
)
from miparser.normalizers import (
    parse_bit_rate,
    parse_date,
    parse_duration,
    parse_frequency,
    parse_size,
)
from miparser.parser import parse_report
from miparser.reader import read_report, read_reports

__all__ = [
    # Version
    "__version__",
    # Main functions
    "parse_report",
    "read_report",
    "read_reports",
    # Models
    "MediaReport",
    "GeneralInfo",
    "VideoTrack",
    "AudioTrack",
    "TextTrack",
    "Chapter",
    # Normalizers
    "parse_size",
    "parse_duration",
    "parse_bit_rate",
    "parse_frequency",
    "parse_date",
    # Formatters
    "format_detailed",
    "format_summary",
    "format_yaml",
    "format_json",
    "to_dict",
]
