"""Utility functions for miparser."""

from .display import format_bitrate, format_duration, format_frequency, format_size

__all__ = [
    "format_size",
    "format_duration",
    "format_bitrate",
    "format_frequency",
]
