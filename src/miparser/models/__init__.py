"""Pydantic models for miparser."""

from .chapter import Chapter
from .report import MediaReport
from .tracks import AudioTrack, GeneralInfo, TextTrack, VideoTrack

__all__ = [
    # Main model
    "MediaReport",
    # Sections
    "GeneralInfo",
    "VideoTrack",
    "AudioTrack",
    "TextTrack",
    "Chapter",
]
