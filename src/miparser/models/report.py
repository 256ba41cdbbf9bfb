"""Main MediaReport model."""

from pydantic import BaseModel, Field

from .chapter import Chapter
from .tracks import AudioTrack, GeneralInfo, TextTrack, VideoTrack


class MediaReport(BaseModel):
    """Parsed MediaInfo report.

    This is the model returned by parse_report(). Values are stored in
    canonical units:

    - sizes in bytes
    - durations and chapter timestamps in milliseconds
    - bit rates in bits per second
    - sampling rates in Hz

    Track lists keep the order in which their sections appear in the report.
    """

    general: GeneralInfo = Field(default_factory=GeneralInfo)
    video: list[VideoTrack] = Field(default_factory=list)
    audio: list[AudioTrack] = Field(default_factory=list)
    text: list[TextTrack] = Field(default_factory=list)
    menu: list[Chapter] = Field(default_factory=list)

    @property
    def complete_name(self) -> str | None:
        """Return the reported file path."""
        return self.general.complete_name

    @property
    def duration(self) -> int | None:
        """Return overall duration in milliseconds."""
        return self.general.duration

    @property
    def has_chapters(self) -> bool:
        """Check if the report lists any chapters."""
        return bool(self.menu)
