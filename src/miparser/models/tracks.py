"""Track models for the sections of a MediaInfo report."""

from datetime import datetime

from pydantic import BaseModel


class GeneralInfo(BaseModel):
    """Container-level information from the General section."""

    unique_id: str | None = None
    complete_name: str | None = None
    format: str | None = None
    format_version: str | None = None
    file_size: int | None = None  # bytes
    duration: int | None = None  # milliseconds
    overall_bit_rate_mode: str | None = None
    overall_bit_rate: int | None = None  # bps
    frame_rate: float | None = None
    frame_count: int | None = None
    stream_size: int | None = None  # bytes
    encoded_date: datetime | None = None
    writing_application: str | None = None
    writing_library: str | None = None
    attachments: str | None = None


class VideoTrack(BaseModel):
    """Video track information."""

    id: int | None = None
    format: str | None = None
    format_info: str | None = None
    format_profile: str | None = None
    format_settings: str | None = None
    format_settings_cabac: str | None = None
    format_settings_reference_frames: str | None = None
    codec_id: str | None = None
    duration: int | None = None  # milliseconds
    bit_rate_mode: str | None = None
    bit_rate: int | None = None  # bps
    maximum_bit_rate: int | None = None  # bps
    width: int | None = None  # pixels
    height: int | None = None  # pixels
    display_aspect_ratio: str | None = None
    frame_rate_mode: str | None = None
    frame_rate: float | None = None
    color_space: str | None = None
    chroma_subsampling: str | None = None
    bit_depth: int | None = None  # bits
    scan_type: str | None = None
    bits_per_pixel_frame: float | None = None
    stream_size: int | None = None  # bytes
    default: bool | None = None
    forced: bool | None = None

    @property
    def resolution(self) -> str | None:
        """Return resolution as WxH string."""
        if self.width and self.height:
            return f"{self.width}x{self.height}"
        return None


class AudioTrack(BaseModel):
    """Audio track information."""

    id: int | None = None
    format: str | None = None
    format_settings: str | None = None
    codec_id: str | None = None
    duration: int | None = None  # milliseconds
    bit_rate_mode: str | None = None
    bit_rate: int | None = None  # bps
    channels: int | None = None
    sampling_rate: int | None = None  # Hz
    frame_rate: float | None = None
    bit_depth: int | None = None  # bits
    stream_size: int | None = None  # bytes
    language: str | None = None
    title: str | None = None
    default: bool | None = None
    forced: bool | None = None


class TextTrack(BaseModel):
    """Subtitle (text) track information."""

    id: int | None = None
    format: str | None = None
    codec_id: str | None = None
    codec_id_info: str | None = None
    duration: int | None = None  # milliseconds
    bit_rate: int | None = None  # bps
    frame_rate: float | None = None
    count_of_elements: int | None = None
    compression_mode: str | None = None
    stream_size: int | None = None  # bytes
    language: str | None = None
    title: str | None = None
    default: bool | None = None
    forced: bool | None = None
