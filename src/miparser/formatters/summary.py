"""Summary output formatter - the essentials of each track."""

from miparser.models import MediaReport
from miparser.utils import format_bitrate, format_duration, format_size


def _or_unknown(value: object) -> str:
    return "Unknown" if value is None else str(value)


def format_summary(report: MediaReport) -> str:
    """Format a report as a short summary.

    Shows file name, format, size, duration and overall bitrate, one line
    per video/audio/subtitle track and the number of chapters.
    """
    lines = []
    general = report.general

    lines.append("=== MEDIA INFO SUMMARY ===")
    lines.append("")

    if general.complete_name:
        lines.append(f"File: {general.complete_name}")
    if general.format:
        lines.append(f"Format: {general.format}")
    if general.file_size:
        lines.append(f"Size: {format_size(general.file_size)}")
    if general.duration:
        lines.append(f"Duration: {format_duration(general.duration)}")
    if general.overall_bit_rate:
        lines.append(f"Overall Bitrate: {format_bitrate(general.overall_bit_rate)}")

    # Video tracks
    lines.append("")
    lines.append(f"Video Tracks: {len(report.video)}")
    for index, video in enumerate(report.video, start=1):
        resolution = video.resolution or "Unknown"
        fps = f" @ {video.frame_rate:g}fps" if video.frame_rate else ""
        lines.append(f"  Track {index}: {video.format or 'Unknown'} {resolution}{fps}")
        if video.bit_rate:
            lines.append(f"    Bitrate: {format_bitrate(video.bit_rate)}")

    # Audio tracks
    lines.append("")
    lines.append(f"Audio Tracks: {len(report.audio)}")
    for index, audio in enumerate(report.audio, start=1):
        rate = f"{audio.sampling_rate / 1000:g}kHz" if audio.sampling_rate else "Unknown"
        lines.append(
            f"  Track {index}: {audio.format or 'Unknown'} {_or_unknown(audio.channels)}ch @ {rate}"
        )
        if audio.bit_rate:
            lines.append(f"    Bitrate: {format_bitrate(audio.bit_rate)}")
        if audio.language:
            lines.append(f"    Language: {audio.language}")

    # Subtitle tracks
    if report.text:
        lines.append("")
        lines.append(f"Subtitle Tracks: {len(report.text)}")
        for index, text in enumerate(report.text, start=1):
            lines.append(f"  Track {index}: {text.format or 'Unknown'}")
            if text.language:
                lines.append(f"    Language: {text.language}")

    if report.menu:
        lines.append("")
        lines.append(f"Chapters: {len(report.menu)}")

    return "\n".join(lines)
