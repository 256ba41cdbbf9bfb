"""Human-readable formatting of canonical units."""


def format_size(size_bytes: int | float) -> str:
    """Convert bytes to human-readable string ("1.50 GB")."""
    if size_bytes <= 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024:
            return f"{size:.2f} {unit}"
        size /= 1024
    return f"{size:.2f} TB"


def format_duration(ms: int) -> str:
    """Convert milliseconds to H:MM:SS.mmm (M:SS.mmm under an hour)."""
    hours, rest = divmod(int(ms), 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, millis = divmod(rest, 1_000)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}.{millis:03d}"
    return f"{minutes}:{seconds:02d}.{millis:03d}"


def format_bitrate(bps: int) -> str:
    """Convert bits per second to Mbps/kbps/bps."""
    if bps >= 1_000_000:
        return f"{bps / 1_000_000:.2f} Mbps"
    if bps >= 1_000:
        return f"{bps / 1_000:.2f} kbps"
    return f"{bps} bps"


def format_frequency(hz: int) -> str:
    """Convert Hz to kHz ("48000" -> "48 kHz")."""
    return f"{hz / 1000:g} kHz"
