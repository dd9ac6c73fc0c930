"""Duration formatting for ETA and completion stamps."""
import math


def format_duration(seconds: float, milliseconds: bool = False) -> str:
    """
    Format a duration as ``HH:MM:SS`` or ``HH:MM:SS.mmm``.

    Hours are not wrapped at 24. Sub-second parts are truncated and
    negative durations are shown as zero.

    Args:
        seconds: Duration in seconds
        milliseconds: Append a three-digit millisecond field

    Returns:
        Formatted duration string
    """
    total_ms = max(0, math.floor(seconds * 1000))
    total_s, ms = divmod(total_ms, 1000)
    minutes, secs = divmod(total_s, 60)
    hours, minutes = divmod(minutes, 60)

    text = f"{hours:02d}:{minutes:02d}:{secs:02d}"
    if milliseconds:
        text += f".{ms:03d}"
    return text
