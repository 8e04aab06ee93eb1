"""ISO 8601 duration helpers for YouTube contentDetails.duration values."""

import re

_DURATION_PATTERN = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def _parse_components(duration: str) -> tuple[int, int, int] | None:
    match = _DURATION_PATTERN.search(duration)
    if not match:
        return None

    hours, minutes, seconds = match.groups()
    return int(hours or 0), int(minutes or 0), int(seconds or 0)


def iso_duration_to_seconds(duration: str) -> int:
    """Parse ISO 8601 duration to seconds.

    The first ``PT`` run found anywhere in the string is parsed. Strings
    without one normalize to 0 rather than raising.

    Args:
        duration: ISO 8601 duration string (e.g., "PT15M33S", "PT1H2M3S")

    Returns:
        Duration in seconds

    Example:
        >>> iso_duration_to_seconds("PT1H2M3S")
        3723
        >>> iso_duration_to_seconds("P1D")
        0
    """
    components = _parse_components(duration)
    if components is None:
        return 0

    hours, minutes, seconds = components
    return hours * 3600 + minutes * 60 + seconds


def format_duration(seconds: int) -> str:
    """Format a number of seconds as "M:SS" or "H:MM:SS".

    Example:
        >>> format_duration(933)
        '15:33'
        >>> format_duration(3723)
        '1:02:03'
    """
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
