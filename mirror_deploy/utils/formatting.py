"""Formatting utilities for display"""

from typing import Optional


def format_duration(seconds: Optional[float]) -> str:
    """Format duration in seconds to human readable format

    Args:
        seconds: Duration in seconds

    Returns:
        Human readable duration string

    Examples:
        >>> format_duration(1.5)
        '1.5s'
        >>> format_duration(65)
        '1m 5s'
    """
    if seconds is None:
        return "-"
    if seconds < 0:
        return "Invalid duration"

    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        minutes = int(seconds // 60)
        secs = int(seconds % 60)
        return f"{minutes}m {secs}s"
    else:
        hours = int(seconds // 3600)
        minutes = int((seconds % 3600) // 60)
        return f"{hours}h {minutes}m"


def format_path(path: str, max_length: int = 50) -> str:
    """Format path for display, truncating if needed

    Args:
        path: Path to format
        max_length: Maximum length

    Returns:
        Formatted path string
    """
    if len(path) <= max_length:
        return path

    # Keep beginning and end
    keep_start = max_length // 2 - 2
    keep_end = max_length - keep_start - 3

    return f"{path[:keep_start]}...{path[-keep_end:]}"
