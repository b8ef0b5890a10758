"""Track label to file name conversion."""

from typing import Optional

from pathvalidate import sanitize_filename

from track_export.config import (
    FALLBACK_TRACK_LABEL,
    FILENAME_PLACEHOLDER,
    FILENAME_PLATFORM,
    MAX_FILENAME_LEN,
)


def sanitize(name: Optional[str], max_len: int = MAX_FILENAME_LEN) -> str:
    """Turn an arbitrary track label into a safe, non-empty file name.

    Illegal characters are replaced with an underscore, the result is cut
    to ``max_len`` characters and surrounding whitespace is trimmed.

    Args:
        name: Track label, may be empty or None
        max_len: Longest name to return; leave room for an extension

    Returns:
        A single valid path segment, never empty
    """
    if not name:
        return FALLBACK_TRACK_LABEL

    safe = sanitize_filename(
        name,
        replacement_text=FILENAME_PLACEHOLDER,
        platform=FILENAME_PLATFORM,
        max_len=max_len,
    ).strip()

    return safe or FALLBACK_TRACK_LABEL
