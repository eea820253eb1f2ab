"""Filesystem-safe naming helpers."""

import re

# Characters rejected in a path segment by at least one common filesystem
INVALID_CHARS = '<>:"/\\|?*\x00'

_INVALID_CHARS_RE = re.compile("[" + re.escape(INVALID_CHARS) + "]")


def sanitize_name(name: str) -> str:
    """Strip characters that are illegal in a file or directory name.

    Every other character is kept as-is, in order: no trimming, no length
    limit and no case changes. Sanitizing twice gives the same result.

    Args:
        name: Original name, e.g. an artist tag

    Returns:
        Sanitized name
    """
    return _INVALID_CHARS_RE.sub("", name)
