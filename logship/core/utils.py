"""
Core utility functions
"""
import socket
from typing import Optional
from urllib.parse import quote

from .constants import UNKNOWN_HOST


# ============================================================
# Host & URL Helpers
# ============================================================

def short_hostname() -> str:
    """Hostname up to the first dot, like `hostname -s`"""
    try:
        name = socket.gethostname()
    except OSError:
        return UNKNOWN_HOST
    return name.split(".", 1)[0] or UNKNOWN_HOST


def encode_uri_component(value: str) -> str:
    """
    Percent-encode everything outside the RFC 3986 unreserved set.

    `/` is encoded too, so a path is safe to embed as a query value.
    """
    return quote(value, safe="")


def join_url(base: str, path: str) -> str:
    """Join a base URL and a relative path with exactly one slash"""
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


# ============================================================
# Size Parsing & Formatting
# ============================================================

_UNIT_MULTIPLIERS = {
    "B": 1,
    "K": 1024,
    "KB": 1024,
    "M": 1024 ** 2,
    "MB": 1024 ** 2,
    "G": 1024 ** 3,
    "GB": 1024 ** 3,
    "T": 1024 ** 4,
    "TB": 1024 ** 4,
}


def parse_size(size_str: str) -> Optional[int]:
    """
    Parse size string (e.g., "4M", "100K", "1GB") to bytes.

    Args:
        size_str: Size string

    Returns:
        Size in bytes or None if invalid
    """
    size_str = size_str.strip().upper()

    if not size_str:
        return None

    # Find unit, longest suffix first
    unit = None
    for u in sorted(_UNIT_MULTIPLIERS, key=len, reverse=True):
        if size_str.endswith(u):
            unit = u
            break

    if unit:
        number_str = size_str[:-len(unit)]
    else:
        # No unit, assume bytes
        number_str = size_str
        unit = "B"

    try:
        number = float(number_str)
    except ValueError:
        return None
    if number < 0:
        return None
    return int(number * _UNIT_MULTIPLIERS[unit])


def format_size(num_bytes: int) -> str:
    """Human-readable size, like `ls -lh`"""
    size = float(num_bytes)
    for unit in ("B", "K", "M", "G", "T"):
        if size < 1024 or unit == "T":
            if unit == "B":
                return f"{int(size)}B"
            return f"{size:.1f}{unit}"
        size /= 1024
    return f"{num_bytes}B"
