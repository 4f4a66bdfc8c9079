"""
Object key generation
"""
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Optional

from ...core.constants import OBJECT_KEY_PREFIX, OBJECT_KEY_TIMESTAMP_FORMAT
from ...core.utils import short_hostname


def generate_object_key(
    source_path: str,
    hostname: Optional[str] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Build `logs/<short-host>/<basename>.<YYYYMMDDTHHMMSS>` for a log file.

    The timestamp is UTC with one-second resolution, so two uploads of the
    same basename from the same host within one second get the same key.

    Args:
        source_path: Local path of the log file
        hostname: Short hostname (current host if None)
        now: Upload time (current UTC time if None)

    Returns:
        Object key
    """
    host = hostname or short_hostname()
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    stamp = moment.strftime(OBJECT_KEY_TIMESTAMP_FORMAT)
    basename = PurePath(source_path).name
    return f"{OBJECT_KEY_PREFIX}/{host}/{basename}.{stamp}"
