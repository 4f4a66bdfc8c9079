"""
Size probe and threshold gate
"""
from pathlib import Path
from typing import Union

from ...core.exceptions import NotFoundError
from ...core.logging import get_logger
from .models import ThresholdDecision

logger = get_logger(__name__)


def probe_size(path: Union[str, Path]) -> int:
    """
    Read a file's size in bytes.

    Args:
        path: Path to a regular file

    Returns:
        Size in bytes

    Raises:
        NotFoundError: If the path is not an existing regular file
    """
    p = Path(path)
    if not p.is_file():
        logger.error("file not found: %s", p)
        raise NotFoundError(str(p))

    try:
        size = p.stat().st_size
    except FileNotFoundError as e:
        # Removed between the check and the stat
        logger.error("file not found: %s", p)
        raise NotFoundError(str(p)) from e

    logger.info("%s size = %d bytes", p, size)
    return size


def evaluate_threshold(size: int, threshold: int) -> ThresholdDecision:
    """Compare a size against the threshold"""
    if size >= threshold:
        return ThresholdDecision.AT_OR_ABOVE
    return ThresholdDecision.BELOW


def exceeds_threshold(size: int, threshold: int) -> bool:
    """True when the size is at or above the threshold"""
    return evaluate_threshold(size, threshold) is ThresholdDecision.AT_OR_ABOVE
