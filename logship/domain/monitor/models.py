"""
Monitor domain models
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..trigger.models import TriggerResult


class ThresholdDecision(str, Enum):
    """Outcome of comparing a file size against the threshold"""
    BELOW = "below"
    AT_OR_ABOVE = "at_or_above"


@dataclass
class MonitorOutcome:
    """Result of one monitor run"""
    path: str
    size_bytes: int
    threshold_bytes: int
    decision: ThresholdDecision
    trigger: Optional[TriggerResult] = None

    @property
    def triggered(self) -> bool:
        return self.trigger is not None
