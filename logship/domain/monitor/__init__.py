"""
Monitor domain module
"""
from .models import ThresholdDecision, MonitorOutcome
from .probe import probe_size, evaluate_threshold, exceeds_threshold
from .service import MonitorService

__all__ = [
    "ThresholdDecision",
    "MonitorOutcome",
    "probe_size",
    "evaluate_threshold",
    "exceeds_threshold",
    "MonitorService",
]
