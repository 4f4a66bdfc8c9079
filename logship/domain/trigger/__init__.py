"""
Trigger domain module
"""
from .models import Crumb, TriggerRequest, TriggerResult
from .client import TriggerClient

__all__ = [
    "Crumb",
    "TriggerRequest",
    "TriggerResult",
    "TriggerClient",
]
