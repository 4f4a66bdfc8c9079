"""
logship - size-triggered log archiving

A monitor checks a log file against a size threshold and, when reached,
triggers a Jenkins job. The job uploads the file to S3, verifies the object
and truncates the original in place.
"""

__version__ = "0.1.0"

# Export core components
from .core import (
    setup_logging,
    get_logger,
    parse_size,
)
from .core.settings import Settings, Credentials

# Export domain components
from .domain.monitor import (
    MonitorService,
    MonitorOutcome,
    ThresholdDecision,
    probe_size,
    evaluate_threshold,
    exceeds_threshold,
)

from .domain.trigger import (
    TriggerClient,
    TriggerResult,
    Crumb,
)

from .domain.upload import (
    UploadJob,
    UploadRecord,
    UploadResult,
    Truncator,
    generate_object_key,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "setup_logging",
    "get_logger",
    "parse_size",
    "Settings",
    "Credentials",
    # Monitor
    "MonitorService",
    "MonitorOutcome",
    "ThresholdDecision",
    "probe_size",
    "evaluate_threshold",
    "exceeds_threshold",
    # Trigger
    "TriggerClient",
    "TriggerResult",
    "Crumb",
    # Upload job
    "UploadJob",
    "UploadRecord",
    "UploadResult",
    "Truncator",
    "generate_object_key",
]
