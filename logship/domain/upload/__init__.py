"""
Upload job domain module
"""
from .models import UploadStage, UploadRecord, UploadResult
from .keys import generate_object_key
from .truncate import Truncator
from .deadline import Deadline, job_deadline
from .service import UploadJob

__all__ = [
    "UploadStage",
    "UploadRecord",
    "UploadResult",
    "generate_object_key",
    "Truncator",
    "Deadline",
    "job_deadline",
    "UploadJob",
]
