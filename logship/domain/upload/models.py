"""
Upload job data models
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class UploadStage(str, Enum):
    """Upload job stages, in execution order"""
    CHECK = "check"
    UPLOAD = "upload"
    VERIFY = "verify"
    TRUNCATE = "truncate"


@dataclass(frozen=True)
class UploadRecord:
    """Where a log file was archived"""
    source_path: str
    bucket: str
    key: str

    @property
    def url(self) -> str:
        return f"s3://{self.bucket}/{self.key}"


@dataclass
class UploadResult:
    """Outcome of a completed upload job"""
    record: UploadRecord
    size_bytes: int
    stages: List[UploadStage] = field(default_factory=list)
