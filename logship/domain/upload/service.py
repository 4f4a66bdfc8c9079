"""
Upload job - archive a log file to the object store and truncate it

Stages run in order and each one is a hard gate:

1. check     the source file exists, its metadata goes to the log
2. upload    copy it to (bucket, logs/<host>/<basename>.<timestamp>)
3. verify    the object can be read back under that key
4. truncate  empty the source file in place

Nothing is retried. Re-running after a failure uploads again under a new
timestamped key, so the semantics are at-least-once: if truncation fails
after a verified upload, the file stays large and the next run archives the
same content a second time.
"""
import stat
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from ...core.constants import DEFAULT_JOB_TIMEOUT
from ...core.exceptions import (
    FileMissing,
    NotFoundError,
    UploadFailure,
    VerifyFailure,
)
from ...core.interfaces import ObjectStore
from ...core.logging import get_logger
from ...core.settings import Settings
from ...core.telemetry import Telemetry, get_telemetry
from ...core.utils import format_size
from .deadline import Deadline, job_deadline
from .keys import generate_object_key
from .models import UploadRecord, UploadResult, UploadStage
from .truncate import Truncator

logger = get_logger(__name__)


class UploadJob:
    """
    Upload job - pure business logic.

    The generated key is handed from upload to verify in memory.
    """

    def __init__(
        self,
        object_store: ObjectStore,
        truncator: Truncator,
        job_timeout: float = DEFAULT_JOB_TIMEOUT,
        telemetry: Optional[Telemetry] = None,
        hostname: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None,
        on_stage: Optional[Callable[[UploadStage], None]] = None,
        on_complete: Optional[Callable[[UploadResult], None]] = None,
    ):
        """
        Initialize upload job.

        Args:
            object_store: Destination store
            truncator: Truncation capability for the source file
            job_timeout: Wall-clock budget for the whole job, in seconds
            telemetry: Telemetry collector (global instance if None)
            hostname: Short hostname for object keys (current host if None)
            clock: Returns the upload time (UTC now if None)
            on_stage: Callback when a stage starts (stage)
            on_complete: Callback when every stage succeeded (result)
        """
        self.object_store = object_store
        self.truncator = truncator
        self.job_timeout = job_timeout
        self.telemetry = telemetry or get_telemetry()
        self.hostname = hostname
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.on_stage = on_stage
        self.on_complete = on_complete

    @classmethod
    def from_settings(
        cls, settings: Settings, object_store: ObjectStore, **kwargs
    ) -> "UploadJob":
        truncator = Truncator(mode=settings.truncate_mode, tee_path=settings.tee_path)
        return cls(
            object_store=object_store,
            truncator=truncator,
            job_timeout=settings.job_timeout,
            **kwargs,
        )

    # ============================================================
    # Orchestration
    # ============================================================

    def run(self, log_path: str, bucket: str) -> UploadResult:
        """
        Execute all stages for one file.

        Args:
            log_path: Source log file
            bucket: Destination bucket

        Returns:
            UploadResult with the record of the archived object

        Raises:
            NotFoundError: If the file is missing at the check stage
            UploadFailure: If the transfer fails
            VerifyFailure: If the uploaded object cannot be read back
            FileMissing: If the file vanished before truncation
            TruncateFailure: If the file cannot be truncated
            JobTimeout: If the job exceeds its wall-clock budget
        """
        path = Path(log_path)
        logger.info("Preparing to upload %s to s3://%s/", path, bucket)
        completed = []

        try:
            with job_deadline(self.job_timeout) as deadline:
                self._enter(UploadStage.CHECK, deadline)
                with self.telemetry.timed("upload.check", path=str(path)):
                    size = self.check(path)
                completed.append(UploadStage.CHECK)

                self._enter(UploadStage.UPLOAD, deadline)
                with self.telemetry.timed("upload.upload", bucket=bucket) as meta:
                    record = self.upload(path, bucket)
                    meta["key"] = record.key
                self.telemetry.record_metric("upload.bytes", size, {"bucket": bucket})
                completed.append(UploadStage.UPLOAD)

                self._enter(UploadStage.VERIFY, deadline)
                with self.telemetry.timed("upload.verify", key=record.key):
                    self.verify(record)
                completed.append(UploadStage.VERIFY)

                self._enter(UploadStage.TRUNCATE, deadline)
                with self.telemetry.timed("upload.truncate", path=str(path)):
                    self.truncate(path)
                completed.append(UploadStage.TRUNCATE)
        except Exception as e:
            failed = _next_stage(completed)
            logger.error("FAILURE at stage %s: %s", failed.value if failed else "?", e)
            raise

        result = UploadResult(record=record, size_bytes=size, stages=completed)
        logger.info("Done. Uploaded and truncated %s.", path)
        if self.on_complete:
            self.on_complete(result)
        return result

    def _enter(self, stage: UploadStage, deadline: Deadline) -> None:
        deadline.check(stage.value)
        if self.on_stage:
            self.on_stage(stage)

    # ============================================================
    # Stages
    # ============================================================

    def check(self, path: Path) -> int:
        """
        Stage 1: the source must be an existing regular file.

        Returns:
            Size in bytes
        """
        if not path.is_file():
            logger.error("file does not exist: %s", path)
            raise NotFoundError(str(path))

        try:
            st = path.stat()
        except FileNotFoundError as e:
            logger.error("file does not exist: %s", path)
            raise NotFoundError(str(path)) from e

        mtime = datetime.fromtimestamp(st.st_mtime).strftime("%Y-%m-%d %H:%M:%S")
        logger.info(
            "File info: %s %s %s %s",
            stat.filemode(st.st_mode),
            format_size(st.st_size),
            mtime,
            path,
        )
        logger.info("%s %d bytes", path, st.st_size)
        return st.st_size

    def upload(self, path: Path, bucket: str) -> UploadRecord:
        """Stage 2: copy the file under a freshly generated key"""
        key = generate_object_key(str(path), hostname=self.hostname, now=self.clock())
        record = UploadRecord(source_path=str(path), bucket=bucket, key=key)

        logger.info("Uploading %s to %s", path, record.url)
        try:
            self.object_store.upload_file(bucket, key, path)
        except OSError as e:
            raise UploadFailure(f"Failed to read {path}: {e}") from e
        return record

    def verify(self, record: UploadRecord) -> None:
        """Stage 3: the object must exist under the key just written"""
        logger.info("Verifying %s", record.url)
        if not self.object_store.exists(record.bucket, record.key):
            logger.error("Uploaded object not found: %s", record.url)
            raise VerifyFailure(f"Uploaded object not found: {record.url}")
        logger.info("Upload verified.")

    def truncate(self, path: Path) -> None:
        """Stage 4: empty the source file in place"""
        if not path.is_file():
            logger.error("file not found: %s", path)
            raise FileMissing(str(path))

        self.truncator.truncate(path)
        logger.info("Truncated %s", path)


def _next_stage(completed: list) -> Optional[UploadStage]:
    for stage in UploadStage:
        if stage not in completed:
            return stage
    return None
