"""
Unified exception definitions

Every error carries the process exit code the CLI reports for it, so an
external supervisor can alert on specific codes.
"""
from typing import Optional


class LogshipError(Exception):
    """Base exception class"""
    exit_code = 1


class ConfigError(LogshipError):
    """Configuration error"""
    exit_code = 9


class NotFoundError(LogshipError):
    """Source file missing at a check point"""
    exit_code = 1

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"file not found: {path}")


class FileMissing(NotFoundError):
    """Source file disappeared before truncation"""
    exit_code = 4


# ============================================================
# Trigger Errors
# ============================================================

class TriggerError(LogshipError):
    """Remote job trigger error"""
    pass


class AuthFailure(TriggerError):
    """Crumb issuer unreachable, rejected the credentials, or returned nothing"""
    exit_code = 2


class ProtocolError(TriggerError):
    """Crumb issuer response is missing required fields"""
    exit_code = 2


class RemoteTriggerFailure(TriggerError):
    """Job trigger request was not accepted"""
    exit_code = 3

    def __init__(self, status_code: Optional[int], message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(
            message or f"Failed to trigger Jenkins job. HTTP status: {status_code}"
        )


# ============================================================
# Upload Job Errors
# ============================================================

class UploadJobError(LogshipError):
    """Upload job error"""
    pass


class UploadFailure(UploadJobError):
    """Transfer to the object store failed"""
    exit_code = 5


class VerifyFailure(UploadJobError):
    """Uploaded object cannot be read back"""
    exit_code = 6


class TruncateFailure(UploadJobError):
    """Truncation capability missing or the write failed"""
    exit_code = 7


class JobTimeout(UploadJobError):
    """Upload job exceeded its wall-clock budget"""
    exit_code = 8
