"""
Explicit run configuration passed into each component
"""
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import (
    DEFAULT_LOG_PATH,
    DEFAULT_THRESHOLD_BYTES,
    DEFAULT_AUDIT_LOG,
    DEFAULT_JENKINS_URL,
    DEFAULT_JENKINS_JOB,
    DEFAULT_JENKINS_USER,
    DEFAULT_JOB_PARAMETER,
    DEFAULT_S3_BUCKET,
    DEFAULT_S3_REGION,
    DEFAULT_JOB_TIMEOUT,
    DEFAULT_TEE_PATH,
    TRUNCATE_MODES,
)
from .exceptions import ConfigError
from .utils import parse_size


@dataclass
class Credentials:
    """Jenkins user and API token"""
    username: str = DEFAULT_JENKINS_USER
    api_token: str = field(default="", repr=False)

    def as_auth(self) -> tuple[str, str]:
        """(user, token) pair for HTTP basic auth"""
        return self.username, self.api_token


@dataclass
class Settings:
    """Run configuration"""
    # Monitor
    log_path: str = DEFAULT_LOG_PATH
    threshold_bytes: int = DEFAULT_THRESHOLD_BYTES
    audit_log: Optional[str] = DEFAULT_AUDIT_LOG

    # Jenkins
    remote_base_url: str = DEFAULT_JENKINS_URL
    job_name: str = DEFAULT_JENKINS_JOB
    job_parameter: str = DEFAULT_JOB_PARAMETER
    credentials: Credentials = field(default_factory=Credentials)
    http_timeout: Optional[float] = None

    # Upload job
    bucket_name: str = DEFAULT_S3_BUCKET
    region: str = DEFAULT_S3_REGION
    job_timeout: float = DEFAULT_JOB_TIMEOUT
    truncate_mode: str = "auto"
    tee_path: str = DEFAULT_TEE_PATH

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check value ranges.

        Raises:
            ConfigError: If a value is out of range
        """
        if not self.log_path:
            raise ConfigError("log_path must not be empty")
        if self.threshold_bytes <= 0:
            raise ConfigError(f"threshold_bytes must be positive, got {self.threshold_bytes}")
        if not self.remote_base_url:
            raise ConfigError("remote_base_url must not be empty")
        if not self.job_name:
            raise ConfigError("job_name must not be empty")
        if self.job_timeout <= 0:
            raise ConfigError(f"job_timeout must be positive, got {self.job_timeout}")
        if self.http_timeout is not None and self.http_timeout <= 0:
            raise ConfigError(f"http_timeout must be positive, got {self.http_timeout}")
        if self.truncate_mode not in TRUNCATE_MODES:
            raise ConfigError(
                f"truncate_mode must be one of {', '.join(TRUNCATE_MODES)}, got {self.truncate_mode!r}"
            )

    @property
    def audit_path(self) -> Optional[Path]:
        """Audit log as a Path, None when disabled"""
        return Path(self.audit_log).expanduser() if self.audit_log else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """
        Create from a merged configuration dictionary.

        Unknown keys are ignored. Credentials may be given either as a nested
        `credentials` table or as flat `username` / `api_token` keys.

        Raises:
            ConfigError: If a value has the wrong type or is out of range
        """
        valid = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in valid and k != "credentials"}

        creds = dict(data.get("credentials") or {})
        for key in ("username", "api_token"):
            if key in data:
                creds[key] = data[key]
        values["credentials"] = Credentials(
            **{k: str(v) for k, v in creds.items() if k in ("username", "api_token")}
        )

        threshold = values.get("threshold_bytes")
        if isinstance(threshold, str):
            parsed = parse_size(threshold)
            if parsed is None:
                raise ConfigError(f"Invalid threshold: {threshold!r}")
            values["threshold_bytes"] = parsed

        try:
            if "threshold_bytes" in values:
                values["threshold_bytes"] = int(values["threshold_bytes"])
            for key in ("job_timeout", "http_timeout"):
                if values.get(key) is not None:
                    values[key] = float(values[key])
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid numeric configuration value: {e}") from e

        for key in ("log_path", "remote_base_url", "job_name", "bucket_name", "region"):
            if key in values and values[key] is not None:
                values[key] = str(values[key])

        return cls(**values)
