"""
Trigger domain models
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Any

from ...core.settings import Credentials


@dataclass(frozen=True)
class Crumb:
    """Anti-forgery token and the header it must be echoed back under"""
    field: str
    value: str

    def as_header(self) -> Dict[str, str]:
        return {self.field: self.value}

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["Crumb"]:
        """Build from a crumb issuer JSON body, None if a field is missing"""
        if not isinstance(payload, dict):
            return None
        value = payload.get("crumb")
        header = payload.get("crumbRequestField")
        if not value or not header:
            return None
        return cls(field=str(header), value=str(value))


@dataclass
class TriggerRequest:
    """
    One job trigger attempt.

    `parameters` maps job parameter names to already URL-encoded values.
    """
    job_name: str
    parameters: Dict[str, str]
    credentials: Credentials = field(repr=False)
    crumb: Crumb = field(repr=False)

    def query_string(self) -> str:
        return "&".join(f"{name}={value}" for name, value in self.parameters.items())


@dataclass
class TriggerResult:
    """Acknowledgement that the job was accepted"""
    status_code: int
    queue_url: Optional[str] = None
