"""Shared fixtures: fake HTTP session, fake object store, isolated environment."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from logship.core.exceptions import UploadFailure
from logship.core.interfaces import ObjectStore
from logship.core.settings import Credentials, Settings
from logship.core.telemetry import Telemetry

_ENV_VARS = (
    "LOG_PATH",
    "S3_BUCKET",
    "S3_REGION",
    "AWS_DEFAULT_REGION",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep job-runner and LOGSHIP_* variables from leaking into tests"""
    import os

    for name in list(os.environ):
        if name.startswith("LOGSHIP_") or name in _ENV_VARS:
            monkeypatch.delenv(name, raising=False)


# ============================================================
# HTTP fakes
# ============================================================

class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "", headers: Optional[Dict[str, str]] = None):
        self.status_code = status_code
        self.text = text
        self.headers = headers or {}

    def json(self) -> Any:
        return json.loads(self.text)


def crumb_response(crumb: str = "abc123", field: str = "Jenkins-Crumb") -> FakeResponse:
    return FakeResponse(200, json.dumps({
        "_class": "hudson.security.csrf.DefaultCrumbIssuer",
        "crumb": crumb,
        "crumbRequestField": field,
    }))


class FakeSession:
    """Records requests and replays canned responses (or raises them)"""

    def __init__(self, get_response: Any = None, post_response: Any = None):
        self.get_response = get_response if get_response is not None else crumb_response()
        self.post_response = post_response if post_response is not None else FakeResponse(201)
        self.calls: List[Dict[str, Any]] = []

    def _reply(self, method: str, response: Any, url: str, **kwargs) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url, **kwargs):
        return self._reply("GET", self.get_response, url, **kwargs)

    def post(self, url, **kwargs):
        return self._reply("POST", self.post_response, url, **kwargs)

    @property
    def methods(self) -> List[str]:
        return [c["method"] for c in self.calls]


# ============================================================
# Object store fake
# ============================================================

class FakeObjectStore(ObjectStore):
    """In-memory store; `report_exists=False` simulates an unreadable upload"""

    def __init__(self, report_exists: bool = True, upload_error: Optional[Exception] = None):
        self.report_exists = report_exists
        self.upload_error = upload_error
        self.objects: Dict[tuple, bytes] = {}
        self.head_calls: List[tuple] = []

    def upload_file(self, bucket: str, key: str, local_path: Path) -> None:
        if self.upload_error is not None:
            raise self.upload_error
        self.objects[(bucket, key)] = Path(local_path).read_bytes()

    def exists(self, bucket: str, key: str) -> bool:
        self.head_calls.append((bucket, key))
        return self.report_exists and (bucket, key) in self.objects


# ============================================================
# Fixtures
# ============================================================

THRESHOLD = 1024


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        log_path=str(tmp_path / "access.log"),
        threshold_bytes=THRESHOLD,
        audit_log=None,
        remote_base_url="http://jenkins.test:8080/",
        job_name="upload-access-log",
        credentials=Credentials(username="admin", api_token="s3cret"),
        bucket_name="logs-test",
    )


@pytest.fixture
def telemetry() -> Telemetry:
    return Telemetry()


@pytest.fixture
def make_log(tmp_path):
    """Create a log file of a given size"""
    def _make(size: int, name: str = "access.log") -> Path:
        path = tmp_path / name
        path.write_bytes(b"x" * size)
        return path
    return _make


@pytest.fixture
def fake_store() -> FakeObjectStore:
    return FakeObjectStore()


@pytest.fixture
def failing_upload_store() -> FakeObjectStore:
    return FakeObjectStore(upload_error=UploadFailure("connection reset"))
