"""
Jenkins job trigger client
"""
from typing import Optional

import requests

from ...core.constants import CRUMB_ISSUER_PATH, BUILD_WITH_PARAMETERS_PATH
from ...core.exceptions import AuthFailure, ProtocolError, RemoteTriggerFailure
from ...core.logging import get_logger
from ...core.settings import Credentials, Settings
from ...core.utils import encode_uri_component, join_url
from .models import Crumb, TriggerRequest, TriggerResult

logger = get_logger(__name__)


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class TriggerClient:
    """
    Starts a parameterized Jenkins job.

    Two round trips: fetch a CSRF crumb from the crumb issuer, then POST to
    the job's buildWithParameters endpoint with the crumb header attached.
    The build itself is not awaited; a 2xx answer means the job was queued.
    """

    def __init__(
        self,
        base_url: str,
        job_name: str,
        credentials: Credentials,
        job_parameter: str = "LOG_PATH",
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize trigger client.

        Args:
            base_url: Jenkins root URL, trailing slash optional
            job_name: Job to trigger
            credentials: Jenkins user and API token
            job_parameter: Name of the job parameter carrying the log path
            session: HTTP session (a new requests.Session if None)
            timeout: Per-request timeout in seconds, None waits indefinitely
        """
        self.base_url = base_url
        self.job_name = job_name
        self.credentials = credentials
        self.job_parameter = job_parameter
        self.session = session or requests.Session()
        self.timeout = timeout

    @classmethod
    def from_settings(
        cls, settings: Settings, session: Optional[requests.Session] = None
    ) -> "TriggerClient":
        return cls(
            base_url=settings.remote_base_url,
            job_name=settings.job_name,
            credentials=settings.credentials,
            job_parameter=settings.job_parameter,
            session=session,
            timeout=settings.http_timeout,
        )

    # --------------------
    # Step 1-2: crumb
    # --------------------
    def fetch_crumb(self) -> Crumb:
        """
        Request an anti-forgery crumb.

        Raises:
            AuthFailure: If the issuer is unreachable, answers non-2xx, or
                returns an empty body
            ProtocolError: If the body lacks `crumb` or `crumbRequestField`
        """
        url = join_url(self.base_url, CRUMB_ISSUER_PATH)
        logger.info("Requesting crumb from %s", url)

        try:
            response = self.session.get(
                url,
                auth=self.credentials.as_auth(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("failed to get crumb from Jenkins: %s", e)
            raise AuthFailure(f"Crumb issuer unreachable: {e}") from e

        if not _is_success(response.status_code):
            logger.error("failed to get crumb from Jenkins. HTTP status: %s", response.status_code)
            raise AuthFailure(f"Crumb issuer returned HTTP {response.status_code}")

        if not response.text.strip():
            logger.error("failed to get crumb from Jenkins. Response empty.")
            raise AuthFailure("Crumb issuer returned an empty response")

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("crumb response is not valid JSON")
            raise ProtocolError(f"Crumb response is not valid JSON: {e}") from e

        crumb = Crumb.from_payload(payload)
        if crumb is None:
            logger.error("crumb response lacks crumb/crumbRequestField")
            raise ProtocolError("Crumb response lacks 'crumb' or 'crumbRequestField'")

        logger.info("Received crumb for header %s", crumb.field)
        return crumb

    # --------------------
    # Step 3: trigger
    # --------------------
    def build_request(self, log_path: str, crumb: Crumb) -> TriggerRequest:
        """Assemble the trigger request for a log path"""
        return TriggerRequest(
            job_name=self.job_name,
            parameters={self.job_parameter: encode_uri_component(log_path)},
            credentials=self.credentials,
            crumb=crumb,
        )

    def trigger_url(self, request: TriggerRequest) -> str:
        path = BUILD_WITH_PARAMETERS_PATH.format(job=encode_uri_component(request.job_name))
        return f"{join_url(self.base_url, path)}?{request.query_string()}"

    def send(self, request: TriggerRequest) -> TriggerResult:
        """
        POST a prepared trigger request.

        Raises:
            RemoteTriggerFailure: If the status is outside [200, 300) or the
                request could not be sent
        """
        url = self.trigger_url(request)
        logger.info("Triggering Jenkins job %s", request.job_name)

        try:
            response = self.session.post(
                url,
                headers=request.crumb.as_header(),
                auth=request.credentials.as_auth(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Failed to trigger Jenkins job: %s", e)
            raise RemoteTriggerFailure(None, f"Failed to trigger Jenkins job: {e}") from e

        if not _is_success(response.status_code):
            logger.error("Failed to trigger Jenkins job. HTTP status: %s", response.status_code)
            raise RemoteTriggerFailure(response.status_code)

        logger.info("Triggered Jenkins job successfully (HTTP %s).", response.status_code)
        return TriggerResult(
            status_code=response.status_code,
            queue_url=response.headers.get("Location"),
        )

    def trigger(self, log_path: str) -> TriggerResult:
        """
        Fetch a crumb and trigger the job with the log path as parameter.

        The POST is only issued once both crumb fields were obtained.
        """
        crumb = self.fetch_crumb()
        return self.send(self.build_request(log_path, crumb))
