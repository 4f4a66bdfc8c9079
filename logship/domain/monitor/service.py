"""
Monitor domain service - business logic
"""
from typing import Optional, Callable

from ...core.logging import get_logger
from ...core.settings import Settings
from ...core.telemetry import Telemetry, get_telemetry
from ..trigger.client import TriggerClient
from ..trigger.models import TriggerResult
from .models import MonitorOutcome, ThresholdDecision
from .probe import probe_size, evaluate_threshold

logger = get_logger(__name__)


class MonitorService:
    """
    Monitor service - pure business logic.

    Probes a log file and triggers the upload job once it reaches the
    threshold. Stateless: every run stands on its own, retrying is left to
    whatever schedules the monitor.
    """

    def __init__(
        self,
        settings: Settings,
        trigger_client: TriggerClient,
        telemetry: Optional[Telemetry] = None,
        on_probed: Optional[Callable[[str, int], None]] = None,
        on_below: Optional[Callable[[int, int], None]] = None,
        on_triggered: Optional[Callable[[TriggerResult], None]] = None,
    ):
        """
        Initialize monitor service.

        Args:
            settings: Run configuration
            trigger_client: Client used when the threshold is reached
            telemetry: Telemetry collector (global instance if None)
            on_probed: Callback after probing (path, size)
            on_below: Callback when nothing needs doing (size, threshold)
            on_triggered: Callback after the job was accepted (result)
        """
        self.settings = settings
        self.trigger_client = trigger_client
        self.telemetry = telemetry or get_telemetry()
        self.on_probed = on_probed
        self.on_below = on_below
        self.on_triggered = on_triggered

    def run(self, log_path: Optional[str] = None) -> MonitorOutcome:
        """
        Execute one monitor run.

        Process:
        1. Probe the file size
        2. Compare against the threshold
        3. Trigger the upload job if at or above it

        Args:
            log_path: File to check, falls back to the configured path

        Returns:
            MonitorOutcome describing the decision and trigger result

        Raises:
            NotFoundError: If the file does not exist
            TriggerError: If the job could not be triggered
        """
        path = log_path or self.settings.log_path
        threshold = self.settings.threshold_bytes

        # Step 1: Probe
        with self.telemetry.timed("monitor.probe", path=path) as meta:
            size = probe_size(path)
            meta["size"] = size
        if self.on_probed:
            self.on_probed(path, size)

        # Step 2: Gate
        decision = evaluate_threshold(size, threshold)
        self.telemetry.record_event(
            "monitor.decision", {"decision": decision.value, "threshold": threshold}
        )
        outcome = MonitorOutcome(
            path=path,
            size_bytes=size,
            threshold_bytes=threshold,
            decision=decision,
        )

        if decision is ThresholdDecision.BELOW:
            logger.info("size < %d bytes, nothing to do.", threshold)
            if self.on_below:
                self.on_below(size, threshold)
            return outcome

        # Step 3: Trigger
        logger.info(
            "size >= %d bytes. Triggering Jenkins job %s.",
            threshold,
            self.trigger_client.job_name,
        )
        with self.telemetry.timed("monitor.trigger", job=self.trigger_client.job_name) as meta:
            outcome.trigger = self.trigger_client.trigger(path)
            meta["status"] = outcome.trigger.status_code

        if self.on_triggered:
            self.on_triggered(outcome.trigger)
        return outcome
