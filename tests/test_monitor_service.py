"""
Tests for the monitor run: probe, gate and trigger together
"""

import pytest

from logship.core.exceptions import AuthFailure, NotFoundError, RemoteTriggerFailure
from logship.domain.monitor import MonitorService, ThresholdDecision
from logship.domain.trigger import TriggerClient

from conftest import THRESHOLD, FakeResponse, FakeSession


def make_service(settings, session, telemetry, **callbacks):
    client = TriggerClient.from_settings(settings, session=session)
    return MonitorService(settings, client, telemetry=telemetry, **callbacks)


class TestMonitorScenarios:

    def test_below_threshold_makes_no_http_calls(self, settings, make_log, telemetry):
        """Scenario A: threshold - 1 bytes"""
        path = make_log(THRESHOLD - 1)
        session = FakeSession()

        outcome = make_service(settings, session, telemetry).run(str(path))

        assert outcome.decision is ThresholdDecision.BELOW
        assert outcome.triggered is False
        assert session.calls == []

    def test_empty_crumb_response_skips_post(self, settings, make_log, telemetry):
        """Scenario B: empty crumb body"""
        path = make_log(THRESHOLD)
        session = FakeSession(get_response=FakeResponse(200, ""))

        with pytest.raises(AuthFailure) as exc:
            make_service(settings, session, telemetry).run(str(path))

        assert exc.value.exit_code == 2
        assert session.methods == ["GET"]

    def test_created_triggers_once(self, settings, make_log, telemetry):
        """Scenario C: POST answers 201"""
        path = make_log(THRESHOLD)
        session = FakeSession(post_response=FakeResponse(201))

        outcome = make_service(settings, session, telemetry).run(str(path))

        assert outcome.decision is ThresholdDecision.AT_OR_ABOVE
        assert outcome.trigger.status_code == 201
        assert session.methods == ["GET", "POST"]

    def test_server_error_fails_with_status(self, settings, make_log, telemetry):
        """Scenario D: POST answers 500"""
        path = make_log(THRESHOLD)
        session = FakeSession(post_response=FakeResponse(500))

        with pytest.raises(RemoteTriggerFailure) as exc:
            make_service(settings, session, telemetry).run(str(path))

        assert exc.value.exit_code == 3
        assert exc.value.status_code == 500


class TestMonitorService:

    def test_missing_file(self, settings, telemetry, tmp_path):
        session = FakeSession()
        with pytest.raises(NotFoundError):
            make_service(settings, session, telemetry).run(str(tmp_path / "gone.log"))
        assert session.calls == []

    def test_falls_back_to_configured_path(self, settings, make_log, telemetry):
        make_log(THRESHOLD + 10)
        session = FakeSession()

        outcome = make_service(settings, session, telemetry).run()

        assert outcome.path == settings.log_path
        assert outcome.size_bytes == THRESHOLD + 10
        assert session.calls[1]["url"].endswith("access.log")

    def test_callbacks(self, settings, make_log, telemetry):
        seen = []
        path = make_log(10)
        service = make_service(
            settings,
            FakeSession(),
            telemetry,
            on_probed=lambda p, s: seen.append(("probed", s)),
            on_below=lambda s, limit: seen.append(("below", limit)),
            on_triggered=lambda r: seen.append(("triggered", r.status_code)),
        )

        service.run(str(path))

        assert seen == [("probed", 10), ("below", THRESHOLD)]

    def test_records_telemetry(self, settings, make_log, telemetry):
        path = make_log(THRESHOLD)
        make_service(settings, FakeSession(), telemetry).run(str(path))

        assert telemetry.event_names() == [
            "monitor.probe",
            "monitor.decision",
            "monitor.trigger",
        ]
        trigger_event = telemetry.get_events()[-1]
        assert trigger_event.metadata["ok"] is True
        assert trigger_event.metadata["status"] == 201
