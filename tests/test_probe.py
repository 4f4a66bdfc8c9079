"""
Tests for the size probe and threshold gate
"""

import pytest

from logship.core.exceptions import NotFoundError
from logship.domain.monitor import (
    ThresholdDecision,
    evaluate_threshold,
    exceeds_threshold,
    probe_size,
)


class TestProbeSize:

    def test_returns_size_in_bytes(self, make_log):
        path = make_log(4096)
        assert probe_size(path) == 4096

    def test_empty_file_is_zero(self, make_log):
        assert probe_size(make_log(0)) == 0

    def test_missing_file_raises_not_found(self, tmp_path):
        with pytest.raises(NotFoundError) as exc:
            probe_size(tmp_path / "nope.log")
        assert exc.value.path.endswith("nope.log")
        assert exc.value.exit_code == 1

    def test_directory_is_not_a_log_file(self, tmp_path):
        with pytest.raises(NotFoundError):
            probe_size(tmp_path)


class TestThresholdGate:

    @pytest.mark.parametrize("size", [0, 1, 1023])
    def test_below_threshold(self, size):
        assert evaluate_threshold(size, 1024) is ThresholdDecision.BELOW
        assert exceeds_threshold(size, 1024) is False

    @pytest.mark.parametrize("size", [1024, 1025, 10 ** 12])
    def test_at_or_above_threshold(self, size):
        assert evaluate_threshold(size, 1024) is ThresholdDecision.AT_OR_ABOVE
        assert exceeds_threshold(size, 1024) is True

    def test_default_threshold_is_one_gib(self):
        from logship.core.settings import Settings

        limit = Settings().threshold_bytes
        assert limit == 2 ** 30
        assert exceeds_threshold(limit - 1, limit) is False
        assert exceeds_threshold(limit, limit) is True
