"""
Tests for configuration loading and validation
"""

import pytest

from logship.adapters.config import ConfigLoader
from logship.core.exceptions import ConfigError
from logship.core.settings import Settings
from logship.core.utils import parse_size


class TestSettings:

    def test_defaults(self):
        s = Settings()
        assert s.log_path == "/var/log/httpd/access.log"
        assert s.threshold_bytes == 1073741824
        assert s.job_name == "upload-access-log"
        assert s.job_parameter == "LOG_PATH"
        assert s.bucket_name == "logs-2025y"
        assert s.region == "us-east-1"
        assert s.job_timeout == 3600

    def test_token_hidden_from_repr(self):
        s = Settings.from_dict({"api_token": "hunter2"})
        assert "hunter2" not in repr(s)
        assert s.credentials.as_auth() == ("admin", "hunter2")

    @pytest.mark.parametrize("data", [
        {"threshold_bytes": 0},
        {"threshold_bytes": "lots"},
        {"job_timeout": -1},
        {"truncate_mode": "rm"},
        {"remote_base_url": ""},
        {"http_timeout": "soon"},
    ])
    def test_invalid_values(self, data):
        with pytest.raises(ConfigError):
            Settings.from_dict(data)

    def test_threshold_size_string(self):
        assert Settings.from_dict({"threshold_bytes": "512M"}).threshold_bytes == 512 * 1024 ** 2

    def test_nested_credentials_with_flat_override(self):
        s = Settings.from_dict({
            "credentials": {"username": "ci", "api_token": "a"},
            "api_token": "b",
        })
        assert s.credentials.as_auth() == ("ci", "b")


class TestConfigLoader:

    def test_priority_cli_over_env_over_toml(self, tmp_path):
        toml = tmp_path / "logship.toml"
        toml.write_text(
            'log_path = "/from/toml.log"\n'
            'bucket_name = "toml-bucket"\n'
            'job_name = "toml-job"\n'
        )
        loader = ConfigLoader(environ={"LOGSHIP_S3_BUCKET": "env-bucket", "LOG_PATH": "/from/env.log"})

        settings = loader.load_settings(
            toml_path=toml,
            cli_overrides={"log_path": "/from/cli.log", "job_name": None},
        )

        assert settings.log_path == "/from/cli.log"
        assert settings.bucket_name == "env-bucket"
        assert settings.job_name == "toml-job"

    def test_empty_cli_value_does_not_override(self):
        loader = ConfigLoader(environ={"LOGSHIP_LOG_PATH": "/from/env.log"})
        settings = loader.load_settings(cli_overrides={"log_path": ""})
        assert settings.log_path == "/from/env.log"

    def test_job_runner_variables(self):
        loader = ConfigLoader(environ={
            "LOG_PATH": "/var/log/nginx/access.log",
            "S3_BUCKET": "archive",
            "AWS_DEFAULT_REGION": "eu-central-1",
            "S3_REGION": "eu-west-1",
        })
        settings = loader.load_settings()
        assert settings.log_path == "/var/log/nginx/access.log"
        assert settings.bucket_name == "archive"
        assert settings.region == "eu-west-1"

    def test_env_values_converted(self):
        loader = ConfigLoader(environ={
            "LOGSHIP_THRESHOLD": "2G",
            "LOGSHIP_JOB_TIMEOUT": "90",
            "LOGSHIP_JENKINS_TOKEN": "tok",
        })
        settings = loader.load_settings()
        assert settings.threshold_bytes == 2 * 1024 ** 3
        assert settings.job_timeout == 90.0
        assert settings.credentials.api_token == "tok"

    def test_missing_toml(self, tmp_path):
        with pytest.raises(ConfigError):
            ConfigLoader(environ={}).load(toml_path=tmp_path / "none.toml")

    def test_broken_toml(self, tmp_path):
        toml = tmp_path / "bad.toml"
        toml.write_text("log_path = ")
        with pytest.raises(ConfigError):
            ConfigLoader(environ={}).load(toml_path=toml)

    def test_deep_merge_keeps_sibling_keys(self):
        merged = ConfigLoader(environ={}).merge_configs(
            {"credentials": {"username": "a", "api_token": "x"}},
            {"credentials": {"api_token": "y"}},
        )
        assert merged == {"credentials": {"username": "a", "api_token": "y"}}


class TestParseSize:

    @pytest.mark.parametrize("text,expected", [
        ("1G", 1024 ** 3),
        ("1gb", 1024 ** 3),
        ("100K", 100 * 1024),
        ("1.5M", int(1.5 * 1024 ** 2)),
        ("2048", 2048),
    ])
    def test_valid(self, text, expected):
        assert parse_size(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "-1G", "G"])
    def test_invalid(self, text):
        assert parse_size(text) is None
