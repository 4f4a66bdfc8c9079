"""
Configuration loader with priority: CLI > env > TOML > defaults
"""
import os
import tomllib
from pathlib import Path
from typing import Dict, Any, Optional, Mapping

from ...core.exceptions import ConfigError
from ...core.settings import Settings


class ConfigLoader:
    """Configuration loader with priority support"""

    # Later entries win when several variables map to the same key.
    # LOG_PATH / S3_BUCKET / S3_REGION are the job parameters and
    # environment the job runner injects into the upload job.
    ENV_MAPPINGS = (
        ("LOG_PATH", "log_path"),
        ("LOGSHIP_LOG_PATH", "log_path"),
        ("LOGSHIP_THRESHOLD", "threshold_bytes"),
        ("LOGSHIP_AUDIT_LOG", "audit_log"),
        ("LOGSHIP_JENKINS_URL", "remote_base_url"),
        ("LOGSHIP_JENKINS_JOB", "job_name"),
        ("LOGSHIP_JENKINS_PARAMETER", "job_parameter"),
        ("LOGSHIP_JENKINS_USER", "username"),
        ("LOGSHIP_JENKINS_TOKEN", "api_token"),
        ("LOGSHIP_HTTP_TIMEOUT", "http_timeout"),
        ("S3_BUCKET", "bucket_name"),
        ("LOGSHIP_S3_BUCKET", "bucket_name"),
        ("AWS_DEFAULT_REGION", "region"),
        ("S3_REGION", "region"),
        ("LOGSHIP_S3_REGION", "region"),
        ("LOGSHIP_JOB_TIMEOUT", "job_timeout"),
        ("LOGSHIP_TRUNCATE_MODE", "truncate_mode"),
        ("LOGSHIP_TEE_PATH", "tee_path"),
    )

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    def load_toml(self, path: Path) -> Dict[str, Any]:
        """Load TOML configuration file"""
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            return tomllib.loads(path.read_text(encoding='utf-8'))
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to parse TOML configuration: {e}") from e

    def load_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables"""
        config = {}

        for env_key, config_key in self.ENV_MAPPINGS:
            value = self._environ.get(env_key)
            if value:
                config[config_key] = value

        return config

    def merge_configs(self, *configs: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge multiple configurations with priority.
        Later configs override earlier ones.
        """
        result = {}

        for config in configs:
            result = self._deep_merge(result, config)

        return result

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries"""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def load(
        self,
        toml_path: Optional[Path] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
        use_env: bool = True,
    ) -> Dict[str, Any]:
        """
        Load configuration with priority: CLI > env > TOML > defaults

        Args:
            toml_path: Path to TOML configuration file
            cli_overrides: CLI parameter overrides, None values are skipped
            use_env: Whether to load from environment variables

        Returns:
            Merged configuration dictionary
        """
        configs = []

        # 1. Load TOML if provided
        if toml_path:
            configs.append(self.load_toml(toml_path))

        # 2. Load environment variables
        if use_env:
            env_config = self.load_env()
            if env_config:
                configs.append(env_config)

        # 3. Apply CLI overrides (highest priority); empty values mean "not given"
        if cli_overrides:
            configs.append({k: v for k, v in cli_overrides.items() if v not in (None, "")})

        # Merge all configs
        return self.merge_configs(*configs)

    def load_settings(
        self,
        toml_path: Optional[Path] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
        use_env: bool = True,
    ) -> Settings:
        """Load and validate configuration into a Settings instance"""
        return Settings.from_dict(self.load(toml_path, cli_overrides, use_env))
