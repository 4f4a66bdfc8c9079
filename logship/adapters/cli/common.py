"""
Shared CLI bootstrap: configuration and logging
"""
import typer
from pathlib import Path
from typing import Any, Dict, Optional

from ...core.exceptions import LogshipError
from ...core.logging import setup_logging, get_logger, get_stderr_console
from ...core.settings import Settings
from ..config.loader import ConfigLoader

logger = get_logger(__name__)
stderr_console = get_stderr_console()


def load_run_settings(ctx: typer.Context, overrides: Dict[str, Any]) -> Settings:
    """
    Load settings for a command and set up logging.

    Global options stored on the context by the app callback decide the
    config file, log level and audit file override.

    Raises:
        typer.Exit: With the configuration error code if loading fails
    """
    obj: Dict[str, Any] = ctx.obj or {}
    config_path: Optional[Path] = obj.get("config")

    try:
        settings = ConfigLoader().load_settings(
            toml_path=config_path.expanduser() if config_path else None,
            cli_overrides=overrides,
        )
    except LogshipError as e:
        setup_logging(level=obj.get("log_level", "INFO"))
        logger.error("Configuration error: %s", e)
        stderr_console.print(f"[red]Config Error:[/red] {e}")
        raise typer.Exit(e.exit_code)

    audit_file = obj.get("log_file") or settings.audit_path
    setup_logging(level=obj.get("log_level", "INFO"), audit_file=audit_file)
    return settings


def fail(error: LogshipError, label: str = "Error") -> typer.Exit:
    """Report a domain error and build the matching exit"""
    stderr_console.print(f"[red]{label}:[/red] {error}")
    return typer.Exit(error.exit_code)
