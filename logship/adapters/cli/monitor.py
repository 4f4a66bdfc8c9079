"""
Monitor CLI command
"""
import typer
from typing import Optional

from ...core.exceptions import ConfigError, LogshipError, NotFoundError, TriggerError
from ...core.logging import get_logger, get_stdout_console
from ...core.settings import Settings
from ...core.utils import parse_size, format_size
from ...domain.monitor import MonitorService
from ...domain.trigger import TriggerClient
from .common import load_run_settings, fail

logger = get_logger(__name__)
stdout_console = get_stdout_console()


def register_monitor_command(app: typer.Typer) -> None:
    """Register monitor command on the main app"""
    app.command(name="monitor")(monitor_run)


def create_trigger_client(settings: Settings) -> TriggerClient:
    """Build the Jenkins client for a run"""
    return TriggerClient.from_settings(settings)


def monitor_run(
    ctx: typer.Context,
    log_path: Optional[str] = typer.Argument(
        None, help="Log file to check (default: /var/log/httpd/access.log)"
    ),
    threshold: Optional[str] = typer.Option(
        None, "--threshold", "-t", help="Size that triggers the upload (e.g., 1G, 512M)"
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Jenkins base URL"),
    job: Optional[str] = typer.Option(None, "--job", help="Jenkins job name"),
    user: Optional[str] = typer.Option(None, "--user", help="Jenkins user"),
    token: Optional[str] = typer.Option(
        None, "--token", help="Jenkins API token (prefer LOGSHIP_JENKINS_TOKEN)"
    ),
):
    """
    Check a log file and trigger the upload job when it is too large.

    Exit codes: 0 ok or below threshold, 1 file not found,
    2 crumb request failed, 3 job trigger rejected.

    Examples:
        logship monitor
        logship monitor /var/log/nginx/access.log --threshold 512M
    """
    threshold_bytes = None
    if threshold is not None:
        threshold_bytes = parse_size(threshold)
        if not threshold_bytes:
            raise fail(ConfigError(f"Invalid threshold: {threshold}"), "Config Error")

    settings = load_run_settings(
        ctx,
        {
            "log_path": log_path,
            "threshold_bytes": threshold_bytes,
            "remote_base_url": url,
            "job_name": job,
            "username": user,
            "api_token": token,
        },
    )

    service = MonitorService(
        settings=settings,
        trigger_client=create_trigger_client(settings),
        on_probed=lambda path, size: stdout_console.print(
            f"[cyan]ℹ[/cyan] {path}: {format_size(size)} ({size} bytes)"
        ),
        on_below=lambda size, limit: stdout_console.print(
            f"[green]✓[/green] Below threshold ({format_size(limit)}), nothing to do"
        ),
        on_triggered=lambda result: stdout_console.print(
            f"[green]✓[/green] Triggered job [cyan]{settings.job_name}[/cyan] (HTTP {result.status_code})"
        ),
    )

    try:
        service.run(settings.log_path)
    except NotFoundError as e:
        raise fail(e, "Not Found")
    except TriggerError as e:
        raise fail(e, "Trigger Error")
    except LogshipError as e:
        raise fail(e)
    except Exception as e:
        logger.exception("Monitor run failed")
        raise fail(LogshipError(f"Unexpected error: {e}"))
