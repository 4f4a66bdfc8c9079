"""
Upload job CLI command
"""
import typer
from typing import Optional

from ...core.exceptions import LogshipError, NotFoundError, UploadJobError
from ...core.interfaces import ObjectStore
from ...core.logging import get_logger, get_stdout_console, get_stderr_console
from ...core.settings import Settings
from ...domain.upload import UploadJob
from ...infrastructure.storage import S3ObjectStoreFactory
from .common import load_run_settings, fail

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()


def register_upload_command(app: typer.Typer) -> None:
    """Register upload command on the main app"""
    app.command(name="upload")(upload_run)


def create_object_store(settings: Settings) -> ObjectStore:
    """Build the object store for a run"""
    return S3ObjectStoreFactory().create({"region": settings.region})


def upload_run(
    ctx: typer.Context,
    log_path: Optional[str] = typer.Option(
        None, "--log-path", help="Log file to archive (env: LOG_PATH)"
    ),
    bucket: Optional[str] = typer.Option(
        None, "--bucket", help="Destination bucket (env: S3_BUCKET)"
    ),
    region: Optional[str] = typer.Option(
        None, "--region", help="AWS region (env: S3_REGION)"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Wall-clock budget for the whole job, in seconds"
    ),
    truncate_mode: Optional[str] = typer.Option(
        None, "--truncate-mode", help="auto, direct or sudo"
    ),
):
    """
    Upload a log file to S3, verify it, then truncate the original.

    Meant to run as the job triggered by `logship monitor`; the job runner
    passes LOG_PATH and S3_BUCKET as environment variables.

    Examples:
        logship upload
        logship upload --log-path /var/log/httpd/access.log --bucket logs-2025y
    """
    settings = load_run_settings(
        ctx,
        {
            "log_path": log_path,
            "bucket_name": bucket,
            "region": region,
            "job_timeout": timeout,
            "truncate_mode": truncate_mode,
        },
    )

    try:
        store = create_object_store(settings)
        job = UploadJob.from_settings(
            settings,
            store,
            on_stage=lambda stage: stdout_console.print(
                f"[cyan]▶[/cyan] Stage: {stage.value}"
            ),
            on_complete=lambda result: stdout_console.print(
                f"[green]✓[/green] SUCCESS: Log uploaded to {result.record.url}"
            ),
        )
        job.run(settings.log_path, settings.bucket_name)
    except NotFoundError as e:
        stderr_console.print("[red]FAILURE:[/red] check logs")
        raise fail(e, "Not Found")
    except UploadJobError as e:
        stderr_console.print("[red]FAILURE:[/red] check logs")
        raise fail(e, "Upload Job Error")
    except LogshipError as e:
        raise fail(e)
    except Exception as e:
        logger.exception("Upload job failed")
        raise fail(LogshipError(f"Unexpected error: {e}"))
