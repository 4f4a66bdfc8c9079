"""
Main CLI application
"""
import typer
from pathlib import Path
from typing import Optional

from .monitor import register_monitor_command
from .upload import register_upload_command

# Create main app
app = typer.Typer(
    name="logship",
    add_completion=False,
    help="Ship oversized log files to S3 via a Jenkins job",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

register_monitor_command(app)
register_upload_command(app)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Audit log file (overrides the configured one)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
    ),
):
    """
    logship - size-triggered log archiving

    Use subcommands to perform different operations:
    - monitor: Check a log file and trigger the upload job
    - upload: Upload, verify and truncate a log file
    """
    ctx.obj = {
        "log_level": log_level,
        "log_file": log_file,
        "config": config,
    }


def run():
    """CLI entry point"""
    app()


if __name__ == "__main__":
    run()
