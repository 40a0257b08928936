#!/usr/bin/env python3
"""
Application Entry Script.

Main entry point for keepnotes. All functionality is accessible
through command-line options.

Usage:
    python run.py --help
    python run.py --action server --verbose
    python run.py --action worker
    python run.py --action scheduler
    python run.py --action sweep --dry-run
    python run.py --action config
"""

import asyncio
import subprocess
import sys
from pathlib import Path

import click

# Ensure project root is in path for absolute imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from keepnotes.core.logging import get_logger, setup_logging


def validate_project_root() -> Path:
    """Validate that we're running from the project root."""
    if not (PROJECT_ROOT / ".project_root").exists():
        click.echo(
            click.style("Error: .project_root not found. Run from project root.", fg="red"),
            err=True,
        )
        sys.exit(1)
    return PROJECT_ROOT


@click.command()
@click.option(
    "--action",
    type=click.Choice(["server", "worker", "scheduler", "sweep", "config", "info"]),
    default="info",
    help="Action to perform.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
@click.option(
    "--host",
    default=None,
    help="Server host (for server action).",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Server port (for server action).",
)
@click.option(
    "--reload",
    is_flag=True,
    help="Enable auto-reload (for server action).",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="List what a sweep would purge without deleting (for sweep action).",
)
def main(
    action: str,
    verbose: bool,
    debug: bool,
    host: str | None,
    port: int | None,
    reload: bool,
    dry_run: bool,
) -> None:
    """
    keepnotes entry point.

    Run the API server, the task worker or scheduler, a one-off
    trash retention sweep, or inspect configuration.

    Examples:

        # Start development server
        python run.py --action server --reload --verbose

        # Run the retention sweep once, now
        python run.py --action sweep --verbose

        # See which trashed notes are past the retention window
        python run.py --action sweep --dry-run
    """
    validate_project_root()

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"

    setup_logging(level=log_level, format_type="console")
    logger = get_logger(__name__)

    logger.debug("Starting application", extra={"action": action, "log_level": log_level})

    if action == "server":
        run_server(logger, host, port, reload)
    elif action == "worker":
        run_taskiq(logger, ["worker", "keepnotes.tasks.broker:broker"])
    elif action == "scheduler":
        run_taskiq(logger, ["scheduler", "keepnotes.tasks.scheduler:scheduler"])
    elif action == "sweep":
        run_sweep(logger, dry_run)
    elif action == "config":
        show_config(logger)
    elif action == "info":
        show_info(logger)


def run_server(logger, host: str | None, port: int | None, reload: bool) -> None:
    """Start the FastAPI server with uvicorn."""
    from keepnotes.core.config import get_app_config

    server = get_app_config().application.server
    server_host = host or server.host
    server_port = port or server.port

    logger.info(
        "Starting server",
        extra={"host": server_host, "port": server_port, "reload": reload},
    )

    cmd = [
        sys.executable, "-m", "uvicorn",
        "keepnotes.main:app",
        "--host", server_host,
        "--port", str(server_port),
    ]

    if reload:
        cmd.append("--reload")

    click.echo(f"Starting server at http://{server_host}:{server_port}")
    click.echo("Press Ctrl+C to stop\n")

    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except subprocess.CalledProcessError as e:
        logger.error("Server failed to start", extra={"exit_code": e.returncode})
        sys.exit(e.returncode)


def run_taskiq(logger, args: list[str]) -> None:
    """Run a taskiq worker or scheduler process."""
    cmd = [sys.executable, "-m", "taskiq", *args]
    logger.info("Starting taskiq", extra={"command": " ".join(args)})

    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        logger.info("Taskiq stopped")
    except subprocess.CalledProcessError as e:
        logger.error("Taskiq exited with error", extra={"exit_code": e.returncode})
        sys.exit(e.returncode)


def run_sweep(logger, dry_run: bool) -> None:
    """Run the trash retention sweep once in this process."""
    from keepnotes.core.database import dispose_engine, init_db, session_scope
    from keepnotes.services.retention import RetentionService

    async def sweep() -> None:
        await init_db()
        try:
            async with session_scope() as session:
                service = RetentionService(session)
                cutoff = service.cutoff()
                if dry_run:
                    expired = await service.find_expired()
                    click.echo(f"{len(expired)} note(s) trashed at or before {cutoff.isoformat()}:")
                    for note in expired:
                        click.echo(f"  {note.id}  {note.title or '(untitled)'}  deleted {note.deleted_at.isoformat()}")
                else:
                    purged = await service.purge_expired()
                    click.echo(f"Purged {purged} note(s) trashed at or before {cutoff.isoformat()}")
        finally:
            await dispose_engine()

    try:
        asyncio.run(sweep())
    except Exception as e:
        logger.error("Sweep failed", extra={"error": str(e)})
        click.echo(click.style(f"Sweep failed: {e}", fg="red"), err=True)
        sys.exit(1)


def show_config(logger) -> None:
    """Display loaded configuration."""
    from keepnotes.core.config import get_app_config

    try:
        app_config = get_app_config()
    except (FileNotFoundError, ValueError) as e:
        logger.error("Failed to load configuration", extra={"error": str(e)})
        click.echo(click.style(f"Error loading configuration: {e}", fg="red"))
        sys.exit(1)

    sections = {
        "Application": app_config.application,
        "Database": app_config.database,
        "Logging": app_config.logging,
        "Features": app_config.features,
        "Retention": app_config.retention,
    }

    for title, section in sections.items():
        click.echo(f"\n{title} Settings (from YAML):")
        click.echo("-" * 40)
        for key, value in section.model_dump().items():
            if isinstance(value, dict):
                click.echo(f"  {key}:")
                for k, v in value.items():
                    click.echo(f"    {k}: {v}")
            else:
                click.echo(f"  {key}: {value}")

    logger.info("Configuration displayed successfully")


def show_info(logger) -> None:
    """Display application information."""
    from keepnotes.core.config import get_app_config

    app = get_app_config().application
    click.echo(f"{app.name} {app.version}")
    click.echo("=" * 40)
    click.echo(app.description)
    click.echo()
    click.echo("Available Actions:")
    click.echo("  --action server      Start the API server")
    click.echo("  --action worker      Start the taskiq worker")
    click.echo("  --action scheduler   Start the taskiq scheduler")
    click.echo("  --action sweep       Run the trash retention sweep now")
    click.echo("  --action config      Display configuration")
    click.echo("  --action info        Show this information")
    click.echo()
    click.echo("Logging Options:")
    click.echo("  --verbose, -v        Enable INFO level logging")
    click.echo("  --debug, -d          Enable DEBUG level logging")

    logger.debug("Info displayed")


if __name__ == "__main__":
    main()
