"""
Scheduled Background Tasks.

Tasks that run on a schedule (cron-based). They are registered with the
broker together with schedule labels that the TaskiqScheduler reads via
LabelScheduleSource.

Schedule Format:
    schedule=[{"cron": "* * * * *", "cron_offset": "UTC", "kwargs": {...}}]

Cron Format:
    ┌───────────── minute (0-59)
    │ ┌───────────── hour (0-23)
    │ │ ┌───────────── day of month (1-31)
    │ │ │ ┌───────────── month (1-12)
    │ │ │ │ ┌───────────── day of week (0-6, Sun=0)
    │ │ │ │ │
    * * * * *

The retention sweep schedule and window come from retention.yaml
(default "0 0 * * *", daily at midnight, 7 days).
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from keepnotes.core.config import get_app_config
from keepnotes.core.database import session_scope
from keepnotes.core.logging import get_logger, log_with_source
from keepnotes.services.retention import RetentionService

logger = get_logger(__name__)


# =============================================================================
# Scheduled Task Functions
# =============================================================================
# Plain async functions. They get wrapped with broker.task() and schedule
# labels when register_scheduled_tasks() is called, and can be awaited
# directly without Redis.


async def purge_expired_notes(
    retention_days: int | None = None,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> None:
    """
    Permanently delete notes that have been in the trash too long.

    Runs once a day. A failing sweep is logged and dropped here: it
    never propagates to the worker, and the next scheduled run starts
    fresh.

    Args:
        retention_days: Override for the configured retention window
        session_factory: Session factory to use instead of the app default
    """
    log_with_source(logger, "tasks", "info", "Starting trash retention sweep")

    try:
        async with session_scope(session_factory) as session:
            service = RetentionService(session, retention_days=retention_days)
            purged = await service.purge_expired()
    except Exception as e:
        log_with_source(
            logger,
            "tasks",
            "error",
            "Trash retention sweep failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        return

    log_with_source(
        logger,
        "tasks",
        "info",
        "Trash retention sweep completed",
        purged=purged,
    )


# =============================================================================
# Schedule Configuration
# =============================================================================


def get_scheduled_tasks() -> dict[str, dict[str, Any]]:
    """
    Build the schedule table from configuration.

    Returns:
        Dict mapping task names to function, schedule and retry policy
    """
    app_config = get_app_config()
    tasks: dict[str, dict[str, Any]] = {}

    if app_config.features.retention_sweep_enabled:
        retention = app_config.retention
        tasks["purge_expired_notes"] = {
            "function": purge_expired_notes,
            "schedule": [
                {
                    "cron": retention.sweep_cron,
                    "cron_offset": retention.timezone,
                    "kwargs": {"retention_days": retention.retention_days},
                }
            ],
            # A failed sweep waits for the next scheduled run
            "retry_on_error": False,
            "description": "Purge notes trashed longer than the retention window",
        }

    return tasks


def register_scheduled_tasks(broker: Any) -> dict[str, Any]:
    """
    Register scheduled task functions with the Taskiq broker.

    This wraps the plain async functions with broker.task decorators
    including their schedule configuration.

    Returns:
        Dict mapping task names to registered task objects
    """
    registered = {}

    for task_name, config in get_scheduled_tasks().items():
        registered[task_name] = broker.task(
            task_name=task_name,
            schedule=config["schedule"],
            retry_on_error=config["retry_on_error"],
        )(config["function"])

    logger.info(
        "Scheduled tasks registered",
        extra={
            "task_count": len(registered),
            "tasks": list(registered.keys()),
        },
    )

    return registered
