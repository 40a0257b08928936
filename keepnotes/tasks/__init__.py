"""
Background Tasks Package.

Provides Taskiq-based scheduled task processing with a Redis backend.
The only scheduled task is the trash retention sweep.

Usage (with Redis - production):
    # Start worker (executes tasks)
    python run.py --action worker

    # Start scheduler (sends scheduled tasks to the worker)
    python run.py --action scheduler

    # Or directly with taskiq
    taskiq worker keepnotes.tasks.broker:broker
    taskiq scheduler keepnotes.tasks.scheduler:scheduler

Usage (without Redis - testing):
    from keepnotes.tasks.scheduled import purge_expired_notes

    await purge_expired_notes(retention_days=7)

Important:
    Run only ONE scheduler instance to avoid duplicate task execution.
"""

from keepnotes.tasks.broker import get_broker
from keepnotes.tasks.scheduler import get_scheduler
from keepnotes.tasks.scheduled import (
    get_scheduled_tasks,
    purge_expired_notes,
    register_scheduled_tasks,
)

__all__ = [
    "get_broker",
    "get_scheduler",
    "get_scheduled_tasks",
    "register_scheduled_tasks",
    "purge_expired_notes",
]


def __getattr__(name: str):
    """Lazy attribute access for broker and scheduler."""
    if name == "broker":
        return get_broker()
    if name == "scheduler":
        return get_scheduler()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
