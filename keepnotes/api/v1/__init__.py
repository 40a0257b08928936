"""
API Version 1 Router.

Aggregates all v1 endpoint routers behind the session check.
"""

from fastapi import APIRouter, Depends

from keepnotes.api.v1.endpoints import archive, notes, reminders, trash
from keepnotes.core.dependencies import require_session

router = APIRouter(dependencies=[Depends(require_session)])

router.include_router(notes.router, prefix="/notes", tags=["notes"])
router.include_router(archive.router, prefix="/archived-notes", tags=["notes"])
router.include_router(trash.router, prefix="/trash", tags=["trash"])
router.include_router(reminders.router, prefix="/reminders", tags=["reminders"])
