import logging
from fastapi import APIRouter, Depends
from app.config import settings
from app.core.errors import StorageUnavailable, error_response
from app.schemas.log import BadgeUnlock, LogSaveResponse
from app.services.achievements import unlock_badges
from app.services.store import DocumentStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["badges"])

@router.post("/badges", response_model=LogSaveResponse)
async def post_badges(
    unlock_in: BadgeUnlock,
    store: DocumentStore = Depends(get_store),
):
    """
    Persist badges the dashboard found newly earned. Badges are never un-earned.
    """
    try:
        document = await unlock_badges(store, unlock_in.earned, name=settings.USER_NAME)
    except StorageUnavailable:
        logger.exception("Error saving badges")
        return error_response("Error saving badges")
    except Exception:
        logger.exception("Unhandled error saving badges")
        return error_response("Error saving badges")

    return LogSaveResponse(message="Badges saved successfully", data=document)
