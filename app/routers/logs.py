import logging
from fastapi import APIRouter, Depends
from app.config import settings
from app.core.errors import StorageUnavailable, error_response
from app.schemas.log import DailyLog, LogSaveResponse
from app.services.logs import save_log
from app.services.store import DocumentStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["logs"])

@router.post("/log", response_model=LogSaveResponse)
async def post_log(
    log_in: DailyLog,
    store: DocumentStore = Depends(get_store),
):
    try:
        document = await save_log(
            store,
            log_in.model_dump(),
            name=settings.USER_NAME,
            streak_mode=settings.STREAK_MODE,
        )
    except StorageUnavailable:
        logger.exception("Error saving log for %s", log_in.date)
        return error_response("Error saving log")
    except Exception:
        logger.exception("Unhandled error saving log for %s", log_in.date)
        return error_response("Error saving log")

    logger.info("Saved log for %s (%d logs)", log_in.date, len(document["daily_logs"]))
    return LogSaveResponse(message="Log saved successfully", data=document)
