import logging
import datetime
from typing import Optional
from fastapi import APIRouter, Depends
from app.config import settings
from app.core.errors import StorageUnavailable, error_response
from app.schemas.log import WeeklyStatsResponse
from app.services.document import load_document, today_utc
from app.services.stats import last_n_days, weekly_summary
from app.services.store import DocumentStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/stats", tags=["stats"])

@router.get("/weekly", response_model=WeeklyStatsResponse)
async def get_weekly_stats(
    date: Optional[datetime.date] = None,
    store: DocumentStore = Depends(get_store),
):
    reference = date or today_utc()
    try:
        document = await load_document(store, settings.USER_NAME)
        days = last_n_days(document, reference, 7)
        summary = weekly_summary(days)
    except StorageUnavailable:
        logger.exception("Error reading database")
        return error_response("Error reading database")
    except Exception:
        logger.exception("Unhandled error computing weekly stats")
        return error_response("Error computing weekly stats")

    return WeeklyStatsResponse(
        reference_date=reference.isoformat(),
        days=days,
        **summary,
    )
