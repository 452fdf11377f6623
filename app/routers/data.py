import json
import logging
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from app.config import settings
from app.core.errors import StorageUnavailable, error_response
from app.services.document import load_document, today_utc
from app.services.store import DocumentStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["data"])

@router.get("/data")
async def get_data(store: DocumentStore = Depends(get_store)):
    try:
        return await load_document(store, settings.USER_NAME)
    except StorageUnavailable:
        logger.exception("Error reading database")
        return error_response("Error reading database")
    except Exception:
        logger.exception("Unhandled error reading database")
        return error_response("Error reading database")

@router.get("/export")
async def export_data(store: DocumentStore = Depends(get_store)):
    try:
        document = await load_document(store, settings.USER_NAME)
    except StorageUnavailable:
        logger.exception("Error exporting data")
        return error_response("Error exporting data")
    except Exception:
        logger.exception("Unhandled error exporting data")
        return error_response("Error exporting data")

    filename = f"monk-mode-data-{today_utc().isoformat()}.json"
    return Response(
        content=json.dumps(document, indent=2, ensure_ascii=False),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
