# app/main.py
import logging
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import exc as sa_exc
from app.config import settings
from app.core.errors import StorageUnavailable, validation_exception_handler
from app.database import engine, AsyncSessionLocal
from app.models.kv import KeyValue
from app.routers import data, logs, badges, stats
from app.services.document import initialize_document
from app.services.store import FileDocumentStore, SqlDocumentStore

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(title="Monk Mode - Habit Tracking Dashboard", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Include Routers
app.include_router(data.router)
app.include_router(logs.router)
app.include_router(badges.router)
app.include_router(stats.router)

# Create the kv table and seed the document (for demo only — use Alembic in prod)
@app.on_event("startup")
async def startup_event():
    try:
        if settings.STORE_BACKEND == "file":
            await initialize_document(FileDocumentStore(settings.DATA_FILE), settings.USER_NAME)
            return

        async with engine.begin() as conn:
            await conn.run_sync(KeyValue.metadata.create_all)
        async with AsyncSessionLocal() as session:
            await initialize_document(SqlDocumentStore(session, settings.DOCUMENT_KEY), settings.USER_NAME)
    except (StorageUnavailable, sa_exc.SQLAlchemyError) as e:
        # requests still initialize the document lazily on first read
        logger.error("Error initializing database: %s", e)

@app.get("/")
def read_root():
    return {"message": "Welcome to the Monk Mode dashboard backend"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
