import json
from pathlib import Path
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import flag_modified
from starlette.concurrency import run_in_threadpool

from app.config import settings
from app.core.errors import StorageUnavailable
from app.database import get_db
from app.models.kv import KeyValue

Document = Dict[str, Any]


class DocumentStore:
    """Whole-document get/set. Last writer wins; no versioning."""

    async def get(self) -> Optional[Document]:
        raise NotImplementedError

    async def set(self, document: Document) -> None:
        raise NotImplementedError


class SqlDocumentStore(DocumentStore):
    def __init__(self, db: AsyncSession, key: str = "db"):
        self.db = db
        self.key = key

    async def get(self) -> Optional[Document]:
        try:
            row = await self.db.get(KeyValue, self.key)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageUnavailable(f"Could not read key {self.key!r}") from e
        return row.value if row else None

    async def set(self, document: Document) -> None:
        try:
            row = await self.db.get(KeyValue, self.key)
            if row is None:
                self.db.add(KeyValue(key=self.key, value=document))
            else:
                row.value = document
                # the JSON column does not track in-place mutation
                flag_modified(row, "value")
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageUnavailable(f"Could not write key {self.key!r}") from e


class FileDocumentStore(DocumentStore):
    """Keeps the document in a single JSON file, for local development."""

    def __init__(self, path):
        self.path = Path(path)

    def _read(self) -> Optional[Document]:
        if not self.path.exists():
            return None
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageUnavailable(f"Could not read {self.path}") from e

    def _write(self, document: Document) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
        except (OSError, TypeError) as e:
            raise StorageUnavailable(f"Could not write {self.path}") from e

    async def get(self) -> Optional[Document]:
        return await run_in_threadpool(self._read)

    async def set(self, document: Document) -> None:
        await run_in_threadpool(self._write, document)


async def get_store() -> AsyncGenerator[DocumentStore, None]:
    if settings.STORE_BACKEND == "file":
        yield FileDocumentStore(settings.DATA_FILE)
        return
    # a session is only opened for the SQL backend
    async for session in get_db():
        yield SqlDocumentStore(session, settings.DOCUMENT_KEY)
