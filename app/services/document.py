import copy
import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from app.data import seed
from app.schemas.document import Badge, DailyTargets, Milestone, UserProfile
from app.services.store import Document, DocumentStore

logger = logging.getLogger(__name__)


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


def build_initial_document(name: str, start: Optional[date] = None) -> Document:
    """Fresh document: authored content, empty logs, zeroed counters."""
    start = start or today_utc()
    profile = UserProfile(name=name, start_date=start.isoformat())
    document = {
        "user_profile": profile.model_dump(),
        "daily_targets": DailyTargets(**seed.daily_targets).model_dump(),
        "daily_logs": [],
        "motivational_quotes": list(seed.motivational_quotes),
        "achievement_badges": [Badge(**badge).model_dump() for badge in seed.achievement_badges],
        "monthly_milestones": [Milestone(**milestone).model_dump() for milestone in seed.monthly_milestones],
    }
    document.update(copy.deepcopy(seed.static_sections))
    return document


def backfill_static_sections(document: Document) -> List[str]:
    """Add authored sections the document is missing. Returns the added keys."""
    added = []
    for key, content in seed.static_sections.items():
        if not document.get(key):
            document[key] = copy.deepcopy(content)
            added.append(key)
    return added


async def load_document(store: DocumentStore, name: str) -> Document:
    document = await store.get()
    if document is None:
        logger.info("No document stored yet, creating it from seed content")
        document = build_initial_document(name)
        await store.set(document)
    return document


async def initialize_document(store: DocumentStore, name: str) -> None:
    document = await store.get()
    if document is None:
        logger.info("Initializing database with seed content...")
        await store.set(build_initial_document(name))
        logger.info("Database initialized successfully.")
        return

    added = backfill_static_sections(document)
    if added:
        logger.info("Back-filled missing sections: %s", ", ".join(added))
        await store.set(document)
    else:
        logger.info("Database already initialized.")
