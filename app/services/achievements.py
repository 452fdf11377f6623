from datetime import date
from typing import Any, Dict, Iterable, List

from app.services.document import load_document
from app.services.stats import as_number, last_n_days
from app.services.store import Document, DocumentStore


def _all(days: List[Dict[str, Any]], predicate) -> bool:
    return len(days) > 0 and all(predicate(d) for d in days)


def evaluate_achievements(document: Document, reference_date: date) -> List[str]:
    """Flip every badge whose rule now passes. Returns the newly earned names.

    Badges are a one-way latch: an earned badge is skipped, never reset.
    """
    badges = document.get("achievement_badges", [])
    last_7 = last_n_days(document, reference_date, 7)
    last_14_raw = document.get("daily_logs", [])[-14:]

    rules = [
        lambda: _all(last_7, lambda d: as_number(d.get("deep_work_hours", 0)) > 0),
        lambda: _all(last_7, lambda d: as_number(d.get("deep_work_hours", 0)) >= 3),
        lambda: len(last_14_raw) >= 14
        and _all(last_14_raw, lambda d: as_number(d.get("phone_screen_time", 0)) <= 1),
    ]

    newly_earned = []
    for badge, rule in zip(badges, rules):
        if badge.get("earned"):
            continue
        if rule():
            badge["earned"] = True
            newly_earned.append(badge["name"])
    return newly_earned


def latch_badges(document: Document, names: Iterable[str]) -> List[str]:
    """Mark the named badges earned. Unknown names are ignored."""
    wanted = set(names)
    flipped = []
    for badge in document.get("achievement_badges", []):
        if badge.get("name") in wanted and not badge.get("earned"):
            badge["earned"] = True
            flipped.append(badge["name"])
    return flipped


async def unlock_badges(store: DocumentStore, names: Iterable[str], name: str) -> Document:
    document = await load_document(store, name)
    if latch_badges(document, names):
        await store.set(document)
    return document
