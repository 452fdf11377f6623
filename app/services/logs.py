from datetime import date, timedelta
from typing import Any, Dict, List

from app.services.document import load_document
from app.services.store import Document, DocumentStore


def upsert_log(document: Document, log: Dict[str, Any]) -> Document:
    """Replace the entry with the same date in place, or append a new one."""
    logs = document.setdefault("daily_logs", [])
    for index, existing in enumerate(logs):
        if existing.get("date") == log["date"]:
            logs[index] = log
            break
    else:
        logs.append(log)
    return document


def consecutive_streak(logs: List[Dict[str, Any]]) -> int:
    """Consecutive calendar days ending at the most recent logged date."""
    days = set()
    for log in logs:
        try:
            days.add(date.fromisoformat(log.get("date", "")))
        except (TypeError, ValueError):
            continue
    if not days:
        return 0

    current = max(days)
    streak = 0
    while current in days:
        streak += 1
        current -= timedelta(days=1)
    return streak


def recompute_profile(document: Document, streak_mode: str = "naive") -> Document:
    profile = document.setdefault("user_profile", {})
    logs = document.get("daily_logs", [])
    profile["days_completed"] = len(logs)
    if streak_mode == "consecutive":
        profile["streak_count"] = consecutive_streak(logs)
    else:
        # Known simplification: the streak is the number of logged days
        profile["streak_count"] = len(logs)
    return document


async def save_log(
    store: DocumentStore,
    log: Dict[str, Any],
    name: str,
    streak_mode: str = "naive",
) -> Document:
    document = await load_document(store, name)
    upsert_log(document, log)
    recompute_profile(document, streak_mode)
    await store.set(document)
    return document
