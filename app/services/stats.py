import random
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from app.data import seed

DEFAULT_TARGETS = seed.daily_targets


def placeholder_log(day: str) -> Dict[str, Any]:
    return {
        "date": day,
        "deep_work_hours": 0,
        "phone_screen_time": 0,
        "exercise_done": False,
        "sleep_hours": 0,
        "mood_score": 5,
    }


def find_log(document: Dict[str, Any], day: str) -> Optional[Dict[str, Any]]:
    for log in document.get("daily_logs", []):
        if log.get("date") == day:
            return log
    return None


def last_n_days(document: Dict[str, Any], reference_date: date, n: int = 7) -> List[Dict[str, Any]]:
    """One entry per calendar day ending at reference_date, oldest first.

    Days without a log get a zero-valued placeholder, so the result always
    has exactly ``n`` entries.
    """
    days = []
    for offset in range(n - 1, -1, -1):
        day = (reference_date - timedelta(days=offset)).isoformat()
        days.append(find_log(document, day) or placeholder_log(day))
    return days


def as_number(value: Any) -> float:
    """Stored values are not validated; anything non-numeric counts as 0."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _mean(days: List[Dict[str, Any]], field: str) -> float:
    if not days:
        return 0.0
    return sum(as_number(d.get(field, 0)) for d in days) / len(days)


def weekly_summary(days: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "avg_deep_work": round(_mean(days, "deep_work_hours"), 2),
        "exercise_days": sum(1 for d in days if d.get("exercise_done")),
        "avg_sleep": round(_mean(days, "sleep_hours"), 2),
        "avg_mood": round(_mean(days, "mood_score"), 2),
    }


def today_metrics(document: Dict[str, Any], reference_date: date) -> Dict[str, Any]:
    """Today's values and their progress against the daily targets."""
    targets = document.get("daily_targets") or DEFAULT_TARGETS
    log = find_log(document, reference_date.isoformat()) or {}

    deep_work = as_number(log.get("deep_work_hours", 0))
    screen_time = as_number(log.get("phone_screen_time", 0))
    deep_work_target = as_number(targets.get("deep_work_hours")) or DEFAULT_TARGETS["deep_work_hours"]
    screen_target = as_number(targets.get("phone_screen_time")) or DEFAULT_TARGETS["phone_screen_time"]

    exercise_done = bool(log.get("exercise_done", False))
    return {
        "deep_work_hours": deep_work,
        "deep_work_progress": deep_work / deep_work_target,
        "phone_screen_time": screen_time,
        "screen_time_progress": min(screen_time / screen_target, 1.0),
        "screen_time_over_limit": screen_time > screen_target,
        "exercise_done": exercise_done,
        "exercise_type": (log.get("exercise_type") or "") if exercise_done else "",
        "sleep_hours": as_number(log.get("sleep_hours", 0)),
        "sleep_quality": log.get("sleep_quality", 0),
    }


def weekly_chart(days: List[Dict[str, Any]]) -> Dict[str, Any]:
    labels = [date.fromisoformat(d["date"]).strftime("%a") for d in days]
    return {
        "type": "line",
        "labels": labels,
        "datasets": [
            {"label": "Deep Work (h)", "data": [d.get("deep_work_hours", 0) for d in days], "color": "#1FB8CD"},
            {"label": "Screen Time (h)", "data": [d.get("phone_screen_time", 0) for d in days], "color": "#B4413C"},
            {"label": "Sleep (h)", "data": [d.get("sleep_hours", 0) for d in days], "color": "#FFC185"},
        ],
    }


def mood_chart(days: List[Dict[str, Any]]) -> Dict[str, Any]:
    labels = []
    for d in days:
        day = date.fromisoformat(d["date"])
        labels.append(f"{day.strftime('%b')} {day.day}")
    return {
        "type": "bar",
        "labels": labels,
        "datasets": [
            {"label": "Mood Score", "data": [d.get("mood_score", 5) for d in days], "color": "#5D878F"},
        ],
        "y_max": 10,
    }


def pick_quote(document: Dict[str, Any], rng: Optional[random.Random] = None) -> Optional[str]:
    quotes = document.get("motivational_quotes") or []
    if not quotes:
        return None
    return (rng or random).choice(quotes)
