from datetime import date, timedelta

from app.services.achievements import evaluate_achievements, latch_badges, unlock_badges
from app.services.document import build_initial_document

REFERENCE = date(2024, 1, 14)


def _week(make_log, **fields):
    return [make_log((REFERENCE - timedelta(days=i)).isoformat(), **fields) for i in range(6, -1, -1)]


def _document(logs):
    document = build_initial_document("Tester")
    document["daily_logs"] = logs
    return document


def _earned(document):
    return {b["name"] for b in document["achievement_badges"] if b["earned"]}


def test_full_week_of_deep_work_earns_two_badges(make_log):
    document = _document(_week(make_log, deep_work_hours=3, phone_screen_time=0.5))
    unlocked = evaluate_achievements(document, REFERENCE)

    assert unlocked == ["Early Riser", "Deep Work Master"]
    assert _earned(document) == {"Early Riser", "Deep Work Master"}


def test_light_week_earns_only_early_riser(make_log):
    document = _document(_week(make_log, deep_work_hours=1))
    assert evaluate_achievements(document, REFERENCE) == ["Early Riser"]


def test_missing_day_breaks_weekly_badges(make_log):
    logs = _week(make_log, deep_work_hours=5)
    del logs[3]
    document = _document(logs)
    assert evaluate_achievements(document, REFERENCE) == []


def test_phone_detox_needs_fourteen_raw_logs(make_log):
    logs = [make_log(f"2023-12-{day:02d}", phone_screen_time=1) for day in range(1, 14)]
    document = _document(logs)
    assert "Phone Detox" not in evaluate_achievements(document, REFERENCE)

    document["daily_logs"].append(make_log("2023-12-20", phone_screen_time=0.2))
    assert evaluate_achievements(document, REFERENCE) == ["Phone Detox"]


def test_phone_detox_uses_last_fourteen_in_storage_order(make_log):
    logs = [make_log("2023-11-01", phone_screen_time=6)]
    logs += [make_log(f"2023-12-{day:02d}", phone_screen_time=0.5) for day in range(1, 15)]
    document = _document(logs)
    assert evaluate_achievements(document, REFERENCE) == ["Phone Detox"]

    document = _document(logs[1:] + [make_log("2023-12-31", phone_screen_time=1.5)])
    assert evaluate_achievements(document, REFERENCE) == []


def test_earned_badges_never_reset(make_log):
    document = _document([])
    for badge in document["achievement_badges"][:3]:
        badge["earned"] = True

    assert evaluate_achievements(document, REFERENCE) == []
    assert _earned(document) >= {"Early Riser", "Deep Work Master", "Phone Detox"}


def test_earned_badge_is_not_reported_twice(make_log):
    document = _document(_week(make_log, deep_work_hours=1))
    assert evaluate_achievements(document, REFERENCE) == ["Early Riser"]
    assert evaluate_achievements(document, REFERENCE) == []
    assert "Early Riser" in _earned(document)


def test_latch_badges_ignores_unknown_names():
    document = _document([])
    assert latch_badges(document, ["Zen Mind", "Made Up"]) == ["Zen Mind"]
    assert latch_badges(document, ["Zen Mind"]) == []
    assert _earned(document) == {"Zen Mind"}


async def test_unlock_badges_persists(store):
    await unlock_badges(store, ["Phone Detox"], name="Tester")
    stored = await store.get()
    assert _earned(stored) == {"Phone Detox"}

    await unlock_badges(store, [], name="Tester")
    assert _earned(await store.get()) == {"Phone Detox"}


def test_non_numeric_values_do_not_break_rules(make_log):
    logs = _week(make_log, deep_work_hours=4)
    logs[-1]["deep_work_hours"] = "4h"
    document = _document(logs)
    assert evaluate_achievements(document, REFERENCE) == []
