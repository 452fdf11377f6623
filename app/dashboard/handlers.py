import copy
from dataclasses import replace
from datetime import date
from typing import Any, Callable, Dict, Optional

from app.dashboard.state import DashboardState
from app.services.stats import DEFAULT_TARGETS, last_n_days, mood_chart, weekly_chart

LOAD_FAILED_MESSAGE = "Could not load data from the server. Please try again."
SAVE_FAILED_MESSAGE = "Error: could not save data to the server."
SAVED_MESSAGE = "Today's log was saved successfully!"

BADGE_MESSAGES = {
    "Early Riser": "🌅 Early Riser badge unlocked!",
    "Deep Work Master": "🎯 Deep Work Master badge unlocked!",
    "Phone Detox": "📱 Phone Detox badge unlocked!",
}

TABS = ("overview", "daily", "weekly", "milestones", "achievements")

Handler = Callable[[DashboardState, Any], DashboardState]


def build_charts(document: Dict[str, Any], current_date: str) -> Dict[str, Any]:
    days = last_n_days(document, date.fromisoformat(current_date), 7)
    return {"weekly": weekly_chart(days), "weekly_detail": mood_chart(days)}


def with_document(state: DashboardState, document: Dict[str, Any]) -> DashboardState:
    return replace(state, document=document, charts=build_charts(document, state.current_date))


def on_data_loaded(state: DashboardState, document: Dict[str, Any]) -> DashboardState:
    document = copy.deepcopy(document) if document else {}
    if not document.get("daily_targets"):
        document["daily_targets"] = dict(DEFAULT_TARGETS)
    document.setdefault("daily_logs", [])
    return with_document(state, document)


def on_load_failed(state: DashboardState, _payload: Any = None) -> DashboardState:
    return replace(state, notice=LOAD_FAILED_MESSAGE)


def on_log_saved(state: DashboardState, document: Dict[str, Any]) -> DashboardState:
    # the server response replaces the local copy wholesale
    return replace(with_document(state, document), notice=SAVED_MESSAGE)


def on_save_failed(state: DashboardState, _payload: Any = None) -> DashboardState:
    return replace(state, notice=SAVE_FAILED_MESSAGE)


def on_badges_unlocked(state: DashboardState, payload: Dict[str, Any]) -> DashboardState:
    names = (payload or {}).get("names") or []
    if not names:
        return state
    if payload.get("document"):
        state = with_document(state, payload["document"])
    text = "\n".join(BADGE_MESSAGES.get(name, f"{name} badge unlocked!") for name in names)
    return replace(state, notice=text)


def on_switch_tab(state: DashboardState, tab: str) -> DashboardState:
    if tab not in TABS:
        return state
    if tab == "weekly":
        return replace(state, active_tab=tab, charts=build_charts(state.document, state.current_date))
    return replace(state, active_tab=tab)


def on_toggle_theme(state: DashboardState, _payload: Any = None) -> DashboardState:
    return replace(state, theme="light" if state.theme == "dark" else "dark")


def on_close_modal(state: DashboardState, _payload: Any = None) -> DashboardState:
    return replace(state, notice=None)


EVENTS: Dict[str, Handler] = {
    "data_loaded": on_data_loaded,
    "load_failed": on_load_failed,
    "log_saved": on_log_saved,
    "save_failed": on_save_failed,
    "badges_unlocked": on_badges_unlocked,
    "switch_tab": on_switch_tab,
    "toggle_theme": on_toggle_theme,
    "close_modal": on_close_modal,
}


def dispatch(state: DashboardState, event: str, payload: Optional[Any] = None) -> DashboardState:
    try:
        handler = EVENTS[event]
    except KeyError:
        raise ValueError(f"Unknown dashboard event: {event}") from None
    return handler(state, payload)
