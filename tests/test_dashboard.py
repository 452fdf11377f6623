from datetime import date, timedelta

import httpx
import pytest

from app.dashboard.client import DashboardClient
from app.dashboard.handlers import (
    LOAD_FAILED_MESSAGE,
    SAVE_FAILED_MESSAGE,
    SAVED_MESSAGE,
    dispatch,
)
from app.dashboard.state import DashboardState
from app.main import app
from app.services.document import build_initial_document

TODAY = date(2024, 1, 7)


def _state(document=None):
    return DashboardState(document=document or {}, current_date=TODAY.isoformat())


def _http():
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


def test_data_loaded_adds_default_targets():
    state = dispatch(_state(), "data_loaded", {"daily_logs": []})
    assert state.document["daily_targets"]["deep_work_hours"] == 3
    assert state.document["daily_targets"]["phone_screen_time"] == 1
    assert len(state.charts["weekly"]["labels"]) == 7
    assert len(state.charts["weekly_detail"]["datasets"][0]["data"]) == 7


def test_data_loaded_keeps_existing_targets():
    document = build_initial_document("Tester")
    document["daily_targets"]["deep_work_hours"] = 5
    state = dispatch(_state(), "data_loaded", document)
    assert state.document["daily_targets"]["deep_work_hours"] == 5


def test_log_saved_replaces_document_wholesale():
    state = dispatch(_state(), "data_loaded", build_initial_document("Tester"))
    server_copy = {"daily_logs": [{"date": TODAY.isoformat(), "mood_score": 9}]}

    state = dispatch(state, "log_saved", server_copy)
    assert state.document == server_copy
    assert state.notice == SAVED_MESSAGE
    assert state.charts["weekly_detail"]["datasets"][0]["data"][-1] == 9


def test_failures_open_modal():
    assert dispatch(_state(), "load_failed").notice == LOAD_FAILED_MESSAGE
    state = dispatch(_state(), "save_failed")
    assert state.modal_open
    assert not dispatch(state, "close_modal").modal_open


def test_badges_unlocked_message():
    state = dispatch(_state(), "badges_unlocked", {"names": ["Early Riser", "Phone Detox"]})
    assert "Early Riser" in state.notice
    assert "Phone Detox" in state.notice
    assert dispatch(_state(), "badges_unlocked", {"names": []}).notice is None


def test_switch_tab_and_theme():
    state = dispatch(_state(), "switch_tab", "weekly")
    assert state.active_tab == "weekly"
    assert dispatch(state, "switch_tab", "nowhere").active_tab == "weekly"

    state = dispatch(state, "toggle_theme")
    assert state.theme == "dark"
    assert dispatch(state, "toggle_theme").theme == "light"


def test_handlers_do_not_mutate_previous_state():
    before = _state()
    after = dispatch(before, "toggle_theme")
    assert before.theme == "light"
    assert after is not before


def test_unknown_event():
    with pytest.raises(ValueError):
        dispatch(_state(), "explode")


async def test_client_load_and_save(store, use_store):
    use_store(store)
    async with _http() as http:
        client = DashboardClient(http, current_date=TODAY)
        state = await client.load()
        assert state.document["daily_logs"] == []
        assert state.notice is None

        saved = await client.save_log({"deep_work_hours": 2, "mood_score": 7})
        assert saved is True
        assert client.state.notice == SAVED_MESSAGE
        assert client.state.document["daily_logs"][0]["date"] == TODAY.isoformat()
        assert client.today()["deep_work_progress"] == pytest.approx(2 / 3)
        assert client.weekly_stats()["avg_deep_work"] == round(2 / 7, 2)
        assert client.quote() in client.state.document["motivational_quotes"]


async def test_client_persists_unlocked_badges(store, use_store):
    use_store(store)
    async with _http() as http:
        client = DashboardClient(http, current_date=TODAY)
        await client.load()
        for offset in range(6, -1, -1):
            day = (TODAY - timedelta(days=offset)).isoformat()
            assert await client.save_log({"date": day, "deep_work_hours": 3})

        assert "Early Riser" in client.state.notice
        assert "Deep Work Master" in client.state.notice

    stored = await store.get()
    earned = {b["name"] for b in stored["achievement_badges"] if b["earned"]}
    assert earned == {"Early Riser", "Deep Work Master"}
    assert stored["user_profile"]["days_completed"] == 7


async def test_client_server_failure(use_store, broken_store):
    use_store(broken_store)
    async with _http() as http:
        client = DashboardClient(http, current_date=TODAY)
        assert (await client.load()).notice == LOAD_FAILED_MESSAGE
        assert await client.save_log({"deep_work_hours": 1}) is False
        assert client.state.notice == SAVE_FAILED_MESSAGE


async def test_client_network_failure():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(refuse), base_url="http://test") as http:
        client = DashboardClient(http, current_date=TODAY)
        assert (await client.load()).notice == LOAD_FAILED_MESSAGE


async def test_client_malformed_response():
    def garbage(request):
        return httpx.Response(200, text="<html>oops</html>")

    async with httpx.AsyncClient(transport=httpx.MockTransport(garbage), base_url="http://test") as http:
        client = DashboardClient(http, current_date=TODAY)
        assert (await client.load()).notice == LOAD_FAILED_MESSAGE
        assert await client.save_log({"deep_work_hours": 1}) is False


async def test_client_save_with_non_numeric_values(store, use_store):
    use_store(store)
    async with _http() as http:
        client = DashboardClient(http, current_date=TODAY)
        await client.load()
        assert await client.save_log({"deep_work_hours": "3h", "notes": None}) is True
        assert client.state.notice == SAVED_MESSAGE
        assert client.state.document["daily_logs"][0]["deep_work_hours"] == "3h"
        assert client.today()["deep_work_hours"] == 0.0
        assert client.weekly_stats()["avg_deep_work"] == 0.0
