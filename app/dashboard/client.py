import copy
import logging
from datetime import date
from typing import Any, Dict, List, Optional

import httpx

from app.dashboard.handlers import dispatch
from app.dashboard.state import DashboardState
from app.services.achievements import evaluate_achievements
from app.services.document import today_utc
from app.services.stats import last_n_days, pick_quote, today_metrics, weekly_summary

logger = logging.getLogger(__name__)

# network errors, non-2xx statuses and malformed bodies are all treated alike
REQUEST_ERRORS = (httpx.HTTPError, ValueError, KeyError, TypeError)


class DashboardClient:
    """Talks to the backend and keeps the dashboard state up to date."""

    def __init__(self, http: httpx.AsyncClient, current_date: Optional[date] = None):
        self.http = http
        self.state = DashboardState(
            document={},
            current_date=(current_date or today_utc()).isoformat(),
        )

    @property
    def reference_date(self) -> date:
        return date.fromisoformat(self.state.current_date)

    def dispatch(self, event: str, payload: Any = None) -> DashboardState:
        self.state = dispatch(self.state, event, payload)
        return self.state

    async def load(self) -> DashboardState:
        try:
            response = await self.http.get("/api/data")
            response.raise_for_status()
            document = response.json()
            if not isinstance(document, dict):
                raise TypeError("Document is not an object")
        except REQUEST_ERRORS as e:
            logger.error("Failed to load data from server: %s", e)
            return self.dispatch("load_failed")
        return self.dispatch("data_loaded", document)

    async def _post_document(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        response = await self.http.post(path, json=body)
        response.raise_for_status()
        document = response.json()["data"]
        if not isinstance(document, dict):
            raise TypeError("Document is not an object")
        return document

    async def save_log(self, log: Dict[str, Any]) -> bool:
        """Save today's log, then persist any badge it unlocked."""
        payload = {"date": self.state.current_date, **log}
        try:
            document = await self._post_document("/api/log", payload)
        except REQUEST_ERRORS as e:
            logger.error("Failed to save data to server: %s", e)
            self.dispatch("save_failed")
            return False
        self.dispatch("log_saved", document)

        candidate = copy.deepcopy(document)
        unlocked = evaluate_achievements(candidate, self.reference_date)
        if not unlocked:
            return True

        try:
            document = await self._post_document("/api/badges", {"earned": unlocked})
        except REQUEST_ERRORS as e:
            logger.error("Failed to save badges to server: %s", e)
            self.dispatch("save_failed")
            return False
        self.dispatch("badges_unlocked", {"names": unlocked, "document": document})
        return True

    def today(self) -> Dict[str, Any]:
        return today_metrics(self.state.document, self.reference_date)

    def last_7_days(self) -> List[Dict[str, Any]]:
        return last_n_days(self.state.document, self.reference_date, 7)

    def weekly_stats(self) -> Dict[str, Any]:
        return weekly_summary(self.last_7_days())

    def quote(self) -> Optional[str]:
        return pick_quote(self.state.document)
