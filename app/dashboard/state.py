from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DashboardState:
    """Everything the dashboard renders from. Handlers return a new state."""

    document: Dict[str, Any]
    current_date: str
    active_tab: str = "overview"
    theme: str = "light"
    notice: Optional[str] = None
    charts: Dict[str, Any] = field(default_factory=dict)

    @property
    def modal_open(self) -> bool:
        return self.notice is not None
