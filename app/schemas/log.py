from pydantic import BaseModel, Field
from typing import Any, Dict, List

class DailyLog(BaseModel):
    date: str = Field(..., min_length=1, description="Calendar day YYYY-MM-DD, natural key")
    # defaults fill missing keys only; values that are present are stored as given
    deep_work_hours: Any = 0
    phone_screen_time: Any = 0
    exercise_done: Any = False
    exercise_type: Any = ""
    sleep_hours: Any = 0
    sleep_quality: Any = 0
    mood_score: Any = 0
    meditation_done: Any = False
    notes: Any = ""

    model_config = {"extra": "allow"}

class LogSaveResponse(BaseModel):
    message: str
    data: Dict[str, Any]

class BadgeUnlock(BaseModel):
    earned: List[str] = []

class WeeklyStatsResponse(BaseModel):
    reference_date: str
    avg_deep_work: float
    exercise_days: int
    avg_sleep: float
    avg_mood: float
    days: List[Dict[str, Any]]
