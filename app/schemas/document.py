from pydantic import BaseModel, Field
from typing import List

class UserProfile(BaseModel):
    name: str
    start_date: str
    current_month: int = 1
    days_completed: int = 0
    streak_count: int = 0

class DailyTargets(BaseModel):
    deep_work_hours: float = 3
    phone_screen_time: float = 1
    exercise_sessions_per_week: int = 5
    sleep_hours: float = 8
    meditation_minutes: int = 10

class Badge(BaseModel):
    name: str
    description: str
    earned: bool = False

class KeyGoal(BaseModel):
    goal: str
    progress: int = Field(0, ge=0, le=100)
    completed: bool = False

class Milestone(BaseModel):
    month: int
    title: str
    status: str = Field("not_started", pattern="^(not_started|in_progress|completed)$")
    completion_rate: int = Field(0, ge=0, le=100)
    color: str
    key_goals: List[KeyGoal] = []
