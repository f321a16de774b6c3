"""Quest template and daily quest models"""
from enum import Enum
from typing import Any, Dict, Optional
from datetime import date, datetime
from pydantic import BaseModel, Field


class QuestCategory(str, Enum):
    """Quest categories"""
    MANDATORY = "mandatory"
    FITNESS = "fitness"
    BUSINESS = "business"
    LEARNING = "learning"
    LOCATION = "location"
    LOCATION_CHECKIN = "location-checkin"

    @property
    def is_checkin_owned(self) -> bool:
        """Completed by location check-ins, never by activity logs"""
        return self in (QuestCategory.LOCATION, QuestCategory.LOCATION_CHECKIN)


class QuestTemplate(BaseModel):
    """Program-level quest definition"""
    id: int
    program_id: int
    category: QuestCategory
    title: str
    description: Optional[str] = None
    xp_reward: int = Field(default=0, ge=0)
    stat_rewards: Dict[str, int] = Field(default_factory=dict)
    completion_rule: Optional[Any] = None  # raw JSON rule tree
    min_rank: str = "E"
    active: bool = True


class DailyQuest(BaseModel):
    """Frozen per-day copy of a template for one member"""
    id: Optional[int] = None
    user_id: str
    cohort_id: int
    quest_date: date
    template_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    category: Optional[QuestCategory] = None  # NULL on rows older than categories
    xp_reward: int = 0
    stat_rewards: Dict[str, int] = Field(default_factory=dict)
    completion_rule: Optional[Any] = None
    completed: bool = False
    completed_at: Optional[datetime] = None
