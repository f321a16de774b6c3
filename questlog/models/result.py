"""Log submission result model"""
from typing import Dict
from pydantic import BaseModel, Field

from questlog.models.stats import MemberStats


class SubmissionResult(BaseModel):
    """What the orchestrator hands back to the HTTP/UI layer"""
    xp_gain: int  # XP the new log is worth on its own
    old_xp_gain: int  # XP the replaced log was worth
    delta_xp: int
    delta_stats: Dict[str, int]
    stats: MemberStats
    auto_completed_quest_ids: list[int] = Field(default_factory=list)
    auto_uncompleted_quest_ids: list[int] = Field(default_factory=list)
    streak_degraded: bool = False  # streak came from the fallback heuristic
