"""Member cumulative stats models"""
from typing import Dict, Optional
from datetime import datetime
from pydantic import BaseModel, Field

STAT_NAMES = (
    "strength",
    "stamina",
    "agility",
    "intellect",
    "charisma",
    "reputation",
    "gold",
)

# Values a member starts a cohort with
STARTING_STATS: Dict[str, int] = {
    "strength": 10,
    "stamina": 12,
    "agility": 8,
    "intellect": 15,
    "charisma": 10,
    "reputation": 5,
    "gold": 0,
}


def empty_stat_gains() -> Dict[str, int]:
    """Mapping with every stat at zero"""
    return {name: 0 for name in STAT_NAMES}


class MemberStats(BaseModel):
    """
    Cumulative stats for one member in one cohort

    Rank is always derived from xp. Individual stats carry no floor;
    only xp is clamped at zero.
    """
    user_id: str
    cohort_id: int
    xp: int = Field(default=0, ge=0)
    rank: str = "E"
    streak: int = Field(default=0, ge=0)
    strength: int = STARTING_STATS["strength"]
    stamina: int = STARTING_STATS["stamina"]
    agility: int = STARTING_STATS["agility"]
    intellect: int = STARTING_STATS["intellect"]
    charisma: int = STARTING_STATS["charisma"]
    reputation: int = STARTING_STATS["reputation"]
    gold: int = STARTING_STATS["gold"]
    updated_at: Optional[datetime] = None

    def stat_values(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in STAT_NAMES}
