"""
Activity scoring and quest completion engine

This module turns a member's daily activity log into:
- XP and stat gains
- A rank
- A recomputed streak
- Quest completion changes

Everything here except streak recomputation is pure.
"""

from questlog.gamification.ranks import rank_for, next_rank, xp_for_rank, rank_progress
from questlog.gamification.scoring import mandatory_count, score_log, score_delta
from questlog.gamification.rule_engine import evaluate_rule
from questlog.gamification.fallback import matches_title
from questlog.gamification.streak_system import compute_streak, fallback_streak, recompute_streak
from questlog.gamification.quest_completion import plan_completion_changes
from questlog.gamification.daily_quests import instantiate_daily_quests

__all__ = [
    "rank_for",
    "next_rank",
    "xp_for_rank",
    "rank_progress",
    "mandatory_count",
    "score_log",
    "score_delta",
    "evaluate_rule",
    "matches_title",
    "compute_streak",
    "fallback_streak",
    "recompute_streak",
    "plan_completion_changes",
    "instantiate_daily_quests",
]
