"""Pydantic models and rule types"""
from questlog.models.activity import ActivityLog, LogSubmission, ACTIVITY_FIELDS
from questlog.models.stats import MemberStats, STAT_NAMES, STARTING_STATS, empty_stat_gains
from questlog.models.quest import QuestCategory, QuestTemplate, DailyQuest
from questlog.models.result import SubmissionResult

__all__ = [
    "ActivityLog",
    "LogSubmission",
    "ACTIVITY_FIELDS",
    "MemberStats",
    "STAT_NAMES",
    "STARTING_STATS",
    "empty_stat_gains",
    "QuestCategory",
    "QuestTemplate",
    "DailyQuest",
    "SubmissionResult",
]
