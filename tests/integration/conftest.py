"""Shared fixtures for service-level integration tests"""
import pytest
from datetime import date
from typing import Dict, List, Optional, Tuple
from unittest.mock import patch

from questlog.exceptions import QueryError
from questlog.models.activity import ActivityLog
from questlog.models.quest import DailyQuest
from questlog.models.stats import MemberStats


class FakeStore:
    """In-memory stand-in for the tables the log flow reads and writes"""

    def __init__(self):
        self.logs: Dict[Tuple[str, int, date], ActivityLog] = {}
        self.stats: Dict[Tuple[str, int], MemberStats] = {}
        self.quests: List[DailyQuest] = []
        self.history_available = True
        self.commits = 0

    async def get_daily_log(self, user_id: str, cohort_id: int, log_date: date) -> Optional[ActivityLog]:
        return self.logs.get((user_id, cohort_id, log_date))

    async def get_logs_in_range(self, user_id, cohort_id, start_date, end_date) -> List[dict]:
        if not self.history_available:
            raise QueryError("canceling statement due to statement timeout", operation="get_logs_in_range")
        rows = [
            {"log_date": day, **log.model_dump()}
            for (uid, cid, day), log in self.logs.items()
            if uid == user_id and cid == cohort_id and start_date <= day <= end_date
        ]
        return sorted(rows, key=lambda row: row["log_date"], reverse=True)

    async def get_member_stats(self, user_id: str, cohort_id: int) -> Optional[MemberStats]:
        return self.stats.get((user_id, cohort_id))

    async def commit_submission(self, user_id, cohort_id, log_date, log, stats) -> MemberStats:
        self.logs[(user_id, cohort_id, log_date)] = log
        self.stats[(user_id, cohort_id)] = stats
        self.commits += 1
        return stats

    async def get_daily_quests(self, user_id, cohort_id, quest_date) -> List[DailyQuest]:
        return [
            q for q in self.quests
            if q.user_id == user_id and q.cohort_id == cohort_id and q.quest_date == quest_date
        ]

    async def set_quest_completion(self, quest_ids, completed, completed_at=None) -> None:
        for quest in self.quests:
            if quest.id in quest_ids:
                quest.completed = completed
                quest.completed_at = completed_at if completed else None


@pytest.fixture
def store():
    """FakeStore patched over the query layer"""
    fake = FakeStore()
    names = [
        "get_daily_log",
        "get_logs_in_range",
        "get_member_stats",
        "commit_submission",
        "get_daily_quests",
        "set_quest_completion",
    ]
    patchers = [patch(f"questlog.db.queries.{name}", getattr(fake, name)) for name in names]
    for patcher in patchers:
        patcher.start()
    yield fake
    for patcher in patchers:
        patcher.stop()
