"""Global test fixtures and utilities for questlog tests"""
import pytest
from unittest.mock import AsyncMock, MagicMock
from datetime import date

from questlog.models.activity import ActivityLog
from questlog.models.quest import DailyQuest, QuestCategory, QuestTemplate
from questlog.models.stats import MemberStats


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def mock_db_cursor():
    """Mock database cursor with standard query results"""
    cursor = AsyncMock()
    cursor.fetchone = AsyncMock(return_value=None)
    cursor.fetchall = AsyncMock(return_value=[])
    cursor.execute = AsyncMock()
    cursor.rowcount = 1
    return cursor


@pytest.fixture
def mock_db_connection(mock_db_cursor):
    """Mock database connection whose cursor() yields mock_db_cursor"""
    conn = AsyncMock()
    conn.cursor = MagicMock()
    conn.cursor.return_value.__aenter__.return_value = mock_db_cursor
    conn.commit = AsyncMock()
    conn.rollback = AsyncMock()
    return conn


# ============================================================================
# Member Fixtures
# ============================================================================

@pytest.fixture
def test_user_id():
    """Standard test member ID"""
    return "member-123"


@pytest.fixture
def test_cohort_id():
    """Standard test cohort ID"""
    return 7


@pytest.fixture
def test_log_date():
    """Standard submission date"""
    return date(2026, 2, 10)


@pytest.fixture
def member_stats(test_user_id, test_cohort_id):
    """Fresh member stats at cohort start"""
    return MemberStats(user_id=test_user_id, cohort_id=test_cohort_id)


# ============================================================================
# Activity Log Fixtures
# ============================================================================

@pytest.fixture
def full_day_log():
    """Every mandatory habit met plus bonuses (55 XP)"""
    return ActivityLog(
        steps=10000,
        workout_done=True,
        convos=5,
        appts=0,
        learning_minutes=20,
        content_done=True,
    )


@pytest.fixture
def quorum_log():
    """Exactly three mandatory habits met"""
    return ActivityLog(steps=7000, workout_done=True, learning_minutes=20)


@pytest.fixture
def submission_payload(test_user_id, test_cohort_id, test_log_date):
    """Raw submission dict as the HTTP layer would pass it"""
    return {
        "user_id": test_user_id,
        "cohort_id": test_cohort_id,
        "log_date": test_log_date.isoformat(),
        "steps": 10000,
        "workout_done": True,
        "convos": 5,
        "appts": 0,
        "learning_minutes": 20,
        "content_done": True,
        "notes": "Good day",
    }


# ============================================================================
# Quest Fixtures
# ============================================================================

@pytest.fixture
def daily_quest_factory(test_user_id, test_cohort_id, test_log_date):
    """Factory for daily quests on the standard date"""
    def _create(quest_id, title, rule=None, category=QuestCategory.MANDATORY, completed=False):
        return DailyQuest(
            id=quest_id,
            user_id=test_user_id,
            cohort_id=test_cohort_id,
            quest_date=test_log_date,
            template_id=quest_id,
            title=title,
            category=category,
            completion_rule=rule,
            completed=completed,
        )
    return _create


@pytest.fixture
def quest_templates():
    """Seed program templates"""
    return [
        QuestTemplate(
            id=1,
            program_id=1,
            category=QuestCategory.MANDATORY,
            title="MOVE: 7,000+ steps",
            xp_reward=5,
            stat_rewards={"stamina": 1},
            completion_rule={"all": [{"field": "steps", "op": "gte", "value": 7000}]},
        ),
        QuestTemplate(
            id=2,
            program_id=1,
            category=QuestCategory.MANDATORY,
            title="HUNT: Prospecting Block",
            xp_reward=5,
            stat_rewards={"charisma": 1},
            completion_rule={"any": [
                {"field": "convos", "op": "gte", "value": 5},
                {"field": "appts", "op": "gte", "value": 1},
            ]},
        ),
        QuestTemplate(
            id=3,
            program_id=1,
            category=QuestCategory.LOCATION_CHECKIN,
            title="Dungeon Check-In",
            xp_reward=10,
            stat_rewards={"reputation": 1},
            completion_rule=None,
        ),
        QuestTemplate(
            id=4,
            program_id=1,
            category=QuestCategory.BUSINESS,
            title="Book 3 appointments",
            xp_reward=30,
            completion_rule={"field": "appts", "op": "gte", "value": 3},
            min_rank="C",
        ),
    ]
