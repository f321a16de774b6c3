"""
Streak Recomputation

A streak is the number of consecutive days, ending at an anchor date,
whose log meets the mandatory quorum (3 of 4 habits by default).

Streaks are rebuilt from history on every submission instead of being
incremented, so edits and backfills of past days stay correct:
- Start at the anchor date with streak = 0
- Stop at the first day with no log or with quorum below the threshold
- Otherwise count the day and step one day back
- Never look further back than the lookback window (120 days)
"""

from typing import Dict, Mapping, Optional
from datetime import date, timedelta
import logging

from questlog import config
from questlog.db import queries
from questlog.gamification.scoring import mandatory_count
from questlog.models.activity import ActivityLog

logger = logging.getLogger(__name__)


def compute_streak(
    logs_by_date: Mapping[date, ActivityLog],
    anchor_date: date,
    lookback_days: Optional[int] = None,
    quorum: Optional[int] = None
) -> int:
    """
    Walk backwards from anchor_date while each day meets quorum

    Args:
        logs_by_date: Logs keyed by date
        anchor_date: Day the walk starts from (counted if it qualifies)
        lookback_days: Oldest day considered is anchor_date - lookback_days
        quorum: Mandatory habits needed for a day to count

    Returns:
        Streak length in days
    """
    lookback_days = config.STREAK_LOOKBACK_DAYS if lookback_days is None else lookback_days
    quorum = config.STREAK_QUORUM if quorum is None else quorum
    oldest = anchor_date - timedelta(days=lookback_days)

    streak = 0
    cursor = anchor_date
    while cursor >= oldest:
        log = logs_by_date.get(cursor)
        if log is None:
            break
        if mandatory_count(log) < quorum:
            break
        streak += 1
        cursor -= timedelta(days=1)

    return streak


def fallback_streak(
    previous_streak: int,
    log: ActivityLog,
    quorum: Optional[int] = None
) -> int:
    """
    Degraded streak for when history cannot be read

    Continues the stored streak if today's log meets quorum, else resets.
    """
    quorum = config.STREAK_QUORUM if quorum is None else quorum
    if mandatory_count(log) >= quorum:
        return previous_streak + 1
    return 0


async def recompute_streak(
    user_id: str,
    cohort_id: int,
    anchor_date: date,
    anchor_log: Optional[ActivityLog] = None,
    lookback_days: Optional[int] = None,
    quorum: Optional[int] = None
) -> int:
    """
    Rebuild a member's streak from stored logs

    Args:
        user_id: Member ID
        cohort_id: Cohort ID
        anchor_date: Date just submitted or edited
        anchor_log: Log to use for anchor_date instead of the stored one
                    (the submission being processed is not committed yet)
        lookback_days: History window, defaults to STREAK_LOOKBACK_DAYS
        quorum: Defaults to STREAK_QUORUM

    Returns:
        Streak length in days

    Raises:
        StorageError: history could not be loaded
    """
    lookback_days = config.STREAK_LOOKBACK_DAYS if lookback_days is None else lookback_days
    start = anchor_date - timedelta(days=lookback_days)

    rows = await queries.get_logs_in_range(user_id, cohort_id, start, anchor_date)

    logs_by_date: Dict[date, ActivityLog] = {
        row["log_date"]: ActivityLog.from_row(row) for row in rows
    }
    if anchor_log is not None:
        logs_by_date[anchor_date] = anchor_log

    streak = compute_streak(logs_by_date, anchor_date, lookback_days, quorum)

    logger.debug(
        f"Recomputed streak for user {user_id} in cohort {cohort_id} "
        f"at {anchor_date}: {streak} days ({len(rows)} logs in window)"
    )

    return streak
