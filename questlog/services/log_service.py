"""
LogSubmissionService - Daily Log Submission Orchestrator

Turns a member's daily log into stat, rank, streak and quest changes.

Pipeline for one (member, cohort, date):
1. Validate the payload
2. Load the log being replaced (absent = all-zero for scoring)
3. Load cumulative stats (must exist)
4. Score old and new logs, apply only the difference
5. Recompute the streak from history (degraded heuristic on storage errors)
6. Commit the new log and stats together
7. Re-evaluate the day's quests against the new log and flip completion flags
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Tuple, Union
from datetime import datetime, timezone

from pydantic import ValidationError as PydanticValidationError

from questlog.db import queries
from questlog.exceptions import NotFoundError, StorageError, ValidationError
from questlog.gamification.quest_completion import plan_completion_changes
from questlog.gamification.ranks import rank_for
from questlog.gamification.scoring import score_delta, xp_from_log
from questlog.gamification.streak_system import fallback_streak, recompute_streak
from questlog.models.activity import ActivityLog, LogSubmission
from questlog.models.result import SubmissionResult
from questlog.models.stats import MemberStats, STAT_NAMES

logger = logging.getLogger(__name__)


class LogSubmissionService:
    """
    Service for daily log submissions.

    Responsibilities:
    - Delta-based XP and stat accounting (resubmitting is a no-op)
    - Rank derivation from cumulative XP
    - Streak recomputation
    - Automatic quest completion and un-completion

    Submissions for the same member and cohort are serialized in-process;
    different members run independently.
    """

    def __init__(self, db_connection):
        """
        Initialize LogSubmissionService.

        Args:
            db_connection: Database connection instance
        """
        self.db = db_connection
        self._member_locks: Dict[str, asyncio.Lock] = {}
        self._lock_users: Dict[str, int] = {}
        logger.debug("LogSubmissionService initialized")

    def _get_lock(self, user_id: str, cohort_id: int) -> asyncio.Lock:
        """Get or create the lock for a member+cohort pair"""
        lock_key = f"{user_id}:{cohort_id}"
        if lock_key not in self._member_locks:
            self._member_locks[lock_key] = asyncio.Lock()
        return self._member_locks[lock_key]

    @asynccontextmanager
    async def _member_lock(self, user_id: str, cohort_id: int) -> AsyncIterator[None]:
        """
        Hold the member+cohort lock

        The lock is dropped from the table once no submission holds or
        waits on it.
        """
        lock_key = f"{user_id}:{cohort_id}"
        lock = self._get_lock(user_id, cohort_id)
        self._lock_users[lock_key] = self._lock_users.get(lock_key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[lock_key] -= 1
            if self._lock_users[lock_key] == 0:
                del self._lock_users[lock_key]
                del self._member_locks[lock_key]

    async def submit_log(
        self,
        payload: Union[LogSubmission, Dict[str, Any]]
    ) -> SubmissionResult:
        """
        Process a day's activity log.

        Args:
            payload: LogSubmission or the raw submitted dict

        Returns:
            SubmissionResult with XP gained, deltas, updated stats and
            the quest IDs that changed state

        Raises:
            ValidationError: payload is malformed; nothing persisted
            NotFoundError: member has no stats in this cohort
            StorageError: reading or writing the log, stats or quests failed
        """
        submission = self._validate(payload)
        user_id = submission.user_id
        cohort_id = submission.cohort_id
        log_date = submission.log_date
        new_log = submission.to_activity_log()

        async with self._member_lock(user_id, cohort_id):
            prior_log = await queries.get_daily_log(user_id, cohort_id, log_date)

            stats = await queries.get_member_stats(user_id, cohort_id)
            if stats is None:
                raise NotFoundError(
                    message=f"No stats for user {user_id} in cohort {cohort_id}",
                    record_type="Member stats",
                    record_id=f"{user_id}:{cohort_id}",
                    user_id=user_id,
                    operation="submit_log",
                )

            old_xp = xp_from_log(prior_log)
            new_xp = xp_from_log(new_log)
            delta_xp, delta_stats = score_delta(prior_log, new_log)

            new_streak, streak_degraded = await self._recompute_streak(submission, stats)

            updated = self._apply_delta(stats, delta_xp, delta_stats, new_streak)
            saved = await queries.commit_submission(
                user_id, cohort_id, log_date, new_log, updated
            )

        logger.info(
            f"Log for user {user_id} cohort {cohort_id} on {log_date}: "
            f"{old_xp} -> {new_xp} XP (delta {delta_xp:+d}), "
            f"total {saved.xp} XP, rank {saved.rank}, streak {saved.streak}"
        )

        to_complete, to_uncomplete = await self._sync_quests(submission, new_log)

        return SubmissionResult(
            xp_gain=new_xp,
            old_xp_gain=old_xp,
            delta_xp=delta_xp,
            delta_stats=delta_stats,
            stats=saved,
            auto_completed_quest_ids=to_complete,
            auto_uncompleted_quest_ids=to_uncomplete,
            streak_degraded=streak_degraded,
        )

    def _validate(self, payload: Union[LogSubmission, Dict[str, Any]]) -> LogSubmission:
        if isinstance(payload, LogSubmission):
            return payload
        try:
            return LogSubmission.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(
                e,
                user_id=payload.get("user_id") if isinstance(payload, dict) else None,
                operation="submit_log",
            ) from e

    async def _recompute_streak(
        self,
        submission: LogSubmission,
        stats: MemberStats
    ) -> Tuple[int, bool]:
        """
        Streak ending at the submitted date.

        Returns:
            (streak, degraded) - degraded is True when history could not
            be read and the stored streak was extended or reset instead
        """
        new_log = submission.to_activity_log()
        try:
            streak = await recompute_streak(
                submission.user_id,
                submission.cohort_id,
                submission.log_date,
                anchor_log=new_log,
            )
            return streak, False
        except StorageError as e:
            streak = fallback_streak(stats.streak, new_log)
            logger.warning(
                f"Streak history unavailable for user {submission.user_id} "
                f"cohort {submission.cohort_id} ({e.message}); "
                f"using degraded streak {stats.streak} -> {streak}"
            )
            return streak, True

    def _apply_delta(
        self,
        stats: MemberStats,
        delta_xp: int,
        delta_stats: Dict[str, int],
        streak: int
    ) -> MemberStats:
        """New cumulative stats: xp clamped at zero, stats shifted by their delta"""
        new_xp = max(0, stats.xp + delta_xp)
        changes: Dict[str, Any] = {
            "xp": new_xp,
            "rank": rank_for(new_xp),
            "streak": streak,
        }
        for name in STAT_NAMES:
            value = getattr(stats, name) + delta_stats[name]
            if value < 0:
                # No per-stat floor; surfaced for investigation
                logger.warning(
                    f"Stat {name} for user {stats.user_id} cohort {stats.cohort_id} "
                    f"went negative ({value}) after a log edit"
                )
            changes[name] = value

        return stats.model_copy(update=changes)

    async def _sync_quests(
        self,
        submission: LogSubmission,
        new_log: ActivityLog
    ) -> Tuple[List[int], List[int]]:
        """
        Flip the day's quest completion flags to match the new log.

        Stats are already committed when this runs; a failure here is
        raised to the caller and fixed by the next submission.
        """
        quests = await queries.get_daily_quests(
            submission.user_id, submission.cohort_id, submission.log_date
        )
        to_complete, to_uncomplete = plan_completion_changes(quests, new_log)

        if to_complete:
            await queries.set_quest_completion(
                to_complete, True, completed_at=datetime.now(timezone.utc)
            )
        if to_uncomplete:
            await queries.set_quest_completion(to_uncomplete, False)

        if to_complete or to_uncomplete:
            logger.info(
                f"User {submission.user_id} quests on {submission.log_date}: "
                f"completed {to_complete}, uncompleted {to_uncomplete}"
            )

        return to_complete, to_uncomplete

