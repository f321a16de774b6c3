"""Daily activity log queries"""
import logging
from typing import Optional
from datetime import date
from questlog.db.connection import db, storage_operation
from questlog.exceptions import NotFoundError
from questlog.models.activity import ActivityLog
from questlog.models.stats import MemberStats, STAT_NAMES

logger = logging.getLogger(__name__)

_LOG_COLUMNS = (
    "steps, workout_done, learning_minutes, calls, texts, convos, "
    "leads, appts, content_done, notes"
)


@storage_operation("get_daily_log")
async def get_daily_log(user_id: str, cohort_id: int, log_date: date) -> Optional[ActivityLog]:
    """
    Get the stored log for one member, cohort and date

    Returns:
        Normalized ActivityLog, or None if the member has not logged that day
    """
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"""
                SELECT {_LOG_COLUMNS}
                FROM daily_logs
                WHERE user_id = %s AND cohort_id = %s AND log_date = %s
                """,
                (user_id, cohort_id, log_date)
            )
            row = await cur.fetchone()
            return ActivityLog.from_row(row) if row else None


@storage_operation("get_logs_in_range")
async def get_logs_in_range(
    user_id: str,
    cohort_id: int,
    start_date: date,
    end_date: date
) -> list[dict]:
    """
    Get a member's logs between two dates (inclusive), newest first

    Only the columns that count towards the mandatory quorum are read.
    """
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                """
                SELECT log_date, steps, workout_done, learning_minutes, convos, appts
                FROM daily_logs
                WHERE user_id = %s AND cohort_id = %s
                  AND log_date >= %s AND log_date <= %s
                ORDER BY log_date DESC
                """,
                (user_id, cohort_id, start_date, end_date)
            )
            rows = await cur.fetchall()
            return [dict(row) for row in rows]


@storage_operation("commit_submission")
async def commit_submission(
    user_id: str,
    cohort_id: int,
    log_date: date,
    log: ActivityLog,
    stats: MemberStats
) -> MemberStats:
    """
    Upsert the day's log and write the member's new stats in one transaction

    The log replaces any existing row for (user_id, cohort_id, log_date).
    Either both writes land or neither does.

    Returns:
        Stats as stored

    Raises:
        NotFoundError: the member has no stats row; nothing is written
    """
    stat_assignments = ",\n                    ".join(f"{name} = %s" for name in STAT_NAMES)

    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"""
                INSERT INTO daily_logs (user_id, cohort_id, log_date, {_LOG_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                ON CONFLICT (user_id, cohort_id, log_date) DO UPDATE SET
                    steps = EXCLUDED.steps,
                    workout_done = EXCLUDED.workout_done,
                    learning_minutes = EXCLUDED.learning_minutes,
                    calls = EXCLUDED.calls,
                    texts = EXCLUDED.texts,
                    convos = EXCLUDED.convos,
                    leads = EXCLUDED.leads,
                    appts = EXCLUDED.appts,
                    content_done = EXCLUDED.content_done,
                    notes = EXCLUDED.notes
                """,
                (
                    user_id,
                    cohort_id,
                    log_date,
                    log.steps,
                    log.workout_done,
                    log.learning_minutes,
                    log.calls,
                    log.texts,
                    log.convos,
                    log.leads,
                    log.appts,
                    log.content_done,
                    log.notes,
                )
            )

            await cur.execute(
                f"""
                UPDATE member_stats
                SET xp = %s,
                    rank = %s,
                    streak = %s,
                    {stat_assignments},
                    updated_at = CURRENT_TIMESTAMP
                WHERE user_id = %s AND cohort_id = %s
                RETURNING *
                """,
                (
                    stats.xp,
                    stats.rank,
                    stats.streak,
                    *(getattr(stats, name) for name in STAT_NAMES),
                    user_id,
                    cohort_id,
                )
            )
            row = await cur.fetchone()
            if row is None:
                await conn.rollback()
                raise NotFoundError(
                    message=f"No stats for user {user_id} in cohort {cohort_id}; log not saved",
                    record_type="Member stats",
                    record_id=f"{user_id}:{cohort_id}",
                    user_id=user_id,
                    operation="commit_submission",
                )
            await conn.commit()

    logger.info(f"Saved log for user {user_id} cohort {cohort_id} on {log_date}")
    return MemberStats(**row)
