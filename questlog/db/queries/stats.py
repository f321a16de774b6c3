"""Member cumulative stats queries"""
import logging
from typing import Optional
from questlog.db.connection import db, storage_operation
from questlog.models.stats import MemberStats, STARTING_STATS, STAT_NAMES

logger = logging.getLogger(__name__)


@storage_operation("get_member_stats")
async def get_member_stats(user_id: str, cohort_id: int) -> Optional[MemberStats]:
    """Get cumulative stats for a member in a cohort (None if never joined)"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                """
                SELECT *
                FROM member_stats
                WHERE user_id = %s AND cohort_id = %s
                """,
                (user_id, cohort_id)
            )
            row = await cur.fetchone()
            return MemberStats(**row) if row else None


@storage_operation("init_member_stats")
async def init_member_stats(user_id: str, cohort_id: int) -> MemberStats:
    """
    Create starting stats for a member joining a cohort

    Called by the cohort-join flow. Existing stats are left alone.
    """
    columns = ", ".join(STAT_NAMES)
    placeholders = ", ".join(["%s"] * len(STAT_NAMES))

    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"""
                INSERT INTO member_stats (user_id, cohort_id, xp, rank, streak, {columns})
                VALUES (%s, %s, 0, 'E', 0, {placeholders})
                ON CONFLICT (user_id, cohort_id) DO NOTHING
                """,
                (user_id, cohort_id, *(STARTING_STATS[name] for name in STAT_NAMES))
            )
            await cur.execute(
                "SELECT * FROM member_stats WHERE user_id = %s AND cohort_id = %s",
                (user_id, cohort_id)
            )
            row = await cur.fetchone()
            await conn.commit()

    logger.info(f"Initialized stats for user {user_id} in cohort {cohort_id}")
    return MemberStats(**row)
