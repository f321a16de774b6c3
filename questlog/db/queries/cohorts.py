"""Cohort and membership queries"""
import logging
from questlog.db.connection import db, storage_operation

logger = logging.getLogger(__name__)


@storage_operation("get_active_cohorts")
async def get_active_cohorts() -> list[dict]:
    """
    Get cohorts that are currently running

    Returns:
        List of {'id': int, 'program_id': int}
    """
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                """
                SELECT id, program_id
                FROM cohorts
                WHERE is_active = TRUE
                ORDER BY id
                """
            )
            rows = await cur.fetchall()
            return [dict(row) for row in rows]


@storage_operation("get_cohort_members")
async def get_cohort_members(cohort_id: int) -> list[str]:
    """Get user IDs of everyone in a cohort"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                "SELECT user_id FROM cohort_memberships WHERE cohort_id = %s ORDER BY joined_at",
                (cohort_id,)
            )
            rows = await cur.fetchall()
            return [row["user_id"] for row in rows]
