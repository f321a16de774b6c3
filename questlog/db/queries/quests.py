"""Quest template and daily quest queries"""
import json
import logging
from typing import Optional
from datetime import date, datetime
from questlog.db.connection import db, storage_operation
from questlog.models.quest import DailyQuest, QuestTemplate

logger = logging.getLogger(__name__)


@storage_operation("get_quest_templates")
async def get_quest_templates(program_id: int, active_only: bool = True) -> list[QuestTemplate]:
    """Get a program's quest templates"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            query = """
                SELECT id, program_id, category, title, description, xp_reward,
                       stat_rewards, completion_rule, min_rank, active
                FROM quest_templates
                WHERE program_id = %s
            """
            if active_only:
                query += " AND active = TRUE"
            query += " ORDER BY id"

            await cur.execute(query, (program_id,))
            rows = await cur.fetchall()
            return [QuestTemplate(**row) for row in rows]


@storage_operation("get_daily_quests")
async def get_daily_quests(user_id: str, cohort_id: int, quest_date: date) -> list[DailyQuest]:
    """Get a member's quests for one day"""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                """
                SELECT id, user_id, cohort_id, quest_date, template_id, title, description,
                       category, xp_reward, stat_rewards, completion_rule, completed, completed_at
                FROM daily_quests
                WHERE user_id = %s AND cohort_id = %s AND quest_date = %s
                ORDER BY id
                """,
                (user_id, cohort_id, quest_date)
            )
            rows = await cur.fetchall()
            return [DailyQuest(**row) for row in rows]


@storage_operation("insert_daily_quests")
async def insert_daily_quests(quests: list[DailyQuest]) -> int:
    """
    Insert daily quests, skipping ones already instantiated

    Returns:
        Number of rows actually inserted
    """
    if not quests:
        return 0

    inserted = 0
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            for quest in quests:
                await cur.execute(
                    """
                    INSERT INTO daily_quests (
                        user_id, cohort_id, quest_date, template_id, title, description,
                        category, xp_reward, stat_rewards, completion_rule, completed
                    )
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, FALSE)
                    ON CONFLICT (user_id, cohort_id, quest_date, template_id) DO NOTHING
                    """,
                    (
                        quest.user_id,
                        quest.cohort_id,
                        quest.quest_date,
                        quest.template_id,
                        quest.title,
                        quest.description,
                        quest.category.value if quest.category else None,
                        quest.xp_reward,
                        json.dumps(quest.stat_rewards),
                        json.dumps(quest.completion_rule) if quest.completion_rule is not None else None,
                    )
                )
                inserted += cur.rowcount
            await conn.commit()

    return inserted


@storage_operation("set_quest_completion")
async def set_quest_completion(
    quest_ids: list[int],
    completed: bool,
    completed_at: Optional[datetime] = None
) -> None:
    """
    Flip completion for a batch of daily quests

    completed_at is stored for completions and cleared for un-completions.
    """
    if not quest_ids:
        return

    async with db.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                """
                UPDATE daily_quests
                SET completed = %s,
                    completed_at = %s
                WHERE id = ANY(%s)
                """,
                (completed, completed_at if completed else None, list(quest_ids))
            )
            await conn.commit()

    logger.info(f"Marked {len(quest_ids)} quests {'complete' if completed else 'incomplete'}")
