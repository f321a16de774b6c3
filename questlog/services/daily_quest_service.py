"""
DailyQuestService - Daily Quest Generation

Instantiates each cohort member's quests for a day from the program's
active templates. Runs once a day from scripts/generate_daily_quests.py.
"""

import logging
from typing import Optional
from datetime import date

from questlog.db import queries
from questlog.exceptions import QuestLogError
from questlog.gamification.daily_quests import instantiate_daily_quests

logger = logging.getLogger(__name__)


class DailyQuestService:
    """
    Service for daily quest generation.

    Responsibilities:
    - Snapshot templates into per-member quests (rule frozen at creation)
    - Rank gating via each template's min_rank
    - Idempotent generation (re-running a day inserts nothing new)
    """

    def __init__(self, db_connection):
        self.db = db_connection
        logger.debug("DailyQuestService initialized")

    async def generate_for_member(
        self,
        user_id: str,
        cohort_id: int,
        program_id: int,
        quest_date: date,
        templates: Optional[list] = None
    ) -> int:
        """
        Create the member's quests for quest_date if missing.

        Returns:
            Number of quests inserted
        """
        if templates is None:
            templates = await queries.get_quest_templates(program_id)

        stats = await queries.get_member_stats(user_id, cohort_id)
        member_rank = stats.rank if stats else "E"

        existing = await queries.get_daily_quests(user_id, cohort_id, quest_date)
        existing_ids = {q.template_id for q in existing if q.template_id is not None}

        quests = instantiate_daily_quests(
            templates,
            user_id,
            cohort_id,
            quest_date,
            member_rank=member_rank,
            existing_template_ids=existing_ids,
        )
        return await queries.insert_daily_quests(quests)

    async def generate_for_cohort(self, cohort_id: int, program_id: int, quest_date: date) -> int:
        """
        Create quest_date's quests for every member of a cohort.

        Returns:
            Number of quests inserted
        """
        templates = await queries.get_quest_templates(program_id)
        if not templates:
            logger.info(f"Cohort {cohort_id}: program {program_id} has no active templates")
            return 0

        members = await queries.get_cohort_members(cohort_id)
        total = 0
        for user_id in members:
            total += await self.generate_for_member(
                user_id, cohort_id, program_id, quest_date, templates=templates
            )

        logger.info(
            f"Cohort {cohort_id}: generated {total} quests for {len(members)} members on {quest_date}"
        )
        return total

    async def generate_for_all_active_cohorts(self, quest_date: date) -> int:
        """
        Run generation for every active cohort.

        A cohort that fails is logged and skipped so the others still run.

        Returns:
            Total quests inserted
        """
        cohorts = await queries.get_active_cohorts()
        total = 0
        for cohort in cohorts:
            try:
                total += await self.generate_for_cohort(
                    cohort["id"], cohort["program_id"], quest_date
                )
            except QuestLogError as e:
                logger.error(f"Quest generation failed for cohort {cohort['id']}: {e.message}")

        logger.info(f"Generated {total} quests across {len(cohorts)} cohorts for {quest_date}")
        return total
