"""Generate today's daily quests for every active cohort"""
import asyncio
import logging
import sys

from questlog.config import LOG_LEVEL, validate_config
from questlog.db.connection import db
from questlog.db.schema import init_schema
from questlog.exceptions import QuestLogError
from questlog.services.container import init_container
from questlog.utils.dates import local_today, parse_iso_date

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=getattr(logging, LOG_LEVEL)
)
logger = logging.getLogger(__name__)


async def run(quest_date, cohort_id=None, program_id=None, create_schema=False) -> int:
    """Generate quests and return the number inserted"""
    try:
        validate_config()

        logger.info("Initializing database connection pool...")
        await db.init_pool()

        if create_schema:
            await init_schema()

        container = init_container(db)
        service = container.daily_quest_service

        if cohort_id is not None:
            total = await service.generate_for_cohort(cohort_id, program_id, quest_date)
        else:
            total = await service.generate_for_all_active_cohorts(quest_date)

        logger.info(f"Done: {total} quests generated for {quest_date}")
        return total
    finally:
        logger.info("Closing database connection...")
        await db.close_pool()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Generate daily quests from program templates")
    parser.add_argument("--date", help="Quest date as YYYY-MM-DD (default: today)")
    parser.add_argument("--timezone", default="UTC", help="Timezone used to resolve today")
    parser.add_argument("--cohort-id", type=int, help="Only generate for this cohort")
    parser.add_argument("--program-id", type=int, help="Program of --cohort-id")
    parser.add_argument("--init-schema", action="store_true", help="Create tables before generating")

    args = parser.parse_args()

    if args.cohort_id is not None and args.program_id is None:
        parser.error("--program-id is required with --cohort-id")

    try:
        quest_date = parse_iso_date(args.date) if args.date else local_today(args.timezone)
    except ValueError:
        parser.error(f"invalid --date {args.date!r}, expected YYYY-MM-DD")

    try:
        asyncio.run(run(quest_date, args.cohort_id, args.program_id, args.init_schema))
    except QuestLogError as e:
        logger.error(f"Quest generation failed: {e.message}")
        sys.exit(1)
