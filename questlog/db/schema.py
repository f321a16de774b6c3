"""Table definitions for the scoring engine"""
import logging

from questlog.db.connection import db, storage_operation

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS = [
    """
    CREATE TABLE IF NOT EXISTS cohorts (
        id SERIAL PRIMARY KEY,
        program_id INTEGER NOT NULL,
        name TEXT NOT NULL,
        starts_on DATE NOT NULL,
        ends_on DATE NOT NULL,
        is_active BOOLEAN NOT NULL DEFAULT TRUE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS cohort_memberships (
        id SERIAL PRIMARY KEY,
        cohort_id INTEGER NOT NULL REFERENCES cohorts(id),
        user_id TEXT NOT NULL,
        role TEXT NOT NULL DEFAULT 'agent',
        joined_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP,
        UNIQUE (cohort_id, user_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS member_stats (
        user_id TEXT NOT NULL,
        cohort_id INTEGER NOT NULL REFERENCES cohorts(id),
        xp INTEGER NOT NULL DEFAULT 0,
        rank TEXT NOT NULL DEFAULT 'E',
        streak INTEGER NOT NULL DEFAULT 0,
        strength INTEGER NOT NULL DEFAULT 10,
        stamina INTEGER NOT NULL DEFAULT 12,
        agility INTEGER NOT NULL DEFAULT 8,
        intellect INTEGER NOT NULL DEFAULT 15,
        charisma INTEGER NOT NULL DEFAULT 10,
        reputation INTEGER NOT NULL DEFAULT 5,
        gold INTEGER NOT NULL DEFAULT 0,
        updated_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP,
        PRIMARY KEY (user_id, cohort_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS daily_logs (
        id SERIAL PRIMARY KEY,
        user_id TEXT NOT NULL,
        cohort_id INTEGER NOT NULL REFERENCES cohorts(id),
        log_date DATE NOT NULL,
        steps INTEGER NOT NULL DEFAULT 0,
        workout_done BOOLEAN NOT NULL DEFAULT FALSE,
        learning_minutes INTEGER NOT NULL DEFAULT 0,
        calls INTEGER NOT NULL DEFAULT 0,
        texts INTEGER NOT NULL DEFAULT 0,
        convos INTEGER NOT NULL DEFAULT 0,
        leads INTEGER NOT NULL DEFAULT 0,
        appts INTEGER NOT NULL DEFAULT 0,
        content_done BOOLEAN NOT NULL DEFAULT FALSE,
        notes TEXT NOT NULL DEFAULT '',
        created_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP,
        UNIQUE (user_id, cohort_id, log_date)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS quest_templates (
        id SERIAL PRIMARY KEY,
        program_id INTEGER NOT NULL,
        category TEXT NOT NULL,
        title TEXT NOT NULL,
        description TEXT,
        xp_reward INTEGER NOT NULL DEFAULT 0,
        stat_rewards JSONB NOT NULL DEFAULT '{}',
        completion_rule JSONB,
        min_rank TEXT NOT NULL DEFAULT 'E',
        active BOOLEAN NOT NULL DEFAULT TRUE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS daily_quests (
        id SERIAL PRIMARY KEY,
        user_id TEXT NOT NULL,
        cohort_id INTEGER NOT NULL REFERENCES cohorts(id),
        quest_date DATE NOT NULL,
        template_id INTEGER REFERENCES quest_templates(id),
        title TEXT NOT NULL,
        description TEXT,
        category TEXT,
        xp_reward INTEGER NOT NULL DEFAULT 0,
        stat_rewards JSONB NOT NULL DEFAULT '{}',
        completion_rule JSONB,
        completed BOOLEAN NOT NULL DEFAULT FALSE,
        completed_at TIMESTAMPTZ,
        UNIQUE (user_id, cohort_id, quest_date, template_id)
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_daily_logs_member_date ON daily_logs (user_id, cohort_id, log_date DESC)",
]


@storage_operation("init_schema")
async def init_schema() -> None:
    """Create tables if they don't exist. Safe to call multiple times."""
    async with db.connection() as conn:
        async with conn.cursor() as cur:
            for statement in SCHEMA_STATEMENTS:
                await cur.execute(statement)
            await conn.commit()
    logger.info(f"Schema ready ({len(SCHEMA_STATEMENTS)} statements applied)")
