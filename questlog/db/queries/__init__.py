"""
Database queries - Re-export all functions so callers can use
'from questlog.db import queries' and 'queries.get_daily_log(...)'.

Module organization:
- logs.py: Daily activity logs, atomic log + stats commit
- stats.py: Member cumulative stats
- quests.py: Quest templates, daily quests, completion flags
- cohorts.py: Active cohorts and memberships
"""

# Log operations
from questlog.db.queries.logs import (
    get_daily_log,
    get_logs_in_range,
    commit_submission,
)

# Stats operations
from questlog.db.queries.stats import (
    get_member_stats,
    init_member_stats,
)

# Quest operations
from questlog.db.queries.quests import (
    get_quest_templates,
    get_daily_quests,
    insert_daily_quests,
    set_quest_completion,
)

# Cohort operations
from questlog.db.queries.cohorts import (
    get_active_cohorts,
    get_cohort_members,
)

__all__ = [
    "get_daily_log",
    "get_logs_in_range",
    "commit_submission",
    "get_member_stats",
    "init_member_stats",
    "get_quest_templates",
    "get_daily_quests",
    "insert_daily_quests",
    "set_quest_completion",
    "get_active_cohorts",
    "get_cohort_members",
]
