"""
Daily quest instantiation

Snapshots a program's quest templates into per-member, per-day quests.
The completion rule is deep-copied so later template edits never reach
quests that already exist.
"""

import copy
from typing import Collection, Iterable, List
from datetime import date

from questlog.gamification.ranks import rank_at_least
from questlog.models.quest import DailyQuest, QuestTemplate


def instantiate_daily_quests(
    templates: Iterable[QuestTemplate],
    user_id: str,
    cohort_id: int,
    quest_date: date,
    member_rank: str = "E",
    existing_template_ids: Collection[int] = ()
) -> List[DailyQuest]:
    """
    Build the day's quests for one member

    Args:
        templates: The program's quest templates
        user_id: Member ID
        cohort_id: Cohort ID
        quest_date: Day the quests are for
        member_rank: Member's current rank, checked against each template's min_rank
        existing_template_ids: Templates already instantiated for this day

    Returns:
        New DailyQuest objects (not yet persisted, id is None)
    """
    quests = []
    for template in templates:
        if not template.active:
            continue
        if template.id in existing_template_ids:
            continue
        if not rank_at_least(member_rank, template.min_rank):
            continue

        quests.append(DailyQuest(
            user_id=user_id,
            cohort_id=cohort_id,
            quest_date=quest_date,
            template_id=template.id,
            title=template.title,
            description=template.description,
            category=template.category,
            xp_reward=template.xp_reward,
            stat_rewards=dict(template.stat_rewards),
            completion_rule=copy.deepcopy(template.completion_rule),
            completed=False,
        ))

    return quests
