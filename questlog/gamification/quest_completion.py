"""
Quest completion planning

Decides which of a day's quests flip state after a log submission.
Rules are evaluated against the new log only.
"""

from typing import Iterable, List, Tuple
import logging

from questlog import config
from questlog.gamification.fallback import matches_title
from questlog.gamification.rule_engine import evaluate_rule
from questlog.models.activity import ActivityLog
from questlog.models.quest import DailyQuest

logger = logging.getLogger(__name__)


def is_checkin_quest(quest: DailyQuest) -> bool:
    """
    Quests completed by location check-ins

    Either the category says so or the title is the configured check-in
    title (rows written before categories existed carry only the title).
    """
    if quest.category is not None and quest.category.is_checkin_owned:
        return True
    return (quest.title or "").strip().lower() == config.CHECKIN_QUEST_TITLE.lower()


def should_complete(quest: DailyQuest, log: ActivityLog) -> bool:
    """Stored rule if present, title heuristics otherwise"""
    if quest.completion_rule is not None:
        return evaluate_rule(quest.completion_rule, log)
    return matches_title(quest.title, log)


def plan_completion_changes(
    quests: Iterable[DailyQuest],
    log: ActivityLog
) -> Tuple[List[int], List[int]]:
    """
    Work out completion flips for a day's quests

    Returns:
        (to_complete, to_uncomplete) lists of quest IDs
    """
    to_complete: List[int] = []
    to_uncomplete: List[int] = []

    for quest in quests:
        if is_checkin_quest(quest):
            continue

        done = should_complete(quest, log)
        if done and not quest.completed:
            to_complete.append(quest.id)
        elif not done and quest.completed:
            to_uncomplete.append(quest.id)

    if to_complete or to_uncomplete:
        logger.debug(f"Quest changes: complete={to_complete} uncomplete={to_uncomplete}")

    return to_complete, to_uncomplete
