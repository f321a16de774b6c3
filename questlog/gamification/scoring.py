"""
Scoring Function

Converts one day's activity log into XP and stat gains.

XP Rules:
- Base: 5 XP per mandatory habit met (steps, workout, outreach, learning; max 20)
- Workout completed: +10 XP, +1 strength, +1 stamina
- 10,000+ steps: +5 XP, +1 stamina
- 5+ conversations: +10 XP, +1 charisma
- 1+ appointment: +15 XP, +2 charisma, +1 reputation
- Content created: +10 XP, +1 reputation
- 20+ learning minutes: +1 intellect (XP comes from the base only)

Scores only ever add. Submissions apply the difference between the score
of the new log and the score of the log it replaces.
"""

from typing import Dict, Optional, Tuple

from questlog.models.activity import ActivityLog
from questlog.models.stats import STAT_NAMES, empty_stat_gains

MANDATORY_STEPS = 7000
BONUS_STEPS = 10000
CONVOS_TARGET = 5
APPTS_TARGET = 1
LEARNING_MINUTES_TARGET = 20
XP_PER_MANDATORY = 5


def mandatory_count(log: Optional[ActivityLog]) -> int:
    """
    Count the mandatory habits met (0-4)

    Only steps, workout, learning minutes, conversations and appointments
    take part.
    """
    if log is None:
        return 0
    return (
        (1 if log.steps >= MANDATORY_STEPS else 0)
        + (1 if log.workout_done else 0)
        + (1 if log.convos >= CONVOS_TARGET or log.appts >= APPTS_TARGET else 0)
        + (1 if log.learning_minutes >= LEARNING_MINUTES_TARGET else 0)
    )


def xp_from_log(log: Optional[ActivityLog]) -> int:
    """XP a single day's log is worth"""
    if log is None:
        return 0

    xp = mandatory_count(log) * XP_PER_MANDATORY

    if log.workout_done:
        xp += 10
    if log.steps >= BONUS_STEPS:
        xp += 5
    if log.convos >= CONVOS_TARGET:
        xp += 10
    if log.appts >= APPTS_TARGET:
        xp += 15
    if log.content_done:
        xp += 10

    return xp


def stat_gains_from_log(log: Optional[ActivityLog]) -> Dict[str, int]:
    """Stat gains for a single day's log, every stat present"""
    gains = empty_stat_gains()
    if log is None:
        return gains

    if log.workout_done:
        gains["strength"] += 1
        gains["stamina"] += 1
    if log.steps >= BONUS_STEPS:
        gains["stamina"] += 1
    if log.learning_minutes >= LEARNING_MINUTES_TARGET:
        gains["intellect"] += 1
    if log.convos >= CONVOS_TARGET:
        gains["charisma"] += 1
    if log.appts >= APPTS_TARGET:
        gains["charisma"] += 2
        gains["reputation"] += 1
    if log.content_done:
        gains["reputation"] += 1

    return gains


def score_log(log: Optional[ActivityLog]) -> Tuple[int, Dict[str, int]]:
    """
    Score a log

    Args:
        log: Normalized log, or None for a day with no log

    Returns:
        (xp, stat_gains)
    """
    return xp_from_log(log), stat_gains_from_log(log)


def score_delta(
    old_log: Optional[ActivityLog],
    new_log: Optional[ActivityLog]
) -> Tuple[int, Dict[str, int]]:
    """
    Difference between the scores of new_log and old_log

    Returns:
        (delta_xp, delta_stats) where each value is new minus old
    """
    old_xp, old_gains = score_log(old_log)
    new_xp, new_gains = score_log(new_log)
    delta_stats = {name: new_gains[name] - old_gains[name] for name in STAT_NAMES}
    return new_xp - old_xp, delta_stats
