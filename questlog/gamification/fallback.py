"""
Title-based completion for quests without a completion rule

Only legacy quests, created before rules existed, take this path.
A title matching none of the patterns never completes automatically.
"""

from questlog.models.activity import ActivityLog


def matches_title(title: str, log: ActivityLog) -> bool:
    """Guess completion from the quest title; checks run in order"""
    t = (title or "").lower()

    # Mandatory quest prefixes
    if t.startswith("move:"):
        return log.steps >= 7000
    if t.startswith("train:"):
        return log.workout_done
    if t.startswith("learn:"):
        return log.learning_minutes >= 20
    if t.startswith("hunt:"):
        return log.convos >= 5 or log.appts >= 1 or (log.calls >= 20 and log.texts >= 40)

    # Fitness
    if "workout" in t or "train" in t:
        return log.workout_done
    if "10k steps" in t or "10,000 steps" in t:
        return log.steps >= 10000

    # Business
    if "5 convos" in t:
        return log.convos >= 5
    if "1 appt" in t or "appointment" in t:
        return log.appts >= 1
    if "content" in t:
        return log.content_done

    # Learning
    if "20 min" in t or "study" in t:
        return log.learning_minutes >= 20

    return False
