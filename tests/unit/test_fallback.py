"""Unit tests for title-based completion (questlog/gamification/fallback.py)"""
import pytest

from questlog.gamification.fallback import matches_title
from questlog.models.activity import ActivityLog


@pytest.mark.parametrize("title,log,expected", [
    ("MOVE: 7,000+ steps", ActivityLog(steps=7000), True),
    ("MOVE: 7,000+ steps", ActivityLog(steps=6999), False),
    ("TRAIN: Strength Session", ActivityLog(workout_done=True), True),
    ("TRAIN: Strength Session", ActivityLog(), False),
    ("LEARN: Read 20 pages", ActivityLog(learning_minutes=20), True),
    ("HUNT: Prospecting Block", ActivityLog(convos=5), True),
    ("HUNT: Prospecting Block", ActivityLog(appts=1), True),
    ("HUNT: Prospecting Block", ActivityLog(calls=20, texts=40), True),
    ("HUNT: Prospecting Block", ActivityLog(calls=20, texts=39), False),
    ("Morning workout", ActivityLog(workout_done=True), True),
    ("Hit 10k steps", ActivityLog(steps=10000), True),
    ("Hit 10,000 steps", ActivityLog(steps=9999), False),
    ("Have 5 convos", ActivityLog(convos=5), True),
    ("Set 1 appt", ActivityLog(appts=1), True),
    ("Book an appointment", ActivityLog(), False),
    ("Post content", ActivityLog(content_done=True), True),
    ("Study session", ActivityLog(learning_minutes=25), True),
    ("Read 20 min", ActivityLog(learning_minutes=19), False),
])
def test_title_heuristics(title, log, expected):
    assert matches_title(title, log) is expected


def test_prefix_wins_over_keyword():
    """'move:' is checked before the 'workout' keyword"""
    log = ActivityLog(workout_done=True, steps=0)
    assert matches_title("Move: walk before your workout", log) is False


def test_unmatched_title_never_completes():
    log = ActivityLog(steps=50000, workout_done=True, convos=50, appts=5, learning_minutes=120, content_done=True)
    assert matches_title("Dungeon Check-In", log) is False
    assert matches_title("", log) is False
