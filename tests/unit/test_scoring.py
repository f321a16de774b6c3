"""Unit tests for the scoring function (questlog/gamification/scoring.py)"""
import pytest

from questlog.gamification.scoring import (
    mandatory_count,
    xp_from_log,
    stat_gains_from_log,
    score_log,
    score_delta,
)
from questlog.models.activity import ActivityLog
from questlog.models.stats import STAT_NAMES


# ============================================================================
# Mandatory Quorum
# ============================================================================

def test_mandatory_count_empty_log():
    assert mandatory_count(ActivityLog()) == 0
    assert mandatory_count(None) == 0


def test_mandatory_count_all_four(full_day_log):
    assert mandatory_count(full_day_log) == 4


def test_mandatory_count_outreach_by_appointment_alone():
    log = ActivityLog(appts=1)
    assert mandatory_count(log) == 1


def test_mandatory_count_ignores_calls_texts_leads_content():
    log = ActivityLog(calls=100, texts=100, leads=50, content_done=True)
    assert mandatory_count(log) == 0


def test_mandatory_thresholds_are_inclusive():
    assert mandatory_count(ActivityLog(steps=6999)) == 0
    assert mandatory_count(ActivityLog(steps=7000)) == 1
    assert mandatory_count(ActivityLog(learning_minutes=19)) == 0
    assert mandatory_count(ActivityLog(learning_minutes=20)) == 1
    assert mandatory_count(ActivityLog(convos=4)) == 0
    assert mandatory_count(ActivityLog(convos=5)) == 1


# ============================================================================
# XP and Stat Gains
# ============================================================================

def test_full_day_scenario(full_day_log):
    """Quorum 4 (20) + workout 10 + 10k steps 5 + convos 10 + content 10"""
    xp, gains = score_log(full_day_log)

    assert xp == 55
    assert gains == {
        "strength": 1,
        "stamina": 2,
        "agility": 0,
        "intellect": 1,
        "charisma": 1,
        "reputation": 1,
        "gold": 0,
    }


def test_empty_log_scores_zero():
    xp, gains = score_log(ActivityLog())
    assert xp == 0
    assert all(v == 0 for v in gains.values())
    assert set(gains) == set(STAT_NAMES)


def test_missing_log_scores_zero():
    assert score_log(None) == (0, {name: 0 for name in STAT_NAMES})


def test_appointment_bonus():
    log = ActivityLog(appts=1)
    # base 5 (outreach) + 15
    assert xp_from_log(log) == 20
    gains = stat_gains_from_log(log)
    assert gains["charisma"] == 2
    assert gains["reputation"] == 1


def test_convos_and_appointment_stack():
    log = ActivityLog(convos=5, appts=2)
    # base 5 + convos 10 + appts 15
    assert xp_from_log(log) == 30
    assert stat_gains_from_log(log)["charisma"] == 3


def test_learning_gives_intellect_but_no_bonus_xp():
    log = ActivityLog(learning_minutes=45)
    assert xp_from_log(log) == 5
    assert stat_gains_from_log(log)["intellect"] == 1


def test_maximum_base_is_twenty():
    log = ActivityLog(steps=7000, workout_done=True, convos=5, learning_minutes=20)
    # base 20 + workout 10 + convos 10
    assert xp_from_log(log) == 40


@pytest.mark.parametrize("log", [
    ActivityLog(),
    ActivityLog(steps=50000),
    ActivityLog(workout_done=True, content_done=True),
    ActivityLog(calls=20, texts=40, leads=3),
    ActivityLog(steps=10000, workout_done=True, learning_minutes=60, convos=12, appts=3, content_done=True),
])
def test_scores_never_negative(log):
    xp, gains = score_log(log)
    assert xp >= 0
    assert all(v >= 0 for v in gains.values())


# ============================================================================
# Deltas
# ============================================================================

def test_delta_of_identical_logs_is_zero(full_day_log):
    delta_xp, delta_stats = score_delta(full_day_log, full_day_log)
    assert delta_xp == 0
    assert all(v == 0 for v in delta_stats.values())


def test_delta_from_missing_log_is_full_score(full_day_log):
    delta_xp, delta_stats = score_delta(None, full_day_log)
    assert delta_xp == 55
    assert delta_stats["stamina"] == 2


def test_delta_on_downgrade_is_negative(full_day_log):
    smaller = ActivityLog(steps=7000)
    delta_xp, delta_stats = score_delta(full_day_log, smaller)
    assert delta_xp == 5 - 55
    assert delta_stats["strength"] == -1
    assert delta_stats["stamina"] == -2
    assert delta_stats["reputation"] == -1
