"""Unit tests for pydantic models (questlog/models/)"""
import pytest
from datetime import date
from pydantic import ValidationError

from questlog.models.activity import ActivityLog, LogSubmission
from questlog.models.quest import QuestCategory
from questlog.models.stats import MemberStats, STARTING_STATS, STAT_NAMES


class TestLogSubmission:
    """Test submitted log validation"""

    def test_valid_submission(self, submission_payload):
        submission = LogSubmission.model_validate(submission_payload)

        assert submission.cohort_id == 7
        assert submission.log_date == date(2026, 2, 10)
        assert submission.steps == 10000
        assert submission.notes == "Good day"

    def test_cohort_id_digit_string(self, submission_payload):
        submission_payload["cohort_id"] = "42"
        assert LogSubmission.model_validate(submission_payload).cohort_id == 42

    @pytest.mark.parametrize("cohort_id", ["abc", "-3", "0", 0, -1, ""])
    def test_invalid_cohort_id(self, submission_payload, cohort_id):
        submission_payload["cohort_id"] = cohort_id
        with pytest.raises(ValidationError):
            LogSubmission.model_validate(submission_payload)

    @pytest.mark.parametrize("log_date", ["2026-2-10", "10/02/2026", "2026-02-10T00:00:00", "2026-02-30"])
    def test_invalid_log_date(self, submission_payload, log_date):
        submission_payload["log_date"] = log_date
        with pytest.raises(ValidationError):
            LogSubmission.model_validate(submission_payload)

    def test_missing_user_id(self, submission_payload):
        del submission_payload["user_id"]
        with pytest.raises(ValidationError):
            LogSubmission.model_validate(submission_payload)

    def test_negative_counter_rejected(self, submission_payload):
        submission_payload["steps"] = -1
        with pytest.raises(ValidationError) as exc_info:
            LogSubmission.model_validate(submission_payload)
        assert exc_info.value.errors()[0]["loc"] == ("steps",)

    def test_counters_must_be_integers(self, submission_payload):
        submission_payload["convos"] = "5"
        with pytest.raises(ValidationError):
            LogSubmission.model_validate(submission_payload)

    def test_flags_must_be_booleans(self, submission_payload):
        submission_payload["workout_done"] = "yes"
        with pytest.raises(ValidationError):
            LogSubmission.model_validate(submission_payload)

    def test_absent_activity_defaults(self, test_user_id):
        submission = LogSubmission.model_validate(
            {"user_id": test_user_id, "cohort_id": 1, "log_date": "2026-02-10"}
        )
        assert submission.to_activity_log() == ActivityLog()

    def test_null_notes_become_empty(self, submission_payload):
        submission_payload["notes"] = None
        assert LogSubmission.model_validate(submission_payload).notes == ""

    def test_to_activity_log_drops_keys(self, submission_payload, full_day_log):
        log = LogSubmission.model_validate(submission_payload).to_activity_log()
        assert log == full_day_log.model_copy(update={"notes": "Good day"})


class TestActivityLog:
    """Test stored row normalization"""

    def test_from_missing_row(self):
        assert ActivityLog.from_row(None) == ActivityLog()

    def test_from_row_with_nulls(self):
        row = {"steps": 8000, "workout_done": None, "notes": None, "convos": 3}
        log = ActivityLog.from_row(row)

        assert log.steps == 8000
        assert log.workout_done is False
        assert log.notes == ""
        assert log.convos == 3

    def test_from_row_coerces_loose_values(self):
        row = {"steps": "7000", "workout_done": 1, "learning_minutes": -5}
        log = ActivityLog.from_row(row)

        assert log.steps == 7000
        assert log.workout_done is True
        assert log.learning_minutes == 0

    def test_ignores_unrelated_columns(self):
        row = {"id": 12, "user_id": "x", "log_date": date(2026, 1, 1), "appts": 2}
        assert ActivityLog.from_row(row) == ActivityLog(appts=2)


class TestMemberStats:
    """Test cumulative stats defaults"""

    def test_starting_values(self, member_stats):
        assert member_stats.xp == 0
        assert member_stats.rank == "E"
        assert member_stats.streak == 0
        assert member_stats.stat_values() == STARTING_STATS

    def test_stats_may_be_negative(self):
        stats = MemberStats(user_id="m", cohort_id=1, charisma=-2)
        assert stats.charisma == -2

    def test_xp_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            MemberStats(user_id="m", cohort_id=1, xp=-1)

    def test_stat_names_cover_starting_stats(self):
        assert set(STAT_NAMES) == set(STARTING_STATS)


class TestQuestCategory:

    @pytest.mark.parametrize("category,owned", [
        (QuestCategory.LOCATION, True),
        (QuestCategory.LOCATION_CHECKIN, True),
        (QuestCategory.MANDATORY, False),
        (QuestCategory.BUSINESS, False),
    ])
    def test_checkin_owned(self, category, owned):
        assert category.is_checkin_owned is owned

    def test_stored_value(self):
        assert QuestCategory("location-checkin") is QuestCategory.LOCATION_CHECKIN
