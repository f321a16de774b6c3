"""Daily activity log models"""
from typing import Any, Optional, Union
from datetime import date
from pydantic import BaseModel, Field, StrictBool, StrictInt, field_validator
import re

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Attributes of a log that scoring and completion rules can look at
ACTIVITY_FIELDS = (
    "steps",
    "workout_done",
    "learning_minutes",
    "calls",
    "texts",
    "convos",
    "leads",
    "appts",
    "content_done",
    "notes",
)

_BOOL_FIELDS = {"workout_done", "content_done"}


class ActivityLog(BaseModel):
    """
    Normalized activity log for one member, cohort and date

    All counters are non-negative integers; absent values default to
    zero, false or the empty string.
    """
    steps: int = Field(default=0, ge=0)
    workout_done: bool = False
    learning_minutes: int = Field(default=0, ge=0)
    calls: int = Field(default=0, ge=0)
    texts: int = Field(default=0, ge=0)
    convos: int = Field(default=0, ge=0)
    leads: int = Field(default=0, ge=0)
    appts: int = Field(default=0, ge=0)
    content_done: bool = False
    notes: str = ""

    @classmethod
    def from_row(cls, row: Optional[dict]) -> "ActivityLog":
        """
        Build a log from a stored row, coercing loose values

        A missing row yields the all-zero log. NULL columns fall back to
        their defaults.
        """
        if not row:
            return cls()

        values: dict[str, Any] = {}
        for name in ACTIVITY_FIELDS:
            raw = row.get(name)
            if raw is None:
                continue
            if name in _BOOL_FIELDS:
                values[name] = bool(raw)
            elif name == "notes":
                values[name] = str(raw)
            else:
                values[name] = max(0, int(raw))
        return cls(**values)


class LogSubmission(BaseModel):
    """Payload a member submits for one day"""
    user_id: str = Field(..., min_length=1)
    cohort_id: Union[StrictInt, str]
    log_date: date

    steps: StrictInt = Field(default=0, ge=0)
    workout_done: StrictBool = False
    learning_minutes: StrictInt = Field(default=0, ge=0)
    calls: StrictInt = Field(default=0, ge=0)
    texts: StrictInt = Field(default=0, ge=0)
    convos: StrictInt = Field(default=0, ge=0)
    leads: StrictInt = Field(default=0, ge=0)
    appts: StrictInt = Field(default=0, ge=0)
    content_done: StrictBool = False
    notes: Optional[str] = ""

    @field_validator("cohort_id")
    @classmethod
    def validate_cohort_id(cls, v: Union[int, str]) -> int:
        """Accept a positive integer or a string of digits"""
        if isinstance(v, str):
            if not v.isdigit():
                raise ValueError("cohort_id must be a positive integer")
            v = int(v)
        if v <= 0:
            raise ValueError("cohort_id must be a positive integer")
        return v

    @field_validator("log_date", mode="before")
    @classmethod
    def validate_log_date(cls, v: Any) -> Any:
        """Dates arrive as YYYY-MM-DD strings"""
        if isinstance(v, str) and not ISO_DATE_RE.match(v):
            raise ValueError("log_date must be in YYYY-MM-DD format")
        return v

    @field_validator("notes", mode="before")
    @classmethod
    def default_notes(cls, v: Optional[str]) -> str:
        return v or ""

    def to_activity_log(self) -> ActivityLog:
        """Strip the key fields and keep only the activity"""
        return ActivityLog(**self.model_dump(include=set(ACTIVITY_FIELDS)))
