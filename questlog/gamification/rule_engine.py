"""
Rule Evaluator

Decides quest completion from a quest's stored completion rule.
Evaluation never raises: a missing or malformed rule is false.
"""

import logging
from typing import Any, Optional

from questlog.models.activity import ActivityLog, ACTIVITY_FIELDS
from questlog.models.rules import (
    AllRule,
    AnyRule,
    AtLeastRule,
    LeafRule,
    MalformedRule,
    NotRule,
    Operator,
    Rule,
    parse_rule,
)

logger = logging.getLogger(__name__)

# Older seed data names fields in camelCase or spells them out
FIELD_ALIASES = {
    "workoutDone": "workout_done",
    "learningMinutes": "learning_minutes",
    "contentDone": "content_done",
    "conversations": "convos",
    "appointments": "appts",
}


def resolve_field(name: str) -> Optional[str]:
    """Map a rule field name onto an ActivityLog attribute, or None"""
    name = FIELD_ALIASES.get(name, name)
    return name if name in ACTIVITY_FIELDS else None


def _strict_equal(a: Any, b: Any) -> bool:
    # True must not equal 1
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b


def compare(a: Any, op: Operator, b: Any) -> bool:
    """Apply op to a and b; incomparable values are false"""
    if op == Operator.EQ:
        return _strict_equal(a, b)
    if op == Operator.NEQ:
        return not _strict_equal(a, b)

    if b is None or isinstance(a, bool) != isinstance(b, bool):
        return False
    try:
        if op == Operator.GT:
            return a > b
        if op == Operator.GTE:
            return a >= b
        if op == Operator.LT:
            return a < b
        if op == Operator.LTE:
            return a <= b
    except TypeError:
        return False
    return False


def _evaluate(rule: Rule, log: ActivityLog) -> bool:
    if isinstance(rule, LeafRule):
        attr = resolve_field(rule.field)
        if attr is None:
            logger.debug(f"Completion rule references unknown field {rule.field!r}")
            return False
        return compare(getattr(log, attr), rule.op, rule.value)

    if isinstance(rule, AllRule):
        return all(_evaluate(child, log) for child in rule.rules)

    if isinstance(rule, AnyRule):
        return any(_evaluate(child, log) for child in rule.rules)

    if isinstance(rule, NotRule):
        return not _evaluate(rule.rule, log)

    if isinstance(rule, AtLeastRule):
        passes = sum(1 for child in rule.rules if _evaluate(child, log))
        return passes >= rule.count

    # MalformedRule
    return False


def evaluate_rule(rule: Any, log: ActivityLog) -> bool:
    """
    Evaluate a completion rule against a log

    Args:
        rule: A parsed Rule, or the raw JSON tree stored on a quest
        log: The activity log to test

    Returns:
        True if the rule holds. Missing and malformed rules are false.
    """
    if not isinstance(rule, (LeafRule, AllRule, AnyRule, NotRule, AtLeastRule, MalformedRule)):
        rule = parse_rule(rule)
    if rule is None:
        return False
    return _evaluate(rule, log)
