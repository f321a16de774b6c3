"""
Completion rule tree

Rules are stored as JSON on quest templates and snapshotted onto daily
quests. parse_rule() turns that JSON into a tagged union of frozen
dataclasses. A node that fits none of the shapes below becomes a
MalformedRule, which evaluates false without affecting its siblings; a
rule that is malformed at the top level parses to None.

    {"field": "steps", "op": "gte", "value": 7000}
    {"all": [rule, ...]}
    {"any": [rule, ...]}
    {"not": rule}
    {"atLeast": {"count": 2, "of": [rule, ...]}}
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class Operator(str, Enum):
    EQ = "eq"
    NEQ = "neq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"


OPERATOR_ALIASES = {
    "==": Operator.EQ,
    "!=": Operator.NEQ,
    ">": Operator.GT,
    ">=": Operator.GTE,
    "<": Operator.LT,
    "<=": Operator.LTE,
}


@dataclass(frozen=True)
class LeafRule:
    field: str
    op: Operator
    value: Any


@dataclass(frozen=True)
class AllRule:
    rules: Tuple["Rule", ...]


@dataclass(frozen=True)
class AnyRule:
    rules: Tuple["Rule", ...]


@dataclass(frozen=True)
class NotRule:
    rule: "Rule"


@dataclass(frozen=True)
class AtLeastRule:
    count: int
    rules: Tuple["Rule", ...]


@dataclass(frozen=True)
class MalformedRule:
    """Unrecognized node inside a rule tree"""
    reason: str


Rule = Union[LeafRule, AllRule, AnyRule, NotRule, AtLeastRule, MalformedRule]

_SCALAR_TYPES = (bool, int, float, str, type(None))


def _parse_operator(raw: Any) -> Optional[Operator]:
    if not isinstance(raw, str):
        return None
    if raw in OPERATOR_ALIASES:
        return OPERATOR_ALIASES[raw]
    try:
        return Operator(raw)
    except ValueError:
        return None


def _parse_children(raw: Any) -> Optional[Tuple[Rule, ...]]:
    if not isinstance(raw, list):
        return None
    return tuple(_parse_node(item) for item in raw)


def _parse_node(raw: Any) -> Rule:
    if not isinstance(raw, dict):
        return MalformedRule("not an object")

    if "field" in raw or "op" in raw:
        field, op = raw.get("field"), _parse_operator(raw.get("op"))
        value = raw.get("value")
        if not isinstance(field, str) or op is None or not isinstance(value, _SCALAR_TYPES):
            return MalformedRule("bad leaf")
        return LeafRule(field=field, op=op, value=value)

    if "all" in raw:
        children = _parse_children(raw["all"])
        return AllRule(children) if children is not None else MalformedRule("all needs a list")

    if "any" in raw:
        children = _parse_children(raw["any"])
        return AnyRule(children) if children is not None else MalformedRule("any needs a list")

    if "not" in raw:
        return NotRule(_parse_node(raw["not"]))

    at_least = raw.get("atLeast", raw.get("at_least"))
    if isinstance(at_least, dict):
        count = at_least.get("count")
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            return MalformedRule("atLeast needs a non-negative count")
        children = _parse_children(at_least.get("of"))
        return AtLeastRule(count, children) if children is not None else MalformedRule("atLeast needs an of list")

    return MalformedRule("unknown node")


def parse_rule(raw: Any) -> Optional[Rule]:
    """
    Parse a stored completion rule

    Args:
        raw: Rule tree as decoded JSON, a JSON string, or None

    Returns:
        The parsed rule, or None when the rule is missing or malformed.
        Malformed nodes further down stay in the tree as MalformedRule.
    """
    if raw is None:
        return None

    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            logger.debug(f"Completion rule is not valid JSON: {raw!r}")
            return None

    rule = _parse_node(raw)
    if isinstance(rule, MalformedRule):
        logger.debug(f"Unrecognized completion rule shape ({rule.reason}): {raw!r}")
        return None
    return rule
