"""Constants and helpers for filter clause match rules and aggregations.

Match rules and aggregation names travel as plain strings in the
QueryProperties model.  This module defines the allowable sets used by the
profile defaults and the validator.
"""

from __future__ import annotations

import re
from enum import Enum

# ---------------------------------------------------------------------------
# Match rule enums
# ---------------------------------------------------------------------------


class ComparisonRule(str, Enum):
    """Binary comparison rules placed between the field and the value."""

    EQ = "="
    NE = "!="
    NE_ALT = "<>"
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="


class PatternRule(str, Enum):
    """Pattern-match rules."""

    LIKE = "LIKE"
    NOT_LIKE = "NOT LIKE"
    CONTAINS = "CONTAINS"


class AggregateFunction(str, Enum):
    """Aggregate functions applied to the value column."""

    COUNT = "COUNT"
    SUM = "SUM"
    AVG = "AVG"
    MIN = "MIN"
    MAX = "MAX"
    STDDEV = "STDDEV"
    VARIANCE = "VARIANCE"


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------

#: Comparison rules: ``<lhs> <rule> <value>``.
COMPARISON_RULES: frozenset[str] = frozenset(r.value for r in ComparisonRule)

#: Pattern rules: ``<lhs> LIKE <pattern>``.
PATTERN_RULES: frozenset[str] = frozenset(r.value for r in PatternRule)

#: Complete set of supported match rules.
SUPPORTED_MATCH_RULES: frozenset[str] = COMPARISON_RULES | PATTERN_RULES

#: Aggregate functions supported across query engines.
SUPPORTED_AGGREGATIONS: frozenset[str] = frozenset(a.value for a in AggregateFunction)

# ---------------------------------------------------------------------------
# Identifier shapes
# ---------------------------------------------------------------------------

#: A SQL identifier, optionally qualified (``table.column``).
IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")

#: Characters that would break the ``|key:value|`` extraction pattern or the
#: quoted regex literal around it.
_METADATA_KEY_FORBIDDEN = re.compile(r"[|:\"\\\s.*+?^$()\[\]{}]")


def is_identifier(name: str) -> bool:
    """Returns ``True`` if ``name`` can be emitted as a bare SQL identifier."""
    return bool(IDENTIFIER_RE.match(name))


def is_metadata_key(name: str) -> bool:
    """Returns ``True`` if ``name`` can be embedded in the label extraction regex.

    Args:
        name: A metadata key such as ``'machine_type'`` or ``'cloud-zone'``.

    Returns:
        ``False`` for empty names and for names carrying delimiter or regex
        metacharacters.
    """
    return bool(name) and _METADATA_KEY_FORBIDDEN.search(name) is None


def normalize_rule(rule: str) -> str:
    """Returns the canonical spelling of a match rule (upper-case, single spaces)."""
    return " ".join(rule.split()).upper()
