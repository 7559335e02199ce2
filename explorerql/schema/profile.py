"""Pydantic model for the QueryProfile that configures query assembly.

The defaults reproduce the explorer's fixed table layout: metadata packed
into a ``labels`` column as ``|key:value|`` pairs and a numeric ``value``
column that aggregations are applied to.

Use the model directly when the defaults fit, or the builder when a
deployment stores samples differently::

    from explorerql import QueryProfile

    profile = (
        QueryProfile.builder()
        .labels_column("sample_labels")
        .value_column("metric_value")
        .aggregations(["avg", "max"])
        .default_row_limit(500)
        .build()
    )
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from explorerql.errors import ProfileConfigError
from explorerql.schema.expressions import (
    SUPPORTED_AGGREGATIONS,
    SUPPORTED_MATCH_RULES,
    is_identifier,
    normalize_rule,
)


class QueryProfile(BaseModel):
    """Column layout and allow-lists for one explorer deployment.

    Attributes:
        labels_column: Column holding the packed ``|key:value|`` labels.
        value_column: Column aggregations are applied to.
        default_row_limit: LIMIT used when the caller passes none.
        aggregations: Allowed aggregate function names (upper-case).
        match_rules: Allowed match rules (upper-case).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    labels_column: str = "labels"
    value_column: str = "value"
    default_row_limit: int | None = Field(default=None, ge=0)
    aggregations: list[str] = Field(
        default_factory=lambda: sorted(SUPPORTED_AGGREGATIONS)
    )
    match_rules: list[str] = Field(
        default_factory=lambda: sorted(SUPPORTED_MATCH_RULES)
    )

    @classmethod
    def builder(cls) -> "QueryProfileBuilder":
        """Return a :class:`QueryProfileBuilder` seeded with the defaults."""
        return QueryProfileBuilder()

    def allows_aggregation(self, name: str) -> bool:
        return name.upper() in {a.upper() for a in self.aggregations}

    def allows_match_rule(self, rule: str) -> bool:
        return normalize_rule(rule) in {normalize_rule(r) for r in self.match_rules}


class QueryProfileBuilder:
    """Fluent builder for :class:`QueryProfile`.

    Always obtained via :meth:`QueryProfile.builder`.  Settings are checked
    together in :meth:`build`.
    """

    def __init__(self) -> None:
        self._labels_column = "labels"
        self._value_column = "value"
        self._default_row_limit: int | None = None
        self._aggregations: list[str] = sorted(SUPPORTED_AGGREGATIONS)
        self._match_rules: list[str] = sorted(SUPPORTED_MATCH_RULES)

    def labels_column(self, name: str) -> "QueryProfileBuilder":
        self._labels_column = name
        return self

    def value_column(self, name: str) -> "QueryProfileBuilder":
        self._value_column = name
        return self

    def default_row_limit(self, limit: int | None) -> "QueryProfileBuilder":
        self._default_row_limit = limit
        return self

    def aggregations(self, names: list[str]) -> "QueryProfileBuilder":
        """Restrict the allowed aggregations.  Names are upper-cased."""
        self._aggregations = sorted({n.upper() for n in names})
        return self

    def match_rules(self, rules: list[str]) -> "QueryProfileBuilder":
        """Restrict the allowed match rules.  Rules are normalized."""
        self._match_rules = sorted({normalize_rule(r) for r in rules})
        return self

    def build(self) -> QueryProfile:
        """Validate the collected settings and return an immutable profile.

        Raises:
            ProfileConfigError: If a column name is not an identifier, the
                default row limit is negative, or an allow-list is empty.
        """
        bad_columns = [
            setting
            for setting, name in (
                ("labels_column", self._labels_column),
                ("value_column", self._value_column),
            )
            if not is_identifier(name)
        ]
        if bad_columns:
            raise ProfileConfigError(
                f"Column settings are not valid identifiers: {bad_columns}.",
                missing=bad_columns,
                reason="Column names are emitted into SQL without quoting.",
            )
        if self._default_row_limit is not None and self._default_row_limit < 0:
            raise ProfileConfigError(
                "default_row_limit must be non-negative.",
                missing=["default_row_limit"],
            )
        empty = [
            setting
            for setting, values in (
                ("aggregations", self._aggregations),
                ("match_rules", self._match_rules),
            )
            if not values
        ]
        if empty:
            raise ProfileConfigError(
                f"Allow-lists must not be empty: {empty}.",
                missing=empty,
                reason="An empty allow-list rejects every query.",
            )
        return QueryProfile(
            labels_column=self._labels_column,
            value_column=self._value_column,
            default_row_limit=self._default_row_limit,
            aggregations=self._aggregations,
            match_rules=self._match_rules,
        )
