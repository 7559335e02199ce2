"""Clause-level argument builders.

Each class turns a :class:`~explorerql.schema.filters.QueryProperties` into
the argument lines of exactly one SQL clause.  The lines are later laid out
by :func:`~explorerql.compile.formatter.format_query`.

Classes
-------
SelectArgsBuilder - SELECT lines
GroupArgsBuilder  - grouping keys (only when aggregating)
WhereArgsBuilder  - one condition per filter, clauses OR-ed inside it

Display mode is honoured by SELECT and GROUP BY only.  WHERE constrains on
every filter, hidden or not.
"""
from __future__ import annotations

from explorerql.compile.literals import render_match_value, render_value, sanitize_alias
from explorerql.compile.metadata import get_regexp_for_metadata
from explorerql.errors import InvalidFilterClauseError
from explorerql.schema.filters import Filter, FilterClause, MatchValue, QueryProperties
from explorerql.schema.profile import QueryProfile


class SelectArgsBuilder:
    """Builds the SELECT lines: field filters, metadata filters, aggregations.

    The order is fixed and cannot be changed by the caller.
    """

    def __init__(self, profile: QueryProfile) -> None:
        self._profile = profile

    def build(self, properties: QueryProperties) -> list[str]:
        select_args: list[str] = []

        for f in properties.field_filters:
            if f.is_hidden:
                continue
            field_sql = f.field_name
            if f.has_alias and f.field_alias != f.field_name:
                field_sql += f" AS {sanitize_alias(f.field_alias)}"
            select_args.append(field_sql)

        for f in properties.metadata_filters:
            if f.is_hidden:
                continue
            regexp = get_regexp_for_metadata(f.field_name, self._profile.labels_column)
            select_args.append(f"{regexp} AS {sanitize_alias(f.field_name)}")

        # Function name upper-cased, result column lower-cased.
        for aggregation in properties.aggregations:
            select_args.append(
                f"{aggregation.upper()}({self._profile.value_column}) "
                f"AS {aggregation.lower()}"
            )

        return select_args


class GroupArgsBuilder:
    """Builds the GROUP BY lines.

    Grouping only means something alongside an aggregation, so no lines are
    produced when ``aggregations`` is empty.
    """

    def __init__(self, profile: QueryProfile) -> None:
        self._profile = profile

    def build(self, properties: QueryProperties) -> list[str]:
        if not properties.aggregations:
            return []
        return [
            sanitize_alias(f.field_alias) if f.has_alias else f.field_name
            for f in properties.all_filters
            if not f.is_hidden
        ]


class WhereArgsBuilder:
    """Builds the WHERE conditions.

    Each filter yields at most one condition: its single clause bare, or its
    clauses OR-ed inside parentheses.  Conditions from different filters are
    AND-ed by the formatter.

    Field filter values are quoted as string literals unless the clause is a
    function call; metadata filter values are emitted as-is.
    """

    def __init__(self, profile: QueryProfile) -> None:
        self._profile = profile

    def build(self, properties: QueryProperties) -> list[str]:
        where_args: list[str] = []

        for f in properties.field_filters:
            self._append_condition(
                where_args,
                [
                    f"{f.field_name} {clause.match_rule} "
                    f"{render_match_value(self._first_value(f, i, clause), clause.is_function)}"
                    for i, clause in enumerate(f.filter_clauses)
                ],
            )

        for f in properties.metadata_filters:
            regexp = get_regexp_for_metadata(f.field_name, self._profile.labels_column)
            self._append_condition(
                where_args,
                [
                    f"{regexp} {clause.match_rule} "
                    f"{render_value(self._first_value(f, i, clause))}"
                    for i, clause in enumerate(f.filter_clauses)
                ],
            )

        return where_args

    @staticmethod
    def _first_value(f: Filter, index: int, clause: FilterClause) -> MatchValue:
        # Only the first match_on value takes part in the comparison.
        if not clause.match_on:
            raise InvalidFilterClauseError(f.field_name, index)
        return clause.match_on[0]

    @staticmethod
    def _append_condition(where_args: list[str], where_row: list[str]) -> None:
        if len(where_row) == 1:
            where_args.append(where_row[0])
        elif where_row:
            where_args.append(f"({' OR '.join(where_row)})")
