"""QueryProperties → SQL text assembly.

``QueryBuilder`` is the top-level orchestrator.  It wires the clause-level
sub-builders to one :class:`~explorerql.schema.profile.QueryProfile`, then
hands their output to :func:`~explorerql.compile.formatter.format_query`.

Sub-builder hierarchy
---------------------
QueryBuilder
  ├── SelectArgsBuilder  (clause_builders.py)
  ├── WhereArgsBuilder   (clause_builders.py)
  └── GroupArgsBuilder   (clause_builders.py)

Building is pure: the same QueryProperties always yields the same text, and
no state survives between calls.  The module-level ``build_*_args``
functions are shorthands for a builder on the default profile.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from explorerql.compile.clause_builders import (
    GroupArgsBuilder,
    SelectArgsBuilder,
    WhereArgsBuilder,
)
from explorerql.compile.formatter import QueryArgs
from explorerql.schema.filters import QueryProperties
from explorerql.schema.profile import QueryProfile

logger = logging.getLogger(__name__)


class QueryBuilder:
    """Assembles explorer queries from QueryProperties.

    Args:
        profile: Column layout and defaults.  Defaults to ``QueryProfile()``
            (``labels`` / ``value`` columns, no default row limit).
    """

    def __init__(self, profile: QueryProfile | None = None) -> None:
        self._profile = profile or QueryProfile()
        self._select = SelectArgsBuilder(self._profile)
        self._where = WhereArgsBuilder(self._profile)
        self._group = GroupArgsBuilder(self._profile)

    @property
    def profile(self) -> QueryProfile:
        return self._profile

    # ------------------------------------------------------------------
    # Clause arguments
    # ------------------------------------------------------------------

    def build_select_args(self, properties: QueryProperties) -> list[str]:
        """Return the SELECT lines for ``properties``."""
        return self._select.build(properties)

    def build_where_args(self, properties: QueryProperties) -> list[str]:
        """Return the WHERE conditions for ``properties``.

        Raises:
            InvalidFilterClauseError: If a clause has an empty ``match_on``.
        """
        return self._where.build(properties)

    def build_group_args(self, properties: QueryProperties) -> list[str]:
        """Return the GROUP BY lines for ``properties``."""
        return self._group.build(properties)

    # ------------------------------------------------------------------
    # Full query
    # ------------------------------------------------------------------

    def build_args(
        self,
        properties: QueryProperties,
        tables: Sequence[str],
        order_args: Sequence[str] | None = None,
        row_limit: int | None = None,
    ) -> QueryArgs:
        """Build every clause's arguments for one query.

        Args:
            properties: The query description.
            tables: FROM tables.
            order_args: Pre-rendered ORDER BY lines, passed through.
            row_limit: LIMIT; falls back to the profile's default.

        Returns:
            :class:`~explorerql.compile.formatter.QueryArgs`.
        """
        if row_limit is None:
            row_limit = self._profile.default_row_limit
        return QueryArgs(
            select_args=self.build_select_args(properties),
            from_args=list(tables),
            where_args=self.build_where_args(properties),
            group_args=self.build_group_args(properties),
            order_args=list(order_args or []),
            row_limit=row_limit,
        )

    def build(
        self,
        properties: QueryProperties,
        tables: Sequence[str],
        order_args: Sequence[str] | None = None,
        row_limit: int | None = None,
    ) -> str:
        """Build the complete query text for ``properties``.

        Raises:
            InvalidFilterClauseError: If a clause has an empty ``match_on``.
            CompilationError: If the row limit is negative.
        """
        args = self.build_args(properties, tables, order_args, row_limit)
        logger.debug(
            "Assembling query: %d select, %d from, %d where, %d group, %d order, limit=%s",
            len(args.select_args),
            len(args.from_args),
            len(args.where_args),
            len(args.group_args),
            len(args.order_args),
            args.row_limit,
        )
        return args.to_sql()


def build_select_args(
    properties: QueryProperties, profile: QueryProfile | None = None
) -> list[str]:
    """Return the SELECT lines for ``properties``."""
    return SelectArgsBuilder(profile or QueryProfile()).build(properties)


def build_where_args(
    properties: QueryProperties, profile: QueryProfile | None = None
) -> list[str]:
    """Return the WHERE conditions for ``properties``."""
    return WhereArgsBuilder(profile or QueryProfile()).build(properties)


def build_group_args(
    properties: QueryProperties, profile: QueryProfile | None = None
) -> list[str]:
    """Return the GROUP BY lines for ``properties``."""
    return GroupArgsBuilder(profile or QueryProfile()).build(properties)
