"""Final query text assembly.

``format_query`` lays pre-rendered clause arguments out in the explorer's
house style: one keyword per line, one tab-indented argument per line::

    SELECT
        product_name,
        AVG(value) AS avg
    FROM
        samples
    WHERE
        test = "iperf" AND
        (run = 1 OR run = 2)
    GROUP BY
        product_name
    LIMIT 100;

WHERE arguments are always AND-ed.  An OR condition has to be supplied as a
single parenthesised argument, e.g. ``(x = 1 OR y = 2)``; top-level OR across
arguments is not supported.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from explorerql.errors import CompilationError

# (keyword, line joiner) in emission order.
_SECTIONS: tuple[tuple[str, str], ...] = (
    ("SELECT", ",\n"),
    ("FROM", ",\n"),
    ("WHERE", " AND\n"),
    ("GROUP BY", ",\n"),
    ("ORDER BY", ",\n"),
)


def format_query(
    select_args: Sequence[str],
    from_args: Sequence[str],
    where_args: Sequence[str] | None = None,
    group_args: Sequence[str] | None = None,
    order_args: Sequence[str] | None = None,
    row_limit: int | None = None,
) -> str:
    """Build and format a query string from per-clause arguments.

    A section is emitted only when its arguments are non-empty; ``None`` and
    an empty sequence are equivalent.

    Args:
        select_args: The lines of the SELECT clause.
        from_args: The tables to query.
        where_args: The lines of the WHERE clause, AND-ed together.
        group_args: The lines of the GROUP BY clause.
        order_args: The lines of the ORDER BY clause.
        row_limit: The maximum number of rows to return.

    Returns:
        The query text, terminated with ``;``.

    Raises:
        CompilationError: If ``row_limit`` is not a non-negative integer.
    """
    query: list[str] = []
    for (keyword, joiner), args in zip(
        _SECTIONS, (select_args, from_args, where_args, group_args, order_args)
    ):
        if args:
            query.append(keyword)
            query.append(joiner.join("\t" + arg for arg in args))

    if row_limit is not None:
        if isinstance(row_limit, bool) or not isinstance(row_limit, int) or row_limit < 0:
            raise CompilationError(
                f"Row limit must be a non-negative integer, got {row_limit!r}.",
                clause="LIMIT",
            )
        query.append(f"LIMIT {row_limit}")

    return "\n".join(query) + ";"


@dataclass(frozen=True)
class QueryArgs:
    """Per-clause arguments for one query, ready for :func:`format_query`.

    Attributes:
        select_args: SELECT lines.
        from_args: FROM tables.
        where_args: WHERE conditions.
        group_args: GROUP BY lines.
        order_args: ORDER BY lines.
        row_limit: Optional LIMIT.
    """

    select_args: list[str]
    from_args: list[str]
    where_args: list[str] = field(default_factory=list)
    group_args: list[str] = field(default_factory=list)
    order_args: list[str] = field(default_factory=list)
    row_limit: int | None = None

    def to_sql(self) -> str:
        return format_query(
            self.select_args,
            self.from_args,
            self.where_args,
            self.group_args,
            self.order_args,
            self.row_limit,
        )
