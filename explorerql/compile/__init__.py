"""explorerQL compilation layer: QueryProperties → SQL text."""
from explorerql.compile.builder import (
    QueryBuilder,
    build_group_args,
    build_select_args,
    build_where_args,
)
from explorerql.compile.formatter import QueryArgs, format_query
from explorerql.compile.literals import quote_string, sanitize_alias
from explorerql.compile.metadata import get_regexp_for_metadata

__all__ = [
    "QueryArgs",
    "QueryBuilder",
    "build_group_args",
    "build_select_args",
    "build_where_args",
    "format_query",
    "get_regexp_for_metadata",
    "quote_string",
    "sanitize_alias",
]
