"""explorerQL - SQL assembly for the dashboard explorer.

Turns the explorer's declarative filter / aggregation descriptors into
query text.

Public API
----------
``validate_and_build``
    Parse a QueryProperties JSON string, validate it, and assemble the query.

``format_query``, ``get_regexp_for_metadata``, ``build_select_args``,
``build_where_args``, ``build_group_args``
    The individual assembly steps, for callers that compose queries by hand.

Re-exported types
-----------------
``QueryProperties``, ``Filter``, ``FilterClause``, ``DisplayMode``,
``QueryProfile``, ``FieldCatalog``, ``QueryBuilder``, ``QueryArgs``,
``PropertiesValidator``, and all error classes.

Example::

    import explorerql

    sql = explorerql.validate_and_build(
        properties_json=request_body,
        tables=["samples_mart.results"],
        row_limit=100,
    )
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

import pydantic

from explorerql.compile.builder import (
    QueryBuilder,
    build_group_args,
    build_select_args,
    build_where_args,
)
from explorerql.compile.formatter import QueryArgs, format_query
from explorerql.compile.metadata import get_regexp_for_metadata
from explorerql.errors import (
    CompilationError,
    DisallowedMatchRuleError,
    ExplorerQLError,
    InvalidFilterClauseError,
    InvalidIdentifierError,
    ParseError,
    ProfileConfigError,
    UnknownFieldError,
    UnsupportedAggregationError,
    ValidationError,
)
from explorerql.schema.catalog import FieldCatalog, FieldInfo, TableInfo
from explorerql.schema.converters import catalog_from_metadata, catalog_from_sqlalchemy
from explorerql.schema.filters import DisplayMode, Filter, FilterClause, QueryProperties
from explorerql.schema.profile import QueryProfile, QueryProfileBuilder
from explorerql.validate.validator import PropertiesValidator

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core pipeline
    "validate_and_build",
    # Assembly steps
    "format_query",
    "get_regexp_for_metadata",
    "build_select_args",
    "build_where_args",
    "build_group_args",
    "QueryBuilder",
    "QueryArgs",
    # Descriptors
    "QueryProperties",
    "Filter",
    "FilterClause",
    "DisplayMode",
    # Configuration
    "QueryProfile",
    "QueryProfileBuilder",
    # Catalog
    "FieldCatalog",
    "TableInfo",
    "FieldInfo",
    "catalog_from_sqlalchemy",
    "catalog_from_metadata",
    # Validation
    "PropertiesValidator",
    # Errors
    "ExplorerQLError",
    "ParseError",
    "ValidationError",
    "InvalidIdentifierError",
    "UnknownFieldError",
    "DisallowedMatchRuleError",
    "UnsupportedAggregationError",
    "ProfileConfigError",
    "CompilationError",
    "InvalidFilterClauseError",
]


def validate_and_build(
    properties_json: str,
    tables: Sequence[str],
    *,
    profile: QueryProfile | None = None,
    catalog: FieldCatalog | None = None,
    order_args: Sequence[str] | None = None,
    row_limit: int | None = None,
) -> str:
    """Parse, validate, and assemble a query from QueryProperties JSON.

    This is the main entry point::

        sql = explorerql.validate_and_build(
            properties_json=ui_payload,
            tables=["samples"],
            catalog=catalog_from_sqlalchemy(engine, metadata_keys=["os"]),
            row_limit=100,
        )

    Args:
        properties_json: Raw JSON sent by the explorer UI (camelCase or
            snake_case keys).
        tables: FROM tables.
        profile: Column layout and allow-lists; defaults to ``QueryProfile()``.
        catalog: Optional field catalog for existence checks.
        order_args: Pre-rendered ORDER BY lines.
        row_limit: Optional LIMIT; falls back to the profile default.

    Returns:
        The query text.

    Raises:
        ParseError: If ``properties_json`` is not valid JSON or not a valid
            QueryProperties object.
        ValidationError: (or subclass) if the properties violate the profile
            or catalog.
        CompilationError: If assembly fails (empty ``match_on``, bad limit).
    """
    if profile is None:
        profile = QueryProfile()

    # 1. Parse
    try:
        raw = json.loads(properties_json)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc}", raw=properties_json) from exc

    try:
        properties = QueryProperties.model_validate(raw)
    except pydantic.ValidationError as exc:
        raise ParseError(
            f"QueryProperties structure is invalid: {exc}", raw=properties_json
        ) from exc

    # 2. Validate
    PropertiesValidator(profile, catalog).validate(properties, tables)

    # 3. Build
    return QueryBuilder(profile).build(properties, tables, order_args, row_limit)
