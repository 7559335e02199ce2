"""Filter validators.

``FieldFilterValidator`` and ``MetadataFilterValidator`` check that a filter's
name can be emitted without escaping and exists in the catalog.
``ClauseValidator`` checks each filter clause's rule and value list.
"""

from __future__ import annotations

from explorerql.errors import (
    DisallowedMatchRuleError,
    InvalidFilterClauseError,
    InvalidIdentifierError,
    UnknownFieldError,
)
from explorerql.schema.context import ValidationContext
from explorerql.schema.expressions import is_identifier, is_metadata_key
from explorerql.schema.filters import Filter


class ClauseValidator:
    """Validates the clauses of one filter against the profile."""

    def __init__(self, ctx: ValidationContext) -> None:
        self._ctx = ctx

    def validate(self, f: Filter) -> None:
        for index, clause in enumerate(f.filter_clauses):
            if not self._ctx.profile.allows_match_rule(clause.match_rule):
                raise DisallowedMatchRuleError(
                    f.field_name,
                    clause.match_rule,
                    list(self._ctx.profile.match_rules),
                )
            if not clause.match_on:
                raise InvalidFilterClauseError(f.field_name, index)


class FieldFilterValidator:
    """Validates a filter over a raw table field."""

    def __init__(self, ctx: ValidationContext, clauses: ClauseValidator) -> None:
        self._ctx = ctx
        self._clauses = clauses

    def validate(self, f: Filter) -> None:
        if not is_identifier(f.field_name):
            raise InvalidIdentifierError(f.field_name, kind="field")
        catalog = self._ctx.catalog
        if catalog is not None:
            tables = list(self._ctx.tables) if self._ctx.tables is not None else None
            allowed = catalog.field_names(tables)
            if f.field_name not in allowed:
                raise UnknownFieldError(f.field_name, kind="field", allowed=allowed)
        self._clauses.validate(f)


class MetadataFilterValidator:
    """Validates a filter over a key extracted from the labels column."""

    def __init__(self, ctx: ValidationContext, clauses: ClauseValidator) -> None:
        self._ctx = ctx
        self._clauses = clauses

    def validate(self, f: Filter) -> None:
        if not is_metadata_key(f.field_name):
            raise InvalidIdentifierError(f.field_name, kind="metadata key")
        catalog = self._ctx.catalog
        if catalog is not None and catalog.metadata_keys:
            if f.field_name not in catalog.metadata_keys:
                raise UnknownFieldError(
                    f.field_name,
                    kind="metadata key",
                    allowed=list(catalog.metadata_keys),
                )
        self._clauses.validate(f)
