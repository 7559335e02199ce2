"""Pydantic models for the QueryProperties descriptor.

The explorer UI sends a single JSON object matching the ``QueryProperties``
shape.  Keys arrive in camelCase (``fieldName``, ``matchOn`` ...); the models
expose them as snake_case attributes and accept either spelling.

All models are frozen: a descriptor is built once per query and compared
structurally.
"""
from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_DESCRIPTOR = ConfigDict(
    extra="forbid",
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)

#: A literal or function-call fragment to match against.
MatchValue = Union[bool, int, float, str]


class DisplayMode(str, Enum):
    """Whether a filtered field also appears in SELECT / GROUP BY."""

    VISIBLE = "VISIBLE"
    HIDDEN = "HIDDEN"


class FilterClause(BaseModel):
    """One comparison rule within a Filter.

    Attributes:
        match_rule: Comparison operator token, e.g. ``'='``, ``'>'``, ``'LIKE'``.
        match_on: Values to compare against.  Only the first is emitted.
        is_function: If True, the first value is a function-call fragment
            emitted raw instead of as a quoted string literal.
    """

    model_config = _DESCRIPTOR

    match_rule: str
    match_on: list[MatchValue] = Field(default_factory=list)
    is_function: bool = False


class Filter(BaseModel):
    """A single comparable dimension: a table field or a metadata key.

    Attributes:
        field_name: SQL identifier (field filters) or label key (metadata
            filters).  Emitted without escaping.
        field_alias: Optional display alias, sanitized before use.
        display_mode: HIDDEN filters still constrain WHERE but are left out
            of SELECT and GROUP BY.
        filter_clauses: Clauses OR-ed together in WHERE.
    """

    model_config = _DESCRIPTOR

    field_name: str
    field_alias: str | None = None
    display_mode: DisplayMode = DisplayMode.VISIBLE
    filter_clauses: list[FilterClause] = Field(default_factory=list)

    @property
    def is_hidden(self) -> bool:
        return self.display_mode == DisplayMode.HIDDEN

    @property
    def has_alias(self) -> bool:
        """True if an alias is present and non-empty."""
        return bool(self.field_alias)


class QueryProperties(BaseModel):
    """Declarative description of one explorer query.

    Attributes:
        field_filters: Filters over raw table fields.
        metadata_filters: Filters over values extracted from the packed
            labels column.
        aggregations: Aggregate function names applied to the value column,
            e.g. ``'sum'``, ``'avg'``.
    """

    model_config = _DESCRIPTOR

    field_filters: list[Filter] = Field(default_factory=list)
    metadata_filters: list[Filter] = Field(default_factory=list)
    aggregations: list[str] = Field(default_factory=list)

    @property
    def all_filters(self) -> list[Filter]:
        """Field filters followed by metadata filters."""
        return [*self.field_filters, *self.metadata_filters]
