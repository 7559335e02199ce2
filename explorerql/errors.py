"""Custom exception hierarchy for explorerQL.

All public errors inherit from ExplorerQLError so callers can catch the base
class for any explorerQL-specific failure.
"""
from __future__ import annotations

from typing import Any


class ExplorerQLError(Exception):
    """Base exception for all explorerQL errors."""


class ParseError(ExplorerQLError):
    """Raised when input cannot be parsed as valid QueryProperties JSON.

    Args:
        message: Human-readable description.
        raw: The raw string that failed to parse.
    """

    def __init__(self, message: str, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class ValidationError(ExplorerQLError):
    """Raised when QueryProperties fail validation against a profile or catalog.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. UNKNOWN_FIELD).
        details: Extra context returned to the UI layer.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for the UI layer."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class InvalidIdentifierError(ValidationError):
    """Raised when a field name or metadata key cannot be emitted unescaped."""

    def __init__(self, name: str, kind: str) -> None:
        super().__init__(
            f"{kind.capitalize()} '{name}' is not a valid identifier.",
            code="INVALID_IDENTIFIER",
            details={"name": name, "kind": kind},
        )


class UnknownFieldError(ValidationError):
    """Raised when a filter references a field missing from the catalog."""

    def __init__(self, name: str, kind: str, allowed: list[str]) -> None:
        super().__init__(
            f"Unknown {kind} '{name}'.",
            code="UNKNOWN_FIELD",
            details={"name": name, "kind": kind, "allowed": allowed},
        )


class DisallowedMatchRuleError(ValidationError):
    """Raised when a filter clause uses a comparison outside the allow-list."""

    def __init__(self, field_name: str, match_rule: str, allowed: list[str]) -> None:
        super().__init__(
            f"Match rule '{match_rule}' on '{field_name}' is not allowed.",
            code="DISALLOWED_MATCH_RULE",
            details={
                "field": field_name,
                "match_rule": match_rule,
                "allowed_match_rules": allowed,
            },
        )


class UnsupportedAggregationError(ValidationError):
    """Raised when an aggregation name is not in the profile allow-list."""

    def __init__(self, aggregation: str, allowed: list[str]) -> None:
        super().__init__(
            f"Aggregation '{aggregation}' is not supported.",
            code="UNSUPPORTED_AGGREGATION",
            details={"aggregation": aggregation, "allowed_aggregations": allowed},
        )


class ProfileConfigError(ExplorerQLError):
    """Raised when a QueryProfile is misconfigured.

    Detected at :meth:`QueryProfileBuilder.build` time, before any query is
    assembled.

    Args:
        message: Human-readable description.
        missing: Settings that must be supplied or corrected.
        reason: Why the setting is required.
    """

    def __init__(
        self,
        message: str,
        missing: list[str] | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.missing = missing or []
        self.reason = reason or ""


class CompilationError(ExplorerQLError):
    """Raised when SQL assembly fails.

    Args:
        message: Human-readable description.
        clause: The SQL section being assembled when the error occurred.
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause


class InvalidFilterClauseError(CompilationError):
    """Raised when a filter clause has no value to match on.

    Args:
        field_name: The filter whose clause is malformed.
        clause_index: Position of the clause within the filter.
    """

    def __init__(self, field_name: str, clause_index: int) -> None:
        super().__init__(
            f"Filter clause {clause_index} on '{field_name}' has an empty match_on.",
            clause="WHERE",
        )
        self.field_name = field_name
        self.clause_index = clause_index
