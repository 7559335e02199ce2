"""QueryProperties validation orchestrator.

``PropertiesValidator`` is the public entry point.  It wires together the
focused sub-validators and drives validation in a fixed order.

Sub-validator hierarchy
-----------------------
PropertiesValidator
  ├── FieldFilterValidator     (filter_validator.py) - identifier / catalog
  ├── MetadataFilterValidator  (filter_validator.py) - label key shape / catalog
  └── ClauseValidator          (filter_validator.py) - match rules, match_on

Validation is optional: the builders accept any QueryProperties and emit
names verbatim.  Run the validator first when the properties come from an
untrusted source.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from explorerql.errors import UnsupportedAggregationError
from explorerql.schema.catalog import FieldCatalog
from explorerql.schema.context import ValidationContext
from explorerql.schema.filters import QueryProperties
from explorerql.schema.profile import QueryProfile
from explorerql.validate.filter_validator import (
    ClauseValidator,
    FieldFilterValidator,
    MetadataFilterValidator,
)

logger = logging.getLogger(__name__)


class PropertiesValidator:
    """Validates QueryProperties against a QueryProfile and optional FieldCatalog.

    Checks, in order:
    1. Field filters - identifier shape, catalog membership, clauses.
    2. Metadata filters - label key shape, known keys, clauses.
    3. Aggregations - profile allow-list.

    Raises the first violation as a subclass of ``ValidationError`` (or
    ``InvalidFilterClauseError`` for an empty ``match_on``).

    Args:
        profile: Allow-lists for match rules and aggregations.
        catalog: Known tables and fields.  ``None`` skips existence checks.
    """

    def __init__(
        self,
        profile: QueryProfile | None = None,
        catalog: FieldCatalog | None = None,
    ) -> None:
        self._profile = profile or QueryProfile()
        self._catalog = catalog

    def validate(
        self,
        properties: QueryProperties,
        tables: Sequence[str] | None = None,
    ) -> None:
        """Validate ``properties`` and raise on the first violation found.

        Args:
            properties: The parsed QueryProperties.
            tables: FROM tables; restricts which catalog fields are allowed.

        Raises:
            ValidationError: (or subclass) on the first violation.
            InvalidFilterClauseError: If a clause has an empty ``match_on``.
        """
        ctx = ValidationContext(
            profile=self._profile,
            catalog=self._catalog,
            tables=tuple(tables) if tables is not None else None,
        )
        clauses = ClauseValidator(ctx)
        fields = FieldFilterValidator(ctx, clauses)
        metadata = MetadataFilterValidator(ctx, clauses)

        for f in properties.field_filters:
            fields.validate(f)
        for f in properties.metadata_filters:
            metadata.validate(f)
        self._validate_aggregations(properties)

        logger.debug(
            "Validated %d field filter(s), %d metadata filter(s), %d aggregation(s)",
            len(properties.field_filters),
            len(properties.metadata_filters),
            len(properties.aggregations),
        )

    def _validate_aggregations(self, properties: QueryProperties) -> None:
        for aggregation in properties.aggregations:
            if not self._profile.allows_aggregation(aggregation):
                raise UnsupportedAggregationError(
                    aggregation, list(self._profile.aggregations)
                )
