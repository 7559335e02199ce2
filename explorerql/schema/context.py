"""Validation context value object.

Packages the ``(profile, catalog, tables)`` triple threaded through
``PropertiesValidator`` and its sub-validators.
"""

from __future__ import annotations

from dataclasses import dataclass

from explorerql.schema.catalog import FieldCatalog
from explorerql.schema.profile import QueryProfile


@dataclass(frozen=True)
class ValidationContext:
    """Immutable context for a single validation run.

    Attributes:
        profile: Allow-lists for match rules and aggregations.
        catalog: Known tables and fields; ``None`` skips existence checks.
        tables: Tables the query reads from; ``None`` means any catalog table.
    """

    profile: QueryProfile
    catalog: FieldCatalog | None = None
    tables: tuple[str, ...] | None = None
