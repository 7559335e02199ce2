"""Test fixtures: sample field catalog, UI payloads, and sample DDL."""

from __future__ import annotations

import json
from pathlib import Path

from explorerql.schema.catalog import FieldCatalog
from explorerql.schema.filters import QueryProperties

_FIXTURES_DIR = Path(__file__).parent


def load_field_catalog() -> FieldCatalog:
    """Load the canonical sample FieldCatalog from catalog.json."""
    data = json.loads((_FIXTURES_DIR / "catalog.json").read_text())
    return FieldCatalog.model_validate(data)


def load_properties_json(name: str = "dashboard") -> str:
    """Return the raw UI payload ``properties_<name>.json`` as a string."""
    return (_FIXTURES_DIR / f"properties_{name}.json").read_text()


def load_properties(name: str = "dashboard") -> QueryProperties:
    """Load ``properties_<name>.json`` as a QueryProperties model."""
    return QueryProperties.model_validate_json(load_properties_json(name))


def load_ddl() -> str:
    """Return the sample SQLite DDL for the samples table."""
    return (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()
