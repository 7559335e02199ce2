"""Shared pytest fixtures for explorerQL unit and integration tests."""
from __future__ import annotations

import pytest

from explorerql.schema.catalog import FieldCatalog
from explorerql.schema.filters import QueryProperties
from explorerql.schema.profile import QueryProfile
from tests.fixtures import load_field_catalog, load_properties


@pytest.fixture(scope="session")
def catalog() -> FieldCatalog:
    """Canonical field catalog shared across all tests."""
    return load_field_catalog()


@pytest.fixture(scope="session")
def dashboard() -> QueryProperties:
    """The sample dashboard payload, parsed."""
    return load_properties("dashboard")


@pytest.fixture(scope="session")
def default_profile() -> QueryProfile:
    return QueryProfile()


@pytest.fixture(scope="session")
def custom_profile() -> QueryProfile:
    """Non-default column layout."""
    return (
        QueryProfile.builder()
        .labels_column("sample_labels")
        .value_column("metric_value")
        .default_row_limit(500)
        .build()
    )
