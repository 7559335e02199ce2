"""explorerQL schema models: QueryProperties, QueryProfile, FieldCatalog."""
from explorerql.schema.catalog import FieldCatalog, FieldInfo, TableInfo
from explorerql.schema.filters import (
    DisplayMode,
    Filter,
    FilterClause,
    MatchValue,
    QueryProperties,
)
from explorerql.schema.profile import QueryProfile, QueryProfileBuilder

__all__ = [
    "DisplayMode",
    "Filter",
    "FilterClause",
    "MatchValue",
    "QueryProperties",
    "QueryProfile",
    "QueryProfileBuilder",
    "FieldCatalog",
    "FieldInfo",
    "TableInfo",
]
