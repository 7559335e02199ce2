"""Pydantic models for the FieldCatalog used by the validator.

The FieldCatalog lists the tables and fields the explorer may filter on,
plus (optionally) the metadata keys known to appear in the labels column.
It is produced by the caller, by hand or through
:func:`~explorerql.schema.converters.catalog_from_sqlalchemy`.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FieldInfo(BaseModel):
    """Metadata for a single field.

    Attributes:
        name: Field (column) name.
        type: SQL type string (e.g. ``'TEXT'``, ``'INTEGER'``).
        nullable: Whether the field can be NULL.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    type: str
    nullable: bool = True


class TableInfo(BaseModel):
    """Metadata for a single queryable table.

    Attributes:
        name: Table name.
        columns: Ordered list of field metadata.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    columns: list[FieldInfo]

    @property
    def field_names(self) -> list[str]:
        """Returns all field names for this table."""
        return [f.name for f in self.columns]


class FieldCatalog(BaseModel):
    """Describes what explorer filters are allowed to reference.

    Attributes:
        tables: All queryable tables.
        metadata_keys: Known label keys.  Empty means any well-formed key.
    """

    model_config = ConfigDict(extra="forbid")

    tables: list[TableInfo]
    metadata_keys: list[str] = Field(default_factory=list)

    def get_table(self, name: str) -> TableInfo | None:
        """Returns the TableInfo for the given table name, or ``None``."""
        for table in self.tables:
            if table.name == name:
                return table
        return None

    def get_field(self, table_name: str, field_name: str) -> FieldInfo | None:
        """Returns the FieldInfo for a table.field pair, or ``None``."""
        table = self.get_table(table_name)
        if table is None:
            return None
        for f in table.columns:
            if f.name == field_name:
                return f
        return None

    def field_names(self, tables: list[str] | None = None) -> list[str]:
        """Returns the field names of ``tables`` (all tables when ``None``).

        Names are returned unqualified and in ``table.field`` form, without
        duplicates, in catalog order.  Unknown tables contribute nothing.
        """
        names: list[str] = []
        for table in self.tables:
            if tables is not None and table.name not in tables:
                continue
            for name in table.field_names:
                for candidate in (name, f"{table.name}.{name}"):
                    if candidate not in names:
                        names.append(candidate)
        return names

    @property
    def table_names(self) -> list[str]:
        """Returns all table names in the catalog."""
        return [t.name for t in self.tables]
