"""Utilities for building a FieldCatalog from external sources.

SQLAlchemy converter
--------------------
:func:`catalog_from_sqlalchemy` reflects a live database engine and returns a
:class:`~explorerql.schema.catalog.FieldCatalog`.

Install the optional dependency before using this module::

    pip install "explorerql[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from explorerql.schema.converters import catalog_from_sqlalchemy

    engine = create_engine("sqlite:///samples.db")
    catalog = catalog_from_sqlalchemy(engine, metadata_keys=["os", "zone"])
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from explorerql.schema.catalog import FieldCatalog, FieldInfo, TableInfo

if TYPE_CHECKING:
    from sqlalchemy import Engine, MetaData

logger = logging.getLogger(__name__)


def catalog_from_sqlalchemy(
    engine: Engine,
    *,
    include_tables: list[str] | None = None,
    schema: str | None = None,
    metadata_keys: list[str] | None = None,
) -> FieldCatalog:
    """Build a :class:`FieldCatalog` by reflecting a SQLAlchemy engine.

    All tables visible to the engine (or a subset via *include_tables*) are
    reflected using SQLAlchemy's :class:`~sqlalchemy.schema.MetaData`.

    Label keys live inside the packed labels column and cannot be reflected;
    pass them as *metadata_keys* when the validator should restrict them.

    Args:
        engine: A connected :class:`sqlalchemy.engine.Engine` instance.
        include_tables: Optional allowlist of table names to reflect.
            When ``None`` all tables in the schema are reflected.
        schema: Optional database schema name, passed directly to
            :meth:`sqlalchemy.schema.MetaData.reflect`.
        metadata_keys: Optional list of known label keys.

    Returns:
        A fully populated :class:`FieldCatalog`.

    Raises:
        ImportError: If ``sqlalchemy`` is not installed.
    """
    try:
        from sqlalchemy import MetaData as _MetaData
    except ImportError as exc:
        raise ImportError(
            "SQLAlchemy is required for catalog_from_sqlalchemy(). "
            'Install it with: pip install "explorerql[sqlalchemy]"'
        ) from exc

    metadata = _MetaData()
    with engine.connect() as conn:
        metadata.reflect(bind=conn, only=include_tables, schema=schema)

    catalog = catalog_from_metadata(metadata, metadata_keys=metadata_keys)
    logger.info(
        "Reflected %d table(s) into field catalog", len(catalog.tables)
    )
    return catalog


def catalog_from_metadata(
    metadata: MetaData,
    *,
    metadata_keys: list[str] | None = None,
) -> FieldCatalog:
    """Convert a :class:`~sqlalchemy.schema.MetaData` into a :class:`FieldCatalog`.

    Works for reflected metadata and for declaratively defined tables alike.
    """
    tables = [
        TableInfo(
            name=table.name,
            columns=[
                FieldInfo(
                    name=col.name,
                    type=str(col.type),
                    # Reflected columns may leave nullable unset (None).
                    nullable=col.nullable is not False,
                )
                for col in table.columns
            ],
        )
        for table in metadata.sorted_tables
    ]
    return FieldCatalog(tables=tables, metadata_keys=list(metadata_keys or []))
