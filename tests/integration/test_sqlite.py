"""Integration tests: assemble → execute against a real SQLite in-memory DB.

SQLite has no REGEXP_EXTRACT, so these cases use field filters and
aggregations only.  String comparisons use function-style clauses carrying
single-quoted literals, since SQLite treats double quotes as identifiers.
"""
from __future__ import annotations

import sqlite3

import pytest

from explorerql.compile.builder import QueryBuilder
from explorerql.schema.filters import DisplayMode, Filter, FilterClause, QueryProperties
from tests.fixtures import load_ddl

ROWS = [
    # product_name, test, metric, owner, run_number, timestamp, value, labels
    ("widget", "iperf", "throughput", "ann", 1, 100.0, 10.0, "|os:linux|"),
    ("widget", "iperf", "throughput", "ann", 2, 200.0, 20.0, "|os:linux|"),
    ("widget", "ping", "latency", "bob", 1, 150.0, 5.0, "|os:windows|"),
    ("gadget", "iperf", "throughput", None, 1, 120.0, 40.0, "|os:linux|"),
    ("gadget", "iperf", "throughput", None, 3, 300.0, 60.0, "|os:linux|"),
]


@pytest.fixture()
def db() -> sqlite3.Connection:
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.executescript(load_ddl())
    conn.executemany("INSERT INTO samples VALUES (?,?,?,?,?,?,?,?)", ROWS)
    yield conn
    conn.close()


def _run(conn: sqlite3.Connection, props: QueryProperties, **kwargs) -> list[sqlite3.Row]:
    sql = QueryBuilder().build(props, ["samples"], **kwargs)
    return conn.execute(sql).fetchall()


def _sql_literal(value: str) -> FilterClause:
    return FilterClause(match_rule="=", match_on=[f"'{value}'"], is_function=True)


def test_select_all_rows(db):
    props = QueryProperties(field_filters=[Filter(field_name="product_name")])
    assert len(_run(db, props)) == len(ROWS)


def test_or_within_filter(db):
    props = QueryProperties(
        field_filters=[
            Filter(
                field_name="run_number",
                filter_clauses=[
                    FilterClause(match_rule="=", match_on=[2]),
                    FilterClause(match_rule="=", match_on=[3]),
                ],
            )
        ]
    )
    rows = _run(db, props)
    assert sorted(r["run_number"] for r in rows) == [2, 3]


def test_and_across_filters(db):
    props = QueryProperties(
        field_filters=[
            Filter(field_name="product_name", filter_clauses=[_sql_literal("widget")]),
            Filter(
                field_name="value",
                filter_clauses=[FilterClause(match_rule=">", match_on=[7.5])],
            ),
        ]
    )
    rows = _run(db, props)
    assert sorted(r["value"] for r in rows) == [10.0, 20.0]


def test_aggregation_grouped_by_alias(db):
    props = QueryProperties(
        field_filters=[
            Filter(field_name="product_name", field_alias="Product Name"),
            Filter(
                field_name="test",
                display_mode=DisplayMode.HIDDEN,
                filter_clauses=[_sql_literal("iperf")],
            ),
        ],
        aggregations=["avg", "max"],
    )
    rows = _run(db, props, order_args=["Product_Name"])
    assert [tuple(r) for r in rows] == [
        ("gadget", 50.0, 60.0),
        ("widget", 15.0, 20.0),
    ]
    assert rows[0].keys() == ["Product_Name", "avg", "max"]


def test_row_limit(db):
    props = QueryProperties(field_filters=[Filter(field_name="product_name")])
    assert len(_run(db, props, row_limit=2)) == 2


def test_count_without_fields(db):
    props = QueryProperties(aggregations=["count"])
    rows = _run(db, props)
    assert rows[0]["count"] == len(ROWS)
