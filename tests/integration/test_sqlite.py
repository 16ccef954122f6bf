"""Integration tests: build -> execute against a real SQLite in-memory DB.

Covers DDL assembled from fragment sequences, multi-row inserts built in
join mode, lazy conditions and prepared-statement style reuse of one
fragment under several parents.
"""
from __future__ import annotations

import sqlite3

import pytest

from sqlbrick import SKIP, Builder, BuilderProfile, raw, sql
from tests.fixtures import PEOPLE_ROWS, tag

TABLE = tag("people")


@pytest.fixture()
def db(sqlite_conn: sqlite3.Connection) -> sqlite3.Connection:
    columns = [tag("name TEXT NOT NULL,"), tag("age INTEGER NOT NULL")]
    create = tag("""
        CREATE TABLE IF NOT EXISTS {}({});
    """, TABLE, columns)
    sqlite_conn.execute(create.sql)

    insert = tag("""
        INSERT INTO {} VALUES {}
    """, TABLE, sql(*(tag("({})", sql(*row)) for row in PEOPLE_ROWS)))
    sqlite_conn.execute(*insert.compile("sqlite").as_tuple())
    return sqlite_conn


def test_insert_rendering():
    insert = tag("INSERT INTO {} VALUES {}", TABLE, sql(*(tag("({})", sql(*row)) for row in PEOPLE_ROWS)))
    assert insert.text == "INSERT INTO people VALUES ($1,$2),($3,$4),($5,$6)"
    assert insert.sql == "INSERT INTO people VALUES (?,?),(?,?),(?,?)"
    assert insert.values == ["Peter", 25, "Wendy", 24, "Andrew", 32]


def test_rows_inserted(db):
    rows = db.execute(*tag("SELECT name, age FROM {} ORDER BY age", TABLE).compile("sqlite").as_tuple())
    assert [tuple(r) for r in rows] == [("Wendy", 24), ("Peter", 25), ("Andrew", 32)]


def test_nested_conditions(db):
    adults = tag("age >= {}", 25)
    named = tag("name <> {}", "Andrew")
    query = tag("SELECT name FROM {} WHERE {}", TABLE, sql(adults, named).join_by(" AND "))
    assert query.sql == "SELECT name FROM people WHERE age >= ? AND name <> ?"
    assert [r["name"] for r in db.execute(query.sql, query.values)] == ["Peter"]


def test_optional_condition_skipped(db):
    def age_filter(_):
        return SKIP

    query = tag("SELECT count(*) FROM {}{}", TABLE, age_filter)
    assert query.sql == "SELECT count(*) FROM people"
    assert db.execute(query.sql, query.values).fetchone()[0] == 3


def test_lazy_condition_per_query(db):
    def name_condition(query):
        return "Andrew" if query is first else "Wendy"

    first = tag("SELECT age FROM people WHERE name = {}", name_condition)
    second = tag("SELECT age FROM people WHERE name = {}", name_condition)
    union = sql(first, second).join_by(" UNION ALL ")
    assert union.sql == (
        "SELECT age FROM people WHERE name = ? UNION ALL SELECT age FROM people WHERE name = ?"
    )
    ages = sorted(r[0] for r in db.execute(union.sql, union.values))
    assert ages == [24, 32]


def test_subquery_reuse(db):
    oldest = tag("SELECT max(age) FROM {} WHERE age < {}", TABLE, 100)
    query = tag("SELECT name FROM {} WHERE age = ({}) OR age < {}", TABLE, oldest, 25)
    assert query.values == [100, 25]
    names = sorted(r["name"] for r in db.execute(query.sql, query.values))
    assert names == ["Andrew", "Wendy"]


def test_profile_target_sqlite(db):
    lite = Builder(BuilderProfile(target="sqlite", join_delimiter=", "))
    query = tag("SELECT {} FROM {} WHERE age > {}", lite(raw("name"), raw("age")), TABLE, 30)
    rows = db.execute(*lite.compile(query).as_tuple()).fetchall()
    assert [tuple(r) for r in rows] == [("Andrew", 32)]
