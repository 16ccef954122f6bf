"""sqlbrick walkthrough against an in-memory SQLite database.

Builds a table, inserts rows assembled in join mode, then runs a statement
whose condition is resolved lazily per enclosing query.

Usage
-----
Print every statement and its values, then the result rows::

    python examples/people.py

Show debug logging from the renderer::

    python examples/people.py -v

Render for another registered dialect (printing only)::

    python examples/people.py --target postgres
"""
from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Adjust sys.path so the package is importable when run as a script
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parent.parent
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from sqlbrick import Fragment, Segments, sql

PEOPLE = [("Peter", 25), ("Wendy", 24), ("Andrew", 32)]


def tag(template: str, *values: object) -> Fragment:
    return sql(Segments(template.split("{}")), *values)


def build_statements() -> dict[str, Fragment]:
    table = tag("people")
    columns = [tag("name TEXT,"), tag("age INTEGER")]
    create = tag("""
        CREATE TABLE IF NOT EXISTS {}({});
    """, table, columns)
    insert = tag("""
        INSERT INTO {} VALUES {}
    """, table, sql(*(tag("({})", sql(*row)) for row in PEOPLE)))

    def name_condition(query: Fragment) -> object:
        if query is first:
            return "Andrew"
        if query is second:
            return tag("{} OR name = {}", "Peter", "Wendy")
        return None

    first = tag("SELECT * FROM people WHERE name = {}", name_condition)
    second = tag("SELECT * FROM people WHERE name = {}", name_condition)
    me = tag("me")
    friends = tag("my_friends")
    full = tag("""
        WITH {} AS ({}), {} AS ({})
        SELECT name, (SELECT count(*) FROM {}) AS friend_count FROM {}
    """, me, first, friends, second, friends, me).set_name("friend_count")
    return {"create": create, "insert": insert, "select": full}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--target", default="sqlite", help="dialect to render for")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    statements = build_statements()
    for label, statement in statements.items():
        compiled = statement.compile(args.target)
        print(f"[{label}] {compiled.sql.strip()}")
        print(f"[{label}] values: {compiled.params}")

    if args.target != "sqlite":
        return 0

    conn = sqlite3.connect(":memory:")
    try:
        for statement in statements.values():
            rows = conn.execute(*statement.compile("sqlite").as_tuple()).fetchall()
        for row in rows:
            print(row)
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
