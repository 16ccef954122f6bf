"""sqlbrick rendering layer: Fragment tree -> parameterized SQL."""
from sqlbrick.compile.base import CompiledQuery, PlaceholderDialect
from sqlbrick.compile.collector import ValueCollector
from sqlbrick.compile.flattener import TextFlattener
from sqlbrick.compile.mysql import MySQLDialect
from sqlbrick.compile.named import NamedDialect
from sqlbrick.compile.postgres import PostgresDialect
from sqlbrick.compile.registry import DialectFactory
from sqlbrick.compile.resolver import SKIP, SlotKind, group_sequence, resolve
from sqlbrick.compile.sqlite import SQLiteDialect

DialectFactory.register_class("postgres", PostgresDialect)
DialectFactory.register_class("mysql", MySQLDialect)
DialectFactory.register_class("sqlite", SQLiteDialect)
DialectFactory.register_class("named", NamedDialect)

__all__ = [
    "SKIP",
    "CompiledQuery",
    "DialectFactory",
    "MySQLDialect",
    "NamedDialect",
    "PlaceholderDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "SlotKind",
    "TextFlattener",
    "ValueCollector",
    "group_sequence",
    "resolve",
]
