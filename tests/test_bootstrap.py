from __future__ import annotations

from pathlib import Path

from hr_admin.database.bootstrap import _strip_comments, _strip_create_db_and_use, iter_sql_statements

SCHEMA = Path(__file__).resolve().parents[1] / "database" / "schema.sql"


def test_splitter_ignores_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES('a;b'); INSERT INTO t VALUES(\"c;d\");\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES('a;b')",
        'INSERT INTO t VALUES("c;d")',
        "SELECT 1",
    ]


def test_splitter_handles_escaped_quote():
    sql = r"INSERT INTO t VALUES('it\'s;fine');"

    assert list(iter_sql_statements(sql)) == [r"INSERT INTO t VALUES('it\'s;fine')"]


def test_create_database_and_use_lines_are_removed():
    sql = "CREATE DATABASE IF NOT EXISTS foo;\nUSE foo;\n-- note\nCREATE TABLE x (id INT);"

    cleaned = _strip_comments(_strip_create_db_and_use(sql))

    assert list(iter_sql_statements(cleaned)) == ["CREATE TABLE x (id INT)"]


def test_schema_file_creates_every_table():
    sql = _strip_comments(_strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8")))
    statements = list(iter_sql_statements(sql))

    created = [s.split()[5] for s in statements if s.upper().startswith("CREATE TABLE IF NOT EXISTS")]
    assert created == ["accounts", "departments", "employees", "transfers", "requests", "request_items"]
    assert not any(s.upper().startswith(("USE", "CREATE DATABASE")) for s in statements)
