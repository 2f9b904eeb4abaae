from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Mapping

from ..storage.defaults import (
    DEFAULT_ACCOUNTS,
    DEFAULT_DEPARTMENTS,
    DEFAULT_EMPLOYEES,
    DEFAULT_REQUESTS,
    DEFAULT_TRANSFERS,
)
from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(config: DBConfig) -> None:
    conn = DatabaseConnection(config).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: Mapping, *, schema_path: str | Path) -> None:
    config = DBConfig.from_mapping(db_config)
    ensure_database_exists(config)

    sql = _strip_comments(_strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8")))

    conn = DatabaseConnection(config).connect()
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied schema %s to %s", schema_path, config.database)


def ensure_default_records(db_config: Mapping) -> None:
    """Insert the fixed default records; rows whose key already exists are left alone."""

    config = DBConfig.from_mapping(db_config)
    conn = DatabaseConnection(config).connect()
    try:
        cur = conn.cursor()
        cur.executemany(
            "INSERT IGNORE INTO accounts(email, title, first_name, last_name, role, status) VALUES(%s,%s,%s,%s,%s,%s)",
            [(a.email, a.title, a.first_name, a.last_name, a.role.value, a.status.value) for a in DEFAULT_ACCOUNTS],
        )
        cur.executemany(
            "INSERT IGNORE INTO departments(name, description) VALUES(%s,%s)",
            [(d.name, d.description) for d in DEFAULT_DEPARTMENTS],
        )
        cur.executemany(
            "INSERT IGNORE INTO employees(id, account, department, position, hire_date, status) VALUES(%s,%s,%s,%s,%s,%s)",
            [(e.id, e.account, e.department, e.position, e.hire_date, e.status.value) for e in DEFAULT_EMPLOYEES],
        )
        if DEFAULT_TRANSFERS:
            cur.executemany(
                """
                INSERT IGNORE INTO transfers(id, employee_id, from_department, to_department, transfer_date, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                [
                    (t.id, t.employee_id, t.from_department, t.to_department, t.date, t.status.value)
                    for t in DEFAULT_TRANSFERS
                ],
            )
        for r in DEFAULT_REQUESTS:
            cur.execute(
                """
                INSERT IGNORE INTO requests(id, type, employee_id, description, request_date, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (r.id, r.type.value, r.employee_id, r.description, r.request_date, r.status.value),
            )
            if cur.rowcount:
                cur.executemany(
                    "INSERT INTO request_items(request_id, position, name, quantity) VALUES(%s,%s,%s,%s)",
                    [(r.id, pos, item.name, item.quantity) for pos, item in enumerate(r.items)],
                )
        conn.commit()
    finally:
        conn.close()
    logger.info("Default records ensured in %s", config.database)


def list_tables(db_config: Mapping) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
