from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Department
from .repository import DepartmentRepository


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT name, description FROM departments ORDER BY seq")
            rows = fetchall(cur)
            return [Department(name=r["name"], description=r["description"]) for r in rows]

    def get(self, key: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT name, description FROM departments WHERE name=%s", (key,))
            r = fetchone(cur)
            return Department(name=r["name"], description=r["description"]) if r else None

    def add(self, item: Department) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO departments(name, description) VALUES(%s,%s)", (item.name, item.description))

    def update(self, item: Department) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE departments SET description=%s WHERE name=%s", (item.description, item.name))
            return cur.rowcount > 0

    def delete(self, key: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM departments WHERE name=%s", (key,))
            return cur.rowcount > 0

    def replace_all(self, items: Sequence[Department]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM departments")
            if items:
                cur.executemany(
                    "INSERT INTO departments(name, description) VALUES(%s,%s)",
                    [(d.name, d.description) for d in items],
                )
