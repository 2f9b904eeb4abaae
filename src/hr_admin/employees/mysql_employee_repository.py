from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import to_iso
from ..core.enums import ActiveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_SELECT = "SELECT id, account, department, position, hire_date, status FROM employees"
_INSERT = """
    INSERT INTO employees(account, department, position, hire_date, status, id)
    VALUES(%s,%s,%s,%s,%s,%s)
"""


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        id=r["id"],
        account=r["account"],
        department=r["department"],
        position=r["position"],
        hire_date=to_iso(r["hire_date"]),
        status=ActiveStatus(r["status"]),
    )


def _params(e: Employee) -> tuple:
    return (e.account, e.department, e.position, e.hire_date, e.status.value, e.id)


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY seq")
            return [_to_employee(r) for r in fetchall(cur)]

    def list_by_department(self, department: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE department=%s ORDER BY seq", (department,))
            return [_to_employee(r) for r in fetchall(cur)]

    def get(self, key: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (key,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def add(self, item: Employee) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_INSERT, _params(item))

    def update(self, item: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET account=%s, department=%s, position=%s, hire_date=%s, status=%s
                WHERE id=%s
                """,
                _params(item),
            )
            return cur.rowcount > 0

    def delete(self, key: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (key,))
            return cur.rowcount > 0

    def replace_all(self, items: Sequence[Employee]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees")
            if items:
                cur.executemany(_INSERT, [_params(e) for e in items])
