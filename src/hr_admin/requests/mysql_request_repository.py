from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence

from ..common.datetime_utils import to_iso
from ..core.enums import ApprovalStatus, RequestType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import EmployeeRequest, RequestItem
from .repository import RequestRepository

_SELECT = "SELECT id, type, employee_id, description, request_date, status FROM requests"
_INSERT = """
    INSERT INTO requests(type, employee_id, description, request_date, status, id)
    VALUES(%s,%s,%s,%s,%s,%s)
"""
_INSERT_ITEM = "INSERT INTO request_items(request_id, position, name, quantity) VALUES(%s,%s,%s,%s)"


def _params(r: EmployeeRequest) -> tuple:
    return (r.type.value, r.employee_id, r.description, r.request_date, r.status.value, r.id)


def _item_params(r: EmployeeRequest) -> List[tuple]:
    return [(r.id, pos, item.name, item.quantity) for pos, item in enumerate(r.items)]


class MySQLRequestRepository(RequestRepository):
    """Requests live in ``requests``; their ordered line items in ``request_items``."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _load_items(self, cur, request_ids: Sequence[str]) -> Dict[str, List[RequestItem]]:
        items: Dict[str, List[RequestItem]] = defaultdict(list)
        if not request_ids:
            return items
        placeholders = ",".join(["%s"] * len(request_ids))
        cur.execute(
            f"""
            SELECT request_id, name, quantity
            FROM request_items
            WHERE request_id IN ({placeholders})
            ORDER BY request_id, position
            """,
            tuple(request_ids),
        )
        for r in fetchall(cur):
            items[r["request_id"]].append(RequestItem.of(r["name"], r["quantity"]))
        return items

    def _hydrate(self, cur, rows: List[Dict[str, Any]]) -> List[EmployeeRequest]:
        items = self._load_items(cur, [r["id"] for r in rows])
        return [
            EmployeeRequest(
                id=r["id"],
                type=RequestType(r["type"]),
                employee_id=r["employee_id"],
                description=r["description"],
                request_date=to_iso(r["request_date"]),
                items=tuple(items.get(r["id"], [])),
                status=ApprovalStatus(r["status"]),
            )
            for r in rows
        ]

    def list_all(self) -> Sequence[EmployeeRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY seq")
            return self._hydrate(cur, fetchall(cur))

    def list_for_employee(self, employee_id: str) -> Sequence[EmployeeRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE employee_id=%s ORDER BY seq", (employee_id,))
            return self._hydrate(cur, fetchall(cur))

    def get(self, key: str) -> Optional[EmployeeRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (key,))
            row = fetchone(cur)
            if not row:
                return None
            return self._hydrate(cur, [row])[0]

    def add(self, item: EmployeeRequest) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_INSERT, _params(item))
            if item.items:
                cur.executemany(_INSERT_ITEM, _item_params(item))

    def update(self, item: EmployeeRequest) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE requests
                SET type=%s, employee_id=%s, description=%s, request_date=%s, status=%s
                WHERE id=%s
                """,
                _params(item),
            )
            if cur.rowcount <= 0:
                return False
            cur.execute("DELETE FROM request_items WHERE request_id=%s", (item.id,))
            if item.items:
                cur.executemany(_INSERT_ITEM, _item_params(item))
            return True

    def delete(self, key: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            # request_items rows go with it (ON DELETE CASCADE).
            cur.execute("DELETE FROM requests WHERE id=%s", (key,))
            return cur.rowcount > 0

    def replace_all(self, items: Sequence[EmployeeRequest]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM requests")
            if not items:
                return
            cur.executemany(_INSERT, [_params(r) for r in items])
            item_rows = [row for r in items for row in _item_params(r)]
            if item_rows:
                cur.executemany(_INSERT_ITEM, item_rows)
