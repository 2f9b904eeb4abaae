from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import to_iso
from ..core.enums import ApprovalStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import TransferRecord
from .repository import TransferRepository

_SELECT = "SELECT id, employee_id, from_department, to_department, transfer_date, status FROM transfers"
_INSERT = """
    INSERT INTO transfers(employee_id, from_department, to_department, transfer_date, status, id)
    VALUES(%s,%s,%s,%s,%s,%s)
"""


def _to_transfer(r: Dict[str, Any]) -> TransferRecord:
    return TransferRecord(
        id=r["id"],
        employee_id=r["employee_id"],
        from_department=r["from_department"],
        to_department=r["to_department"],
        date=to_iso(r["transfer_date"]),
        status=ApprovalStatus(r["status"]),
    )


def _params(t: TransferRecord) -> tuple:
    return (t.employee_id, t.from_department, t.to_department, t.date, t.status.value, t.id)


class MySQLTransferRepository(TransferRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[TransferRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY seq")
            return [_to_transfer(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: str) -> Sequence[TransferRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE employee_id=%s ORDER BY seq", (employee_id,))
            return [_to_transfer(r) for r in fetchall(cur)]

    def get(self, key: str) -> Optional[TransferRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (key,))
            row = fetchone(cur)
            return _to_transfer(row) if row else None

    def add(self, item: TransferRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_INSERT, _params(item))

    def update(self, item: TransferRecord) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE transfers
                SET employee_id=%s, from_department=%s, to_department=%s, transfer_date=%s, status=%s
                WHERE id=%s
                """,
                _params(item),
            )
            return cur.rowcount > 0

    def delete(self, key: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM transfers WHERE id=%s", (key,))
            return cur.rowcount > 0

    def replace_all(self, items: Sequence[TransferRecord]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM transfers")
            if items:
                cur.executemany(_INSERT, [_params(t) for t in items])
