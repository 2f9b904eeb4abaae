from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import ActiveStatus, Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Account
from .repository import AccountRepository

_SELECT = "SELECT email, title, first_name, last_name, role, status FROM accounts"


def _to_account(r: Dict[str, Any]) -> Account:
    return Account(
        email=r["email"],
        title=r["title"],
        first_name=r["first_name"],
        last_name=r["last_name"],
        role=Role(r["role"]),
        status=ActiveStatus(r["status"]),
    )


def _params(a: Account) -> tuple:
    return (a.title, a.first_name, a.last_name, a.role.value, a.status.value, a.email)


class MySQLAccountRepository(AccountRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY seq")
            return [_to_account(r) for r in fetchall(cur)]

    def get(self, key: str) -> Optional[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE email=%s", (key,))
            row = fetchone(cur)
            return _to_account(row) if row else None

    def add(self, item: Account) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO accounts(title, first_name, last_name, role, status, email)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                _params(item),
            )

    def update(self, item: Account) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE accounts
                SET title=%s, first_name=%s, last_name=%s, role=%s, status=%s
                WHERE email=%s
                """,
                _params(item),
            )
            return cur.rowcount > 0

    def delete(self, key: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM accounts WHERE email=%s", (key,))
            return cur.rowcount > 0

    def replace_all(self, items: Sequence[Account]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM accounts")
            if items:
                cur.executemany(
                    """
                    INSERT INTO accounts(title, first_name, last_name, role, status, email)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    [_params(a) for a in items],
                )
