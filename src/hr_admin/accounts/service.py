from __future__ import annotations

import logging
from typing import Any, List, Mapping

from ..common.validators import FieldErrors, is_valid_email
from ..core.enums import ActiveStatus, Role
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Account
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Use case: manage login accounts."""

    def __init__(self, accounts: AccountRepository, employees: EmployeeRepository):
        self._accounts = accounts
        self._employees = employees

    def list_accounts(self) -> List[Account]:
        return list(self._accounts.list_all())

    def get_account(self, email: str) -> Account:
        account = self._accounts.get(email)
        if not account:
            raise NotFoundError("Account not found")
        return account

    def list_available(self) -> List[Account]:
        """Accounts not yet linked to any employee."""

        used = {e.account for e in self._employees.list_all()}
        return [a for a in self._accounts.list_all() if a.email not in used]

    def _validate(self, data: Mapping[str, Any], *, check_unique: bool) -> Account:
        errors = FieldErrors()
        title = errors.require(data, "title", "Title")
        first_name = errors.require(data, "firstName", "First name")
        last_name = errors.require(data, "lastName", "Last name")
        email = errors.require(data, "email", "Email")
        if email and not is_valid_email(email):
            errors.add("email", "Invalid email format")
        elif email and check_unique and self._accounts.get(email):
            errors.add("email", "Email already exists")
        role = errors.choice(errors.require(data, "role", "Role"), "role", Role)
        status = errors.choice(errors.require(data, "status", "Status"), "status", ActiveStatus)
        errors.raise_if_any("Invalid account")

        return Account(
            email=email,
            title=title,
            first_name=first_name,
            last_name=last_name,
            role=role,
            status=status,
        )

    def create_account(self, data: Mapping[str, Any]) -> Account:
        account = self._validate(data, check_unique=True)
        self._accounts.add(account)
        logger.info("Account %s created", account.email)
        return account

    def update_account(self, email: str, data: Mapping[str, Any]) -> Account:
        self.get_account(email)
        if data.get("email") and data["email"] != email:
            raise ValidationError("Invalid account", {"email": "Email cannot be changed"})

        # The record being edited already owns this email, so uniqueness is not re-checked.
        account = self._validate({**data, "email": email}, check_unique=False)
        if not self._accounts.update(account):
            raise NotFoundError("Account not found")
        logger.info("Account %s updated", email)
        return account

    def delete_account(self, email: str) -> bool:
        """Remove the account. Employees keep pointing at the (now orphaned) email."""

        deleted = self._accounts.delete(email)
        if deleted:
            logger.info("Account %s deleted", email)
        return deleted
