from __future__ import annotations

import logging
from typing import List, Union

from ..core.enums import ApprovalStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import TransferRecord
from .repository import TransferRepository

logger = logging.getLogger(__name__)


def coerce_status(value: Union[str, ApprovalStatus, None]) -> ApprovalStatus:
    try:
        return ApprovalStatus(value)
    except ValueError:
        raise ValidationError("Invalid status", {"status": f"Invalid status: {value}"})


class TransferService:
    def __init__(self, transfers: TransferRepository):
        self._transfers = transfers

    def list_transfers(self) -> List[TransferRecord]:
        return list(self._transfers.list_all())

    def list_for_employee(self, employee_id: str) -> List[TransferRecord]:
        return list(self._transfers.list_for_employee(employee_id))

    def get_transfer(self, transfer_id: str) -> TransferRecord:
        transfer = self._transfers.get(transfer_id)
        if not transfer:
            raise NotFoundError("Transfer not found")
        return transfer

    def set_status(self, transfer_id: str, status: Union[str, ApprovalStatus]) -> TransferRecord:
        """Change the audit status only; the employee's department is left as is."""

        new_status = coerce_status(status)
        updated = self.get_transfer(transfer_id).with_status(new_status)
        if not self._transfers.update(updated):
            raise NotFoundError("Transfer not found")
        logger.info("Transfer %s -> %s", transfer_id, new_status.value)
        return updated
