from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for permissions."""

    ADMIN = "Admin"
    USER = "User"


class ActiveStatus(str, Enum):
    """Lifecycle status shared by accounts and employees."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class ApprovalStatus(str, Enum):
    """Approval flow status for transfers and requests."""

    PENDING = "Pending"
    APPROVED = "Approved"
    DISAPPROVED = "Disapproved"


class RequestType(str, Enum):
    EQUIPMENT = "Equipment"
    LEAVE = "Leave"
    RESOURCES = "Resources"


class WorkflowKind(str, Enum):
    ONBOARDING = "onboarding"
    TRANSFER = "transfer"
    REQUEST = "request"
