"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EMPLOYEE_ID_PREFIX = "EMP"
TRANSFER_ID_PREFIX = "TRF"
REQUEST_ID_PREFIX = "REQ"
ID_DIGITS = 3

DEFAULT_WORKFLOW_PAGE_SIZE = 5
ONBOARDING_ENTRY_ID = "onboarding"

STORAGE_KEY_ACCOUNTS = "accounts"
STORAGE_KEY_DEPARTMENTS = "departments"
STORAGE_KEY_EMPLOYEES = "employees"
STORAGE_KEY_TRANSFERS = "transfers"
STORAGE_KEY_REQUESTS = "requests"
