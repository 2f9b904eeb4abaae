"""Sequential, human readable identifiers such as ``EMP001`` or ``REQ012``."""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.constants import ID_DIGITS


def format_id(prefix: str, number: int) -> str:
    return f"{prefix}{str(number).zfill(ID_DIGITS)}"


def parse_suffix(prefix: str, identifier: str) -> Optional[int]:
    if not identifier or not identifier.startswith(prefix):
        return None
    digits = identifier[len(prefix):]
    return int(digits) if digits.isdigit() else None


def next_id_max_suffix(prefix: str, identifiers: Iterable[str]) -> str:
    """Scan every identifier and increment the largest numeric suffix.

    Safe under any deletion order since all records are inspected.
    """

    highest = 0
    for identifier in identifiers:
        n = parse_suffix(prefix, identifier)
        if n is not None and n > highest:
            highest = n
    return format_id(prefix, highest + 1)


def next_id_last_element(prefix: str, identifiers: Sequence[str]) -> str:
    """Increment the suffix of the last identifier only.

    Known fragility: if the list is not in numeric order, or the highest record
    was deleted, this can hand out an identifier that already exists. Services
    use :func:`next_id_max_suffix` instead.
    """

    if not identifiers:
        return format_id(prefix, 1)
    n = parse_suffix(prefix, identifiers[-1]) or 0
    return format_id(prefix, n + 1)
