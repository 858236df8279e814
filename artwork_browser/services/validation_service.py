"""Validation logic for user-entered values."""

from __future__ import annotations

import re
from typing import Tuple

from artwork_browser.config import MAX_BULK_SELECT
from artwork_browser.errors import InvalidInput
from artwork_browser.utils.helpers import normalize_text

WHOLE_NUMBER_PATTERN = re.compile(r"^\+?\d+$")


def validate_row_count(value: object, max_rows: int = MAX_BULK_SELECT) -> Tuple[bool, str, int]:
    """Validate the bulk-select row count and return it as an int."""
    if isinstance(value, bool):
        return False, "Enter the number of rows to select.", 0
    if isinstance(value, int):
        raw_value = str(value)
    else:
        raw_value = normalize_text(value).replace(",", "").replace("_", "")

    if not raw_value:
        return False, "Enter the number of rows to select.", 0

    if raw_value.startswith("-") and WHOLE_NUMBER_PATTERN.fullmatch(raw_value[1:]):
        return False, "Number of rows cannot be negative.", 0

    if not WHOLE_NUMBER_PATTERN.fullmatch(raw_value):
        return False, "Number of rows must be a whole number.", 0

    count = int(raw_value)
    if count > max_rows:
        return False, f"Number of rows cannot exceed {max_rows}.", 0

    return True, "", count


def require_row_count(value: object, max_rows: int = MAX_BULK_SELECT) -> int:
    """Return the validated row count or raise InvalidInput."""
    valid, error_message, count = validate_row_count(value, max_rows=max_rows)
    if not valid:
        raise InvalidInput(error_message, value)
    return count
