"""Identifier Validation — pure guard for caller-supplied client ids.

Invariants:
    - A valid id is exactly 24 hexadecimal characters, case-insensitive
    - Pure and total: any input (including non-str) yields a bool, never raises
"""

import re

_OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


def is_valid_object_id(value: object) -> bool:
    """Check whether value has the 24-char hex identifier shape."""
    if not isinstance(value, str):
        return False
    return _OBJECT_ID_PATTERN.fullmatch(value) is not None
