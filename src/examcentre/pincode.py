"""Indian PIN code validation."""

import re

_PINCODE_RE = re.compile(r"[0-9]{6}")


def validate(raw: str) -> bool:
    """
    Return True if *raw* is exactly six ASCII digits.

    No whitespace is stripped; callers trim user input themselves.
    """
    if not isinstance(raw, str):
        return False
    return _PINCODE_RE.fullmatch(raw) is not None
