from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"\D")
_LEADING_ZEROS = re.compile(r"^0+")


def normalize_phone(value: str | int | None) -> str:
    # Digits first, then zeros: sheets drop the leading zero of numeric cells.
    digits = _NON_DIGITS.sub("", str(value or ""))
    return _LEADING_ZEROS.sub("", digits)
