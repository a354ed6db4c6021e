from __future__ import annotations

import math
import re

from domain.models import FormFields

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")
MAX_AGE = 2**32 - 1
# plain ASCII decimal with optional exponent; no underscores or non-ASCII digits
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_age(text: str) -> int:
    """Unsigned 32-bit integer years; anything else counts as 0."""
    t = (text or "").strip()
    if not _UNSIGNED_INT.fullmatch(t):
        return 0
    value = int(t)
    return value if value <= MAX_AGE else 0


def parse_amount(text: str) -> float:
    """Finite ASCII decimal; anything else counts as 0.0."""
    t = (text or "").strip()
    if not _DECIMAL.fullmatch(t):
        return 0.0
    value = float(t)
    return value if math.isfinite(value) else 0.0


def extract_features(fields: FormFields) -> dict:
    """
    Numeric view of the form at submission time.
    Malformed numbers are tolerated and become zero.
    """
    return {
        "age": parse_age(fields.age),
        "income": parse_amount(fields.income),
        "mortgage": parse_amount(fields.mortgage),
    }
