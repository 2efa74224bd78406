"""
Validators shared by every entity.

Each function takes untrusted input (path params, JSON values, query strings)
and returns a clean value or raises InvalidInput. No side effects.
"""
import re
from typing import Any
from urllib.parse import urlparse

from app.core.exceptions import InvalidInput

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Largest value an INTEGER column holds (signed 64-bit)
MAX_INT = 2**63 - 1


def _parse_int(raw: Any, label: str) -> int:
    if isinstance(raw, bool) or raw is None:
        raise InvalidInput(f"{label} must be a valid integer")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            raise InvalidInput(f"{label} must be a valid integer")
        value = int(raw)
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            raise InvalidInput(f"{label} must be a valid integer") from None
    if abs(value) > MAX_INT:
        raise InvalidInput(f"{label} is out of range")
    return value


def validate_id(raw: Any) -> int:
    value = _parse_int(raw, "ID")
    if value < 0:
        raise InvalidInput("ID can not be negative")
    return value


def validate_quantity(raw: Any) -> int:
    """Zero is allowed here; callers decide whether it means "remove"."""
    value = _parse_int(raw, "Quantity")
    if value < 0:
        raise InvalidInput("Quantity cannot be negative")
    return value


def validate_rating(raw: Any) -> int:
    value = _parse_int(raw, "Rating")
    if value < 1 or value > 5:
        raise InvalidInput("Rating must be between 1 and 5")
    return value


def validate_email(raw: Any) -> str:
    if not isinstance(raw, str) or not EMAIL_RE.match(raw):
        raise InvalidInput("Invalid email format")
    return raw


def validate_non_negative(raw: Any, field: str) -> float:
    if isinstance(raw, bool) or raw is None:
        raise InvalidInput(f"{field} must be a valid number")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InvalidInput(f"{field} must be a valid number") from None
    if value != value:  # NaN
        raise InvalidInput(f"{field} must be a valid number")
    if value < 0:
        raise InvalidInput(f"{field} can not be a negative number")
    return value


def validate_url(raw: Any) -> str:
    if not isinstance(raw, str):
        raise InvalidInput("Invalid image URL format")
    parsed = urlparse(raw)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidInput("Invalid image URL format")
    return raw
