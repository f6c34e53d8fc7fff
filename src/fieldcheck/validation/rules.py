"""Primitive validation rules for fieldcheck forms.

Each rule takes concrete values and returns a message string::

    def rule(value: str) -> str:
        '''Return an error message, or "" if valid.'''

The empty string is reserved for "valid"; every failure message is
non-empty. Rules never raise for bad user input. They raise
``ContractViolation`` only when called with arguments of the wrong type.

``validate_required`` is the exception to the message protocol: it
returns a plain ``bool`` and is the presence check the other rules
build on.
"""

import re
from collections.abc import Mapping
from datetime import date
from types import MappingProxyType

from fieldcheck.errors import ContractViolation

# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def validate_required(value: object) -> bool:
    """True when *value* is a string with non-whitespace content."""
    return isinstance(value, str) and bool(value.strip())


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


def _is_int(value: object) -> bool:
    # bool is an int subclass, but True/False are never length bounds
    return isinstance(value, int) and not isinstance(value, bool)


def validate_text(value: str, min_len: int, max_len: int, required: bool) -> str:
    """Free text with inclusive length bounds.

    Length is measured on the untrimmed value, but only checked when the
    trimmed value is non-empty: an optional blank field is valid whatever
    the bounds.

    Raises:
        ContractViolation: If the arguments are not exactly
            ``(str, int, int, bool)``.
    """
    if not (
        isinstance(value, str)
        and _is_int(min_len)
        and _is_int(max_len)
        and isinstance(required, bool)
    ):
        msg = (
            "validate_text expects (str, int, int, bool), got "
            f"({type(value).__name__}, {type(min_len).__name__}, "
            f"{type(max_len).__name__}, {type(required).__name__})"
        )
        raise ContractViolation(msg)

    if required and not value.strip():
        return "This field is required."
    if value.strip() and not min_len <= len(value) <= max_len:
        return f"Must be {min_len}-{max_len} characters."
    return ""


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Structure only: local@domain.tld with no whitespace. No deliverability check.
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def validate_email(value: str) -> str:
    """Value must look like ``local@domain.tld``."""
    if not validate_required(value):
        return "Email is required."
    if not _EMAIL_RE.fullmatch(value):
        return "Invalid email format."
    return ""


# Five digits, hyphen, six digits (07123-456789)
_PHONE_RE = re.compile(r"[0-9]{5}-[0-9]{6}")


def validate_phone(value: str) -> str:
    """Value must be a phone number in ``07123-456789`` form."""
    if not validate_required(value):
        return "Phone number is required."
    if not _PHONE_RE.fullmatch(value):
        return "Invalid phone number format. Use 07123-456789."
    return ""


# ---------------------------------------------------------------------------
# Date of birth
# ---------------------------------------------------------------------------

_INVALID_DOB = "Please enter a valid date of birth."

# Extended calendar form only; fromisoformat alone also takes 19900515 and 1990-W20-2
_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def validate_date_of_birth(
    value: str,
    *,
    today: date | None = None,
    max_age: int = 120,
) -> str:
    """Value must be an ISO date (``YYYY-MM-DD``) in a plausible range.

    The date may not be after *today*, and the age, counted as the
    difference of calendar years, must lie in ``0..max_age``. A value
    that does not parse as a date gets the same message as an
    out-of-range one.

    Args:
        value: The raw field value.
        today: Reference date. Defaults to the current local date.
        max_age: Oldest accepted age in years.
    """
    if not validate_required(value):
        return "Date of birth is required."
    text = value.strip()
    if not _ISO_DATE_RE.fullmatch(text):
        return _INVALID_DOB
    try:
        dob = date.fromisoformat(text)
    except ValueError:
        return _INVALID_DOB

    if today is None:
        today = date.today()
    if dob > today:
        return "Date of birth cannot be in the future."

    age = today.year - dob.year
    if age < 0 or age > max_age:
        return _INVALID_DOB
    return ""


# ---------------------------------------------------------------------------
# Postal code
# ---------------------------------------------------------------------------

POSTAL_CODE_PATTERNS: Mapping[str, re.Pattern[str]] = MappingProxyType({
    "United States": re.compile(r"[0-9]{5}(-[0-9]{4})?"),
    "United Kingdom": re.compile(r"[A-Z]{1,2}[0-9][A-Z0-9]? ?[0-9][A-Z]{2}"),
})

# Any country without its own pattern
DEFAULT_POSTAL_CODE_PATTERN = re.compile(r"[A-Za-z0-9\s\-]{3,10}")


def validate_postal_code(value: str, country: str) -> str:
    """Value must be a postal code in the format used by *country*.

    The country is matched by exact name; unknown countries fall back to
    a permissive 3-10 character pattern.
    """
    if not validate_required(value):
        return "Postal/Zip code is required."
    pattern = POSTAL_CODE_PATTERNS.get(country, DEFAULT_POSTAL_CODE_PATTERN)
    if not pattern.fullmatch(value):
        return f"Invalid postal code for {country}."
    return ""
