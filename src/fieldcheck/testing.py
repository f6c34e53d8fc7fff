"""Test helpers for fieldcheck validation.

Validation reads field values through an injected source, so tests build
a ``FakeSource`` from literal values and pass it in explicitly. Nothing
global is patched, so nothing needs restoring afterwards.

Usage::

    record = valid_record()
    record["country"] = "United Kingdom"  # postal code is a US ZIP
    assert_invalid(validate_all_fields(FakeSource(record)))
"""

import logging
import traceback
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from fieldcheck.sources import MappingSource, RawValue
from fieldcheck.validation.result import FieldResult, FormResult

logger = logging.getLogger("fieldcheck.testing")

AnyResult: TypeAlias = FieldResult | FormResult | str


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


class FakeSource(MappingSource):
    """A field source over literal values.

    Accepts a mapping, keyword arguments, or both (keywords win). Keyword
    names use underscores in place of hyphens::

        FakeSource(first_name="Ada", terms=True).value("first-name")  # "Ada"
    """

    def __init__(self, data: Mapping[str, RawValue] | None = None, **fields: RawValue) -> None:
        merged = dict(data or {})
        merged.update({name.replace("_", "-"): value for name, value in fields.items()})
        super().__init__(merged)


def valid_record() -> dict[str, RawValue]:
    """A complete, valid set of form values. A fresh dict on every call."""
    return {
        "first-name": "Alfred",
        "last-name": "Osagiede",
        "gender": "Male",
        "date-of-birth": "1990-05-15",
        "address-line-1": "123 Main St",
        "city": "London",
        "postal-code": "AB12 3CD",
        "country": "United Kingdom",
        "email": "alf.osa@example.com",
        "phone": "07123-456789",
        "terms": True,
    }


# ---------------------------------------------------------------------------
# Assertion helpers
# ---------------------------------------------------------------------------


def _message_of(result: AnyResult) -> str:
    if isinstance(result, FieldResult):
        return result.message
    if isinstance(result, FormResult):
        return "; ".join(f"{fid}: {msg}" for fid, msg in result.errors.items())
    return result


def assert_valid(result: AnyResult) -> None:
    """Assert a field result, form result, or raw rule message is valid."""
    message = _message_of(result)
    assert not message, f"Expected valid, got: {message}"


def assert_invalid(result: AnyResult, message: str | None = None) -> None:
    """Assert the result is invalid, optionally with an exact *message*.

    For a ``FormResult``, *message* must be the message of one of the
    failing fields.
    """
    actual = _message_of(result)
    assert actual, "Expected invalid, got a valid result"
    if message is None:
        return
    if isinstance(result, FormResult):
        assert message in result.errors.values(), (
            f"No failing field has message {message!r}.\nErrors: {result.errors}"
        )
    else:
        assert actual == message, f"Expected {message!r}, got {actual!r}"


# ---------------------------------------------------------------------------
# Check runner
# ---------------------------------------------------------------------------


class CheckStatus(Enum):
    """How a single check ended."""

    PASSED = "pass"
    FAILED = "fail"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """The result of running one named check."""

    message: str
    status: CheckStatus
    detail: str = ""

    @property
    def passed(self) -> bool:
        return self.status is CheckStatus.PASSED


def check(message: str, assertion: Callable[[], object]) -> CheckOutcome:
    """Run *assertion* and report how it went, without raising.

    A truthy return passes; a falsy return or a failed ``assert`` fails.
    Any other exception is reported as an error with its text, so one
    broken check never stops the rest.
    """
    try:
        ok = assertion()
    except AssertionError as exc:
        outcome = CheckOutcome(message, CheckStatus.FAILED, str(exc))
    except Exception as exc:
        detail = "".join(traceback.format_exception_only(exc)).strip()
        outcome = CheckOutcome(message, CheckStatus.ERROR, detail)
    else:
        status = CheckStatus.PASSED if ok else CheckStatus.FAILED
        outcome = CheckOutcome(message, status)

    if outcome.status is CheckStatus.ERROR:
        logger.error("Error: %s %s", message, outcome.detail)
    else:
        logger.info("%s: %s", "Pass" if outcome.passed else "Fail", message)
    return outcome


def run_checks(checks: Iterable[tuple[str, Callable[[], object]]]) -> list[CheckOutcome]:
    """Run every ``(message, assertion)`` pair in order."""
    return [check(message, assertion) for message, assertion in checks]
