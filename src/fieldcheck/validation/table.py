"""Field rule table — which rule applies to which form field.

Dispatch is data, not control flow: ``FIELD_RULES`` maps every field id
to a ``FieldRule`` descriptor carrying the rule callable and its fixed
parameters. Adding a field means adding an entry here.

Rule descriptors are built by small factories, in the same shape as the
primitive rules::

    FIELD_RULES = {
        "city": text_rule(2, 100, required=True),
        "postal-code": postal_code_rule(depends_on="country"),
    }

Every ``check`` has the signature ``(value, dependency, config) -> str``.
``dependency`` is the current value of the ``depends_on`` field, or
``""`` for rules without one.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeAlias

from fieldcheck.config import ValidationConfig
from fieldcheck.validation.rules import (
    validate_date_of_birth,
    validate_email,
    validate_phone,
    validate_postal_code,
    validate_required,
    validate_text,
)

Check: TypeAlias = Callable[[str | bool, str, ValidationConfig], str]


@dataclass(frozen=True, slots=True)
class FieldRule:
    """A rule bound to its fixed parameters for one field.

    ``reads_checked`` rules are fed the field's checked state (a bool)
    instead of its text value. ``min_len``, ``max_len`` and ``required``
    are set only on ``"text"`` rules and stay None elsewhere.
    """

    kind: str
    check: Check
    reads_checked: bool = False
    depends_on: str | None = None
    min_len: int | None = None
    max_len: int | None = None
    required: bool | None = None
    message: str = ""


# ---------------------------------------------------------------------------
# Rule factories
# ---------------------------------------------------------------------------


def text_rule(min_len: int, max_len: int, *, required: bool) -> FieldRule:
    """Free text within ``min_len..max_len`` characters."""

    def check(value: str | bool, dependency: str, config: ValidationConfig) -> str:
        return validate_text(value, min_len, max_len, required)  # type: ignore[arg-type]

    return FieldRule(
        kind="text",
        check=check,
        min_len=min_len,
        max_len=max_len,
        required=required,
    )


def required_rule(message: str) -> FieldRule:
    """A selection that must not be blank."""

    def check(value: str | bool, dependency: str, config: ValidationConfig) -> str:
        return "" if validate_required(value) else message

    return FieldRule(kind="required", check=check, message=message)


def checked_rule(message: str) -> FieldRule:
    """A checkbox that must be ticked."""

    def check(value: str | bool, dependency: str, config: ValidationConfig) -> str:
        return "" if value is True else message

    return FieldRule(kind="checked", check=check, reads_checked=True, message=message)


def _email(value: str | bool, dependency: str, config: ValidationConfig) -> str:
    return validate_email(value)  # type: ignore[arg-type]


def _phone(value: str | bool, dependency: str, config: ValidationConfig) -> str:
    return validate_phone(value)  # type: ignore[arg-type]


def _date_of_birth(value: str | bool, dependency: str, config: ValidationConfig) -> str:
    return validate_date_of_birth(
        value,  # type: ignore[arg-type]
        today=config.today,
        max_age=config.max_age,
    )


def _postal_code(value: str | bool, dependency: str, config: ValidationConfig) -> str:
    return validate_postal_code(value, dependency)  # type: ignore[arg-type]


EMAIL_RULE = FieldRule(kind="email", check=_email)
PHONE_RULE = FieldRule(kind="phone", check=_phone)
DATE_OF_BIRTH_RULE = FieldRule(kind="date_of_birth", check=_date_of_birth)


def postal_code_rule(*, depends_on: str) -> FieldRule:
    """Postal code whose format is chosen by the *depends_on* field."""
    return FieldRule(kind="postal_code", check=_postal_code, depends_on=depends_on)


# ---------------------------------------------------------------------------
# The form
# ---------------------------------------------------------------------------

FIELD_RULES: Mapping[str, FieldRule] = MappingProxyType({
    "first-name": text_rule(2, 50, required=True),
    "last-name": text_rule(2, 50, required=False),
    "gender": required_rule("Gender is required."),
    "date-of-birth": DATE_OF_BIRTH_RULE,
    "address-line-1": text_rule(2, 100, required=True),
    "city": text_rule(2, 100, required=True),
    "postal-code": postal_code_rule(depends_on="country"),
    "country": required_rule("Country is required."),
    "email": EMAIL_RULE,
    "phone": PHONE_RULE,
    "terms": checked_rule("You must accept the terms and conditions."),
})

# Validation order for the whole form
FIELD_ORDER: tuple[str, ...] = tuple(FIELD_RULES)


def get_rule(field_id: str) -> FieldRule | None:
    """Return the rule for *field_id*, or None if the field is unknown."""
    return FIELD_RULES.get(field_id)


def dependents_of(field_id: str) -> tuple[str, ...]:
    """Ids of the fields whose rule reads *field_id* as a dependency.

    When ``country`` changes, ``postal-code`` must be re-validated::

        dependents_of("country")  # ("postal-code",)
    """
    return tuple(
        fid for fid in FIELD_ORDER if FIELD_RULES[fid].depends_on == field_id
    )
