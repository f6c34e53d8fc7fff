"""Form validation — a rule per field, one message per failure.

Usage::

    from fieldcheck.validation import validate_all_fields, validate_field

    def on_blur(field_id: str, form: Mapping[str, str]) -> None:
        result = validate_field(field_id, form)
        show(field_id, result.message, invalid=result.is_invalid)

    def on_submit(form: Mapping[str, str]) -> bool:
        result = validate_all_fields(form)
        if not result:
            # result.errors == {"email": "Invalid email format."}
            ...
        return result.all_valid
"""

from fieldcheck.validation.dispatch import (
    validate_all_fields,
    validate_field,
    validate_fields,
    validate_on_change,
)
from fieldcheck.validation.result import FieldResult, FormResult
from fieldcheck.validation.rules import (
    POSTAL_CODE_PATTERNS,
    validate_date_of_birth,
    validate_email,
    validate_phone,
    validate_postal_code,
    validate_required,
    validate_text,
)
from fieldcheck.validation.table import (
    FIELD_ORDER,
    FIELD_RULES,
    FieldRule,
    dependents_of,
)

__all__ = [
    "FIELD_ORDER",
    "FIELD_RULES",
    "POSTAL_CODE_PATTERNS",
    "FieldResult",
    "FieldRule",
    "FormResult",
    "dependents_of",
    "validate_all_fields",
    "validate_date_of_birth",
    "validate_email",
    "validate_field",
    "validate_fields",
    "validate_on_change",
    "validate_phone",
    "validate_postal_code",
    "validate_required",
    "validate_text",
]
