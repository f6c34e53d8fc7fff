"""Fieldcheck — field-by-field validation for a personal details form.

A rule table maps each form field to its rule; the dispatcher runs one
field, the aggregator runs them all. Values are read from whatever
source the caller passes in, and results are plain messages.

Basic usage::

    from fieldcheck import validate_all_fields, validate_field

    result = validate_field("postal-code", {"postal-code": "SW1A 1AA", "country": "United Kingdom"})
    assert result.is_valid

    form = validate_all_fields(submitted)
    if not form:
        for field_id, message in form.errors.items():
            ...
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "ContractViolation",
    "FieldResult",
    "FieldSource",
    "FieldcheckError",
    "FormResult",
    "MappingSource",
    "UnknownFieldError",
    "ValidationConfig",
    "validate_all_fields",
    "validate_field",
    "validate_on_change",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fieldcheck`` fast while providing a clean top-level API.
    """
    if name in ("validate_field", "validate_all_fields", "validate_on_change"):
        from fieldcheck.validation import dispatch

        return getattr(dispatch, name)

    if name in ("FieldResult", "FormResult"):
        from fieldcheck.validation import result

        return getattr(result, name)

    if name in ("FieldSource", "MappingSource"):
        from fieldcheck import sources

        return getattr(sources, name)

    if name == "ValidationConfig":
        from fieldcheck.config import ValidationConfig

        return ValidationConfig

    if name in ("FieldcheckError", "ConfigurationError", "ContractViolation", "UnknownFieldError"):
        from fieldcheck import errors

        return getattr(errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
