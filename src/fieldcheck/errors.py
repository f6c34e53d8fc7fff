"""Fieldcheck exception hierarchy.

Shared across the rules, the dispatcher, and the form parser so every
module raises and catches the same types.

Validation *failures* are never exceptions: they are plain message
strings. The types here signal caller bugs and setup problems.
"""


class FieldcheckError(Exception):
    """Base for all fieldcheck-specific errors."""


class ConfigurationError(FieldcheckError):
    """Raised when validation configuration is invalid.

    Typically raised by ``ValidationConfig.__post_init__``.
    """


class ContractViolation(FieldcheckError, TypeError):  # noqa: N818
    """A primitive validator was called with arguments of the wrong type.

    Indicates a bug in the caller, not bad user input, so it is never
    turned into a validation message.
    """


class UnknownFieldError(FieldcheckError, LookupError):
    """No rule is registered for the requested field id.

    Only raised when ``ValidationConfig.strict_fields`` is enabled.
    """

    def __init__(self, field_id: str) -> None:
        self.field_id = field_id
        super().__init__(f"No validation rule for field {field_id!r}")
