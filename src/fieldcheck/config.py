"""Validation configuration.

ValidationConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from datetime import date

from fieldcheck.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Validation configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidationConfig(strict_fields=True, today=date(2024, 1, 1))
    """

    # Raise UnknownFieldError instead of treating unknown ids as valid
    strict_fields: bool = False

    # Date of birth
    max_age: int = 120
    today: date | None = None  # None = current local date at call time

    def __post_init__(self) -> None:
        if self.max_age < 0:
            msg = f"max_age must be non-negative, got {self.max_age}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = ValidationConfig()
