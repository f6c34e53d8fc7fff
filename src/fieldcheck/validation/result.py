"""Validation results — immutable per-field and whole-form outcomes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class FieldResult:
    """The outcome of validating a single field.

    ``message`` is ``""`` when the field is valid, otherwise the
    user-facing error text. The result is falsy when invalid::

        result = validate_field("email", source)
        if not result:
            show_error(result.field_id, result.message)
    """

    field_id: str
    message: str = ""

    @property
    def is_valid(self) -> bool:
        """True if the field passed its rule."""
        return not self.message

    @property
    def is_invalid(self) -> bool:
        """True if the field failed; drives invalid-state styling."""
        return bool(self.message)

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid


@dataclass(frozen=True, slots=True)
class FormResult:
    """The outcome of validating every field of the form.

    ``per_field`` maps field ids to their ``FieldResult`` in validation
    order. ``all_valid`` is the logical AND over those results.
    """

    all_valid: bool
    per_field: Mapping[str, FieldResult]

    @classmethod
    def from_results(cls, results: list[FieldResult]) -> FormResult:
        """Build a form result from per-field results, preserving order."""
        per_field = {r.field_id: r for r in results}
        return cls(
            all_valid=all(r.is_valid for r in results),
            per_field=MappingProxyType(per_field),
        )

    @property
    def failing(self) -> tuple[str, ...]:
        """Ids of the fields that failed, in validation order."""
        return tuple(fid for fid, r in self.per_field.items() if r.is_invalid)

    @property
    def errors(self) -> dict[str, str]:
        """Field id → message for every failing field::

            {"first-name": "This field is required."}
        """
        return {fid: r.message for fid, r in self.per_field.items() if r.is_invalid}

    def __bool__(self) -> bool:
        """Falsy when any field is invalid."""
        return self.all_valid
