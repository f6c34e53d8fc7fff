"""Field value sources — where the validator reads current field values.

A *source* is anything that can answer "what is in field X right now":
a dict of submitted values, any other mapping, or a lookup into a UI
toolkit. The dispatcher only ever reads through this protocol, so tests
pass a fake source explicitly instead of patching a global lookup.

Sources must tolerate missing fields: an absent text field reads as
``""`` and an absent checkbox reads as unchecked.
"""

from collections.abc import Callable, Mapping
from typing import Protocol, TypeAlias, runtime_checkable

# A raw value as held by a form: text, a checkbox state, or nothing yet
RawValue: TypeAlias = str | bool | None

# Submitted checkbox values that count as "checked"
_CHECKED_VALUES = frozenset({"on", "true", "1", "yes"})


@runtime_checkable
class FieldSource(Protocol):
    """Read access to a form's current field values."""

    def value(self, field_id: str) -> str: ...

    def checked(self, field_id: str) -> bool: ...


def _as_text(raw: RawValue) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    return str(raw)


def _as_checked(raw: RawValue) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        return raw.strip().lower() in _CHECKED_VALUES
    return False


class MappingSource:
    """A ``FieldSource`` over any mapping of field ids to raw values.

    Works with a plain ``dict`` or any read-only mapping::

        source = MappingSource({"email": "a@b.c", "terms": True})
        source.value("email")    # "a@b.c"
        source.value("phone")    # ""
        source.checked("terms")  # True
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, RawValue]) -> None:
        self._data = data

    def value(self, field_id: str) -> str:
        return _as_text(self._data.get(field_id))

    def checked(self, field_id: str) -> bool:
        return _as_checked(self._data.get(field_id))

    def __repr__(self) -> str:
        return f"MappingSource({dict(self._data)!r})"


class CallableSource:
    """A ``FieldSource`` over a ``get(field_id)`` lookup function.

    The lookup returns the raw value, or ``None`` for a missing field.
    """

    __slots__ = ("_lookup",)

    def __init__(self, lookup: Callable[[str], RawValue]) -> None:
        self._lookup = lookup

    def value(self, field_id: str) -> str:
        return _as_text(self._lookup(field_id))

    def checked(self, field_id: str) -> bool:
        return _as_checked(self._lookup(field_id))


def as_source(data: FieldSource | Mapping[str, RawValue]) -> FieldSource:
    """Return *data* as a ``FieldSource``, wrapping plain mappings."""
    if isinstance(data, FieldSource):
        return data
    return MappingSource(data)
