"""Field dispatcher and form aggregator.

``validate_field`` looks a field up in ``FIELD_RULES``, reads its current
value (plus the value of any field it depends on) from the injected
source, and runs the rule. ``validate_all_fields`` does that for every
field in ``FIELD_ORDER`` and ANDs the results.

Neither touches presentation state: callers render ``result.message``
and toggle styling from ``result.is_invalid`` themselves.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import TypeAlias

from fieldcheck.config import DEFAULT_CONFIG, ValidationConfig
from fieldcheck.errors import UnknownFieldError
from fieldcheck.sources import FieldSource, RawValue, as_source
from fieldcheck.validation.result import FieldResult, FormResult
from fieldcheck.validation.table import FIELD_ORDER, dependents_of, get_rule

logger = logging.getLogger("fieldcheck.validation")

SourceLike: TypeAlias = FieldSource | Mapping[str, RawValue]


def _check_field(
    field_id: str,
    source: FieldSource,
    config: ValidationConfig,
) -> FieldResult:
    rule = get_rule(field_id)
    if rule is None:
        if config.strict_fields:
            raise UnknownFieldError(field_id)
        logger.debug("No rule for field %r; treating as valid", field_id)
        return FieldResult(field_id)

    value = source.checked(field_id) if rule.reads_checked else source.value(field_id)
    dependency = source.value(rule.depends_on) if rule.depends_on else ""

    message = rule.check(value, dependency, config)
    if message:
        logger.debug("Field %r failed %s rule: %s", field_id, rule.kind, message)
    return FieldResult(field_id, message)


def validate_field(
    field_id: str,
    source: SourceLike,
    *,
    config: ValidationConfig | None = None,
) -> FieldResult:
    """Validate a single field by id.

    Args:
        field_id: The form field to validate, e.g. ``"postal-code"``.
        source: Where current values are read from: a ``FieldSource``
            or any mapping of field ids to raw values. Missing fields
            read as blank / unchecked.
        config: Optional ``ValidationConfig``.

    Returns:
        A ``FieldResult``; ``message`` is ``""`` when the field is valid.
        Unknown field ids are valid unless ``config.strict_fields`` is set.

    Raises:
        UnknownFieldError: If the id has no rule and ``strict_fields`` is on.

    Example::

        result = validate_field("phone", {"phone": "07123-45678"})
        # result.message == "Invalid phone number format. Use 07123-456789."
    """
    return _check_field(field_id, as_source(source), config or DEFAULT_CONFIG)


def validate_fields(
    field_ids: Iterable[str],
    source: SourceLike,
    *,
    config: ValidationConfig | None = None,
) -> FormResult:
    """Validate the given fields in order and combine the results."""
    src = as_source(source)
    cfg = config or DEFAULT_CONFIG
    return FormResult.from_results([_check_field(fid, src, cfg) for fid in field_ids])


def validate_on_change(
    field_id: str,
    source: SourceLike,
    *,
    config: ValidationConfig | None = None,
) -> FormResult:
    """Validate a field that just changed, then every field depending on it.

    A change to ``country`` re-checks ``postal-code`` as well, since the
    accepted postal code format follows the selected country.
    """
    return validate_fields((field_id, *dependents_of(field_id)), source, config=config)


def validate_all_fields(
    source: SourceLike,
    *,
    config: ValidationConfig | None = None,
) -> FormResult:
    """Validate the whole form.

    Every field in ``FIELD_ORDER`` is checked, in that order, even after a
    failure, so the caller can update every field's state in one pass.
    The result is falsy when any field is invalid::

        result = validate_all_fields(form)
        if not result:
            return render(errors=result.errors)
    """
    result = validate_fields(FIELD_ORDER, source, config=config)
    logger.debug(
        "Validated %d fields: %s",
        len(result.per_field),
        "all valid" if result.all_valid else f"failing {', '.join(result.failing)}",
    )
    return result
