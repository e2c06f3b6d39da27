"""Cron expression validation.

Accepted field syntax:
    - * (any value)
    - 5, jan, MON (single value, names for month and day of week only)
    - 1-5, mon-fri (range, ascending)
    - */15, 8/2, 9-17/2 (step)
    - 1,15,*/20 (comma separated list of any of the above)

Examples of rejected fields:
    - 1/* (step must be a positive integer)
    - 5-* (range ends must be values)
    - fri-4 (descending range, FRI resolves to 5)
    - 1,2, (trailing comma)
"""

import logging

from crontext.constants import SPECIAL_FIELDS
from crontext.fields import FIELD_SPECS, FieldKind, FieldSpec, get_field_kind, is_int

logger = logging.getLogger(__name__)


def validate_cron(expression: str) -> bool:
    """Check whether an expression is a valid cron expression.

    Args:
        expression: Five whitespace separated fields, or one special token

    Returns:
        True if the expression is valid, False otherwise. Never raises.
    """
    if not isinstance(expression, str) or not expression.strip():
        logger.debug("Rejected empty cron expression")
        return False

    parts = expression.split()

    if parts[0] in SPECIAL_FIELDS:
        if len(parts) == 1:
            return True
        logger.debug("Rejected '%s': special token must stand alone", expression)
        return False

    if len(parts) != 5:
        logger.debug("Rejected '%s': expected 5 fields, got %d", expression, len(parts))
        return False

    for index, part in enumerate(parts):
        kind = get_field_kind(index)
        if not validate_field(part, kind):
            logger.debug("Rejected '%s': invalid %s field '%s'", expression, kind.value, part)
            return False

    return True


def validate_field(token: str, kind: FieldKind) -> bool:
    """Check one field of a cron expression.

    Args:
        token: Field text (e.g., "*/5", "1-10", "mon,wed,fri")
        kind: Which field the token occupies

    Returns:
        True if every comma separated part of the token is valid
    """
    if token == "*":
        return True

    spec = FIELD_SPECS[kind]

    for part in token.split(","):
        if "/" in part:
            valid = _validate_step(part, spec)
        elif "-" in part:
            valid = _validate_range(part, spec)
        else:
            valid = _validate_single(part, spec)

        if not valid:
            return False

    return True


def _validate_step(part: str, spec: FieldSpec) -> bool:
    # */n, a-b/n, x/n
    pieces = part.split("/")
    if len(pieces) != 2:
        return False

    base, step = pieces
    if not base or not step:
        return False

    # Named divisors are tolerated for month and day of week
    step_ok = (is_int(step) and int(step) > 0) or spec.resolve_name(step) is not None
    if not step_ok:
        return False

    if base == "*":
        return True

    if "-" in base:
        return _validate_range(base, spec)

    return _validate_single(base, spec)


def _validate_range(part: str, spec: FieldSpec) -> bool:
    pieces = part.split("-")
    if len(pieces) != 2:
        return False

    first, second = pieces
    if not first or not second:
        return False

    start = spec.resolve_position(first)
    end = spec.resolve_position(second)
    if start is None or end is None:
        return False

    return start >= spec.minimum and end <= spec.maximum and end >= start


def _validate_single(part: str, spec: FieldSpec) -> bool:
    if not part:
        return False

    if part == "*":
        return True

    if is_int(part):
        return spec.in_range(int(part))

    return spec.resolve_name(part) is not None
