"""Cron expression decoder.

Turns a cron expression into an English sentence describing when it fires.
Each field is parsed into a ``FieldDescription`` and the five descriptions
are rendered by ``Formatter``.

Examples:
    "* * * * *"       - At every minute.
    "*/12 * * * *"    - At every 12th minute.
    "5 4 * * sun"     - At 04:05, on Sunday.
    "0 0,12 1 */2 *"  - At minute 0 past hour 0, and 12, in every 2nd month, on the 1st.
"""

import logging

from crontext.constants import SPECIAL_FIELD_TRANSLATIONS, SPECIAL_FIELDS
from crontext.exceptions import InvalidExpressionError
from crontext.fields import FIELD_SPECS, FieldKind, FieldSpec, get_field_kind, is_int
from crontext.formatter import Formatter
from crontext.models import FieldDescription, FieldTag, ParsedValue

logger = logging.getLogger(__name__)


def decode_field(token: str, kind: FieldKind) -> FieldDescription:
    """Decode one field token into its description.

    Args:
        token: Field text (e.g., "*/5", "1-10", "mon,wed,fri")
        kind: Which field the token occupies

    Returns:
        FieldDescription for the token

    Raises:
        InvalidExpressionError: If the token is not valid for the field
    """
    if token == "*":
        return FieldDescription(FieldTag.ANY)

    spec = FIELD_SPECS[kind]
    parts = token.split(",")
    descriptions = [_decode_part(part, spec, token) for part in parts]

    if len(descriptions) == 1:
        return descriptions[0]

    values: list[ParsedValue] = []
    for description in descriptions:
        if description.tag is FieldTag.EVERY:
            # */n contributes no values of its own, keep its phrase in the list
            values.append(ParsedValue(None, Formatter.field_phrase(description, spec)))
        else:
            values.extend(description.values)

    tag = FieldTag.ANY_WITH_SPECIFIC if "*" in parts else FieldTag.SPECIFIC
    return FieldDescription(tag, tuple(values))


def _decode_part(part: str, spec: FieldSpec, token: str) -> FieldDescription:
    if "/" in part:
        return _decode_step(part, spec, token)
    if "-" in part:
        return _decode_range(part, spec, token)
    if part == "*":
        return FieldDescription(FieldTag.ANY, (_wildcard(spec),))
    return FieldDescription(FieldTag.SPECIFIC, (_resolve(part, spec, token),))


def _decode_step(part: str, spec: FieldSpec, token: str) -> FieldDescription:
    base, step_text = _split_pair(part, "/", token)
    step = _resolve_step(step_text, spec, token)

    if base == "*":
        return FieldDescription(FieldTag.EVERY, step=step)

    if "-" in base:
        described = _decode_range(base, spec, token)
        return FieldDescription(FieldTag.RANGE_STEP, described.values, step)

    return FieldDescription(FieldTag.FROM_STEP, (_resolve(base, spec, token),), step)


def _decode_range(part: str, spec: FieldSpec, token: str) -> FieldDescription:
    first, second = _split_pair(part, "-", token)
    start = _resolve(first, spec, token)
    end = _resolve(second, spec, token)

    if end.position < start.position:
        raise InvalidExpressionError(token, f"descending range '{part}'")

    return FieldDescription(FieldTag.RANGE, (start, end))


def _split_pair(part: str, separator: str, token: str) -> tuple[str, str]:
    pieces = part.split(separator)
    if len(pieces) != 2 or not pieces[0] or not pieces[1]:
        raise InvalidExpressionError(token, f"malformed '{part}'")
    return pieces[0], pieces[1]


def _resolve(text: str, spec: FieldSpec, token: str) -> ParsedValue:
    position = spec.resolve_position(text)
    if position is None:
        raise InvalidExpressionError(token, f"unknown {spec.label} value '{text}'")
    if not spec.in_range(position):
        raise InvalidExpressionError(
            token,
            f"{spec.label} value {position} out of range [{spec.minimum}, {spec.maximum}]",
        )
    return ParsedValue(position, spec.display(text))


def _resolve_step(text: str, spec: FieldSpec, token: str) -> int:
    if is_int(text):
        step = int(text)
        if step > 0:
            return step
        raise InvalidExpressionError(token, "step must be a positive integer")

    # Named divisors (e.g., */jan) are accepted for month and day of week.
    # SUN is the only name resolving to 0, so it alone yields a zero step.
    step = spec.resolve_name(text)
    if step is None:
        raise InvalidExpressionError(token, f"invalid step '{text}'")
    return step


def _wildcard(spec: FieldSpec) -> ParsedValue:
    return ParsedValue(None, f"every {spec.label}")


class CronExpression:
    """Parse and describe cron expressions."""

    def __init__(self, expression: str):
        """Initialize cron expression.

        Args:
            expression: Five whitespace separated fields
                (minute hour day month weekday), or one special token

        Raises:
            InvalidExpressionError: If the expression cannot be decoded
        """
        if not isinstance(expression, str) or not expression.strip():
            raise InvalidExpressionError(str(expression), "expression is empty")

        self.expression = expression.strip()
        self.special: str | None = None
        self.minute: FieldDescription | None = None
        self.hour: FieldDescription | None = None
        self.day_of_month: FieldDescription | None = None
        self.month: FieldDescription | None = None
        self.day_of_week: FieldDescription | None = None

        parts = self.expression.split()

        if parts[0] in SPECIAL_FIELDS:
            if len(parts) != 1:
                raise InvalidExpressionError(
                    self.expression, f"special token '{parts[0]}' must stand alone"
                )
            self.special = parts[0]
            return

        if len(parts) != 5:
            raise InvalidExpressionError(
                self.expression,
                f"expected 5 fields (minute hour day month weekday), got {len(parts)}",
            )

        decoded = []
        for index, part in enumerate(parts):
            kind = get_field_kind(index)
            try:
                decoded.append(decode_field(part, kind))
            except InvalidExpressionError as e:
                logger.debug("Failed to decode %s field '%s': %s", kind.value, part, e.reason)
                raise InvalidExpressionError(
                    self.expression, f"{kind.value} field: {e.reason}"
                ) from e

        self.minute, self.hour, self.day_of_month, self.month, self.day_of_week = decoded
        logger.debug("Decoded '%s' into %s", self.expression, decoded)

    @property
    def is_special(self) -> bool:
        return self.special is not None

    def fields(self) -> dict[FieldKind, FieldDescription]:
        """Return field descriptions keyed by kind (empty for special tokens)."""
        if self.is_special:
            return {}

        return {
            FieldKind.MINUTE: self.minute,
            FieldKind.HOUR: self.hour,
            FieldKind.DAY_OF_MONTH: self.day_of_month,
            FieldKind.MONTH: self.month,
            FieldKind.DAY_OF_WEEK: self.day_of_week,
        }

    def describe(self) -> str:
        """Render the expression as an English sentence."""
        if self.is_special:
            return SPECIAL_FIELD_TRANSLATIONS[self.special]
        return Formatter.human_description(self.fields())

    @classmethod
    def is_valid(cls, expression: str) -> bool:
        """Check whether the expression can be decoded."""
        try:
            cls(expression)
        except InvalidExpressionError:
            return False
        return True

    def __str__(self) -> str:
        """String representation."""
        return self.expression

    def __repr__(self) -> str:
        """Developer representation."""
        return f"CronExpression('{self.expression}')"


def decode_cron(expression: str) -> str:
    """Describe a cron expression in English.

    Args:
        expression: Valid cron expression

    Returns:
        Sentence such as "At every 2nd minute from 8 through 59."

    Raises:
        InvalidExpressionError: If the expression is not valid
    """
    return CronExpression(expression).describe()
