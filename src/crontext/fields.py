"""Field kinds and their per-kind configuration.

Every difference between the five cron fields (bounds, named values, how a
number is displayed, how the field maximum reads in a sentence) is captured in
a single ``FieldSpec`` record. The validator, decoder and formatter only ever
consult ``FIELD_SPECS`` and never branch on the field kind themselves.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

from crontext.constants import (
    ALLOWED_RANGE,
    DAY_NAMES,
    DAYS_MAP,
    FIELD_TYPES,
    MONTH_NAMES,
    MONTHS_MAP,
)
from crontext.exceptions import InvalidFieldError


class FieldKind(Enum):
    """The five positional cron fields."""
    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_MONTH = "day_of_month"
    MONTH = "month"
    DAY_OF_WEEK = "day_of_week"


def ordinal(n: int) -> str:
    """Render an integer with its English ordinal suffix.

    Args:
        n: Integer to render

    Returns:
        Ordinal string (e.g., "1st", "12th", "23rd")
    """
    if n % 100 in (11, 12, 13):
        return f"{n}th"

    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _plain(n: int) -> str:
    return str(n)


def _month_name(n: int) -> str:
    if 1 <= n <= len(MONTH_NAMES):
        return MONTHS_MAP[MONTH_NAMES[n - 1]]
    return str(n)


def _day_name(n: int) -> str:
    if 0 <= n < len(DAY_NAMES):
        return DAYS_MAP[DAY_NAMES[n]]
    return str(n)


@dataclass(frozen=True)
class FieldSpec:
    """Configuration record for one field kind.

    Attributes:
        kind: Field kind this record describes
        label: Field name as it reads in a sentence ("day-of-month")
        minimum: Smallest allowed numeric value
        maximum: Largest allowed numeric value
        format_number: Renders a numeric value for display
        max_display: How the field maximum reads after "through"
        value_prefix: Word placed before a list of specific values
        preposition: Word(s) introducing the field in the date clause
        names: Three-letter names accepted in place of numbers
        full_names: Full display name for each entry of ``names``
    """

    kind: FieldKind
    label: str
    minimum: int
    maximum: int
    format_number: Callable[[int], str]
    max_display: str
    value_prefix: str = ""
    preposition: str = ""
    names: tuple[str, ...] = ()
    full_names: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate field configuration."""
        if self.minimum > self.maximum:
            raise ValueError(f"minimum must not exceed maximum for {self.kind.value}")

        if self.names and self.minimum + len(self.names) - 1 > self.maximum:
            raise ValueError(f"names for {self.kind.value} do not fit its range")

        missing = [name for name in self.names if name not in self.full_names]
        if missing:
            raise ValueError(f"full names missing for {', '.join(missing)}")

    def resolve_name(self, token: str) -> int | None:
        """Map a named value to its numeric position.

        The position is the table index offset by the field minimum, so that
        it compares directly with numeric literals (JAN -> 1, SUN -> 0).

        Returns:
            Numeric position, or None if the token is not a known name
        """
        upper = token.upper()
        if upper not in self.names:
            return None
        return self.names.index(upper) + self.minimum

    def resolve_position(self, token: str) -> int | None:
        """Resolve an integer literal or a named value to a number."""
        if is_int(token):
            return int(token)
        return self.resolve_name(token)

    def in_range(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def display(self, token: str) -> str:
        """Render a literal or named token as it should read in a sentence."""
        if is_int(token):
            return self.format_number(int(token))
        return self.full_names[token.upper()]


def is_int(token: str) -> bool:
    """Check that a token is a non-negative ASCII integer literal."""
    return token.isascii() and token.isdigit()


def _build_specs() -> Mapping[FieldKind, FieldSpec]:
    minute = FieldKind.MINUTE
    hour = FieldKind.HOUR
    dom = FieldKind.DAY_OF_MONTH
    month = FieldKind.MONTH
    dow = FieldKind.DAY_OF_WEEK

    specs = {
        minute: FieldSpec(
            kind=minute,
            label="minute",
            minimum=ALLOWED_RANGE[minute.value][0],
            maximum=ALLOWED_RANGE[minute.value][1],
            format_number=_plain,
            max_display="59",
            value_prefix="minute",
        ),
        hour: FieldSpec(
            kind=hour,
            label="hour",
            minimum=ALLOWED_RANGE[hour.value][0],
            maximum=ALLOWED_RANGE[hour.value][1],
            format_number=_plain,
            max_display="23",
            value_prefix="hour",
        ),
        dom: FieldSpec(
            kind=dom,
            label="day-of-month",
            minimum=ALLOWED_RANGE[dom.value][0],
            maximum=ALLOWED_RANGE[dom.value][1],
            format_number=ordinal,
            max_display=ordinal(ALLOWED_RANGE[dom.value][1]),
            preposition="on the",
        ),
        month: FieldSpec(
            kind=month,
            label="month",
            minimum=ALLOWED_RANGE[month.value][0],
            maximum=ALLOWED_RANGE[month.value][1],
            format_number=_month_name,
            max_display=MONTHS_MAP[MONTH_NAMES[-1]],
            preposition="in",
            names=MONTH_NAMES,
            full_names=MONTHS_MAP,
        ),
        dow: FieldSpec(
            kind=dow,
            label="day-of-week",
            minimum=ALLOWED_RANGE[dow.value][0],
            maximum=ALLOWED_RANGE[dow.value][1],
            format_number=_day_name,
            max_display=DAYS_MAP[DAY_NAMES[-1]],
            preposition="on",
            names=DAY_NAMES,
            full_names=DAYS_MAP,
        ),
    }
    return MappingProxyType(specs)


FIELD_SPECS = _build_specs()


def get_field_kind(index: int) -> FieldKind:
    """Return the field kind at a positional index.

    Raises:
        InvalidFieldError: If index is outside 0-4
    """
    if not 0 <= index < len(FIELD_TYPES):
        raise InvalidFieldError(index)
    return FieldKind(FIELD_TYPES[index])
