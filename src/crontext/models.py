"""Typed intermediate representation of a decoded cron field."""

from dataclasses import dataclass
from enum import Enum


class FieldTag(Enum):
    """Shape of a decoded field."""
    ANY = "any"
    SPECIFIC = "specific"
    ANY_WITH_SPECIFIC = "any_with_specific"
    EVERY = "every"
    FROM_STEP = "from_step"
    RANGE = "range"
    RANGE_STEP = "range_step"


STEP_TAGS = frozenset({FieldTag.EVERY, FieldTag.FROM_STEP, FieldTag.RANGE_STEP})
VALUELESS_TAGS = frozenset({FieldTag.ANY, FieldTag.EVERY})


@dataclass(frozen=True)
class ParsedValue:
    """A literal or named token resolved during decoding.

    Attributes:
        position: Numeric value used for ordering, None for wildcard values
        display: Text used when the value appears in a sentence
    """

    position: int | None
    display: str

    @property
    def is_wildcard(self) -> bool:
        return self.position is None


@dataclass(frozen=True)
class FieldDescription:
    """Decoded shape of one cron field.

    Attributes:
        tag: Which of the field shapes this is
        values: Parsed values in the order they were written
        step: Step count for stepped shapes, None otherwise
    """

    tag: FieldTag
    values: tuple[ParsedValue, ...] = ()
    step: int | None = None

    def __post_init__(self):
        """Validate the description against its tag."""
        if not isinstance(self.values, tuple):
            raise TypeError("values must be a tuple")

        if not self.values and self.tag not in VALUELESS_TAGS:
            raise ValueError(f"{self.tag.value} description requires values")

        if (self.step is not None) != (self.tag in STEP_TAGS):
            raise ValueError(f"step is not valid for a {self.tag.value} description")

        if self.tag in (FieldTag.RANGE, FieldTag.RANGE_STEP) and len(self.values) != 2:
            raise ValueError(f"{self.tag.value} description requires a start and an end")

    @property
    def is_single(self) -> bool:
        """True for one concrete value (e.g., minute "5")."""
        return (
            self.tag is FieldTag.SPECIFIC
            and len(self.values) == 1
            and not self.values[0].is_wildcard
        )
