"""Rendering of decoded cron fields into English."""

from typing import Mapping, Sequence

from crontext.fields import FIELD_SPECS, FieldKind, FieldSpec, ordinal
from crontext.models import FieldDescription, FieldTag, ParsedValue

# Order in which date clauses appear after the time of day
DATE_ORDER = (FieldKind.MONTH, FieldKind.DAY_OF_MONTH, FieldKind.DAY_OF_WEEK)


class Formatter:
    """Static utility class for turning field descriptions into sentences.

    Provides the rendering steps used by the decoder:
    - Value lists with an Oxford comma
    - Per-field phrases
    - Time of day and date clauses
    - The full sentence
    """

    @staticmethod
    def value_list(values: Sequence[ParsedValue], prefix: str = "") -> str:
        """Join displayed values into a list.

        Args:
            values: Parsed values in written order
            prefix: Field word placed once before the list

        Returns:
            Joined list (e.g., "minute 1, 2, and 5")
        """
        displays = [value.display for value in values]

        if len(displays) == 1:
            text = displays[0]
        else:
            text = ", ".join(displays[:-1]) + ", and " + displays[-1]

        # A leading wildcard already names the field
        if prefix and not values[0].is_wildcard:
            return f"{prefix} {text}"
        return text

    @staticmethod
    def field_phrase(description: FieldDescription, spec: FieldSpec) -> str:
        """Render one field description.

        Args:
            description: Decoded field
            spec: Configuration of the field kind

        Returns:
            Phrase such as "every 2nd minute from 8 through 59"

        Raises:
            ValueError: If the description carries an unknown tag
        """
        tag = description.tag
        values = description.values
        label = spec.label

        if tag is FieldTag.ANY:
            return f"every {label}"

        if tag is FieldTag.SPECIFIC:
            return Formatter.value_list(values, spec.value_prefix)

        if tag is FieldTag.ANY_WITH_SPECIFIC:
            if values[0].is_wildcard:
                return " and ".join(value.display for value in values)
            return Formatter.value_list(values, spec.value_prefix)

        if tag is FieldTag.EVERY:
            return f"every {ordinal(description.step)} {label}"

        if tag is FieldTag.FROM_STEP:
            return (
                f"every {ordinal(description.step)} {label} "
                f"from {values[0].display} through {spec.max_display}"
            )

        if tag is FieldTag.RANGE:
            return f"every {label} from {values[0].display} through {values[1].display}"

        if tag is FieldTag.RANGE_STEP:
            return (
                f"every {ordinal(description.step)} {label} "
                f"from {values[0].display} through {values[1].display}"
            )

        raise ValueError(f"Unhandled field tag: {tag}")

    @staticmethod
    def time_part(minute: FieldDescription, hour: FieldDescription) -> str:
        """Render the time of day from the minute and hour fields."""
        minute_any = minute.tag is FieldTag.ANY
        hour_any = hour.tag is FieldTag.ANY

        if minute_any and hour_any:
            return "every minute"

        hour_phrase = Formatter.field_phrase(hour, FIELD_SPECS[FieldKind.HOUR])
        if minute_any:
            return f"every minute past {hour_phrase}"

        minute_phrase = Formatter.field_phrase(minute, FIELD_SPECS[FieldKind.MINUTE])
        if hour_any:
            return minute_phrase

        if minute.is_single and hour.is_single:
            return f"{hour.values[0].position:02d}:{minute.values[0].position:02d}"

        return f"{minute_phrase} past {hour_phrase}"

    @staticmethod
    def date_part(fields: Mapping[FieldKind, FieldDescription]) -> str:
        """Render the month, day-of-month and day-of-week clauses.

        Returns:
            Clauses joined by ", ", or an empty string if every field is any
        """
        clauses = []
        for kind in DATE_ORDER:
            description = fields[kind]
            if description.tag is FieldTag.ANY:
                continue

            spec = FIELD_SPECS[kind]
            clauses.append(f"{spec.preposition} {Formatter.field_phrase(description, spec)}")

        return ", ".join(clauses)

    @staticmethod
    def human_description(fields: Mapping[FieldKind, FieldDescription]) -> str:
        """Build the full sentence for a five field expression.

        Args:
            fields: Description for each of the five field kinds

        Returns:
            Sentence such as "At 04:05, on Sunday."
        """
        time_text = Formatter.time_part(fields[FieldKind.MINUTE], fields[FieldKind.HOUR])
        date_text = Formatter.date_part(fields)

        if date_text:
            return f"At {time_text}, {date_text}."
        return f"At {time_text}."
