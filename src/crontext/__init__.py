"""crontext - Validate cron expressions and describe them in English.

Basic usage:
    from crontext import validate_cron, decode_cron

    if validate_cron("5 4 * * sun"):
        print(decode_cron("5 4 * * sun"))  # At 04:05, on Sunday.

Inspecting the decoded fields:
    from crontext import CronExpression

    cron = CronExpression("*/15 9-17 * * mon-fri")
    cron.minute      # FieldDescription(tag=FieldTag.EVERY, values=(), step=15)
    cron.describe()  # At every 15th minute past every hour from 9 through 17, ...
"""

__version__ = "0.1.0"

from crontext.constants import SPECIAL_FIELDS, SPECIAL_FIELD_TRANSLATIONS
from crontext.decoder import CronExpression, decode_cron, decode_field
from crontext.exceptions import CrontextError, InvalidExpressionError, InvalidFieldError
from crontext.fields import FIELD_SPECS, FieldKind, FieldSpec, get_field_kind, ordinal
from crontext.formatter import Formatter
from crontext.models import FieldDescription, FieldTag, ParsedValue
from crontext.validator import validate_cron, validate_field

__all__ = [
    # Main API
    "validate_cron",
    "decode_cron",
    "CronExpression",
    # Field level
    "validate_field",
    "decode_field",
    "get_field_kind",
    "ordinal",
    "Formatter",
    # Configuration
    "FieldKind",
    "FieldSpec",
    "FIELD_SPECS",
    "SPECIAL_FIELDS",
    "SPECIAL_FIELD_TRANSLATIONS",
    # Models
    "FieldTag",
    "FieldDescription",
    "ParsedValue",
    # Exceptions
    "CrontextError",
    "InvalidExpressionError",
    "InvalidFieldError",
]
