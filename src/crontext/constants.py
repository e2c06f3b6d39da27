"""Static tables for cron expressions."""

from types import MappingProxyType

# Whole-expression shortcuts
SPECIAL_FIELDS = (
    "@reboot",
    "@yearly",
    "@monthly",
    "@weekly",
    "@daily",
    "@hourly",
)

# Positional order of the five fields
FIELD_TYPES = ("minute", "hour", "day_of_month", "month", "day_of_week")

ALLOWED_RANGE = MappingProxyType({
    "minute": (0, 59),
    "hour": (0, 23),
    "day_of_month": (1, 31),
    "month": (1, 12),
    "day_of_week": (0, 7),
})

# Compared upper-cased, lowercase input is accepted
MONTH_NAMES = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)
DAY_NAMES = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")

MONTHS_MAP = MappingProxyType({
    "JAN": "January",
    "FEB": "February",
    "MAR": "March",
    "APR": "April",
    "MAY": "May",
    "JUN": "June",
    "JUL": "July",
    "AUG": "August",
    "SEP": "September",
    "OCT": "October",
    "NOV": "November",
    "DEC": "December",
})

DAYS_MAP = MappingProxyType({
    "SUN": "Sunday",
    "MON": "Monday",
    "TUE": "Tuesday",
    "WED": "Wednesday",
    "THU": "Thursday",
    "FRI": "Friday",
    "SAT": "Saturday",
})

SPECIAL_FIELD_TRANSLATIONS = MappingProxyType({
    "@reboot": "After rebooting.",
    "@yearly": "At 00:00 on day-of-month 1 in January.",
    "@monthly": "At 00:00 on day-of-month 1.",
    "@weekly": "At 00:00 on Sunday.",
    "@daily": "At 00:00.",
    "@hourly": "At minute 0.",
})
