"""Date and time formatting patterns.

Patterns are CLDR date field patterns as understood by Babel, see
https://unicode.org/reports/tr35/tr35-dates.html#Date_Field_Symbol_Table
(e.g. ``h:mma`` renders 3:05PM, ``MMM d, yy`` renders Mar 14, 26).
"""

from verbiage.catalog import ResourceTable, text

__all__ = ["DATE_TIME_FORMATS"]

DATE_TIME_FORMATS = ResourceTable(
    "date-time-formats",
    {
        "human-readable-time-format": text(
            "Date and time format for technical data display",
            en="M/d h:mm:ssa",
        ),
        "human-readable-day-format": text(
            "Default date format for display",
            en="MMM. d",
        ),
        "period-date-selector-format": text(
            "The format for selecting period start and end date",
            en="yyyy-MM-dd",
        ),
        "period-date-display-format": text(
            "The format for displaying period start and end date.",
            en="MMM d, yy",
        ),
        "date-of-birth-selector-format": text(
            "The format used in the date selector component",
            en="MMMM d, yyyy",
        ),
        "time-axis-formats": text(
            "Time formats for the temp graph when temperatures have been recorded "
            "for a short, medium, or long period of time.",
            en={
                "short": "h:mma",
                "medium": "ha",
                "long": "MMM d",
            },
        ),
        "event-time-selector-formats": text(
            "The time formats that go in the event time selector.",
            en={
                "day-only": "MMMM d",
                "hour-of-day": "ha",
                "day-and-hour": "MMMM d, ha",
            },
        ),
        "event-list-time-display-format": text(
            "The date-time format for time of an event in 'My Results' list",
            en="M/d ha",
        ),
        "last-synced-time-format": text(
            "Format for text describing when the last ring sync occurred.",
            en="h:mma",
        ),
    },
)
