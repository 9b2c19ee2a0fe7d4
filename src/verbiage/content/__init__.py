"""Authored content tables for the Priya app.

Every string the app presents to its user lives here, grouped by topic:
legal text, background notifications, alerts for user and system errors,
informational text, and confirmations for irreversible actions.

ALL_TABLES fixes the merge order used by Verbiage.create_default(). Under
the default FAIL collision policy the order only matters for provenance
(Registry.table_names); a key defined twice fails the build.
"""

from verbiage.catalog import ResourceTable

from .alerts import ALERTS, COMPOSITE_ALERTS
from .dialogs import CONFIRMATION_DIALOGS
from .formats import DATE_TIME_FORMATS
from .general import DEFAULTS, EMAILS, TEXT_CONSTANTS
from .legal import TERMS_OF_USE
from .notifications import NOTIFICATIONS
from .text import TEXT

__all__ = [
    "ALERTS",
    "ALL_TABLES",
    "COMPOSITE_ALERTS",
    "CONFIRMATION_DIALOGS",
    "DATE_TIME_FORMATS",
    "DEFAULTS",
    "EMAILS",
    "NOTIFICATIONS",
    "TERMS_OF_USE",
    "TEXT",
    "TEXT_CONSTANTS",
]

ALL_TABLES: tuple[ResourceTable, ...] = (
    TEXT_CONSTANTS,
    EMAILS,
    DEFAULTS,
    DATE_TIME_FORMATS,
    NOTIFICATIONS,
    COMPOSITE_ALERTS,
    ALERTS,
    CONFIRMATION_DIALOGS,
    TEXT,
    TERMS_OF_USE,
)
