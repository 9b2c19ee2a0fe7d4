"""Screen text: titles, buttons, form inputs, option tables, and templates.

Templates in this table read application state only through their
TemplateContext. Patterns for the date-bearing templates are passed in by
the caller, usually resolved first from DATE_TIME_FORMATS:

    >>> fmt = verbiage.get_text("last-synced-time-format")
    >>> verbiage.get_text("cycle-last-synced-text", fmt)
    '✔ last synced at 3:05PM'
"""

from collections.abc import Mapping
from datetime import date, datetime

from verbiage.catalog import InputPrompt, ResourceTable, template, text
from verbiage.enums import CycleMode, PairingStage, WindowPhase
from verbiage.runtime.context import TemplateContext

__all__ = ["TEXT"]

SYNC_OK_MARKER = "✔"
SYNC_STALE_MARKER = "✘"
FERTILE_WINDOW_PREFIX = "Fertile\n Window?\n"

_WINDOW_PHRASES: dict[WindowPhase, str] = {
    WindowPhase.BEFORE: "Soon!",
    WindowPhase.WITHIN: "NOW :)",
    WindowPhase.AFTER: "-passed-",
}


def _cycle_last_synced_text(time_format: str, ctx: TemplateContext) -> str:
    last_synced = ctx.state.last_synced
    if last_synced is None:
        return f"{SYNC_STALE_MARKER} not yet synced"
    if ctx.state.too_long_since_sync:
        return f"{SYNC_STALE_MARKER} last synced {ctx.relative(last_synced)}"
    return f"{SYNC_OK_MARKER} last synced at {ctx.format(last_synced, time_format)}"


def _past_cycle_title(period_start: date, day_format: str, ctx: TemplateContext) -> str:
    return f"Cycle Starting {ctx.format(period_start, day_format)}"


def _period_start_button_text(date_display_format: str, ctx: TemplateContext) -> str:
    period_start = ctx.state.period_start
    if period_start is None:
        return "Set\n Period\n Start"
    return f"Period Start\n {ctx.format(period_start, date_display_format)}"


def _period_end_button_text(date_display_format: str, ctx: TemplateContext) -> str:
    period_end = ctx.state.period_end
    if period_end is None:
        return "Set\n Period\n End"
    return f"Period End\n {ctx.format(period_end, date_display_format)}"


def _fertile_window_status(ctx: TemplateContext) -> str:
    if ctx.state.mode is CycleMode.CLINICAL:
        return "N/A"
    phase = ctx.window_phase()
    if phase is None:
        return "-not yet-"
    return _WINDOW_PHRASES[phase]


def _pair_with_ring_button_text(ctx: TemplateContext) -> str:
    match ctx.state.stage:
        case PairingStage.SCANNING:
            return "Scanning..."
        case PairingStage.PAIRING:
            return "Pairing..."
        case PairingStage.PAIRED:
            return FERTILE_WINDOW_PREFIX + _fertile_window_status(ctx)
        case _:
            return "Pair\n With\n Ring"


def _in_zone_of(moment: datetime, now: datetime) -> datetime:
    # Aware moments are shown on the clock the user is living on.
    if moment.tzinfo is not None and now.tzinfo is not None:
        return moment.astimezone(now.tzinfo)
    return moment


def _event_time_selector_label(
    moment: datetime, formats: Mapping[str, str], ctx: TemplateContext
) -> str:
    moment = _in_zone_of(moment, ctx.now)
    if moment.date() == ctx.now.date():
        return f"Today around {ctx.format(moment, formats['hour-of-day'])}"
    return ctx.format(moment, formats["day-and-hour"])


def _weight_unit_label(ctx: TemplateContext) -> str:
    return "kgs" if ctx.state.prefer_metric else "lbs"


TEXT = ResourceTable(
    "text",
    {
        "start": text("Text on the start button.", en="Start"),
        "terms-of-use-title": text(
            "Title for accept terms of use page",
            en="Priya Terms and Conditions of Use",
        ),
        "i-do-not-accept": text(
            "Do not Accept terms and conditions checkbox text",
            en="Do Not Accept",
        ),
        "i-accept": text("Accept terms and conditions checkbox text", en="I Accept"),
        "accept-terms-of-use": text(
            "Text on account creation page to view and accept terms of use.",
            en="Accept Terms of Use",
        ),
        "tap-to-select-date": text(
            "In basic info page, text inviting user to tap to select a date of birth.",
            en="Tap to select...",
        ),
        "datepicker-confirm-button-text": text(
            "Text to save the entered date of birth.",
            en="Save",
        ),
        "datepicker-cancel-button-text": text(
            "Text to cancel date of birth entry",
            en="Cancel",
        ),
        "temp-graph-time-label": text(
            "Label on temp graph x-axis when less than a day has passed.",
            en="Time of Day",
        ),
        "temp-graph-fertile-window": text(
            "Text to display in the fertile window area of the graph.",
            en="Fertile\n Window",
        ),
        "cycle-last-synced-text": template(
            "Text to inform user when the last sync with Ring occurred. Stale syncs "
            "show a relative time, fresh ones the time formatted with time_format.",
            ("time_format",),
            en=_cycle_last_synced_text,
        ),
        "cycle-notes-title": text("Title for Cycle Notes text input area", en="Cycle Notes"),
        "cycle-notes-placeholder": text(
            "Placeholder for Cycle Notes text input area",
            en="Enter personal notes about your cycle here...",
        ),
        "technical-data-page-title": text("Title on technical data page", en="Technical Data"),
        "add-a-result-page-title": text("Title on 'Add a result' modal", en="Add A Result"),
        "reset-ring?": text("Text next to reset ring pairing button", en="Reset Ring?"),
        "reset-ring-pairing-button-text": text(
            "Text on the button that resets ring pairing",
            en="Reset Ring Pairing",
        ),
        "return-to-cycles-page": text(
            "Text on the button that takes user back to the 'My Cycles' page.",
            en="Back To Cycles",
        ),
        "current-cycle-title": text("Title for the current cycle", en="Current Cycle"),
        "past-cycle-title": template(
            "Title for past cycles, naming the period start date.",
            ("period_start", "day_format"),
            en=_past_cycle_title,
        ),
        "period-start-button-text": template(
            "Text in the button to set/display period start.",
            ("date_display_format",),
            en=_period_start_button_text,
        ),
        "period-end-button-text": template(
            "Text in the button to set/display period end.",
            ("date_display_format",),
            en=_period_end_button_text,
        ),
        "pair-with-ring-button-text": template(
            "Text in the button to initiate pairing, and once paired, to view fertile "
            "window status",
            en=_pair_with_ring_button_text,
        ),
        "notes-input-title": text("Title for notes input in add result view", en="Notes"),
        "notes-input-placeholder": text(
            "Placeholder for notes input in add result view",
            en="[Optional] Personal notes about this result...",
        ),
        "notes-list-title": text("Title for notes in notes list", en="Notes"),
        "my-results-title-text": text("Title of cycle results sections", en="My Results"),
        "add-result-button-text": text(
            "Text on the button for adding results.",
            en="Add a result",
        ),
        "no-temperature-readings-past-cycle": text(
            "Text in a completed cycle if no temperatures were recorded",
            en=(
                "No temperature readings were recorded in this cycle.  "
                "Was there a problem? Let us know!"
            ),
        ),
        "update-profile-button-text": text(
            "Text on the button for updating profile",
            en="Update Profile",
        ),
        "update-account-button-text": text(
            "Text on the button for updating account information",
            en="Update Account",
        ),
        "complete-cycle-button-text": text(
            "Text on the button that completes a cycle",
            en="Complete Cycle",
        ),
        "new-cycle-button-text": text(
            "Text on the button that starts a new cycle",
            en="New Cycle",
        ),
        "technical-data-button-text": text(
            "Text on the button that displays the technical data view",
            en="Technical Data",
        ),
        "help-button-text": text(
            "Text on the button that links user to the FAQ website.",
            en="Help",
        ),
        "logout-button-text": text("Text on the button that logs the user out.", en="Logout"),
        "cycles-page-title": text("Title of the `My Cycles` page", en="My Cycles"),
        "create-account-button-text": text(
            "Text on the button to Create Account",
            en="Create Account",
        ),
        "login-button-text": text("Text on the button to Login", en="Login"),
        "back-button-text": text(
            "Text on the button that takes user to previous page.",
            en="Wait, take me back!",
        ),
        "app-title": text("App title", en="Priya"),
        "app-title-page-description": text(
            "Short subtitle for App loading page",
            en="personal fertility sensor",
        ),
        "loading-text": text("Text to display when a page is loading", en="Loading..."),
        "create-account-page-title": text("Title on create account page", en="Create Account"),
        "create-account-page-subtitle": text(
            "Sub-title on create account page",
            en="let's get to know each other!",
        ),
        "first-name-input": text(
            "First name input",
            en=InputPrompt(title="First Name", placeholder="Enter your first name..."),
        ),
        "last-name-input": text(
            "Last name input",
            en=InputPrompt(title="Last Name", placeholder="Enter your last name..."),
        ),
        "subject-id-input": text(
            "Subject Id input",
            en=InputPrompt(
                title="Subject Id",
                placeholder="Enter the subject id provided to you...",
            ),
        ),
        "create-password-input": text(
            "Create password input",
            en=InputPrompt(title="Password", placeholder="Create a Priya account password..."),
        ),
        "email-input": text(
            "Email input",
            en=InputPrompt(title="Email", placeholder="Enter your email address..."),
        ),
        "password-input": text(
            "Password input",
            en=InputPrompt(title="Password", placeholder="Enter your Priya account password..."),
        ),
        "update-profile-page-title": text(
            "Title on update profile page",
            en="Update My Profile",
        ),
        "basic-info-page-title": text("Title on basic info page", en="Basic Info"),
        "basic-info-page-subtitle": text(
            "Sub-title on basic info page",
            en="Just some basic info please...",
        ),
        "date-of-birth-question": text(
            "Text when asking date of birth",
            en="Your date of birth?",
        ),
        "prefer-metric-question": text(
            "Text when asking if user prefers metric units",
            en="Do you prefer metric units?",
        ),
        "cycles-regular-question": text(
            "Text when asking if the user's cycles are regular",
            en="Are your cycles regular?",
        ),
        "cycle-length-question": text(
            "Text when asking how many days are in a typical regular cycle",
            en="Typical Cycle Length?",
        ),
        "weight-question": text("Text when asking the user's weight", en="Weight?"),
        "height-question": text("Text when asking the user's height", en="Height?"),
        "how-long-trying-to-conceive-question": text(
            "Text when asking how long the user has been trying to conceive",
            en="How long have you been trying to conceive?",
        ),
        "conception-attempt-time-period-options": text(
            "The time period options for which a user may have been trying to conceive, "
            "keyed by option index.",
            en={
                0: "Not Trying",
                1: "0-3 Months",
                2: "3-6 Months",
                3: "6-9 Months",
                4: "9-12 Months",
                5: "1-2 Years",
                6: "2+ Years",
            },
        ),
        "units": text(
            "Units of measurement for user profile info",
            en={
                "days": "days",
                "lbs": "lbs",
                "kgs": "kgs",
                "feet": "ft",
                "inches": "in",
                "cms": "cms",
            },
        ),
        "weight-unit-label": template(
            "Weight unit matching the user's measurement preference.",
            en=_weight_unit_label,
        ),
        "event-map": text(
            "The map of available event types and their labels.",
            en={
                "custom": "Custom Note",
                "lh-low": "LH Test was Low",
                "lh-high": "LH Test was High",
                "pregnant": "Found out I'm Pregnant",
            },
        ),
        "event-time-selector-label": template(
            "Event time selector label. Events today read 'Today around <hour>'; other "
            "days use the day-and-hour format. formats is the "
            "event-time-selector-formats map.",
            ("moment", "formats"),
            en=_event_time_selector_label,
        ),
    },
)
