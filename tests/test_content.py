"""Tests for the shipped content tables.

Every shipped key must resolve to displayable content in the default
language, and the state-dependent templates must produce the exact phrases
the app screens expect.

Python 3.13+.
"""

from collections.abc import Mapping
from dataclasses import astuple, is_dataclass
from datetime import UTC, date, datetime, timedelta

import pytest

from verbiage.catalog import Alert, Dialog, EmailDraft, InputPrompt, Registry, build_registry
from verbiage.content import ALL_TABLES, CONFIRMATION_DIALOGS, TERMS_OF_USE, TEXT
from verbiage.enums import CollisionPolicy, CycleMode, EntryKind, PairingStage
from verbiage.runtime import (
    ContextSnapshot,
    FertileWindow,
    FixedContextProvider,
    Resolver,
    ResolverConfig,
)
from verbiage.validation import validate_tables

# Same instant as the conftest fixed_now fixture.
FIXED_NOW = datetime(2026, 3, 14, 18, 0, tzinfo=UTC)

EVENT_FORMATS = {"day-only": "MMMM d", "hour-of-day": "ha", "day-and-hour": "MMMM d, ha"}

# Arguments used to exercise every shipped template.
TEMPLATE_ARGS: dict[str, tuple[object, ...]] = {
    "cycle-last-synced-text": ("h:mma",),
    "past-cycle-title": (date(2026, 2, 1), "MMM d, yy"),
    "period-start-button-text": ("MMM d, yy",),
    "period-end-button-text": ("MMM d, yy",),
    "pair-with-ring-button-text": (),
    "weight-unit-label": (),
    "event-time-selector-label": (FIXED_NOW, EVENT_FORMATS),
    "create-account-while-cycle-active": (),
    "login-new-account-while-cycle-active": (),
}


def _strict(provider: FixedContextProvider, registry: Registry) -> Resolver:
    return Resolver(registry, provider, config=ResolverConfig(strict=True))


def _is_displayable(value: object) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, Mapping):
        return bool(value) and all(_is_displayable(v) for v in value.values())
    if is_dataclass(value):
        return all(_is_displayable(v) for v in astuple(value))  # type: ignore[arg-type]
    return False


class TestShippedTables:
    """Structural checks over ALL_TABLES."""

    def test_fixed_now_matches_fixture(self, fixed_now: datetime) -> None:
        assert fixed_now == FIXED_NOW

    def test_builds_under_fail_policy(self, shipped_registry: Registry) -> None:
        assert shipped_registry.policy is CollisionPolicy.FAIL
        assert shipped_registry.table_names == tuple(t.name for t in ALL_TABLES)

    def test_validation_passes_without_warnings(self) -> None:
        result = validate_tables(ALL_TABLES)
        assert result.is_valid
        assert result.warning_count == 0

    def test_english_only(self, shipped_registry: Registry) -> None:
        assert shipped_registry.languages == ("en",)

    def test_template_args_cover_every_template(self, shipped_registry: Registry) -> None:
        templates = {r.key for r in shipped_registry if r.kind is EntryKind.TEMPLATE}
        assert templates == set(TEMPLATE_ARGS)

    def test_every_key_resolves_to_displayable_content(
        self, shipped_registry: Registry, provider: FixedContextProvider
    ) -> None:
        resolver = _strict(provider, shipped_registry)
        for key in shipped_registry.keys("en"):
            value = resolver.resolve(key, "en", *TEMPLATE_ARGS.get(key, ()))
            assert _is_displayable(value), key

    def test_every_key_has_description(self, shipped_registry: Registry) -> None:
        assert all(r.description.strip() for r in shipped_registry)

    def test_keys_are_kebab_case(self, shipped_registry: Registry) -> None:
        for key in shipped_registry.keys():
            assert key == key.strip().lower(), key
            assert " " not in key, key


class TestStaticContent:
    """Spot checks of static values and record shapes."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("default-save-text", "Save"),
            ("oops", "Oops..."),
            ("start", "Start"),
            ("last-synced-time-format", "h:mma"),
            ("period-date-display-format", "MMM d, yy"),
            ("support-phone", "(833) 386-5222"),
            ("fertile-window", "Your fertile window prediction has arrived!"),
        ],
    )
    def test_string_values(self, shipped_resolver: Resolver, key: str, expected: str) -> None:
        assert shipped_resolver.resolve(key, "en") == expected

    def test_alert_record(self, shipped_resolver: Resolver) -> None:
        alert = shipped_resolver.resolve("phone-bluetooth-is-off", "en")
        assert isinstance(alert, Alert)
        assert alert.title == "Oops..."
        assert "bluetooth" in alert.message

    def test_complete_cycle_dialog(self, shipped_resolver: Resolver) -> None:
        dialog = shipped_resolver.resolve("complete-cycle", "en")
        assert isinstance(dialog, Dialog)
        assert dialog.title == "Done For This Month?"
        assert dialog.confirm_text == "Complete"
        assert 'tap "Complete"' in dialog.message

    def test_email_draft(self, shipped_resolver: Resolver) -> None:
        email = shipped_resolver.resolve("terms-and-conditions-email-text", "en")
        assert isinstance(email, EmailDraft)
        assert email.subject == "Regarding Terms and Conditions"

    def test_input_prompt(self, shipped_resolver: Resolver) -> None:
        prompt = shipped_resolver.resolve("first-name-input", "en")
        assert prompt == InputPrompt(title="First Name", placeholder="Enter your first name...")

    def test_option_table_keyed_by_index(self, shipped_resolver: Resolver) -> None:
        options = shipped_resolver.resolve("conception-attempt-time-period-options", "en")
        assert isinstance(options, Mapping)
        assert sorted(options) == list(range(7))
        assert options[0] == "Not Trying"
        assert options[6] == "2+ Years"

    def test_event_formats_sub_map(self, shipped_resolver: Resolver) -> None:
        formats = shipped_resolver.resolve("event-time-selector-formats", "en")
        assert dict(formats) == EVENT_FORMATS  # type: ignore[arg-type]

    def test_composite_alerts_end_with_newline_where_joined(
        self, shipped_resolver: Resolver
    ) -> None:
        message = "".join(
            str(shipped_resolver.resolve(k, "en"))
            for k in ("create-account-invalid-email", "create-account-invalid-password")
        )
        assert message.count("\n") == 2

    def test_terms_of_use_loaded_from_resource(self, shipped_resolver: Resolver) -> None:
        terms = shipped_resolver.resolve("terms-of-use", "en")
        assert isinstance(terms, str)
        assert len(terms) > 1000
        assert "\n\n\n" in terms
        assert "terms-of-use" in TERMS_OF_USE


class TestLastSyncedText:
    """cycle-last-synced-text."""

    def test_fresh_sync_shows_time(self, provider: FixedContextProvider) -> None:
        synced = datetime(2026, 3, 14, 15, 5, tzinfo=UTC)
        resolver = Resolver(
            build_registry([TEXT]), provider.with_changes(last_synced=synced)
        )
        assert resolver.resolve("cycle-last-synced-text", "en", "h:mma") == (
            "✔ last synced at 3:05PM"
        )

    def test_stale_sync_shows_relative_time(self, provider: FixedContextProvider) -> None:
        stale = provider.with_changes(
            last_synced=FIXED_NOW - timedelta(hours=3), too_long_since_sync=True
        )
        resolver = Resolver(build_registry([TEXT]), stale)
        assert resolver.resolve("cycle-last-synced-text", "en", "h:mma") == (
            "✘ last synced 3 hours ago"
        )

    def test_never_synced(self, provider: FixedContextProvider) -> None:
        resolver = Resolver(build_registry([TEXT]), provider)
        assert resolver.resolve("cycle-last-synced-text", "en", "h:mma") == "✘ not yet synced"


class TestPairWithRingButton:
    """pair-with-ring-button-text across every stage and window phase."""

    WINDOW = FertileWindow(
        start=FIXED_NOW - timedelta(days=1), end=FIXED_NOW + timedelta(days=1)
    )

    @pytest.mark.parametrize(
        ("changes", "expected"),
        [
            ({"stage": PairingStage.UNPAIRED}, "Pair\n With\n Ring"),
            ({"stage": PairingStage.SCANNING}, "Scanning..."),
            ({"stage": PairingStage.PAIRING}, "Pairing..."),
            (
                {
                    "stage": PairingStage.PAIRED,
                    "mode": CycleMode.CLINICAL,
                    "fertile_window": WINDOW,
                },
                "Fertile\n Window?\nN/A",
            ),
            ({"stage": PairingStage.PAIRED}, "Fertile\n Window?\n-not yet-"),
            (
                {
                    "stage": PairingStage.PAIRED,
                    "fertile_window": FertileWindow(
                        start=FIXED_NOW + timedelta(days=2), end=FIXED_NOW + timedelta(days=6)
                    ),
                },
                "Fertile\n Window?\nSoon!",
            ),
            ({"stage": PairingStage.PAIRED, "fertile_window": WINDOW}, "Fertile\n Window?\nNOW :)"),
            (
                {
                    "stage": PairingStage.PAIRED,
                    "fertile_window": FertileWindow(
                        start=FIXED_NOW - timedelta(days=6), end=FIXED_NOW - timedelta(days=2)
                    ),
                },
                "Fertile\n Window?\n-passed-",
            ),
        ],
        ids=[
            "unpaired",
            "scanning",
            "pairing",
            "clinical",
            "no-window",
            "before",
            "within",
            "after",
        ],
    )
    def test_phrase(
        self, provider: FixedContextProvider, changes: dict[str, object], expected: str
    ) -> None:
        resolver = Resolver(build_registry([TEXT]), provider.with_changes(**changes))
        assert resolver.resolve("pair-with-ring-button-text", "en") == expected

    def test_window_bound_counts_as_now(self, provider: FixedContextProvider) -> None:
        window = FertileWindow(start=FIXED_NOW, end=FIXED_NOW + timedelta(days=4))
        changed = provider.with_changes(stage=PairingStage.PAIRED, fertile_window=window)
        resolver = Resolver(build_registry([TEXT]), changed)
        assert resolver.resolve("pair-with-ring-button-text", "en").endswith("NOW :)")


class TestOtherTemplates:
    """Date-bearing and preference-bearing templates."""

    @pytest.fixture
    def resolver(self, provider: FixedContextProvider) -> Resolver:
        return Resolver(build_registry([TEXT]), provider)

    def test_past_cycle_title(self, resolver: Resolver) -> None:
        title = resolver.resolve("past-cycle-title", "en", date(2026, 2, 1), "MMM d, yy")
        assert title == "Cycle Starting Feb 1, 26"

    def test_period_buttons_unset(self, resolver: Resolver) -> None:
        assert resolver.resolve("period-start-button-text", "en", "MMM d, yy") == (
            "Set\n Period\n Start"
        )
        assert resolver.resolve("period-end-button-text", "en", "MMM d, yy") == (
            "Set\n Period\n End"
        )

    def test_period_buttons_set(self, provider: FixedContextProvider) -> None:
        changed = provider.with_changes(
            period_start=date(2026, 3, 1), period_end=date(2026, 3, 6)
        )
        resolver = Resolver(build_registry([TEXT]), changed)
        assert resolver.resolve("period-start-button-text", "en", "MMM d, yy") == (
            "Period Start\n Mar 1, 26"
        )
        assert resolver.resolve("period-end-button-text", "en", "MMM d, yy") == (
            "Period End\n Mar 6, 26"
        )

    @pytest.mark.parametrize(("metric", "expected"), [(True, "kgs"), (False, "lbs")])
    def test_weight_unit_label(
        self, provider: FixedContextProvider, metric: bool, expected: str
    ) -> None:
        resolver = Resolver(build_registry([TEXT]), provider.with_changes(prefer_metric=metric))
        assert resolver.resolve("weight-unit-label", "en") == expected

    def test_event_label_today(self, resolver: Resolver) -> None:
        moment = FIXED_NOW - timedelta(hours=2)
        assert resolver.resolve("event-time-selector-label", "en", moment, EVENT_FORMATS) == (
            "Today around 4PM"
        )

    def test_event_label_other_day(self, resolver: Resolver) -> None:
        moment = datetime(2026, 3, 12, 9, tzinfo=UTC)
        assert resolver.resolve("event-time-selector-label", "en", moment, EVENT_FORMATS) == (
            "March 12, 9AM"
        )

    def test_event_label_uses_now_zone(self, resolver: Resolver) -> None:
        from datetime import timezone  # noqa: PLC0415

        # 23:30 on the 13th at UTC-5 is 04:30 on the 14th in UTC.
        moment = datetime(2026, 3, 13, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert resolver.resolve("event-time-selector-label", "en", moment, EVENT_FORMATS) == (
            "Today around 4AM"
        )


class TestAccountDialogs:
    """Dialogs that name the account holding the active cycle."""

    KEYS = ("create-account-while-cycle-active", "login-new-account-while-cycle-active")

    @pytest.mark.parametrize("key", KEYS)
    def test_names_account_email(self, provider: FixedContextProvider, key: str) -> None:
        changed = provider.with_changes(account_email="ada@example.com")
        dialog = Resolver(build_registry([CONFIRMATION_DIALOGS]), changed).resolve(key, "en")
        assert isinstance(dialog, Dialog)
        assert "on the account with email ada@example.com" in dialog.message
        assert dialog.title == "Are You Sure?"

    @pytest.mark.parametrize("key", KEYS)
    def test_without_email(self, provider: FixedContextProvider, key: str) -> None:
        dialog = Resolver(build_registry([CONFIRMATION_DIALOGS]), provider).resolve(key, "en")
        assert isinstance(dialog, Dialog)
        assert "on your current account" in dialog.message

    def test_confirm_texts(self, provider: FixedContextProvider) -> None:
        resolver = Resolver(build_registry([CONFIRMATION_DIALOGS]), provider)
        dialogs = [resolver.resolve(k, "en") for k in self.KEYS]
        confirm = [d.confirm_text for d in dialogs]  # type: ignore[union-attr]
        assert confirm == ["Create New Account", "Login Anyway"]

    def test_snapshot_argument_overrides_state(self, provider: FixedContextProvider) -> None:
        resolver = Resolver(build_registry([CONFIRMATION_DIALOGS]), provider)
        preview = ContextSnapshot(now=FIXED_NOW, account_email="preview@example.com")
        dialog = resolver.resolve(self.KEYS[0], "en", snapshot=preview)
        assert "preview@example.com" in dialog.message  # type: ignore[union-attr]
