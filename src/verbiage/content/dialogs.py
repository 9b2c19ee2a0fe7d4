"""Confirmation dialogs for irreversible actions.

The account-switching dialogs name the email of the account that holds the
active cycle, so they are templates reading ``ctx.state.account_email``.
"""

from verbiage.catalog import Dialog, ResourceTable, template, text
from verbiage.runtime.context import TemplateContext

__all__ = ["CONFIRMATION_DIALOGS"]


def _active_cycle_owner(ctx: TemplateContext) -> str:
    email = ctx.state.account_email
    if email:
        return f"on the account with email {email}"
    return "on your current account"


def _create_account_while_cycle_active(ctx: TemplateContext) -> Dialog:
    return Dialog(
        title="Are You Sure?",
        message=(
            f"You have a cycle that isn't completed {_active_cycle_owner(ctx)}.\n\n"
            " You can only record cycles from one account at a time, so creating a new "
            "account will cause you to lose that active cycle."
        ),
        confirm_text="Create New Account",
    )


def _login_new_account_while_cycle_active(ctx: TemplateContext) -> Dialog:
    return Dialog(
        title="Are You Sure?",
        message=(
            f"You have a cycle that isn't completed {_active_cycle_owner(ctx)}.\n\n"
            " You can only record cycles from one account at a time, so logging in with a "
            "different email will cause you to lose that active cycle."
        ),
        confirm_text="Login Anyway",
    )


CONFIRMATION_DIALOGS = ResourceTable(
    "confirmation-dialogs",
    {
        "create-account-while-cycle-active": template(
            "Confirmation text to present when a user attempts to create and login to a "
            "different account while they have an active cycle.",
            en=_create_account_while_cycle_active,
        ),
        "login-new-account-while-cycle-active": template(
            "Confirmation text to present when a user attempts to switch accounts while "
            "they have an active cycle.",
            en=_login_new_account_while_cycle_active,
        ),
        "reset-pairing": text(
            "Confirmation text to present when a user attempts to reset ring pairing "
            "during an active cycle.",
            en=Dialog(
                title="Wait! Are You Sure?",
                message=(
                    "(1) Reasons to reset pairing:\n If your ring has powered off (maybe by "
                    "accidental exposure to a magnet), you will no longer be paired. Tapping "
                    '"Reset Pairing" will allow you to re-pair. There is no other reason to '
                    "reset pairing.\n\n (2) What happens next if you reset pairing?\n The "
                    '"Pair Ring" button will re-appear and you will be able to pair in the '
                    "usual way, that is:  place the ring in the cradle, tap the \"Pair Ring\" "
                    "button, then after at least 3 seconds remove the ring from the cradle."
                ),
                confirm_text="Reset Pairing",
            ),
        ),
        "complete-cycle": text(
            "Confirmation text to present when a user attempts to complete the active cycle.",
            en=Dialog(
                title="Done For This Month?",
                message=(
                    "If you're done collecting temperatures for this month, and you have "
                    'entered all of your cycle notes, tap "Complete".  This will stop '
                    "temperature collection and make your cycle read-only."
                ),
                confirm_text="Complete",
            ),
        ),
    },
)
