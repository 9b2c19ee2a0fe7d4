"""Contact details, canned emails, and generic UI defaults."""

from verbiage.catalog import EmailDraft, ResourceTable, text

__all__ = ["DEFAULTS", "EMAILS", "TEXT_CONSTANTS"]

TEXT_CONSTANTS = ResourceTable(
    "text-constants",
    {
        "support-phone": text(
            "The Priya support phone number",
            en="(833) 386-5222",
        ),
        "priya-support-email": text(
            "The email address for support questions.",
            en="support@prima-temp.com",
        ),
        "priya-faq-url": text(
            "The url for the Priya FAQ page.",
            en="https://priyaring.com/faqs-1/",
        ),
        "priya-privacy-policy-url": text(
            "The url for the Priya Privacy Policy.",
            en="https://priyaring.com/privacy-policy",
        ),
        "priya-privacy-policy-url-pretty": text(
            "The url for the Priya Privacy Policy, shortened for display text.",
            en="priyaring.com/privacy-policy",
        ),
    },
)

EMAILS = ResourceTable(
    "emails",
    {
        "terms-and-conditions-email-text": text(
            "Email subject and body for when the user has questions regarding the "
            "terms and conditions.",
            en=EmailDraft(
                subject="Regarding Terms and Conditions",
                body=(
                    "I have a question about the terms and conditions:\n\n"
                    "[ENTER YOUR QUESTION HERE]"
                ),
            ),
        ),
    },
)

DEFAULTS = ResourceTable(
    "defaults",
    {
        "oops": text(
            "A friendly alert title for user data entry errors. Used as default.",
            en="Oops...",
        ),
        "default-okay-text": text(
            "Default text on the button of an alert.",
            en="OK",
        ),
        "default-text-cancel-confirmed-action": text(
            "Text on the button to cancel.",
            en="Cancel",
        ),
        "default-text-do-confirmed-action": text(
            "Text on the button to proceed with confirmed action.",
            en="Proceed",
        ),
        "notification-alert-title": text(
            "Title of the alert modal for notifications",
            en="Important Information",
        ),
        "default-save-text": text(
            "Default text for saving actions.",
            en="Save",
        ),
        "default-done-text": text(
            "Default text for finishing actions.",
            en="Done",
        ),
        "default-cancel-text": text(
            "Default text for cancelling actions.",
            en="Cancel",
        ),
        "default-yes": text(
            "Default text for answering 'Yes'.",
            en="Yes",
        ),
        "default-no": text(
            "Default text for answering 'No'.",
            en="No",
        ),
    },
)
