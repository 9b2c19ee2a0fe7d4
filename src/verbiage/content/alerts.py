"""Alerts for user errors and failed operations.

ALERTS holds complete modal alerts. COMPOSITE_ALERTS holds single lines that
callers concatenate into one alert message (e.g. every invalid field of the
create-account form).
"""

from verbiage.catalog import Alert, ResourceTable, text

__all__ = ["ALERTS", "COMPOSITE_ALERTS"]

ALERTS = ResourceTable(
    "alerts",
    {
        "please-accept-location-permission": text(
            "Instructions for: user did not give permission for the app to collect "
            "coarse location.",
            en=Alert(
                title="Bluetooth requires location permission.",
                message=(
                    "Sorry, Android requires the location permission for any app that uses "
                    "Bluetooth.\n Please restart the app and accept the location permission, "
                    "or else ring pairing will not work.\n\n Thanks!"
                ),
            ),
        ),
        "privacy-policy-link-failed": text(
            "Linking to the Prima-Temp privacy policy failed.",
            en=Alert(
                title="Darn",
                message=(
                    "Sorry, the privacy policy page couldn't be opened.  Are you sure your "
                    "phone has internet access?  Please try this link again or open your "
                    "browser and search for Priya Privacy Policy.\n\n -Thanks!"
                ),
            ),
        ),
        "faq-link-failed": text(
            "Linking to the Prima-Temp faq page failed.",
            en=Alert(
                title="Darn",
                message=(
                    "Sorry, the FAQ page couldn't be opened.  Are you sure your phone has "
                    "internet access?  Please try this link again or open your browser and "
                    "search for Priya FAQ.\n\n -Thanks!"
                ),
            ),
        ),
        "support-phone-call-failed": text(
            "Initiating a support phone call failed.",
            en=Alert(
                title="Oops...",
                message=(
                    "That phone call didn't go through. Sorry for the inconvenience!\n Please "
                    "call the number directly and let us know about your question."
                ),
            ),
        ),
        "support-email-link-failed": text(
            "Linking to an auto-filled support email failed.",
            en=Alert(
                title="Oops...",
                message=(
                    "Sorry, our app wasn't able to start a support email for you.\n Please "
                    "email us directly at support@prima-temp.com and let us know about your "
                    "question.\n\n -Thanks!"
                ),
            ),
        ),
        "create-account-email-in-use": text(
            "Instructions for: user attempted to create account with an email already in use.",
            en=Alert(
                title="Oops!",
                message=(
                    "Looks like that email address is already in use. You can either login "
                    "with this email from the login page, or create a new account with a "
                    "different email address."
                ),
            ),
        ),
        "remote-create-account-failed": text(
            "Instructions for: user attempted to create account but the API call did not "
            "succeed.",
            en=Alert(
                title="Hmmm...",
                message=(
                    "Creating your account in the cloud didn't work. Do you have WiFi or "
                    "Cell data enabled?"
                ),
            ),
        ),
        "basic-info-invalid": text(
            "User did not completely fill out the basic info form.",
            en=Alert(title="Oops...", message="Looks like you're missing some information!"),
        ),
        "login-pre-validation-invalid": text(
            "Instructions for: user failed login pre-validation",
            en=Alert(
                title="Oops...",
                message="Make sure you filled in both an email and a password.",
            ),
        ),
        "login-local-email-correct-but-password-incorrect": text(
            "User is logging in as the same user they previously logged in as, but "
            "supplied an incorrect password.",
            en=Alert(title="Oops...", message="That password doesn't match the email you entered."),
        ),
        "login-local-success-remote-failed": text(
            "Instructions for: user logged in with email and password that matches their "
            "local storage data. This triggers a cloud sync, but the sync did not succeed.",
            en=Alert(
                title="Login Success!... but no cloud sync",
                message=(
                    "You logged in successfully but we couldn't get a cloud sync.  No big "
                    "deal, just make sure your wifi or cellular data is enabled and the sync "
                    "will be taken care of automatically."
                ),
            ),
        ),
        "remote-save-on-logout-failed-allowing": text(
            "Instructions for: user logged out, which triggers a remote save, and this "
            "save did not succeed.",
            en=Alert(
                title="Data Not Saved To Cloud",
                message=(
                    "We always try to save off your data to the cloud when you logout, but "
                    "this save didn't go through. (Maybe you have no WiFi or cell data?) "
                    "Don't worry, the info is still on your phone, but you should login some "
                    "time when you are on WiFi to get it saved in the cloud."
                ),
            ),
        ),
        "remote-login-incorrect-creds-and-no-local-user": text(
            "User is logging in to an existing account on a new device (or after having "
            "re-installed the app). This is necessarily a remote login, but the user has "
            "supplied an incorrect email/password combination for the cloud login.",
            en=Alert(
                title="Login Failed",
                message=(
                    "Sorry, your email and password combination doesn't match anything in "
                    "our database."
                ),
            ),
        ),
        "remote-login-incorrect-creds-and-different-local-user": text(
            "User is logging in as a different user. This is necessarily a remote login, "
            "but the user has supplied an incorrect email/password combination for the "
            "cloud login.",
            en=Alert(
                title="Login Failed",
                message=(
                    "This is a different email than you used last time, so we checked our "
                    "cloud database.\n\n That check didn't go through.  Please make sure your "
                    "device has internet access, and that your email and password are correct."
                ),
            ),
        ),
        "remote-login-api-call-failed": text(
            "User is logging in to an existing account on a new device (or after having "
            "re-installed the app). This is necessarily a remote login, but the api-call "
            "failed.",
            en=Alert(
                title="Login Failed",
                message=(
                    "Sorry, we weren't able to reach our cloud database to log you in.  Are "
                    "you sure you have wifi or cellular data enabled?"
                ),
            ),
        ),
        "cycle-setup-and-pair-instructions": text(
            "Instructions for: the user started a new cycle.",
            en=Alert(
                title="Your Next Steps",
                message=(
                    "A. Set your period start date\n B. As soon as your period ends, set "
                    "your period end date and pair the ring that day.\n\n Note: The ring "
                    "instruction leaflet shows you how to pair, but if you want a quick "
                    "reminder, here goes:\n (1) Tap the Pair button.\n (2) Place your ring in "
                    "the cradle and leave it there for at least 3 seconds.\n (3) Remove your "
                    "ring from the cradle and enter the pairing code if prompted.\n\n Done!"
                ),
            ),
        ),
        "enter-period-start": text(
            "Message for when user attempts to pair before setting period start date",
            en=Alert(title="Oops...", message="Please enter your period start date first."),
        ),
        "set-period-dates-before-pairing": text(
            "Message for when user attempts to pair before setting period start and end dates",
            en=Alert(
                title="Oops...",
                message="Please enter your period start and end dates before trying to pair.",
            ),
        ),
        "cycle-info-invalid": text(
            "Instructions for: user attempted to complete cycle but had not entered all "
            "information.",
            en=Alert(
                title="Looking For Instruction?",
                message=(
                    "Completing the cycle should be done after you've finished collecting "
                    "temperatures for the month.\n\n It looks like you haven't done that yet, "
                    "so start by entering your period start and end dates (when you know "
                    "them), and on the day your period ends pair the ring as directed in the "
                    "instructions."
                ),
            ),
        ),
        "pairing-too-long-after-period-end": text(
            "Message to display if user attempts to pair too many days after period has ended.",
            en=Alert(
                title="Sorry",
                message=(
                    "It looks like your period ended more than 2 days ago. We can't start "
                    "recording temperatures this late because the fertile window prediction "
                    "may not be accurate."
                ),
            ),
        ),
        "phone-bluetooth-is-off": text(
            "Instructions for: user's bluetooth is off.",
            en=Alert(
                title="Oops...",
                message=(
                    "Looks like your bluetooth is off. Please make sure it is turned on in "
                    "settings and enabled."
                ),
            ),
        ),
        "ring-discovered-but-pairing-failed": text(
            "Instructions for: the ring was discovered, but pairing failed.",
            en=Alert(
                title="Bluetooth Found Your Ring But Didn't Pair",
                message=(
                    "Looks like the ring didn't pair successfully, so let's try again (please "
                    "read all these steps before starting):\n\n  (1) Tap the Pair button.\n  "
                    "(2) Place your ring in the cradle and wait at least 3 seconds.\n (3) "
                    "Remove your ring from the cradle and enter the pairing code if prompted.\n "
                ),
            ),
        ),
        "scan-timed-out-without-finding-ring": text(
            "Instructions for: bluetooth scan timed out without discovering a ring.",
            en=Alert(
                title="Bluetooth Didn't Find Your Ring",
                message=(
                    "We scanned for your ring but never found it.  Make sure your bluetooth "
                    "is on and let's try again:\n\n (1) Wait 30 seconds.\n  (2) Tap the pair "
                    "button.\n   (3) Place your ring in the cradle and leave it there for at "
                    "least 3 seconds.\n (4) Remove your ring from the cradle and enter the "
                    "pairing code if prompted.\n "
                ),
            ),
        ),
        "incorrect-pairing-code": text(
            "Instructions for: the ring was discovered, but Android bluetooth bond was denied.",
            en=Alert(
                title="Please Check Your Pairing Code and Try to Pair Again.",
                message=(
                    "It looks like either you entered the incorrect pairing code, or "
                    "accidentally cancelled the pairing code entry.\n\n Here's how to fix the "
                    "problem:\n (1) Double check the pairing code that came with your Priya "
                    "Ring.\n  (2) Tap the Pair button.\n (3) Place your ring in the cradle and "
                    "wait at least 3 seconds.\n (4) Remove your ring from the cradle and enter "
                    "the pairing code if prompted.\n "
                ),
            ),
        ),
        "successful-ring-pairing": text(
            "Instructions for: the ring was successfully paired... what to do next.",
            en=Alert(
                title="That Worked!",
                message=(
                    "Great job, you successfully paired your ring!  What next?\n  (1) Insert "
                    "your ring as directed in the instruction manual.\n (2) Keep your phone "
                    "near you and leave the bluetooth on for the duration of your cycle.\n "
                    "(3) Keep the Priya app running (it is fine to have it running in the "
                    "background).\n  (4) When your temperatures indicate a fertile window, "
                    "you'll receive a notification.\n  (5) If you're a data addict like we "
                    "are, go ahead and check out your temperature graph from time to time.  "
                    "It's pretty cool.\n Note: Rest easy... if anything isn't going right with "
                    "bluetooth syncing or cloud syncing, we'll let you know and tell you how "
                    "to fix the problem!"
                ),
            ),
        ),
        "cycle-completed": text(
            "Instructions for: cycle was completed successfully, what the user should do next.",
            en=Alert(
                title="Cycle Complete!",
                message=(
                    "We hope this month's experience was a good one. Please remember to "
                    "remove your ring and power it down if you haven't already.\n  When you "
                    "are ready to start a new cycle (this should be within 48 hours of your "
                    'period ending), just tap "New Cycle" in the right side menu.\n\n Thanks! '
                    "- The Priya Ring Team"
                ),
            ),
        ),
    },
)

COMPOSITE_ALERTS = ResourceTable(
    "composite-alerts",
    {
        "create-account-invalid-email": text(
            "During account creation, user entered an invalid email address",
            en="That doesn't look like a valid email address.\n",
        ),
        "create-account-invalid-password": text(
            "During account creation, user entered an invalid password",
            en="Your password should be at least six characters.\n",
        ),
        "create-account-invalid-subject-id": text(
            "During account creation, user entered an invalid subject id",
            en="Subject id should be six characters provided by your trial administrator.\n",
        ),
        "create-account-must-accept-terms": text(
            "During account creation, user failed to accept the Terms of Use",
            en='Please tap "Accept Terms of Use" to continue.',
        ),
        "create-account-empty-fields": text(
            "During account creation, user left some fields empty",
            en="Looks like you left some fields empty!",
        ),
    },
)
