"""Background notification messages."""

from verbiage.catalog import ResourceTable, text

__all__ = ["NOTIFICATIONS"]

NOTIFICATIONS = ResourceTable(
    "notifications",
    {
        "ring-expired": text(
            "Notification message to present when the ring has expired.",
            en=(
                "Looks like your ring was first activated over 90 days ago.  This ring is "
                "only approved to work for 90 days, so unfortunately we have to stop pairing "
                "with it.  Please follow the instructions from the user manual to remove the "
                "ring and complete your cycle."
            ),
        ),
        "fertile-window": text(
            "Notification message to present when an ovulation prediction is received.",
            en="Your fertile window prediction has arrived!",
        ),
        "temp-update-without-cloud-sync": text(
            "Notification message to present when there is a bluetooth temperature sync "
            "but no accompanying cloud sync.",
            en=(
                "You just received temperatures from the ring but they didn't save to the "
                "cloud, which means you could miss a fertile window prediction.\n\n  To fix "
                "this, just make sure you have either wifi or cellular data enabled."
            ),
        ),
        "too-long-since-bluetooth-sync": text(
            "Notification message to present when it has been too long since the last "
            "bluetooth sync.",
            en=(
                "It's been too long since your phone and ring have synced over bluetooth.  "
                "Your ring attempts to sync about every 2 hours but may miss out if your "
                "bluetooth is off, or if your phone is too far away, or if the Priya app is "
                "not running (Priya running in the background is okay).  To avoid losing "
                "data, keep your phone near your body until the next sync comes in, and "
                "consult the user manual if you are still having trouble.\n\n Thanks!  "
                "- the Priya Team."
            ),
        ),
        "ring-will-soon-expire": text(
            "Notification message to present when the ring will soon expire.",
            en=(
                "Looks like your ring was first activated almost 88 days ago.  This ring "
                "will stop collecting temperatures after 90 days, and we just wanted to give "
                "you an advanced notice."
            ),
        ),
        "remind-to-complete-cycle": text(
            "Notification message to present as a reminder when it is time for the user "
            "to complete the cycle.",
            en=(
                "Judging from when you started this cycle, it looks like it's time to tap "
                '"Complete Cycle" in the Priya app side menu.\n\n  Thanks!'
            ),
        ),
    },
)
