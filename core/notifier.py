import logging
import time

from plyer import notification

APP_NAME = "CPY Profiles"

_last_alert = 0


def alert(message, title=APP_NAME, cooldown=5):
    """Show a desktop notification, at most once per cooldown window."""
    global _last_alert
    now = time.time()

    if now - _last_alert < cooldown:
        return False

    _last_alert = now

    try:
        notification.notify(
            title=title,
            message=message,
            app_name=APP_NAME,
            timeout=3
        )
    except Exception:
        logging.error("Notification backend failure", exc_info=True)
        return False
    return True
