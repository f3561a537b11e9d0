# focusflow/utils/notifications.py
import logging

from plyer import notification
from rich.console import Console

console = Console()
logger = logging.getLogger(__name__)

APP_NAME = "Focus Flow"


def notify_cli(message: str, out: Console = console):
    out.print(f"[bold magenta]🔔 {message}[/]", highlight=False)


def notify_desktop(title: str, message: str, sound: bool = True,
                   out: Console = console) -> bool:
    """
    Show a desktop notification. Returns False when the platform backend is
    missing or fails; the failure is logged and reported on the console.
    """
    try:
        notification.notify(title=title, message=message, app_name=APP_NAME)
    except Exception as e:
        logger.warning(f"Desktop notification failed: {e}", exc_info=True)
        notify_cli(message, out)
        return False
    finally:
        if sound:
            out.bell()
    return True
