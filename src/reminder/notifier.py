"""Fire-and-forget desktop notifications via the platform's notification tool."""

import platform
import subprocess

import structlog

logger = structlog.get_logger()


def _applescript_quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class DesktopNotifier:
    """Shows a desktop notification with notify-send (Linux) or osascript (macOS)."""

    def __init__(self, app_name: str = "moodlog"):
        self.app_name = app_name

    def _command(self, title: str, message: str) -> list[str] | None:
        system = platform.system()
        if system == "Linux":
            return ["notify-send", "-a", self.app_name, title, message]
        if system == "Darwin":
            script = (
                f"display notification {_applescript_quote(message)} "
                f"with title {_applescript_quote(title)}"
            )
            return ["osascript", "-e", script]
        return None

    def notify(self, title: str, message: str) -> bool:
        """Launch the notification without waiting. Returns False if nothing could be shown."""
        cmd = self._command(title, message)
        if cmd is None:
            logger.debug("notifier.unsupported_platform", platform=platform.system())
            return False
        try:
            subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as e:
            logger.warning("notifier.failed", command=cmd[0], error=str(e))
            return False
        logger.debug("notifier.sent", title=title)
        return True
