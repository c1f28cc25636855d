from .notifier import DesktopNotifier
from .scheduler import ReminderScheduler, validate_reminder_time

__all__ = ["ReminderScheduler", "DesktopNotifier", "validate_reminder_time"]
