"""Daily reminder scheduling."""

from typing import Callable, Optional

import click
import structlog
from apscheduler.events import EVENT_JOB_ERROR
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from journal.config_store import is_valid_reminder_time

logger = structlog.get_logger().bind(source="reminder")

JOB_ID = "daily_checkin"


def validate_reminder_time(value: str) -> str:
    """click value_proc: return the stripped HH:MM value or raise BadParameter to re-prompt."""
    value = (value or "").strip()
    if not is_valid_reminder_time(value):
        raise click.BadParameter("Invalid time format. Use HH:MM (24-hour), e.g. 08:30.")
    return value


def daily_trigger(reminder_time: str) -> CronTrigger:
    """CronTrigger firing once a day at HH:MM in the local timezone."""
    hour, minute = reminder_time.split(":")
    return CronTrigger(hour=int(hour), minute=int(minute))


class ReminderScheduler:
    """Runs a callback every day at a fixed wall-clock time.

    Two states only: not started, or firing daily. There is no cancel
    besides stop(), which shuts the whole scheduler down.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        misfire_grace_seconds: int = 300,
        scheduler: Optional[BackgroundScheduler] = None,
    ):
        self.callback = callback
        self.misfire_grace_seconds = misfire_grace_seconds
        self.scheduler = scheduler or BackgroundScheduler()
        self.reminder_time: Optional[str] = None

    def _run(self):
        logger.info("reminder.fired", time=self.reminder_time)
        self.callback()

    def _on_job_error(self, event):
        logger.error(
            "reminder.job_error",
            job_id=event.job_id,
            exception=str(event.exception),
            traceback=event.traceback,
        )

    def schedule(self, reminder_time: str):
        """Register (or replace) the daily job. Returns the APScheduler job."""
        validate_reminder_time(reminder_time)
        self.reminder_time = reminder_time
        return self.scheduler.add_job(
            self._run,
            trigger=daily_trigger(reminder_time),
            id=JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
            misfire_grace_time=self.misfire_grace_seconds,
        )

    def start(self, reminder_time: str):
        """Schedule the daily job and start the background scheduler."""
        job = self.schedule(reminder_time)
        self.scheduler.add_listener(self._on_job_error, EVENT_JOB_ERROR)
        self.scheduler.start()
        logger.info(
            "reminder.started",
            time=reminder_time,
            next_run=str(getattr(job, "next_run_time", None)),
        )
        return job

    def stop(self):
        """Stop scheduler."""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
        logger.info("reminder.stopped")
