# license_manager/tasks/scheduler.py
from __future__ import annotations

import atexit
import os

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger


def start_scheduler(app):
    """
    Runs the expiration check once a day (NOTIFY_CRON_HOUR:NOTIFY_CRON_MINUTE).
    - Job runs inside an app context.
    - Under the debug reloader only the serving process starts it.
    - Skipped entirely when SCHEDULER_ENABLED is off (tests, CLI).
    """
    if not app.config.get("SCHEDULER_ENABLED", True):
        app.logger.info("[scheduler] disabled by config.")
        return None

    # Werkzeug reloader spawns two processes; WERKZEUG_RUN_MAIN=true marks the real one.
    if app.debug and os.environ.get("WERKZEUG_RUN_MAIN") != "true":
        app.logger.info("[scheduler] Debug reloader secondary process: scheduler skipped.")
        return None

    from license_manager.tasks.expiration_check import run_expiration_check_job

    scheduler = BackgroundScheduler(timezone=app.config.get("SCHEDULER_TIMEZONE", "UTC"))

    def _job_wrapper():
        try:
            run_expiration_check_job(app)
        except Exception as ex:
            app.logger.exception(f"[scheduler] expiration_check_job error: {ex}")

    hour = app.config.get("NOTIFY_CRON_HOUR", 0)
    minute = app.config.get("NOTIFY_CRON_MINUTE", 0)
    scheduler.add_job(
        func=_job_wrapper,
        trigger=CronTrigger(hour=hour, minute=minute),
        id="expiration_check_job",
        replace_existing=True,
        max_instances=1,
        coalesce=True,
        misfire_grace_time=3600,
    )

    scheduler.start()
    app.logger.info(f"[scheduler] Expiration check scheduled daily at {hour:02d}:{minute:02d}.")

    app.extensions["apscheduler"] = scheduler

    @atexit.register
    def _shutdown_scheduler():
        if scheduler.running:
            scheduler.shutdown(wait=False)

    return scheduler
