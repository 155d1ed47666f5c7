"""Celery application configuration."""

from celery import Celery
from celery.schedules import crontab

from spreadsontoast.config import settings
from spreadsontoast.logging import configure_logging

configure_logging()

# Create Celery app
celery_app = Celery(
    "spreadsontoast",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["spreadsontoast.tasks.sync"],
)

# Celery configuration
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=600,  # 10 minutes max
    worker_prefetch_multiplier=1,
    task_acks_late=True,
)

# Beat schedule for periodic tasks
celery_app.conf.beat_schedule = {
    # Standings snapshot: daily at 6am ET (10am UTC)
    "sync-standings": {
        "task": "spreadsontoast.tasks.sync.sync_standings",
        "schedule": crontab(minute=0, hour=10),
    },
    # Schedule refresh: daily at 6am ET (10am UTC)
    "sync-schedule": {
        "task": "spreadsontoast.tasks.sync.sync_schedule",
        "schedule": crontab(minute=0, hour=10),
    },
}
