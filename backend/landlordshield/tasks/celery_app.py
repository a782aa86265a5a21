"""Celery application configuration."""

from celery import Celery

from landlordshield.config import get_settings

_settings = get_settings()

celery = Celery(
    "landlordshield",
    broker=_settings.redis_url,
    backend=_settings.redis_url,
)

celery.conf.update(
    # Serialisation
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    # Reliability
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    worker_prefetch_multiplier=1,
    # Timeouts
    task_soft_time_limit=120,
    task_time_limit=150,
    # Result expiry
    result_expires=3600,
    # Timezone
    timezone="UTC",
    enable_utc=True,
)

# Explicitly import task modules so they register with celery
import landlordshield.tasks.compliance_crons  # noqa: F401, E402
