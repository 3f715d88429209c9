"""Celery application for vendor roster background tasks.

Start a worker with:
    celery -A workers.celery_app worker --loglevel=INFO

With SEQUENCE_BACKEND=memory the counter lives in each worker process, so
run a single process instead:
    celery -A workers.celery_app worker --pool=solo --loglevel=INFO
"""

from celery import Celery
from celery.signals import setup_logging

from config import get_settings
from observability.logging_config import configure_logging

settings = get_settings()

celery_app = Celery(
    "roster",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=["workers.vendor_creation_worker"],
)

celery_app.conf.update(
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],
    timezone="UTC",
    enable_utc=True,
)


@setup_logging.connect
def _configure_worker_logging(**kwargs):
    """Replace Celery's logging setup with the JSON configuration."""
    configure_logging(settings.LOG_LEVEL, json_format=settings.LOG_JSON)
