from celery import Celery
from celery.signals import setup_logging

from genbridge.config import REDIS_URL, QUEUE_NAME
from genbridge.logging_config import configure_logging

celery_app = Celery("genbridge", broker=REDIS_URL, backend=REDIS_URL, include=["worker.tasks"])

celery_app.conf.task_default_queue = QUEUE_NAME
celery_app.conf.task_serializer = "json"
celery_app.conf.accept_content = ["json"]

# At-least-once: ack only after the task body finished
celery_app.conf.task_acks_late = True
celery_app.conf.task_reject_on_worker_lost = True
celery_app.conf.worker_prefetch_multiplier = 1


@setup_logging.connect
def _setup_logging(**kwargs):
    configure_logging()
