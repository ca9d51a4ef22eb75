import logging
from typing import Any, Dict
from kombu.exceptions import KombuError
from redis.exceptions import RedisError

from genbridge.errors import EnqueueError
from worker.tasks import fulfill_command

logger = logging.getLogger(__name__)


class JobQueue:
    def __init__(self, queue_name: str):
        self.queue_name = queue_name

    def enqueue(self, payload: Dict[str, Any]) -> str:
        try:
            result = fulfill_command.apply_async(args=[payload], queue=self.queue_name)
        except (KombuError, RedisError) as e:
            raise EnqueueError(str(e), retryable=True)
        logger.info("queued job %s on %s", result.id, self.queue_name)
        return result.id
