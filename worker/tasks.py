import logging
from typing import Any, Dict, Optional

from genbridge.celery_app import celery_app
from genbridge.config import Settings, get_settings
from genbridge.errors import GenerationError, InvalidInteraction
from genbridge.models.enums import JobStatus
from genbridge.services.fulfillment_service import FulfillmentService
from genbridge.services.generation_client import GenerationClient
from genbridge.services.notification_client import NotificationClient

logger = logging.getLogger(__name__)


def build_fulfillment_service(settings: Optional[Settings] = None) -> FulfillmentService:
    settings = settings or get_settings()
    generator = GenerationClient(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        size=settings.image_size,
        connect_timeout_s=settings.http_connect_timeout_s,
        read_timeout_s=settings.http_read_timeout_s,
    )
    notifier = NotificationClient(
        bot_token=settings.discord_token,
        api_base=settings.discord_api_base,
        mode=settings.notify_mode,
        connect_timeout_s=settings.http_connect_timeout_s,
        read_timeout_s=settings.http_read_timeout_s,
    )
    return FulfillmentService(generator, notifier)


@celery_app.task(bind=True, acks_late=True)
def fulfill_command(self, payload: Dict[str, Any]) -> str:
    settings = get_settings()
    service = build_fulfillment_service(settings)

    try:
        outcome = service.process_one(payload)
    except InvalidInteraction as e:
        # redelivering a malformed payload can never succeed
        logger.error("dropping malformed job %s [%s]: %s", self.request.id, e.code, e)
        return JobStatus.INVALID_PAYLOAD.value
    except GenerationError as e:
        if not e.retryable:
            logger.error("generation failed for job %s [%s]: %s", self.request.id, e.code, e)
            # no retry, but the task must end in FAILURE so the broker sees it
            raise
        logger.warning("generation failed for job %s [%s], attempt %d: %s",
                       self.request.id, e.code, self.request.retries + 1, e)
        raise self.retry(
            exc=e,
            countdown=settings.job_retry_countdown_s * (2 ** self.request.retries),
            max_retries=settings.job_max_retries,
        )

    return outcome.status.value

