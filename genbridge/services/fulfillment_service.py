import logging
from typing import Any, Iterable, List

from genbridge.errors import GenerationError, InvalidInteraction, NotificationError
from genbridge.models.enums import JobStatus
from genbridge.schemas.jobs import JobOutcome
from genbridge.schemas.interactions import parse_invocation
from genbridge.services.generation_client import GenerationClient
from genbridge.services.notification_client import NotificationClient

logger = logging.getLogger(__name__)


class FulfillmentService:
    def __init__(self, generator: GenerationClient, notifier: NotificationClient):
        self.generator = generator
        self.notifier = notifier

    def process_one(self, payload: Any, index: int = 0) -> JobOutcome:
        """Generate an image for one queued command and post it back.

        ``InvalidInteraction`` and ``GenerationError`` propagate so the caller can
        decide about redelivery. Notification failures are logged and reported in the
        outcome; the job is not re-queued for them.
        """
        invocation = parse_invocation(payload)
        prompt = invocation.prompt
        logger.info("fulfilling %s for prompt %r", invocation.data.name.value, prompt)

        result = self.generator.generate(prompt)
        origin = invocation.origin()

        try:
            self.notifier.notify(result, origin)
        except NotificationError as e:
            logger.error("notification failed [%s]: %s", e.code, e)
            return JobOutcome(index=index, status=JobStatus.NOTIFICATION_FAILED,
                              error_code=e.code, message=str(e))

        return JobOutcome(index=index, status=JobStatus.DELIVERED)

    def process_batch(self, payloads: Iterable[Any]) -> List[JobOutcome]:
        outcomes = []
        for index, payload in enumerate(payloads):
            try:
                outcome = self.process_one(payload, index)
            except InvalidInteraction as e:
                logger.error("dropping malformed job %d [%s]: %s", index, e.code, e)
                outcome = JobOutcome(index=index, status=JobStatus.INVALID_PAYLOAD,
                                     error_code=e.code, message=str(e))
            except GenerationError as e:
                logger.error("generation failed for job %d [%s]: %s", index, e.code, e)
                outcome = JobOutcome(index=index, status=JobStatus.GENERATION_FAILED,
                                     error_code=e.code, message=str(e))
            outcomes.append(outcome)
        return outcomes
