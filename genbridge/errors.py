from typing import Optional


class BridgeError(RuntimeError):
    default_code = "BRIDGE_ERROR"

    def __init__(self, message: str, code: Optional[str] = None, retryable: bool = False,
                 details: Optional[dict] = None):
        # keep every field in args so Celery can rebuild the exception from its result backend
        super().__init__(message, code, retryable, details)
        self.message = message
        self.code = code or self.default_code
        self.retryable = retryable
        self.details = details

    def __str__(self) -> str:
        return self.message


class InvalidInteraction(BridgeError):
    default_code = "INVALID_PAYLOAD"


class UnknownCommand(InvalidInteraction):
    default_code = "UNKNOWN_COMMAND"


class EnqueueError(BridgeError):
    default_code = "ENQUEUE_FAILED"


class GenerationError(BridgeError):
    default_code = "PROVIDER_ERROR"


class NotificationError(BridgeError):
    default_code = "NOTIFICATION_FAILED"


class RegistrationError(BridgeError):
    default_code = "REGISTRATION_FAILED"
