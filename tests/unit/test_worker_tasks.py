from unittest.mock import MagicMock

import pytest

from genbridge.errors import GenerationError
from genbridge.schemas.interactions import GenerationResult
from genbridge.services.fulfillment_service import FulfillmentService
from worker.tasks import build_fulfillment_service, fulfill_command


@pytest.fixture
def generator():
    generator = MagicMock()
    generator.generate.return_value = GenerationResult(url="https://img/cat1.png", prompt="a tabby cat")
    return generator


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture(autouse=True)
def service(mocker, generator, notifier):
    service = FulfillmentService(generator, notifier)
    mocker.patch("worker.tasks.build_fulfillment_service", return_value=service)
    return service


def test_fulfill_command_delivers(invocation_payload, notifier):
    result = fulfill_command.apply(args=[invocation_payload])

    assert result.successful()
    assert result.get() == "DELIVERED"
    notifier.notify.assert_called_once()


def test_provider_network_error_does_not_notify(invocation_payload, generator, notifier, caplog):
    generator.generate.side_effect = GenerationError("connection refused", "PROVIDER_UNREACHABLE", True)

    result = fulfill_command.apply(args=[invocation_payload])

    # retried by Celery, then surfaced as a task failure
    assert result.failed()
    assert isinstance(result.result, GenerationError)
    assert generator.generate.call_count > 1
    notifier.notify.assert_not_called()
    assert "PROVIDER_UNREACHABLE" in caplog.text


def test_non_retryable_provider_error(invocation_payload, generator, notifier):
    generator.generate.side_effect = GenerationError("rejected", "INVALID_PROMPT", False)

    result = fulfill_command.apply(args=[invocation_payload])

    assert result.failed()
    assert isinstance(result.result, GenerationError)
    assert result.result.code == "INVALID_PROMPT"
    assert generator.generate.call_count == 1
    notifier.notify.assert_not_called()


def test_malformed_payload_is_dropped(generator):
    result = fulfill_command.apply(args=[{"type": 2}])
    assert result.get() == "INVALID_PAYLOAD"
    generator.generate.assert_not_called()


def test_build_fulfillment_service_uses_settings(settings):
    # the name imported at the top is the unpatched builder
    service = build_fulfillment_service(settings)

    assert service.generator.api_key == "sk-test"
    assert service.generator.base_url == "https://provider.test/v1"
    assert service.notifier.bot_token == "bot-token"
    assert service.notifier.mode == "followup"
