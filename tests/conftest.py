import json
import pytest
from fastapi.testclient import TestClient
from nacl.signing import SigningKey

from genbridge.config import Settings, get_settings
from genbridge.dependencies import get_job_queue
from genbridge.main import app


class RecordingQueue:
    def __init__(self):
        self.jobs = []

    def enqueue(self, payload):
        self.jobs.append(payload)
        return f"job-{len(self.jobs)}"


@pytest.fixture
def signing_key():
    return SigningKey.generate()


@pytest.fixture
def settings(signing_key):
    return Settings(
        discord_public_key=signing_key.verify_key.encode().hex(),
        discord_application_id="app-1",
        discord_token="bot-token",
        openai_api_key="sk-test",
        openai_base_url="https://provider.test/v1",
        discord_api_base="https://discord.test/api/v10",
    )


@pytest.fixture
def queue():
    return RecordingQueue()


@pytest.fixture
def client(settings, queue):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_job_queue] = lambda: queue
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def signed(signing_key):
    """Build a (body, headers) pair signed the way Discord signs interactions."""

    def _signed(payload, timestamp="1700000000"):
        body = json.dumps(payload).encode("utf-8")
        signature = signing_key.sign(timestamp.encode("utf-8") + body).signature.hex()
        headers = {
            "Content-Type": "application/json",
            "X-Signature-Timestamp": timestamp,
            "X-Signature-Ed25519": signature,
        }
        return body, headers

    return _signed


@pytest.fixture
def invocation_payload():
    return {
        "type": 2,
        "application_id": "app-1",
        "token": "interaction-token",
        "channel_id": "chan-1",
        "channel": {"guild_id": "guild-1", "last_message_id": "msg-1"},
        "data": {
            "id": "cmd-1",
            "name": "gencat",
            "type": 1,
            "options": [{"name": "prompt", "type": 3, "value": "a tabby cat"}],
        },
    }
