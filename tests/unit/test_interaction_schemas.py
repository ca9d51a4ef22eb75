import pytest

from genbridge.errors import InvalidInteraction, UnknownCommand
from genbridge.models.enums import CommandName
from genbridge.schemas.interactions import parse_command, parse_invocation


def test_parse_invocation(invocation_payload):
    invocation = parse_invocation(invocation_payload)
    assert invocation.data.name == CommandName.GENCAT
    assert invocation.prompt == "a tabby cat"

    origin = invocation.origin()
    assert origin.application_id == "app-1"
    assert origin.token == "interaction-token"
    assert origin.channel_id == "chan-1"
    assert origin.guild_id == "guild-1"
    assert origin.message_id == "msg-1"


def test_parse_invocation_keeps_extra_fields(invocation_payload):
    invocation_payload["member"] = {"user": {"id": "u-1"}}
    invocation = parse_invocation(invocation_payload)
    assert invocation.model_dump()["member"] == {"user": {"id": "u-1"}}


@pytest.mark.parametrize("field", ["application_id", "token", "channel_id", "channel"])
def test_parse_invocation_missing_origin_field(invocation_payload, field):
    del invocation_payload[field]
    with pytest.raises(InvalidInteraction):
        parse_invocation(invocation_payload)


def test_parse_invocation_rejects_unknown_command(invocation_payload):
    invocation_payload["data"]["name"] = "genfish"
    with pytest.raises(UnknownCommand):
        parse_invocation(invocation_payload)


def test_parse_invocation_rejects_ping(invocation_payload):
    invocation_payload["type"] = 1
    with pytest.raises(InvalidInteraction):
        parse_invocation(invocation_payload)


def test_parse_invocation_rejects_non_object():
    with pytest.raises(InvalidInteraction):
        parse_invocation(["not", "a", "job"])


def test_parse_command_defaults_option_shape():
    command = parse_command({"name": "gendog", "options": [{"value": "a corgi"}]})
    assert command.name == CommandName.GENDOG
    assert command.prompt == "a corgi"


def test_parse_command_requires_exactly_one_string_option():
    with pytest.raises(InvalidInteraction):
        parse_command({"name": "gendog", "options": []})
    with pytest.raises(InvalidInteraction):
        parse_command({"name": "gendog", "options": [{"value": "a"}, {"value": "b"}]})
    with pytest.raises(InvalidInteraction):
        parse_command({"name": "gendog", "options": [{"type": 4, "value": "7"}]})
    with pytest.raises(InvalidInteraction):
        parse_command({"name": "gendog", "options": [{"value": 7}]})


def test_parse_command_unknown_name():
    with pytest.raises(UnknownCommand):
        parse_command({"name": ["gendog"], "options": [{"value": "x"}]})
    with pytest.raises(InvalidInteraction):
        parse_command(None)
