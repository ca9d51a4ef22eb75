from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from genbridge.errors import InvalidInteraction, UnknownCommand
from genbridge.models.enums import CommandName, InteractionType, OptionType


class CommandOption(BaseModel):
    name: str = "prompt"
    type: OptionType = OptionType.STRING
    value: str


class CommandData(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: CommandName
    options: List[CommandOption]

    @field_validator("options")
    @classmethod
    def single_option(cls, options: List[CommandOption]) -> List[CommandOption]:
        if len(options) != 1:
            raise ValueError(f"expected exactly one option, got {len(options)}")
        return options

    @property
    def prompt(self) -> str:
        return self.options[0].value


class ChannelRef(BaseModel):
    model_config = ConfigDict(extra="allow")

    guild_id: str
    last_message_id: str


class OriginCoordinates(BaseModel):
    """Everything needed to address a reply to the conversation a command came from."""

    application_id: str
    token: str
    channel_id: str
    guild_id: str
    message_id: str


class CommandInvocation(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: InteractionType
    application_id: str
    token: str
    channel_id: str
    channel: ChannelRef
    data: CommandData

    @property
    def prompt(self) -> str:
        return self.data.prompt

    def origin(self) -> OriginCoordinates:
        return OriginCoordinates(
            application_id=self.application_id,
            token=self.token,
            channel_id=self.channel_id,
            guild_id=self.channel.guild_id,
            message_id=self.channel.last_message_id,
        )


class GenerationResult(BaseModel):
    url: str
    prompt: str


class GenerateRequest(BaseModel):
    prompt: str


def _recognized(name: Any) -> bool:
    return name in [c.value for c in CommandName]


def parse_command(data: Optional[dict]) -> CommandData:
    """Validate the ``data`` block of an application command interaction.

    Unrecognized command names raise ``UnknownCommand``; any other shape problem
    raises ``InvalidInteraction``.
    """
    if not isinstance(data, dict):
        raise InvalidInteraction("interaction has no command data")
    if not _recognized(data.get("name")):
        raise UnknownCommand(f"unknown command {data.get('name')!r}")
    try:
        return CommandData.model_validate(data)
    except ValidationError as e:
        raise InvalidInteraction(
            "malformed command data",
            details={"errors": e.errors(include_url=False, include_context=False)},
        )


def parse_invocation(payload: Any) -> CommandInvocation:
    if not isinstance(payload, dict):
        raise InvalidInteraction("job payload is not an object")
    data = payload.get("data")
    if isinstance(data, dict) and not _recognized(data.get("name")):
        raise UnknownCommand(f"unknown command {data.get('name')!r}")
    try:
        invocation = CommandInvocation.model_validate(payload)
    except ValidationError as e:
        raise InvalidInteraction(
            "malformed command invocation",
            details={"errors": e.errors(include_url=False, include_context=False)},
        )
    if invocation.type != InteractionType.APPLICATION_COMMAND:
        raise InvalidInteraction(f"interaction type {int(invocation.type)} is not a command")
    return invocation
