from enum import Enum, IntEnum


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2


class InteractionResponseType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4


class OptionType(IntEnum):
    STRING = 3


class CommandName(str, Enum):
    GENDOG = "gendog"
    GENCAT = "gencat"


class JobStatus(str, Enum):
    DELIVERED = "DELIVERED"
    GENERATION_FAILED = "GENERATION_FAILED"
    NOTIFICATION_FAILED = "NOTIFICATION_FAILED"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
