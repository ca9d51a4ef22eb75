import logging
import requests
from typing import Any, Dict, List

from genbridge.errors import RegistrationError
from genbridge.models.enums import CommandName, OptionType

logger = logging.getLogger(__name__)

DESCRIPTIONS = {
    CommandName.GENDOG: "Generate a dog",
    CommandName.GENCAT: "Generate a cat",
}


def command_definitions() -> List[Dict[str, Any]]:
    return [
        {
            "name": name.value,
            "description": DESCRIPTIONS[name],
            "options": [{
                "type": int(OptionType.STRING),
                "name": "prompt",
                "description": "Image prompt",
                "required": True,
            }],
        }
        for name in CommandName
    ]


class CommandRegistrar:
    def __init__(self, bot_token: str, application_id: str, api_base: str,
                 connect_timeout_s: float = 3.0, read_timeout_s: float = 30.0):
        self.bot_token = bot_token
        self.application_id = application_id
        self.api_base = api_base.rstrip("/")
        self.timeout = (connect_timeout_s, read_timeout_s)

    def register(self) -> List[Dict[str, Any]]:
        # PUT overwrites the whole command set, so repeating it is harmless
        url = f"{self.api_base}/applications/{self.application_id}/commands"
        headers = {"Content-Type": "application/json", "Authorization": f"Bot {self.bot_token}"}
        commands = command_definitions()

        try:
            resp = requests.put(url, json=commands, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Error registering commands: %s", e)
            raise RegistrationError(str(e), "DISCORD_UNREACHABLE")

        if not resp.ok:
            logger.error("Error registering commands: HTTP %s %s", resp.status_code, resp.text)
            raise RegistrationError(f"Discord returned HTTP {resp.status_code}",
                                    details={"body": resp.text})

        logger.info("Registered all commands")
        return commands
