import logging
import requests
from typing import Dict

from genbridge.errors import NotificationError
from genbridge.schemas.interactions import GenerationResult, OriginCoordinates

logger = logging.getLogger(__name__)

NOTIFY_MODES = ("followup", "channel")


class NotificationClient:
    """Posts a generated image back into the conversation that asked for it.

    ``followup`` mode answers through the interaction webhook (valid for 15 minutes
    after the command); ``channel`` mode posts a plain channel message instead.
    """

    def __init__(self, bot_token: str, api_base: str, mode: str = "followup",
                 connect_timeout_s: float = 3.0, read_timeout_s: float = 30.0):
        if mode not in NOTIFY_MODES:
            raise ValueError(f"unknown notify mode {mode!r}")
        self.bot_token = bot_token
        self.api_base = api_base.rstrip("/")
        self.mode = mode
        self.timeout = (connect_timeout_s, read_timeout_s)

    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json", "Authorization": f"Bot {self.bot_token}"}

    def _url(self, origin: OriginCoordinates) -> str:
        if self.mode == "channel":
            return f"{self.api_base}/channels/{origin.channel_id}/messages"
        return f"{self.api_base}/webhooks/{origin.application_id}/{origin.token}"

    def notify(self, result: GenerationResult, origin: OriginCoordinates) -> None:
        body = {
            "content": result.url,
            "message_reference": {
                "channel_id": origin.channel_id,
                "guild_id": origin.guild_id,
                "message_id": origin.message_id,
            },
        }

        try:
            resp = requests.post(self._url(origin), json=body, headers=self._headers(), timeout=self.timeout)
        except requests.RequestException as e:
            raise NotificationError(str(e), "NOTIFY_UNREACHABLE")

        if not resp.ok:
            raise NotificationError(
                f"Discord returned HTTP {resp.status_code}",
                "NOTIFY_HTTP_ERROR",
                details={"status_code": resp.status_code, "body": resp.text},
            )
        logger.info("posted result to channel %s", origin.channel_id)
