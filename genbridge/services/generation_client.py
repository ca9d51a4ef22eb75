import logging
import requests
from typing import Any, Dict, List

from genbridge.errors import GenerationError
from genbridge.schemas.interactions import GenerationResult

logger = logging.getLogger(__name__)


class GenerationClient:
    def __init__(self, api_key: str, base_url: str, size: str = "512x512",
                 connect_timeout_s: float = 3.0, read_timeout_s: float = 60.0):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.size = size
        self.timeout = (connect_timeout_s, read_timeout_s)

    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json", "Authorization": f"Bearer {self.api_key}"}

    def _parse_error(self, resp: requests.Response) -> GenerationError:
        try:
            body = resp.json()
        except ValueError:
            body = None

        err = body.get("error") if isinstance(body, dict) else None
        message = f"Provider returned HTTP {resp.status_code}"
        if isinstance(err, dict) and err.get("message"):
            message = err["message"]

        if resp.status_code == 429:
            return GenerationError(message, "RATE_LIMITED", True, err)
        if resp.status_code == 400:
            return GenerationError(message, "INVALID_PROMPT", False, err)
        if resp.status_code in (401, 403):
            return GenerationError(message, "PROVIDER_AUTH", False, err)
        return GenerationError(message, "PROVIDER_HTTP_ERROR", resp.status_code >= 500, err)

    def create_image(self, prompt: str) -> List[Dict[str, Any]]:
        """Request one image and return the provider's ``data`` list as-is."""
        url = f"{self.base_url}/images/generations"
        params = {"prompt": str(prompt), "n": 1, "size": self.size}

        try:
            resp = requests.post(url, json=params, headers=self._headers(), timeout=self.timeout)
        except requests.Timeout as e:
            raise GenerationError(str(e), "PROVIDER_TIMEOUT", True)
        except requests.RequestException as e:
            raise GenerationError(str(e), "PROVIDER_UNREACHABLE", True)

        if resp.status_code < 200 or resp.status_code >= 300:
            raise self._parse_error(resp)

        try:
            out = resp.json()
        except ValueError:
            raise GenerationError("Provider returned non-JSON", "BAD_RESPONSE", True)

        data = out.get("data") if isinstance(out, dict) else None
        if not isinstance(data, list) or not data:
            raise GenerationError("Provider response has no images", "BAD_RESPONSE", True)
        return data

    def generate(self, prompt: str) -> GenerationResult:
        data = self.create_image(prompt)
        first = data[0]
        url = first.get("url") if isinstance(first, dict) else None
        if not url:
            raise GenerationError("Provider response has no image url", "BAD_RESPONSE", True)
        logger.info("generated image for prompt %r", prompt)
        return GenerationResult(url=url, prompt=prompt)
