import logging
from typing import Optional
from nacl.exceptions import CryptoError
from nacl.signing import VerifyKey

logger = logging.getLogger(__name__)


def has_signature_headers(signature: Optional[str], timestamp: Optional[str]) -> bool:
    return bool(signature) and bool(timestamp)


class SignatureVerifier:
    """Checks Ed25519 detached signatures over ``timestamp || body``."""

    def __init__(self, public_key: str):
        self.public_key = public_key

    def verify(self, body: bytes, signature: Optional[str], timestamp: Optional[str]) -> bool:
        if not has_signature_headers(signature, timestamp):
            return False
        try:
            key = VerifyKey(bytes.fromhex(self.public_key))
            key.verify(timestamp.encode("utf-8") + body, bytes.fromhex(signature))
        except (CryptoError, ValueError, TypeError) as e:
            logger.debug("signature rejected: %s", e)
            return False
        return True
