from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from typing import Final

from errors import EntropyError

KEY_BYTES: Final[int] = 32
TAG_HEX_LENGTH: Final[int] = 64

logger = logging.getLogger(__name__)


def generate_key(num_bytes: int = KEY_BYTES) -> str:
    try:
        raw = secrets.token_bytes(num_bytes)
    except (OSError, NotImplementedError) as exc:
        raise EntropyError("secure random source unavailable") from exc
    logger.debug(f"[key] generated {num_bytes * 8}-bit key")
    return raw.hex()


def authenticate(key: str, message: str) -> str:
    # The key is used as displayed (its hex text), so third-party HMAC tools can
    # reproduce the tag from the disclosed key and move name.
    return hmac.new(key.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


def verify(key: str, message: str, expected_tag: str) -> bool:
    computed = authenticate(key, message)
    return secrets.compare_digest(expected_tag.strip().lower().encode("utf-8"), computed.encode("ascii"))
