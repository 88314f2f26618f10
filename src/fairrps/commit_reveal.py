from __future__ import annotations

import hashlib
import hmac
import secrets
from typing import Final

KEY_BYTES: Final[int] = 32


class InvalidKey(ValueError):
    pass


def generate_key(num_bytes: int = KEY_BYTES) -> str:
    # Lowercase hex so the key can be pasted into any HMAC calculator.
    return secrets.token_bytes(num_bytes).hex()


def compute_commitment(key: str, message: str) -> str:
    key_bytes = _decode_key(key)
    return hmac.new(key_bytes, message.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_commitment(*, expected_commitment: str, key: str, message: str) -> bool:
    try:
        computed = compute_commitment(key, message)
    except InvalidKey:
        return False
    expected = expected_commitment.strip().lower().encode("utf-8")
    return secrets.compare_digest(expected, computed.encode("ascii"))


def _decode_key(key: str) -> bytes:
    if len(key) != KEY_BYTES * 2:
        raise InvalidKey(f"key must be {KEY_BYTES * 2} hex characters, got {len(key)}")
    try:
        raw = bytes.fromhex(key)
    except ValueError as exc:
        raise InvalidKey("key is not valid hex") from exc
    # fromhex skips whitespace, so a padded string can decode short.
    if len(raw) != KEY_BYTES:
        raise InvalidKey("key is not valid hex")
    return raw
