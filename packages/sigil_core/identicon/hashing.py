"""Digest helpers feeding sigil generation."""

from __future__ import annotations

import hashlib
import string

from .errors import InvalidDigestError

DIGEST_SIZE = 16
_HEX_DIGITS = frozenset(string.hexdigits)
BYTES_TYPES = (bytes, bytearray, memoryview)


def _as_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if not isinstance(data, BYTES_TYPES):
        raise TypeError(f"Expected bytes or str, got {type(data).__name__}")
    return bytes(data)


def md5_digest(data: bytes | str) -> bytes:
    return hashlib.md5(_as_bytes(data)).digest()


def digest_for_key(key: str) -> bytes:
    """Resolve a lookup key to a digest.

    A key of exactly 32 hex characters is taken as a precomputed digest so
    callers can address a sigil by its hash; anything else is hashed.
    """

    if len(key) == DIGEST_SIZE * 2 and all(ch in _HEX_DIGITS for ch in key):
        return bytes.fromhex(key)
    return md5_digest(key)


def digest_hex(digest: bytes) -> str:
    return ensure_digest(digest).hex()


def ensure_digest(digest: bytes) -> bytes:
    if not isinstance(digest, BYTES_TYPES):
        raise InvalidDigestError(
            f"Digest must be bytes, got {type(digest).__name__}",
            error_code="invalid_digest",
        )
    raw = bytes(digest)
    if len(raw) != DIGEST_SIZE:
        raise InvalidDigestError(
            f"Digest must be {DIGEST_SIZE} bytes, got {len(raw)}",
            error_code="invalid_digest",
        )
    return raw
