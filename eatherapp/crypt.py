"""AES-256-GCM key material and stream encryption helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

KEY_SIZE = 32
IV_SIZE = 16
_MIN_IV_SIZE = 8
_MAX_IV_SIZE = 128


@dataclass(frozen=True)
class KeyIV:
    """A symmetric key together with its initialisation vector."""

    key: bytes
    iv: bytes


def generate_key_pair() -> KeyIV:
    """Return a fresh random 32-byte key and 16-byte IV."""
    return KeyIV(key=os.urandom(KEY_SIZE), iv=os.urandom(IV_SIZE))


def _cipher(kv: KeyIV) -> Cipher:
    if len(kv.key) != KEY_SIZE:
        raise ValueError(f"key must be {KEY_SIZE} bytes, got {len(kv.key)}")
    if not _MIN_IV_SIZE <= len(kv.iv) <= _MAX_IV_SIZE:
        raise ValueError(
            f"iv must be between {_MIN_IV_SIZE} and {_MAX_IV_SIZE} bytes, got {len(kv.iv)}"
        )
    return Cipher(algorithms.AES(kv.key), modes.GCM(kv.iv))


def encrypt(data: bytes, kv: KeyIV) -> bytes:
    """Encrypt ``data`` with AES-256-GCM; no authentication tag is produced."""
    return _cipher(kv).encryptor().update(bytes(data))


def decrypt(data: bytes, kv: KeyIV) -> bytes:
    """Decrypt ``data`` produced by :func:`encrypt` with the same key and IV."""
    return _cipher(kv).decryptor().update(bytes(data))