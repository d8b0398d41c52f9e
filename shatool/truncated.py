"""SHA-512/224 and SHA-512/256: SHA-512 with generated initial values and a truncated digest."""

from __future__ import annotations

import struct
from functools import lru_cache

from .sha512 import SHA512_INITIAL, sha512_with_initial_values
from .util import BytesLike

SHA512_224_DIGEST_SIZE = 28
SHA512_256_DIGEST_SIZE = 32

_SALT = 0xA5A5A5A5A5A5A5A5
_MAX_BITS = 512


@lru_cache(maxsize=None)
def initial_hash_values(bits: int) -> tuple[int, ...]:
    """Return the eight 64-bit initial hash words for SHA-512/*bits*.

    The SHA-512 initial value is XOR-ed with 0xa5a5... and used to hash the
    name ``"SHA-512/<bits>"`` (bits right-aligned in three places); the
    resulting hash value becomes the new initial value.
    """
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise TypeError("bits must be an integer")
    if not 0 < bits < _MAX_BITS:
        raise ValueError(f"bits must be between 1 and {_MAX_BITS - 1}, got {bits}")
    salted = tuple(word ^ _SALT for word in SHA512_INITIAL)
    name = f"SHA-512/{bits:3d}".encode("ascii")
    return struct.unpack(">8Q", sha512_with_initial_values(name, salted))


def _truncated(message: BytesLike, bits: int, digest_size: int) -> bytes:
    if isinstance(message, str):
        raise TypeError("Strings must be encoded before hashing")
    return sha512_with_initial_values(message, initial_hash_values(bits))[:digest_size]


def sha512_224(message: BytesLike) -> bytes:
    """Return the 28-byte SHA-512/224 digest of *message*."""
    return _truncated(message, 224, SHA512_224_DIGEST_SIZE)


def sha512_256(message: BytesLike) -> bytes:
    """Return the 32-byte SHA-512/256 digest of *message*."""
    return _truncated(message, 256, SHA512_256_DIGEST_SIZE)


def sha512_224_string(text: str) -> bytes:
    """Return the SHA-512/224 digest of *text* encoded as UTF-8."""
    return sha512_224(text.encode("utf-8"))


def sha512_256_string(text: str) -> bytes:
    """Return the SHA-512/256 digest of *text* encoded as UTF-8."""
    return sha512_256(text.encode("utf-8"))