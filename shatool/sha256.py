"""SHA-256 and SHA-224: the 32-bit word members of the SHA-2 family."""

from __future__ import annotations

import struct
from typing import BinaryIO, Iterable, Sequence, Union

from .util import BytesLike, hash_file, hmac_digest, pad_message

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_LENGTH_SIZE = 8
_ROUNDS = 64

SHA256_DIGEST_SIZE = 32
SHA224_DIGEST_SIZE = 28

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_SHA256_INITIAL = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_SHA224_INITIAL = (
    0xC1059ED8, 0x367CD507, 0x3070DD17, 0xF70E5939,
    0xFFC00B31, 0x68581511, 0x64F98FA7, 0xBEFA4FA4,
)


def _rotr(value: int, shift: int) -> int:
    return ((value >> shift) | (value << (32 - shift))) & _MASK


def _schedule(block: bytes) -> list[int]:
    words = list(struct.unpack(">16I", block))
    for t in range(16, _ROUNDS):
        w15, w2 = words[t - 15], words[t - 2]
        s0 = _rotr(w15, 7) ^ _rotr(w15, 18) ^ (w15 >> 3)
        s1 = _rotr(w2, 17) ^ _rotr(w2, 19) ^ (w2 >> 10)
        words.append((s1 + words[t - 7] + s0 + words[t - 16]) & _MASK)
    return words


def _compress(state: Sequence[int], block: bytes) -> tuple[int, ...]:
    a, b, c, d, e, f, g, h = state
    for k, w in zip(_K, _schedule(block)):
        big_sigma1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        choose = (e & f) ^ (~e & g)
        t1 = (h + big_sigma1 + choose + k + w) & _MASK
        big_sigma0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        majority = (a & b) ^ (a & c) ^ (b & c)
        t2 = (big_sigma0 + majority) & _MASK
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK, c, b, a, (t1 + t2) & _MASK
    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d, e, f, g, h)))


def _blocks(padded: bytes) -> Iterable[bytes]:
    view = memoryview(padded)
    for offset in range(0, len(padded), _BLOCK_SIZE):
        yield bytes(view[offset:offset + _BLOCK_SIZE])


def _hash(message: BytesLike, initial: Sequence[int], digest_size: int) -> bytes:
    if isinstance(message, str):
        raise TypeError("Strings must be encoded before hashing")
    state: tuple[int, ...] = tuple(initial)
    for block in _blocks(pad_message(message, _BLOCK_SIZE, _LENGTH_SIZE)):
        state = _compress(state, block)
    return struct.pack(">8I", *state)[:digest_size]


def sha256(message: BytesLike) -> bytes:
    """Return the 32-byte SHA-256 digest of *message*."""
    return _hash(message, _SHA256_INITIAL, SHA256_DIGEST_SIZE)


def sha224(message: BytesLike) -> bytes:
    """Return the 28-byte SHA-224 digest of *message*."""
    return _hash(message, _SHA224_INITIAL, SHA224_DIGEST_SIZE)


def sha256_file(fp: BinaryIO) -> bytes:
    """Return the SHA-256 digest of the rest of a binary file object."""
    return hash_file(fp, sha256)


def sha224_file(fp: BinaryIO) -> bytes:
    """Return the SHA-224 digest of the rest of a binary file object."""
    return hash_file(fp, sha224)


def sha256_string(text: str) -> bytes:
    """Return the SHA-256 digest of *text* encoded as UTF-8."""
    return sha256(text.encode("utf-8"))


def sha224_string(text: str) -> bytes:
    """Return the SHA-224 digest of *text* encoded as UTF-8."""
    return sha224(text.encode("utf-8"))


def sha256_hmac(key: Union[str, BytesLike], message: Union[str, BytesLike]) -> bytes:
    """Return HMAC-SHA-256 of *message* under *key*."""
    return hmac_digest(key, message, sha256, _BLOCK_SIZE, SHA256_DIGEST_SIZE)


def sha224_hmac(key: Union[str, BytesLike], message: Union[str, BytesLike]) -> bytes:
    """Return HMAC-SHA-224 of *message* under *key*."""
    return hmac_digest(key, message, sha224, _BLOCK_SIZE, SHA224_DIGEST_SIZE)