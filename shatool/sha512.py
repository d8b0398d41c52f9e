"""SHA-512 and SHA-384: the 64-bit word members of the SHA-2 family."""

from __future__ import annotations

import struct
from typing import BinaryIO, Iterable, Sequence, Union

from .util import BytesLike, hash_file, hmac_digest, pad_message

_MASK = 0xFFFFFFFFFFFFFFFF
_BLOCK_SIZE = 128
_LENGTH_SIZE = 16
_WORDS = 8

SHA512_DIGEST_SIZE = 64
SHA384_DIGEST_SIZE = 48

_K = (
    0x428A2F98D728AE22, 0x7137449123EF65CD, 0xB5C0FBCFEC4D3B2F, 0xE9B5DBA58189DBBC,
    0x3956C25BF348B538, 0x59F111F1B605D019, 0x923F82A4AF194F9B, 0xAB1C5ED5DA6D8118,
    0xD807AA98A3030242, 0x12835B0145706FBE, 0x243185BE4EE4B28C, 0x550C7DC3D5FFB4E2,
    0x72BE5D74F27B896F, 0x80DEB1FE3B1696B1, 0x9BDC06A725C71235, 0xC19BF174CF692694,
    0xE49B69C19EF14AD2, 0xEFBE4786384F25E3, 0x0FC19DC68B8CD5B5, 0x240CA1CC77AC9C65,
    0x2DE92C6F592B0275, 0x4A7484AA6EA6E483, 0x5CB0A9DCBD41FBD4, 0x76F988DA831153B5,
    0x983E5152EE66DFAB, 0xA831C66D2DB43210, 0xB00327C898FB213F, 0xBF597FC7BEEF0EE4,
    0xC6E00BF33DA88FC2, 0xD5A79147930AA725, 0x06CA6351E003826F, 0x142929670A0E6E70,
    0x27B70A8546D22FFC, 0x2E1B21385C26C926, 0x4D2C6DFC5AC42AED, 0x53380D139D95B3DF,
    0x650A73548BAF63DE, 0x766A0ABB3C77B2A8, 0x81C2C92E47EDAEE6, 0x92722C851482353B,
    0xA2BFE8A14CF10364, 0xA81A664BBC423001, 0xC24B8B70D0F89791, 0xC76C51A30654BE30,
    0xD192E819D6EF5218, 0xD69906245565A910, 0xF40E35855771202A, 0x106AA07032BBD1B8,
    0x19A4C116B8D2D0C8, 0x1E376C085141AB53, 0x2748774CDF8EEB99, 0x34B0BCB5E19B48A8,
    0x391C0CB3C5C95A63, 0x4ED8AA4AE3418ACB, 0x5B9CCA4F7763E373, 0x682E6FF3D6B2B8A3,
    0x748F82EE5DEFB2FC, 0x78A5636F43172F60, 0x84C87814A1F0AB72, 0x8CC702081A6439EC,
    0x90BEFFFA23631E28, 0xA4506CEBDE82BDE9, 0xBEF9A3F7B2C67915, 0xC67178F2E372532B,
    0xCA273ECEEA26619C, 0xD186B8C721C0C207, 0xEADA7DD6CDE0EB1E, 0xF57D4F7FEE6ED178,
    0x06F067AA72176FBA, 0x0A637DC5A2C898A6, 0x113F9804BEF90DAE, 0x1B710B35131C471B,
    0x28DB77F523047D84, 0x32CAAB7B40C72493, 0x3C9EBE0A15C9BEBC, 0x431D67C49C100D4C,
    0x4CC5D4BECB3E42B6, 0x597F299CFC657E2A, 0x5FCB6FAB3AD6FAEC, 0x6C44198C4A475817,
)

SHA512_INITIAL = (
    0x6A09E667F3BCC908, 0xBB67AE8584CAA73B, 0x3C6EF372FE94F82B, 0xA54FF53A5F1D36F1,
    0x510E527FADE682D1, 0x9B05688C2B3E6C1F, 0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179,
)

SHA384_INITIAL = (
    0xCBBB9D5DC1059ED8, 0x629A292A367CD507, 0x9159015A3070DD17, 0x152FECD8F70E5939,
    0x67332667FFC00B31, 0x8EB44A8768581511, 0xDB0C2E0D64F98FA7, 0x47B5481DBEFA4FA4,
)


def _rotr(value: int, shift: int) -> int:
    return ((value >> shift) | (value << (64 - shift))) & _MASK


def _schedule(block: bytes) -> list[int]:
    words = list(struct.unpack(">16Q", block))
    for t in range(16, len(_K)):
        w15, w2 = words[t - 15], words[t - 2]
        s0 = _rotr(w15, 1) ^ _rotr(w15, 8) ^ (w15 >> 7)
        s1 = _rotr(w2, 19) ^ _rotr(w2, 61) ^ (w2 >> 6)
        words.append((s1 + words[t - 7] + s0 + words[t - 16]) & _MASK)
    return words


def _compress(state: Sequence[int], block: bytes) -> tuple[int, ...]:
    a, b, c, d, e, f, g, h = state
    for k, w in zip(_K, _schedule(block)):
        big_sigma1 = _rotr(e, 14) ^ _rotr(e, 18) ^ _rotr(e, 41)
        choose = (e & f) ^ (~e & g)
        t1 = (h + big_sigma1 + choose + k + w) & _MASK
        big_sigma0 = _rotr(a, 28) ^ _rotr(a, 34) ^ _rotr(a, 39)
        majority = (a & b) ^ (a & c) ^ (b & c)
        t2 = (big_sigma0 + majority) & _MASK
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK, c, b, a, (t1 + t2) & _MASK
    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d, e, f, g, h)))


def _blocks(padded: bytes) -> Iterable[bytes]:
    view = memoryview(padded)
    for offset in range(0, len(padded), _BLOCK_SIZE):
        yield bytes(view[offset:offset + _BLOCK_SIZE])


def sha512_with_initial_values(message: BytesLike, initial: Sequence[int]) -> bytes:
    """Run the SHA-512 computation from the hash value *initial*.

    Returns the full 64-byte final hash value.
    """
    if isinstance(message, str):
        raise TypeError("Strings must be encoded before hashing")
    state = tuple(initial)
    if len(state) != _WORDS:
        raise ValueError(f"initial hash value needs {_WORDS} words, got {len(state)}")
    if any(not 0 <= word <= _MASK for word in state):
        raise ValueError("initial hash words must be unsigned 64-bit integers")
    for block in _blocks(pad_message(message, _BLOCK_SIZE, _LENGTH_SIZE)):
        state = _compress(state, block)
    return struct.pack(">8Q", *state)


def sha512(message: BytesLike) -> bytes:
    """Return the 64-byte SHA-512 digest of *message*."""
    return sha512_with_initial_values(message, SHA512_INITIAL)


def sha384(message: BytesLike) -> bytes:
    """Return the 48-byte SHA-384 digest of *message*."""
    return sha512_with_initial_values(message, SHA384_INITIAL)[:SHA384_DIGEST_SIZE]


def sha512_file(fp: BinaryIO) -> bytes:
    """Return the SHA-512 digest of the rest of a binary file object."""
    return hash_file(fp, sha512)


def sha384_file(fp: BinaryIO) -> bytes:
    """Return the SHA-384 digest of the rest of a binary file object."""
    return hash_file(fp, sha384)


def sha512_string(text: str) -> bytes:
    """Return the SHA-512 digest of *text* encoded as UTF-8."""
    return sha512(text.encode("utf-8"))


def sha384_string(text: str) -> bytes:
    """Return the SHA-384 digest of *text* encoded as UTF-8."""
    return sha384(text.encode("utf-8"))


def sha512_hmac(key: Union[str, BytesLike], message: Union[str, BytesLike]) -> bytes:
    """Return HMAC-SHA-512 of *message* under *key*."""
    return hmac_digest(key, message, sha512, _BLOCK_SIZE, SHA512_DIGEST_SIZE)


def sha384_hmac(key: Union[str, BytesLike], message: Union[str, BytesLike]) -> bytes:
    """Return HMAC-SHA-384 of *message* under *key*."""
    return hmac_digest(key, message, sha384, _BLOCK_SIZE, SHA384_DIGEST_SIZE)