"""Shared helpers for the hash functions: padding, HMAC, hex output and file input."""

from __future__ import annotations

from functools import partial
from typing import BinaryIO, Callable, Union

BytesLike = Union[bytes, bytearray, memoryview]
HashFunction = Callable[[bytes], bytes]

_READ_CHUNK = 1024
_IPAD = 0x36
_OPAD = 0x5C


def _as_bytes(value: Union[str, BytesLike]) -> bytes:
    """Return *value* as bytes, encoding text as UTF-8."""
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


class HashObject:
    """Incremental hash object in the style of :mod:`hashlib`."""

    def __init__(
        self,
        name: str,
        function: HashFunction,
        digest_size: int,
        block_size: int,
        data: BytesLike = b"",
    ) -> None:
        self.name = name
        self.digest_size = digest_size
        self.block_size = block_size
        self._function = function
        self._buffer = bytearray()
        self.update(data)

    def update(self, data: BytesLike) -> None:
        """Append *data* to the message being hashed."""
        if isinstance(data, str):
            raise TypeError("Strings must be encoded before hashing")
        self._buffer.extend(data)

    def copy(self) -> "HashObject":
        """Return an independent copy of this hash object."""
        return HashObject(
            self.name, self._function, self.digest_size, self.block_size, self._buffer
        )

    def digest(self) -> bytes:
        """Return the digest of all data passed so far."""
        return self._function(bytes(self._buffer))[: self.digest_size]

    def hexdigest(self) -> str:
        """Return the digest as a lower-case hexadecimal string."""
        return to_hex(self.digest())

    def __repr__(self) -> str:
        return f"<{self.name} HashObject>"


def pad_message(message: BytesLike, block_size: int, length_size: int) -> bytes:
    """Pad *message* with a 1 bit, zero bits and its bit length.

    The result is a whole number of *block_size*-byte blocks whose last
    *length_size* bytes hold the message length in bits, big-endian.
    """
    if length_size <= 0 or block_size <= length_size:
        raise ValueError("block_size must exceed a positive length_size")
    data = bytes(message)
    bit_length = len(data) * 8
    if bit_length >= 1 << (8 * length_size):
        raise ValueError("message too long for the length field")
    zeros = -(len(data) + 1 + length_size) % block_size
    return (
        data
        + b"\x80"
        + bytes(zeros)
        + bit_length.to_bytes(length_size, "big")
    )


def to_hex(digest: BytesLike) -> str:
    """Return *digest* as two lower-case hex characters per byte."""
    return bytes(digest).hex()


def hash_file(fp: BinaryIO, function: HashFunction) -> bytes:
    """Read a binary file object to its end and hash its contents."""
    data = b"".join(iter(partial(fp.read, _READ_CHUNK), b""))
    return function(data)


def hmac_digest(
    key: Union[str, BytesLike],
    message: Union[str, BytesLike],
    function: HashFunction,
    block_size: int,
    digest_size: int,
) -> bytes:
    """Compute the HMAC of *message* under *key* with the given hash function."""
    key_bytes = _as_bytes(key)
    message_bytes = _as_bytes(message)
    if len(key_bytes) > block_size:
        key_bytes = function(key_bytes)[:digest_size]
    key_bytes = key_bytes.ljust(block_size, b"\x00")
    inner_key = bytes(b ^ _IPAD for b in key_bytes)
    outer_key = bytes(b ^ _OPAD for b in key_bytes)
    inner = function(inner_key + message_bytes)[:digest_size]
    return function(outer_key + inner)[:digest_size]


def signature_path(filename: str, label: str) -> str:
    """Return the path of the signature file for *filename* and algorithm *label*.

    The extension is the label with every '-' and '/' removed.
    """
    extension = label.replace("-", "").replace("/", "")
    return f"{filename}.{extension}"