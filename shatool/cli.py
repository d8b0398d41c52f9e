"""Command-line front end: hash strings and files, compute HMACs and verify signatures."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import BinaryIO, Callable, Optional, Sequence, Tuple, Union

from .sha256 import sha256, sha256_file, sha256_hmac, sha256_string
from .sha512 import (
    sha384,
    sha384_file,
    sha384_hmac,
    sha384_string,
    sha512,
    sha512_file,
    sha512_hmac,
    sha512_string,
)
from .truncated import sha512_224, sha512_224_string, sha512_256, sha512_256_string
from .util import BytesLike, signature_path, to_hex

PROGRAM = "shatool"

StringHash = Callable[[str], bytes]
FileHash = Callable[[BinaryIO], bytes]
MacHash = Callable[[Union[str, BytesLike], Union[str, BytesLike]], bytes]


class Option(enum.IntEnum):
    """What the command line asks for."""

    TEST = 1
    STRING = 2
    FILE = 4
    VERIFY = 8
    MAC = 16


@dataclass(frozen=True)
class Algorithm:
    """A hash algorithm as offered on the command line."""

    name: str
    label: str
    digest_size: int
    string: StringHash
    file: Optional[FileHash] = None
    hmac: Optional[MacHash] = None
    known_answer: Tuple[bytes, str] = (b"", "")
    function: Optional[Callable[[bytes], bytes]] = None

    def supports(self, option: Option) -> bool:
        """Return whether this algorithm can carry out *option*."""
        if option in (Option.FILE, Option.VERIFY):
            return self.file is not None
        if option is Option.MAC:
            return self.hmac is not None
        return True


ALGORITHMS = {
    algorithm.name: algorithm
    for algorithm in (
        Algorithm(
            "sha256", "SHA-256", 32, sha256_string, sha256_file, sha256_hmac,
            (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
            sha256,
        ),
        Algorithm(
            "sha384", "SHA-384", 48, sha384_string, sha384_file, sha384_hmac,
            (
                b"abc",
                "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded1631a8b605a43ff5bed"
                "8086072ba1e7cc2358baeca134c825a7",
            ),
            sha384,
        ),
        Algorithm(
            "sha512", "SHA-512", 64, sha512_string, sha512_file, sha512_hmac,
            (
                b"abc",
                "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
                "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f",
            ),
            sha512,
        ),
        Algorithm(
            "sha512-224", "SHA-512/224", 28, sha512_224_string,
            known_answer=(b"abc", "4634270f707b6a54daae7530460842e20e37ed265ceee9a43e8924aa"),
            function=sha512_224,
        ),
        Algorithm(
            "sha512-256", "SHA-512/256", 32, sha512_256_string,
            known_answer=(
                b"abc",
                "53048e2681941ef99b2e29b76b4c7dabe4c2d0c634fc6d46e0e2f13107e7af23",
            ),
            function=sha512_256,
        ),
    )
}


def get_option(args: Sequence[str]) -> Optional[Option]:
    """Classify the arguments that follow the algorithm name.

    Returns None when they match no form, in which case usage applies.
    """
    count = len(args)
    if count == 1 and args[0] in ("-t", "--test"):
        return Option.TEST
    if count == 1:
        return Option.STRING
    if count == 2 and args[0] in ("-f", "--file"):
        return Option.FILE
    if count == 2 and args[0] in ("-v", "--verify"):
        return Option.VERIFY
    if count == 3 and args[0] in ("-h", "--hmac"):
        return Option.MAC
    return None


def usage(program: str, label: str) -> None:
    """Print the usage text for *program* hashing with *label*."""
    print(f'Usage: {program} [-t|--test] [-f|--file] [-h|--hmac] "<message>"')
    print(f"Hash a given message or file with the {label} hash function.\n")
    print("-t, --test\t\t\tRun the test suite.")
    print(f'-f, --file "<filename>"\t\tCalculate the {label} hash of file named <filename>.')
    print(f'-h, --hmac "<key>" "<message>"\tCalculate the {label} HMAC hash of <message> using <key>.')


def _require(algorithm: Algorithm, option: Option) -> None:
    if not algorithm.supports(option):
        raise ValueError(f"{algorithm.label} does not support {option.name.lower()}")


def do_test(algorithm: Algorithm) -> int:
    """Check the algorithm against its known answer and report the result."""
    message, expected = algorithm.known_answer
    function = algorithm.function or (lambda data: algorithm.string(data.decode("utf-8")))
    actual = to_hex(function(message)[: algorithm.digest_size])
    print(f"{algorithm.label} Test Suite")
    if actual == expected:
        print("passed")
        return 0
    print("FAILED")
    print(f"expected: {expected}")
    print(f"actual  : {actual}")
    return 1


def do_hash_string(text: str, algorithm: Algorithm) -> int:
    """Print the digest of *text* in hex."""
    digest = algorithm.string(text)
    print(to_hex(digest[: algorithm.digest_size]))
    return 0


def do_hash_file(filename: str, algorithm: Algorithm) -> int:
    """Print the digest of the named file in hex."""
    _require(algorithm, Option.FILE)
    assert algorithm.file is not None
    try:
        with open(filename, "rb") as fp:
            digest = algorithm.file(fp)
    except OSError:
        print(f"[ERROR] Could not open {filename} for reading.", file=sys.stderr)
        return 1
    print(to_hex(digest[: algorithm.digest_size]))
    return 0


def do_verify(filename: str, algorithm: Algorithm) -> int:
    """Compare the file's digest with the one stored in its signature file."""
    _require(algorithm, Option.VERIFY)
    assert algorithm.file is not None
    label = algorithm.label
    try:
        fp = open(filename, "rb")
    except OSError:
        print(f"[error] could not open {filename} for reading.")
        return 1
    with fp:
        try:
            with open(signature_path(filename, label), "r", encoding="utf-8") as fhash:
                tokens = fhash.read().split()
        except OSError:
            print(f"[warn] no {label} signature found for {filename}.")
            return 1
        actual = to_hex(algorithm.file(fp)[: algorithm.digest_size])
    expected = tokens[0] if tokens else ""
    print(f'Verifying "{filename}"... ', end="", flush=True)
    if actual == expected:
        print("OK.")
    else:
        print("FAILED.\n")
        print(f"expected: {expected}")
        print(f"actual  : {actual}")
    return 0


def do_hmac(key: str, message: str, algorithm: Algorithm) -> int:
    """Print the HMAC of *message* under *key* in hex."""
    _require(algorithm, Option.MAC)
    assert algorithm.hmac is not None
    print(to_hex(algorithm.hmac(key, message)[: algorithm.digest_size]))
    return 0


def _general_usage() -> None:
    print(f"Usage: {PROGRAM} <algorithm> [options]")
    print("Algorithms: " + ", ".join(ALGORITHMS))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; the first argument names the algorithm."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] not in ALGORITHMS:
        _general_usage()
        return 1
    algorithm = ALGORITHMS[args[0]]
    rest = args[1:]
    option = get_option(rest)

    if option is None or not algorithm.supports(option):
        usage(f"{PROGRAM} {algorithm.name}", algorithm.label)
        return 1
    if option is Option.TEST:
        return do_test(algorithm)
    if option is Option.STRING:
        return do_hash_string(rest[0], algorithm)
    if option is Option.FILE:
        return do_hash_file(rest[1], algorithm)
    if option is Option.VERIFY:
        return do_verify(rest[1], algorithm)
    return do_hmac(rest[1], rest[2], algorithm)


if __name__ == "__main__":
    sys.exit(main())