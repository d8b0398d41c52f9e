# shatool

SHA-2 message digests and HMACs written in plain Python. The only
dependency is the standard library.

| Function     | Module              | Digest size | HMAC          |
|--------------|---------------------|-------------|---------------|
| `sha224`     | `shatool.sha256`    | 28 bytes    | `sha224_hmac` |
| `sha256`     | `shatool.sha256`    | 32 bytes    | `sha256_hmac` |
| `sha384`     | `shatool.sha512`    | 48 bytes    | `sha384_hmac` |
| `sha512`     | `shatool.sha512`    | 64 bytes    | `sha512_hmac` |
| `sha512_224` | `shatool.truncated` | 28 bytes    | none          |
| `sha512_256` | `shatool.truncated` | 32 bytes    | none          |

## Installation

```
pip install .
```

## Using the library

Each hash function takes a bytes-like message and returns the raw digest
as `bytes`. Passing a `str` raises `TypeError`.
`shatool.util.to_hex` turns a digest into lower-case hexadecimal:

```python
from shatool.sha256 import sha256
from shatool.util import to_hex

to_hex(sha256(b"abc"))
# 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
```

Every algorithm has a `*_string` variant (`sha256_string`,
`sha512_224_string`, ...) that hashes a text string encoded as UTF-8.
SHA-224, SHA-256, SHA-384 and SHA-512 also have a `*_file` variant that
reads an open binary file to its end and hashes its contents:

```python
from shatool.sha512 import sha512_file

with open("archive.tar", "rb") as fp:
    digest = sha512_file(fp)
```

The HMAC functions take a key and a message, each either text (encoded
as UTF-8) or bytes:

```python
from shatool.sha512 import sha384_hmac

mac = sha384_hmac("secret", "The quick brown fox jumps over the lazy dog")
```

Other helpers:

- `shatool.sha512.sha512_with_initial_values(message, initial)` runs the
  SHA-512 computation from any eight 64-bit initial words and returns the
  full 64-byte hash value.
- `shatool.truncated.initial_hash_values(bits)` returns the eight initial
  words used by SHA-512/`bits`, for `bits` from 1 to 511.
- `shatool.util.pad_message`, `hmac_digest` and `hash_file` are the
  padding, HMAC and file-reading building blocks used by the hash modules.
- `shatool.util.HashObject(name, function, digest_size, block_size, data)`
  wraps a hash function in a `hashlib`-like object with `update`, `copy`,
  `digest` and `hexdigest`. It collects the data and hashes it all when a
  digest is asked for.

## Command line

Installing the package provides the `shatool` command. The first argument
names the algorithm: `sha256`, `sha384`, `sha512`, `sha512-224` or
`sha512-256`.

```
shatool sha256 "message"                 # print the digest of a message
shatool sha256 -t                        # check against a known answer
shatool sha256 -f archive.tar            # print the digest of a file
shatool sha256 -v archive.tar            # compare with a stored signature
shatool sha256 -h "key" "message"        # print an HMAC
```

The long forms `--test`, `--file`, `--verify` and `--hmac` work as well.
`-v` reads the expected digest from a signature file next to the input,
named after the algorithm without dashes or slashes, for example
`archive.tar.SHA256` or `archive.tar.SHA512`, and prints `OK.` or
`FAILED.` with both digests.

Run `shatool` with no arguments to list the algorithms, or
`shatool <algorithm>` with arguments it does not recognise to see that
algorithm's usage text; both exit with status 1.

## Limitations

- `sha224` is available from the library only; the command does not offer it.
- `sha512-224` and `sha512-256` hash messages only: the command has no
  file, verify or HMAC mode for them, and the library has no file or
  HMAC functions for them.
- The command cannot write signature files; `-v` only checks existing ones.
- `-t` runs a single known-answer check for the chosen algorithm.
- Messages and files are hashed whole in memory, and the pure-Python
  code is far slower than `hashlib`.

## Running the tests

```
pip install ".[test]"
pytest
```