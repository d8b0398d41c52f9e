import pytest

from shatool.cli import (
    ALGORITHMS,
    Option,
    do_hash_file,
    do_hash_string,
    do_hmac,
    do_verify,
    get_option,
    main,
    usage,
)
from shatool.util import signature_path

SHA256_ABC = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
SHA512_ABC = (
    "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
    "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
)
SHA384_ABC = (
    "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded1631a8b605a43ff5bed"
    "8086072ba1e7cc2358baeca134c825a7"
)
SHA512_224_ABC = "4634270f707b6a54daae7530460842e20e37ed265ceee9a43e8924aa"
SHA512_256_ABC = "53048e2681941ef99b2e29b76b4c7dabe4c2d0c634fc6d46e0e2f13107e7af23"
HMAC_SHA256_EMPTY_KEY = "5d5d139563c95b5967b9bd9a8c9b233a9dedb45072794cd232dc1b74832607d0"


@pytest.mark.parametrize(
    "args, expected",
    [
        (["-t"], Option.TEST),
        (["--test"], Option.TEST),
        (["abc"], Option.STRING),
        (["-f"], Option.STRING),
        (["-f", "name"], Option.FILE),
        (["--file", "name"], Option.FILE),
        (["-v", "name"], Option.VERIFY),
        (["--verify", "name"], Option.VERIFY),
        (["-h", "k", "m"], Option.MAC),
        (["--hmac", "k", "m"], Option.MAC),
        ([], None),
        (["-x", "name"], None),
        (["-h", "k"], None),
        (["a", "b", "c", "d"], None),
    ],
)
def test_get_option(args, expected):
    assert get_option(args) == expected


def test_usage_mentions_program_and_label(capsys):
    usage("prog", "SHA-256")
    out = capsys.readouterr().out
    assert out.startswith("Usage: prog [-t|--test]")
    assert "with the SHA-256 hash function." in out


@pytest.mark.parametrize(
    "name, expected",
    [
        ("sha256", SHA256_ABC),
        ("sha384", SHA384_ABC),
        ("sha512", SHA512_ABC),
        ("sha512-224", SHA512_224_ABC),
        ("sha512-256", SHA512_256_ABC),
    ],
)
def test_do_hash_string(capsys, name, expected):
    assert do_hash_string("abc", ALGORITHMS[name]) == 0
    assert capsys.readouterr().out == expected + "\n"


def test_do_hash_file(tmp_path, capsys):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abc")
    assert do_hash_file(str(path), ALGORITHMS["sha512"]) == 0
    assert capsys.readouterr().out.strip() == SHA512_ABC


def test_do_hash_file_missing(tmp_path, capsys):
    missing = tmp_path / "absent.bin"
    assert do_hash_file(str(missing), ALGORITHMS["sha256"]) == 1
    captured = capsys.readouterr()
    assert "Could not open" in captured.err
    assert captured.out == ""


def test_do_hash_file_unsupported(tmp_path):
    with pytest.raises(ValueError):
        do_hash_file(str(tmp_path / "x"), ALGORITHMS["sha512-224"])


def test_do_hmac(capsys):
    assert do_hmac("key", "", ALGORITHMS["sha256"]) == 0
    assert capsys.readouterr().out.strip() == HMAC_SHA256_EMPTY_KEY


def test_do_hmac_unsupported():
    with pytest.raises(ValueError):
        do_hmac("key", "msg", ALGORITHMS["sha512-256"])


def test_do_verify_ok(tmp_path, capsys):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abc")
    with open(signature_path(str(path), "SHA-256"), "w", encoding="utf-8") as fh:
        fh.write(SHA256_ABC + "  data.bin\n")
    assert do_verify(str(path), ALGORITHMS["sha256"]) == 0
    out = capsys.readouterr().out
    assert "OK." in out
    assert "FAILED" not in out


def test_do_verify_mismatch(tmp_path, capsys):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abcd")
    with open(signature_path(str(path), "SHA-256"), "w", encoding="utf-8") as fh:
        fh.write(SHA256_ABC)
    assert do_verify(str(path), ALGORITHMS["sha256"]) == 0
    out = capsys.readouterr().out
    assert "FAILED." in out
    assert f"expected: {SHA256_ABC}" in out


def test_do_verify_missing_signature(tmp_path, capsys):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abc")
    assert do_verify(str(path), ALGORITHMS["sha384"]) == 1
    assert "[warn] no SHA-384 signature found" in capsys.readouterr().out


def test_do_verify_missing_file(tmp_path, capsys):
    assert do_verify(str(tmp_path / "absent"), ALGORITHMS["sha512"]) == 1
    assert "[error] could not open" in capsys.readouterr().out


def test_main_hashes_string(capsys):
    assert main(["sha256", "abc"]) == 0
    assert capsys.readouterr().out.strip() == SHA256_ABC


def test_main_hmac_matches_do_hmac(capsys):
    assert main(["sha256", "--hmac", "key", ""]) == 0
    assert capsys.readouterr().out.strip() == HMAC_SHA256_EMPTY_KEY


def test_main_file(tmp_path, capsys):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abc")
    assert main(["sha384", "-f", str(path)]) == 0
    assert capsys.readouterr().out.strip() == SHA384_ABC


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_main_self_test_passes(capsys, name):
    assert main([name, "-t"]) == 0
    assert "passed" in capsys.readouterr().out


def test_main_unsupported_option_prints_usage(capsys):
    assert main(["sha512-224", "-f", "name"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_bad_arguments_prints_usage(capsys):
    assert main(["sha256", "-x", "name"]) == 1
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [[], ["md5", "abc"]])
def test_main_unknown_algorithm(capsys, argv):
    assert main(argv) == 1
    out = capsys.readouterr().out
    assert "Algorithms:" in out
    assert "sha256" in out