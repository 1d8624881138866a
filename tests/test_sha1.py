import hashlib

import pytest

from algokit.sha1 import SHA1, SHA1Error, main


@pytest.mark.parametrize(
    "message",
    [b"", b"abc", b"abc\n", b"a" * 55, b"a" * 56, b"a" * 63, b"a" * 64,
     b"a" * 119, b"x" * 1000, bytes(range(256))],
)
def test_matches_reference(message):
    assert SHA1(message).hexdigest() == hashlib.sha1(message).hexdigest()


def test_incremental_equals_one_shot():
    hasher = SHA1()
    parts = [b"The quick ", b"brown fox", b"", b" jumps" * 30]
    for part in parts:
        hasher.update(part)
    assert hasher.digest() == hashlib.sha1(b"".join(parts)).digest()


def test_string_hashed_as_utf8():
    assert SHA1("héllo").digest() == hashlib.sha1("héllo".encode("utf-8")).digest()


def test_words_make_up_digest():
    hasher = SHA1(b"abc")
    words = hasher.words()
    assert len(words) == 5
    assert b"".join(w.to_bytes(4, "big") for w in words) == hasher.digest()


def test_digest_is_repeatable():
    hasher = SHA1(b"data")
    expected = hashlib.sha1(b"data").digest()
    assert hasher.digest() == expected
    assert hasher.digest() == expected


def test_update_after_digest_raises_and_corrupts():
    hasher = SHA1(b"abc")
    hasher.digest()
    with pytest.raises(SHA1Error):
        hasher.update(b"more")
    with pytest.raises(SHA1Error):
        hasher.digest()


def test_empty_update_after_digest_is_ignored():
    hasher = SHA1(b"abc")
    first = hasher.hexdigest()
    hasher.update(b"")
    assert hasher.hexdigest() == first


def test_reset_recovers():
    hasher = SHA1(b"abc")
    hasher.digest()
    with pytest.raises(SHA1Error):
        hasher.update(b"x")
    hasher.reset()
    hasher.update(b"xyz")
    assert hasher.hexdigest() == hashlib.sha1(b"xyz").hexdigest()


def test_main_prints_words(capsys):
    assert main(["abc"]) == 0
    out = capsys.readouterr().out
    assert out == "sha abc --> " + hashlib.sha1(b"abc").hexdigest() + "\n"


def test_main_default_text(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("sha abc\n --> ")
    assert out.endswith("\n")