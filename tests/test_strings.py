import random

import pytest

from algokit.strings import (
    hash_fnv1a,
    hash_string,
    kmp_search,
    kmp_table,
    lcs,
    lcs_backtrack,
    lcs_length,
)


def test_kmp_table_documented_example():
    assert kmp_table("ABCDABD") == [-1, 0, 0, 0, 0, 1, 2]


def test_kmp_table_short_words():
    assert kmp_table("") == []
    assert kmp_table("A") == [-1]


@pytest.mark.parametrize(
    "text, word",
    [
        ("ABC ABCDAB ABCDABCDABDE", "ABCDABD"),
        ("hello world", "world"),
        ("hello world", "o"),
        ("aaaaab", "aab"),
        ("abc", "abcd"),
        ("abc", "x"),
        ("", "a"),
        ("mississippi", "issip"),
    ],
)
def test_kmp_search_matches_find(text, word):
    assert kmp_search(text, word) == text.find(word)


def test_kmp_search_random_against_find():
    rng = random.Random(3)
    for _ in range(200):
        text = "".join(rng.choice("ab") for _ in range(rng.randint(0, 20)))
        word = "".join(rng.choice("ab") for _ in range(rng.randint(1, 4)))
        assert kmp_search(text, word) == text.find(word)


def test_kmp_search_empty_word():
    assert kmp_search("abc", "") == 0


def test_lcs_length_documented_table():
    table = lcs_length("XMJYAUZ", "MZJAWXU")
    assert table[7] == [0, 1, 2, 2, 3, 3, 3, 4]
    assert table[1] == [0, 0, 0, 0, 0, 0, 1, 1]
    assert all(value == 0 for value in table[0])


def test_lcs_documented_example():
    assert "".join(lcs("XMJYAUZ", "MZJAWXU")) == "MJAU"


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(item in it for item in sub)


def test_lcs_result_is_common_subsequence_of_table_length():
    rng = random.Random(8)
    for _ in range(50):
        x = [rng.randint(0, 4) for _ in range(rng.randint(0, 12))]
        y = [rng.randint(0, 4) for _ in range(rng.randint(0, 12))]
        table = lcs_length(x, y)
        result = lcs_backtrack(table, x, y)
        assert len(result) == table[len(x)][len(y)]
        assert _is_subsequence(result, x)
        assert _is_subsequence(result, y)


def test_lcs_with_empty_input():
    assert lcs("", "abc") == []


def test_hash_string_simple_values():
    assert hash_string("") == 0
    assert hash_string(b"a") == ord("a")


def test_hash_string_str_and_bytes_agree():
    assert hash_string("hello world") == hash_string(b"hello world")


def test_hash_string_stays_32_bit():
    assert 0 <= hash_string("x" * 1000) <= 0xFFFFFFFF


def test_hash_fnv1a_offset_basis_for_empty():
    assert hash_fnv1a("") == 2166136261


def test_hash_fnv1a_known_value():
    assert hash_fnv1a("a") == 0xE40C292C


def test_hash_fnv1a_high_bytes_stay_32_bit():
    value = hash_fnv1a(bytes(range(256)))
    assert 0 <= value <= 0xFFFFFFFF
    assert hash_fnv1a(b"\x80") != hash_fnv1a(b"\x00")