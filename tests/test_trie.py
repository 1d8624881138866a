import pytest

from algokit.trie import Trie

WORDS = ["sap", "sat", "sad", "rat", "ram", "rag", "rap", "sat", "ram", "rag",
         "nap", "Nat", "lap"]


@pytest.fixture
def trie():
    t = Trie()
    for word in WORDS:
        t.add(word)
    return t


def test_count_repeated_word(trie):
    assert trie.count("sat") == 2


def test_count_prefix_ra(trie):
    assert trie.count_prefix("ra") == 6


def test_count_is_case_insensitive(trie):
    assert trie.count("nat") == trie.count("NAT") == 1


def test_count_matches_occurrences(trie):
    for word in set(w.lower() for w in WORDS):
        assert trie.count(word) == [w.lower() for w in WORDS].count(word)


def test_missing_word_and_prefix(trie):
    assert trie.count("zzz") == 0
    assert trie.count_prefix("x") == 0


def test_prefix_of_whole_word_counts_only_longer(trie):
    assert trie.count_prefix("rat") == 0
    assert trie.count("ra") == 0


def test_empty_prefix_counts_all_nonempty_words(trie):
    assert trie.count_prefix("") == len(WORDS)


def test_non_letter_rejected():
    t = Trie()
    with pytest.raises(ValueError):
        t.add("a1")
    with pytest.raises(ValueError):
        t.count("b c")