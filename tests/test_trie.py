# tests/test_trie.py
# unit tests for PrefixDictionary

import pytest

from autosuggest.core.trie import PrefixDictionary, Suggestion


@pytest.fixture
def trie():
    t = PrefixDictionary()
    t.insert_many([("app", 5), ("apple", 3), ("apply", 2), ("application", 1)])
    return t


def test_insert_then_search():
    t = PrefixDictionary()
    for w in ["cat", "car", "cart", "dog"]:
        t.insert(w)
        assert t.search(w)
    assert not t.search("ca")
    assert not t.search("carts")
    assert not t.search("cow")


def test_reinsert_counts_once():
    t = PrefixDictionary()
    t.insert("hello")
    t.insert("hello")
    assert t.word_count() == 1
    assert len(t) == 1


def test_frequency_accumulates():
    t = PrefixDictionary()
    t.insert("cat", 3)
    t.insert("cat", 2)
    assert t.frequency("cat") == 5
    assert t.suggest("cat") == [Suggestion("cat", 5)]


def test_normalization():
    t = PrefixDictionary()
    t.insert(" Java ")
    assert t.search("java")
    assert t.search("JAVA")
    assert "  jAvA" in t
    assert t.word_count() == 1
    assert t.suggest("JA")[0].word == "java"


def test_invalid_words_ignored():
    t = PrefixDictionary()
    t.insert("")
    t.insert("   ")
    t.insert(None)
    t.insert(42)
    assert t.word_count() == 0
    assert t.stats()["total_nodes"] == 1
    assert not t.search("")
    assert not t.search(None)
    assert t.suggest("") == []
    assert t.suggest("   ") == []
    assert t.suggest(None) == []


@pytest.mark.parametrize("bad", [-1, 1.5, "3", True, None])
def test_bad_frequency_rejected(bad):
    t = PrefixDictionary()
    with pytest.raises(ValueError):
        t.insert("word", bad)
    assert t.word_count() == 0
    assert not t.search("word")


def test_zero_frequency_allowed():
    t = PrefixDictionary()
    t.insert("quiet", 0)
    assert t.search("quiet")
    assert t.frequency("quiet") == 0


def test_suggest_by_frequency(trie):
    assert trie.suggest("app", 3, "frequency") == [
        Suggestion("app", 5),
        Suggestion("apple", 3),
        Suggestion("apply", 2),
    ]


def test_suggest_alphabetical(trie):
    assert trie.suggest("appl", 5, "alphabetical") == [
        Suggestion("apple", 3),
        Suggestion("application", 1),
        Suggestion("apply", 2),
    ]


def test_suggest_includes_prefix_node(trie):
    words = [s.word for s in trie.suggest("app", 10)]
    assert "app" in words
    assert len(words) == 4
    assert len(set(words)) == 4


def test_suggest_unknown_prefix(trie):
    assert trie.suggest("xyz") == []
    assert trie.suggest("apps") == []


@pytest.mark.parametrize("k", [0, 1, 2, 3, 4, 10])
def test_limit_bound(trie, k):
    out = trie.suggest("a", limit=k)
    assert len(out) <= k
    assert len(out) == min(k, 4)


def test_negative_limit_is_empty(trie):
    assert trie.suggest("app", limit=-3) == []


def test_unknown_rank_mode(trie):
    with pytest.raises(ValueError):
        trie.suggest("app", 5, "random")


def test_frequency_ties_break_alphabetically():
    t = PrefixDictionary()
    t.insert_many([("bee", 2), ("bat", 2), ("bus", 2), ("big", 9)])
    assert [s.word for s in t.suggest("b", 10)] == ["big", "bat", "bee", "bus"]


def test_ranking_properties():
    t = PrefixDictionary()
    t.insert_many([("te" + c * n, n * 7 % 5) for n in range(1, 6) for c in "abcdxyz"])
    by_freq = t.suggest("te", 100, "frequency")
    assert all(a.frequency >= b.frequency for a, b in zip(by_freq, by_freq[1:]))
    by_word = t.suggest("te", 100, "alphabetical")
    assert all(a.word < b.word for a, b in zip(by_word, by_word[1:]))
    assert all(s.word.startswith("te") for s in by_freq)


def test_prefix_is_normalized(trie):
    assert [s.word for s in trie.suggest("  APPL ", 5, "alphabetical")] == [
        "apple", "application", "apply",
    ]


def test_suggestions_are_snapshots(trie):
    out = trie.suggest("apple")
    with pytest.raises(AttributeError):
        out[0].frequency = 999
    out.clear()
    assert trie.frequency("apple") == 3
    assert trie.suggest("apple") == [Suggestion("apple", 3)]


def test_increment_frequency(trie):
    assert trie.increment_frequency("APPLY")
    assert trie.frequency("apply") == 3


def test_increment_leaves_prefixes_and_missing_alone(trie):
    before = trie.stats()
    assert not trie.increment_frequency("appl")
    assert not trie.increment_frequency("applesauce")
    assert not trie.increment_frequency("")
    assert not trie.search("appl")
    assert trie.stats() == before


def test_increment_on_empty_dictionary():
    t = PrefixDictionary()
    assert t.increment_frequency("missing") is False
    assert t.word_count() == 0


def test_stats_small_tree():
    t = PrefixDictionary()
    t.insert("a")
    t.insert("at")
    assert t.stats() == {"total_words": 2, "total_nodes": 3, "max_depth": 2}


def test_stats_empty():
    assert PrefixDictionary().stats() == {"total_words": 0, "total_nodes": 1, "max_depth": 0}


def test_stats_shared_prefixes(trie):
    # a-p-p-l-e/y, a-p-p-l-i-c-a-t-i-o-n
    st = trie.stats()
    assert st["total_words"] == 4
    assert st["total_nodes"] == 1 + 4 + 1 + 1 + 7
    assert st["max_depth"] == len("application")


def test_clear(trie):
    trie.clear()
    assert trie.word_count() == 0
    assert not trie.search("app")
    assert trie.suggest("a") == []
    assert trie.stats() == {"total_words": 0, "total_nodes": 1, "max_depth": 0}
    trie.insert("app")
    assert trie.frequency("app") == 1


def test_insert_many_returns_count():
    t = PrefixDictionary()
    assert t.insert_many([("x", 1), ("x", 2), ("y", 1)]) == 3
    assert t.word_count() == 2
    assert t.frequency("x") == 3


def test_deep_word_does_not_recurse():
    t = PrefixDictionary()
    long_word = "a" * 5000
    t.insert(long_word)
    assert t.search(long_word)
    assert t.stats()["max_depth"] == 5000
    assert t.suggest("aaa")[0].word == long_word
