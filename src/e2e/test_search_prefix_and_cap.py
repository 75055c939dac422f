import random
import pytest
from dictcomplete.models import Entry, Corpus
from dictcomplete.search import search, labels

@pytest.fixture
def animals() -> Corpus:
    return Corpus.build(Entry(l) for l in ["cat", "car", "dog", "do"])

def test_prefix_query_returns_sorted_block(animals):
    assert animals.labels() == ["car", "cat", "do", "dog"]
    assert labels(search(animals, "ca", 10)) == ["car", "cat"]

def test_prefix_without_match_is_empty(animals):
    assert search(animals, "z", 10) == []

@pytest.mark.parametrize("cap", [0, -1, -50])
def test_non_positive_cap_returns_nothing(animals, cap):
    assert search(animals, "ca", cap) == []
    assert search(animals, "", cap, fuzzy=True) == []

def test_empty_query_matches_everything_capped():
    c = Corpus.build(Entry(l) for l in ["a", "ab", "abc"])
    assert labels(search(c, "", 2)) == ["a", "ab"]
    assert labels(search(c, "", 99)) == ["a", "ab", "abc"]

@pytest.mark.parametrize("query", ["", "a", "*", "a*b", "zzz"])
@pytest.mark.parametrize("fuzzy", [False, True])
def test_empty_corpus_never_matches(query, fuzzy):
    for cap in (-1, 0, 1, 20):
        assert search(Corpus(), query, cap, fuzzy=fuzzy) == []

def test_results_keep_their_metadata():
    c = Corpus.build([Entry("printf", "function", "Print formatted output.")])
    (hit,) = search(c, "pri", 5)
    assert hit.annotation == "function" and hit.meta == "Print formatted output."

def test_duplicates_are_returned_independently():
    c = Corpus.build([Entry("dup", "one"), Entry("dup", "two"), Entry("duo")])
    assert [(e.label, e.annotation) for e in search(c, "du", 10)] == [("duo", None), ("dup", "one"), ("dup", "two")]
    assert labels(search(c, "dup", 10)) == ["dup", "dup"]

@pytest.mark.parametrize("seed", range(20))
def test_prefix_results_equal_brute_force_and_respect_cap(seed):
    rng = random.Random(seed)
    words = ["".join(rng.choice("abc") for _ in range(rng.randint(1, 5))) for _ in range(rng.randint(0, 60))]
    corpus = Corpus.build(Entry(w) for w in words)
    for _ in range(15):
        target = "".join(rng.choice("abc") for _ in range(rng.randint(0, 3)))
        expected = sorted(w for w in words if w.startswith(target))
        assert labels(search(corpus, target, len(words) + 1)) == expected
        k = rng.randint(0, 6)
        got = search(corpus, target, k)
        assert len(got) == min(k, len(expected))
        assert labels(got) == expected[:k]
