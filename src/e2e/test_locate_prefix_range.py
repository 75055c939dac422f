import bisect
import random
import pytest
from dictcomplete.models import Entry, Corpus
from dictcomplete.locate import locate, first_index, start_index

def _corpus(*labels: str) -> list[Entry]:
    return Corpus.build(Entry(l) for l in labels).entries

def test_locate_finds_some_matching_index():
    entries = _corpus("cat", "car", "dog", "do")   # -> car, cat, do, dog
    i = locate(entries, "ca")
    assert i is not None and entries[i].label.startswith("ca")
    assert locate(entries, "do") in (2, 3)

def test_locate_not_found_cases():
    assert locate([], "a") is None
    entries = _corpus("car", "cat")
    assert locate(entries, "z") is None
    assert locate(entries, "cart") is None      # longer than every candidate
    assert locate(entries, "a") is None

def test_target_equal_to_label_matches():
    entries = _corpus("a", "ab", "abc")
    i = locate(entries, "abc")
    assert entries[i].label == "abc"

def test_first_index_walks_back_to_block_start():
    entries = _corpus("ab", "abc", "abd", "abe", "abf", "b")
    for anchor in range(0, 5):
        assert first_index(entries, "ab", anchor) == 0
    assert first_index(entries, "abd", 2) == 2

def test_first_index_over_duplicates():
    entries = _corpus("x", "dup", "dup", "dup", "e")
    assert [e.label for e in entries] == ["dup", "dup", "dup", "e", "x"]
    assert first_index(entries, "dup", 2) == 0

def test_start_index_empty_prefix_is_zero():
    assert start_index(_corpus("a", "b"), "") == 0
    assert start_index([], "") == 0
    assert start_index(_corpus("a", "b"), "c") is None

@pytest.mark.parametrize("seed", range(25))
def test_two_phase_search_agrees_with_boundary_search(seed):
    rng = random.Random(seed)
    words = ["".join(rng.choice("abc") for _ in range(rng.randint(1, 4))) for _ in range(rng.randint(0, 40))]
    entries = _corpus(*words)
    labels = [e.label for e in entries]
    for _ in range(20):
        target = "".join(rng.choice("abc") for _ in range(rng.randint(1, 3)))
        expected = bisect.bisect_left(labels, target)
        has_match = expected < len(labels) and labels[expected].startswith(target)
        got = start_index(entries, target)
        if has_match:
            assert got == expected
        else:
            assert got is None
