# tests/test_counters.py
# contract tests shared by every counting backend

import random
from collections import Counter

import pytest

from wordcount.core import AVLTree, BinarySearchTree, DataCounterProtocol, HashTable
from wordcount.core.registry import default_registry

BACKENDS = [BinarySearchTree, AVLTree, HashTable]


def _as_dict(counts):
    out = {}
    for dc in counts:
        assert dc.key not in out, f"duplicate entry for {dc.key!r}"
        out[dc.key] = dc.count
    return out


@pytest.fixture(params=BACKENDS, ids=lambda cls: cls.__name__)
def counter(request):
    return request.param()


def test_empty_counter(counter):
    assert counter.get_counts() == []
    assert counter.size() == 0
    assert "missing" not in counter


def test_satisfies_protocol(counter):
    assert isinstance(counter, DataCounterProtocol)


def test_counts_match_multiplicity(counter):
    words = "the cat and the hat and the bat".split()
    for w in words:
        counter.inc_count(w)
    assert _as_dict(counter.get_counts()) == dict(Counter(words))
    assert counter.size() == 5
    assert len(counter) == 5
    assert counter.get("the") == 3
    assert counter.get("dog") == 0


def test_random_multiset(counter):
    rng = random.Random(1234)
    vocab = [f"w{i}" for i in range(200)]
    words = [rng.choice(vocab) for _ in range(3000)]
    for w in words:
        counter.inc_count(w)
    expected = Counter(words)
    assert _as_dict(counter.get_counts()) == dict(expected)
    assert counter.size() == len(expected)


def test_case_sensitive_keys(counter):
    for w in ["Word", "word", "WORD", "word"]:
        counter.inc_count(w)
    assert _as_dict(counter.get_counts()) == {"Word": 1, "word": 2, "WORD": 1}


def test_none_key_rejected(counter):
    with pytest.raises(TypeError):
        counter.inc_count(None)


def test_snapshot_is_detached(counter):
    counter.inc_count("a")
    snap = counter.get_counts()
    snap[0].count = 99
    assert counter.get("a") == 1


def test_trees_snapshot_in_key_order():
    for cls in (BinarySearchTree, AVLTree):
        t = cls()
        for w in ["pear", "apple", "fig", "banana", "apple"]:
            t.inc_count(w)
        assert [dc.key for dc in t.get_counts()] == ["apple", "banana", "fig", "pear"]


@pytest.mark.parametrize("flag,cls", [("-b", BinarySearchTree), ("-a", AVLTree), ("-h", HashTable)])
def test_registry_builds_backend(flag, cls):
    reg = default_registry()
    c = reg.create(flag)
    assert type(c) is cls
    assert c.size() == 0
    # fresh instance each time
    assert reg.create(flag) is not c


def test_registry_unknown_flag():
    reg = default_registry()
    assert "-x" not in reg
    with pytest.raises(KeyError):
        reg.create("-x")
    assert reg.flags() == ["-b", "-a", "-h"]
