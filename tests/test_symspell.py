import pytest

from fuzzycoll.basic import fuzzy_search
from fuzzycoll.distance import levenshtein
from fuzzycoll.symspell import SymSpell

WORDS = [
    "food",
    "good",
    "fool",
    "foo",
    "mood",
    "fodder",
    "apple",
    "fd",
    "feed",
    "ford",
    "fold",
    "flood",
    "floods",
    "foods",
    "forward",
    "od",
    "zoo",
    "wood",
    "hood",
    "fond",
    "fondue",
    "kitten",
    "sitting",
    "mitten",
    "bitten",
    "kit",
    "kitchen",
    "smitten",
]


def _build(max_edits, prefix_length=None):
    sym = SymSpell(levenshtein, max_edits, prefix_length)
    for word in WORDS:
        sym.insert(word)
    return sym


@pytest.mark.parametrize(
    "query, max_edits",
    [("food", 2), ("food", 1), ("food", 0), ("kitten", 2), ("kitten", 3), ("flood", 2)],
)
def test_matches_exhaustive_search(query, max_edits):
    expected = fuzzy_search(query, WORDS, max_edits, levenshtein)
    found = _build(max_edits).fuzzy_search(query)
    assert sorted(found) == sorted(expected)
    assert len(found) == len(set(found))


@pytest.mark.parametrize("prefix_length", [3, 4, 7])
def test_longer_prefix_gives_same_result(prefix_length):
    expected = fuzzy_search("food", WORDS, 2, levenshtein)
    assert sorted(_build(2, prefix_length).fuzzy_search("food")) == sorted(expected)


def test_exact_match_comes_first():
    found = _build(2).fuzzy_search("food")
    assert found[0] == "food"


def test_query_not_indexed():
    found = _build(1).fuzzy_search("fooq")
    assert sorted(found) == sorted(fuzzy_search("fooq", WORDS, 1, levenshtein))
    assert "fooq" not in found


def test_kitten_sitting():
    sym = SymSpell(levenshtein, 2)
    sym.insert("sitting")
    assert sym.fuzzy_search("kitten") == []
    sym = SymSpell(levenshtein, 3)
    sym.insert("sitting")
    assert sym.fuzzy_search("kitten") == ["sitting"]


@pytest.mark.parametrize("max_edits, prefix_length", [(2, 2), (2, 1), (0, 0)])
def test_prefix_length_must_exceed_max_edits(max_edits, prefix_length):
    with pytest.raises(ValueError, match="prefix_length must be greater than max_edits"):
        SymSpell(levenshtein, max_edits, prefix_length)


def test_default_prefix_length():
    assert SymSpell(levenshtein, 2).prefix_length == 3