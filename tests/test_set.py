"""
Tests for the set algebra.
"""

from hypothesis import given
from hypothesis import strategies as st

from setcal.objects.set import Set, cardinality, complement, difference, \
    intersection, is_empty, is_equal, is_proper_subset, is_subset_or_equal, union


UNIVERSE = Set(["a", "b", "c", "d", "e"])


@st.composite
def subsets(draw):
    """Random subset of the test universe, in random order."""
    elements = draw(st.lists(st.sampled_from(UNIVERSE.elements), unique=True))
    return Set(elements)


def test_set_drops_duplicates_and_keeps_order():
    s = Set(["b", "a", "b", "c", "a"])
    assert s.elements == ["b", "a", "c"]
    assert len(s) == 3
    assert "a" in s
    assert "z" not in s


def test_set_equality_ignores_order():
    assert Set(["a", "b"]) == Set(["b", "a"])
    assert Set(["a"]) != Set(["a", "b"])
    assert hash(Set(["a", "b"])) == hash(Set(["b", "a"]))


def test_set_str():
    assert str(Set(["a", "b", "c"])) == "S a b c"
    assert str(Set()) == "S"


def test_empty_and_cardinality():
    assert is_empty(Set())
    assert not is_empty(Set(["a"]))
    assert cardinality(Set()) == 0
    assert cardinality(Set(["a", "b"])) == 2


def test_union_order():
    result = union(Set(["c", "a"]), Set(["b", "a", "d"]))
    assert result.elements == ["c", "a", "b", "d"]


def test_union_folds_more_operands():
    result = union(Set(["a"]), Set(["b"]), Set(["c", "a"]))
    assert result.elements == ["a", "b", "c"]


def test_intersection_keeps_first_operand_order():
    result = intersection(Set(["c", "b", "a"]), Set(["a", "c"]))
    assert result.elements == ["c", "a"]
    assert intersection(Set(["a", "b"]), Set(["b", "c"]), Set(["c"])) == Set()


def test_difference():
    assert difference(Set(["a", "b", "c"]), Set(["b"])).elements == ["a", "c"]


def test_complement_uses_universe_order():
    assert complement(UNIVERSE, Set(["d", "a"])).elements == ["b", "c", "e"]


def test_subset_relations():
    small, big = Set(["a"]), Set(["a", "b"])
    assert is_subset_or_equal(small, big)
    assert is_subset_or_equal(big, big)
    assert not is_subset_or_equal(big, small)
    assert is_proper_subset(small, big)
    assert not is_proper_subset(big, big)
    assert is_subset_or_equal(Set(), small)


def test_is_equal():
    assert is_equal(Set(["a", "b"]), Set(["b", "a"]))
    assert not is_equal(Set(["a", "b"]), Set(["a", "c"]))
    assert not is_equal(Set(["a"]), Set(["a", "b"]))


@given(subsets())
def test_idempotent_laws(s):
    assert union(s, s) == s
    assert intersection(s, s) == s
    assert is_empty(difference(s, s))


@given(subsets(), subsets())
def test_union_is_commutative(s1, s2):
    assert is_equal(union(s1, s2), union(s2, s1))


@given(subsets(), subsets())
def test_inclusion_exclusion(s1, s2):
    assert cardinality(union(s1, s2)) + cardinality(intersection(s1, s2)) \
        == cardinality(s1) + cardinality(s2)


@given(subsets())
def test_double_complement(s):
    assert complement(UNIVERSE, complement(UNIVERSE, s)) == s
