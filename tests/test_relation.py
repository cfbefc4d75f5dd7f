"""
Tests for the relation tables and predicates.
"""

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from setcal.objects.relation import Relation, antisymmetric, bijective, \
    build_table, codomain, domain, injective, is_function, reflexive, \
    surjective, symmetric, transitive
from setcal.objects.set import Set


UNIVERSE = Set(["a", "b", "c"])


def rel(*pairs):
    return Relation(tuple(p.split()) for p in pairs)


@st.composite
def relations(draw):
    """Random relation over the test universe."""
    pairs = draw(st.lists(
        st.tuples(st.sampled_from(UNIVERSE.elements),
                  st.sampled_from(UNIVERSE.elements)),
        unique=True
    ))
    return Relation(pairs)


@st.composite
def subsets(draw):
    return Set(draw(st.lists(st.sampled_from(UNIVERSE.elements), unique=True)))


def test_from_flat():
    relation = Relation.from_flat(["a", "b", "b", "c"])
    assert relation.pairs == [("a", "b"), ("b", "c")]
    assert ("a", "b") in relation
    assert str(relation) == "R a b b c"


def test_from_flat_rejects_odd_arguments():
    with pytest.raises(ValueError):
        Relation.from_flat(["a", "b", "c"])


def test_relation_drops_duplicate_pairs():
    assert len(rel("a b", "a b", "b a")) == 2


def test_build_table():
    table = build_table(rel("a b", "c c"), UNIVERSE)
    expected = np.array([
        [False, True, False],
        [False, False, False],
        [False, False, True],
    ])
    assert table.dtype == bool
    assert (table == expected).all()


def test_build_table_ignores_pairs_outside_reference_sets():
    table = build_table(rel("a b", "c a"), Set(["a"]), Set(["b", "c"]))
    assert table.shape == (1, 2)
    assert table.tolist() == [[True, False]]


def test_reflexive():
    assert reflexive(UNIVERSE, rel("a a", "b b", "c c", "a b"))
    assert not reflexive(UNIVERSE, rel("a a", "b b"))


def test_symmetric():
    assert symmetric(UNIVERSE, rel("a b", "b a", "c c"))
    assert not symmetric(UNIVERSE, rel("a b"))


def test_antisymmetric():
    assert antisymmetric(UNIVERSE, rel("a b", "a a", "b c"))
    assert not antisymmetric(UNIVERSE, rel("a b", "b a"))


def test_transitive():
    assert transitive(UNIVERSE, rel("a b", "b c", "a c"))
    assert not transitive(UNIVERSE, rel("a b", "b c"))


def test_is_function():
    assert is_function(UNIVERSE, rel("a b", "b b"))
    assert not is_function(UNIVERSE, rel("a b", "a c"))


def test_domain_and_codomain_follow_universe_order():
    relation = rel("c a", "a a", "c b")
    assert domain(UNIVERSE, relation).elements == ["a", "c"]
    assert codomain(UNIVERSE, relation).elements == ["a", "b"]


def test_injective_surjective_bijective():
    a, b = Set(["a", "b"]), Set(["b", "c"])
    one_to_one = rel("a b", "b c")
    assert injective(one_to_one, a, b)
    assert surjective(one_to_one, a, b)
    assert bijective(one_to_one, a, b)

    collapse = rel("a b", "b b")
    assert not injective(collapse, a, b)
    assert not surjective(collapse, a, b)
    assert not bijective(collapse, a, b)

    partial = rel("a b")
    assert injective(partial, a, b)
    assert not surjective(partial, a, b)

    not_function = rel("a b", "a c")
    assert not injective(not_function, a, b)
    assert not surjective(not_function, a, b)


def test_empty_relation():
    empty = Relation()
    assert is_function(UNIVERSE, empty)
    assert symmetric(UNIVERSE, empty)
    assert antisymmetric(UNIVERSE, empty)
    assert transitive(UNIVERSE, empty)
    assert not reflexive(UNIVERSE, empty)


def test_empty_universe():
    assert reflexive(Set(), Relation())
    assert transitive(Set(), Relation())


@given(relations(), subsets(), subsets())
def test_bijective_iff_injective_and_surjective(relation, a, b):
    assert bijective(relation, a, b) == \
        (injective(relation, a, b) and surjective(relation, a, b))


@given(relations())
def test_symmetric_matches_pairs(relation):
    expected = all((y, x) in relation for x, y in relation)
    assert symmetric(UNIVERSE, relation) == expected
