from __future__ import annotations

from functools import reduce
from typing import Iterable


class Set(object):
    """
    An ordered collection of unique elements.

    The order is the insertion order and is kept so that results print in a
    predictable way; equality between sets ignores it.
    """
    def __init__(self, elements: Iterable[str] = ()) -> None:
        super().__init__()
        self.elements: list[str] = list()
        self._members: set[str] = set()
        for element in elements:
            self.add(element)

    def add(self, element: str) -> None:
        if element not in self._members:
            self._members.add(element)
            self.elements.append(element)

    def body_str(self) -> str:
        return " ".join(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __contains__(self, item) -> bool:
        return item in self._members

    def __eq__(self, o: object) -> bool:
        if isinstance(o, Set):
            return self._members == o._members
        return False

    def __hash__(self) -> int:
        return hash(frozenset(self._members))

    def __str__(self) -> str:
        body = self.body_str()
        return f"S {body}" if body else "S"

    def __repr__(self) -> str:
        return f"Set({self.elements!r})"


def is_empty(s: Set) -> bool:
    return len(s) == 0


def cardinality(s: Set) -> int:
    return len(s)


def _union(s1: Set, s2: Set) -> Set:
    return Set(list(s1) + list(s2))


def _intersection(s1: Set, s2: Set) -> Set:
    return Set(e for e in s1 if e in s2)


def union(s1: Set, s2: Set, *others: Set) -> Set:
    """
    Union of two or more sets, folded from left to right

    :return: the elements of `s1` followed by the new elements of the others
    """
    return reduce(_union, others, _union(s1, s2))


def intersection(s1: Set, s2: Set, *others: Set) -> Set:
    """
    Intersection of two or more sets, folded from left to right

    :return: the elements of `s1` present in all the others
    """
    return reduce(_intersection, others, _intersection(s1, s2))


def difference(s1: Set, s2: Set) -> Set:
    return Set(e for e in s1 if e not in s2)


def complement(universe: Set, s: Set) -> Set:
    return difference(universe, s)


def is_subset_or_equal(s1: Set, s2: Set) -> bool:
    return all(e in s2 for e in s1)


def is_equal(s1: Set, s2: Set) -> bool:
    return len(s1) == len(s2) and is_subset_or_equal(s1, s2)


def is_proper_subset(s1: Set, s2: Set) -> bool:
    return is_subset_or_equal(s1, s2) and not is_equal(s1, s2)
