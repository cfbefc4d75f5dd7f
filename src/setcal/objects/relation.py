from __future__ import annotations

from typing import Iterable

import numpy as np

from setcal.objects.set import Set


class Relation(object):
    """
    A set of ordered pairs over the universe
    """
    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        super().__init__()
        self.pairs: list[tuple[str, str]] = list()
        for pair in pairs:
            pair = tuple(pair)
            if pair not in self.pairs:
                self.pairs.append(pair)

    @classmethod
    def from_flat(cls, args: list[str]) -> Relation:
        """
        Build a relation from a flat argument list `a1 b1 a2 b2 ...`

        :param args: alternating first and second components
        :return: the relation
        """
        if len(args) % 2 != 0:
            raise ValueError(
                f"A relation needs an even number of elements, but got {len(args)}."
            )
        return cls(zip(args[0::2], args[1::2]))

    def body_str(self) -> str:
        return " ".join(f"{a} {b}" for a, b in self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self):
        return iter(self.pairs)

    def __contains__(self, item) -> bool:
        return tuple(item) in self.pairs

    def __eq__(self, o: object) -> bool:
        if isinstance(o, Relation):
            return set(self.pairs) == set(o.pairs)
        return False

    def __hash__(self) -> int:
        return hash(frozenset(self.pairs))

    def __str__(self) -> str:
        body = self.body_str()
        return f"R {body}" if body else "R"

    def __repr__(self) -> str:
        return f"Relation({self.pairs!r})"


def build_table(relation: Relation, rows: Set,
                columns: Set = None) -> np.ndarray:
    """
    Build the adjacency table of a relation.

    `table[i][j]` is True iff the pair `(rows[i], columns[j])` is in the
    relation. Pairs whose components are not in the reference sets are
    left out.

    :param relation: the relation
    :param rows: the reference set indexing the rows, usually the universe
    :param columns: the reference set indexing the columns, defaults to `rows`
    :return: a boolean array of shape `(len(rows), len(columns))`
    """
    if columns is None:
        columns = rows
    row_index = dict((e, i) for i, e in enumerate(rows))
    column_index = dict((e, j) for j, e in enumerate(columns))
    table = np.zeros((len(rows), len(columns)), dtype=bool)
    for a, b in relation:
        if a in row_index and b in column_index:
            table[row_index[a], column_index[b]] = True
    return table


def _is_function_table(table: np.ndarray) -> bool:
    return bool((table.sum(axis=1) <= 1).all())


def reflexive(universe: Set, relation: Relation) -> bool:
    table = build_table(relation, universe)
    return bool(table.diagonal().all())


def symmetric(universe: Set, relation: Relation) -> bool:
    table = build_table(relation, universe)
    return bool((~table | table.T).all())


def antisymmetric(universe: Set, relation: Relation) -> bool:
    table = build_table(relation, universe)
    off_diagonal = ~np.eye(len(universe), dtype=bool)
    return not bool((table & table.T & off_diagonal).any())


def transitive(universe: Set, relation: Relation) -> bool:
    table = build_table(relation, universe)
    as_int = table.astype(int)
    # pairs reachable in exactly two steps
    two_steps = (as_int @ as_int) > 0
    return not bool((two_steps & ~table).any())


def is_function(universe: Set, relation: Relation) -> bool:
    return _is_function_table(build_table(relation, universe))


def domain(universe: Set, relation: Relation) -> Set:
    firsts = set(a for a, _ in relation)
    return Set(e for e in universe if e in firsts)


def codomain(universe: Set, relation: Relation) -> Set:
    seconds = set(b for _, b in relation)
    return Set(e for e in universe if e in seconds)


def injective(relation: Relation, domain_set: Set, codomain_set: Set) -> bool:
    table = build_table(relation, domain_set, codomain_set)
    return _is_function_table(table) and \
        bool((table.sum(axis=0) <= 1).all())


def surjective(relation: Relation, domain_set: Set, codomain_set: Set) -> bool:
    table = build_table(relation, domain_set, codomain_set)
    return _is_function_table(table) and \
        bool((table.sum(axis=0) >= 1).all())


def bijective(relation: Relation, domain_set: Set, codomain_set: Set) -> bool:
    return injective(relation, domain_set, codomain_set) and \
        surjective(relation, domain_set, codomain_set)
