from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from setcal.objects import relation as rel
from setcal.objects import set as st
from setcal.objects.utils import Value, ValueKind


SET_LEVEL = ValueKind.SET
RELATION_LEVEL = ValueKind.RELATION


class Operation(object):
    """
    A catalog entry: what an operation is called, which operands it takes
    and what it produces.

    :param name: the name used in `C <name> ...` commands
    :param level: the kind of value the operation works on, also the kind of its first operand
    :param operand_kinds: the expected kind of each operand, in order
    :param result_kind: the kind of the produced value
    :param func: the routine computing the result
    :param use_universe: whether the routine takes the universe as its first argument
    """
    def __init__(self, name: str, level: ValueKind,
                 operand_kinds: tuple[ValueKind, ...],
                 result_kind: ValueKind,
                 func: Callable[..., Value],
                 use_universe: bool = False) -> None:
        super().__init__()
        self.name: str = name
        self.level: ValueKind = level
        self.operand_kinds: tuple[ValueKind, ...] = operand_kinds
        self.result_kind: ValueKind = result_kind
        self.func: Callable[..., Value] = func
        self.use_universe: bool = use_universe

    @property
    def arity(self) -> int:
        return len(self.operand_kinds)

    def __call__(self, universe: st.Set, operands: list[Value]) -> Value:
        if self.use_universe:
            return self.func(universe, *operands)
        return self.func(*operands)

    def __str__(self) -> str:
        kinds = ", ".join(str(k) for k in self.operand_kinds)
        return f"{self.name}({kinds}) -> {self.result_kind}"

    def __repr__(self) -> str:
        return str(self)


SET = ValueKind.SET
REL = ValueKind.RELATION
BOOL = ValueKind.BOOL
INT = ValueKind.INT


def _build_catalog(*operations: Operation) -> Mapping[str, Operation]:
    catalog = dict()
    for operation in operations:
        if operation.name in catalog:
            raise ValueError(f"Operation {operation.name} is defined twice.")
        catalog[operation.name] = operation
    return MappingProxyType(catalog)


OPERATIONS: Mapping[str, Operation] = _build_catalog(
    Operation('empty', SET_LEVEL, (SET,), BOOL, st.is_empty),
    Operation('card', SET_LEVEL, (SET,), INT, st.cardinality),
    Operation('complement', SET_LEVEL, (SET,), SET, st.complement,
              use_universe=True),
    Operation('union', SET_LEVEL, (SET, SET), SET, st.union),
    Operation('intersect', SET_LEVEL, (SET, SET), SET, st.intersection),
    Operation('minus', SET_LEVEL, (SET, SET), SET, st.difference),
    Operation('subseteq', SET_LEVEL, (SET, SET), BOOL, st.is_subset_or_equal),
    Operation('subset', SET_LEVEL, (SET, SET), BOOL, st.is_proper_subset),
    Operation('equals', SET_LEVEL, (SET, SET), BOOL, st.is_equal),
    Operation('reflexive', RELATION_LEVEL, (REL,), BOOL, rel.reflexive,
              use_universe=True),
    Operation('symmetric', RELATION_LEVEL, (REL,), BOOL, rel.symmetric,
              use_universe=True),
    Operation('antisymmetric', RELATION_LEVEL, (REL,), BOOL, rel.antisymmetric,
              use_universe=True),
    Operation('transitive', RELATION_LEVEL, (REL,), BOOL, rel.transitive,
              use_universe=True),
    Operation('function', RELATION_LEVEL, (REL,), BOOL, rel.is_function,
              use_universe=True),
    Operation('domain', RELATION_LEVEL, (REL,), SET, rel.domain,
              use_universe=True),
    Operation('codomain', RELATION_LEVEL, (REL,), SET, rel.codomain,
              use_universe=True),
    Operation('injective', RELATION_LEVEL, (REL, SET, SET), BOOL, rel.injective),
    Operation('surjective', RELATION_LEVEL, (REL, SET, SET), BOOL, rel.surjective),
    Operation('bijective', RELATION_LEVEL, (REL, SET, SET), BOOL, rel.bijective),
)

