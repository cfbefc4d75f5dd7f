from __future__ import annotations

from enum import Enum
from typing import Union

from setcal.objects.relation import Relation
from setcal.objects.set import Set


Value = Union[Set, Relation, bool, int]


class ValueKind(Enum):
    SET = 'set'
    RELATION = 'relation'
    BOOL = 'bool'
    INT = 'int'

    def __str__(self) -> str:
        return self.value


def value_kind(value: Value) -> ValueKind:
    # bool before int, as bool is a subclass of int
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, Set):
        return ValueKind.SET
    if isinstance(value, Relation):
        return ValueKind.RELATION
    raise TypeError(f"Not a setcal value: {value!r} of type {type(value)}")


def format_value(value: Value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
