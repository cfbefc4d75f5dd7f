from __future__ import annotations

from enum import Enum
from typing import Optional

from setcal.objects.relation import Relation
from setcal.objects.set import Set
from setcal.objects.utils import Value, format_value


class CommandKind(Enum):
    UNIVERSE = 'U'
    SET = 'S'
    RELATION = 'R'
    COMMAND = 'C'

    @classmethod
    def lookup(cls, kind: str) -> Optional[CommandKind]:
        try:
            return cls(kind)
        except ValueError:
            return None


class Command(object):
    """
    One tokenized source line: a kind word followed by its arguments.

    Nothing about the content is checked here, the validator does that on
    the whole sequence.
    """
    def __init__(self, kind: str, args: list[str] = None,
                 line: int = None) -> None:
        super().__init__()
        self.kind: str = kind
        self.args: list[str] = list(args) if args is not None else list()
        self.line: int = line

    @property
    def command_kind(self) -> Optional[CommandKind]:
        return CommandKind.lookup(self.kind)

    def __eq__(self, o: object) -> bool:
        if isinstance(o, Command):
            return self.kind == o.kind and self.args == o.args
        return False

    def __str__(self) -> str:
        return " ".join([self.kind] + self.args)

    def __repr__(self) -> str:
        return f"Command({self.kind!r}, {self.args!r}, line={self.line})"


"""
Typed statements live in the slots of a Program. Each one knows its
1-based declaration index and the source line it came from. Declarations
and results carry a value that later invocations can refer to; an
invocation has no value until the evaluator replaces it with a Result.
"""
class Statement(object):
    def __init__(self, index: int, line: int = None) -> None:
        super().__init__()
        self.index: int = index
        self.line: int = line

    @property
    def value(self) -> Optional[Value]:
        return None

    def body_str(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.body_str()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.index}: {self})"


class Declaration(Statement):
    letter: str = None

    def __init__(self, index: int, value: Value, line: int = None) -> None:
        super().__init__(index, line)
        self._value: Value = value

    @property
    def value(self) -> Value:
        return self._value

    def body_str(self) -> str:
        body = self._value.body_str()
        return f"{self.letter} {body}" if body else self.letter


class UniverseDecl(Declaration):
    letter = CommandKind.UNIVERSE.value

    def __init__(self, index: int, elements: list[str],
                 line: int = None) -> None:
        super().__init__(index, Set(elements), line)


class SetDecl(Declaration):
    letter = CommandKind.SET.value

    def __init__(self, index: int, elements: list[str],
                 line: int = None) -> None:
        super().__init__(index, Set(elements), line)


class RelationDecl(Declaration):
    letter = CommandKind.RELATION.value

    def __init__(self, index: int, elements: list[str],
                 line: int = None) -> None:
        super().__init__(index, Relation.from_flat(elements), line)


class Invocation(Statement):
    def __init__(self, index: int, name: str, operands: list[int],
                 line: int = None) -> None:
        super().__init__(index, line)
        self.name: str = name
        self.operands: list[int] = list(operands)

    def body_str(self) -> str:
        return " ".join(
            [CommandKind.COMMAND.value, self.name] + [str(i) for i in self.operands]
        )


class Result(Statement):
    """
    The outcome of an evaluated invocation
    """
    def __init__(self, index: int, value: Value, line: int = None,
                 name: str = None) -> None:
        super().__init__(index, line)
        self._value: Value = value
        # the operation that produced the result, for debugging
        self.name: str = name

    @property
    def value(self) -> Value:
        return self._value

    def body_str(self) -> str:
        return format_value(self._value)
