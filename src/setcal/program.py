from __future__ import annotations

from typing import Iterator, Optional

from logzero import logger

from setcal.objects.base import Command, CommandKind, Invocation, RelationDecl, \
    Result, SetDecl, Statement, UniverseDecl
from setcal.objects.set import Set
from setcal.objects.utils import Value
from setcal.parser.parser import parse
from setcal.utils import EvaluationError, UnresolvedOperand
from setcal.validator import check


def build_statement(command: Command, index: int) -> Statement:
    """
    Turn a validated command into the typed statement for its slot

    :param command: the command
    :param index: the 1-based declaration index of the command
    :return: the statement
    """
    kind = command.command_kind
    if kind is CommandKind.UNIVERSE:
        return UniverseDecl(index, command.args, command.line)
    if kind is CommandKind.SET:
        return SetDecl(index, command.args, command.line)
    if kind is CommandKind.RELATION:
        return RelationDecl(index, command.args, command.line)
    if kind is CommandKind.COMMAND:
        name, operands = command.args[0], command.args[1:]
        return Invocation(index, name, [int(i) for i in operands], command.line)
    raise ValueError(f"Unknown command kind {command.kind!r}")


class Program(object):
    """
    The statements of a program, addressed by their 1-based declaration index.

    Slots are never added, removed or moved after construction. The only
    mutation is `replace`, which turns an Invocation into its Result once.
    """
    def __init__(self, commands: list[Command]) -> None:
        super().__init__()
        self.statements: list[Statement] = [
            build_statement(command, index)
            for index, command in enumerate(commands, 1)
        ]
        # declaration index -> value, built on first use
        self._registry: Optional[dict[int, Value]] = None

    @property
    def universe(self) -> Set:
        return self.statements[0].value

    @property
    def registry(self) -> dict[int, Value]:
        if self._registry is None:
            self._registry = dict(
                (statement.index, statement.value)
                for statement in self.statements
                if statement.value is not None
            )
        return self._registry

    def invocations(self) -> Iterator[Invocation]:
        for statement in self.statements:
            if isinstance(statement, Invocation):
                yield statement

    def value_at(self, index: int, line: int = None) -> Value:
        """
        Resolve an operand index

        :param index: the 1-based declaration index
        :param line: the source line of the referring command, for diagnostics
        :return: the value held at the index
        :raises UnresolvedOperand: if the index is out of range or holds no value yet
        """
        if not 1 <= index <= len(self.statements):
            raise UnresolvedOperand(
                f"Line {index} is out of range 1..{len(self.statements)}.",
                line, index
            )
        if index not in self.registry:
            raise UnresolvedOperand(
                f"Line {index} has not produced a value yet.",
                line if line is not None else self.statements[index - 1].line,
                index
            )
        return self.registry[index]

    def replace(self, index: int, value: Value) -> Result:
        """
        Overwrite an invocation slot with its result

        :param index: the 1-based declaration index of the invocation
        :param value: the computed value
        :return: the result statement now held by the slot
        """
        statement = self[index]
        if not isinstance(statement, Invocation):
            raise EvaluationError(
                f"Line {index} is not an unevaluated command.",
                statement.line, index
            )
        result = Result(index, value, statement.line, statement.name)
        self.statements[index - 1] = result
        self.registry[index] = value
        logger.debug(f"Line {index}: {statement} => {result}")
        return result

    def listing(self) -> list[str]:
        return [str(statement) for statement in self.statements]

    def __getitem__(self, index: int) -> Statement:
        if not 1 <= index <= len(self.statements):
            raise IndexError(f"Line {index} is out of range 1..{len(self.statements)}.")
        return self.statements[index - 1]

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)

    def __str__(self) -> str:
        return "\n".join(self.listing())

    def __repr__(self) -> str:
        return str(self)


def load(text: str) -> Program:
    """
    Parse and validate a program

    :param text: the program source
    :return: the program, ready to be evaluated
    """
    commands = parse(text)
    check(commands)
    logger.debug(f"Validated {len(commands)} command(s)")
    return Program(commands)
