from __future__ import annotations

from typing import Callable, Mapping, Optional

from logzero import logger

from setcal.catalog import OPERATIONS, Operation
from setcal.objects.base import Command, CommandKind
from setcal.objects.utils import ValueKind
from setcal.utils import BOOL_LITERALS, MAX_COMMANDS, MAX_ELEMENT_LENGTH, \
    ArityMismatch, SemanticViolation, StructuralViolation, UnknownOperation, \
    ValidationError


Catalog = Mapping[str, Operation]

DECLARATION_KINDS = (CommandKind.SET, CommandKind.RELATION)
DECLARATION_VALUE_KINDS = {
    CommandKind.UNIVERSE: ValueKind.SET,
    CommandKind.SET: ValueKind.SET,
    CommandKind.RELATION: ValueKind.RELATION,
}


def _kinds(commands: list[Command]) -> list[Optional[CommandKind]]:
    return [command.command_kind for command in commands]


def _structural(rule: str, message: str, commands: list[Command],
                index: int = None) -> StructuralViolation:
    line = commands[index - 1].line if index is not None else None
    return StructuralViolation(rule, message, line, index)


def check_size(commands: list[Command], catalog: Catalog) -> None:
    if len(commands) == 0:
        raise _structural('size', "The program contains no commands.", commands)
    if len(commands) > MAX_COMMANDS:
        raise _structural(
            'size',
            f"The program contains {len(commands)} commands, "
            f"at most {MAX_COMMANDS} are allowed.",
            commands, MAX_COMMANDS + 1
        )


def check_single_universe(commands: list[Command], catalog: Catalog) -> None:
    universes = [
        index for index, kind in enumerate(_kinds(commands), 1)
        if kind is CommandKind.UNIVERSE
    ]
    if len(universes) == 0:
        raise _structural('single-universe', "No universe is declared.", commands)
    if len(universes) > 1:
        raise _structural(
            'single-universe',
            f"The universe is declared {len(universes)} times.",
            commands, universes[1]
        )


def check_command_kinds(commands: list[Command], catalog: Catalog) -> None:
    for index, command in enumerate(commands, 1):
        if command.command_kind is None:
            raise _structural(
                'command-kind',
                f"Unknown command kind '{command.kind}'.",
                commands, index
            )


def check_ordering(commands: list[Command], catalog: Catalog) -> None:
    kinds = _kinds(commands)
    if kinds[0] is not CommandKind.UNIVERSE:
        raise _structural(
            'ordering',
            "The universe must be declared by the first command.",
            commands, 1
        )
    first_invocation = None
    for index, kind in enumerate(kinds, 1):
        if kind is CommandKind.COMMAND:
            if first_invocation is None:
                first_invocation = index
        elif first_invocation is not None:
            raise _structural(
                'ordering',
                f"Declaration '{kind.value}' after the first command "
                f"at position {first_invocation}.",
                commands, index
            )


def check_has_invocation(commands: list[Command], catalog: Catalog) -> None:
    if CommandKind.COMMAND not in _kinds(commands):
        raise _structural('has-invocation', "The program contains no command.", commands)


def check_has_declaration(commands: list[Command], catalog: Catalog) -> None:
    if not any(kind in DECLARATION_KINDS for kind in _kinds(commands)):
        raise _structural(
            'has-declaration',
            "The program must contain at least two distinct command kinds: "
            "no set or relation is declared.",
            commands
        )


def check_distinct_kinds(commands: list[Command], catalog: Catalog) -> None:
    if len(set(_kinds(commands))) < 2:
        raise _structural(
            'distinct-kinds',
            "The program must contain at least two distinct command kinds.",
            commands
        )


def check_universe_elements(commands: list[Command], catalog: Catalog) -> None:
    universe = commands[0]
    seen = set()
    for element in universe.args:
        reason = None
        if len(element) > MAX_ELEMENT_LENGTH:
            reason = f"is longer than {MAX_ELEMENT_LENGTH} characters"
        elif not (element.isascii() and element.isalpha()):
            reason = "contains characters other than letters"
        elif element in BOOL_LITERALS:
            reason = "is a boolean literal"
        elif element in catalog:
            reason = "is the name of an operation"
        elif element in seen:
            reason = "is declared twice"
        if reason is not None:
            raise SemanticViolation(
                'universe-element',
                f"Universe element '{element}' {reason}.",
                universe.line, 1
            )
        seen.add(element)


def check_declared_elements(commands: list[Command], catalog: Catalog) -> None:
    universe = set(commands[0].args)
    for index, command in enumerate(commands, 1):
        kind = command.command_kind
        if kind not in DECLARATION_KINDS:
            continue
        for element in command.args:
            if element not in universe:
                raise SemanticViolation(
                    'set-element',
                    f"Element '{element}' is not in the universe.",
                    command.line, index
                )
        if kind is CommandKind.SET:
            items = command.args
        else:
            if len(command.args) % 2 != 0:
                raise SemanticViolation(
                    'set-element',
                    "A relation must consist of pairs, "
                    f"but got {len(command.args)} elements.",
                    command.line, index
                )
            items = list(zip(command.args[0::2], command.args[1::2]))
        if len(items) != len(set(items)):
            duplicate = next(i for i in items if items.count(i) > 1)
            if isinstance(duplicate, tuple):
                duplicate = "(" + " ".join(duplicate) + ")"
            raise SemanticViolation(
                'set-element',
                f"Element {duplicate} is repeated.",
                command.line, index
            )


def _parse_operand(token: str) -> Optional[int]:
    if token.isascii() and token.isdigit():
        return int(token)
    return None


def check_invocations(commands: list[Command], catalog: Catalog) -> None:
    # the static kind of the value each command will hold
    kinds: list[ValueKind] = list()
    for index, command in enumerate(commands, 1):
        kind = command.command_kind
        if kind is not CommandKind.COMMAND:
            kinds.append(DECLARATION_VALUE_KINDS[kind])
            continue
        if len(command.args) == 0:
            raise SemanticViolation(
                'operation', "The command names no operation.",
                command.line, index
            )
        name, operands = command.args[0], command.args[1:]
        operation = catalog.get(name)
        if operation is None:
            raise UnknownOperation(name, command.line, index)
        if operation.arity != len(operands):
            raise ArityMismatch(
                name, operation.arity, len(operands), command.line, index
            )
        for position, (token, expected) in enumerate(
                zip(operands, operation.operand_kinds), 1):
            target = _parse_operand(token)
            if target is None or target < 1:
                raise SemanticViolation(
                    'operand',
                    f"Operand {position} of '{name}' must be a positive line index, "
                    f"but got '{token}'.",
                    command.line, index
                )
            if target >= index:
                raise SemanticViolation(
                    'operand',
                    f"Operand {position} of '{name}' refers to line {target}, "
                    "which does not precede the command.",
                    command.line, index
                )
            actual = kinds[target - 1]
            if position == 1 and actual is not operation.level:
                raise SemanticViolation(
                    'operand',
                    f"'{name}' is a {operation.level} operation, "
                    f"but line {target} holds a {actual}.",
                    command.line, index
                )
            if actual is not expected:
                raise SemanticViolation(
                    'operand',
                    f"Operand {position} of '{name}' must be a {expected}, "
                    f"but line {target} holds a {actual}.",
                    command.line, index
                )
        kinds.append(operation.result_kind)


# NOTE: the order is part of the contract, the first failing rule is reported
RULES: tuple[Callable[[list[Command], Catalog], None], ...] = (
    check_size,
    check_single_universe,
    check_command_kinds,
    check_ordering,
    check_has_invocation,
    check_has_declaration,
    check_distinct_kinds,
    check_universe_elements,
    check_declared_elements,
    check_invocations,
)


def check(commands: list[Command], catalog: Catalog = OPERATIONS) -> None:
    """
    Check a command sequence against all rules

    :param commands: the command sequence
    :param catalog: the operations the commands may invoke
    :raises ValidationError: the first violated rule
    """
    for rule in RULES:
        logger.debug(f"Checking {rule.__name__}")
        rule(commands, catalog)


def validate(commands: list[Command],
             catalog: Catalog = OPERATIONS) -> Optional[ValidationError]:
    """
    Same as `check`, but return the first violation instead of raising it

    :return: None if the sequence is valid
    """
    try:
        check(commands, catalog)
    except ValidationError as e:
        return e
    return None
