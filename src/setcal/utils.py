from __future__ import annotations


MAX_COMMANDS = 1000
MAX_ELEMENT_LENGTH = 30
BOOL_LITERALS = ('true', 'false')


class SetcalError(Exception):
    """
    Base class of every fatal error raised while running a program
    """
    rule: str = 'error'

    def __init__(self, message: str, line: int = None,
                 index: int = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.line: int = line
        self.index: int = index

    def diagnostic(self, source: str = '<input>') -> str:
        location = source if self.line is None else f"{source}:{self.line}"
        return f"{location}: {self.rule}: {self.message}"


class ParseError(SetcalError):
    rule = 'parse'


class ValidationError(SetcalError):
    def __init__(self, rule: str, message: str, line: int = None,
                 index: int = None) -> None:
        self.rule = rule
        super().__init__(message, line, index)


class StructuralViolation(ValidationError):
    pass


class SemanticViolation(ValidationError):
    pass


class UnknownOperation(ValidationError):
    def __init__(self, name: str, line: int = None,
                 index: int = None) -> None:
        super().__init__(
            'operation', f"Unknown operation '{name}'.", line, index
        )
        self.name: str = name


class ArityMismatch(ValidationError):
    def __init__(self, name: str, expected: int, actual: int,
                 line: int = None, index: int = None) -> None:
        super().__init__(
            'arity',
            f"Operation '{name}' expects {expected} operand(s), but got {actual}.",
            line, index
        )
        self.expected: int = expected
        self.actual: int = actual


class EvaluationError(SetcalError):
    rule = 'evaluation'


class UnresolvedOperand(EvaluationError):
    rule = 'unresolved-operand'
