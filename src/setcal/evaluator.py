from __future__ import annotations

from typing import Mapping

from logzero import logger

from setcal.catalog import OPERATIONS, Operation
from setcal.objects.base import Invocation, Result
from setcal.objects.utils import Value, value_kind
from setcal.program import Program, load
from setcal.utils import EvaluationError, UnresolvedOperand


class Evaluator(object):
    """
    Evaluates the commands of a validated program in source order,
    writing each result back into the program.
    """
    def __init__(self, program: Program,
                 catalog: Mapping[str, Operation] = OPERATIONS) -> None:
        super().__init__()
        self.program: Program = program
        self.catalog: Mapping[str, Operation] = catalog

    def run(self) -> Program:
        # `invocations` yields lazily, so each command sees the results
        # already written by the ones before it
        for invocation in self.program.invocations():
            self.evaluate(invocation)
        return self.program

    def evaluate(self, invocation: Invocation) -> Result:
        operation = self.catalog.get(invocation.name)
        if operation is None:
            raise EvaluationError(
                f"Unknown operation '{invocation.name}'.",
                invocation.line, invocation.index
            )
        operands = self.resolve(invocation, operation)
        value = operation(self.program.universe, operands)
        return self.program.replace(invocation.index, value)

    def resolve(self, invocation: Invocation,
                operation: Operation) -> list[Value]:
        """
        Look up the operands of an invocation and check them against the
        operation once more

        :param invocation: the invocation
        :param operation: its catalog entry
        :return: the operand values, in order
        """
        if len(invocation.operands) != operation.arity:
            raise EvaluationError(
                f"Operation '{operation.name}' expects {operation.arity} operand(s), "
                f"but got {len(invocation.operands)}.",
                invocation.line, invocation.index
            )
        operands = list()
        for index, expected in zip(invocation.operands, operation.operand_kinds):
            if index >= invocation.index:
                raise UnresolvedOperand(
                    f"Line {index} does not precede line {invocation.index}.",
                    invocation.line, invocation.index
                )
            value = self.program.value_at(index, invocation.line)
            if value_kind(value) is not expected:
                raise UnresolvedOperand(
                    f"Operation '{operation.name}' expects a {expected} at line {index}, "
                    f"but got a {value_kind(value)}.",
                    invocation.line, invocation.index
                )
            operands.append(value)
        return operands


def evaluate(program: Program) -> Program:
    """
    Evaluate all commands of a program in place

    :param program: the validated program
    :return: the same program, every command replaced by its result
    """
    Evaluator(program).run()
    logger.debug(f"Evaluated {len(program)} line(s)")
    return program


def run(text: str) -> list[str]:
    """
    Parse, validate and evaluate a program

    :param text: the program source
    :return: the output lines, one per command
    """
    return evaluate(load(text)).listing()
