from __future__ import annotations

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput
from logzero import logger

from setcal.objects.base import Command
from setcal.parser.grammar import grammar
from setcal.utils import ParseError


class SetcalTransformer(Transformer):
    def command(self, args: list[Token]) -> Command:
        kind, *arguments = args
        return Command(str(kind), [str(a) for a in arguments], kind.line)

    def program(self, args: list[Command]) -> list[Command]:
        # NOTE: keep the source order, it defines the declaration indices
        return list(args)


def parse(text: str) -> list[Command]:
    """
    Tokenize a program into its command sequence

    :param text: the program source
    :return: one command per non-blank, non-comment line
    """
    setcal_parser = Lark(grammar, start='program', parser='lalr')
    if not text.endswith('\n'):
        text = text + '\n'
    try:
        tree = setcal_parser.parse(text)
    except UnexpectedInput as e:
        line = getattr(e, "line", -1)
        raise ParseError(
            f"Malformed line: {str(e).splitlines()[0]}",
            line=line if line > 0 else None
        ) from e
    commands = SetcalTransformer().transform(tree)
    logger.debug(f"Parsed {len(commands)} command(s)")
    return commands
