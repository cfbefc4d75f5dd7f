from setcal.parser.common import common_grammar


setcal_grammar = r"""
    program: (command | _NL)*
    command: WORD WORD* _NL

    // a "#" only starts a comment at the beginning of a word
    WORD: /[^\s#]\S*/
"""

grammar = setcal_grammar + common_grammar
