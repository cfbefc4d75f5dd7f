from __future__ import annotations


# newlines are significant, so only inline whitespace is ignored
common_grammar = r"""
    _NL: /(\r?\n[\t ]*)+/

    %import common.WS_INLINE
    %import common.SH_COMMENT
    %ignore WS_INLINE
    %ignore SH_COMMENT
"""
