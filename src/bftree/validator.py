from __future__ import annotations

import logging

from typing import List, Optional, Sequence

from .errors import make_bracket_error
from .lexer import Token, render

logger = logging.getLogger(__name__)


def find_unbalanced(tokens: Sequence[Token]) -> Optional[int]:
    """Return the index of the first offending bracket, or None if balanced.

    A stray ``]`` is reported at its own index. When loops are left open at end
    of input, the earliest unclosed ``[`` is reported.
    """
    open_positions: List[int] = []
    for i, token in enumerate(tokens):
        if token is Token.BEGIN:
            open_positions.append(i)
        elif token is Token.END:
            if not open_positions:
                return i
            open_positions.pop()

    if open_positions:
        return open_positions[0]
    return None


def is_balanced(tokens: Sequence[Token]) -> bool:
    verdict = find_unbalanced(tokens) is None
    logger.debug("bracket balance check: %s", "ok" if verdict else "failed")
    return verdict


def check_balanced(tokens: Sequence[Token]) -> None:
    position = find_unbalanced(tokens)
    if position is not None:
        raise make_bracket_error(source=render(tokens), position=position)
