from __future__ import annotations

import logging

from enum import Enum
from typing import Iterable, List

logger = logging.getLogger(__name__)


class Token(Enum):
    RIGHT = '>'
    LEFT = '<'
    INC = '+'
    DEC = '-'
    OUT = '.'
    IN = ','
    BEGIN = '['
    END = ']'


_SYMBOLS = {token.value: token for token in Token}


def is_code_char(ch: str) -> bool:
    return ch in _SYMBOLS


def tokenize(text: str) -> List[Token]:
    """Turn source text into tokens, dropping every non-instruction character."""
    tokens = [_SYMBOLS[ch] for ch in text if is_code_char(ch)]
    logger.debug("lexed %d tokens from %d characters", len(tokens), len(text))
    return tokens


def render(tokens: Iterable[Token]) -> str:
    return ''.join(token.value for token in tokens)
