from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _build_context(text: str, index: int, *, context: int = 10) -> str:
    start = max(0, index - context)
    end = min(len(text), index + context + 1)

    snippet = text[start:end]
    caret = ' ' * (index - start) + '^'
    return f"  {snippet}\n  {caret}"


def _hint_for(symbol: str) -> Optional[str]:
    if symbol == ']':
        return 'This "]" closes a loop that was never opened. Remove it or add a matching "[" before it.'
    if symbol == '[':
        return 'This "[" is never closed. Add a matching "]" after the loop body.'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BracketMismatchError(BFError):
    position: int
    context: str


@dataclass
class InternalParseError(BFError):
    position: int


@dataclass
class StepLimitExceeded(BFError):
    steps: int


def make_bracket_error(*, source: str, position: int) -> BracketMismatchError:
    """Build a BracketMismatchError for the bracket at ``position`` in ``source``.

    ``source`` is the rendered token text, so ``position`` is a token index.
    """
    symbol = source[position] if 0 <= position < len(source) else ''
    kind = 'unmatched loop end' if symbol == ']' else 'unterminated loop'
    ctx = _build_context(source, position)
    hint = _hint_for(symbol)
    hint_block = f"\nHint: {hint}" if hint else ""
    return BracketMismatchError(
        message=f"SyntaxError: {kind} (token {position})\n{ctx}{hint_block}",
        position=position,
        context=ctx,
    )
