from __future__ import annotations

import logging

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from .errors import InternalParseError
from .lexer import Token
from .validator import check_balanced

logger = logging.getLogger(__name__)


# ---------------- Tree nodes ----------------
@dataclass(frozen=True)
class Move:
    n: int  # +1 for '>', -1 for '<'

@dataclass(frozen=True)
class Add:
    n: int  # +1 for '+', -1 for '-'

@dataclass(frozen=True)
class Output:
    pass

@dataclass(frozen=True)
class Input:
    pass

@dataclass(frozen=True)
class Loop:
    body: Tuple["Node", ...] = ()


Node = Union[Move, Add, Output, Input, Loop]

_PRIMITIVES = {
    Token.RIGHT: lambda: Move(1),
    Token.LEFT: lambda: Move(-1),
    Token.INC: lambda: Add(1),
    Token.DEC: lambda: Add(-1),
    Token.OUT: Output,
    Token.IN: Input,
}


# ---------------- Parser: tokens -> tree ----------------
def parse(tokens: Sequence[Token], start: int = 0, end: Optional[int] = None) -> Tuple[Node, ...]:
    """Build the instruction tree for the half-open token range [start, end).

    The tokens must already have passed the balance check; a bracket that
    cannot be matched inside the range raises InternalParseError.
    """
    if end is None:
        end = len(tokens)

    nodes: List[Node] = []
    i = start
    while i < end:
        token = tokens[i]
        if token is Token.BEGIN:
            loop_start = i + 1
            depth = 1
            while depth:
                i += 1
                if i >= end:
                    raise InternalParseError(
                        message=f"InternalParseError: no matching loop end for token {loop_start - 1}",
                        position=loop_start - 1,
                    )
                if tokens[i] is Token.BEGIN:
                    depth += 1
                elif tokens[i] is Token.END:
                    depth -= 1
            nodes.append(Loop(parse(tokens, loop_start, i)))
        elif token is Token.END:
            raise InternalParseError(
                message=f"InternalParseError: unexpected loop end at token {i}",
                position=i,
            )
        else:
            nodes.append(_PRIMITIVES[token]())
        i += 1

    return tuple(nodes)


def build_tree(tokens: Sequence[Token]) -> Tuple[Node, ...]:
    """Validate bracket balance, then parse the whole token sequence."""
    check_balanced(tokens)
    tree = parse(tokens)
    logger.debug("built tree: %d top-level nodes, %d total", len(tree), count_instructions(tree))
    return tree


# ---------------- Emit + counts ----------------
def emit(nodes: Sequence[Node]) -> str:
    out: List[str] = []
    for n in nodes:
        if isinstance(n, Move):
            out.append('>' if n.n > 0 else '<')
        elif isinstance(n, Add):
            out.append('+' if n.n > 0 else '-')
        elif isinstance(n, Output):
            out.append('.')
        elif isinstance(n, Input):
            out.append(',')
        elif isinstance(n, Loop):
            out.append('[' + emit(n.body) + ']')
    return ''.join(out)


def count_instructions(nodes: Sequence[Node]) -> int:
    """Number of nodes in the tree, counting each Loop once plus its body."""
    c = 0
    for n in nodes:
        c += 1
        if isinstance(n, Loop):
            c += count_instructions(n.body)
    return c
