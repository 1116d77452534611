from __future__ import annotations

import logging
import sys

from typing import BinaryIO, List, Optional, Sequence

from .errors import StepLimitExceeded
from .parser import Add, Input, Loop, Move, Node, Output
from .state import ExecutionState

logger = logging.getLogger(__name__)


class _Frame:
    __slots__ = ('body', 'index', 'is_loop')

    def __init__(self, body: Sequence[Node], is_loop: bool):
        self.body = body
        self.index = 0
        self.is_loop = is_loop


class Interpreter:
    """
    Tree-walking interpreter.

    Executes an instruction tree against an ExecutionState. Loop bodies are
    walked with an explicit stack of frames instead of native recursion: when
    a frame's body is exhausted the owning loop re-checks the current cell and
    either restarts the body or pops the frame.

    Input reads one byte per ',' from a binary stream. End of stream or a
    failing read leaves the current cell unchanged. Output writes one byte per
    '.' and flushes it straight away.
    """

    def __init__(self, input_stream: Optional[BinaryIO] = None,
                 output_stream: Optional[BinaryIO] = None, *,
                 max_steps: Optional[int] = None):
        self.input_stream = input_stream
        self.output_stream = output_stream
        self.max_steps = max_steps
        self.steps = 0

    def run(self, program: Sequence[Node], state: Optional[ExecutionState] = None) -> ExecutionState:
        if state is None:
            state = ExecutionState()
        self.steps = 0
        stdin = self.input_stream if self.input_stream is not None else sys.stdin.buffer
        stdout = self.output_stream if self.output_stream is not None else sys.stdout.buffer

        logger.debug("run start: %d top-level nodes", len(program))
        try:
            self._execute(program, state, stdin, stdout)
        finally:
            stdout.flush()
        logger.debug("run end: %d steps, pointer=%d", self.steps, state.pointer)
        return state

    def _tick(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise StepLimitExceeded(
                message=f"StepLimitExceeded: program did not finish within {self.max_steps} steps",
                steps=self.steps,
            )

    def _execute(self, program: Sequence[Node], state: ExecutionState,
                 stdin: BinaryIO, stdout: BinaryIO) -> None:
        stack: List[_Frame] = [_Frame(program, is_loop=False)]
        while stack:
            frame = stack[-1]

            if frame.index >= len(frame.body):
                if not frame.is_loop:
                    stack.pop()
                    continue
                self._tick()
                if state.current:
                    frame.index = 0
                else:
                    stack.pop()
                continue

            node = frame.body[frame.index]
            frame.index += 1
            self._tick()

            if isinstance(node, Move):
                state.move(node.n)
            elif isinstance(node, Add):
                state.add(node.n)
            elif isinstance(node, Output):
                stdout.write(bytes((state.current,)))
                stdout.flush()
            elif isinstance(node, Input):
                self._read_byte(state, stdin)
            elif isinstance(node, Loop):
                if state.current:
                    stack.append(_Frame(node.body, is_loop=True))

    def _read_byte(self, state: ExecutionState, stdin: BinaryIO) -> None:
        try:
            data = stdin.read(1)
        except (OSError, ValueError) as e:
            logger.debug("input read failed, cell left unchanged: %s", e)
            return
        if not data:
            logger.debug("input exhausted, cell left unchanged")
            return
        state.current = data[0]


def execute(program: Sequence[Node], input_stream: Optional[BinaryIO] = None,
            output_stream: Optional[BinaryIO] = None, *,
            max_steps: Optional[int] = None) -> ExecutionState:
    """Run ``program`` once on a fresh 256-cell tape and return the final state."""
    return Interpreter(input_stream, output_stream, max_steps=max_steps).run(program)
