from __future__ import annotations

import io

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from .interpreter import Interpreter
from .lexer import tokenize
from .parser import build_tree


@dataclass(frozen=True)
class RunOptions:
    max_steps: Optional[int] = None
    encoding: str = "utf-8"


@dataclass(frozen=True)
class RunResult:
    output: bytes
    tape: np.ndarray
    pointer: int
    steps: int


def run_string(source: str, *, input_data: bytes = b"", options: Optional[RunOptions] = None) -> RunResult:
    max_steps = None if options is None else options.max_steps
    program = build_tree(tokenize(source))

    stdout = io.BytesIO()
    interpreter = Interpreter(io.BytesIO(input_data), stdout, max_steps=max_steps)
    final = interpreter.run(program).copy()
    return RunResult(output=stdout.getvalue(), tape=final.tape, pointer=final.pointer, steps=interpreter.steps)


def run_file(path: str | Path, *, input_data: bytes = b"", options: Optional[RunOptions] = None) -> RunResult:
    p = Path(path)
    encoding = "utf-8" if options is None else options.encoding
    return run_string(p.read_text(encoding=encoding), input_data=input_data, options=options)
