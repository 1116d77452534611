from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np

TAPE_SIZE = 256
CELL_MASK = 0xFF


def _blank_tape() -> np.ndarray:
    return np.zeros(TAPE_SIZE, dtype=np.uint8)


@dataclass
class ExecutionState:
    """Tape of 256 byte cells plus an 8-bit data pointer.

    The tape index space equals the pointer's value range, so every pointer
    value addresses a real cell. Pointer and cell arithmetic wrap modulo 256.
    """

    tape: np.ndarray = field(default_factory=_blank_tape)
    pointer: int = 0

    @property
    def current(self) -> int:
        return int(self.tape[self.pointer])

    @current.setter
    def current(self, value: int) -> None:
        self.tape[self.pointer] = value & CELL_MASK

    def move(self, n: int) -> None:
        self.pointer = (self.pointer + n) & CELL_MASK

    def add(self, n: int) -> None:
        self.tape[self.pointer] = (int(self.tape[self.pointer]) + n) & CELL_MASK

    def copy(self) -> "ExecutionState":
        return ExecutionState(tape=self.tape.copy(), pointer=self.pointer)

    def nonzero_cells(self) -> Dict[int, int]:
        addrs = np.nonzero(self.tape)[0]
        return {int(a): int(self.tape[a]) for a in addrs}

    def dump(self, cells: Optional[int] = None, width: int = 8) -> str:
        """Render the first ``cells`` cells as rows of ``width`` decimal values.

        The row holding the pointer is marked with ``*`` and the pointed cell
        is bracketed.
        """
        cells = TAPE_SIZE if cells is None else max(0, min(cells, TAPE_SIZE))
        lines = []
        for row_start in range(0, cells, width):
            row = []
            for addr in range(row_start, min(row_start + width, cells)):
                value = f"{int(self.tape[addr]):3d}"
                row.append(f"[{value}]" if addr == self.pointer else f" {value} ")
            mark = '*' if row_start <= self.pointer < row_start + width else ' '
            lines.append(f"{mark}{row_start:3d} |" + ''.join(row))
        return '\n'.join(lines)
