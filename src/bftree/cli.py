from __future__ import annotations

import argparse
import logging
import sys

from pathlib import Path
from typing import List, Optional

from .errors import StepLimitExceeded
from .interpreter import Interpreter
from .lexer import tokenize
from .parser import parse
from .validator import is_balanced

logger = logging.getLogger(__name__)

SYNTAX_ERROR_MESSAGE = "ERROR: invalid syntax"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bftree",
        description="Run a Brainfuck program on a 256-cell wrapping tape.",
    )
    parser.add_argument("-f", "--file", dest="file_path", required=True, help="Program source file")
    parser.add_argument("--max-steps", type=int, default=None, help="Abort after this many steps (default: unlimited)")
    parser.add_argument("--dump", action="store_true", help="Print the tape to stderr after the run")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        source = Path(args.file_path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        print(f"Couldn't read {args.file_path}: {e}", file=sys.stderr)
        return 1

    tokens = tokenize(source)
    if not is_balanced(tokens):
        print(SYNTAX_ERROR_MESSAGE)
        return 0

    program = parse(tokens)

    sys.stdout.flush()
    interpreter = Interpreter(sys.stdin.buffer, sys.stdout.buffer, max_steps=args.max_steps)
    try:
        state = interpreter.run(program)
    except StepLimitExceeded as e:
        print(str(e), file=sys.stderr)
        return 2

    logger.info("finished after %d steps", interpreter.steps)
    if args.dump:
        print(state.dump(), file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
