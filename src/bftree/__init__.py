from .api import RunOptions, RunResult, run_file, run_string
from .errors import BFError, BracketMismatchError, InternalParseError, StepLimitExceeded
from .interpreter import Interpreter, execute
from .lexer import Token, render, tokenize
from .parser import Add, Input, Loop, Move, Output, build_tree, emit, parse
from .state import TAPE_SIZE, ExecutionState
from .validator import check_balanced, find_unbalanced, is_balanced

__all__ = [
    'RunOptions',
    'RunResult',
    'run_string',
    'run_file',
    'BFError',
    'BracketMismatchError',
    'InternalParseError',
    'StepLimitExceeded',
    'Interpreter',
    'execute',
    'Token',
    'tokenize',
    'render',
    'Move',
    'Add',
    'Output',
    'Input',
    'Loop',
    'parse',
    'build_tree',
    'emit',
    'TAPE_SIZE',
    'ExecutionState',
    'is_balanced',
    'find_unbalanced',
    'check_balanced',
]
