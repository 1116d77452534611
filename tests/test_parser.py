#!/usr/bin/env python3
"""
Tree builder tests.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bftree.errors import BracketMismatchError, InternalParseError
from bftree.lexer import tokenize
from bftree.parser import (
    Add, Input, Loop, Move, Output, build_tree, count_instructions, emit, parse,
)


def test_primitives_map_one_to_one():
    assert parse(tokenize("><+-.,")) == (
        Move(1), Move(-1), Add(1), Add(-1), Output(), Input(),
    )


def test_empty_program():
    assert parse([]) == ()


def test_empty_loop_body():
    assert parse(tokenize("[]")) == (Loop(()),)


def test_nested_loops():
    tree = parse(tokenize("+[->[+]<]."))
    assert tree == (
        Add(1),
        Loop((Add(-1), Move(1), Loop((Add(1),)), Move(-1))),
        Output(),
    )


def test_top_level_count_counts_bracket_pairs_once():
    tree = parse(tokenize("+[->+<].[]"))
    assert len(tree) == 4
    assert len(tree[1].body) == 4
    assert tree[3].body == ()


def test_sibling_loops():
    tree = parse(tokenize("[+][-]"))
    assert tree == (Loop((Add(1),)), Loop((Add(-1),)))


def test_sub_range():
    tokens = tokenize("+[->+<]")
    assert parse(tokens, 2, 6) == (Add(-1), Move(1), Add(1), Move(-1))


def test_stray_end_is_internal_error():
    with pytest.raises(InternalParseError) as exc_info:
        parse(tokenize("+]"))
    assert exc_info.value.position == 1


def test_unmatched_start_is_internal_error():
    with pytest.raises(InternalParseError):
        parse(tokenize("[+"))


def test_build_tree_validates_first():
    with pytest.raises(BracketMismatchError):
        build_tree(tokenize("[[]"))


@pytest.mark.parametrize("source", [
    "",
    "+++.",
    "[]",
    "++++++++[>++++[>++>+++<<-]>+<<-]>>.>+.",
    ",[.,]",
])
def test_emit_reproduces_canonical_source(source):
    assert emit(build_tree(tokenize(source))) == source


def test_count_instructions():
    assert count_instructions(parse(tokenize("+[-[+]]"))) == 5


def test_nodes_are_immutable():
    loop = Loop((Add(1),))
    with pytest.raises(AttributeError):
        loop.body = ()


def test_each_token_gets_its_own_node():
    tree = parse(tokenize("++[+]"))
    assert tree[0] == tree[1]
    assert tree[0] is not tree[1]
    assert tree[2].body[0] is not tree[0]
    assert parse(tokenize("+"))[0] is not tree[0]
