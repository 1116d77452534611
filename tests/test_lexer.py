#!/usr/bin/env python3
"""
Lexer tests: symbol mapping, comment dropping and re-lexing.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bftree.lexer import Token, is_code_char, render, tokenize


def test_every_symbol_maps_to_its_token():
    assert tokenize("><+-.,[]") == [
        Token.RIGHT, Token.LEFT, Token.INC, Token.DEC,
        Token.OUT, Token.IN, Token.BEGIN, Token.END,
    ]


def test_comments_and_whitespace_are_dropped():
    assert tokenize("add one: +\n  print it . # done") == [Token.INC, Token.OUT]


def test_empty_and_comment_only_sources():
    assert tokenize("") == []
    assert tokenize("hello world\n\t!") == []


def test_source_order_is_preserved():
    assert render(tokenize("a+b>c[d-e]f.")) == "+>[-]."


@pytest.mark.parametrize("source", [
    "",
    "+++.",
    "this is [a comment] with , and . inside",
    "++++++++[>++++[>++>+++<<-]>+<<-]>>.>+.",
    "unicode ✓ ]]] [[",
])
def test_relexing_rendered_tokens_is_idempotent(source):
    tokens = tokenize(source)
    assert tokenize(render(tokens)) == tokens


def test_is_code_char():
    assert all(is_code_char(c) for c in "><+-.,[]")
    assert not is_code_char("x")
    assert not is_code_char(" ")


def test_tokenize_keeps_exactly_the_code_chars():
    source = "x+y-z[>]<.,!?"
    assert render(tokenize(source)) == "".join(c for c in source if is_code_char(c))
