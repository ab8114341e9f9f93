"""Tests for character classification."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from stackwork.errors import MalformedExpression
from stackwork.symbols import (
    BracketKind, Operand, Operator, OpenBracket, CloseBracket,
    classify, is_operator, precedence, tokenize,
)


def test_precedence_table():
    assert precedence('*') == precedence('/') == 2
    assert precedence('+') == precedence('-') == 1
    assert precedence('^') == 0
    assert precedence('(') == 0


def test_only_four_operators():
    assert all(is_operator(c) for c in '+-*/')
    assert not any(is_operator(c) for c in '^%A(')


def test_bracket_glyphs():
    assert BracketKind.from_glyph('[') is BracketKind.SQUARE
    assert BracketKind.from_glyph('}') is BracketKind.CURLY
    assert BracketKind.PAREN.opening == '('
    assert BracketKind.PAREN.closing == ')'
    with pytest.raises(ValueError):
        BracketKind.from_glyph('<')


def test_classify():
    assert classify('A') == Operand('A')
    assert classify('%') == Operand('%')
    assert classify('*') == Operator('*')
    assert classify('{') == OpenBracket(BracketKind.CURLY)
    assert classify(']') == CloseBracket(BracketKind.SQUARE)
    assert Operator('/').precedence == 2


def test_tokenize_list_of_chars():
    assert list(tokenize(['A', '+', 'B'])) == [Operand('A'), Operator('+'), Operand('B')]


def test_tokenize_rejects_multichar_element():
    with pytest.raises(MalformedExpression) as exc:
        list(tokenize(['A', 'BC']))
    assert exc.value.position == 1
