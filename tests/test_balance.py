"""Tests for bracket balance checking."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from stackwork.balance import BalanceChecker, is_balanced
from stackwork.errors import StackOverflow


def test_simple_pair():
    assert is_balanced("()") is True


def test_nested_mixed_kinds():
    assert is_balanced("({[]})") is True


def test_crossed_kinds():
    assert is_balanced("([)]") is False


def test_unclosed():
    assert is_balanced("(()") is False


def test_closing_first():
    assert is_balanced(")(") is False
    assert is_balanced("]") is False


def test_ignores_other_characters():
    assert is_balanced("A*(B+[C-D])/{E}") is True
    assert is_balanced("no brackets") is True
    assert is_balanced("") is True


def test_checker_reuse_has_no_leftovers():
    checker = BalanceChecker()
    assert checker.is_balanced("((") is False
    assert checker.is_balanced("()") is True


def test_capacity_limits_nesting():
    assert is_balanced("()()()", capacity=1) is True
    with pytest.raises(StackOverflow):
        is_balanced("(())", capacity=1)


def test_one_shot_iterable():
    assert is_balanced(c for c in "{[()]}") is True
    assert is_balanced(iter("([)]")) is False
