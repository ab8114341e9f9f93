"""Bounded stack with undo, plus Shunting-Yard conversion and bracket balance checking."""
from stackwork.errors import (
    StackError, StackOverflow, StackUnderflow,
    ConversionError, UnmatchedBracket, MalformedExpression,
)
from stackwork.stack import Stack, DEMO_CAPACITY
from stackwork.symbols import BracketKind
from stackwork.converter import ExpressionConverter, convert_infix_to_postfix
from stackwork.balance import BalanceChecker, is_balanced

__all__ = [
    "Stack", "DEMO_CAPACITY", "BracketKind",
    "ExpressionConverter", "convert_infix_to_postfix",
    "BalanceChecker", "is_balanced",
    "StackError", "StackOverflow", "StackUnderflow",
    "ConversionError", "UnmatchedBracket", "MalformedExpression",
]
