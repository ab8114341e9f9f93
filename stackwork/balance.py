"""Bracket balance validation across (), [] and {}."""
import logging
from typing import Iterable, Optional

from stackwork.stack import Stack
from stackwork.symbols import (
    BracketKind, OpenBracket, CloseBracket, as_chars, tokenize,
)

logger = logging.getLogger(__name__)


class BalanceChecker:
    """Single left-to-right pass; non-bracket characters are ignored."""

    def __init__(self, capacity: Optional[int] = None):
        self.capacity = capacity

    def is_balanced(self, expression: Iterable[str]) -> bool:
        expression = as_chars(expression)
        stack: Stack[BracketKind] = Stack(self.capacity)

        for pos, symbol in enumerate(tokenize(expression)):
            if isinstance(symbol, OpenBracket):
                stack.push(symbol.kind)
            elif isinstance(symbol, CloseBracket):
                if stack.is_empty():
                    logger.debug("Unexpected %r at %d", symbol.kind.closing, pos)
                    return False
                opened = stack.pop()
                if opened is not symbol.kind:
                    logger.debug("%r at %d closes %r", symbol.kind.closing, pos, opened.opening)
                    return False

        return stack.is_empty()


def is_balanced(expression: Iterable[str], capacity: Optional[int] = None) -> bool:
    return BalanceChecker(capacity).is_balanced(expression)
