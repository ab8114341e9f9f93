"""Infix → postfix rewriting (Shunting-Yard)."""
import logging
from typing import Iterable, List, Optional

from stackwork.errors import UnmatchedBracket
from stackwork.stack import Stack
from stackwork.symbols import (
    Operand, Operator, OpenBracket, CloseBracket, Symbol, as_chars, tokenize,
)

logger = logging.getLogger(__name__)


class ExpressionConverter:
    """Rewrites single-character infix expressions into postfix form.

    Operators of equal precedence associate left to right. Brackets of
    any kind group sub-expressions and are not emitted. A closing bracket
    closes the nearest open bracket regardless of kind; use
    ``is_balanced()`` to also check that kinds match.

    Each ``convert()`` call works on its own fresh operator stack, so a
    converter may be reused without leftovers leaking between calls.
    """

    def __init__(self, capacity: Optional[int] = None):
        self.capacity = capacity  # bound on each call's operator stack

    def convert(self, expression: Iterable[str]) -> str:
        """Return the postfix form of ``expression``.

        Raises UnmatchedBracket if brackets do not pair up,
        MalformedExpression if the input holds a non-character element,
        and StackOverflow if nesting exceeds ``capacity``.
        """
        expression = as_chars(expression)
        stack: Stack[Symbol] = Stack(self.capacity)
        output: List[str] = []

        for pos, symbol in enumerate(tokenize(expression)):
            if isinstance(symbol, Operand):
                output.append(symbol.char)
            elif isinstance(symbol, OpenBracket):
                stack.push(symbol)
            elif isinstance(symbol, CloseBracket):
                self._close_group(stack, output, expression, pos)
            elif isinstance(symbol, Operator):
                while (not stack.is_empty()
                       and isinstance(stack.peek(), Operator)
                       and stack.peek().precedence >= symbol.precedence):
                    output.append(stack.pop().char)
                stack.push(symbol)

        while not stack.is_empty():
            top = stack.pop()
            if isinstance(top, OpenBracket):
                logger.debug("Unclosed %r in %r", top.kind.opening, expression)
                raise UnmatchedBracket(expression)
            output.append(top.char)

        return ''.join(output)

    @staticmethod
    def _close_group(stack: Stack, output: List[str], expression, pos: int):
        """Emit operators down to the nearest opening bracket and drop it."""
        while True:
            if stack.is_empty():
                logger.debug("Closing bracket at %d has no opening partner", pos)
                raise UnmatchedBracket(expression, pos)
            top = stack.pop()
            if isinstance(top, OpenBracket):
                return
            output.append(top.char)


def convert_infix_to_postfix(expression: Iterable[str],
                             capacity: Optional[int] = None) -> str:
    """Convert ``expression`` using a converter that lives for this call only."""
    return ExpressionConverter(capacity).convert(expression)
