"""Error types raised by stacks and the algorithms built on them."""
from typing import Optional


class StackError(Exception):
    """Base class for stack capacity/emptiness violations."""


class StackOverflow(StackError):
    def __init__(self, capacity: int):
        super().__init__(f"stack overflow (capacity {capacity})")
        self.capacity = capacity


class StackUnderflow(StackError, IndexError):
    def __init__(self, operation: str = "pop"):
        super().__init__(f"stack underflow ({operation} on empty stack)")
        self.operation = operation


class ConversionError(ValueError):
    """Expression could not be rewritten; no partial output is produced."""

    reason = "conversion failed"

    def __init__(self, expression, position: Optional[int] = None):
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"{self.reason}{where}: {_shown(expression)!r}")
        self.expression = expression
        self.position = position


def _shown(expression):
    if isinstance(expression, (list, tuple)) and all(
            isinstance(c, str) and len(c) == 1 for c in expression):
        return "".join(expression)
    return expression


class UnmatchedBracket(ConversionError):
    reason = "unmatched bracket"


class MalformedExpression(ConversionError):
    reason = "malformed expression"
