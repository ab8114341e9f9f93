"""Character classification for expression scanning — operators and brackets."""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence, Union

from stackwork.errors import MalformedExpression


class BracketKind(Enum):
    PAREN = ("(", ")")
    SQUARE = ("[", "]")
    CURLY = ("{", "}")

    def __init__(self, opening: str, closing: str):
        self.opening = opening
        self.closing = closing

    @classmethod
    def from_glyph(cls, glyph: str) -> "BracketKind":
        try:
            return _GLYPH_TO_KIND[glyph]
        except KeyError:
            raise ValueError(f"not a bracket: {glyph!r}") from None


# Opening and closing glyph → kind
_GLYPH_TO_KIND = {}
for _kind in BracketKind:
    _GLYPH_TO_KIND[_kind.opening] = _kind
    _GLYPH_TO_KIND[_kind.closing] = _kind

OPENING = {k.opening for k in BracketKind}
CLOSING = {k.closing for k in BracketKind}

# Only these four are operators; everything else that is not a bracket
# is an operand, including '^' and '%'.
PRECEDENCE = {
    '+': 1, '-': 1,
    '*': 2, '/': 2,
}


def precedence(char: str) -> int:
    """Binding strength of an operator character, 0 for anything else."""
    return PRECEDENCE.get(char, 0)


def is_operator(char: str) -> bool:
    return char in PRECEDENCE


@dataclass(frozen=True)
class Operand:
    char: str


@dataclass(frozen=True)
class Operator:
    char: str

    @property
    def precedence(self) -> int:
        return precedence(self.char)


@dataclass(frozen=True)
class OpenBracket:
    kind: BracketKind


@dataclass(frozen=True)
class CloseBracket:
    kind: BracketKind


Symbol = Union[Operand, Operator, OpenBracket, CloseBracket]


def classify(char: str) -> Symbol:
    if char in OPENING:
        return OpenBracket(BracketKind.from_glyph(char))
    if char in CLOSING:
        return CloseBracket(BracketKind.from_glyph(char))
    if is_operator(char):
        return Operator(char)
    return Operand(char)


def as_chars(expression: Iterable[str]) -> Sequence[str]:
    """Materialise a one-shot iterable so it can be scanned and shown in errors."""
    if isinstance(expression, (str, list, tuple)):
        return expression
    return list(expression)


def tokenize(expression: Iterable[str]) -> Iterator[Symbol]:
    """Yield one symbol per character, left to right.

    Raises MalformedExpression if an element is not a single character
    (there are no multi-character tokens).
    """
    for pos, char in enumerate(expression):
        if not isinstance(char, str) or len(char) != 1:
            raise MalformedExpression(expression, pos)
        yield classify(char)
