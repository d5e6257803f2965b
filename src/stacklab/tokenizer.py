"""
Infix Expression Tokenizer
==========================

This module converts raw infix text into a sequence of tokens for the
shunting-yard converter.

Token Types
-----------
- NUMBER: digits with at most one decimal point (12, 3.5, .5, 7.)
- IDENTIFIER: a letter followed by letters, digits or underscores
- OPERATOR: one of + - * / ^
- LPAREN, RPAREN: ( and )
- UNKNOWN: any other single character

Tokenization is total: every input string produces a token list and no
character is rejected here. Unknown characters are passed through so
that they surface later, when the postfix text is evaluated.

Example
-------
>>> from stacklab.tokenizer import Tokenizer
>>> for token in Tokenizer("(2+x1)*4").tokenize():
...     print(repr(token))
Token(LPAREN, '(', 1)
Token(NUMBER, '2', 2)
Token(OPERATOR, '+', 3)
Token(IDENTIFIER, 'x1', 4)
Token(RPAREN, ')', 6)
Token(OPERATOR, '*', 7)
Token(NUMBER, '4', 8)
"""

import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from stacklab.operators import OPERATOR_CHARS


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Lexical categories of infix expressions."""
    NUMBER = auto()       # 12, 3.5
    IDENTIFIER = auto()   # x, rate_2
    OPERATOR = auto()     # + - * / ^
    LPAREN = auto()       # (
    RPAREN = auto()       # )
    UNKNOWN = auto()      # any other single character


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from an infix expression.

    Attributes:
        type: The TokenType classification
        text: The verbatim source text (numbers are not parsed here)
        column: Column of the first character in the source (1-indexed)
    """
    type: TokenType
    text: str
    column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r}, {self.column})"

    def __str__(self) -> str:
        return self.text

    @property
    def is_operator(self) -> bool:
        return self.type is TokenType.OPERATOR


# =============================================================================
# Tokenizer Implementation
# =============================================================================

class Tokenizer:
    """
    Scans infix text left to right, taking the longest match per class.

    Usage:
        tokens = Tokenizer(text).tokenize_all()

    Attributes:
        source: The text being tokenized
    """

    IDENT_START = string.ascii_letters
    IDENT_CHARS = string.ascii_letters + string.digits + "_"
    DIGITS = string.digits

    def __init__(self, source: str):
        self.source = source
        self._pos = 0

    def tokenize(self) -> Iterator[Token]:
        """Generate tokens for the whole source."""
        self._pos = 0
        while self._pos < len(self.source):
            char = self.source[self._pos]

            if char.isspace():
                self._pos += 1
                continue

            if char == "(":
                yield self._single(TokenType.LPAREN)
            elif char == ")":
                yield self._single(TokenType.RPAREN)
            elif char in OPERATOR_CHARS:
                yield self._single(TokenType.OPERATOR)
            elif char in self.DIGITS or char == ".":
                yield self._read_number()
            elif char in self.IDENT_START:
                yield self._read_identifier()
            else:
                yield self._single(TokenType.UNKNOWN)

    def tokenize_all(self) -> list[Token]:
        """Return all tokens as a list."""
        return list(self.tokenize())

    def _single(self, token_type: TokenType) -> Token:
        token = Token(token_type, self.source[self._pos], self._pos + 1)
        self._pos += 1
        return token

    def _read_number(self) -> Token:
        """Read digits with at most one decimal point; a second '.' ends it."""
        start = self._pos
        seen_point = False
        while self._pos < len(self.source):
            char = self.source[self._pos]
            if char in self.DIGITS:
                self._pos += 1
            elif char == "." and not seen_point:
                seen_point = True
                self._pos += 1
            else:
                break
        return Token(TokenType.NUMBER, self.source[start:self._pos], start + 1)

    def _read_identifier(self) -> Token:
        start = self._pos
        self._pos += 1
        while self._pos < len(self.source) and self.source[self._pos] in self.IDENT_CHARS:
            self._pos += 1
        return Token(TokenType.IDENTIFIER, self.source[start:self._pos], start + 1)


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source into a list."""
    return Tokenizer(source).tokenize_all()
