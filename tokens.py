"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small `Token` dataclass that holds a token type and an
optional payload. Only identifiers (`IDENT`) and constructors (`CON`) carry
a payload; every other token is fully described by its type.

Tokens compare structurally: two tokens are equal when their type and
payload match. Source positions ride along for diagnostics but take no part
in equality, so the parser can write `token == Token(TokenType.IN)`.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional


class TokenType(Enum):
    # Keywords
    LET = auto()
    IN = auto()
    FUN = auto()

    # Punctuation
    EQUAL = auto()
    ARROW = auto()
    LPAREN = auto()
    RPAREN = auto()

    # Names
    IDENT = auto()
    CON = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS = {
    "let": TokenType.LET,
    "in": TokenType.IN,
    "fun": TokenType.FUN,
}


@dataclass
class Token:
    type: TokenType
    value: Optional[str] = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    def __str__(self) -> str:
        if self.value is None:
            return str(self.type)
        return f"{self.type}({self.value})"
