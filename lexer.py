"""
Lexer for the let/fun expression language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    turns an input source string into `Token` objects defined in `tokens.py`.
- Unlike a batch tokenizer, the lexer keeps exactly one token of lookahead.
    The parser pulls tokens on demand through `peek()` (inspect the lookahead)
    and `next()` (consume it and scan the following one).
- It recognizes the keywords `let`, `in` and `fun`, lowercase identifiers,
    uppercase constructors, the punctuation `(`, `)`, `=` and the two-character
    arrow `->`, and skips spaces, tabs and newlines.

Examples:
    Input:  "let id = fun x -> x in id Nil"
    Tokens: [LET, IDENT(id), EQUAL, FUN, IDENT(x), ARROW, IDENT(x), IN,
             IDENT(id), CON(Nil), EOF]

Implementation notes:
- `pos` is the index of the next unread character and `token_start` marks
    where the token being scanned began; `lexeme()` slices between the two.
- Whitespace is skipped by looping back to the start of `scan()`, so long
    runs of blanks never grow the stack.
- Only ASCII letters, digits and underscore are accepted in names.
"""

from __future__ import annotations
import string
from typing import List, Optional
from tokens import KEYWORDS, Token, TokenType


WHITESPACE = " \n\t"
NAME_CHARS = string.ascii_letters + string.digits + "_"


class LexError(SyntaxError):
    """Raised when a character does not start a valid token."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.line = line
        self.column = column


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.token_start = 0
        self.line = 1
        self.column = 1
        self.lookahead: Optional[Token] = None

    def error(self, message: str, line: int, column: int) -> LexError:
        return LexError(message, line, column)

    def advance(self) -> Optional[str]:
        """Consume one character and return it, or None at end of input."""
        if self.pos >= len(self.text):
            return None

        char = self.text[self.pos]
        self.pos += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def peek_char(self) -> Optional[str]:
        """Look at the next unread character without consuming it."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def lexeme(self) -> str:
        """Return the source text of the token scanned so far."""
        if self.pos <= self.token_start:
            return ""
        return self.text[self.token_start : self.pos]

    def name(self) -> str:
        """Consume the rest of an identifier or constructor and return its text."""
        while self.peek_char() is not None and self.peek_char() in NAME_CHARS:
            self.advance()
        return self.lexeme()

    def scan(self) -> Token:
        """Scan the token starting at the cursor."""
        while True:
            self.token_start = self.pos
            line, column = self.line, self.column
            char = self.advance()

            if char is None:
                return Token(TokenType.EOF, line=line, column=column)

            if char in WHITESPACE:
                continue

            match char:
                case "(":
                    return Token(TokenType.LPAREN, line=line, column=column)
                case ")":
                    return Token(TokenType.RPAREN, line=line, column=column)
                case "=":
                    return Token(TokenType.EQUAL, line=line, column=column)
                case "-":
                    # The arrow is the only token starting with '-'.
                    if self.advance() == ">":
                        return Token(TokenType.ARROW, line=line, column=column)
                    raise self.error(f'bad token "{self.lexeme()}"', line, column)

            if "a" <= char <= "z" or char == "_":
                text = self.name()
                if text in KEYWORDS:
                    return Token(KEYWORDS[text], line=line, column=column)
                return Token(TokenType.IDENT, text, line=line, column=column)

            if "A" <= char <= "Z":
                text = self.name()
                return Token(TokenType.CON, text, line=line, column=column)

            raise self.error(f"invalid character {char}", line, column)

    def peek(self) -> Token:
        """Return the lookahead token without consuming it."""
        if self.lookahead is None:
            self.lookahead = self.scan()
        return self.lookahead

    def next(self) -> Token:
        """Consume the lookahead token and buffer the one after it."""
        token = self.peek()
        self.lookahead = self.scan()
        return token

    def tokenize(self) -> List[Token]:
        """Return all remaining tokens, ending with EOF."""
        tokens = []
        while True:
            token = self.next()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
