"""
Parser for the let/fun expression language.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser that pulls
    tokens from a `Lexer` one at a time. The grammar is LL(1): every choice
    is made by looking at a single lookahead token, so the parser never
    backtracks.

Grammar:

    expr        := "let" ident "=" expr "in" expr
                 | "fun" ident "->" expr
                 | simple_expr { simple_expr }
    simple_expr := ident | constructor | "(" expr ")"

Key points:
- `parse_expr()` dispatches on the lookahead. `let` and `fun` extend as far
    to the right as possible, so `fun x -> f x` is `fun x -> (f x)`.
- Application is a run of simple expressions folded to the left:
    `f x y` is `(f x) y`. The run stops at the first token that cannot start
    a simple expression (`in`, `)`, `EOF`, keywords, ...); that token is left
    for the enclosing rule.
- Parentheses only group; `parse_simple_expr()` returns the inner
    expression unchanged.

Errors:
- The first problem aborts the parse with a `ParseError` (or the `LexError`
    raised by the lexer while refilling its lookahead). Both derive from
    `SyntaxError`.
- Nesting deeper than the recursion limit allows is reported as a
    `ParseError` ("expression nested too deeply"), never a raw RecursionError.

Examples:
    parse("let id = fun x -> x in id Nil")
    # LetNode(name='id', bound=LamNode(param='x', body=VarNode(name='x')),
    #         body=AppNode(function=VarNode(name='id'), argument=ConNode(name='Nil')))
"""

from __future__ import annotations
from lexer import Lexer
from tokens import Token, TokenType
from ast_nodes import *


# Tokens that can begin a simple expression, and so continue an application.
SIMPLE_EXPR_START = (TokenType.LPAREN, TokenType.IDENT, TokenType.CON)


class ParseError(SyntaxError):
    """Raised when the token stream does not match the grammar."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.line = line
        self.column = column


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer

    def error(self, token: Token, expecting: str) -> ParseError:
        msg = f'unexpected token "{token}", expecting {expecting}'
        return ParseError(msg, token.line, token.column)

    def expect_ident(self) -> str:
        """Consume an identifier and return its name."""
        token = self.lexer.next()
        if token.type == TokenType.IDENT:
            return token.value
        raise self.error(token, "identifier")

    def expect_token(self, expected: Token) -> Token:
        """Consume a token that must equal `expected`."""
        token = self.lexer.next()
        if token == expected:
            return token
        raise self.error(token, str(expected))

    def parse_simple_expr(self) -> Expr:
        """Parse an identifier, a constructor or a parenthesized expression."""
        token = self.lexer.next()

        match token.type:
            case TokenType.IDENT:
                return VarNode(name=token.value, line=token.line, column=token.column)

            case TokenType.CON:
                return ConNode(name=token.value, line=token.line, column=token.column)

            case TokenType.LPAREN:
                expr = self.parse_expr()
                self.expect_token(Token(TokenType.RPAREN))
                return expr

            case _:
                raise self.error(token, "simple expression")

    def parse_let(self) -> LetNode:
        """Parse: let ident = expr in expr"""
        start = self.expect_token(Token(TokenType.LET))
        name = self.expect_ident()
        self.expect_token(Token(TokenType.EQUAL))
        bound = self.parse_expr()
        self.expect_token(Token(TokenType.IN))
        body = self.parse_expr()
        return LetNode(
            name=name, bound=bound, body=body, line=start.line, column=start.column
        )

    def parse_fun(self) -> LamNode:
        """Parse: fun ident -> expr"""
        start = self.expect_token(Token(TokenType.FUN))
        param = self.expect_ident()
        self.expect_token(Token(TokenType.ARROW))
        body = self.parse_expr()
        return LamNode(param=param, body=body, line=start.line, column=start.column)

    def parse_application(self) -> Expr:
        """Parse one or more simple expressions as a left-associative application."""
        expr = self.parse_simple_expr()

        while self.lexer.peek().type in SIMPLE_EXPR_START:
            argument = self.parse_simple_expr()
            expr = AppNode(
                function=expr, argument=argument, line=expr.line, column=expr.column
            )

        return expr

    def parse_expr(self) -> Expr:
        """Parse an expression."""
        token = self.lexer.peek()

        match token.type:
            case TokenType.EOF:
                raise ParseError(
                    "unexpected EOF, expected expr", token.line, token.column
                )
            case TokenType.LET:
                return self.parse_let()
            case TokenType.FUN:
                return self.parse_fun()
            case _:
                return self.parse_application()

    def parse_whole_file(self) -> Expr:
        """Parse a complete program: a single expression followed by EOF.

        Nesting of parentheses, `let` and `fun` is bounded by the interpreter's
        recursion limit; exceeding it is reported as a ParseError at the
        cursor position.
        """
        try:
            expr = self.parse_expr()
        except RecursionError:
            raise ParseError(
                "expression nested too deeply", self.lexer.line, self.lexer.column
            ) from None
        self.expect_token(Token(TokenType.EOF))
        return expr


def parse(text: str) -> Expr:
    """Parse source text into an expression tree."""
    return Parser(Lexer(text)).parse_whole_file()
