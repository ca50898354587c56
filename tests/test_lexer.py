import pytest

from lexer import Lexer, LexError
from tests.utils import lex
from tokens import Token, TokenType


def test_lexer_recognizes_keywords_and_punctuation():
    src = "let f = fun x -> (x) in f"
    types = [t.type for t in lex(src)]

    assert types == [
        TokenType.LET,
        TokenType.IDENT,
        TokenType.EQUAL,
        TokenType.FUN,
        TokenType.IDENT,
        TokenType.ARROW,
        TokenType.LPAREN,
        TokenType.IDENT,
        TokenType.RPAREN,
        TokenType.IN,
        TokenType.IDENT,
        TokenType.EOF,
    ]


def test_identifiers_and_constructors_carry_their_text():
    tokens = lex("foo_1 _bar Cons Nil2")
    assert tokens == [
        Token(TokenType.IDENT, "foo_1"),
        Token(TokenType.IDENT, "_bar"),
        Token(TokenType.CON, "Cons"),
        Token(TokenType.CON, "Nil2"),
        Token(TokenType.EOF),
    ]


def test_keyword_prefixes_are_identifiers():
    tokens = lex("lets in_ funny iN Let")
    assert tokens == [
        Token(TokenType.IDENT, "lets"),
        Token(TokenType.IDENT, "in_"),
        Token(TokenType.IDENT, "funny"),
        Token(TokenType.IDENT, "iN"),
        Token(TokenType.CON, "Let"),
        Token(TokenType.EOF),
    ]


def test_names_stop_at_punctuation():
    assert lex("f(x)=y->z") == [
        Token(TokenType.IDENT, "f"),
        Token(TokenType.LPAREN),
        Token(TokenType.IDENT, "x"),
        Token(TokenType.RPAREN),
        Token(TokenType.EQUAL),
        Token(TokenType.IDENT, "y"),
        Token(TokenType.ARROW),
        Token(TokenType.IDENT, "z"),
        Token(TokenType.EOF),
    ]


def test_whitespace_kinds_are_skipped():
    assert lex(" \t\n x \n\n\t ") == [Token(TokenType.IDENT, "x"), Token(TokenType.EOF)]


def test_empty_input_is_eof():
    assert lex("") == [Token(TokenType.EOF)]


def test_next_past_end_keeps_returning_eof():
    lexer = Lexer("x")
    assert lexer.next() == Token(TokenType.IDENT, "x")
    for _ in range(3):
        assert lexer.next() == Token(TokenType.EOF)
    assert lexer.pos == 1


def test_peek_does_not_consume():
    lexer = Lexer("a b")
    assert lexer.peek() == Token(TokenType.IDENT, "a")
    assert lexer.peek() == Token(TokenType.IDENT, "a")
    assert lexer.next() == Token(TokenType.IDENT, "a")
    assert lexer.peek() == Token(TokenType.IDENT, "b")


def test_peek_is_lazy():
    lexer = Lexer("x")
    assert lexer.lookahead is None
    assert lexer.pos == 0
    lexer.peek()
    assert lexer.pos == 1


def test_lexeme_is_slice_between_token_start_and_cursor():
    lexer = Lexer("  hello world")
    lexer.peek()
    assert lexer.token_start == 2
    assert lexer.pos == 7
    assert lexer.lexeme() == "hello"
    assert lexer.lexeme() == lexer.text[lexer.token_start : lexer.pos]


def test_lexeme_is_empty_for_empty_span():
    lexer = Lexer("")
    lexer.peek()
    assert lexer.token_start == lexer.pos == 0
    assert lexer.lexeme() == ""


def test_tokenize_is_deterministic():
    src = "let compose = fun f -> fun g -> fun x -> f (g x) in compose Just"
    assert lex(src) == lex(src)


def test_token_positions():
    tokens = lex("let x\n  = y")
    assert [(t.line, t.column) for t in tokens] == [(1, 1), (1, 5), (2, 3), (2, 5), (2, 6)]


def test_token_str_used_in_messages():
    assert str(Token(TokenType.RPAREN)) == "RPAREN"
    assert str(Token(TokenType.IDENT, "x")) == "IDENT(x)"
    assert str(Token(TokenType.CON, "Nil")) == "CON(Nil)"


def test_digit_is_invalid_character():
    with pytest.raises(LexError) as exc:
        lex("1")
    assert str(exc.value) == "invalid character 1"
    assert (exc.value.line, exc.value.column) == (1, 1)


@pytest.mark.parametrize("char", ["+", "\\", ".", "\r", "é", ">"])
def test_unknown_characters_are_rejected(char):
    with pytest.raises(LexError, match="invalid character"):
        lex(f"x {char} y")


def test_incomplete_arrow_reports_lexeme():
    with pytest.raises(LexError) as exc:
        lex("- 1")
    assert str(exc.value) == 'bad token "- "'


def test_dash_at_end_of_input():
    with pytest.raises(LexError) as exc:
        lex("x -")
    assert str(exc.value) == 'bad token "-"'
    assert (exc.value.line, exc.value.column) == (1, 3)


def test_lex_error_is_a_syntax_error():
    with pytest.raises(SyntaxError):
        lex("x = 5")
