"""
Token Model Test Suite
======================

Tests for the keyword table, the token kind enumeration and the Token
value type.
"""

import pytest
from canary.tokens import KEYWORDS, Token, TokenKind, is_keyword
from canary.errors import SourceLocation


# =============================================================================
# Keyword Table Tests
# =============================================================================

class TestKeywordTable:
    """The reserved-word set and is_keyword()."""

    def test_reserved_words(self):
        """The table holds exactly the language's reserved words."""
        assert KEYWORDS == {
            "const", "val", "mut", "struct", "enum", "macro", "impl",
            "interface", "priv", "pub", "override", "fn", "Self", "self",
            "defer", "if", "else", "switch", "for", "break", "continue",
            "unreachable",
        }

    def test_table_is_immutable(self):
        assert isinstance(KEYWORDS, frozenset)

    @pytest.mark.parametrize("word", ["if", "fn", "Self", "self", "unreachable"])
    def test_is_keyword(self, word):
        assert is_keyword(word)

    @pytest.mark.parametrize("word", ["If", "FN", "iff", "f", "", " if", "return", "let"])
    def test_not_keyword(self, word):
        """Matching is exact and case-sensitive, with no partial matches."""
        assert not is_keyword(word)


# =============================================================================
# Token Kind Tests
# =============================================================================

class TestTokenKind:
    """The closed set of token kinds."""

    def test_kind_names(self):
        assert [kind.name for kind in TokenKind] == [
            "EOF", "INVALID",
            "ASSIGN", "PLUS_EQL", "MINUS_EQL", "STAR_EQL", "SLASH_EQL",
            "LESS_EQL", "GREATER_EQL", "RIGHT_ARROW", "FAT_ARROW", "PIPE",
            "DOT3",
            "COLON", "SEMI_COLON", "EQUAL", "PLUS", "DASH", "STAR", "SLASH",
            "VERT_BAR", "DOT", "COMMA", "LESS", "GREATER", "QUESTION", "BANG",
            "POUND", "O_BRACK", "C_BRACK", "O_PAREN", "C_PAREN", "O_SQUARE",
            "C_SQUARE",
            "IDENT", "NUMBER", "KEYWORD", "STRING", "COMMENT",
        ]

    @pytest.mark.parametrize("kind,symbol", [
        (TokenKind.ASSIGN, ":="),
        (TokenKind.DOT3, "..."),
        (TokenKind.LESS, "<"),
        (TokenKind.GREATER, ">"),
        (TokenKind.LESS_EQL, "<="),
        (TokenKind.FAT_ARROW, "=>"),
        (TokenKind.PIPE, "|>"),
        (TokenKind.VERT_BAR, "|"),
    ])
    def test_symbol(self, kind, symbol):
        assert kind.symbol == symbol

    @pytest.mark.parametrize("kind", [
        TokenKind.EOF, TokenKind.INVALID, TokenKind.IDENT, TokenKind.NUMBER,
        TokenKind.KEYWORD, TokenKind.STRING, TokenKind.COMMENT,
    ])
    def test_no_symbol(self, kind):
        assert kind.symbol is None


# =============================================================================
# Token Tests
# =============================================================================

class TestToken:
    """The Token value type."""

    def make(self, kind, lexeme):
        return Token(kind, lexeme, 3, 7, "main.cn")

    def test_str_format(self):
        assert str(self.make(TokenKind.ASSIGN, ":=")) == "Token ASSIGN => :="

    def test_repr(self):
        assert repr(self.make(TokenKind.IDENT, "x")) == "Token(IDENT, 'x', 3:7)"

    def test_location(self):
        assert self.make(TokenKind.IDENT, "x").location == SourceLocation("main.cn", 3, 7)

    def test_frozen(self):
        token = self.make(TokenKind.IDENT, "x")
        with pytest.raises(AttributeError):
            token.lexeme = "y"

    def test_invalid_placeholder(self):
        token = Token.invalid("main.cn")
        assert token.kind is TokenKind.INVALID
        assert token.lexeme == ""
        assert token.filename == "main.cn"

    @pytest.mark.parametrize("lexeme,value", [
        ("0", 0),
        ("42", 42),
        ("1_000_000", 1000000),
        ("3.25", 3.25),
        ("7.", 7.0),
        ("1_0.5", 10.5),
    ])
    def test_number_value(self, lexeme, value):
        result = self.make(TokenKind.NUMBER, lexeme).value
        assert result == value
        assert type(result) is type(value)

    def test_value_of_other_kinds_is_lexeme(self):
        assert self.make(TokenKind.STRING, "a\\n").value == "a\\n"
