"""
Canary Lexer (Tokenizer)
========================

This module implements the lexer for the Canary language. It converts
source text into a stream of tokens, one token per call, for the parser.

Scanning Rules
--------------
- Whitespace and '//' line comments are skipped before every token
- Letter or '_' starts an identifier; reserved words become KEYWORD
- Digit starts a NUMBER: digits and '_' separators, then optionally one
  '.' followed by digits ("7." is accepted as a NUMBER)
- '"' starts a STRING; a backslash and the character after it are kept
  raw in the lexeme, the delimiting quotes are not
- Operators use greedy longest match with one or two characters of
  lookahead:

| Lead | Next      | Result                   |
|------|-----------|--------------------------|
| :    | =         | ASSIGN, else COLON       |
| +    | =         | PLUS_EQL, else PLUS      |
| -    | > or =    | RIGHT_ARROW / MINUS_EQL  |
| *    | =         | STAR_EQL, else STAR      |
| /    | =         | SLASH_EQL, else SLASH    |
| <    | =         | LESS_EQL, else LESS      |
| >    | =         | GREATER_EQL, else GREATER|
| .    | . then .  | DOT3; '..' is an error   |

- NUL or the end of the buffer produces a zero-width EOF token; further
  calls keep returning EOF

Any scan failure raises a LexerError and terminates the stream. The
message is also kept in ``Lexer.last_error`` until the next failure.

Example Usage
-------------
>>> from canary.lexer import Lexer
>>> lexer = Lexer("if x := 1;", "main.cn")
>>> for token in lexer.tokenize():
...     print(token)
Token KEYWORD => if
Token IDENT => x
Token ASSIGN => :=
Token NUMBER => 1
Token SEMI_COLON => ;
Token EOF =>
"""

import logging
import string
from dataclasses import replace
from typing import Iterator, Optional

from canary.errors import (
    LexerError,
    MalformedEllipsisError,
    SourceLocation,
    TokenAllocationError,
    UnexpectedTokenError,
    UnknownCharacterError,
    UnterminatedStringError,
)
from canary.tokens import Token, TokenKind, is_keyword

logger = logging.getLogger(__name__)


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes Canary source code.

    The lexer owns a cursor over an immutable source buffer and produces
    one token per call to next_token(). It never looks behind the cursor
    and never reads files itself; the caller loads the whole source first.

    Usage:
        lexer = Lexer(source_text, "main.cn")
        tokens = list(lexer.tokenize())

    Attributes:
        source: The source text being tokenized
        source_name: Diagnostic label for the source (e.g. its path)
        source_len: Number of characters of source that are scanned
        last_error: Message of the most recent scan failure, or None
    """

    # ASCII whitespace, as classified by C's isspace()
    WHITESPACE = " \t\n\v\f\r"

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    # Characters of the integer part of a number
    NUMBER_CHARS = string.digits + "_"

    # Tokens that never need lookahead
    SINGLE_TOKENS = {
        "=": TokenKind.EQUAL,
        ",": TokenKind.COMMA,
        ";": TokenKind.SEMI_COLON,
        "(": TokenKind.O_PAREN,
        ")": TokenKind.C_PAREN,
        "{": TokenKind.O_BRACK,
        "}": TokenKind.C_BRACK,
        "[": TokenKind.O_SQUARE,
        "]": TokenKind.C_SQUARE,
        "?": TokenKind.QUESTION,
        "!": TokenKind.BANG,
        "#": TokenKind.POUND,
        "|": TokenKind.VERT_BAR,
    }

    def __init__(
        self,
        source: str,
        source_name: str = "<input>",
        source_len: Optional[int] = None,
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: The full source text
            source_name: Name of the source (for error messages)
            source_len: Length of the source to scan (defaults to the
                whole string)

        Raises:
            ValueError: If source_len is outside the source
        """
        if source_len is None:
            source_len = len(source)
        elif not 0 <= source_len <= len(source):
            raise ValueError(
                f"source_len {source_len} outside of source (length {len(source)})"
            )

        self.source = source
        self.source_name = source_name
        self.source_len = source_len
        self.last_error: Optional[str] = None

        # Current position in source
        self._pos = 0
        self._line = 1
        self._column = 1

    @property
    def cursor(self) -> int:
        """Index of the next unconsumed character."""
        return self._pos

    # =========================================================================
    # Public Interface
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token; EOF once the input is exhausted

        Raises:
            LexerError: If the input cannot be tokenized. The stream is
                terminated and last_error holds the message.
        """
        try:
            token = self._scan_token()
        except LexerError as error:
            self.last_error = error.message
            logger.debug("%s: scan failed: %s", self.source_name, error.message)
            raise

        logger.debug("%s: %r", self.source_name, token)
        return token

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including EOF.

        Raises:
            LexerError: On the first scan failure
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return

    def expect(self, kind: TokenKind) -> Token:
        """
        Scan the next token and check its kind.

        A kind mismatch is not a scan failure and leaves last_error as is.

        Raises:
            UnexpectedTokenError: If the scanned token is of another kind
        """
        token = self.next_token()
        if token.kind is not kind:
            raise UnexpectedTokenError(
                kind.name,
                token.kind.name,
                token.lexeme,
                token.location,
                self._line_text(token.line),
            )
        return token

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._pos >= self.source_len

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._pos + offset
        if pos >= self.source_len:
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return the current character, tracking line/column."""
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        return char

    def _match(self, expected: str) -> bool:
        """Consume next character if it matches expected."""
        if self._peek() == expected:
            self._advance()
            return True
        return False

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _make_token(
        self,
        kind: TokenKind,
        start: int,
        start_line: int,
        start_column: int,
        end: Optional[int] = None,
    ) -> Token:
        """
        Create a token whose lexeme is source[start:end].

        end defaults to the cursor position.
        """
        if end is None:
            end = self._pos
        try:
            lexeme = self.source[start:end]
        except MemoryError as exc:
            raise TokenAllocationError(
                SourceLocation(self.source_name, start_line, start_column),
            ) from exc

        return Token(
            kind=kind,
            lexeme=lexeme,
            line=start_line,
            column=start_column,
            filename=self.source_name,
        )

    def _location(self, line: int, column: int) -> SourceLocation:
        return SourceLocation(self.source_name, line, column)

    def _line_text(self, line: int) -> str:
        """Get the text of a source line for error reporting."""
        lines = self.source[:self.source_len].split("\n")
        if 1 <= line <= len(lines):
            return lines[line - 1]
        return ""

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> None:
        """Skip all whitespace and line comments."""
        while not self._at_end():
            char = self._peek()

            if char in self.WHITESPACE:
                self._advance()
                continue

            if char == "/" and self._peek(1) == "/":
                self._skip_line_comment()
                continue

            break

    def _skip_line_comment(self) -> None:
        """Skip a line comment (// ...) including its newline."""
        self._advance()
        self._advance()

        while not self._at_end() and self._peek() != "\n":
            self._advance()
        self._match("\n")

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Token:
        """Skip insignificant input, then dispatch on the next character."""
        self._skip_whitespace_and_comments()

        start = self._pos
        start_line = self._line
        start_column = self._column

        char = self._peek()

        # End of input: zero-width, the cursor does not move
        if char == "" or char == "\0":
            return self._make_token(TokenKind.EOF, start, start_line, start_column)

        if char in self.IDENT_START:
            return self._scan_identifier(start, start_line, start_column)

        if char in string.digits:
            return self._scan_number(start, start_line, start_column)

        if char == '"':
            return self._scan_string(start, start_line, start_column)

        return self._scan_operator(start, start_line, start_column)

    def _scan_identifier(self, start: int, start_line: int, start_column: int) -> Token:
        """Scan an identifier or keyword."""
        while self._peek() and self._peek() in self.IDENT_CHARS:
            self._advance()

        token = self._make_token(TokenKind.IDENT, start, start_line, start_column)
        if is_keyword(token.lexeme):
            return replace(token, kind=TokenKind.KEYWORD)
        return token

    def _scan_number(self, start: int, start_line: int, start_column: int) -> Token:
        """
        Scan a numeric literal.

        '_' separators are kept in the lexeme. A single '.' is consumed
        after the integer part even when no digits follow it.
        """
        while self._peek() and self._peek() in self.NUMBER_CHARS:
            self._advance()

        if self._match("."):
            while self._peek() and self._peek() in string.digits:
                self._advance()

        return self._make_token(TokenKind.NUMBER, start, start_line, start_column)

    def _scan_string(self, start: int, start_line: int, start_column: int) -> Token:
        """
        Scan a double-quoted string literal.

        Escapes are not interpreted: a backslash and the character after
        it are consumed together and kept in the lexeme.
        """
        self._advance()  # consume opening "
        content_start = self._pos

        while not self._at_end() and self._peek() not in ('"', "\0"):
            if self._peek() == "\\" and self._pos + 1 < self.source_len:
                self._advance()
            self._advance()

        if self._at_end() or self._peek() == "\0":
            raise UnterminatedStringError(
                self._location(start_line, start_column),
                self._line_text(start_line),
            )

        content_end = self._pos
        self._advance()  # consume closing "

        return self._make_token(
            TokenKind.STRING,
            content_start,
            start_line,
            start_column,
            end=content_end,
        )

    def _scan_operator(self, start: int, start_line: int, start_column: int) -> Token:
        """
        Scan an operator or punctuation character.

        The longest known sequence starting at the lead character wins.
        """
        char = self._advance()

        def make(kind: TokenKind) -> Token:
            return self._make_token(kind, start, start_line, start_column)

        if char == ":":
            return make(TokenKind.ASSIGN if self._match("=") else TokenKind.COLON)

        if char == "+":
            return make(TokenKind.PLUS_EQL if self._match("=") else TokenKind.PLUS)

        if char == "-":
            if self._match(">"):
                return make(TokenKind.RIGHT_ARROW)
            if self._match("="):
                return make(TokenKind.MINUS_EQL)
            return make(TokenKind.DASH)

        if char == "*":
            return make(TokenKind.STAR_EQL if self._match("=") else TokenKind.STAR)

        # '//' never reaches here, it is skipped as a comment
        if char == "/":
            return make(TokenKind.SLASH_EQL if self._match("=") else TokenKind.SLASH)

        if char == "<":
            return make(TokenKind.LESS_EQL if self._match("=") else TokenKind.LESS)

        if char == ">":
            return make(TokenKind.GREATER_EQL if self._match("=") else TokenKind.GREATER)

        if char == ".":
            if self._peek() == ".":
                if self._peek(1) == ".":
                    self._advance()
                    self._advance()
                    return make(TokenKind.DOT3)
                raise MalformedEllipsisError(
                    self._location(start_line, start_column),
                    self._line_text(start_line),
                )
            return make(TokenKind.DOT)

        if char in self.SINGLE_TOKENS:
            return make(self.SINGLE_TOKENS[char])

        raise UnknownCharacterError(
            char,
            self._location(start_line, start_column),
            self._line_text(start_line),
        )
