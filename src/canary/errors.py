"""
Canary Error Hierarchy
======================

This module defines the exception hierarchy for the Canary toolchain.
All exceptions inherit from CanaryError, allowing callers to catch all
Canary-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
CanaryError (base)
├── LexerError - scan failures in source text
│   ├── UnterminatedStringError - missing closing quote
│   ├── MalformedEllipsisError - '..' not followed by a third dot
│   ├── UnknownCharacterError - character matching no scanning rule
│   ├── TokenAllocationError - token storage could not be produced
│   └── UnexpectedTokenError - token kind differs from the expected one
└── ParserError - parser failures
    └── ParserNotImplementedError - grammar not available yet

Error Message Format
--------------------
Lexer errors carry source location information and follow this format:

    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)

Example:
    main.cn:3:9: error: unknown character `$`
        x := $1;
             ^
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class CanaryError(Exception):
    """
    Base exception for all Canary errors.

        try:
            tokens = list(Lexer(source, "main.cn").tokenize())
        except CanaryError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(CanaryError):
    """
    Base exception for all scan failures.

    A lexer error terminates the token stream: the cursor position after
    the failure is not a resumable boundary.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            main.cn:1:5: error: malformed ellipsis, expected 3 dots, found 2
                foo..bar
                   ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnterminatedStringError(LexerError):
    """
    Unterminated string literal.

    Raised when a string literal is not closed before the end of the
    input or an unescaped NUL character.

    Example:
        name := "hello    // Missing closing quote
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )


class MalformedEllipsisError(LexerError):
    """Exactly two dots followed by a non-dot or by the end of input."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "malformed ellipsis, expected 3 dots, found 2",
            location=location,
            hint="use '...' or a single '.'",
            source_line=source_line,
        )


class UnknownCharacterError(LexerError):
    """
    Character that matches no scanning rule.

    Non-ASCII letters are rejected here as well; identifiers are
    restricted to ASCII letters, digits and underscores.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unknown character `{char}`",
            location=location,
            source_line=source_line,
        )


class TokenAllocationError(LexerError):
    """Storage for a token's lexeme could not be produced."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
    ):
        super().__init__(
            "memory allocation failed for token lexeme",
            location=location,
        )


class UnexpectedTokenError(LexerError):
    """
    The scanned token has a different kind than the caller required.

    Attributes:
        expected: Name of the expected token kind
        found: Name of the token kind actually scanned
        lexeme: Lexeme of the scanned token
    """

    def __init__(
        self,
        expected: str,
        found: str,
        lexeme: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.expected = expected
        self.found = found
        self.lexeme = lexeme
        super().__init__(
            f"expected {expected}, found {found} '{lexeme}'",
            location=location,
            source_line=source_line,
        )


# =============================================================================
# Parser Exceptions
# =============================================================================

class ParserError(CanaryError):
    """
    Base exception for parser failures.

    Attributes:
        message: The error description
        context: Extra diagnostic text, usually the lexer's stored error
            prefixed with the source name
    """

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context
        super().__init__(message)


class ParserNotImplementedError(ParserError):
    """The parser does not build syntax trees yet."""

    def __init__(self, message: str = "parser not implemented"):
        super().__init__(message)
