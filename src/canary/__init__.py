"""
Canary - Lexical Analysis for the Canary Language
=================================================

This package turns Canary source text into a linear sequence of typed
tokens. The parser on top of it pulls tokens one at a time but does not
build a syntax tree yet.

Main Components
---------------
- **tokens**: token kinds, the reserved-word table and the Token type
- **lexer**: the pull-based scanner (one token per call)
- **parser**: token consumer holding a current and a lookahead token
- **diagnostics**: severity-tagged message sink (info/warning/error/context)
- **golden**: golden-file regression tests for the lexer

Quick Start
-----------
    >>> from canary import Lexer
    >>> [t.kind.name for t in Lexer("x := 1;").tokenize()]
    ['IDENT', 'ASSIGN', 'NUMBER', 'SEMI_COLON', 'EOF']

Or use the command-line tool:
    $ canary tokens main.cn
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from canary.errors import (
    CanaryError,
    SourceLocation,
    LexerError,
    UnterminatedStringError,
    MalformedEllipsisError,
    UnknownCharacterError,
    TokenAllocationError,
    UnexpectedTokenError,
    ParserError,
    ParserNotImplementedError,
)
from canary.tokens import KEYWORDS, Token, TokenKind, is_keyword
from canary.lexer import Lexer
from canary.parser import Parser
from canary.diagnostics import Diagnostics, Severity, report_error

__all__ = [
    # Version info
    "__version__",
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenKind",
    "is_keyword",
    # Lexer and parser
    "Lexer",
    "Parser",
    # Diagnostics
    "Diagnostics",
    "Severity",
    "report_error",
    # Exception hierarchy
    "CanaryError",
    "SourceLocation",
    "LexerError",
    "UnterminatedStringError",
    "MalformedEllipsisError",
    "UnknownCharacterError",
    "TokenAllocationError",
    "UnexpectedTokenError",
    "ParserError",
    "ParserNotImplementedError",
]
