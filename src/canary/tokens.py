"""
Canary Tokens
=============

Token kinds, the reserved-word table and the Token value type shared by
the lexer and the parser.

Token Categories
----------------
- Keywords: const, val, mut, struct, fn, if, else, ...
- Identifiers: names made of ASCII letters, digits and underscores
- Numbers: decimal digits with '_' separators and an optional fraction
- Strings: "double quoted", escapes kept raw in the lexeme
- Operators and punctuation: :=, +=, ->, ..., (, ), ...

Some kinds are reserved and never produced by the scanner: FAT_ARROW
(=>), PIPE (|>) and COMMENT. The '|' character always scans as VERT_BAR.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from canary.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Closed set of token kinds.

    The value of each member is its fixed spelling for operator and
    punctuation kinds, and a unique label for the rest.
    """

    # === Structural Tokens ===
    EOF = "<eof>"
    INVALID = "<invalid>"

    # === Multi-character Operators ===
    ASSIGN = ":="
    PLUS_EQL = "+="
    MINUS_EQL = "-="
    STAR_EQL = "*="
    SLASH_EQL = "/="
    LESS_EQL = "<="
    GREATER_EQL = ">="
    RIGHT_ARROW = "->"
    FAT_ARROW = "=>"        # reserved
    PIPE = "|>"             # reserved
    DOT3 = "..."

    # === Single-character Operators and Punctuation ===
    COLON = ":"
    SEMI_COLON = ";"
    EQUAL = "="
    PLUS = "+"
    DASH = "-"
    STAR = "*"
    SLASH = "/"
    VERT_BAR = "|"
    DOT = "."
    COMMA = ","
    LESS = "<"
    GREATER = ">"
    QUESTION = "?"
    BANG = "!"
    POUND = "#"
    O_BRACK = "{"
    C_BRACK = "}"
    O_PAREN = "("
    C_PAREN = ")"
    O_SQUARE = "["
    C_SQUARE = "]"

    # === Identifiers and Literals ===
    IDENT = "<ident>"
    NUMBER = "<number>"
    KEYWORD = "<keyword>"
    STRING = "<string>"
    COMMENT = "<comment>"   # reserved

    @property
    def symbol(self) -> Optional[str]:
        """Fixed spelling of an operator or punctuation kind, else None."""
        if self.value.startswith("<") and len(self.value) > 1 and self.value.endswith(">"):
            return None
        return self.value


# =============================================================================
# Keyword Table
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    # Bindings
    "const", "val", "mut",

    # Type definitions
    "struct", "enum", "macro", "impl", "interface",

    # Visibility and dispatch
    "priv", "pub", "override",

    # Functions
    "fn", "Self", "self", "defer",

    # Control flow
    "if", "else", "switch", "for", "break", "continue", "unreachable",
})


def is_keyword(lexeme: str) -> bool:
    """Return True if lexeme exactly matches a reserved word (case-sensitive)."""
    return lexeme in KEYWORDS


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    Represents a single token from Canary source code.

    The lexeme is an owned copy of the consumed text, so tokens outlive
    the lexer that produced them. For strings the delimiting quotes are
    not part of the lexeme.

    Attributes:
        kind: The TokenKind classification
        lexeme: The exact source text consumed for this token
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        filename: Name of the source
    """
    kind: TokenKind
    lexeme: str
    line: int
    column: int
    filename: str

    def __str__(self) -> str:
        return f"Token {self.kind.name} => {self.lexeme}"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.line}:{self.column})"

    @classmethod
    def invalid(cls, filename: str = "<input>") -> "Token":
        """Placeholder token used before any real token has been scanned."""
        return cls(TokenKind.INVALID, "", 0, 0, filename)

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    @property
    def value(self) -> Union[int, float, str]:
        """
        Semantic value of the token.

        NUMBER lexemes drop their '_' separators and become an int, or a
        float when a '.' is present ("7." is 7.0). Other kinds return the
        lexeme unchanged.
        """
        if self.kind is not TokenKind.NUMBER:
            return self.lexeme
        digits = self.lexeme.replace("_", "")
        if "." in digits:
            return float(digits)
        return int(digits)
