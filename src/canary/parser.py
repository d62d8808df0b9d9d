"""
Canary Parser
=============

The parser pulls tokens from a Lexer one at a time and keeps two of
them: the current token and one token of lookahead. It does not build
a syntax tree yet; parse() primes the token slots and then reports that
parsing is not implemented.

A lexer failure halts the parser. The resulting ParserError carries the
lexer's stored error message, prefixed with the source name, as context.
"""

import logging
from typing import Optional

from canary.errors import LexerError, ParserError, ParserNotImplementedError
from canary.lexer import Lexer
from canary.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


class Parser:
    """
    Token consumer on top of a Lexer.

    Attributes:
        lexer: The token source, owned exclusively by this parser
        current: The token being examined (INVALID before priming)
        lookahead: The token after current (INVALID before priming)
        last_error: Message of the most recent parser failure, or None
    """

    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.current: Token = Token.invalid(lexer.source_name)
        self.lookahead: Token = Token.invalid(lexer.source_name)
        self.last_error: Optional[str] = None

    def advance(self) -> Token:
        """
        Shift lookahead into current and scan a new lookahead token.

        Returns:
            The new current token

        Raises:
            ParserError: If the lexer fails; the stream is terminated
        """
        self.current = self.lookahead
        try:
            self.lookahead = self.lexer.next_token()
        except LexerError as error:
            context = f"{self.lexer.source_name}: {self.lexer.last_error}"
            self.last_error = "failed to read next token"
            raise ParserError(self.last_error, context=context) from error
        return self.current

    def at_end(self) -> bool:
        """Return True once the current token is EOF."""
        return self.current.kind is TokenKind.EOF

    def parse(self) -> None:
        """
        Parse the whole source.

        Raises:
            ParserError: If the lexer fails while priming the token slots
            ParserNotImplementedError: Always, once the slots are primed
        """
        self.advance()
        self.advance()
        logger.debug(
            "%s: primed current=%r lookahead=%r",
            self.lexer.source_name,
            self.current,
            self.lookahead,
        )

        error = ParserNotImplementedError()
        self.last_error = error.message
        raise error
