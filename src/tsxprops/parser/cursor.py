# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Buffered cursor over the lexer's token stream."""

from tsxprops.parser.lexer import Lexer, Token, TokenType

# ###############
# Public Interface
# ###############


class TokenCursor:
    """A position in a lazily buffered token stream.

    Tokens are pulled from the lexer only when the cursor needs to look at
    them. Once the lexer yields an EOF token the stream is considered
    finished: the cursor never moves past it and every further lookahead
    returns that same token.

    ``mark()`` and ``reset()`` allow bounded speculative scanning, and
    ``rewind()`` restarts the stream for a second pass over the same tokens.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._buffer: list[Token] = []
        self._pos = 0

    @property
    def current(self) -> Token:
        """The current (un-consumed) token."""
        return self.peek(0)

    def peek(self, offset: int = 1) -> Token:
        """Return the token *offset* positions ahead of the current one."""
        index = self._pos + offset
        while index >= len(self._buffer) and not self._exhausted():
            self._buffer.append(self._lexer.next_token())
        return self._buffer[min(index, len(self._buffer) - 1)]

    def check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types."""
        return self.current.type in types

    def at_end(self) -> bool:
        """Return True if the current token is the EOF token."""
        return self.check(TokenType.EOF)

    def advance(self) -> Token:
        """Consume and return the current token, stopping at EOF."""
        tok = self.current
        if tok.type != TokenType.EOF:
            self._pos += 1
        return tok

    def mark(self) -> int:
        """Return the current position for a later :meth:`reset`."""
        return self._pos

    def reset(self, mark: int) -> None:
        """Return to a position previously obtained from :meth:`mark`."""
        self._pos = mark

    def rewind(self) -> None:
        """Return to the first token of the stream."""
        self._pos = 0

    # ------------------------------------------------------------------
    # Implementation
    # ------------------------------------------------------------------

    def _exhausted(self) -> bool:
        return bool(self._buffer) and self._buffer[-1].type == TokenType.EOF
