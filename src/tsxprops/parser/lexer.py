# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for .tsx component files.

Converts raw source text into a lazily produced sequence of tokens. The
scanner never raises: a character it does not recognise is consumed and
reported as an end-of-input token, leaving the parser to decide what the
truncated stream means.
"""

import enum
from collections.abc import Iterator
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the TSX lexer."""

    # Keywords
    TYPE = "type"
    EXPORT = "export"
    IMPORT = "import"
    DEFAULT = "default"
    CONST = "const"
    LET = "let"
    VAR = "var"
    RETURN = "return"
    IF = "if"
    ELSE = "else"
    TRUE = "true"
    FALSE = "false"
    FUNCTION = "function"
    CLASS = "class"
    FROM = "from"

    # Punctuation
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COLON = ":"
    DOT = "."
    AMPERSAND = "&"
    PIPE = "|"

    # Operators
    ASSIGN = "="
    EQ = "=="
    ARROW = "=>"
    LANGLE = "<"
    LTE = "<="
    CLOSE_TAG_OPEN = "</"
    RANGLE = ">"
    GTE = ">="
    SELF_CLOSE = "/>"
    PLUS = "+"
    INCREMENT = "++"
    PLUS_ASSIGN = "+="
    MINUS = "-"
    DECREMENT = "--"
    MINUS_ASSIGN = "-="
    STAR = "*"
    STAR_ASSIGN = "*="
    SLASH = "/"
    SLASH_ASSIGN = "/="
    QUESTION = "?"
    NULLISH = "??"
    BANG = "!"
    NOT_EQ = "!="
    OR = "||"

    # Comments
    LINE_COMMENT = "LINE_COMMENT"
    BLOCK_COMMENT = "BLOCK_COMMENT"

    # Literals
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Identifiers
    IDENTIFIER = "IDENTIFIER"

    # End of input
    EOF = "EOF"


KEYWORDS: dict[str, TokenType] = {
    "type": TokenType.TYPE,
    "export": TokenType.EXPORT,
    "import": TokenType.IMPORT,
    "default": TokenType.DEFAULT,
    "const": TokenType.CONST,
    "let": TokenType.LET,
    "var": TokenType.VAR,
    "return": TokenType.RETURN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "function": TokenType.FUNCTION,
    "class": TokenType.CLASS,
    "from": TokenType.FROM,
}


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The exact source text of the token. String literals keep
            their quotes and comments keep their delimiters, so types can be
            reconstructed verbatim.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    type: TokenType
    value: str
    line: int
    column: int

    def describe(self) -> str:
        """Return a short human-readable description for error messages."""
        if self.type == TokenType.EOF:
            return "end of input"
        return repr(self.value)


class Lexer:
    """Pull-based scanner over a source string.

    Each call to :meth:`next_token` scans exactly one token. The lexer keeps
    no buffer of produced tokens; lookahead is the caller's concern.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF token."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return

    def next_token(self) -> Token:
        """Scan and return the next token.

        Returns an EOF token once the input is exhausted, and also in place
        of any character the scanner does not recognise.
        """
        self._skip_whitespace()
        line = self._line
        col = self._column
        ch = self._current()

        if ch == "":
            return Token(TokenType.EOF, "", line, col)
        if ch in _SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(_SINGLE_CHAR_TOKENS[ch], ch, line, col)
        if ch in _COMPOUND_TOKENS:
            return self._scan_operator(line, col)
        if ch == "/":
            return self._scan_slash(line, col)
        if ch in "\"'":
            return self._scan_string(line, col)
        if ch.isdigit():
            return self._scan_number(line, col)
        if _is_identifier_start(ch):
            return self._scan_identifier_or_keyword(line, col)

        self._advance()
        return Token(TokenType.EOF, "", line, col)

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update position tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._source) and self._current().isspace():
            self._advance()

    # ------------------------------------------------------------------
    # Operator and comment scanners
    # ------------------------------------------------------------------

    def _scan_operator(self, line: int, col: int) -> Token:
        """Scan a one- or two-character operator using one character of lookahead."""
        first = self._advance()
        single, compounds = _COMPOUND_TOKENS[first]
        second = self._current()
        if second and second in compounds:
            self._advance()
            return Token(compounds[second], first + second, line, col)
        return Token(single, first, line, col)

    def _scan_slash(self, line: int, col: int) -> Token:
        """Scan '/', '/=', '/>' or a line/block comment."""
        nxt = self._peek()
        if nxt == "/":
            return self._scan_line_comment(line, col)
        if nxt == "*":
            return self._scan_block_comment(line, col)
        self._advance()  # /
        if nxt == "=":
            self._advance()
            return Token(TokenType.SLASH_ASSIGN, "/=", line, col)
        if nxt == ">":
            self._advance()
            return Token(TokenType.SELF_CLOSE, "/>", line, col)
        return Token(TokenType.SLASH, "/", line, col)

    def _scan_line_comment(self, line: int, col: int) -> Token:
        """Consume from '//' through end-of-line (exclusive of the newline itself)."""
        start = self._pos
        while self._pos < len(self._source) and self._current() != "\n":
            self._advance()
        return Token(TokenType.LINE_COMMENT, self._source[start : self._pos], line, col)

    def _scan_block_comment(self, line: int, col: int) -> Token:
        """Consume from '/*' through the matching '*/', or to end of input."""
        start = self._pos
        self._advance()  # /
        self._advance()  # *
        while self._pos < len(self._source):
            if self._current() == "*" and self._peek() == "/":
                self._advance()  # *
                self._advance()  # /
                break
            self._advance()
        return Token(TokenType.BLOCK_COMMENT, self._source[start : self._pos], line, col)

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self, line: int, col: int) -> Token:
        """Scan a quoted string literal.

        There is no escape handling: the next matching quote ends the
        literal. An unterminated literal runs to end of input.
        """
        start = self._pos
        quote = self._advance()
        while self._pos < len(self._source):
            if self._advance() == quote:
                break
        return Token(TokenType.STRING, self._source[start : self._pos], line, col)

    def _scan_number(self, line: int, col: int) -> Token:
        """Scan a run of digits."""
        start = self._pos
        while self._pos < len(self._source) and self._current().isdigit():
            self._advance()
        return Token(TokenType.NUMBER, self._source[start : self._pos], line, col)

    def _scan_identifier_or_keyword(self, line: int, col: int) -> Token:
        """Scan an identifier and map it to a keyword token type if applicable."""
        start = self._pos
        while self._pos < len(self._source) and _is_identifier_part(self._current()):
            self._advance()
        value = self._source[start : self._pos]
        return Token(KEYWORDS.get(value, TokenType.IDENTIFIER), value, line, col)


def tokenize(source: str) -> list[Token]:
    """Tokenize TSX source text up to the first end-of-input token.

    Comments are returned as tokens; whitespace is dropped.

    Args:
        source: The full text of a .tsx file.

    Returns:
        A list of Token objects ending with a single EOF token.
    """
    return list(Lexer(source))


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ":": TokenType.COLON,
    ".": TokenType.DOT,
    "&": TokenType.AMPERSAND,
}

# First character -> (single-character type, {second character: two-character type}).
_COMPOUND_TOKENS: dict[str, tuple[TokenType, dict[str, TokenType]]] = {
    "=": (TokenType.ASSIGN, {"=": TokenType.EQ, ">": TokenType.ARROW}),
    "<": (TokenType.LANGLE, {"=": TokenType.LTE, "/": TokenType.CLOSE_TAG_OPEN}),
    ">": (TokenType.RANGLE, {"=": TokenType.GTE}),
    "+": (TokenType.PLUS, {"+": TokenType.INCREMENT, "=": TokenType.PLUS_ASSIGN}),
    "-": (TokenType.MINUS, {"-": TokenType.DECREMENT, "=": TokenType.MINUS_ASSIGN}),
    "*": (TokenType.STAR, {"=": TokenType.STAR_ASSIGN}),
    "?": (TokenType.QUESTION, {"?": TokenType.NULLISH}),
    "!": (TokenType.BANG, {"=": TokenType.NOT_EQ}),
    "|": (TokenType.PIPE, {"|": TokenType.OR}),
}


def _is_identifier_start(ch: str) -> bool:
    return ch.isalpha() or ch in "_$"


def _is_identifier_part(ch: str) -> bool:
    return ch.isalnum() or ch in "_$"
