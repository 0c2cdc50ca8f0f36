# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser that finds the exported component of a .tsx file.

The parser does not build a syntax tree for the whole file. It scans the
token stream for two things only: ``type`` declarations, which are stored
in an alias table, and ``export`` declarations, which are classified until
one of them is recognised as a component. The props of that component are
then resolved either by claiming an alias from the table or by parsing an
inline object type.
"""

import logging

from tsxprops.model.entities import Component, ExpandProps, NamedProps, Props
from tsxprops.model.types import (
    AliasType,
    ArrayType,
    IntersectionType,
    LiteralType,
    ObjectType,
    PrimitiveType,
    PrimitiveTypeRef,
    Property,
    TypeRef,
    UnionType,
)
from tsxprops.parser.aliases import AliasTable
from tsxprops.parser.cursor import TokenCursor
from tsxprops.parser.lexer import KEYWORDS, Lexer, Token, TokenType

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ParseError(Exception):
    """Raised when the parser encounters a structurally invalid construct.

    Attributes:
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column


class UnexpectedTokenError(ParseError):
    """Raised when a token the grammar requires is missing.

    Attributes:
        expected: Descriptions of the tokens that would have been accepted.
        found: The token that was found instead.
    """

    def __init__(self, expected: tuple[str, ...], found: Token) -> None:
        super().__init__(
            f"Expected {' or '.join(expected)}, got {found.describe()}",
            found.line,
            found.column,
        )
        self.expected = expected
        self.found = found


def parse(source: str, *, forward_references: bool = False) -> Component | None:
    """Find the first exported component in TSX source text.

    Args:
        source: The full text of a .tsx file.
        forward_references: When True, all ``type`` declarations are
            collected before components are resolved, so an alias may be
            declared below the component that uses it.

    Returns:
        The component and its resolved props, or None if the file exports
        no recognisable component.

    Raises:
        ParseError: If a type or parameter list is structurally invalid.
    """
    return ComponentParser(source, forward_references=forward_references).search_component()


def parse_type(source: str) -> TypeRef:
    """Parse a standalone type expression such as ``string | number[]``.

    Raises:
        ParseError: If the text is not a single valid type expression.
    """
    return ComponentParser(source).parse_type_expression()


class ComponentParser:
    """Scanner-driven parser for one source file.

    Each instance owns its token cursor and alias table. Calling
    :meth:`search_component` again after it returned a component resumes
    the scan after that component, with the aliases it claimed gone.
    """

    def __init__(self, source: str, *, forward_references: bool = False) -> None:
        self._cursor = TokenCursor(Lexer(source))
        self._aliases = AliasTable()
        self._forward_references = forward_references
        self._declarations_collected = False

    @property
    def aliases(self) -> AliasTable:
        """The aliases declared so far and not yet claimed."""
        return self._aliases

    def search_component(self) -> Component | None:
        """Scan forward to the next exported component.

        Returns:
            The component, or None once the end of input is reached.
        """
        if self._forward_references and not self._declarations_collected:
            self._collect_type_declarations()
        cursor = self._cursor
        while not cursor.at_end():
            tok = cursor.advance()
            if tok.type == TokenType.TYPE:
                self._parse_type_declaration()
            elif tok.type == TokenType.EXPORT:
                component = self._parse_export(tok)
                if component is not None:
                    logger.debug("Found component %r at line %d", component.name, tok.line)
                    return component
        return None

    def parse_type_expression(self) -> TypeRef:
        """Parse the whole input as one type expression."""
        type_ref = self._parse_type()
        if not self._cursor.at_end():
            raise UnexpectedTokenError(("end of input",), self._cursor.current)
        return type_ref

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _expect(self, *types: TokenType) -> Token:
        """Consume the current token if it matches any of the given types.

        Raises UnexpectedTokenError if the current token does not match.
        """
        if not self._cursor.check(*types):
            raise UnexpectedTokenError(tuple(_describe(t) for t in types), self._cursor.current)
        return self._cursor.advance()

    def _expect_property_name(self) -> Token:
        """Consume the current token as an object property name."""
        if self._cursor.current.type not in _PROPERTY_NAME_TYPES:
            raise UnexpectedTokenError(("property name",), self._cursor.current)
        return self._cursor.advance()

    def _matching_offset(self, open_type: TokenType, close_type: TokenType) -> int | None:
        """Return the lookahead offset of the token closing the current one.

        The current token must be *open_type*. Returns None when the input
        ends before the bracket is closed.
        """
        depth = 0
        offset = 0
        while True:
            tok = self._cursor.peek(offset)
            if tok.type == TokenType.EOF:
                return None
            if tok.type == open_type:
                depth += 1
            elif tok.type == close_type:
                depth -= 1
                if depth == 0:
                    return offset
            offset += 1

    def _consume_balanced(self, open_type: TokenType, close_type: TokenType) -> list[Token]:
        """Consume a bracketed run and return the tokens between the brackets."""
        self._expect(open_type)
        inner: list[Token] = []
        depth = 1
        while True:
            tok = self._cursor.current
            if tok.type == TokenType.EOF:
                raise UnexpectedTokenError((_describe(close_type),), tok)
            self._cursor.advance()
            if tok.type == open_type:
                depth += 1
            elif tok.type == close_type:
                depth -= 1
                if depth == 0:
                    return inner
            inner.append(tok)

    # ------------------------------------------------------------------
    # Type declarations
    # ------------------------------------------------------------------

    def _collect_type_declarations(self) -> None:
        """Declare every alias in the file, then rewind for the component scan."""
        cursor = self._cursor
        while not cursor.at_end():
            if cursor.advance().type == TokenType.TYPE:
                self._parse_type_declaration()
        cursor.rewind()
        self._declarations_collected = True

    def _parse_type_declaration(self) -> None:
        """Parse: type <Name> [<params>] = { ... } [& ...] after the 'type' keyword.

        Only object-shaped right-hand sides are stored. A ``type`` keyword
        that does not start a declaration (``type="button"`` in markup,
        ``import { type X }``) is ignored.
        """
        cursor = self._cursor
        if not (cursor.check(TokenType.IDENTIFIER) and cursor.peek(1).type in (TokenType.ASSIGN, TokenType.LANGLE)):
            return
        name = cursor.advance().value
        if cursor.check(TokenType.LANGLE):
            self._consume_balanced(TokenType.LANGLE, TokenType.RANGLE)
        if not cursor.check(TokenType.ASSIGN):
            return
        cursor.advance()
        if not cursor.check(TokenType.LBRACE):
            logger.debug("Skipping alias %r: right-hand side is not an object type", name)
            return
        self._aliases.declare(name, self._parse_type())

    # ------------------------------------------------------------------
    # Export declarations
    # ------------------------------------------------------------------

    def _parse_export(self, export_tok: Token) -> Component | None:
        """Classify the declaration after 'export' and return it if it is a component."""
        cursor = self._cursor
        if cursor.check(TokenType.TYPE):
            cursor.advance()
            self._parse_type_declaration()
            return None
        is_default = cursor.check(TokenType.DEFAULT)
        if is_default:
            cursor.advance()
            if not cursor.check(TokenType.FUNCTION):
                logger.debug("Line %d: default export of a value is not a component", export_tok.line)
                return None
        if cursor.check(TokenType.FUNCTION):
            cursor.advance()
            return self._parse_function_declaration(is_default=is_default)
        if cursor.check(TokenType.CONST):
            cursor.advance()
            return self._parse_const_declaration()
        logger.debug("Line %d: export of %s is not a component", export_tok.line, cursor.current.describe())
        return None

    def _parse_function_declaration(self, *, is_default: bool = False) -> Component | None:
        """Parse: function <Name> [<params>] ( ... ) after the 'function' keyword."""
        cursor = self._cursor
        if not cursor.check(TokenType.IDENTIFIER):
            return None
        name = cursor.advance().value
        if cursor.check(TokenType.LANGLE):
            self._consume_balanced(TokenType.LANGLE, TokenType.RANGLE)
        self._expect(TokenType.LPAREN)
        return Component(name=name, props=self._parse_parameters(), is_default=is_default)

    def _parse_const_declaration(self) -> Component | None:
        """Parse the forms that can follow 'export const'.

        Recognised components::

            const Name: FC<Props> = ...
            const Name = (props: Props) => ...
            const Name = function (props: Props) { ... }

        Anything else (plain values, wrapped components) is not a component.
        """
        cursor = self._cursor
        if not cursor.check(TokenType.IDENTIFIER):
            return None
        name = cursor.advance().value
        if cursor.check(TokenType.COLON):
            cursor.advance()
            return self._parse_component_annotation(name)
        if not cursor.check(TokenType.ASSIGN):
            return None
        cursor.advance()
        if cursor.check(TokenType.FUNCTION):
            cursor.advance()
            if cursor.check(TokenType.IDENTIFIER):
                cursor.advance()
            self._expect(TokenType.LPAREN)
            return Component(name=name, props=self._parse_parameters())
        if cursor.check(TokenType.LPAREN) and self._is_arrow_function():
            cursor.advance()
            return Component(name=name, props=self._parse_parameters())
        logger.debug("Export %r is not a function component", name)
        return None

    def _parse_component_annotation(self, name: str) -> Component | None:
        """Parse: [React.]FC[<Props>] after 'export const <Name>:'."""
        cursor = self._cursor
        if not cursor.check(TokenType.IDENTIFIER):
            return None
        type_name = cursor.advance().value
        while cursor.check(TokenType.DOT) and cursor.peek(1).type == TokenType.IDENTIFIER:
            cursor.advance()
            type_name = f"{type_name}.{cursor.advance().value}"
        if type_name.rsplit(".", 1)[-1] not in _COMPONENT_TYPE_NAMES:
            logger.debug("Export %r is annotated as %r, not a component type", name, type_name)
            return None
        if not cursor.check(TokenType.LANGLE):
            return Component(name=name, props=ExpandProps())
        cursor.advance()
        props_type = self._parse_type()
        self._expect(TokenType.RANGLE, TokenType.GTE)
        return Component(name=name, props=self._props_from_type(props_type))

    def _is_arrow_function(self) -> bool:
        """Return True if the parenthesized run at the cursor is followed by '=>' or ': Return'."""
        offset = self._matching_offset(TokenType.LPAREN, TokenType.RPAREN)
        if offset is None:
            return False
        return self._cursor.peek(offset + 1).type in (TokenType.ARROW, TokenType.COLON)

    # ------------------------------------------------------------------
    # Parameter lists
    # ------------------------------------------------------------------

    def _parse_parameters(self) -> Props:
        """Resolve props from a parameter list whose '(' was already consumed."""
        cursor = self._cursor
        if cursor.check(TokenType.RPAREN):
            cursor.advance()
            return ExpandProps()
        if cursor.check(TokenType.LBRACE):
            # Destructured props: { label, size }: Props
            self._consume_balanced(TokenType.LBRACE, TokenType.RBRACE)
        else:
            self._expect(TokenType.IDENTIFIER)
        if cursor.check(TokenType.QUESTION):
            cursor.advance()
        if cursor.check(TokenType.RPAREN, TokenType.COMMA, TokenType.ASSIGN):
            return ExpandProps()
        self._expect(TokenType.COLON)
        return self._props_from_type(self._parse_type())

    def _props_from_type(self, type_ref: TypeRef) -> Props:
        """Turn a declared props type into props, claiming a referenced alias."""
        if isinstance(type_ref, ObjectType):
            return ExpandProps(type=type_ref)
        if isinstance(type_ref, AliasType):
            resolved = self._aliases.claim(type_ref.name)
            if resolved is None:
                return NamedProps(name=type_ref.name)
            return NamedProps(name=type_ref.name, type=resolved)
        return NamedProps(name=type_ref.to_str(), type=type_ref)

    # ------------------------------------------------------------------
    # Type expressions
    # ------------------------------------------------------------------

    def _parse_type(self) -> TypeRef:
        """Parse: ['|'] intersection ('|' intersection)*"""
        cursor = self._cursor
        if cursor.check(TokenType.PIPE):
            cursor.advance()
        members = [self._parse_intersection()]
        while cursor.check(TokenType.PIPE):
            cursor.advance()
            members.append(self._parse_intersection())
        if len(members) == 1:
            return members[0]
        return UnionType(members=members)

    def _parse_intersection(self) -> TypeRef:
        """Parse: ['&'] postfix ('&' postfix)*"""
        cursor = self._cursor
        if cursor.check(TokenType.AMPERSAND):
            cursor.advance()
        members = [self._parse_postfix()]
        while cursor.check(TokenType.AMPERSAND):
            cursor.advance()
            members.append(self._parse_postfix())
        if len(members) == 1:
            return members[0]
        return IntersectionType(members=members)

    def _parse_postfix(self) -> TypeRef:
        """Parse: primary ('[' [index] ']')*

        ``T[]`` is an array. An indexed access such as ``Props['size']`` is
        kept as opaque text.
        """
        cursor = self._cursor
        type_ref = self._parse_primary()
        while cursor.check(TokenType.LBRACKET):
            if cursor.peek(1).type == TokenType.RBRACKET:
                cursor.advance()
                cursor.advance()
                type_ref = ArrayType(element=type_ref)
                continue
            base = type_ref.to_str()
            if isinstance(type_ref, (UnionType, IntersectionType)) or base.startswith("("):
                base = f"({base})"
            index = _join_tokens(self._consume_balanced(TokenType.LBRACKET, TokenType.RBRACKET))
            type_ref = AliasType(name=f"{base}[{index}]")
        return type_ref

    def _parse_primary(self) -> TypeRef:
        """Parse a named, literal, object, tuple, function, or parenthesized type."""
        cursor = self._cursor
        tok = cursor.current
        if tok.type == TokenType.IDENTIFIER:
            if tok.value in _TYPE_OPERATORS and cursor.peek(1).type in (TokenType.IDENTIFIER, TokenType.LPAREN):
                cursor.advance()
                return AliasType(name=f"{tok.value} {self._parse_postfix().to_str()}")
            return self._parse_named_type()
        if tok.type in (TokenType.STRING, TokenType.NUMBER, TokenType.TRUE, TokenType.FALSE):
            cursor.advance()
            return LiteralType(text=tok.value)
        if tok.type == TokenType.MINUS and cursor.peek(1).type == TokenType.NUMBER:
            cursor.advance()
            return LiteralType(text=f"-{cursor.advance().value}")
        if tok.type == TokenType.LBRACE:
            return self._parse_object_type()
        if tok.type == TokenType.LPAREN:
            return self._parse_parenthesized_type()
        if tok.type == TokenType.LBRACKET:
            # Tuples stay opaque, like function types.
            return AliasType(name=f"[{_join_tokens(self._consume_balanced(TokenType.LBRACKET, TokenType.RBRACKET))}]")
        raise UnexpectedTokenError(("type",), tok)

    def _parse_named_type(self) -> TypeRef:
        """Parse: IDENT ('.' IDENT)* [type-arguments]"""
        cursor = self._cursor
        name = cursor.advance().value
        while cursor.check(TokenType.DOT):
            cursor.advance()
            name = f"{name}.{self._expect_property_name().value}"
        if cursor.check(TokenType.LANGLE):
            return AliasType(name=name + self._read_type_arguments())
        if name in _PRIMITIVE_TYPES:
            return PrimitiveTypeRef(primitive=_PRIMITIVE_TYPES[name])
        return AliasType(name=name)

    def _read_type_arguments(self) -> str:
        """Read '<' ... '>' and return it as source text.

        Angle brackets are counted explicitly, so nested arguments such as
        ``<SetStateAction<boolean>>`` close only when the depth returns to
        zero.
        """
        cursor = self._cursor
        tokens = [cursor.advance()]
        depth = 1
        while depth:
            tok = cursor.current
            if tok.type == TokenType.EOF:
                raise UnexpectedTokenError(("'>'",), tok)
            cursor.advance()
            if tok.type == TokenType.LANGLE:
                depth += 1
            elif tok.type == TokenType.RANGLE:
                depth -= 1
            tokens.append(tok)
        return _join_tokens(tokens)

    def _parse_parenthesized_type(self) -> TypeRef:
        """Parse a function type '(params) => Return' or a grouping '(T)'."""
        cursor = self._cursor
        start = cursor.mark()
        params = self._consume_balanced(TokenType.LPAREN, TokenType.RPAREN)
        if cursor.check(TokenType.ARROW):
            cursor.advance()
            return_type = self._parse_type()
            return AliasType(name=f"({_join_tokens(params)}) => {return_type.to_str()}")
        if not params:
            raise UnexpectedTokenError(("'=>'",), cursor.current)
        cursor.reset(start)
        cursor.advance()
        grouped = self._parse_type()
        self._expect(TokenType.RPAREN)
        return grouped

    def _parse_object_type(self) -> ObjectType:
        """Parse: '{' (key ['?'] ':' type [',' | ';'])* '}'

        A missing separator between two properties is tolerated when the
        next token can start a property name.
        """
        cursor = self._cursor
        self._expect(TokenType.LBRACE)
        obj = ObjectType()
        while not cursor.check(TokenType.RBRACE):
            if cursor.check(TokenType.COMMA, TokenType.SEMICOLON):
                cursor.advance()
                continue
            key = self._expect_property_name()
            if key.value == "readonly" and cursor.current.type in _PROPERTY_NAME_TYPES:
                key = cursor.advance()
            optional = False
            if cursor.check(TokenType.QUESTION):
                cursor.advance()
                optional = True
            self._expect(TokenType.COLON)
            obj.insert(Property(name=key.value, optional=optional, type=self._parse_type()))
            if cursor.check(TokenType.COMMA, TokenType.SEMICOLON):
                cursor.advance()
            elif not cursor.check(TokenType.RBRACE) and cursor.current.type not in _PROPERTY_NAME_TYPES:
                raise UnexpectedTokenError(("','", "';'", "'}'"), cursor.current)
        self._expect(TokenType.RBRACE)
        return obj


# ################
# Implementation
# ################

_PRIMITIVE_TYPES: dict[str, PrimitiveType] = {
    "number": PrimitiveType.NUMBER,
    "string": PrimitiveType.STRING,
    "boolean": PrimitiveType.BOOLEAN,
}

_COMPONENT_TYPE_NAMES: frozenset[str] = frozenset(
    {
        "FC",
        "VFC",
        "FunctionComponent",
        "VoidFunctionComponent",
    }
)

_TYPE_OPERATORS: frozenset[str] = frozenset({"keyof", "typeof", "readonly", "unique"})

_WORD_TYPES: frozenset[TokenType] = frozenset({TokenType.IDENTIFIER, TokenType.NUMBER, *KEYWORDS.values()})

_PROPERTY_NAME_TYPES: frozenset[TokenType] = _WORD_TYPES | {TokenType.STRING}

# Tokens rendered with surrounding spacing when type text is reconstructed.
_SPACED_TOKENS: dict[TokenType, str] = {
    TokenType.COMMA: ", ",
    TokenType.COLON: ": ",
    TokenType.SEMICOLON: "; ",
    TokenType.ARROW: " => ",
    TokenType.LBRACE: "{ ",
    TokenType.RBRACE: " }",
}


def _describe(token_type: TokenType) -> str:
    """Describe a token type for error messages ('identifier', "'>'")."""
    if token_type.value.isupper():
        return token_type.value.lower().replace("_", " ")
    return repr(token_type.value)


def _join_tokens(tokens: list[Token]) -> str:
    """Rebuild source text from tokens, separating adjacent words with a space.

    Braces are padded the way object types are written (``{ a: string }``),
    except for an empty pair, which stays ``{}``.
    """
    parts: list[str] = []
    previous: Token | None = None
    for tok in tokens:
        if tok.type == TokenType.RBRACE and previous is not None and previous.type == TokenType.LBRACE:
            parts[-1] = "{"
            parts.append("}")
        elif tok.type in _SPACED_TOKENS:
            text = _SPACED_TOKENS[tok.type]
            if parts and parts[-1].endswith(" "):
                text = text.lstrip(" ")
            parts.append(text)
        else:
            if previous is not None and previous.type in _WORD_TYPES and tok.type in _WORD_TYPES:
                parts.append(" ")
            parts.append(tok.value)
        previous = tok
    return "".join(parts)
