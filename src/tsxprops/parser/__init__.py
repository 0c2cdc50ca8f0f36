# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and parser for .tsx component files."""

from tsxprops.parser.aliases import AliasTable
from tsxprops.parser.lexer import Lexer, Token, TokenType, tokenize
from tsxprops.parser.parser import ComponentParser, ParseError, UnexpectedTokenError, parse, parse_type

__all__ = [
    "parse",
    "parse_type",
    "ComponentParser",
    "ParseError",
    "UnexpectedTokenError",
    "AliasTable",
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
]
