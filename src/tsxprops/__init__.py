# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Extract exported components and their props from .tsx files."""

from tsxprops.model import Component
from tsxprops.parser import ParseError, parse

__all__ = [
    "Component",
    "ParseError",
    "parse",
]
