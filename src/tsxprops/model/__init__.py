# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic model for component props (types and components)."""

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

__all__ = [
    # Type system
    "PrimitiveType",
    "PrimitiveTypeRef",
    "Property",
    "ObjectType",
    "AliasType",
    "ArrayType",
    "UnionType",
    "IntersectionType",
    "LiteralType",
    "TypeRef",
    # Entities
    "NamedProps",
    "ExpandProps",
    "Props",
    "Component",
]
