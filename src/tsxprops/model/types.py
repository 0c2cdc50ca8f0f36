# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type representations for component props.

Every type renders two ways: :meth:`to_str` reproduces type-annotation
syntax, and :meth:`sample` produces a placeholder value of that type for a
generated example. Both renderers are pure and list object properties in
sorted order, so output is reproducible for the same input.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class PrimitiveType(Enum):
    """Primitive types recognised in prop declarations."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"


class PrimitiveTypeRef(BaseModel):
    """Reference to a primitive type."""

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveType

    def to_str(self) -> str:
        return self.primitive.value

    def sample(self) -> str:
        return _PRIMITIVE_SAMPLES[self.primitive]


class Property(BaseModel):
    """A named member of an object type.

    Attributes:
        name: The property name as written in the source (quoted names keep
            their quotes).
        optional: True when the property was declared with ``?``.
        type: The property's type.
    """

    name: str
    optional: bool = False
    type: TypeRef

    def key(self) -> str:
        """Return the property key as written in a type annotation."""
        return f"{self.name}?" if self.optional else self.name


class ObjectType(BaseModel):
    """A structural object type such as ``{ size: number; label?: string }``."""

    kind: Literal["object"] = "object"
    properties: dict[str, Property] = _Field(default_factory=dict)

    def insert(self, prop: Property) -> None:
        """Add *prop*, replacing any earlier property with the same name."""
        self.properties[prop.name] = prop

    def sorted_properties(self) -> list[Property]:
        """Return the properties in canonical (name) order."""
        return [self.properties[name] for name in sorted(self.properties)]

    def to_str(self) -> str:
        if not self.properties:
            return "{}"
        members = ", ".join(f"{p.key()}: {p.type.to_str()}" for p in self.sorted_properties())
        return f"{{ {members} }}"

    def sample(self) -> str:
        if not self.properties:
            return "{}"
        members = ", ".join(f"{p.name}: {p.type.sample()}" for p in self.sorted_properties())
        return f"{{ {members} }}"


class AliasType(BaseModel):
    """An opaque named type.

    The name may carry generic arguments (``Dispatch<SetStateAction<boolean>>``),
    member access (``React.ReactNode``) or a whole function signature
    (``(value: string) => void``). Its value cannot be synthesized, so it
    samples as ``null``.
    """

    kind: Literal["alias"] = "alias"
    name: str

    def to_str(self) -> str:
        return self.name

    def sample(self) -> str:
        return "null"


class ArrayType(BaseModel):
    """An array of elements of one type (``T[]``)."""

    kind: Literal["array"] = "array"
    element: TypeRef

    def to_str(self) -> str:
        return f"{_wrap(self.element, (UnionType, IntersectionType))}[]"

    def sample(self) -> str:
        return f"[{self.element.sample()}]"


class UnionType(BaseModel):
    """A union of two or more member types (``A | B``)."""

    kind: Literal["union"] = "union"
    members: list[TypeRef] = _Field(min_length=2)

    def to_str(self) -> str:
        return "|".join(_wrap(m, ()) for m in self.members)

    def sample(self) -> str:
        # The first member is taken as representative.
        return self.members[0].sample()


class IntersectionType(BaseModel):
    """An intersection of two or more member types (``A & B``)."""

    kind: Literal["intersection"] = "intersection"
    members: list[TypeRef] = _Field(min_length=2)

    def to_str(self) -> str:
        return "&".join(_wrap(m, (UnionType,)) for m in self.members)

    def sample(self) -> str:
        return self.members[0].sample()


class LiteralType(BaseModel):
    """A literal type (``'primary'``, ``42``, ``true``) kept as source text."""

    kind: Literal["literal"] = "literal"
    text: str

    def to_str(self) -> str:
        return self.text

    def sample(self) -> str:
        return self.text


# A prop type, discriminated by its `kind` field.
TypeRef = Annotated[
    PrimitiveTypeRef | ObjectType | AliasType | ArrayType | UnionType | IntersectionType | LiteralType,
    _Field(discriminator="kind"),
]


# ################
# Implementation
# ################

_PRIMITIVE_SAMPLES: dict[PrimitiveType, str] = {
    PrimitiveType.NUMBER: "0",
    PrimitiveType.STRING: '""',
    PrimitiveType.BOOLEAN: "false",
}


def _wrap(member: TypeRef, compound: tuple[type[BaseModel], ...]) -> str:
    """Render *member*, parenthesized when it would otherwise bind wrongly."""
    text = member.to_str()
    if isinstance(member, compound) or (isinstance(member, AliasType) and text.startswith("(")):
        return f"({text})"
    return text


# Resolve forward references for models that use TypeRef.
Property.model_rebuild()
ObjectType.model_rebuild()
ArrayType.model_rebuild()
UnionType.model_rebuild()
IntersectionType.model_rebuild()
