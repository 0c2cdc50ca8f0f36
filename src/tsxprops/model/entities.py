# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""The component found in a source file and the props it accepts."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from tsxprops.model.types import ObjectType, TypeRef

# ###############
# Public Interface
# ###############


class NamedProps(BaseModel):
    """Props declared through a type alias, e.g. ``(props: ButtonProps)``.

    ``type`` is the alias's resolved type, or an empty object type when the
    alias is not declared in the same file.
    """

    kind: Literal["named"] = "named"
    name: str
    type: TypeRef = _Field(default_factory=ObjectType)


class ExpandProps(BaseModel):
    """Props written inline, e.g. ``(props: { label: string })``, or no props at all."""

    kind: Literal["expand"] = "expand"
    type: ObjectType = _Field(default_factory=ObjectType)


Props = Annotated[NamedProps | ExpandProps, _Field(discriminator="kind")]


class Component(BaseModel):
    """An exported UI component and its resolved props.

    Attributes:
        name: The component's binding name.
        props: The resolved props.
        is_default: True for ``export default function Name``, which must be
            imported without braces.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    props: Props
    is_default: bool = False

    def props_str(self) -> str:
        """Return the type to use as the props type parameter of a story.

        This is the alias name for named props, or the rendered inline type.
        """
        if isinstance(self.props, NamedProps):
            return self.props.name
        return self.props.type.to_str()

    def expand_str(self) -> str:
        """Return the fully rendered props type."""
        return self.props.type.to_str()

    def fill_sample(self) -> str:
        """Return a placeholder props literal for a generated example."""
        return self.props.type.sample()
