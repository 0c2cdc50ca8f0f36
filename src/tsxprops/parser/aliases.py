# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Table of type aliases declared in a single source file."""

import logging

from tsxprops.model.types import TypeRef

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class AliasTable:
    """Type aliases declared in one file, each of which can be claimed once.

    A component that references an alias *claims* it: the entry leaves the
    table and its name is remembered, so a second component referencing the
    same name gets nothing back. A claimed name cannot be declared again
    within the same parse.
    """

    def __init__(self) -> None:
        self._declared: dict[str, TypeRef] = {}
        self._claimed: set[str] = set()

    def __contains__(self, name: object) -> bool:
        return name in self._declared

    def __len__(self) -> int:
        return len(self._declared)

    def declare(self, name: str, type_ref: TypeRef) -> None:
        """Record the resolved type of alias *name*.

        A later declaration of an unclaimed name replaces the earlier one.
        Declarations of already claimed names are ignored.
        """
        if name in self._claimed:
            logger.debug("Ignoring declaration of already claimed alias %r", name)
            return
        logger.debug("Declared alias %r", name)
        self._declared[name] = type_ref

    def claim(self, name: str) -> TypeRef | None:
        """Remove and return the type of alias *name*, or None if it is not declared."""
        type_ref = self._declared.pop(name, None)
        if type_ref is None:
            logger.debug("Alias %r is not declared in this file", name)
            return None
        self._claimed.add(name)
        logger.debug("Claimed alias %r", name)
        return type_ref

    def is_claimed(self, name: str) -> bool:
        """Return True if alias *name* has already been claimed by a component."""
        return name in self._claimed
