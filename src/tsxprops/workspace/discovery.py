# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Discovery of candidate component files below a source root."""

from __future__ import annotations

import fnmatch
from pathlib import Path

# ###############
# Public Interface
# ###############

COMPONENT_SUFFIX = ".tsx"


class DiscoveryError(Exception):
    """Raised when the source root cannot be searched."""


def discover_component_files(
    root: Path,
    *,
    story_suffix: str = ".stories.tsx",
    exclude: list[str] | None = None,
) -> list[Path]:
    """Return all .tsx files below *root* that may define a component.

    Generated stories, test files and anything inside ``node_modules`` or a
    hidden directory are skipped, as are files whose path relative to
    *root* matches one of the *exclude* glob patterns.

    Args:
        root: Directory to search recursively.
        story_suffix: Suffix of generated story files, which are never inputs.
        exclude: Glob patterns such as ``"legacy/**"`` or ``"*.old.tsx"``.

    Returns:
        The matching files in sorted order.

    Raises:
        DiscoveryError: If *root* does not exist or is not a directory.
    """
    if not root.is_dir():
        raise DiscoveryError(f"Source root '{root}' does not exist or is not a directory")

    patterns = exclude or []
    files = [
        path
        for path in root.rglob(f"*{COMPONENT_SUFFIX}")
        if path.is_file() and _is_candidate(path, root, story_suffix, patterns)
    ]
    return sorted(files)


def story_path_for(source_file: Path, story_suffix: str = ".stories.tsx") -> Path:
    """Return the story file generated for *source_file* (``Button.tsx`` -> ``Button.stories.tsx``)."""
    stem = source_file.name[: -len(COMPONENT_SUFFIX)]
    return source_file.with_name(stem + story_suffix)


# ################
# Implementation
# ################

_SKIPPED_SUFFIXES = (".test.tsx", ".spec.tsx")


def _is_candidate(path: Path, root: Path, story_suffix: str, patterns: list[str]) -> bool:
    """Return True if *path* is a component source file that is not excluded."""
    name = path.name
    if name.endswith(story_suffix) or name.endswith(_SKIPPED_SUFFIXES):
        return False
    rel = path.relative_to(root)
    if any(part == "node_modules" or part.startswith(".") for part in rel.parts[:-1]):
        return False
    rel_text = rel.as_posix()
    return not any(fnmatch.fnmatch(rel_text, pattern) for pattern in patterns)
