# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Batch generation of story files.

Every file is parsed independently. A file that cannot be read or parsed
is reported with its reason and skipped; it never stops the batch.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path

from tsxprops.model.entities import Component
from tsxprops.parser.parser import ParseError, parse
from tsxprops.storybook.template import render_story
from tsxprops.workspace.config import Config
from tsxprops.workspace.discovery import story_path_for

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class BuildError(Exception):
    """Raised when a single source file cannot be read or parsed.

    Attributes:
        path: The offending source file.
        reason: Human-readable cause.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class FileStatus(enum.Enum):
    """Outcome of processing one source file."""

    GENERATED = "generated"
    NO_COMPONENT = "no-component"
    EXISTS = "exists"
    FAILED = "failed"


@dataclass
class FileResult:
    """What happened to one source file.

    Attributes:
        source: The component source file.
        status: The outcome.
        component: The parsed component, if one was found.
        story: Path of the story file, for GENERATED and EXISTS.
        content: Rendered story source, for GENERATED and EXISTS.
        reason: Failure reason, for FAILED.
    """

    source: Path
    status: FileStatus
    component: Component | None = None
    story: Path | None = None
    content: str | None = None
    reason: str | None = None


@dataclass
class BuildReport:
    """Results of a batch run, in input order."""

    results: list[FileResult] = field(default_factory=list)

    def with_status(self, status: FileStatus) -> list[FileResult]:
        return [r for r in self.results if r.status == status]

    @property
    def has_failures(self) -> bool:
        return any(r.status == FileStatus.FAILED for r in self.results)


def inspect_file(path: Path, *, forward_references: bool = False) -> Component | None:
    """Read *path* and return its exported component, if any.

    Raises:
        BuildError: If the file cannot be read or its source is structurally invalid.
    """
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildError(path, f"cannot read file: {exc}") from exc
    try:
        return parse(source, forward_references=forward_references)
    except ParseError as exc:
        raise BuildError(path, str(exc)) from exc


def build_stories(
    files: list[Path],
    config: Config,
    *,
    write: bool = True,
    overwrite: bool = False,
) -> BuildReport:
    """Parse each file and render (and optionally write) its story.

    Args:
        files: Component source files.
        config: Settings for titles, story file names and alias resolution.
        write: Write story files next to their sources. When False, stories
            are only rendered into the report.
        overwrite: Replace story files that already exist.

    Returns:
        A report with one result per input file.
    """
    report = BuildReport()
    for path in files:
        report.results.append(_process_file(path, config, write=write, overwrite=overwrite))
    return report


# ################
# Implementation
# ################


def _process_file(path: Path, config: Config, *, write: bool, overwrite: bool) -> FileResult:
    try:
        component = inspect_file(path, forward_references=config.forward_references)
    except BuildError as exc:
        logger.warning("Skipping %s: %s", path, exc.reason)
        return FileResult(source=path, status=FileStatus.FAILED, reason=exc.reason)

    if component is None:
        logger.info("No exported component in %s", path)
        return FileResult(source=path, status=FileStatus.NO_COMPONENT)

    story = story_path_for(path, config.story_suffix)
    content = render_story(component, module_name=path.stem, title_prefix=config.title_prefix)
    result = FileResult(source=path, status=FileStatus.GENERATED, component=component, story=story, content=content)
    if not write:
        return result

    if story.exists() and not overwrite:
        logger.info("Keeping existing story %s", story)
        result.status = FileStatus.EXISTS
        return result

    try:
        story.write_text(content, encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot write %s: %s", story, exc)
        result.status = FileStatus.FAILED
        result.reason = f"cannot write story: {exc}"
        return result

    logger.debug("Wrote %s", story)
    return result
