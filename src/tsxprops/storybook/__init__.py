# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Storybook story generation for parsed components."""

from tsxprops.storybook.build import BuildError, BuildReport, FileResult, FileStatus, build_stories, inspect_file
from tsxprops.storybook.template import render_story, story_title

__all__ = [
    "render_story",
    "story_title",
    "build_stories",
    "inspect_file",
    "BuildError",
    "BuildReport",
    "FileResult",
    "FileStatus",
]
