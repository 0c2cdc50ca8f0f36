# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration and discovery of component files."""

from tsxprops.workspace.config import (
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_CONTENT,
    Config,
    ConfigError,
    find_config,
    load_config,
)
from tsxprops.workspace.discovery import DiscoveryError, discover_component_files, story_path_for

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_CONFIG_CONTENT",
    "Config",
    "ConfigError",
    "find_config",
    "load_config",
    "DiscoveryError",
    "discover_component_files",
    "story_path_for",
]
