# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the TSXProps configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".tsxprops.yaml"

DEFAULT_CONFIG_CONTENT = """\
# TSXProps configuration
# Stories are generated next to each component found under source-root.

source-root: src
title-prefix: Example
story-suffix: .stories.tsx
forward-references: false
exclude: []
"""


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class Config:
    """Settings for discovering components and generating stories.

    Attributes:
        source_root: Directory (relative to the config file) searched for components.
        title_prefix: Prefix of each story title, e.g. ``Example/Button``.
        story_suffix: Suffix replacing ``.tsx`` in generated story file names.
        forward_references: Allow type aliases declared below the component.
        exclude: Glob patterns (relative to source_root) of files to skip.
    """

    source_root: str = "src"
    title_prefix: str = "Example"
    story_suffix: str = ".stories.tsx"
    forward_references: bool = False
    exclude: list[str] = field(default_factory=list)


def load_config(path: Path) -> Config:
    """Load and parse a TSXProps configuration file.

    Args:
        path: Path to the `.tsxprops.yaml` file.

    Returns:
        A Config instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


def find_config(directory: Path) -> Config:
    """Load ``.tsxprops.yaml`` from *directory*, or return the defaults if absent."""
    path = directory / CONFIG_FILE_NAME
    if not path.exists():
        return Config()
    return load_config(path)


# ################
# Implementation
# ################


def _parse_config(text: str, source_label: str = "<string>") -> Config:
    """Parse configuration YAML text into a Config.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: configuration must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown configuration key(s): {', '.join(map(str, unknown))}")

    defaults = Config()
    config = Config(
        source_root=_optional_string(data, "source-root", defaults.source_root, source_label),
        title_prefix=_optional_string(data, "title-prefix", defaults.title_prefix, source_label),
        story_suffix=_optional_string(data, "story-suffix", defaults.story_suffix, source_label),
        forward_references=_optional_bool(data, "forward-references", defaults.forward_references, source_label),
        exclude=_optional_string_list(data, "exclude", source_label),
    )
    if not config.story_suffix.endswith(".tsx"):
        raise ConfigError(f"{source_label}: 'story-suffix' must end with '.tsx'")
    return config


_KNOWN_KEYS = frozenset({"source-root", "title-prefix", "story-suffix", "forward-references", "exclude"})


def _optional_string(mapping: dict[str, object], key: str, default: str, source_label: str) -> str:
    """Extract an optional non-empty string field, raising ConfigError on a wrong type."""
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{source_label}: '{key}' must be a non-empty string")
    return value


def _optional_bool(mapping: dict[str, object], key: str, default: bool, source_label: str) -> bool:
    """Extract an optional boolean field, raising ConfigError on a wrong type."""
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, bool):
        raise ConfigError(f"{source_label}: '{key}' must be true or false")
    return value


def _optional_string_list(mapping: dict[str, object], key: str, source_label: str) -> list[str]:
    """Extract an optional list of strings, raising ConfigError on a wrong type."""
    value = mapping.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{source_label}: '{key}' must be a list of strings")
    return list(value)
