# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the TSXProps command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from tsxprops.storybook.build import BuildError, FileStatus, build_stories, inspect_file
from tsxprops.workspace.config import (
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_CONTENT,
    Config,
    ConfigError,
    find_config,
    load_config,
)
from tsxprops.workspace.discovery import DiscoveryError, discover_component_files

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the TSXProps CLI."""
    parser = argparse.ArgumentParser(
        prog="tsxprops",
        description="TSXProps - generate Storybook stories from component props",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser and build details",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create a default configuration file",
        description=f"Write a default {CONFIG_FILE_NAME} into a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to write the configuration to (default: current directory)",
    )

    # inspect subcommand
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Show the component and props found in one file",
        description="Parse a single .tsx file and print its exported component.",
    )
    inspect_parser.add_argument("file", help="Path to a .tsx file")
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the component as JSON",
    )
    inspect_parser.add_argument(
        "--forward-references",
        action="store_true",
        help="Allow type aliases declared below the component",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Report files whose props cannot be parsed",
        description="Parse every component file under the source root and report failures.",
    )
    _add_source_arguments(check_parser)

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate story files for all components",
        description="Write a story file next to every component found under the source root.",
    )
    _add_source_arguments(generate_parser)
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the stories instead of writing them",
    )
    generate_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing story files",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_source_arguments(subparser: argparse.ArgumentParser) -> None:
    """Add the source root and --config arguments shared by check and generate."""
    subparser.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Directory to search for components (default: source-root from the configuration, or 'src')",
    )
    subparser.add_argument(
        "--config",
        default=None,
        help=f"Path to the configuration file (default: ./{CONFIG_FILE_NAME} if present)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "inspect":
        return _cmd_inspect(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "generate":
        return _cmd_generate(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    config_file.write_text(DEFAULT_CONFIG_CONTENT, encoding="utf-8")
    print(f"Created configuration at '{config_file}'.")
    return 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    """Handle the inspect subcommand."""
    path = Path(args.file)

    if not path.is_file():
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return 1

    try:
        component = inspect_file(path, forward_references=args.forward_references)
    except BuildError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if component is None:
        print(f"No exported component found in '{path}'.")
        return 0

    if args.json:
        print(component.model_dump_json(indent=2))
        return 0

    print(f"Component: {component.name}")
    print(f"Props:     {component.props_str()}")
    print(f"Type:      {component.expand_str()}")
    print(f"Sample:    {component.fill_sample()}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    loaded = _load_sources(args)
    if loaded is None:
        return 1
    config, files = loaded

    if not files:
        print("No component files found.")
        return 0

    print(f"Checking {len(files)} component file(s)...")
    has_errors = False
    found = 0
    for path in files:
        try:
            component = inspect_file(path, forward_references=config.forward_references)
        except BuildError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            has_errors = True
            continue
        if component is not None:
            found += 1
            print(f"  {path}: {component.name}")

    if has_errors:
        return 1

    print(f"No issues found ({found} component(s)).")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    loaded = _load_sources(args)
    if loaded is None:
        return 1
    config, files = loaded

    if not files:
        print("No component files found.")
        return 0

    report = build_stories(files, config, write=not args.dry_run, overwrite=args.force)

    for result in report.results:
        if result.status == FileStatus.FAILED:
            print(f"Error: {result.source}: {result.reason}", file=sys.stderr)
        elif args.dry_run and result.content is not None:
            print(f"\n{result.story}")
            print(result.content)
        elif result.status == FileStatus.GENERATED:
            print(f"  {result.story}: generated")
        elif result.status == FileStatus.EXISTS:
            print(f"  {result.story}: exists (use --force to overwrite)")

    generated = len(report.with_status(FileStatus.GENERATED))
    failed = len(report.with_status(FileStatus.FAILED))
    print(f"{generated} story file(s) {'rendered' if args.dry_run else 'generated'}, {failed} failure(s).")
    return 1 if report.has_failures else 0


def _load_sources(args: argparse.Namespace) -> tuple[Config, list[Path]] | None:
    """Load the configuration and discover component files, printing any error."""
    try:
        if args.config is not None:
            config_path = Path(args.config).resolve()
            config = load_config(config_path)
            base_dir = config_path.parent
        else:
            base_dir = Path.cwd()
            config = find_config(base_dir)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    root = Path(args.root).resolve() if args.root is not None else (base_dir / config.source_root).resolve()
    try:
        files = discover_component_files(root, story_suffix=config.story_suffix, exclude=config.exclude)
    except DiscoveryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
    return config, files
