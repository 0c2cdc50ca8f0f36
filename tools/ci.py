#!/usr/bin/env python3
# Copyright 2026 TSXProps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the TSXProps CI checks locally: format, lint, type check, tests, example scan, and build."""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

REPO_ROOT = Path(__file__).resolve().parent.parent

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"],
    "lint": ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"],
    "typecheck": ["uv", "run", "ty", "check", "src/"],
    "tests": ["uv", "run", "pytest", "--cov=tsxprops", "--cov-report=term-missing"],
    "examples": ["uv", "run", "tsxprops", "check", "tests/data/components"],
    "build": ["uv", "build"],
}


def main() -> int:
    """Run the selected CI steps and print a coloured summary."""
    parser = argparse.ArgumentParser(description="Run TSXProps CI checks")
    parser.add_argument(
        "--skip",
        action="append",
        default=[],
        choices=sorted(STEPS),
        help="Step to skip (may be repeated)",
    )
    args = parser.parse_args()

    results: list[tuple[str, bool, float]] = []
    for name, cmd in STEPS.items():
        if name in args.skip:
            continue
        _print_banner(name.capitalize())
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=REPO_ROOT)
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _print_banner("Summary")
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _print_banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}\n{chalk.blue(title)}\n{sep}")


if __name__ == "__main__":
    sys.exit(main())
