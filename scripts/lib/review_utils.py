#!/usr/bin/env python3
"""
Common utilities for the log-header review and fix scripts.

Provides standardized argument parsing, file discovery, source reading and
atomic writing, and reporting.
"""

import argparse
import os
import sys
import tempfile
from pathlib import Path
from typing import List, Optional


INJECTED_ARG = "test_case_id"
TRACKED_FUNCTIONS = ("logHeader", "logHeaderError")

# Relative to the repository root
DEFAULT_TARGET = Path("src") / "runner" / "clusterTask.js"
DEFAULT_SOURCE_DIR = Path("src")


class SourceFileError(Exception):
    """Base class for failures reading or writing a target file."""


class ReadError(SourceFileError):
    """Target file is missing or unreadable."""


class WriteError(SourceFileError):
    """Rewritten content could not be persisted."""


def get_repo_root(start: Optional[Path] = None) -> Path:
    """Get the repository root from any script location."""
    # Scripts are in scripts/*, scripts/*/*; the root is where package.json is
    current = (start or Path(__file__)).resolve()
    if current.is_file():
        current = current.parent
    while current != current.parent:
        if (current / "package.json").exists():
            return current
        current = current.parent
    raise RuntimeError("Could not find repository root (package.json)")


def create_review_parser(description: str) -> argparse.ArgumentParser:
    """
    Create standardized argument parser for review and fix scripts.

    Args:
        description: Description of what the script checks or fixes

    Returns:
        ArgumentParser with --file and --dry-run options
    """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        '--file',
        type=str,
        help=f'Target file (default: <repo root>/{DEFAULT_TARGET.as_posix()})'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Report what would change without writing anything'
    )
    return parser


def read_source(file_path: Path) -> str:
    """Read a whole source file, raising ReadError if it cannot be read."""
    file_path = Path(file_path)
    if not file_path.is_file():
        raise ReadError(f"File not found: {file_path}")
    try:
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(f"Cannot read {file_path}: {e}") from e


def write_source_atomic(file_path: Path, content: str) -> None:
    """
    Replace file_path with content in a single step.

    The content goes to a temporary file in the same directory which is then
    renamed over the target, so a failure never leaves a truncated file.

    Raises:
        WriteError: if the temporary file cannot be written or renamed
    """
    file_path = Path(file_path)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{file_path.name}.",
            suffix=".tmp",
            dir=file_path.parent
        )
        with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
        if file_path.exists():
            os.chmod(tmp_name, file_path.stat().st_mode & 0o7777)
        os.replace(tmp_name, file_path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteError(f"Cannot write {file_path}: {e}") from e


def find_js_files(directory: Path) -> List[Path]:
    """
    Find JavaScript files under directory, recursively.

    Unreadable subdirectories are skipped with a warning.
    """
    js_files = []

    def on_error(error):
        print(f"Warning: Cannot read directory {error.filename}: {error.strerror}",
              file=sys.stderr)

    for root, dirs, files in os.walk(directory, onerror=on_error):
        dirs.sort()
        for name in files:
            if name.endswith('.js'):
                js_files.append(Path(root) / name)

    return sorted(js_files)


def report_simple(
    passed: bool,
    rule_name: str,
    violation_count: int = 0
) -> None:
    """Simple pass/fail line."""
    if passed:
        print(f"✓ {rule_name}: PASS")
    else:
        print(f"✗ {rule_name}: {violation_count} call(s) to update")


class ReviewContext:
    """Context object for review and fix operations."""

    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.dry_run = args.dry_run
        self.single_file = args.file
        self._repo_root = None

    @property
    def repo_root(self) -> Path:
        if self._repo_root is None:
            self._repo_root = get_repo_root()
        return self._repo_root

    def target_file(self) -> Path:
        """The file to operate on: --file if given, else the default target."""
        if self.single_file:
            return Path(self.single_file)
        return self.repo_root / DEFAULT_TARGET

    def relative_path(self, file_path: Path) -> Path:
        """Get relative path from repo root, or the path itself outside it."""
        file_path = Path(file_path)
        try:
            return file_path.resolve().relative_to(self.repo_root)
        except (ValueError, RuntimeError):
            return file_path
