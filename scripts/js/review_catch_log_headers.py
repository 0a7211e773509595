#!/usr/bin/env python3
"""
Review: logHeader calls in catch blocks that should be logHeaderError.

Walks a source tree and, for every `} catch (err)` line, looks at the
following lines for a logHeader(...) call that logs err.message. Those calls
lose the stack/line information logHeaderError records.

Checks:
1. Only files containing both "} catch" and "logHeader" are read in full
2. Look-ahead is at most CATCH_WINDOW lines and stops at the next catch or function
3. Files already using logHeaderError somewhere are marked partially updated
"""

import argparse
import re
import sys
from collections import namedtuple
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "lib"))
from review_utils import (
    DEFAULT_SOURCE_DIR,
    SourceFileError,
    find_js_files,
    get_repo_root,
    read_source,
)


CATCH_WINDOW = 10
CATCH_PATTERN = re.compile(r'\}\s*catch\s*\(\s*(\w+)\s*\)')
LOG_HEADER_CALL = re.compile(r'\blogHeader\(')

CatchLog = namedtuple('CatchLog', ['line', 'error_var', 'content', 'catch_line'])
FileReport = namedtuple('FileReport', ['path', 'partially_updated', 'calls'])


def has_catch_with_log_header(content):
    return '} catch' in content and 'logHeader' in content


def find_catch_log_headers(content):
    """
    Find logHeader calls logging a caught error's message.

    Returns:
        List of CatchLog(line, error_var, content, catch_line), 1-based lines
    """
    calls = []
    lines = content.split('\n')

    for i, line in enumerate(lines):
        if '} catch (' not in line:
            continue
        match = CATCH_PATTERN.search(line)
        if not match:
            continue
        error_var = match.group(1)

        for j in range(i + 1, min(i + CATCH_WINDOW, len(lines))):
            next_line = lines[j]
            if LOG_HEADER_CALL.search(next_line) and f"{error_var}.message" in next_line:
                calls.append(CatchLog(j + 1, error_var, next_line.strip(), i + 1))
            if '} catch' in next_line or 'function ' in next_line:
                break

    return calls


def review_directory(directory):
    """Return a FileReport for every file under directory with candidates."""
    reports = []

    for js_file in find_js_files(directory):
        try:
            content = read_source(js_file)
        except SourceFileError as e:
            print(f"Warning: {e}", file=sys.stderr)
            continue
        if not has_catch_with_log_header(content):
            continue
        calls = find_catch_log_headers(content)
        if calls:
            reports.append(FileReport(js_file, 'logHeaderError' in content, calls))

    return reports


def print_report(reports, base_dir=None):
    print(f"Found {len(reports)} files that need updating:\n")

    for report in reports:
        path = report.path
        if base_dir is not None:
            try:
                path = report.path.relative_to(base_dir)
            except ValueError:
                pass
        status = "~ (partially updated)" if report.partially_updated else "✗ (pending)"
        print(f"{status} {path}")
        print(f"   Calls found: {len(report.calls)}")
        for call in report.calls:
            print(f"     Line {call.line}: {call.content[:80]}...")
        print()

    total_calls = sum(len(r.calls) for r in reports)
    partial = sum(1 for r in reports if r.partially_updated)
    print("Summary:")
    print(f"   Total files: {len(reports)}")
    print(f"   Total calls: {total_calls}")
    print(f"   Partially updated: {partial}")
    print(f"   Pending: {len(reports) - partial}")


def main():
    parser = argparse.ArgumentParser(
        description="Find logHeader calls in catch blocks that should use logHeaderError."
    )
    parser.add_argument(
        '--dir',
        type=str,
        help=f'Directory to search (default: <repo root>/{DEFAULT_SOURCE_DIR.as_posix()})'
    )
    args = parser.parse_args()

    try:
        directory = Path(args.dir) if args.dir else get_repo_root() / DEFAULT_SOURCE_DIR
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not directory.is_dir():
        print(f"Error: Directory not found: {directory}", file=sys.stderr)
        return 1

    print("Searching JavaScript files for catch blocks using logHeader...\n")
    print_report(review_directory(directory), base_dir=directory)
    return 0


if __name__ == "__main__":
    sys.exit(main())
