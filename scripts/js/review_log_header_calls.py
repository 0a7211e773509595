#!/usr/bin/env python3
"""
Review: logHeader/logHeaderError calls still missing test_case_id.

Lists every line that starts a call to either function and does not mention
test_case_id. It does not try to find where the call ends, so calls whose
arguments span several lines are reported by their first line. Nothing is
rewritten.
"""

import sys
from collections import namedtuple
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "lib"))
from review_utils import (
    INJECTED_ARG,
    TRACKED_FUNCTIONS,
    ReviewContext,
    SourceFileError,
    create_review_parser,
    read_source,
    report_simple,
)


CallSite = namedtuple('CallSite', ['line', 'content', 'kind'])


def find_unmatched_calls(content):
    """
    Find call sites missing the injected argument.

    Returns:
        List of CallSite(line, content, kind) in file order; line is 1-based,
        content is the stripped line, kind is the function name.
    """
    calls = []

    for line_num, line in enumerate(content.split('\n'), 1):
        stripped = line.strip()
        if INJECTED_ARG in line:
            continue
        for name in TRACKED_FUNCTIONS:
            if stripped.startswith(f"{name}("):
                calls.append(CallSite(line_num, stripped, name))

    return calls


def review_file(file_path):
    """Read file_path and return its unmatched call sites."""
    return find_unmatched_calls(read_source(file_path))


def print_report(calls):
    report_simple(not calls, f"{INJECTED_ARG} on logHeader calls", len(calls))
    if not calls:
        return

    print(f"\nFound {len(calls)} calls that need updating:\n")
    for call in calls:
        print(f"{call.line}: {call.content}")

    print(f'\nThese calls need ", {INJECTED_ARG}" added as the last parameter.')
    print("Most of them span several lines and have to be updated manually.")


def main():
    parser = create_review_parser(
        f"List logHeader/logHeaderError calls that do not pass {INJECTED_ARG}."
    )
    args = parser.parse_args()
    context = ReviewContext(args)

    try:
        target = context.target_file()
        calls = review_file(target)
    except (SourceFileError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if context.dry_run:
        print(f"Would check {context.relative_path(target)} for: {', '.join(TRACKED_FUNCTIONS)}")
        return 0

    print(f"Reviewing {context.relative_path(target)}\n")
    print_report(calls)
    return 0


if __name__ == "__main__":
    sys.exit(main())
