#!/usr/bin/env python3
"""
Fix: append test_case_id to single-line logHeader/logHeaderError calls.

Applies an ordered list of regex rules to the whole file. Each rule covers one
known call shape on a single line; calls split across lines are left alone
and show up in review_log_header_calls.py instead.

Running it twice is safe: rewritten calls carry test_case_id and no rule
matches a call that already has it.
"""

import re
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "lib"))
from review_utils import (
    INJECTED_ARG,
    ReviewContext,
    SourceFileError,
    create_review_parser,
    read_source,
    write_source_atomic,
)


# Back-tick template, single- or double-quoted string, on one line
STRING_LITERAL = r"(?:`[^`\n]*`|'[^'\n]*'|\"[^\"\n]*\")"
IDENTIFIER = r"[A-Za-z_$][\w$]*"
NOT_INJECTED = rf"(?!{INJECTED_ARG}\b)"

# (description, pattern, replacement), applied in this order
REWRITE_RULES = [
    (
        "logHeader({}, <string>)",
        re.compile(rf"\blogHeader\(\{{\}}, ({STRING_LITERAL})\);"),
        rf"logHeader({{}}, \1, {INJECTED_ARG});",
    ),
    (
        "logHeader(<identifier>, <string>)",
        re.compile(rf"\blogHeader\({NOT_INJECTED}({IDENTIFIER}), ({STRING_LITERAL})\);"),
        rf"logHeader(\1, \2, {INJECTED_ARG});",
    ),
    (
        "logHeaderError({}, <string>, <expr>)",
        re.compile(
            rf"\blogHeaderError\([ \t]*\{{\}}[ \t]*,[ \t]*({STRING_LITERAL})[ \t]*,[ \t]*"
            rf"(?![^,)\n]*\b{INJECTED_ARG}\b)([^,)\n]+?)[ \t]*\);"
        ),
        rf"logHeaderError({{}}, \1, \2, {INJECTED_ARG});",
    ),
]


def apply_rules(content, rules=REWRITE_RULES):
    """
    Apply rules to content in order.

    Each rule sees the buffer as left by the rules before it.

    Returns:
        (new_content, counts) where counts[i] is the number of
        replacements made by rules[i]
    """
    counts = []
    for _description, pattern, replacement in rules:
        content, count = pattern.subn(replacement, content)
        counts.append(count)
    return content, counts


def fix_file(file_path, dry_run=False, rules=REWRITE_RULES):
    """
    Rewrite matching calls in file_path.

    The file is read once and, unless dry_run or nothing matched, written
    back once, atomically.

    Returns:
        List of per-rule replacement counts
    """
    content = read_source(file_path)
    new_content, counts = apply_rules(content, rules)

    if not dry_run and new_content != content:
        write_source_atomic(file_path, new_content)

    return counts


def print_report(counts, rules=REWRITE_RULES, dry_run=False):
    verb = "would be made" if dry_run else "made"
    for index, ((description, _pattern, _replacement), count) in enumerate(zip(rules, counts), 1):
        print(f"Pattern {index}: {count} replacements  {description}")

    total = sum(counts)
    print(f"\n{'='*80}")
    print(f"✓ {total} total replacements {verb}")
    print("Note: multiline calls are not rewritten; run review_log_header_calls.py to list them")


def main():
    parser = create_review_parser(
        f"Append {INJECTED_ARG} to single-line logHeader/logHeaderError calls."
    )
    args = parser.parse_args()
    context = ReviewContext(args)

    try:
        target = context.target_file()
        counts = fix_file(target, dry_run=context.dry_run)
    except (SourceFileError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Rewriting {context.relative_path(target)}\n")
    print_report(counts, dry_run=context.dry_run)
    return 0


if __name__ == "__main__":
    sys.exit(main())
