#!/usr/bin/env python3
"""Rewrite single-line logHeader calls, then list the ones left to do by hand."""

import subprocess
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "lib"))
from review_utils import create_review_parser


# Order matters: the review sees the file as the fix left it
STEPS = [
    ("Rewrite single-line calls", "fix_log_header_calls.py"),
    ("Remaining calls", "review_log_header_calls.py"),
]


def main():
    parser = create_review_parser("Add test_case_id to logHeader/logHeaderError calls.")
    args = parser.parse_args()

    script_dir = Path(__file__).parent
    forwarded = []
    if args.file:
        forwarded += ['--file', args.file]

    for name, script in STEPS:
        cmd = [sys.executable, str(script_dir / script)] + forwarded
        if args.dry_run and script.startswith("fix_"):
            cmd.append('--dry-run')
        print(f"[{name}]")
        try:
            subprocess.run(cmd, check=True)
            print()
        except subprocess.CalledProcessError:
            print(f"\nFAILED: {name}")
            return 1

    print("✓ logHeader update finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
