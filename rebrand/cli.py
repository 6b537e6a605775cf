# rebrand/cli.py
"""
Command line interface for the Samsoft rebrand tool.

Usage:
    samsoft-rebrand                                   # Preview renames under .
    samsoft-rebrand --root DIR --apply                # Rename for real
    samsoft-rebrand --apply --rewrite-contents        # Also rewrite text files

Exit codes:
    0   success (or --help)
    1   a rename or rewrite failed; the run stops at that entry
    2   the text classification tool required by --classifier is missing
    3   --root is not a directory
    64  unknown argument or invalid option value
"""

import argparse
import sys
from typing import List, Optional, Sequence

from pydantic import ValidationError

from rebrand.exceptions import RebrandError, UsageError
from rebrand.grammar import DEFAULT_GRAMMAR, DEFAULT_TARGET
from rebrand.runner import RebrandingRun
from rebrand.settings import RebrandSettings
from utils.logging import get_logger, set_verbose

logger = get_logger(__name__)

EPILOG = """
What it catches (case-insensitive):
  - macOS/OS X tokens + optional codename + optional version
  - Standalone codenames: {codenames}
  - Versions when tied to OS tokens: 10.0-10.15, 11, 12, 13, 14, 15

Examples:
    # Preview changes (dry run)
    samsoft-rebrand --root ./project

    # Rename files and rewrite text contents, keeping .bak backups
    samsoft-rebrand --root ./project --apply --rewrite-contents
"""


class RebrandArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 64."""

    def error(self, message: str):
        self.print_usage(sys.stdout)
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = RebrandArgumentParser(
        prog="samsoft-rebrand",
        description="Rebrand Mac OS X / macOS codenames and version strings in a directory tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG.format(codenames=", ".join(DEFAULT_GRAMMAR.codename_labels())),
    )

    parser.add_argument(
        '--root',
        type=str,
        default='.',
        metavar='DIR',
        help='Directory to process (default: .)'
    )

    parser.add_argument(
        '--apply',
        action='store_true',
        default=False,
        help='Perform changes (default: dry-run preview)'
    )

    parser.add_argument(
        '--rewrite-contents',
        action='store_true',
        default=False,
        help='Also replace tokens inside text files (creates .bak)'
    )

    parser.add_argument(
        '--target',
        type=str,
        default=DEFAULT_TARGET,
        metavar='STRING',
        help=f'Replacement text (default: {DEFAULT_TARGET})'
    )

    parser.add_argument(
        '--classifier',
        choices=['auto', 'mime', 'heuristic'],
        default='auto',
        help="Text detection: 'file --mime', byte sniffing, or auto (default: auto)"
    )

    parser.add_argument(
        '--no-normalize-whitespace',
        dest='normalize_whitespace',
        action='store_false',
        default=True,
        help='Keep whitespace runs in rewritten file contents as they are'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        default=False,
        help='Print skipped items and extra info'
    )

    return parser


def parse_settings(argv: Optional[Sequence[str]] = None) -> RebrandSettings:
    """
    Parse command line arguments into validated settings.

    Raises:
        UsageError: unknown flag or a value the settings model rejects
    """
    args = build_parser().parse_args(argv)
    try:
        return RebrandSettings(
            root=args.root,
            apply=args.apply,
            rewrite_contents=args.rewrite_contents,
            target=args.target,
            verbose=args.verbose,
            classifier=args.classifier,
            normalize_whitespace=args.normalize_whitespace,
        )
    except ValidationError as e:
        messages: List[str] = [err["msg"] for err in e.errors()]
        raise UsageError("; ".join(messages)) from e


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the rebrand tool."""
    try:
        settings = parse_settings(argv)
        set_verbose(settings.verbose)
        RebrandingRun(settings).run()
    except RebrandError as e:
        print(f"ERROR: {e}")
        logger.debug(f"Exiting with code {e.exit_code}")
        return e.exit_code
    except OSError as e:
        # A failed rename or rewrite halts the run; earlier changes stay in place
        print(f"ERROR: {e}")
        logger.debug(f"Run halted by {type(e).__name__}")
        return RebrandError.exit_code
    return 0


if __name__ == '__main__':
    sys.exit(main())
