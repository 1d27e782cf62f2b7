#!/usr/bin/env python3
"""
TurkiCheck CLI
==============
Command-line interface for word classification.

Usage:
    turkicheck check қала расым
    turkicheck detect qala 123
    turkicheck process dictionaries/ --output output --policy keep_first
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console

from turkicheck import __version__

# =============================================================================
# Constants
# =============================================================================

DUPLICATE_POLICIES = ['overwrite', 'keep_first', 'reject']

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def json(self, data):
        # Plain stdout so the output stays machine-readable
        print(json.dumps(data, ensure_ascii=False, indent=2))

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_checker(args):
    """Build the checker once from .env / app.yaml."""
    from turkicheck import TurkiCheck, get_config

    env_path = Path(args.env) if getattr(args, 'env', None) else None
    return TurkiCheck(config=get_config(env_path))


# =============================================================================
# Commands
# =============================================================================

def cmd_check(args, out: Output):
    """Classify words."""
    tc = build_checker(args)

    rows = []
    for word in args.words:
        rows.append((word, tc.detect(word), tc.check(word)))

    if args.json:
        out.json({
            word: {'alphabet': alphabet.value, **verdict.to_dict()}
            for word, alphabet, verdict in rows
        })
    else:
        from turkicheck.ui import verdict_table
        out.print(verdict_table(rows))

    return 0 if all(verdict.valid for _, _, verdict in rows) else 1


def cmd_detect(args, out: Output):
    """Detect the alphabet of words."""
    from turkicheck.alphabet import detect_alphabet

    rows = [(word, detect_alphabet(word)) for word in args.words]

    if args.json:
        out.json({word: alphabet.value for word, alphabet in rows})
    else:
        from turkicheck.ui import alphabet_table
        out.print(alphabet_table(rows))
    return 0


def cmd_process(args, out: Output):
    """Classify dictionary files and write correct / incorrect results."""
    tc = build_checker(args)

    paths = [Path(p) for p in args.paths] or [Path.cwd()]
    missing = [p for p in paths if not p.exists()]
    if missing:
        out.error(f"Not found: {', '.join(str(p) for p in missing)}")
        return 1

    result = tc.process_files(paths, policy=args.policy)
    written = tc.write(result, Path(args.output) if args.output else None)

    if args.json:
        out.json({
            'correct': len(result.correct),
            'incorrect': len(result.incorrect),
            'duplicates': len(result.duplicates),
            'reasons': dict(result.reason_counts()),
            'files': [str(p) for p in written],
        })
    elif not out.quiet:
        from turkicheck.ui import print_summary
        print_summary(result, written, console=out.console)
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='turkicheck',
        description='TurkiCheck - Turkic word phonotactics checker',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s check қала расым
  %(prog)s check qala --json
  %(prog)s detect qala 123 qалa
  %(prog)s process dictionaries/ --output output
  %(prog)s process a.json b.json --policy keep_first
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    parser.add_argument('--env', help='Path to a .env file (default: ./.env)')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- check ---
    p = subparsers.add_parser('check', aliases=['c'], help='Classify words')
    p.add_argument('words', nargs='+', help='Words to classify')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- detect ---
    p = subparsers.add_parser('detect', aliases=['d'], help='Detect the alphabet of words')
    p.add_argument('words', nargs='+', help='Words to inspect')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- process ---
    p = subparsers.add_parser('process', aliases=['p'], help='Classify dictionary files')
    p.add_argument('paths', nargs='*', help='Dictionary files or directories (default: .)')
    p.add_argument('--output', '-o', help='Output directory (default from config)')
    p.add_argument('--policy', choices=DUPLICATE_POLICIES,
                   help='Handling of words repeated across dictionaries')
    p.add_argument('--json', '-j', action='store_true', help='Output summary as JSON')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    # Handle aliases
    cmd_map = {
        'c': 'check',
        'd': 'detect',
        'p': 'process',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'check': cmd_check,
        'detect': cmd_detect,
        'process': cmd_process,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
