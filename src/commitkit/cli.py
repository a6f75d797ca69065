# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""CLI entry point for commitkit.

Subcommands::

    commitkit parse      Parse raw commit messages into JSON records
    commitkit explain    Explain an error code

Usage::

    # Parse the last ten commits of the current repository:
    git log -10 --format=%B%n%n%n | commitkit parse --indent 2

    # Custom keywords, stop at the first bad record:
    commitkit parse --note-keywords "BREAKING CHANGE,DEPRECATED" --strict msgs.txt

    # Explain an error:
    commitkit explain CK-INPUT-EMPTY
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from rich_argparse import RichHelpFormatter

from commitkit import __version__
from commitkit.errors import E, CommitKitError, CommitKitWarning, explain, render_error, render_warning
from commitkit.logging import configure_logging, get_logger
from commitkit.options import ParseOptions, load_options, resolve_options
from commitkit.stream import DEFAULT_SEPARATOR, iter_raw_commits, parse_stream

logger = get_logger(__name__)


def _read_source(path: str) -> str:
    """Return the text of ``path`` (``-`` means stdin)."""
    name = '<stdin>' if path == '-' else path
    try:
        if path == '-':
            return sys.stdin.read()
        return Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise CommitKitError(
            code=E.INPUT_READ_FAILED,
            message=f'Failed to read {name}: {exc}',
            hint='Input must be UTF-8 text.' if isinstance(exc, UnicodeDecodeError) else '',
        ) from exc


def _read_inputs(paths: list[str]) -> str:
    """Concatenate the given files (``-`` or none means stdin)."""
    return ''.join(_read_source(path) for path in paths or ['-'])


def _options_from_args(args: argparse.Namespace) -> ParseOptions:
    base = load_options(Path(args.config))
    return resolve_options(
        base,
        header_pattern=args.header_pattern,
        header_correspondence=args.header_correspondence,
        note_keywords=args.note_keywords,
        reference_keywords=args.reference_keywords,
        issue_prefixes=args.issue_prefixes,
    )


def _cmd_parse(args: argparse.Namespace) -> int:
    """Handle the ``parse`` subcommand."""
    options = _options_from_args(args)
    text = _read_inputs(args.files)
    separator = args.separator.encode('utf-8').decode('unicode_escape')

    skipped = 0

    def _warn(message: str) -> None:
        nonlocal skipped
        skipped += 1
        render_warning(
            CommitKitWarning(
                code=E.INPUT_RECORD_SKIPPED,
                message=f'Skipped a record: {message}',
                hint='Use --strict to stop at the first record that fails.',
            ),
        )

    records = parse_stream(
        iter_raw_commits(text, separator),
        options,
        warn=_warn,
        strict=args.strict,
    )
    payload = [record.to_dict() for record in records]
    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))  # noqa: T201 - CLI output
    logger.info('parsed_commits', count=len(payload), skipped=skipped)
    return 0


def _cmd_explain(args: argparse.Namespace) -> int:
    """Handle the ``explain`` subcommand."""
    result = explain(args.code)
    if result is None:
        print(f'Unknown error code: {args.code}')  # noqa: T201 - CLI output
        return 1
    print(result)  # noqa: T201 - CLI output
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        Configured :class:`argparse.ArgumentParser`.
    """
    RichHelpFormatter.styles['argparse.groups'] = 'bold yellow'
    parser = argparse.ArgumentParser(
        prog='commitkit',
        description='Parse free-text commit messages into structured records.',
        formatter_class=RichHelpFormatter,
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging.')
    parser.add_argument('--quiet', '-q', action='store_true', help='Only log warnings and errors.')
    parser.add_argument('--json-log', action='store_true', help='Emit logs as JSON lines on stderr.')

    subparsers = parser.add_subparsers(dest='command')

    parse_parser = subparsers.add_parser(
        'parse',
        help='Parse raw commit messages into JSON records.',
        formatter_class=RichHelpFormatter,
    )
    parse_parser.add_argument(
        'files',
        nargs='*',
        metavar='FILE',
        help='Files holding raw commits. Reads stdin when none (or "-") is given.',
    )
    parse_parser.add_argument(
        '--config',
        metavar='DIR',
        default='.',
        help='Directory containing commitkit.toml (default: current directory).',
    )
    parse_parser.add_argument(
        '--separator',
        default=DEFAULT_SEPARATOR.encode('unicode_escape').decode('ascii'),
        help='Record separator; backslash escapes are honored (default: "\\n\\n\\n").',
    )
    parse_parser.add_argument('--header-pattern', help='Regex applied to the first line.')
    parse_parser.add_argument(
        '--header-correspondence',
        help='Comma-separated field names for the header capture groups.',
    )
    parse_parser.add_argument('--note-keywords', help='Comma-separated note titles.')
    parse_parser.add_argument('--reference-keywords', help='Comma-separated reference actions.')
    parse_parser.add_argument('--issue-prefixes', help='Comma-separated issue prefixes (default: "#,gh-").')
    parse_parser.add_argument(
        '--strict',
        action='store_true',
        help='Fail on the first record that cannot be parsed instead of skipping it.',
    )
    parse_parser.add_argument(
        '--indent',
        type=int,
        default=None,
        help='Indent the JSON output by this many spaces.',
    )

    explain_parser = subparsers.add_parser(
        'explain',
        help='Explain an error code.',
    )
    explain_parser.add_argument('code', help='Error code, e.g. CK-INPUT-EMPTY.')

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)

    try:
        if args.command == 'parse':
            return _cmd_parse(args)
        if args.command == 'explain':
            return _cmd_explain(args)

        parser.print_help()
        print(  # noqa: T201 - CLI output
            f'\n{parser.prog}: error: please provide a command',
            file=sys.stderr,
        )
        return 2

    except CommitKitError as exc:
        render_error(exc)
        return 1
    except KeyboardInterrupt:
        logger.info('interrupted')
        return 130


def _main() -> None:
    """Wrapper for pyproject.toml [project.scripts] entry point."""
    sys.exit(main())


__all__ = [
    'build_parser',
    'main',
]
