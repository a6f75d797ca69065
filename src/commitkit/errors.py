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

"""Structured error system for commitkit.

Every error has a unique ``CK-NAMED-KEY`` code, a human-readable message,
and an optional hint with a suggested fix.

Key Concepts (ELI5)::

    ┌─────────────────────────────┬────────────────────────────────────────┐
    │ Concept                     │ ELI5 Explanation                       │
    ├─────────────────────────────┼────────────────────────────────────────┤
    │ ErrorCode                   │ A unique named ID like                 │
    │                             │ "CK-INPUT-EMPTY" for each error.       │
    ├─────────────────────────────┼────────────────────────────────────────┤
    │ ErrorInfo                   │ A bundle of code + message + hint.     │
    ├─────────────────────────────┼────────────────────────────────────────┤
    │ CommitKitError              │ An exception you can raise. Carries    │
    │                             │ the error card so renderers can show   │
    │                             │ it.                                    │
    ├─────────────────────────────┼────────────────────────────────────────┤
    │ EmptyInputError             │ The commit text was empty or only      │
    │                             │ whitespace. Nothing to parse.          │
    ├─────────────────────────────┼────────────────────────────────────────┤
    │ MissingConfigurationError   │ The parser was called without any      │
    │                             │ options. It needs patterns to work.    │
    └─────────────────────────────┴────────────────────────────────────────┘

Code categories::

    CK-INPUT-*        Raw commit input errors
    CK-CONFIG-*       Parse option / config file errors

Pattern mismatches (a header that does not match, a message without notes
or references) are not errors. They show up as ``None`` fields and empty
lists on the parsed record.

Usage::

    from commitkit.errors import CommitKitError, E

    raise CommitKitError(
        code=E.CONFIG_INVALID_VALUE,
        message="'header_pattern' is not a valid regular expression",
        hint='Check the escaping of parentheses in commitkit.toml.',
    )
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from rich.console import Console
from rich.markup import escape as rich_escape


class ErrorCode(str, Enum):
    """Enumeration of all commitkit diagnostic codes."""

    # Input
    INPUT_EMPTY = 'CK-INPUT-EMPTY'
    INPUT_READ_FAILED = 'CK-INPUT-READ-FAILED'
    INPUT_RECORD_SKIPPED = 'CK-INPUT-RECORD-SKIPPED'

    # Configuration
    CONFIG_MISSING = 'CK-CONFIG-MISSING'
    CONFIG_NOT_FOUND = 'CK-CONFIG-NOT-FOUND'
    CONFIG_PARSE_FAILED = 'CK-CONFIG-PARSE-FAILED'
    CONFIG_INVALID_KEY = 'CK-CONFIG-INVALID-KEY'
    CONFIG_INVALID_VALUE = 'CK-CONFIG-INVALID-VALUE'


# Convenience alias for shorter imports.
E = ErrorCode


@dataclass(frozen=True)
class ErrorInfo:
    """Metadata for a single error code.

    Attributes:
        code: The ``CK-NAMED-KEY`` error code.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    code: ErrorCode
    message: str
    hint: str = ''


class CommitKitError(Exception):
    """Base exception for all commitkit errors.

    Args:
        code: The error code from :class:`ErrorCode`.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    def __init__(self, code: ErrorCode, message: str, hint: str = '') -> None:
        """Initialize with an error code, message, and optional hint."""
        self.info = ErrorInfo(code=code, message=message, hint=hint)
        super().__init__(f'[{code.value}] {message}')

    @property
    def code(self) -> ErrorCode:
        """The error code."""
        return self.info.code

    @property
    def hint(self) -> str:
        """Suggestion for fixing this error, or empty string."""
        return self.info.hint


class EmptyInputError(CommitKitError):
    """Raised when the raw commit text is empty or whitespace only."""

    def __init__(self, message: str = 'Expected a raw commit', hint: str = '') -> None:
        """Initialize with the fixed ``CK-INPUT-EMPTY`` code."""
        super().__init__(code=E.INPUT_EMPTY, message=message, hint=hint)


class MissingConfigurationError(CommitKitError):
    """Raised when the parser is called without parse options."""

    def __init__(self, message: str = 'Expected options', hint: str = '') -> None:
        """Initialize with the fixed ``CK-CONFIG-MISSING`` code."""
        super().__init__(code=E.CONFIG_MISSING, message=message, hint=hint)


class CommitKitWarning(UserWarning):
    """Base warning for all commitkit warnings.

    Same structure as :class:`CommitKitError` but reported instead of
    raised, e.g. when a single record of a stream fails to parse.

    Args:
        code: The error code from :class:`ErrorCode`.
        message: Human-readable description of the warning.
        hint: Optional suggestion for how to address the warning.
    """

    def __init__(self, code: ErrorCode, message: str, hint: str = '') -> None:
        """Initialize with an error code, message, and optional hint."""
        self.info = ErrorInfo(code=code, message=message, hint=hint)
        super().__init__(f'[{code.value}] {message}')

    @property
    def code(self) -> ErrorCode:
        """The error code."""
        return self.info.code

    @property
    def hint(self) -> str:
        """Suggestion for addressing this warning, or empty string."""
        return self.info.hint


ERRORS: dict[ErrorCode, ErrorInfo] = {
    E.INPUT_EMPTY: ErrorInfo(
        code=E.INPUT_EMPTY,
        message='The raw commit message is empty or contains only whitespace.',
        hint='Check the record separator; consecutive separators produce empty records.',
    ),
    E.INPUT_READ_FAILED: ErrorInfo(
        code=E.INPUT_READ_FAILED,
        message='An input file or stdin could not be read as UTF-8 text.',
        hint='Check the path exists and is readable, and that the file is UTF-8 encoded.',
    ),
    E.INPUT_RECORD_SKIPPED: ErrorInfo(
        code=E.INPUT_RECORD_SKIPPED,
        message='A record in the input failed to parse and was left out of the output.',
        hint='Use --strict to stop at the first record that fails.',
    ),
    E.CONFIG_MISSING: ErrorInfo(
        code=E.CONFIG_MISSING,
        message='The parser was called without parse options.',
        hint='Pass ParseOptions() or call resolve_options() to get the defaults.',
    ),
    E.CONFIG_NOT_FOUND: ErrorInfo(
        code=E.CONFIG_NOT_FOUND,
        message='commitkit.toml exists but could not be read.',
        hint='Check the file permissions and that it is UTF-8 encoded.',
    ),
    E.CONFIG_PARSE_FAILED: ErrorInfo(
        code=E.CONFIG_PARSE_FAILED,
        message='commitkit.toml is not valid TOML.',
        hint='Fix the syntax error at the reported line and column.',
    ),
    E.CONFIG_INVALID_KEY: ErrorInfo(
        code=E.CONFIG_INVALID_KEY,
        message='commitkit.toml contains a key commitkit does not recognize.',
        hint='Valid keys: header_pattern, header_correspondence, note_keywords, '
        'reference_keywords, issue_prefixes.',
    ),
    E.CONFIG_INVALID_VALUE: ErrorInfo(
        code=E.CONFIG_INVALID_VALUE,
        message='A parse option has the wrong type or is not a valid pattern.',
        hint='List options accept a list of strings or a comma-separated string.',
    ),
}


def explain(code: str) -> str | None:
    """Return a detailed explanation for an error code.

    Args:
        code: The error code string, e.g. ``"CK-INPUT-EMPTY"``.

    Returns:
        A formatted explanation string, or ``None`` if the code is unknown.
    """
    try:
        error_code = ErrorCode(code)
    except ValueError:
        return None

    info = ERRORS.get(error_code)
    if info is None:
        return f'{code}: No detailed explanation available.'

    lines = [f'{code}: {info.message}']
    if info.hint:
        lines.append(f'  Hint: {info.hint}')
    return '\n'.join(lines)


def _render(kind: str, color: str, code: ErrorCode, message: str, hint: str, out: TextIO) -> None:
    if out.isatty():
        console = Console(file=out, highlight=False)
        console.print(
            f'[bold {color}]{kind}[/bold {color}][bold {color}]\\[{code.value}][/bold {color}]'
            f'[bold]: {rich_escape(message)}[/bold]',
        )
        if hint:
            console.print('  [dim]|[/dim]')
            console.print(f'  [dim]=[/dim] [cyan]hint[/cyan]: {rich_escape(hint)}')
        console.print()
    else:
        print(f'{kind}[{code.value}]: {message}', file=out)  # noqa: T201 - CLI output
        if hint:
            print('  |', file=out)  # noqa: T201 - CLI output
            print(f'  = hint: {hint}', file=out)  # noqa: T201 - CLI output
        print(file=out)  # noqa: T201 - CLI output


def render_error(exc: CommitKitError, *, file: TextIO | None = None) -> None:
    """Render an error in Rust-compiler style with color.

    Output format::

        error[CK-INPUT-EMPTY]: Expected a raw commit
          |
          = hint: Check the record separator.

    Args:
        exc: The error to render.
        file: Output stream (defaults to ``sys.stderr``).
    """
    _render('error', 'red', exc.code, exc.info.message, exc.hint, file or sys.stderr)


def render_warning(exc: CommitKitWarning, *, file: TextIO | None = None) -> None:
    """Render a warning in Rust-compiler style with color.

    Args:
        exc: The warning to render.
        file: Output stream (defaults to ``sys.stderr``).
    """
    _render('warning', 'yellow', exc.code, exc.info.message, exc.hint, file or sys.stderr)


__all__ = [
    'E',
    'ERRORS',
    'CommitKitError',
    'CommitKitWarning',
    'EmptyInputError',
    'ErrorCode',
    'ErrorInfo',
    'MissingConfigurationError',
    'explain',
    'render_error',
    'render_warning',
]
