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

"""Parse options for commitkit.

:class:`ParseOptions` is the immutable bundle of patterns and keywords that
drives the parser. It can be built in code, normalized from loose values
with :func:`resolve_options`, or read from ``commitkit.toml`` with
:func:`load_options`.

Validation Pipeline::

    commitkit.toml / CLI flags / kwargs
    ┌──────────────────────────┐
    │ note_keyword = "..."     │  ← typo!
    └────────────┬─────────────┘
                 │
                 ▼
    ┌──────────────────────────┐     ┌──────────────────────────────┐
    │ 1. Unknown key detection │────→│ CK-CONFIG-INVALID-KEY:       │
    └────────────┬─────────────┘     │ hint: "Did you mean          │
                 │                   │       'note_keywords'?"      │
                 ▼                   └──────────────────────────────┘
    ┌──────────────────────────┐     ┌──────────────────────────────┐
    │ 2. Normalize lists       │────→│ CK-CONFIG-INVALID-VALUE:     │
    │    ("a, b" → ('a', 'b')) │     │ expected list or str         │
    └────────────┬─────────────┘     └──────────────────────────────┘
                 │
                 ▼
    ┌──────────────────────────┐     ┌──────────────────────────────┐
    │ 3. Compile header regex  │────→│ CK-CONFIG-INVALID-VALUE:     │
    └────────────┬─────────────┘     │ not a valid regex            │
                 │                   └──────────────────────────────┘
                 ▼
    ┌──────────────────────────┐
    │ ParseOptions()           │  ← frozen dataclass, ready to use
    └──────────────────────────┘

Supported keys in ``commitkit.toml``::

    header_pattern        = '^(\\w*)(?:\\(([\\w\\$\\.\\-\\* ]*)\\))?\\: (.*)$'
    header_correspondence = ["type", "scope", "subject"]   # or "type,scope,subject"
    note_keywords         = ["BREAKING CHANGE"]
    reference_keywords    = ["closes", "fixes", "resolves"]
    issue_prefixes        = ["#", "gh-"]
"""

from __future__ import annotations

import difflib
import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import tomlkit
import tomlkit.exceptions

from commitkit.errors import E, CommitKitError
from commitkit.logging import get_logger

logger = get_logger(__name__)

# The config file name at the project root.
CONFIG_FILENAME = 'commitkit.toml'

DEFAULT_HEADER_PATTERN: re.Pattern[str] = re.compile(r'^(\w*)(?:\(([\w\$\.\-\* ]*)\))?\: (.*)$')
DEFAULT_HEADER_CORRESPONDENCE: tuple[str, ...] = ('type', 'scope', 'subject')
DEFAULT_NOTE_KEYWORDS: tuple[str, ...] = ('BREAKING CHANGE',)
DEFAULT_REFERENCE_KEYWORDS: tuple[str, ...] = (
    'close',
    'closes',
    'closed',
    'fix',
    'fixes',
    'fixed',
    'resolve',
    'resolves',
    'resolved',
)
DEFAULT_ISSUE_PREFIXES: tuple[str, ...] = ('#', 'gh-')

_LIST_KEYS: tuple[str, ...] = (
    'header_correspondence',
    'note_keywords',
    'reference_keywords',
    'issue_prefixes',
)

# All recognized keys, in commitkit.toml and as resolve_options() kwargs.
VALID_KEYS: frozenset[str] = frozenset({'header_pattern', *_LIST_KEYS})


@dataclass(frozen=True)
class ParseOptions:
    """Validated, immutable options for parsing commit messages.

    Attributes:
        header_pattern: Regex applied to the first line. Its capture
            groups are assigned to ``header_correspondence`` in order.
        header_correspondence: Field names for the header capture groups.
            May be longer or shorter than the number of groups.
        note_keywords: Titles that open a note (``"BREAKING CHANGE"``).
        reference_keywords: Action verbs that open a reference sentence.
        issue_prefixes: Markers that introduce an issue number.
    """

    header_pattern: re.Pattern[str] = DEFAULT_HEADER_PATTERN
    header_correspondence: tuple[str, ...] = DEFAULT_HEADER_CORRESPONDENCE
    note_keywords: tuple[str, ...] = DEFAULT_NOTE_KEYWORDS
    reference_keywords: tuple[str, ...] = DEFAULT_REFERENCE_KEYWORDS
    issue_prefixes: tuple[str, ...] = DEFAULT_ISSUE_PREFIXES


def split_list(value: Any, *, key: str) -> tuple[str, ...]:  # noqa: ANN401 - loose config input
    """Normalize a list option to a tuple of trimmed, non-empty strings.

    Accepts a comma-separated string (``"fix, closes"``) or any iterable
    of strings.

    Raises:
        CommitKitError: If the value is neither, or holds non-strings.
    """
    if isinstance(value, str):
        items: Iterable[Any] = value.split(',')
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        raise CommitKitError(
            code=E.CONFIG_INVALID_VALUE,
            message=f"'{key}' must be a list or a comma-separated string, got {type(value).__name__}",
            hint=f'Example: {key} = ["a", "b"] or {key} = "a,b"',
        )
    result: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise CommitKitError(
                code=E.CONFIG_INVALID_VALUE,
                message=f"'{key}' entries must be strings, got {type(item).__name__}",
            )
        stripped = item.strip()
        if stripped:
            result.append(stripped)
    return tuple(result)


def compile_header_pattern(value: Any) -> re.Pattern[str]:  # noqa: ANN401 - loose config input
    """Return ``value`` as a compiled regex.

    Raises:
        CommitKitError: If ``value`` is not a pattern or does not compile.
    """
    if isinstance(value, re.Pattern):
        return value
    if not isinstance(value, str):
        raise CommitKitError(
            code=E.CONFIG_INVALID_VALUE,
            message=f"'header_pattern' must be str, got {type(value).__name__}",
        )
    try:
        return re.compile(value)
    except re.error as exc:
        raise CommitKitError(
            code=E.CONFIG_INVALID_VALUE,
            message=f"'header_pattern' is not a valid regular expression: {exc}",
            hint='Use one capture group per name in header_correspondence.',
        ) from exc


def _check_keys(keys: Iterable[str], *, context: str) -> None:
    for key in keys:
        if key in VALID_KEYS:
            continue
        suggestion = difflib.get_close_matches(key, VALID_KEYS, n=1, cutoff=0.6)
        hint = f"Did you mean '{suggestion[0]}'?" if suggestion else f'Valid keys: {", ".join(sorted(VALID_KEYS))}.'
        raise CommitKitError(
            code=E.CONFIG_INVALID_KEY,
            message=f"Unknown key '{key}' in {context}",
            hint=hint,
        )


def resolve_options(base: ParseOptions | None = None, **overrides: Any) -> ParseOptions:  # noqa: ANN401
    """Build :class:`ParseOptions` from loose values.

    Values of ``None`` are ignored, so CLI flags that were not given
    fall through to ``base`` (or the defaults).

    Args:
        base: Options to start from. Defaults to ``ParseOptions()``.
        **overrides: Any of :data:`VALID_KEYS`. List options accept a list
            or a comma-separated string; ``header_pattern`` accepts a
            string or a compiled pattern.

    Returns:
        A new :class:`ParseOptions`.

    Raises:
        CommitKitError: On unknown keys or invalid values.
    """
    given = {key: value for key, value in overrides.items() if value is not None}
    _check_keys(given, context='parse options')

    changes: dict[str, Any] = {}
    if 'header_pattern' in given:
        changes['header_pattern'] = compile_header_pattern(given['header_pattern'])
    for key in _LIST_KEYS:
        if key in given:
            changes[key] = split_list(given[key], key=key)
    return replace(base or ParseOptions(), **changes)


def load_options(project_root: Path) -> ParseOptions:
    """Load and validate parse options from ``commitkit.toml``.

    Args:
        project_root: Directory containing ``commitkit.toml``.

    Returns:
        Validated :class:`ParseOptions`. The defaults if the file is
        missing or empty.

    Raises:
        CommitKitError: If the file cannot be read or holds invalid config.
    """
    config_path = project_root / CONFIG_FILENAME

    if not config_path.is_file():
        logger.debug('no_commitkit_config', path=str(config_path))
        return ParseOptions()

    try:
        text = config_path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise CommitKitError(
            code=E.CONFIG_NOT_FOUND,
            message=f'Failed to read {config_path}: {exc}',
        ) from exc

    try:
        doc = tomlkit.parse(text)
    except tomlkit.exceptions.TOMLKitError as exc:
        raise CommitKitError(
            code=E.CONFIG_PARSE_FAILED,
            message=f'Failed to parse {config_path}: {exc}',
        ) from exc

    raw: dict[str, Any] = doc.unwrap()
    _check_keys(raw, context=CONFIG_FILENAME)
    options = resolve_options(**raw)
    logger.debug('commitkit_config_loaded', path=str(config_path), keys=sorted(raw))
    return options


__all__ = [
    'CONFIG_FILENAME',
    'DEFAULT_HEADER_CORRESPONDENCE',
    'DEFAULT_HEADER_PATTERN',
    'DEFAULT_ISSUE_PREFIXES',
    'DEFAULT_NOTE_KEYWORDS',
    'DEFAULT_REFERENCE_KEYWORDS',
    'VALID_KEYS',
    'ParseOptions',
    'compile_header_pattern',
    'load_options',
    'resolve_options',
    'split_list',
]
