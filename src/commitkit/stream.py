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

"""Record-at-a-time parsing of a sequence of raw commits.

Failure policy::

    ┌──────────────┬──────────────────────────────────────────────────────┐
    │ Mode         │ A record that fails to parse...                      │
    ├──────────────┼──────────────────────────────────────────────────────┤
    │ default      │ is reported to ``warn(message)`` and skipped; the    │
    │              │ remaining records are still parsed.                  │
    ├──────────────┼──────────────────────────────────────────────────────┤
    │ strict=True  │ raises, which ends the iteration.                    │
    └──────────────┴──────────────────────────────────────────────────────┘

Records are parsed lazily and yielded in arrival order, one at a time.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from commitkit.errors import CommitKitError
from commitkit.logging import get_logger
from commitkit.options import ParseOptions
from commitkit.parsing import CommitRecord, compile_patterns, parse_commit

logger = get_logger(__name__)

# Separator between records in ``git log --format=%B%n%n%n`` style output.
DEFAULT_SEPARATOR = '\n\n\n'

WarnHandler = Callable[[str], None]


def _log_warning(message: str) -> None:
    logger.warning('commit_skipped', reason=message)


def iter_raw_commits(text: str, separator: str = DEFAULT_SEPARATOR) -> Iterator[str]:
    """Split a blob of text into raw commit records.

    Records that are empty or whitespace only are dropped.
    """
    for chunk in text.split(separator):
        if chunk.strip():
            yield chunk


def parse_stream(
    records: Iterable[str | bytes],
    options: ParseOptions | None = None,
    *,
    warn: WarnHandler | None = None,
    strict: bool = False,
) -> Iterator[CommitRecord]:
    """Parse each raw record and yield the results in order.

    Args:
        records: Raw commit messages; ``bytes`` are decoded as UTF-8, with
            invalid sequences replaced by U+FFFD.
        options: Parse options. Defaults to ``ParseOptions()``.
        warn: Called with the error message of each record that fails
            to parse. Defaults to logging a ``commit_skipped`` warning.
        strict: Raise the first failure instead of warning.

    Yields:
        One :class:`CommitRecord` per record that parsed.

    Raises:
        CommitKitError: In strict mode, for the first failing record.
    """
    options = options or ParseOptions()
    patterns = compile_patterns(options)
    warn = warn or _log_warning

    for index, record in enumerate(records):
        text = record.decode('utf-8', errors='replace') if isinstance(record, bytes) else record
        try:
            parsed = parse_commit(text, options, patterns)
        except CommitKitError as exc:
            if strict:
                logger.debug('commit_parse_failed', index=index, code=exc.code.value)
                raise
            warn(str(exc))
            continue
        yield parsed


__all__ = [
    'DEFAULT_SEPARATOR',
    'WarnHandler',
    'iter_raw_commits',
    'parse_stream',
]
