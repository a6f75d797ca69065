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

"""Builds the note and reference matchers from parse options.

Keywords are matched literally (``re.escape``), so a keyword such as
``"gh-"`` or ``"fix(es)"`` never changes the pattern's structure.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from commitkit.options import ParseOptions
from commitkit.parsing._types import CompiledPatterns

# Never matches anything; used when a keyword list is empty.
NO_MATCH: re.Pattern[str] = re.compile(r'(?!.*)')


def _alternation(keywords: Iterable[str]) -> str:
    """Join trimmed, non-empty keywords into an escaped ``a|b|c`` group body."""
    return '|'.join(re.escape(kw.strip()) for kw in keywords if kw.strip())


def notes_pattern(note_keywords: Iterable[str]) -> re.Pattern[str]:
    """Return a matcher for a line that opens a note.

    Matches ``KEYWORD: text``, ``KEYWORD text`` and a bare ``KEYWORD``,
    optionally preceded by whitespace or list bullets (``*``). Group 1 is
    the keyword, group 2 the (possibly empty) trailing text. The keyword
    must be followed by a colon, whitespace or the end of the line, so
    ``BREAKING CHANGES`` does not open a ``BREAKING CHANGE`` note.
    """
    joined = _alternation(note_keywords)
    if not joined:
        return NO_MATCH
    return re.compile(rf'^[\s*]*({joined})(?:[:\s]+|$)(.*)')


def references_pattern(reference_keywords: Iterable[str]) -> re.Pattern[str]:
    """Return a matcher for reference sentences.

    A sentence starts at an action keyword and runs up to the next action
    keyword or the end of the line. Matching is case-insensitive; group 1
    keeps the keyword's casing from the text.
    """
    joined = _alternation(reference_keywords)
    if not joined:
        return NO_MATCH
    return re.compile(rf'({joined})(?:\s+(.*?))(?=(?:{joined})|$)', re.IGNORECASE)


def reference_parts_pattern(issue_prefixes: Iterable[str]) -> re.Pattern[str]:
    """Return a matcher for ``<prefix><digits>`` in a sentence.

    Group 1 is the issue number, ASCII digits only. The repository and
    the ``raw`` text around a match are sliced from the sentence by
    :func:`~commitkit.parsing._references.scan_references`, which keeps
    the scan linear in the sentence length.
    """
    joined = _alternation(issue_prefixes)
    if not joined:
        return NO_MATCH
    return re.compile(rf'(?:{joined})([0-9]+)', re.IGNORECASE)


def compile_patterns(options: ParseOptions) -> CompiledPatterns:
    """Build the three matchers for ``options``.

    The result holds only compiled patterns; every scan over it starts
    from the beginning of its input, so one instance can serve any
    number of parses.
    """
    return CompiledPatterns(
        notes=notes_pattern(options.note_keywords),
        references=references_pattern(options.reference_keywords),
        reference_parts=reference_parts_pattern(options.issue_prefixes),
    )


__all__ = [
    'NO_MATCH',
    'compile_patterns',
    'notes_pattern',
    'reference_parts_pattern',
    'references_pattern',
]
