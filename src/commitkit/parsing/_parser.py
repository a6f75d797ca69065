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

"""Commit message parser.

Pure implementation: depends only on ``re`` and the sibling modules.
No I/O, no logging, no side effects.

Line classification::

    raw text
      │  drop blank lines
      ▼
    header ──► header fields + references found in the header
      │
      ▼  every following line, first rule that applies wins
    ┌──────────────────────┬───────────────────────────────────────────┐
    │ 1. opens a note      │ new note, inside_note = True, → FOOTER    │
    │ 2. has references    │ references, inside_note = False, → FOOTER │
    │ 3. inside_note       │ appended to the last note and the footer  │
    │ 4. section is BODY   │ appended to the body                      │
    │ 5. otherwise         │ appended to the footer                    │
    └──────────────────────┴───────────────────────────────────────────┘

Once a line lands in the footer, the section never returns to BODY.
A reference line ends the current note for good: plain lines after it
go to the footer only.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from commitkit.errors import EmptyInputError, MissingConfigurationError
from commitkit.options import ParseOptions
from commitkit.parsing._patterns import compile_patterns
from commitkit.parsing._references import scan_references
from commitkit.parsing._types import CommitRecord, CompiledPatterns, Note, Reference, Section


def split_lines(raw: str) -> list[str]:
    """Split ``raw`` into lines, dropping blank and whitespace-only ones."""
    return [line for line in raw.replace('\r\n', '\n').split('\n') if line.strip()]


def match_header(
    header: str,
    pattern: re.Pattern[str],
    correspondence: Sequence[str],
) -> dict[str, str | None]:
    """Decompose ``header`` into named fields.

    Name *i* takes capture group *i + 1*. A group that did not capture
    (or captured an empty string) gives ``None``. A name past the last
    group of ``pattern`` is left out of the result. If ``pattern`` does
    not match at all, every name maps to ``None``.
    """
    names = [name.strip() for name in correspondence]
    match = pattern.search(header)
    if match is None:
        return dict.fromkeys(names)

    fields: dict[str, str | None] = {}
    for index, name in enumerate(names, start=1):
        if index > pattern.groups:
            continue
        fields[name] = match.group(index) or None
    return fields


class _Segmenter:
    """Walks the lines after the header and sorts them into parts."""

    def __init__(self, patterns: CompiledPatterns) -> None:
        self._patterns = patterns
        self.section = Section.BODY
        self.inside_note = False
        self.body: list[str] = []
        self.footer: list[str] = []
        self.note_titles: list[str] = []
        self.note_texts: list[str] = []
        self.references: list[Reference] = []

    def feed(self, line: str) -> None:
        note_match = self._patterns.notes.match(line)
        if note_match:
            text = note_match.group(2)
            if text.strip():
                text += '\n'
            self.note_titles.append(note_match.group(1))
            self.note_texts.append(text)
            self.inside_note = True
            self.section = Section.FOOTER
            self.footer.append(line)
            return

        found = scan_references(line, self._patterns.references, self._patterns.reference_parts)
        if found:
            self.references.extend(found)
            self.inside_note = False
            self.section = Section.FOOTER
            self.footer.append(line)
            return

        if self.inside_note:
            self.note_texts[-1] += line + '\n'
            self.footer.append(line)
        elif self.section is Section.BODY:
            self.body.append(line)
        else:
            self.footer.append(line)

    def notes(self) -> tuple[Note, ...]:
        return tuple(Note(title=title, text=text) for title, text in zip(self.note_titles, self.note_texts))


def _join(lines: list[str]) -> str | None:
    if not lines:
        return None
    return ''.join(line + '\n' for line in lines)


def parse_commit(
    raw: str | None,
    options: ParseOptions | None,
    patterns: CompiledPatterns | None = None,
) -> CommitRecord:
    """Parse one raw commit message.

    Args:
        raw: The full commit message.
        options: Header pattern, field names and keywords.
        patterns: Matchers from :func:`compile_patterns`. Built from
            ``options`` when omitted; pass them in to avoid recompiling
            for every message.

    Returns:
        The parsed :class:`CommitRecord`.

    Raises:
        EmptyInputError: If ``raw`` is empty or whitespace only.
        MissingConfigurationError: If ``options`` is ``None``.
    """
    if not raw or not raw.strip():
        raise EmptyInputError()
    if options is None:
        raise MissingConfigurationError()
    if patterns is None:
        patterns = compile_patterns(options)

    header, *rest = split_lines(raw)
    fields = match_header(header, options.header_pattern, options.header_correspondence)

    # References may appear in the header too; the header text is kept as is.
    header_refs = scan_references(header, patterns.references, patterns.reference_parts)

    segmenter = _Segmenter(patterns)
    for line in rest:
        segmenter.feed(line)

    return CommitRecord(
        header=header + '\n',
        fields=fields,
        body=_join(segmenter.body),
        footer=_join(segmenter.footer),
        notes=segmenter.notes(),
        references=(*header_refs, *segmenter.references),
    )


class CommitMessageParser:
    """Reusable parser bound to one set of options.

    Compiles the matchers once; :meth:`parse` can then be called for any
    number of messages. The instance holds no per-message state.

    Usage::

        parser = CommitMessageParser(ParseOptions())
        record = parser.parse('fix(core): handle empty input\\n\\nCloses #12')
        assert record.type == 'fix'
        assert record.references[0].issue == '12'
    """

    def __init__(self, options: ParseOptions | None = None) -> None:
        """Bind the parser to ``options`` (defaults to ``ParseOptions()``)."""
        self.options = options or ParseOptions()
        self.patterns = compile_patterns(self.options)

    def parse(self, raw: str) -> CommitRecord:
        """Parse one raw commit message. See :func:`parse_commit`."""
        return parse_commit(raw, self.options, self.patterns)


__all__ = [
    'CommitMessageParser',
    'match_header',
    'parse_commit',
    'split_lines',
]
