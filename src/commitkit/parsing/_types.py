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

"""Pure types for commit message parsing.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a frozen dataclass or enum: no I/O, no logging, no
side effects.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Section(Enum):
    """Where a plain (non-note, non-reference) line of the message goes.

    The segmenter starts in ``BODY`` and moves to ``FOOTER`` the first
    time it sees a note or a reference line. It never moves back.
    """

    BODY = 'body'
    FOOTER = 'footer'


@dataclass(frozen=True)
class CompiledPatterns:
    """The three matchers built from a set of parse options.

    Attributes:
        notes: Matches a line that opens a note. Group 1 is the
            keyword (the note title), group 2 the trailing text.
        references: Finds reference sentences. Group 1 is the action
            keyword, group 2 the sentence body up to the next action.
        reference_parts: Finds ``[repository]<prefix><issue>`` pairs in
            a sentence body. Group 1 is the repository (or ``None``),
            group 2 the issue number.
    """

    notes: re.Pattern[str]
    references: re.Pattern[str]
    reference_parts: re.Pattern[str]


@dataclass(frozen=True)
class Note:
    """A labeled, possibly multi-line annotation found in the footer.

    Attributes:
        title: The note keyword as written, e.g. ``"BREAKING CHANGE"``.
        text: The text after the keyword plus every continuation line,
            each terminated by ``"\\n"``.
    """

    title: str
    text: str

    def to_dict(self) -> dict[str, str]:
        """Return the note as a plain dict."""
        return {'title': self.title, 'text': self.text}


@dataclass(frozen=True)
class Reference:
    """A pointer to an issue, governed by an action keyword.

    Attributes:
        action: The action keyword with its original casing (``"Closes"``).
        repository: The repository glued to the issue prefix
            (``"repo"`` in ``repo#77``), or ``None``.
        issue: The issue number, digits only.
        raw: The exact substring consumed for this reference. The second
            and later references in one sentence carry their leading
            separator, e.g. ``", #123"``.
    """

    action: str
    repository: str | None
    issue: str
    raw: str

    def to_dict(self) -> dict[str, str | None]:
        """Return the reference as a plain dict."""
        return {
            'action': self.action,
            'repository': self.repository,
            'issue': self.issue,
            'raw': self.raw,
        }


@dataclass(frozen=True)
class CommitRecord:
    """A commit message split into its structural parts.

    ``fields`` holds the header decomposition keyed by the names in
    ``header_correspondence``. A key maps to the captured text, to
    ``None`` when the group did not capture, or is absent entirely when
    the name has no corresponding group in the header pattern.

    Attributes:
        fields: Header fields (e.g. ``type``, ``scope``, ``subject``).
        header: The first non-blank line, verbatim, plus ``"\\n"``.
        body: Body lines joined with ``"\\n"`` terminators, or ``None``.
        footer: Footer lines joined with ``"\\n"`` terminators, or ``None``.
        notes: Notes in order of appearance.
        references: References in order of appearance, header first.
    """

    # Records hold a mutable dict and compare by value, so they are unhashable.
    __hash__ = None  # type: ignore[assignment]

    header: str
    fields: dict[str, str | None] = field(default_factory=dict)
    body: str | None = None
    footer: str | None = None
    notes: tuple[Note, ...] = ()
    references: tuple[Reference, ...] = ()

    def get(self, name: str, default: Any = None) -> Any:  # noqa: ANN401 - mirrors dict.get
        """Return header field ``name``, or ``default`` if it is absent."""
        return self.fields.get(name, default)

    def __getattr__(self, name: str) -> str | None:
        """Expose header fields as attributes (``record.type``)."""
        # Only reached when normal lookup fails, so dataclass fields win.
        fields = self.__dict__.get('fields', {})
        if name in fields:
            return fields[name]
        raise AttributeError(name)

    def to_dict(self) -> dict[str, Any]:
        """Return the merged mapping of header fields and message parts.

        Header fields come first. The fixed keys (``header``, ``body``,
        ``footer``, ``notes``, ``references``) win if a header field has
        the same name.
        """
        merged: dict[str, Any] = dict(self.fields)
        merged.update({
            'header': self.header,
            'body': self.body,
            'footer': self.footer,
            'notes': [note.to_dict() for note in self.notes],
            'references': [ref.to_dict() for ref in self.references],
        })
        return merged


__all__ = [
    'CommitRecord',
    'CompiledPatterns',
    'Note',
    'Reference',
    'Section',
]
