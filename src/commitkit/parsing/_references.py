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

"""Issue reference scanning.

Extraction is two-staged::

    "handle #33, Closes #100, Handled #3 kills repo#77"
     ├── sentence "handle"  → "#33, Closes #100, "
     │     ├── #33                  raw "#33"
     │     └── #100                 raw ", Closes #100"
     ├── sentence "Handled" → "#3 "
     │     └── #3                   raw "#3"
     └── sentence "kills"   → "repo#77"
           └── repo#77              raw "repo#77"

Both stages use ``finditer`` over the given string, so scanning always
starts at the beginning of the line and shares no state between calls.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from commitkit.parsing._types import Reference


def iter_sentences(line: str, references: re.Pattern[str]) -> Iterator[tuple[str, str]]:
    """Yield ``(action, sentence_body)`` for each reference sentence in ``line``."""
    for match in references.finditer(line):
        yield match.group(1), match.group(2) or ''


def _repository(head: str) -> str | None:
    """Return the run of non-space text that ends right before an issue prefix."""
    if not head or head[-1].isspace():
        return None
    return head.split()[-1]


def scan_references(
    line: str,
    references: re.Pattern[str],
    reference_parts: re.Pattern[str],
) -> list[Reference]:
    """Return every reference in ``line``, in order of appearance.

    A sentence with no issue number in it yields nothing, so
    ``"fixes the build"`` is not a reference. Each ``raw`` runs from the
    end of the previous reference in the sentence, so the second and later
    ones carry their separator (``", #123"``).
    """
    found: list[Reference] = []
    for action, sentence in iter_sentences(line, references):
        prev_end = 0
        for part in reference_parts.finditer(sentence):
            found.append(
                Reference(
                    action=action,
                    repository=_repository(sentence[prev_end : part.start()]),
                    issue=part.group(1),
                    raw=sentence[prev_end : part.end()],
                )
            )
            prev_end = part.end()
    return found


__all__ = [
    'iter_sentences',
    'scan_references',
]
