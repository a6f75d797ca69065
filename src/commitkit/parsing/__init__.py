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

"""Commit message parsing.

Splits a free-text commit message into header fields, body, footer,
notes (``BREAKING CHANGE: ...``) and issue references (``Closes #12``).

Usage::

    from commitkit.parsing import ParseOptions, compile_patterns, parse_commit

    options = ParseOptions()
    patterns = compile_patterns(options)
    record = parse_commit('feat(auth): add OAuth2\\n\\nCloses #7', options, patterns)
    assert record.type == 'feat'
    assert record.references[0].issue == '7'
"""

from commitkit.options import ParseOptions
from commitkit.parsing._parser import CommitMessageParser, match_header, parse_commit, split_lines
from commitkit.parsing._patterns import (
    NO_MATCH,
    compile_patterns,
    notes_pattern,
    reference_parts_pattern,
    references_pattern,
)
from commitkit.parsing._references import iter_sentences, scan_references
from commitkit.parsing._types import CommitRecord, CompiledPatterns, Note, Reference, Section

__all__ = [
    'NO_MATCH',
    'CommitMessageParser',
    'CommitRecord',
    'CompiledPatterns',
    'Note',
    'ParseOptions',
    'Reference',
    'Section',
    'compile_patterns',
    'iter_sentences',
    'match_header',
    'notes_pattern',
    'parse_commit',
    'reference_parts_pattern',
    'references_pattern',
    'scan_references',
    'split_lines',
]
