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

"""Tests for commitkit.stream module."""

from __future__ import annotations

import io
import json

import pytest
from commitkit.errors import EmptyInputError
from commitkit.logging import configure_logging
from commitkit.options import ParseOptions
from commitkit.stream import DEFAULT_SEPARATOR, iter_raw_commits, parse_stream


class TestIterRawCommits:
    """Tests for iter_raw_commits()."""

    def test_default_separator(self) -> None:
        """Test default separator."""
        assert DEFAULT_SEPARATOR == '\n\n\n'
        assert list(iter_raw_commits('feat: a\n\n\nfix: b\n\n\n\n\n\n')) == ['feat: a', 'fix: b']

    def test_custom_separator(self) -> None:
        """Test custom separator."""
        assert list(iter_raw_commits('a\n--\nb\n--\n  \n', separator='--')) == ['a\n', '\nb\n']

    def test_body_with_single_blank_line_stays_together(self) -> None:
        """Test body with single blank line stays together."""
        assert list(iter_raw_commits('feat: a\n\nbody\n\n\nfix: b')) == ['feat: a\n\nbody', 'fix: b']


class TestParseStream:
    """Tests for parse_stream()."""

    def test_order_preserved(self) -> None:
        """Test order preserved."""
        records = list(parse_stream(['feat: a', 'fix: b', 'chore: c']))
        assert [r.type for r in records] == ['feat', 'fix', 'chore']

    def test_failure_warns_and_skips(self) -> None:
        """Test failure warns and skips."""
        warnings: list[str] = []
        records = list(parse_stream(['feat: a', '  ', 'fix: b'], warn=warnings.append))
        assert [r.type for r in records] == ['feat', 'fix']
        assert warnings == ['[CK-INPUT-EMPTY] Expected a raw commit']

    def test_default_warn_logs(self) -> None:
        """Test default warn logs."""
        out = io.StringIO()
        configure_logging(quiet=True, json_log=True, stream=out)
        records = list(parse_stream(['', 'fix: b']))
        assert [r.type for r in records] == ['fix']
        events = [json.loads(line) for line in out.getvalue().splitlines()]
        skipped = [event for event in events if event['event'] == 'commit_skipped']
        assert len(skipped) == 1
        assert skipped[0]['level'] == 'warning'
        assert skipped[0]['reason'] == '[CK-INPUT-EMPTY] Expected a raw commit'

    def test_strict_raises(self) -> None:
        """Test strict raises."""
        stream = parse_stream(['feat: a', '', 'fix: b'], strict=True)
        assert next(stream).type == 'feat'
        with pytest.raises(EmptyInputError):
            next(stream)

    def test_bytes_records(self) -> None:
        """Test bytes records."""
        records = list(parse_stream([b'feat(\xc3\xa9): caf\xc3\xa9']))
        assert records[0].subject == 'café'

    def test_invalid_utf8_does_not_end_stream(self) -> None:
        """Test invalid utf8 does not end stream."""
        warnings: list[str] = []
        records = list(parse_stream([b'feat: a', b'\xff\xfe bad', b'fix: b'], warn=warnings.append))
        assert [r.type for r in records] == ['feat', None, 'fix']
        assert records[1].header == '\ufffd\ufffd bad\n'
        assert warnings == []

    def test_custom_options(self) -> None:
        """Test custom options."""
        options = ParseOptions(reference_keywords=('refs',))
        records = list(parse_stream(['docs: x\nrefs #4'], options))
        assert records[0].references[0].action == 'refs'
        assert records[0].footer == 'refs #4\n'

    def test_lazy(self) -> None:
        """Test lazy."""
        seen: list[str] = []

        def source():  # noqa: ANN202 - test generator
            for raw in ('feat: a', 'fix: b'):
                seen.append(raw)
                yield raw

        stream = parse_stream(source())
        next(stream)
        assert seen == ['feat: a']
