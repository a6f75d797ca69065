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

"""Tests for commitkit.options module."""

from __future__ import annotations

import re
from pathlib import Path

import pytest
from commitkit.errors import E, CommitKitError
from commitkit.options import (
    CONFIG_FILENAME,
    DEFAULT_HEADER_CORRESPONDENCE,
    DEFAULT_ISSUE_PREFIXES,
    DEFAULT_NOTE_KEYWORDS,
    DEFAULT_REFERENCE_KEYWORDS,
    VALID_KEYS,
    ParseOptions,
    compile_header_pattern,
    load_options,
    resolve_options,
    split_list,
)


class TestParseOptionsDefaults:
    """ParseOptions has sensible defaults."""

    def test_defaults(self) -> None:
        """Test defaults."""
        options = ParseOptions()
        assert options.header_correspondence == DEFAULT_HEADER_CORRESPONDENCE == ('type', 'scope', 'subject')
        assert options.note_keywords == DEFAULT_NOTE_KEYWORDS == ('BREAKING CHANGE',)
        assert 'closes' in DEFAULT_REFERENCE_KEYWORDS
        assert options.issue_prefixes == DEFAULT_ISSUE_PREFIXES == ('#', 'gh-')

    def test_frozen(self) -> None:
        """Test frozen."""
        options = ParseOptions()
        with pytest.raises(AttributeError):
            options.__setattr__('note_keywords', ('X',))

    def test_valid_keys(self) -> None:
        """Test valid keys."""
        assert VALID_KEYS == {
            'header_pattern',
            'header_correspondence',
            'note_keywords',
            'reference_keywords',
            'issue_prefixes',
        }


class TestSplitList:
    """Tests for split_list()."""

    def test_comma_separated(self) -> None:
        """Test comma separated."""
        assert split_list('fix, closes,,  resolves ', key='reference_keywords') == ('fix', 'closes', 'resolves')

    def test_list(self) -> None:
        """Test list."""
        assert split_list([' a ', '', 'b'], key='note_keywords') == ('a', 'b')

    def test_wrong_type(self) -> None:
        """Test wrong type."""
        with pytest.raises(CommitKitError) as exc_info:
            split_list(42, key='note_keywords')
        assert exc_info.value.code is E.CONFIG_INVALID_VALUE

    def test_wrong_item_type(self) -> None:
        """Test wrong item type."""
        with pytest.raises(CommitKitError) as exc_info:
            split_list(['a', 1], key='note_keywords')
        assert exc_info.value.code is E.CONFIG_INVALID_VALUE


class TestCompileHeaderPattern:
    """Tests for compile_header_pattern()."""

    def test_string(self) -> None:
        """Test string."""
        assert compile_header_pattern(r'^(\w+)$').pattern == r'^(\w+)$'

    def test_pattern_passthrough(self) -> None:
        """Test pattern passthrough."""
        pattern = re.compile('x')
        assert compile_header_pattern(pattern) is pattern

    def test_invalid_regex(self) -> None:
        """Test invalid regex."""
        with pytest.raises(CommitKitError) as exc_info:
            compile_header_pattern('(unclosed')
        assert exc_info.value.code is E.CONFIG_INVALID_VALUE
        assert 'not a valid regular expression' in str(exc_info.value)

    def test_wrong_type(self) -> None:
        """Test wrong type."""
        with pytest.raises(CommitKitError):
            compile_header_pattern(['^x$'])


class TestResolveOptions:
    """Tests for resolve_options()."""

    def test_no_overrides(self) -> None:
        """Test no overrides."""
        assert resolve_options() == ParseOptions()

    def test_none_values_ignored(self) -> None:
        """Test none values ignored."""
        base = ParseOptions(note_keywords=('DEPRECATED',))
        assert resolve_options(base, note_keywords=None, header_pattern=None) == base

    def test_comma_separated_overrides(self) -> None:
        """Test comma separated overrides."""
        options = resolve_options(
            header_correspondence='type,scope,subject,extra',
            note_keywords='BREAKING CHANGE, DEPRECATED',
            reference_keywords='closes',
            issue_prefixes='#,JIRA-',
        )
        assert options.header_correspondence == ('type', 'scope', 'subject', 'extra')
        assert options.note_keywords == ('BREAKING CHANGE', 'DEPRECATED')
        assert options.reference_keywords == ('closes',)
        assert options.issue_prefixes == ('#', 'JIRA-')

    def test_header_pattern_string(self) -> None:
        """Test header pattern string."""
        options = resolve_options(header_pattern=r'^(\w+): (.*)$')
        assert options.header_pattern.pattern == r'^(\w+): (.*)$'

    def test_unknown_key_suggests(self) -> None:
        """Test unknown key suggests."""
        with pytest.raises(CommitKitError) as exc_info:
            resolve_options(note_keyword='X')
        assert exc_info.value.code is E.CONFIG_INVALID_KEY
        assert "Did you mean 'note_keywords'?" in exc_info.value.hint


class TestLoadOptions:
    """Tests for load_options()."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test missing file."""
        assert load_options(tmp_path) == ParseOptions()

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test empty file."""
        (tmp_path / CONFIG_FILENAME).write_text('', encoding='utf-8')
        assert load_options(tmp_path) == ParseOptions()

    def test_values(self, tmp_path: Path) -> None:
        """Test values."""
        (tmp_path / CONFIG_FILENAME).write_text(
            r"""
header_pattern = '^(\w+): (.*)$'
header_correspondence = "type, subject"
note_keywords = ["DEPRECATED"]
reference_keywords = ["closes", "fixes"]
""",
            encoding='utf-8',
        )
        options = load_options(tmp_path)
        assert options.header_pattern.pattern == r'^(\w+): (.*)$'
        assert options.header_correspondence == ('type', 'subject')
        assert options.note_keywords == ('DEPRECATED',)
        assert options.reference_keywords == ('closes', 'fixes')
        assert options.issue_prefixes == DEFAULT_ISSUE_PREFIXES

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Test unknown key."""
        (tmp_path / CONFIG_FILENAME).write_text('reference_keyword = ["fixes"]\n', encoding='utf-8')
        with pytest.raises(CommitKitError) as exc_info:
            load_options(tmp_path)
        assert exc_info.value.code is E.CONFIG_INVALID_KEY
        assert CONFIG_FILENAME in str(exc_info.value)

    def test_wrong_type(self, tmp_path: Path) -> None:
        """Test wrong type."""
        (tmp_path / CONFIG_FILENAME).write_text('note_keywords = 3\n', encoding='utf-8')
        with pytest.raises(CommitKitError) as exc_info:
            load_options(tmp_path)
        assert exc_info.value.code is E.CONFIG_INVALID_VALUE

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test invalid toml."""
        (tmp_path / CONFIG_FILENAME).write_text('note_keywords = [\n', encoding='utf-8')
        with pytest.raises(CommitKitError) as exc_info:
            load_options(tmp_path)
        assert exc_info.value.code is E.CONFIG_PARSE_FAILED

    def test_non_utf8_config(self, tmp_path: Path) -> None:
        """Test non utf8 config."""
        (tmp_path / CONFIG_FILENAME).write_bytes(b'note_keywords = "\xff"\n')
        with pytest.raises(CommitKitError) as exc_info:
            load_options(tmp_path)
        assert exc_info.value.code is E.CONFIG_NOT_FOUND
