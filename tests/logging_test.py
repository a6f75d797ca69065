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

"""Tests for commitkit.logging module."""

from __future__ import annotations

import io
import json
import logging

from commitkit.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_default_level_is_info(self) -> None:
        """Default logging level should be INFO."""
        configure_logging()
        assert logging.root.level == logging.INFO

    def test_verbose_sets_debug(self) -> None:
        """Verbose flag should set DEBUG level."""
        configure_logging(verbose=True)
        assert logging.root.level == logging.DEBUG

    def test_quiet_wins_over_verbose(self) -> None:
        """Quiet takes precedence when both flags are set."""
        configure_logging(verbose=True, quiet=True)
        assert logging.root.level == logging.WARNING

    def test_json_log_writes_json_lines(self) -> None:
        """JSON mode writes one JSON object per event to the given stream."""
        out = io.StringIO()
        configure_logging(json_log=True, stream=out)
        get_logger('commitkit.test').warning('commit_skipped', reason='empty')
        event = json.loads(out.getvalue().strip().splitlines()[-1])
        assert event['event'] == 'commit_skipped'
        assert event['reason'] == 'empty'
        assert event['level'] == 'warning'


class TestGetLogger:
    """Tests for get_logger()."""

    def test_logger_can_log(self) -> None:
        """Logger should be able to emit messages without crashing."""
        configure_logging(quiet=True)
        log = get_logger('test')
        log.info('test message', key='value')
        log.debug('debug message')
        log.warning('warning message')
