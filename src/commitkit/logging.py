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

"""Structured logging for commitkit.

Configures `structlog <https://www.structlog.org/>`_ to write either
colored console lines or one JSON object per line. Output goes to stderr
by default so stdout carries only parsed records::

    git log --format=%B%n%n%n | commitkit parse | jq '.[].type'

The parser core never logs. Only the stream adapter, the options loader
and the CLI emit events, always as ``snake_case`` event names with
key/value context (``log.warning('commit_skipped', index=3)``).
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def _level_for(*, verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for commitkit.

    Safe to call more than once; the last call wins.

    Args:
        verbose: Enable debug-level output.
        quiet: Only warnings and errors. Takes precedence over ``verbose``.
        json_log: Use JSON output instead of colored console output.
        stream: Where log lines go (defaults to ``sys.stderr``).
    """
    out = stream or sys.stderr
    logging.basicConfig(
        format='%(message)s',
        stream=out,
        level=_level_for(verbose=verbose, quiet=quiet),
        force=True,
    )

    renderer: structlog.types.Processor
    if json_log:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'commitkit') -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger named ``name``."""
    return structlog.get_logger(name)


__all__ = [
    'configure_logging',
    'get_logger',
]
