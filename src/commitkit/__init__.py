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

"""commitkit: structured parsing of free-text commit messages."""

from commitkit.errors import CommitKitError, EmptyInputError, MissingConfigurationError
from commitkit.options import ParseOptions, load_options, resolve_options
from commitkit.parsing import (
    CommitMessageParser,
    CommitRecord,
    CompiledPatterns,
    Note,
    Reference,
    compile_patterns,
    parse_commit,
)
from commitkit.stream import iter_raw_commits, parse_stream

__version__ = '0.1.0'

# Short alias for the one-shot entry point.
parse = parse_commit

__all__ = [
    'CommitKitError',
    'CommitMessageParser',
    'CommitRecord',
    'CompiledPatterns',
    'EmptyInputError',
    'MissingConfigurationError',
    'Note',
    'ParseOptions',
    'Reference',
    '__version__',
    'compile_patterns',
    'iter_raw_commits',
    'load_options',
    'parse',
    'parse_commit',
    'parse_stream',
    'resolve_options',
]
