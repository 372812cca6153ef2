# Copyright 2026 TIER IV, inc.
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

"""Resolve document globs and file lists to concrete paths."""

import glob
import logging
import os
from typing import Iterable, List

from ..exceptions import SchemaError, UsageError

logger = logging.getLogger(__name__)


def expand_glob(pattern: str) -> List[str]:
    """Expand ``~`` and glob characters in ``pattern``.

    Patterns are often single-quoted on the command line, so the shell has not
    expanded them already.

    Raises:
        UsageError: If nothing matches
    """
    expanded = os.path.expanduser(pattern)
    paths = sorted(glob.glob(expanded))
    if not paths:
        raise UsageError(f"{expanded}: no such file or directory")
    return paths


def expand_globs(patterns: Iterable[str]) -> List[str]:
    paths: List[str] = []
    for pattern in patterns:
        paths.extend(expand_glob(pattern))
    return paths


def read_file_list(list_path: str) -> List[str]:
    """Expand the newline separated globs of a file list.

    Relative entries are resolved against the directory holding the list.
    Blank lines are skipped.

    Raises:
        SchemaError: If the list cannot be read
        UsageError: If an entry matches nothing
    """
    base_dir = os.path.dirname(list_path)
    try:
        with open(list_path, 'r', encoding='utf-8') as stream:
            patterns = [line.strip() for line in stream]
    except OSError as exc:
        raise SchemaError(f"{list_path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise SchemaError(f"{list_path}: invalid file list: {exc}") from exc

    paths: List[str] = []
    for pattern in patterns:
        if not pattern:
            continue
        pattern = os.path.expanduser(pattern)
        if not os.path.isabs(pattern):
            pattern = os.path.join(base_dir, pattern)
        paths.extend(expand_glob(pattern))

    logger.debug(f"{list_path}: {len(paths)} documents")
    return paths
