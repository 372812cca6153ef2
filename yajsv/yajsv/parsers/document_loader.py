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

"""Read documents from disk and turn them into parser-ready JSON bytes."""

import logging
from enum import Enum
from pathlib import Path
from typing import Union

from ..exceptions import LoadError
from .charset import normalize
from .yaml_parser import yaml_to_json

logger = logging.getLogger(__name__)


class DocumentFormat(Enum):
    """Document family, resolved once from the file extension."""
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> 'DocumentFormat':
        if Path(path).suffix.lower() in ('.yml', '.yaml'):
            return cls.YAML
        return cls.JSON


def decode(buffer: bytes, doc_format: DocumentFormat, allow_bom: bool = False) -> bytes:
    """Convert raw bytes of the given format to UTF-8 JSON bytes."""
    if doc_format is DocumentFormat.YAML:
        return yaml_to_json(buffer)
    return normalize(buffer, allow_bom=allow_bom)


def load(path: Union[str, Path], allow_bom: bool = False) -> bytes:
    """Load a document as UTF-8 JSON bytes.

    Args:
        path: Document path; ``.yml``/``.yaml`` files are converted from YAML
        allow_bom: Accept (and strip) a byte-order mark in JSON documents

    Returns:
        Bytes ready for JSON parsing

    Raises:
        LoadError: If the file cannot be read, decoded or converted
    """
    doc_format = DocumentFormat.from_path(path)
    try:
        with open(path, 'rb') as stream:
            buffer = stream.read()
    except OSError as exc:
        raise LoadError(exc.strerror or str(exc), path=path) from exc

    logger.debug(f"Loaded {len(buffer)} bytes of {doc_format.value} from {path}")
    try:
        return decode(buffer, doc_format, allow_bom=allow_bom)
    except LoadError as exc:
        raise LoadError(exc.cause, path=path) from exc
