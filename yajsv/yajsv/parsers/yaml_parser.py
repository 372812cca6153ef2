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

"""YAML to JSON conversion."""

import json

import yaml

from ..exceptions import LoadError


class JsonCompatibleLoader(yaml.SafeLoader):
    """SafeLoader that only produces values JSON can represent.

    YAML timestamps are kept as their source text instead of becoming
    ``datetime`` objects.
    """


JsonCompatibleLoader.add_constructor(
    "tag:yaml.org,2002:timestamp",
    yaml.SafeLoader.construct_yaml_str,
)


def _one_line(exc: Exception) -> str:
    return " ".join(str(exc).split())


def yaml_to_json(buffer: bytes) -> bytes:
    """Convert a YAML document to UTF-8 encoded JSON.

    PyYAML recognises UTF-16 input only when it starts with a byte-order mark.
    An empty document converts to ``null``.

    Raises:
        LoadError: If the content is not valid YAML or has no JSON equivalent
    """
    try:
        data = yaml.load(buffer, Loader=JsonCompatibleLoader)
    except yaml.YAMLError as exc:
        raise LoadError(f"yaml: {_one_line(exc)}") from exc

    try:
        return json.dumps(data, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise LoadError(f"yaml: cannot convert to JSON: {exc}") from exc
