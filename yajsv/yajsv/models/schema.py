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

"""JSON Schema compilation and validation on top of ``jsonschema``."""

from __future__ import annotations

import ast
import json
import logging
import os
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple, Union
from urllib.parse import urlsplit
from urllib.request import url2pathname

import jsonschema
from jsonschema.exceptions import ValidationError
from jsonschema.validators import Draft3Validator, Draft4Validator, Draft7Validator, validator_for
from referencing import Registry, Resource
from referencing.exceptions import NoSuchResource, Unresolvable
from referencing.jsonschema import DRAFT7, specification_with

from ..exceptions import LoadError, SchemaError, ValidateError
from ..parsers.document_loader import load

logger = logging.getLogger(__name__)

_REQUIRED_SUFFIX = " is a required property"


@dataclass(frozen=True)
class ValidationResult:
    """Violations reported for one document, already rendered as text."""

    errors: Tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors


def _error_context(error: ValidationError) -> str:
    return "(root)" + "".join(f".{token}" for token in error.absolute_path)


def describe_error(error: ValidationError) -> str:
    """Render a violation as ``"<context>: <description>"``.

    The context is ``(root)`` followed by the dotted instance path, e.g.
    ``(root).items.0.name``.
    """
    description = error.message
    if error.validator == "required" and description.endswith(_REQUIRED_SUFFIX):
        field = description[: -len(_REQUIRED_SUFFIX)]
        try:
            field = ast.literal_eval(field)
        except (ValueError, SyntaxError):
            pass
        description = f"{field} is required"
    return f"{_error_context(error)}: {description}"


def _sort_key(error: ValidationError) -> Tuple[Tuple[str, ...], str]:
    return tuple(str(token) for token in error.absolute_path), error.message


class Schema:
    """A compiled schema that validates JSON documents."""

    def __init__(self, validator: jsonschema.protocols.Validator, uri: str = ""):
        self._validator = validator
        self.uri = uri

    def validate(self, buffer: bytes) -> ValidationResult:
        """Parse ``buffer`` as JSON and validate it.

        Raises:
            ValidateError: If the buffer is not UTF-8 JSON or a reference
                cannot be resolved
        """
        try:
            instance = json.loads(buffer.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise ValidateError(f"invalid UTF-8 text: {exc.reason}") from exc
        except json.JSONDecodeError as exc:
            raise ValidateError(str(exc)) from exc

        try:
            errors = sorted(self._validator.iter_errors(instance), key=_sort_key)
        except Unresolvable as exc:
            raise ValidateError(f"unresolvable reference: {exc}") from exc
        return ValidationResult(errors=tuple(describe_error(e) for e in errors))


def _abs_path(path: Union[str, Path]) -> Path:
    return Path(os.path.abspath(os.path.expanduser(str(path))))


def _read_schema(path: Path, allow_bom: bool, what: str) -> Any:
    try:
        return json.loads(load(path, allow_bom=allow_bom).decode("utf-8"))
    except LoadError as exc:
        raise SchemaError(f"{path}: unable to load {what}: {exc.cause}") from exc
    except ValueError as exc:
        raise SchemaError(f"{path}: unable to load {what}: {exc}") from exc


def _check_schema(path: Path, contents: Any):
    if not isinstance(contents, (dict, bool)):
        raise SchemaError(f"{path}: invalid schema: expected an object or a boolean")
    validator_cls = validator_for(contents, default=Draft7Validator)
    try:
        validator_cls.check_schema(contents)
    except jsonschema.exceptions.SchemaError as exc:
        raise SchemaError(f"{path}: invalid schema: {exc.message}") from exc
    return validator_cls


def _create_resource(contents: Any) -> Resource:
    dialect = contents.get("$schema", "") if isinstance(contents, dict) else ""
    return specification_with(dialect, default=DRAFT7).create_resource(contents)


def _retrieve_file(uri: str, allow_bom: bool = False) -> Resource:
    """Fetch a schema referenced by file URI that was not registered up front."""
    parts = urlsplit(uri)
    if parts.scheme != "file":
        raise NoSuchResource(ref=uri)
    path = Path(url2pathname(parts.path))
    logger.debug(f"Retrieving referenced schema {path}")
    return _create_resource(_read_schema(path, allow_bom, "schema ref"))


def build_registry(ref_paths: Iterable[Union[str, Path]], *, exclude: Optional[Path] = None,
                   allow_bom: bool = False) -> Registry:
    """Build a registry of referenced schemas.

    Every schema is reachable through its absolute file URI and, when it
    declares one, through its own ``$id``. Other file URIs are loaded on
    first use.
    """
    pairs: List[Tuple[str, Resource]] = []
    for ref in ref_paths:
        ref_path = _abs_path(ref)
        if exclude is not None and ref_path == exclude:
            continue

        contents = _read_schema(ref_path, allow_bom, "schema ref")
        _check_schema(ref_path, contents)
        resource = _create_resource(contents)
        pairs.append((ref_path.as_uri(), resource))
        if resource.id():
            pairs.append((resource.id(), resource))
        logger.debug(f"Registered referenced schema {ref_path}")

    registry = Registry(retrieve=partial(_retrieve_file, allow_bom=allow_bom))
    return registry.with_resources(pairs)


def compile_schema(schema_path: Union[str, Path], ref_paths: Iterable[Union[str, Path]] = (),
                   allow_bom: bool = False) -> Schema:
    """Load and compile the primary schema together with its references.

    Schemas may be written in JSON or YAML. A reference pointing at the
    primary schema itself is ignored.

    Raises:
        SchemaError: If any schema cannot be loaded or is not a valid schema
    """
    primary = _abs_path(schema_path)
    registry = build_registry(ref_paths, exclude=primary, allow_bom=allow_bom)

    contents = _read_schema(primary, allow_bom, "schema")
    validator_cls = _check_schema(primary, contents)

    uri = primary.as_uri()
    if isinstance(contents, dict) and not (contents.get("$id") or contents.get("id")):
        # Relative $refs resolve against the schema file's location.
        id_keyword = "id" if validator_cls in (Draft3Validator, Draft4Validator) else "$id"
        contents = {**contents, id_keyword: uri}

    validator = validator_cls(
        contents,
        registry=registry,
        format_checker=validator_cls.FORMAT_CHECKER,
    )
    logger.debug(f"Compiled schema {primary} using {validator_cls.__name__}")
    return Schema(validator, uri=uri)
