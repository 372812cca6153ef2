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

"""Custom exceptions for the yajsv validator."""


class YajsvError(Exception):
    """Base exception for validator related errors."""
    pass


class UsageError(YajsvError):
    """Exception raised for invalid or missing command-line arguments."""
    pass


class SchemaError(YajsvError):
    """Exception raised when a schema or a file list cannot be loaded or compiled."""
    pass


class LoadError(YajsvError):
    """Exception raised when a document cannot be read, decoded or converted."""

    def __init__(self, cause, path=None):
        self.cause = str(cause)
        self.path = str(path) if path is not None else None
        super().__init__(f"{self.path}: {self.cause}" if self.path else self.cause)


class ValidateError(YajsvError):
    """Exception raised when the schema engine cannot evaluate a document."""
    pass
