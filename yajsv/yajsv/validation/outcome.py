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

"""Per-document validation outcomes."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class OutcomeKind(Enum):
    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one document.

    ``messages`` holds the report lines for the document: one per violation
    for FAIL, exactly one for ERROR and none for PASS.
    """

    path: str
    kind: OutcomeKind
    messages: Tuple[str, ...] = ()

    @classmethod
    def passed(cls, path: str) -> 'ValidationOutcome':
        return cls(path=path, kind=OutcomeKind.PASS)

    @classmethod
    def failed(cls, path: str, violations: Iterable[str]) -> 'ValidationOutcome':
        lines = tuple(f"{path}: fail: {violation}" for violation in violations)
        if not lines:
            raise ValueError(f"{path}: a failed outcome needs at least one violation")
        return cls(path=path, kind=OutcomeKind.FAIL, messages=lines)

    @classmethod
    def errored(cls, path: str, stage: str, cause: str) -> 'ValidationOutcome':
        return cls(path=path, kind=OutcomeKind.ERROR, messages=(f"{path}: error: {stage}: {cause}",))

    @property
    def lines(self) -> Tuple[str, ...]:
        """Report lines as printed, including the pass line."""
        if self.kind is OutcomeKind.PASS:
            return (f"{self.path}: pass",)
        return self.messages

    @property
    def block(self) -> str:
        return "\n".join(self.lines)
