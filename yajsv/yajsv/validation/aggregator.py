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

"""Thread-safe collection of validation outcomes and the run summary."""

import threading
from dataclasses import dataclass
from typing import List, Optional, TextIO, Tuple

from .outcome import OutcomeKind, ValidationOutcome

EXIT_OK = 0
EXIT_FAIL = 1
EXIT_ERROR = 2
EXIT_USAGE = 4
EXIT_SCHEMA = 5


def exit_code_for(has_failures: bool, has_errors: bool) -> int:
    """Bit 0 flags failed documents, bit 1 flags malformed ones."""
    code = EXIT_OK
    if has_failures:
        code |= EXIT_FAIL
    if has_errors:
        code |= EXIT_ERROR
    return code


@dataclass(frozen=True)
class RunSummary:
    """Outcome of a whole run, built once every document is done.

    ``lines`` is in completion order, which differs between runs.
    ``failures`` and ``errors`` hold one text block per document.
    """

    outcomes: Tuple[ValidationOutcome, ...]
    lines: Tuple[str, ...]
    failures: Tuple[str, ...]
    errors: Tuple[str, ...]
    total: int

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def pass_count(self) -> int:
        return len(self.outcomes) - self.failure_count - self.error_count

    @property
    def exit_code(self) -> int:
        return exit_code_for(bool(self.failures), bool(self.errors))

    def summary_lines(self) -> List[str]:
        """End-of-run report: failures first, then malformed documents."""
        lines: List[str] = []
        if self.failures:
            lines.append(f"{self.failure_count} of {self.total} failed validation")
            lines.extend(self.failures)
        if self.errors:
            lines.append(f"{self.error_count} of {self.total} malformed documents")
            lines.extend(self.errors)
        return lines


class ResultAggregator:
    """Collects outcomes from concurrent workers.

    ``record`` may be called from any thread. One lock guards the shared
    lists and the output stream, so the lines of one document are never
    interleaved with another's. ``finalize`` must only be called after every
    worker has finished.
    """

    def __init__(self, stream: Optional[TextIO] = None, quiet: bool = False):
        """Initialize the aggregator.

        Args:
            stream: Where report lines are streamed as outcomes arrive
            quiet: Do not stream pass lines
        """
        self.stream = stream
        self.quiet = quiet
        self._lock = threading.Lock()
        self._outcomes: List[ValidationOutcome] = []
        self._lines: List[str] = []
        self._failures: List[str] = []
        self._errors: List[str] = []

    def record(self, outcome: ValidationOutcome) -> None:
        """Store one document's outcome and stream its report lines."""
        with self._lock:
            self._outcomes.append(outcome)
            self._lines.extend(outcome.lines)
            if outcome.kind is OutcomeKind.FAIL:
                self._failures.append(outcome.block)
            elif outcome.kind is OutcomeKind.ERROR:
                self._errors.append(outcome.block)

            if self.stream is not None and (outcome.kind is not OutcomeKind.PASS or not self.quiet):
                print(outcome.block, file=self.stream)

    def __len__(self) -> int:
        with self._lock:
            return len(self._outcomes)

    def finalize(self, total: Optional[int] = None) -> RunSummary:
        """Build the run summary.

        Args:
            total: Number of documents dispatched; defaults to the number recorded

        Raises:
            RuntimeError: If the number of recorded outcomes differs from ``total``
        """
        recorded = len(self._outcomes)
        if total is None:
            total = recorded
        elif recorded != total:
            raise RuntimeError(f"{recorded} outcomes recorded for {total} documents")

        return RunSummary(
            outcomes=tuple(self._outcomes),
            lines=tuple(self._lines),
            failures=tuple(self._failures),
            errors=tuple(self._errors),
            total=total,
        )
