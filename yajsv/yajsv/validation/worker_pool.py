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

"""Validate many documents in parallel with a bounded number of open files."""

import logging
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Optional

from ..exceptions import LoadError, ValidateError
from ..models.schema import Schema
from ..parsers.document_loader import load
from .aggregator import ResultAggregator, RunSummary
from .outcome import ValidationOutcome

logger = logging.getLogger(__name__)

# Extra slots on top of the CPU count so file reads overlap with validation.
CONCURRENCY_HEADROOM = 10


def default_concurrency_limit() -> int:
    return (os.cpu_count() or 1) + CONCURRENCY_HEADROOM


def validate_document(path: str, schema: Schema, allow_bom: bool = False) -> ValidationOutcome:
    """Load and validate a single document, classifying the result.

    Load and validate problems become ERROR outcomes instead of exceptions.
    """
    try:
        buffer = load(path, allow_bom=allow_bom)
    except LoadError as exc:
        return ValidationOutcome.errored(path, "load doc", exc.cause)

    try:
        result = schema.validate(buffer)
    except ValidateError as exc:
        return ValidationOutcome.errored(path, "validate", str(exc))

    if not result.valid:
        return ValidationOutcome.failed(path, result.errors)
    return ValidationOutcome.passed(path)


class ValidationWorkerPool:
    """Runs one validation task per document on a thread pool.

    A bounded semaphore caps how many documents are loaded and validated at
    the same time, which keeps the number of open files under the OS limit
    when the batch is much larger than the CPU count.
    """

    def __init__(self, schema: Schema, concurrency_limit: Optional[int] = None, allow_bom: bool = False):
        if concurrency_limit is None:
            concurrency_limit = default_concurrency_limit()
        if concurrency_limit < 1:
            raise ValueError(f"concurrency limit must be at least 1, got {concurrency_limit}")

        self.schema = schema
        self.concurrency_limit = concurrency_limit
        self.allow_bom = allow_bom
        self._slots = threading.BoundedSemaphore(concurrency_limit)

    def _run_unit(self, path: str, aggregator: ResultAggregator) -> None:
        with self._slots:
            start = time.monotonic()
            try:
                outcome = validate_document(path, self.schema, allow_bom=self.allow_bom)
            except Exception as exc:
                logger.exception(f"Unexpected error while validating {path}")
                outcome = ValidationOutcome.errored(path, "validate", f"unexpected error: {exc}")
            logger.debug(f"{path}: {outcome.kind.value} in {time.monotonic() - start:.3f}s")
            aggregator.record(outcome)

    def run(self, paths: Iterable[str], aggregator: Optional[ResultAggregator] = None) -> RunSummary:
        """Validate every path and return the summary once all are done.

        Args:
            paths: Documents to validate, in any order
            aggregator: Collector for the outcomes; a silent one is used if omitted

        Returns:
            The finalized RunSummary
        """
        paths = [str(p) for p in paths]
        if aggregator is None:
            aggregator = ResultAggregator()
        if not paths:
            return aggregator.finalize(total=0)

        workers = min(len(paths), self.concurrency_limit)
        logger.info(f"Validating {len(paths)} documents with {workers} workers")
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="yajsv-worker") as executor:
            futures = [executor.submit(self._run_unit, path, aggregator) for path in paths]
            for future in as_completed(futures):
                future.result()

        return aggregator.finalize(total=len(paths))


def run_all(
    paths: Iterable[str],
    schema: Schema,
    concurrency_limit: Optional[int] = None,
    *,
    allow_bom: bool = False,
    aggregator: Optional[ResultAggregator] = None,
) -> RunSummary:
    """Validate ``paths`` against ``schema`` with bounded parallelism."""
    pool = ValidationWorkerPool(schema, concurrency_limit=concurrency_limit, allow_bom=allow_bom)
    return pool.run(paths, aggregator=aggregator)
