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

"""Concurrent validation of document batches."""

from .aggregator import ResultAggregator, RunSummary, exit_code_for
from .outcome import OutcomeKind, ValidationOutcome
from .worker_pool import ValidationWorkerPool, default_concurrency_limit, run_all, validate_document

__all__ = [
    'OutcomeKind',
    'ResultAggregator',
    'RunSummary',
    'ValidationOutcome',
    'ValidationWorkerPool',
    'default_concurrency_limit',
    'exit_code_for',
    'run_all',
    'validate_document',
]
