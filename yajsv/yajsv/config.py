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

"""Run configuration for the validator."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .utils.logging_utils import configure_split_stream_logging


@dataclass
class ValidatorConfig:
    """Configuration threaded through a single validation run.

    Nothing here is process-global: the loader and the worker pool receive
    the values they need as arguments, so runs with different settings can
    coexist in one interpreter.
    """
    allow_bom: bool = False
    quiet: bool = False
    concurrency_limit: Optional[int] = None
    log_level: str = "WARNING"
    print_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        raw_limit = os.getenv('YAJSV_CONCURRENCY', '').strip()
        return cls(
            concurrency_limit=int(raw_limit) if raw_limit else None,
            log_level=os.getenv('YAJSV_LOG_LEVEL', 'WARNING'),
            print_level=os.getenv('YAJSV_PRINT_LEVEL', 'WARNING'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)
        stderr_level = getattr(logging, self.print_level.upper(), logging.WARNING)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('yajsv')
