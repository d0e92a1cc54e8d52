# Copyright 2025 Google LLC
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

"""Polling policy for long-running generation operations."""

import random
from dataclasses import dataclass
from typing import Optional

from config.default import Default


@dataclass(frozen=True)
class PollingPolicy:
    """How often, and for how long, a generation operation is re-queried.

    The defaults poll every 10 seconds with no attempt cap and no deadline,
    which matches how the Veo service is normally driven. ``max_attempts``
    counts status queries, not sleeps.
    """

    interval_seconds: float = 10.0
    max_attempts: Optional[int] = None
    backoff_multiplier: float = 1.0
    max_interval_seconds: Optional[float] = None
    jitter_seconds: float = 0.0
    deadline_seconds: Optional[float] = None

    def __post_init__(self):
        if self.interval_seconds < 0:
            raise ValueError("interval_seconds must not be negative")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.backoff_multiplier < 1.0:
            raise ValueError("backoff_multiplier must be >= 1.0")
        if self.jitter_seconds < 0:
            raise ValueError("jitter_seconds must not be negative")
        if self.deadline_seconds is not None and self.deadline_seconds <= 0:
            raise ValueError("deadline_seconds must be positive")

    def delay_for(self, attempt: int, rng: Optional[random.Random] = None) -> float:
        """Returns the wait before status query number ``attempt`` (1-based)."""
        delay = self.interval_seconds * (self.backoff_multiplier ** max(attempt - 1, 0))
        if self.max_interval_seconds is not None:
            delay = min(delay, self.max_interval_seconds)
        if self.jitter_seconds:
            delay += (rng or random).uniform(0, self.jitter_seconds)
        return delay

    def attempts_exhausted(self, attempts: int) -> bool:
        return self.max_attempts is not None and attempts >= self.max_attempts

    @classmethod
    def from_config(cls, config: Optional[Default] = None) -> "PollingPolicy":
        """Builds a policy from the environment-backed defaults."""
        config = config or Default()
        return cls(
            interval_seconds=config.POLL_INTERVAL_SECONDS,
            max_attempts=config.POLL_MAX_ATTEMPTS,
            backoff_multiplier=config.POLL_BACKOFF_MULTIPLIER,
            max_interval_seconds=config.POLL_MAX_INTERVAL_SECONDS,
            jitter_seconds=config.POLL_JITTER_SECONDS,
            deadline_seconds=config.POLL_DEADLINE_SECONDS,
        )
