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


import os
import random
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from config.default import Default
from config.polling import PollingPolicy


def test_default_policy_polls_every_ten_seconds_forever():
    policy = PollingPolicy()
    assert [policy.delay_for(n) for n in (1, 2, 50)] == [10.0, 10.0, 10.0]
    assert not policy.attempts_exhausted(10_000)
    assert policy.deadline_seconds is None


def test_backoff_grows_and_is_capped():
    policy = PollingPolicy(interval_seconds=2, backoff_multiplier=2, max_interval_seconds=10)
    assert [policy.delay_for(n) for n in range(1, 6)] == [2, 4, 8, 10, 10]


def test_jitter_adds_bounded_random_delay():
    policy = PollingPolicy(interval_seconds=5, jitter_seconds=1)
    rng = random.Random(7)
    delays = [policy.delay_for(1, rng) for _ in range(20)]
    assert all(5 <= d <= 6 for d in delays)


def test_attempt_cap():
    policy = PollingPolicy(max_attempts=3)
    assert not policy.attempts_exhausted(2)
    assert policy.attempts_exhausted(3)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"interval_seconds": -1},
        {"max_attempts": 0},
        {"backoff_multiplier": 0.5},
        {"jitter_seconds": -0.1},
        {"deadline_seconds": 0},
    ],
)
def test_invalid_policies_are_rejected(kwargs):
    with pytest.raises(ValueError):
        PollingPolicy(**kwargs)


def test_policy_from_config():
    config = Default()
    config.POLL_INTERVAL_SECONDS = 3
    config.POLL_MAX_ATTEMPTS = 40
    config.POLL_DEADLINE_SECONDS = 600
    config.POLL_BACKOFF_MULTIPLIER = 1.5
    config.POLL_MAX_INTERVAL_SECONDS = 30
    config.POLL_JITTER_SECONDS = 0.5

    policy = PollingPolicy.from_config(config)

    assert policy == PollingPolicy(
        interval_seconds=3,
        max_attempts=40,
        backoff_multiplier=1.5,
        max_interval_seconds=30,
        jitter_seconds=0.5,
        deadline_seconds=600,
    )


def test_configured_backoff_is_capped():
    config = Default()
    config.POLL_INTERVAL_SECONDS = 10
    config.POLL_BACKOFF_MULTIPLIER = 2.0
    config.POLL_MAX_INTERVAL_SECONDS = 30
    config.POLL_JITTER_SECONDS = 0

    policy = PollingPolicy.from_config(config)

    assert [policy.delay_for(n) for n in range(1, 6)] == [10, 20, 30, 30, 30]
