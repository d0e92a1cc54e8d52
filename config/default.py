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

"""Process-wide configuration read from the environment."""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv(override=True)


def _optional_int(name: str) -> Optional[int]:
    value = os.environ.get(name)
    return int(value) if value else None


def _optional_float(name: str) -> Optional[float]:
    value = os.environ.get(name)
    return float(value) if value else None


@dataclass
class Default:
    """Defaults for the Veo gallery, overridable through environment variables."""

    # pylint: disable=invalid-name

    # Used for both generation calls and asset downloads.
    API_KEY: str = field(
        default_factory=lambda: os.environ.get("API_KEY")
        or os.environ.get("GEMINI_API_KEY", "")
    )

    VEO_MODEL_ID: str = os.environ.get("VEO_MODEL_ID", "2.0")
    VIDEO_MIME_TYPE: str = os.environ.get("VIDEO_MIME_TYPE", "video/mp4")
    TITLE_MAX_LENGTH: int = int(os.environ.get("TITLE_MAX_LENGTH", "30"))

    # Polling
    POLL_INTERVAL_SECONDS: float = float(os.environ.get("POLL_INTERVAL_SECONDS", "10"))
    POLL_MAX_ATTEMPTS: Optional[int] = field(
        default_factory=lambda: _optional_int("POLL_MAX_ATTEMPTS")
    )
    POLL_DEADLINE_SECONDS: Optional[float] = field(
        default_factory=lambda: _optional_float("POLL_DEADLINE_SECONDS")
    )
    POLL_BACKOFF_MULTIPLIER: float = float(
        os.environ.get("POLL_BACKOFF_MULTIPLIER", "1.0")
    )
    POLL_MAX_INTERVAL_SECONDS: Optional[float] = field(
        default_factory=lambda: _optional_float("POLL_MAX_INTERVAL_SECONDS")
    )
    POLL_JITTER_SECONDS: float = float(os.environ.get("POLL_JITTER_SECONDS", "0"))

    FETCH_TIMEOUT_SECONDS: Optional[float] = field(
        default_factory=lambda: _optional_float("FETCH_TIMEOUT_SECONDS")
    )

    APP_TITLE: str = os.environ.get("APP_TITLE", "Veo Gallery")
