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

"""Generation error taxonomy and the user-facing error message."""

from typing import NamedTuple, Optional

FAILURE_HEADLINE = "Video generation failed."
FAILURE_HINT = (
    "This may be due to a billing issue. Please ensure your Cloud Project is "
    "on a paid tier to use this feature."
)


class GenerationError(Exception):
    """Custom exception for video generation errors."""

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class ValidationError(GenerationError):
    """The request could not be built from the user's input."""


class SubmissionError(GenerationError):
    """The service rejected or failed the generation submission."""


class PollError(GenerationError):
    """A status query for a running operation failed."""


class PollTimeoutError(PollError):
    """The polling policy ran out of attempts or time."""


class EmptyResultError(GenerationError):
    """The operation finished without producing any videos."""


class FetchError(GenerationError):
    """Downloading a generated video returned a non-success status."""

    def __init__(self, message, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class GenerationCancelledError(GenerationError):
    """The caller cancelled the job while it was being polled."""


class UnknownError(GenerationError):
    """Anything raised by the pipeline that is not a GenerationError."""


class UserMessage(NamedTuple):
    """The two lines shown in the error overlay."""

    headline: str
    hint: str

    @property
    def lines(self) -> list[str]:
        return [self.headline, self.hint]


def classify_error(error: BaseException) -> GenerationError:
    """Wraps uncategorized exceptions so callers always see the taxonomy."""
    if isinstance(error, GenerationError):
        return error
    unknown = UnknownError(f"An unexpected error occurred: {error}")
    unknown.__cause__ = error
    return unknown


def report_error(error: Optional[BaseException]) -> UserMessage:
    """Maps any failure to the fixed message pair.

    The message does not depend on the error kind; the UI only needs to know
    that generation failed.
    """
    return UserMessage(FAILURE_HEADLINE, FAILURE_HINT)
