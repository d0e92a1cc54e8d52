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


import asyncio
import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional

from google import genai

from common.analytics import get_logger, track_model_call
from common.error_handling import (
    EmptyResultError,
    GenerationCancelledError,
    PollError,
    PollTimeoutError,
    SubmissionError,
)
from config.polling import PollingPolicy
from config.veo_models import VeoModelConfig
from models.requests import VideoGenerationRequest

logger = get_logger(__name__)


@dataclass(frozen=True)
class AssetReference:
    """Where a generated video can be downloaded from."""

    uri: str
    mime_type: Optional[str] = None


@dataclass
class GenerationJob:
    """A submitted Veo operation and, once done, its generated videos."""

    operation: Any
    name: Optional[str] = None
    done: bool = False
    asset_references: list[AssetReference] = field(default_factory=list)

    @classmethod
    def from_operation(cls, operation: Any) -> "GenerationJob":
        return cls(
            operation=operation,
            name=getattr(operation, "name", None),
            done=bool(getattr(operation, "done", False)),
        )


class VeoJobClient:
    """Submits Veo generation jobs and polls them until they finish.

    The genai client is passed in rather than created at import time so the
    job flow can run against a fake service.
    """

    def __init__(
        self,
        client: genai.Client,
        model_config: VeoModelConfig,
        polling: Optional[PollingPolicy] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._client = client
        self.model_config = model_config
        self.polling = polling or PollingPolicy()
        self._clock = clock
        self._sleep = sleep

    async def submit(self, request: VideoGenerationRequest) -> GenerationJob:
        """Starts a generation. Billable; never retried."""
        model_name = self.model_config.model_name
        mode = "i2v" if request.image is not None else "t2v"
        logger.info(
            f"Calling generate_videos with model: {model_name}, mode: {mode}, "
            f"aspect_ratio: {request.aspect_ratio}, count: {request.video_count}"
        )
        try:
            with track_model_call(
                model_name,
                mode=mode,
                prompt_length=len(request.prompt),
                aspect_ratio=request.aspect_ratio,
                video_count=request.video_count,
            ):
                operation = await self._client.aio.models.generate_videos(
                    **request.to_generate_kwargs(model_name)
                )
        except Exception as e:
            raise SubmissionError(f"Failed to start video generation: {e}") from e

        job = GenerationJob.from_operation(operation)
        logger.info(f"Submitted operation: {job.name}")
        return job

    async def poll(
        self,
        job: GenerationJob,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> GenerationJob:
        """Re-queries the operation until the service reports it done.

        At least one status query is always made. Each query failure is
        raised as PollError without retrying. With a deadline, no wait runs
        past it.
        """
        policy = self.polling
        operation = job.operation
        started = self._clock()
        attempts = 0

        logger.info(f"Polling video generation operation {job.name}...")
        while True:
            delay = policy.delay_for(attempts + 1)
            if policy.deadline_seconds is not None:
                elapsed = self._clock() - started
                remaining = policy.deadline_seconds - elapsed
                if remaining <= 0:
                    raise PollTimeoutError(
                        f"Operation {job.name} not done after {elapsed:.0f} seconds."
                    )
                delay = min(delay, remaining)
            await self._wait(delay, cancel_event)
            attempts += 1
            try:
                operation = await self._client.aio.operations.get(operation)
            except Exception as e:
                raise PollError(f"Failed to query operation {job.name}: {e}") from e

            if operation.done:
                break

            logger.info(f"Operation in progress: {job.name} (query {attempts})")
            if policy.attempts_exhausted(attempts):
                raise PollTimeoutError(
                    f"Operation {job.name} not done after {attempts} status queries."
                )
        return self._finish(job, operation)

    async def _wait(self, delay: float, cancel_event: Optional[asyncio.Event]):
        if cancel_event is None:
            await self._sleep(delay)
            return
        if not cancel_event.is_set():
            try:
                await asyncio.wait_for(cancel_event.wait(), timeout=delay)
            except asyncio.TimeoutError:
                return
        raise GenerationCancelledError("Video generation was cancelled.")

    def _finish(self, job: GenerationJob, operation: Any) -> GenerationJob:
        if operation.error:
            logger.info(f"Video generation failed with error: {operation.error}")
            raise PollError(f"API Error: {operation.error}")

        response = operation.response
        generated = (getattr(response, "generated_videos", None) or []) if response else []
        references = []
        for generated_video in generated:
            video = getattr(generated_video, "video", None)
            if video is None or not video.uri:
                logger.warning(f"Skipping generated video without a URI in {job.name}")
                continue
            references.append(AssetReference(uri=video.uri, mime_type=video.mime_type))

        if not references:
            filtered_count = getattr(response, "rai_media_filtered_count", None)
            if filtered_count:
                reasons = getattr(response, "rai_media_filtered_reasons", None) or []
                reason = reasons[0] if reasons else "unspecified"
                raise EmptyResultError(f"Content Filtered: {reason}")
            raise EmptyResultError("No videos generated")

        logger.info(f"Successfully generated {len(references)} videos.")
        return GenerationJob(
            operation=operation,
            name=job.name,
            done=True,
            asset_references=references,
        )
