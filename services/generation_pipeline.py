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
from typing import Optional

import requests
from google import genai

from common.analytics import get_logger
from common.error_handling import GenerationError
from config.default import Default
from config.polling import PollingPolicy
from config.veo_models import VeoModelConfig, get_veo_model_config
from models.materialize import (
    DEFAULT_VIDEO_MIME_TYPE,
    EncodedAsset,
    materialize_videos,
)
from models.requests import VideoGenerationRequest
from models.veo import VeoJobClient

logger = get_logger(__name__)


class VideoGenerationPipeline:
    """Submit, poll, then download every generated video of one request."""

    def __init__(
        self,
        jobs: VeoJobClient,
        api_key: str,
        session: Optional[requests.Session] = None,
        fetch_timeout: Optional[float] = None,
        default_mime_type: str = DEFAULT_VIDEO_MIME_TYPE,
    ):
        self.jobs = jobs
        self._api_key = api_key
        self._session = session
        self._fetch_timeout = fetch_timeout
        self._default_mime_type = default_mime_type

    @property
    def model_config(self) -> VeoModelConfig:
        return self.jobs.model_config

    async def generate(
        self,
        request: VideoGenerationRequest,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> list[EncodedAsset]:
        """Runs one request to completion and returns the encoded videos.

        Errors from each stage are raised unchanged; the caller decides how
        to present them.
        """
        job = await self.jobs.submit(request)
        job = await self.jobs.poll(job, cancel_event=cancel_event)
        assets = await materialize_videos(
            job.asset_references,
            self._api_key,
            session=self._session,
            timeout=self._fetch_timeout,
            default_mime_type=self._default_mime_type,
        )
        logger.info(f"Generation {job.name} produced {len(assets)} videos.")
        return assets

    @classmethod
    def from_config(
        cls,
        config: Optional[Default] = None,
        client: Optional[genai.Client] = None,
        session: Optional[requests.Session] = None,
    ) -> "VideoGenerationPipeline":
        """Wires the pipeline from environment configuration."""
        config = config or Default()
        model_config = get_veo_model_config(config.VEO_MODEL_ID)
        if not model_config:
            raise GenerationError(f"Unsupported VEO model version: {config.VEO_MODEL_ID}")
        if client is None:
            client = genai.Client(api_key=config.API_KEY)
        jobs = VeoJobClient(
            client,
            model_config,
            polling=PollingPolicy.from_config(config),
        )
        return cls(
            jobs,
            config.API_KEY,
            session=session,
            fetch_timeout=config.FETCH_TIMEOUT_SECONDS,
            default_mime_type=config.VIDEO_MIME_TYPE,
        )
