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
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from common.error_handling import FetchError, GenerationError, SubmissionError
from config.default import Default
from config.polling import PollingPolicy
from config.veo_models import get_veo_model_config
from fakes import ASSET_URI, genai_client, http_response, http_session, operation
from models.materialize import build_download_url, encode_data_url
from models.requests import build_generation_request
from models.veo import VeoJobClient
from services.generation_pipeline import VideoGenerationPipeline


def make_pipeline(client, session):
    jobs = VeoJobClient(client, get_veo_model_config("2.0"), polling=PollingPolicy(interval_seconds=0))
    return VideoGenerationPipeline(jobs, "secret", session=session)


def test_generate_materializes_every_video():
    second_uri = "https://example.com/second.mp4"
    client = genai_client(polled=[operation(done=True, uris=[ASSET_URI, second_uri])])
    session = http_session(http_response(content=b"same"))

    assets = asyncio.run(
        make_pipeline(client, session).generate(build_generation_request("A cat", "16:9", video_count=2))
    )

    assert [a.data_url for a in assets] == [encode_data_url(b"same", "video/mp4")] * 2
    requested = sorted(call.args[0] for call in session.get.call_args_list)
    assert requested == sorted(
        [build_download_url(ASSET_URI, "secret"), build_download_url(second_uri, "secret")]
    )
    assert client.aio.models.generate_videos.await_args.kwargs["config"].number_of_videos == 2


def test_submission_failure_skips_polling_and_download():
    client = genai_client()
    client.aio.models.generate_videos.side_effect = RuntimeError("denied")
    session = http_session(http_response())

    with pytest.raises(SubmissionError):
        asyncio.run(make_pipeline(client, session).generate(build_generation_request("A cat", "16:9")))

    client.aio.operations.get.assert_not_awaited()
    session.get.assert_not_called()


def test_download_failure_propagates():
    client = genai_client(polled=[operation(done=True, uris=[ASSET_URI])])
    session = http_session(http_response(status_code=500, reason="Server Error"))

    with pytest.raises(FetchError):
        asyncio.run(make_pipeline(client, session).generate(build_generation_request("A cat", "16:9")))


def test_from_config_uses_injected_client():
    config = Default()
    config.API_KEY = "secret"
    config.VEO_MODEL_ID = "3.1-fast"
    config.POLL_INTERVAL_SECONDS = 5
    config.POLL_MAX_ATTEMPTS = 12
    client = genai_client()

    pipeline = VideoGenerationPipeline.from_config(config, client=client)

    assert pipeline.model_config.model_name == "veo-3.1-fast-generate-001"
    assert pipeline.jobs.polling.interval_seconds == 5
    assert pipeline.jobs.polling.max_attempts == 12


def test_from_config_rejects_unknown_model():
    config = Default()
    config.VEO_MODEL_ID = "9.9"

    with pytest.raises(GenerationError, match="Unsupported VEO model"):
        VideoGenerationPipeline.from_config(config, client=genai_client())


def test_from_config_sets_fallback_mime_type():
    config = Default()
    config.API_KEY = "secret"
    config.VIDEO_MIME_TYPE = "video/webm"
    config.POLL_INTERVAL_SECONDS = 0
    client = genai_client(polled=[operation(done=True, uris=[ASSET_URI], mime_type=None)])
    session = http_session(http_response(content=b"clip"))

    pipeline = VideoGenerationPipeline.from_config(config, client=client, session=session)
    assets = asyncio.run(pipeline.generate(build_generation_request("A cat", "16:9")))

    assert assets[0].mime_type == "video/webm"
    assert assets[0].data_url.startswith("data:video/webm;base64,")


def test_reported_mime_type_wins_over_fallback():
    client = genai_client(polled=[operation(done=True, uris=[ASSET_URI], mime_type="video/quicktime")])
    session = http_session(http_response())
    jobs = VeoJobClient(client, get_veo_model_config("2.0"), polling=PollingPolicy(interval_seconds=0))
    pipeline = VideoGenerationPipeline(jobs, "secret", session=session, default_mime_type="video/webm")

    assets = asyncio.run(pipeline.generate(build_generation_request("A cat", "16:9")))

    assert assets[0].mime_type == "video/quicktime"
