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

"""Stand-ins for the genai client and requests session used by the tests."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

ASSET_URI = "https://generativelanguage.googleapis.com/v1beta/files/abc%3Adownload?alt=media"


def operation(
    done=False,
    uris=(),
    name="operations/veo-123",
    error=None,
    filtered_reasons=None,
    mime_type="video/mp4",
):
    """A Veo operation as returned by generate_videos / operations.get."""
    response = None
    if done and error is None:
        response = SimpleNamespace(
            generated_videos=[
                SimpleNamespace(video=SimpleNamespace(uri=uri, mime_type=mime_type))
                for uri in uris
            ],
            rai_media_filtered_count=len(filtered_reasons or []),
            rai_media_filtered_reasons=filtered_reasons or [],
        )
    return SimpleNamespace(name=name, done=done, error=error, response=response)


def genai_client(submitted=None, polled=()):
    """A client whose operations.get returns ``polled`` in order."""
    client = MagicMock()
    client.aio.models.generate_videos = AsyncMock(return_value=submitted or operation())
    client.aio.operations.get = AsyncMock(side_effect=list(polled))
    return client


def http_response(status_code=200, content=b"video-bytes", reason="OK"):
    return SimpleNamespace(
        ok=200 <= status_code < 300,
        status_code=status_code,
        reason=reason,
        content=content,
    )


def http_session(*responses):
    session = MagicMock()
    if len(responses) == 1:
        session.get.return_value = responses[0]
    else:
        session.get.side_effect = list(responses)
    return session
