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

"""Downloads generated videos and turns them into playable data URLs."""

import asyncio
import base64
import urllib.parse
from dataclasses import dataclass
from typing import Optional, Sequence

import requests

from common.analytics import get_logger
from common.error_handling import FetchError
from models.veo import AssetReference

logger = get_logger(__name__)

DEFAULT_VIDEO_MIME_TYPE = "video/mp4"


@dataclass(frozen=True)
class EncodedAsset:
    """A downloaded video encoded as a data URL."""

    mime_type: str
    data_url: str
    size_bytes: int


def build_download_url(uri: str, api_key: str) -> str:
    """Appends the API key to a generated video's URI as the ``key`` parameter."""
    url = urllib.parse.unquote(uri)
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}key={urllib.parse.quote(api_key, safe='')}"


def encode_data_url(payload: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def _download_and_encode(
    reference: AssetReference,
    api_key: str,
    http,
    timeout: Optional[float],
    default_mime_type: str,
) -> EncodedAsset:
    url = build_download_url(reference.uri, api_key)
    logger.info(f"Fetching generated video: {urllib.parse.unquote(reference.uri)}")
    try:
        response = http.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch video: {e}") from e

    if not response.ok:
        raise FetchError(
            f"Failed to fetch video: {response.status_code} {response.reason}",
            status_code=response.status_code,
        )

    payload = response.content
    mime_type = reference.mime_type or default_mime_type
    return EncodedAsset(
        mime_type=mime_type,
        data_url=encode_data_url(payload, mime_type),
        size_bytes=len(payload),
    )


async def materialize_videos(
    asset_references: Sequence[AssetReference],
    api_key: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    default_mime_type: str = DEFAULT_VIDEO_MIME_TYPE,
) -> list[EncodedAsset]:
    """Downloads and encodes every reference concurrently.

    Results keep the order of ``asset_references``. The first failed
    download is raised once the others have been scheduled.
    """
    http = session or requests
    tasks = [
        asyncio.to_thread(
            _download_and_encode, reference, api_key, http, timeout, default_mime_type
        )
        for reference in asset_references
    ]
    assets = await asyncio.gather(*tasks)
    logger.info(f"Materialized {len(assets)} videos.")
    return list(assets)
