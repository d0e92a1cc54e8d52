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


import base64
import os
import sys

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from common.error_handling import ValidationError
from config.veo_models import ASPECT_RATIOS, VeoModelConfig, get_veo_model_config
from models.requests import ReferenceImage, VideoGenerationRequest, build_generation_request

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"
PNG_B64 = base64.b64encode(PNG_BYTES).decode("ascii")


def test_build_request_without_image_omits_image_field():
    request = build_generation_request("A cat in a hat", "16:9")

    dumped = request.model_dump(exclude_none=True)
    assert "image" not in dumped
    assert dumped == {"prompt": "A cat in a hat", "aspect_ratio": "16:9", "video_count": 1}

    kwargs = request.to_generate_kwargs("veo-2.0-generate-001")
    assert "image" not in kwargs
    assert kwargs["model"] == "veo-2.0-generate-001"
    assert kwargs["prompt"] == "A cat in a hat"
    assert kwargs["config"].number_of_videos == 1
    assert kwargs["config"].aspect_ratio == "16:9"


def test_build_request_with_image_includes_bytes_and_mime_type():
    request = build_generation_request(
        "Animate this",
        "9:16",
        {"image_bytes": PNG_B64, "mime_type": "image/png"},
    )

    assert request.image == ReferenceImage(image_bytes=PNG_B64, mime_type="image/png")
    assert request.model_dump()["image"] == {"image_bytes": PNG_B64, "mime_type": "image/png"}

    image = request.to_generate_kwargs("veo-2.0-generate-001")["image"]
    assert image.image_bytes == PNG_BYTES
    assert image.mime_type == "image/png"


@pytest.mark.parametrize("prompt", ["", "   ", "\n\t"])
def test_blank_prompt_is_rejected(prompt):
    with pytest.raises(ValidationError):
        build_generation_request(prompt, "16:9")


def test_prompt_is_kept_as_entered():
    request = build_generation_request("  A cat in a hat ", "16:9")
    assert request.prompt == "  A cat in a hat "


def test_unsupported_aspect_ratio_is_rejected():
    with pytest.raises(ValidationError, match="aspect ratio"):
        build_generation_request("A cat", "4:3")


def test_video_count_is_bounded_by_model():
    model_config = get_veo_model_config("2.0")
    request = build_generation_request("A cat", "16:9", video_count=4, model_config=model_config)
    assert request.video_count == 4

    with pytest.raises(ValidationError):
        build_generation_request("A cat", "16:9", video_count=5, model_config=model_config)
    with pytest.raises(ValidationError):
        build_generation_request("A cat", "16:9", video_count=0)


def test_malformed_image_is_a_validation_error():
    with pytest.raises(ValidationError):
        build_generation_request("A cat", "16:9", {"image_bytes": "not base64!", "mime_type": "image/png"})


def test_request_is_immutable():
    request = build_generation_request("A cat", "16:9")
    with pytest.raises(Exception):
        request.prompt = "A dog"
    assert isinstance(request, VideoGenerationRequest)


def test_image_is_rejected_when_model_is_text_only():
    text_only = VeoModelConfig(
        version_id="text-only",
        model_name="veo-text-only",
        display_name="Veo Text Only",
        supported_aspect_ratios=ASPECT_RATIOS,
        supports_image_input=False,
    )
    image = {"image_bytes": PNG_B64, "mime_type": "image/png"}

    with pytest.raises(ValidationError, match="starting image"):
        build_generation_request("Animate this", "16:9", image, model_config=text_only)

    request = build_generation_request("A cat", "16:9", model_config=text_only)
    assert request.image is None
