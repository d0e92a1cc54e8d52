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
import binascii
from typing import Any, Literal, Optional

import pydantic
from google.genai import types
from pydantic import BaseModel, ConfigDict, Field, field_validator

from common.error_handling import ValidationError
from config.veo_models import ASPECT_RATIOS, VeoModelConfig

AspectRatio = Literal["16:9", "9:16"]


class ReferenceImage(BaseModel):
    """An uploaded starting frame, already base64 encoded."""

    model_config = ConfigDict(frozen=True)

    image_bytes: str = Field(..., min_length=1)
    mime_type: str = Field(..., min_length=1)

    @field_validator("image_bytes")
    @classmethod
    def _is_base64(cls, value: str) -> str:
        try:
            base64.b64decode(value, validate=True)
        except binascii.Error as e:
            raise ValueError("image_bytes must be base64 encoded") from e
        return value

    def raw_bytes(self) -> bytes:
        return base64.b64decode(self.image_bytes)


class VideoGenerationRequest(BaseModel):
    """
    Defines the contract for a video generation request.
    Built fresh for every submission and never modified afterwards.
    """

    model_config = ConfigDict(frozen=True)

    prompt: str
    aspect_ratio: AspectRatio = "16:9"
    image: Optional[ReferenceImage] = None
    video_count: int = Field(1, ge=1)

    @field_validator("prompt")
    @classmethod
    def _prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must not be empty")
        return value

    def to_generate_kwargs(self, model_name: str) -> dict[str, Any]:
        """Keyword arguments for ``client.models.generate_videos``.

        The ``image`` key is only present when a reference image was given;
        the service treats its presence as the image-to-video signal.
        """
        kwargs: dict[str, Any] = {
            "model": model_name,
            "prompt": self.prompt,
            "config": types.GenerateVideosConfig(
                number_of_videos=self.video_count,
                aspect_ratio=self.aspect_ratio,
            ),
        }
        if self.image is not None:
            kwargs["image"] = types.Image(
                image_bytes=self.image.raw_bytes(),
                mime_type=self.image.mime_type,
            )
        return kwargs


def build_generation_request(
    prompt: str,
    aspect_ratio: str,
    image: Optional[ReferenceImage | dict] = None,
    video_count: int = 1,
    model_config: Optional[VeoModelConfig] = None,
) -> VideoGenerationRequest:
    """Validates user input and builds a generation request.

    Raises:
        ValidationError: if the prompt is blank, the aspect ratio or video
            count is not supported, or the image is malformed.
    """
    if not prompt or not prompt.strip():
        raise ValidationError("Prompt cannot be empty for video generation.")

    supported = model_config.supported_aspect_ratios if model_config else ASPECT_RATIOS
    if aspect_ratio not in supported:
        raise ValidationError(
            f"Unsupported aspect ratio {aspect_ratio!r}; expected one of {supported}."
        )

    max_samples = model_config.max_samples if model_config else 4
    if not 1 <= video_count <= max_samples:
        raise ValidationError(f"video_count must be between 1 and {max_samples}.")

    if image is not None and model_config and not model_config.supports_image_input:
        raise ValidationError(
            f"{model_config.display_name} does not accept a starting image."
        )

    try:
        if isinstance(image, dict):
            image = ReferenceImage(**image)
        return VideoGenerationRequest(
            prompt=prompt,
            aspect_ratio=aspect_ratio,
            image=image,
            video_count=video_count,
        )
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid generation request: {e}") from e
