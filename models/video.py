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

"""Gallery entries."""

import uuid
from dataclasses import dataclass

TITLE_MAX_LENGTH = 30


@dataclass
class Video:
    """A generated video in the gallery. Entries are never edited in place."""

    id: str = ""
    title: str = ""
    description: str = ""
    video_url: str = ""


def generated_title(prompt: str, max_length: int = TITLE_MAX_LENGTH) -> str:
    suffix = "..." if len(prompt) > max_length else ""
    return f"Generated: {prompt[:max_length]}{suffix}"


def remix_title(original: Video) -> str:
    return f'Remix of "{original.title}"'


def new_video(title: str, description: str, video_url: str) -> Video:
    """Creates a gallery entry with a fresh id."""
    return Video(
        id=str(uuid.uuid4()),
        title=title,
        description=description,
        video_url=video_url,
    )
