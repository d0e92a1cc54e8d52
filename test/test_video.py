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


import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from models.video import Video, generated_title, new_video, remix_title


def test_short_prompt_title_is_not_truncated():
    assert generated_title("A cat in a hat") == "Generated: A cat in a hat"


def test_thirty_character_prompt_has_no_ellipsis():
    prompt = "x" * 30
    assert generated_title(prompt) == f"Generated: {prompt}"
    assert generated_title(prompt + "y") == f"Generated: {prompt}..."


def test_remix_title_quotes_original():
    original = Video(id="1", title="Generated: A dog", description="A dog")
    assert remix_title(original) == 'Remix of "Generated: A dog"'


def test_new_video_ids_are_unique():
    first = new_video("t", "d", "data:,")
    second = new_video("t", "d", "data:,")
    assert first.id and second.id and first.id != second.id
