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


from typing import Callable

import mesop as me

from models.video import Video


@me.component
def edit_form(
    video: Video,
    on_save: Callable[[me.ClickEvent], None],
    on_cancel: Callable[[me.ClickEvent], None],
):
    """Confirms a remix of an existing video's prompt."""
    with me.box(
        style=me.Style(
            max_width=720,
            margin=me.Margin.symmetric(horizontal="auto", vertical=48),
            padding=me.Padding.all(24),
            border_radius=12,
            background=me.theme_var("surface-container"),
            display="flex",
            flex_direction="column",
            gap=16,
        )
    ):
        me.text("Remix video", type="headline-5")
        me.text(video.title, type="subtitle-1")
        me.text("Prompt", type="subtitle-2")
        me.text(video.description, style=me.Style(white_space="pre-wrap"))
        with me.box(style=me.Style(display="flex", justify_content="flex-end", gap=8)):
            me.button("Cancel", on_click=on_cancel)
            me.button("Create remix", key=video.id, on_click=on_save, type="flat")
