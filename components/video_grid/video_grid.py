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
def video_grid(videos: list[Video], on_play: Callable[[me.ClickEvent], None]):
    """Grid of generated videos, newest first. Card keys are video ids."""
    if not videos:
        with me.box(
            style=me.Style(
                text_align="center",
                padding=me.Padding.symmetric(vertical=80, horizontal=24),
                border=me.Border.all(
                    me.BorderSide(width=2, style="dashed", color=me.theme_var("outline-variant"))
                ),
                border_radius=12,
                margin=me.Margin(top=32),
            )
        ):
            me.icon("videocam", style=me.Style(font_size=48, width=48, height=48))
            me.text("No videos yet", type="headline-6")
            me.text(
                "Your generated videos will appear here.",
                style=me.Style(color=me.theme_var("on-surface-variant")),
            )
        return

    with me.box(
        style=me.Style(
            display="grid",
            grid_template_columns="repeat(auto-fill, minmax(220px, 1fr))",
            gap=24,
        )
    ):
        for video in videos:
            _video_card(video, on_play)


def _video_card(video: Video, on_play: Callable[[me.ClickEvent], None]):
    with me.box(
        key=video.id,
        on_click=on_play,
        style=me.Style(
            cursor="pointer",
            border_radius=12,
            overflow_x="hidden",
            overflow_y="hidden",
            background=me.theme_var("surface-container"),
        ),
    ):
        me.video(
            src=video.video_url,
            style=me.Style(width="100%", aspect_ratio="16 / 9", display="block"),
        )
        with me.box(style=me.Style(padding=me.Padding.all(12))):
            me.text(video.title, style=me.Style(font_weight="bold"))
            me.text(
                video.description,
                style=me.Style(
                    font_size=12,
                    color=me.theme_var("on-surface-variant"),
                    white_space="nowrap",
                    overflow_x="hidden",
                    text_overflow="ellipsis",
                ),
            )
