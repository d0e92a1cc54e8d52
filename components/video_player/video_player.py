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

from components.lightbox_dialog.lightbox_dialog import lightbox_dialog
from models.video import Video


@me.component
def video_player(
    video: Video,
    on_close: Callable[[me.ClickEvent], None],
    on_edit: Callable[[me.ClickEvent], None],
):
    """Plays one gallery video and offers a remix."""
    with lightbox_dialog(is_open=True, on_close=on_close, key=f"player-{video.id}"):  # pylint: disable=not-context-manager
        me.video(
            key=video.id,
            src=video.video_url,
            style=me.Style(width="100%", border_radius=8, display="block"),
        )
        me.text(video.title, type="headline-6", style=me.Style(margin=me.Margin(top=16)))
        me.text(video.description, style=me.Style(color=me.theme_var("on-surface-variant")))
        with me.box(style=me.Style(display="flex", justify_content="flex-end", margin=me.Margin(top=16))):
            me.button("Remix", key=video.id, on_click=on_edit, type="flat")
