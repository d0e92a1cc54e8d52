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

from config.veo_models import ASPECT_RATIOS

_ASPECT_RATIO_LABELS = {
    "16:9": "16:9 (Landscape)",
    "9:16": "9:16 (Portrait)",
}


@me.component
def generate_form(
    *,
    prompt: str,
    prompt_key: int,
    aspect_ratio: str,
    image_name: str,
    on_input_prompt: Callable[[me.InputEvent], None],
    on_select_aspect_ratio: Callable[[me.ClickEvent], None],
    on_upload_image: Callable[[me.UploadEvent], None],
    on_clear_image: Callable[[me.ClickEvent], None],
    on_generate: Callable[[me.ClickEvent], None],
    on_cancel: Callable[[me.ClickEvent], None],
):
    """Prompt, aspect ratio and optional starting image for a new video."""
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
        me.text("Generate a new video", type="headline-5")
        me.textarea(
            key=str(prompt_key),
            label="Describe the video you want to create",
            value=prompt,
            rows=4,
            on_input=on_input_prompt,
            style=me.Style(width="100%"),
        )

        me.text("Aspect ratio", type="subtitle-2")
        with me.box(style=me.Style(display="flex", gap=8)):
            for value in ASPECT_RATIOS:
                me.button(
                    _ASPECT_RATIO_LABELS.get(value, value),
                    key=value,
                    on_click=on_select_aspect_ratio,
                    type="flat" if value == aspect_ratio else "stroked",
                )

        with me.box(style=me.Style(display="flex", align_items="center", gap=8)):
            me.uploader(
                label="Add starting image",
                accepted_file_types=["image/*"],
                on_upload=on_upload_image,
                type="stroked",
            )
            if image_name:
                me.text(image_name)
                me.button("Remove", on_click=on_clear_image)

        with me.box(style=me.Style(display="flex", justify_content="flex-end", gap=8)):
            me.button("Cancel", on_click=on_cancel)
            me.button(
                "Generate",
                on_click=on_generate,
                type="flat",
                disabled=not prompt.strip(),
            )
