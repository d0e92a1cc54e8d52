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


@me.component
def error_dialog(
    messages: list[str],
    on_close: Callable[[me.ClickEvent], None],
    on_select_key: Callable[[me.ClickEvent], None],
):
    """Modal listing the failure headline and hint."""
    with me.box(
        style=me.Style(
            background="rgba(0, 0, 0, 0.6)",
            display="flex",
            align_items="center",
            justify_content="center",
            position="fixed",
            top=0,
            left=0,
            width="100%",
            height="100%",
            z_index=1001,
        )
    ):
        with me.box(
            style=me.Style(
                background=me.theme_var("surface"),
                border_radius=12,
                padding=me.Padding.all(24),
                max_width=520,
            )
        ):
            me.text(
                "Generation Error",
                type="headline-6",
                style=me.Style(color=me.theme_var("error")),
            )
            for line in messages:
                me.text(line, style=me.Style(margin=me.Margin(top=12)))
            with me.box(
                style=me.Style(
                    display="flex",
                    justify_content="flex-end",
                    gap=8,
                    margin=me.Margin(top=24),
                )
            ):
                me.button("Select API key", on_click=on_select_key)
                me.button("Close", on_click=on_close, type="flat")
