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

"""Veo gallery mesop UI page."""

import base64
import functools

import mesop as me

from components.edit_form.edit_form import edit_form
from components.error_dialog.error_dialog import error_dialog
from components.generate_form.generate_form import generate_form
from components.saving_progress.saving_progress import saving_progress
from components.video_grid.video_grid import video_grid
from components.video_player.video_player import video_player
from config.default import Default
from models.requests import ReferenceImage
from services.gallery_controller import GalleryController, noop_select_api_key
from services.generation_pipeline import VideoGenerationPipeline
from state.gallery_state import PageState
from state.view_state import PrimaryPage

config = Default()


@functools.lru_cache(maxsize=1)
def _pipeline() -> VideoGenerationPipeline:
    return VideoGenerationPipeline.from_config(config)


def _controller() -> GalleryController:
    state = me.state(PageState)
    return GalleryController(
        state.view,
        select_api_key=noop_select_api_key,
        title_max_length=config.TITLE_MAX_LENGTH,
        pipeline_factory=_pipeline,
    )


@me.page(path="/", title=config.APP_TITLE)
def gallery_page():
    """Main Page."""
    state = me.state(PageState)
    view = state.view

    if view.page == PrimaryPage.SAVING_PROGRESS:
        saving_progress(view.saving_message)
        return

    if view.page == PrimaryPage.GENERATE_FORM:
        generate_form(
            prompt=state.prompt_input,
            prompt_key=state.prompt_textarea_key,
            aspect_ratio=state.aspect_ratio,
            image_name=state.reference_image_name,
            on_input_prompt=on_input_prompt,
            on_select_aspect_ratio=on_select_aspect_ratio,
            on_upload_image=on_upload_image,
            on_clear_image=on_clear_image,
            on_generate=on_click_generate,
            on_cancel=on_click_cancel_generate,
        )
    elif view.page == PrimaryPage.EDIT_FORM and view.editing_video:
        edit_form(view.editing_video, on_save=on_click_remix, on_cancel=on_click_cancel_edit)
    else:
        gallery_content(state)

    if view.overlay.is_player and view.overlay.video:
        video_player(view.overlay.video, on_close=on_close_player, on_edit=on_click_edit)

    if view.overlay.is_error:
        error_dialog(
            view.overlay.messages,
            on_close=on_close_error_dialog,
            on_select_key=on_click_select_key,
        )


def gallery_content(state: PageState):
    with me.box(style=me.Style(max_width=1080, margin=me.Margin.symmetric(horizontal="auto"))):
        with me.box(style=me.Style(padding=me.Padding.all(32), text_align="center")):
            me.text(config.APP_TITLE, type="headline-3")
            me.text("Generate a new video to get started.")
            with me.box(style=me.Style(margin=me.Margin(top=24))):
                me.button("Generate New Video", on_click=on_click_new_video, type="flat")
        with me.box(style=me.Style(padding=me.Padding.symmetric(horizontal=32, vertical=0))):
            video_grid(state.view.videos, on_play=on_click_video)


def _clear_form(state: PageState):
    state.prompt_input = ""
    state.prompt_textarea_key += 1
    state.aspect_ratio = "16:9"
    state.reference_image_bytes = ""
    state.reference_image_mime_type = ""
    state.reference_image_name = ""


def on_click_new_video(e: me.ClickEvent):  # pylint: disable=unused-argument
    state = me.state(PageState)
    if _controller().start_generate():
        _clear_form(state)
    yield


def on_click_cancel_generate(e: me.ClickEvent):  # pylint: disable=unused-argument
    _controller().cancel_generate()
    yield


def on_input_prompt(e: me.InputEvent):
    state = me.state(PageState)
    state.prompt_input = e.value
    yield


def on_select_aspect_ratio(e: me.ClickEvent):
    state = me.state(PageState)
    state.aspect_ratio = e.key
    yield


def on_upload_image(e: me.UploadEvent):
    """Keep the uploaded image base64 encoded in state."""
    state = me.state(PageState)
    state.reference_image_bytes = base64.b64encode(e.file.getvalue()).decode("ascii")
    state.reference_image_mime_type = e.file.mime_type
    state.reference_image_name = e.file.name
    yield


def on_clear_image(e: me.ClickEvent):  # pylint: disable=unused-argument
    state = me.state(PageState)
    state.reference_image_bytes = ""
    state.reference_image_mime_type = ""
    state.reference_image_name = ""
    yield


async def on_click_generate(e: me.ClickEvent):  # pylint: disable=unused-argument
    """Show the progress page, then run the generation."""
    state = me.state(PageState)
    image = None
    if state.reference_image_bytes:
        image = ReferenceImage(
            image_bytes=state.reference_image_bytes,
            mime_type=state.reference_image_mime_type,
        )
    controller = _controller()
    if not controller.begin_generate(state.prompt_input, state.aspect_ratio, image):
        yield
        return
    yield
    await controller.run_pending()
    yield


def on_click_video(e: me.ClickEvent):
    state = me.state(PageState)
    video = next((v for v in state.view.videos if v.id == e.key), None)
    if video:
        _controller().play(video)
    yield


def on_close_player(e: me.ClickEvent):  # pylint: disable=unused-argument
    _controller().close_player()
    yield


def on_click_edit(e: me.ClickEvent):  # pylint: disable=unused-argument
    _controller().start_edit()
    yield


def on_click_cancel_edit(e: me.ClickEvent):  # pylint: disable=unused-argument
    _controller().cancel_edit()
    yield


async def on_click_remix(e: me.ClickEvent):  # pylint: disable=unused-argument
    controller = _controller()
    if not controller.begin_remix():
        yield
        return
    yield
    await controller.run_pending()
    yield


def on_close_error_dialog(e: me.ClickEvent):  # pylint: disable=unused-argument
    """Handler to close the error dialog."""
    _controller().dismiss_error()
    yield


def on_click_select_key(e: me.ClickEvent):  # pylint: disable=unused-argument
    _controller().dismiss_error(select_key=True)
    yield
