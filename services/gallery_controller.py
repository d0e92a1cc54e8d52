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

"""State machine behind the gallery page."""

import asyncio
from dataclasses import dataclass
from typing import Callable, Optional

from common.analytics import get_logger, log_view_transition
from common.error_handling import (
    EmptyResultError,
    GenerationError,
    classify_error,
    report_error,
)
from models.requests import ReferenceImage, build_generation_request
from models.video import TITLE_MAX_LENGTH, Video, generated_title, new_video, remix_title
from services.generation_pipeline import VideoGenerationPipeline
from state.view_state import Overlay, OverlayKind, PrimaryPage, ViewState

logger = get_logger(__name__)

CREATING_VIDEO_MESSAGE = "Creating your video..."
CREATING_REMIX_MESSAGE = "Creating your remix..."
REMIX_ASPECT_RATIO = "16:9"


def noop_select_api_key() -> None:
    """Used when the host offers no way to pick another API key."""
    return None


@dataclass(frozen=True)
class _PendingGeneration:
    prompt: str
    aspect_ratio: str
    image: Optional[ReferenceImage]
    title: str


class GalleryController:
    """Drives page and overlay transitions and runs generations.

    User triggers return True when they changed the view and False when the
    current state does not allow them. While the progress page is showing
    every user trigger is refused.

    Pass either a ready pipeline or a pipeline_factory. The factory is only
    called when a generation runs, so a misconfigured pipeline fails that
    generation instead of every interaction.
    """

    def __init__(
        self,
        view: ViewState,
        pipeline: Optional[VideoGenerationPipeline] = None,
        select_api_key: Callable[[], None] = noop_select_api_key,
        title_max_length: int = TITLE_MAX_LENGTH,
        pipeline_factory: Optional[Callable[[], VideoGenerationPipeline]] = None,
    ):
        if pipeline is None and pipeline_factory is None:
            raise ValueError("GalleryController needs a pipeline or a pipeline_factory.")
        self.view = view
        self.pipeline = pipeline
        self._pipeline_factory = pipeline_factory
        self._select_api_key = select_api_key
        self._title_max_length = title_max_length
        self._pending: Optional[_PendingGeneration] = None
        self.last_error: Optional[GenerationError] = None

    # Guards

    def _allowed(self, trigger: str, *pages: PrimaryPage) -> bool:
        if self.view.is_saving:
            logger.warning(f"Ignoring '{trigger}' while a video is being created.")
            return False
        if pages and self.view.page not in pages:
            logger.warning(f"Ignoring '{trigger}' on page '{PrimaryPage(self.view.page).value}'.")
            return False
        return True

    def _go(self, page: PrimaryPage, trigger: str):
        page = PrimaryPage(page)
        previous = self.view.page
        self.view.page = page
        log_view_transition(
            PrimaryPage(previous).value,
            page.value,
            trigger,
            overlay=OverlayKind(self.view.overlay.kind).value,
        )

    # Grid and player

    def play(self, video: Video) -> bool:
        if not self._allowed("play", PrimaryPage.GRID):
            return False
        if self.view.overlay.is_error:
            return False
        self.view.overlay = Overlay.player(video)
        return True

    def close_player(self) -> bool:
        if self.view.is_saving or not self.view.overlay.is_player:
            return False
        self.view.overlay = Overlay.none()
        return True

    def dismiss_error(self, select_key: bool = False) -> bool:
        """Clears the error overlay, optionally asking the host for a new key."""
        if not self.view.overlay.is_error:
            return False
        self.view.overlay = Overlay.none()
        self.last_error = None
        if select_key:
            self._select_api_key()
        return True

    # New video

    def start_generate(self) -> bool:
        if not self._allowed("start_generate", PrimaryPage.GRID):
            return False
        self.view.overlay = Overlay.none()
        self.view.editing_video = None
        self._go(PrimaryPage.GENERATE_FORM, "start_generate")
        return True

    def cancel_generate(self) -> bool:
        if not self._allowed("cancel_generate", PrimaryPage.GENERATE_FORM):
            return False
        self._go(PrimaryPage.GRID, "cancel_generate")
        return True

    def begin_generate(
        self,
        prompt: str,
        aspect_ratio: str,
        image: Optional[ReferenceImage] = None,
    ) -> bool:
        """Shows the progress page for a new video. Run it with run_pending()."""
        if not self._allowed("submit_generate", PrimaryPage.GENERATE_FORM):
            return False
        self._pending = _PendingGeneration(
            prompt=prompt,
            aspect_ratio=aspect_ratio,
            image=image,
            title=generated_title(prompt, self._title_max_length),
        )
        self._enter_saving(CREATING_VIDEO_MESSAGE, "submit_generate")
        return True

    async def submit_generate(
        self,
        prompt: str,
        aspect_ratio: str,
        image: Optional[ReferenceImage] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Optional[Video]:
        if not self.begin_generate(prompt, aspect_ratio, image):
            return None
        return await self.run_pending(cancel_event)

    # Remix

    def start_edit(self) -> bool:
        """Opens the editor for the video in the player."""
        if not self._allowed("start_edit", PrimaryPage.GRID):
            return False
        if not self.view.overlay.is_player:
            return False
        self.view.editing_video = self.view.overlay.video
        self.view.overlay = Overlay.none()
        self._go(PrimaryPage.EDIT_FORM, "start_edit")
        return True

    def cancel_edit(self) -> bool:
        if not self._allowed("cancel_edit", PrimaryPage.EDIT_FORM):
            return False
        self.view.editing_video = None
        self._go(PrimaryPage.GRID, "cancel_edit")
        return True

    def begin_remix(self) -> bool:
        if not self._allowed("save_remix", PrimaryPage.EDIT_FORM):
            return False
        original = self.view.editing_video
        if original is None:
            return False
        self._pending = _PendingGeneration(
            prompt=original.description,
            aspect_ratio=REMIX_ASPECT_RATIO,
            image=None,
            title=remix_title(original),
        )
        self.view.editing_video = None
        self._enter_saving(CREATING_REMIX_MESSAGE, "save_remix")
        return True

    async def save_remix(self, cancel_event: Optional[asyncio.Event] = None) -> Optional[Video]:
        if not self.begin_remix():
            return None
        return await self.run_pending(cancel_event)

    # Generation

    def _resolve_pipeline(self) -> VideoGenerationPipeline:
        if self.pipeline is None:
            self.pipeline = self._pipeline_factory()
        return self.pipeline

    def _enter_saving(self, message: str, trigger: str):
        self.view.overlay = Overlay.none()
        self.view.saving_message = message
        self.view.return_page = PrimaryPage.GRID
        self.last_error = None
        self._go(PrimaryPage.SAVING_PROGRESS, trigger)

    async def run_pending(self, cancel_event: Optional[asyncio.Event] = None) -> Optional[Video]:
        """Runs the generation prepared by begin_generate or begin_remix.

        Returns the new gallery entry, or None when generation failed and the
        error overlay is showing. The progress page is always left.
        """
        pending, self._pending = self._pending, None
        if pending is None:
            return None

        try:
            logger.info(
                f"Generating video... prompt={pending.prompt!r} "
                f"aspect_ratio={pending.aspect_ratio} image={pending.image is not None}"
            )
            pipeline = self._resolve_pipeline()
            request = build_generation_request(
                pending.prompt,
                pending.aspect_ratio,
                pending.image,
                model_config=pipeline.model_config,
            )
            assets = await pipeline.generate(request, cancel_event=cancel_event)
            if not assets:
                raise EmptyResultError("Video generation returned no data.")

            logger.info("Generated video data received.")
            video = new_video(
                title=pending.title,
                description=pending.prompt,
                video_url=assets[0].data_url,
            )
            self.view.videos.insert(0, video)
            self.view.overlay = Overlay.player(video)
            return video
        except Exception as e:
            error = classify_error(e)
            logger.error(f"Video generation failed: {error.message}", exc_info=True)
            self.last_error = error
            self.view.overlay = Overlay.error(report_error(error).lines)
            return None
        finally:
            self.view.saving_message = ""
            self._go(self.view.return_page, "generation_finished")
