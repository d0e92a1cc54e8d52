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

"""Which gallery page is showing, and what is layered on top of it."""

import enum
from dataclasses import dataclass, field
from typing import Optional

from models.video import Video


class PrimaryPage(str, enum.Enum):
    """The single top-level page. Exactly one is active at a time."""

    GRID = "grid"
    GENERATE_FORM = "generate_form"
    EDIT_FORM = "edit_form"
    SAVING_PROGRESS = "saving_progress"


class OverlayKind(str, enum.Enum):
    NONE = "none"
    PLAYER = "player"
    ERROR = "error"


@dataclass
class Overlay:
    """At most one overlay: the player for a video, or the error messages."""

    kind: OverlayKind = OverlayKind.NONE
    video: Optional[Video] = None
    messages: list[str] = field(default_factory=list)

    @classmethod
    def none(cls) -> "Overlay":
        return cls()

    @classmethod
    def player(cls, video: Video) -> "Overlay":
        return cls(kind=OverlayKind.PLAYER, video=video)

    @classmethod
    def error(cls, messages: list[str]) -> "Overlay":
        return cls(kind=OverlayKind.ERROR, messages=list(messages))

    @property
    def is_player(self) -> bool:
        return self.kind == OverlayKind.PLAYER

    @property
    def is_error(self) -> bool:
        return self.kind == OverlayKind.ERROR


@dataclass
class ViewState:
    """Gallery view state.

    ``videos`` is newest first. ``return_page`` is where the app lands once
    a generation started from the progress page finishes.
    """

    page: PrimaryPage = PrimaryPage.GRID
    overlay: Overlay = field(default_factory=Overlay)
    videos: list[Video] = field(default_factory=list)
    editing_video: Optional[Video] = None
    saving_message: str = ""
    return_page: PrimaryPage = PrimaryPage.GRID

    @property
    def is_saving(self) -> bool:
        return self.page == PrimaryPage.SAVING_PROGRESS
