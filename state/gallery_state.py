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


from dataclasses import field

import mesop as me

from state.view_state import ViewState


@me.stateclass
class PageState:
    """Mesop Page State"""

    # pylint: disable=E3701:invalid-field-call

    view: ViewState = field(default_factory=ViewState)

    # Generate form
    prompt_input: str = ""
    prompt_textarea_key: int = 0
    aspect_ratio: str = "16:9"
    reference_image_bytes: str = ""
    reference_image_mime_type: str = ""
    reference_image_name: str = ""
