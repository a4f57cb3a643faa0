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
"""Render states for the result panel.

The page keeps three flat fields in its stateclass (loading flag, error
message, generated image URL) because Mesop state must serialize cleanly.
The result panel never reads those fields directly; it renders from the
variant returned by `derive_render_state`, so exactly one view is shown.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Idle:
    """Nothing requested yet, or the last result was cleared."""


@dataclass(frozen=True)
class Loading:
    """A generation request is in flight."""


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Succeeded:
    image_url: str
    resolution: str = ""


RenderState = Union[Idle, Loading, Failed, Succeeded]


def derive_render_state(state) -> RenderState:
    """Maps the page state flags to a single render state.

    Loading overrides everything; an error outranks a stale result.
    """
    if state.is_loading:
        return Loading()
    if state.error_message:
        return Failed(message=state.error_message)
    if state.generated_image_url:
        return Succeeded(
            image_url=state.generated_image_url,
            resolution=getattr(state, "generated_resolution", ""),
        )
    return Idle()
