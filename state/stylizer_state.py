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

import mesop as me

from config.default import DEFAULT_PROMPT

@me.stateclass
class PageState:
    """Image Stylizer Page State"""

    # Input
    prompt: str = DEFAULT_PROMPT

    # Reference image; preview URL is empty when no image is selected
    reference_image_name: str = ""
    reference_image_mime_type: str = ""
    reference_image_size: int = 0
    reference_image_preview_url: str = ""
    uploader_generation: int = 0

    # Generation
    is_loading: bool = False
    error_message: str = ""
    generated_image_url: str = ""
    generated_resolution: str = ""
