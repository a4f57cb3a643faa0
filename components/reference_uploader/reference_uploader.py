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
"""
Component for uploading the reference image.
"""

from typing import Callable

import mesop as me

from config.default import ACCEPTED_IMAGE_TYPES


IMAGE_PLACEHOLDER_STYLE = me.Style(
    width="100%",
    min_height=240,
    border=me.Border.all(
        me.BorderSide(width=2, style="dashed", color=me.theme_var("outline-variant")),
    ),
    border_radius=8,
    display="flex",
    align_items="center",
    justify_content="center",
    flex_direction="column",
    gap=8,
    padding=me.Padding.all(24),
)


@me.component
def reference_uploader(
    preview_url: str,
    uploader_generation: int,
    on_upload: Callable,
    on_clear: Callable,
):
    """
    Shows the selected reference image with a clear button, or an uploader.
    """
    me.text("1. Upload Reference Image", type="headline-6")
    if preview_url:
        with me.box(style=me.Style(position="relative")):
            me.image(
                src=preview_url,
                style=me.Style(
                    width="100%",
                    max_height=320,
                    object_fit="contain",
                    border_radius=8,
                ),
            )
            with me.box(style=me.Style(position="absolute", top=8, right=8)):
                with me.content_button(on_click=on_clear, type="icon"):
                    me.icon("cancel")
    else:
        with me.box(style=IMAGE_PLACEHOLDER_STYLE):
            me.icon("upload")
            me.uploader(
                key=f"reference_uploader_{uploader_generation}",
                label="Click to upload",
                on_upload=on_upload,
                accepted_file_types=ACCEPTED_IMAGE_TYPES,
                type="flat",
            )
            me.text("PNG, JPG, or WEBP (max 4MB)", style=me.Style(font_size=12))
