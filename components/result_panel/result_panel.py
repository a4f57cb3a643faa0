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

from models.render_state import Failed, Loading, RenderState, Succeeded


@me.component
def result_panel(render_state: RenderState):
    """Renders exactly one of loading, error, result or placeholder."""
    me.text("Generated Image", type="headline-6", style=me.Style(text_align="center"))
    with me.box(
        style=me.Style(
            display="flex",
            align_items="center",
            justify_content="center",
            width="100%",
            min_height=480,
            background=me.theme_var("surface-container-low"),
            border_radius=8,
        )
    ):
        if isinstance(render_state, Loading):
            with me.box(style=me.Style(text_align="center")):
                me.progress_spinner(diameter=48)
                me.text(
                    "The AI is painting your vision...",
                    style=me.Style(margin=me.Margin(top=16)),
                )
        elif isinstance(render_state, Failed):
            with me.box(
                style=me.Style(
                    text_align="center",
                    color=me.theme_var("error"),
                    background=me.theme_var("error-container"),
                    padding=me.Padding.all(16),
                    border_radius=8,
                )
            ):
                me.text("Generation Failed", style=me.Style(font_weight="bold"))
                me.text(render_state.message, style=me.Style(font_size=14))
        elif isinstance(render_state, Succeeded):
            with me.box(style=me.Style(width="100%", height="100%")):
                me.image(
                    src=render_state.image_url,
                    style=me.Style(
                        width="100%",
                        height="100%",
                        object_fit="contain",
                        border_radius=8,
                    ),
                )
                if render_state.resolution:
                    me.text(
                        render_state.resolution,
                        style=me.Style(font_size=12, text_align="center"),
                    )
        else:
            with me.box(style=me.Style(text_align="center")):
                me.icon("image")
                me.text("Your masterpiece will appear here.")
