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
"""AI Image Stylizer page."""

import uuid

import mesop as me

from common.analytics import get_logger, log_page_view, track_click
from components.reference_uploader.reference_uploader import reference_uploader
from components.result_panel.result_panel import result_panel
from config.default import Default
from models.gemini import GeminiImageEditor
from models.render_state import derive_render_state
from services import stylizer_service
from state.state import AppState
from state.stylizer_state import PageState

config = Default()

logger = get_logger(__name__)

# Raises ConfigurationError at import when no API key is configured
generator = GeminiImageEditor.from_config(config)
logger.info(f"Using image model {generator.model_config.model_name}")

PAGE_NAME = "stylizer"

PANEL_STYLE = me.Style(
    flex_basis=480,
    flex_grow=1,
    display="flex",
    flex_direction="column",
    gap=24,
    background=me.theme_var("surface-container-lowest"),
    padding=me.Padding.all(24),
    border_radius=16,
)


def on_load(e: me.LoadEvent):  # pylint: disable=unused-argument
    app_state = me.state(AppState)
    if not app_state.session_id:
        app_state.session_id = str(uuid.uuid4())
    app_state.current_page = PAGE_NAME
    log_page_view(PAGE_NAME, app_state.session_id)


@me.page(
    path="/",
    title="AI Image Stylizer",
    on_load=on_load,
)
def page():
    """Define the Mesop page route for the image stylizer."""
    stylizer_page_content()


def stylizer_page_content():
    """Renders the controls and the result panel."""
    state = me.state(PageState)

    with me.box(
        style=me.Style(
            padding=me.Padding.all(24),
            display="flex",
            flex_direction="column",
            gap=24,
        )
    ):
        with me.box(style=me.Style(text_align="center")):
            me.text("AI Image Stylizer", type="headline-4")
            me.text("Generate a new image from a reference photo and a detailed prompt.")

        with me.box(style=me.Style(display="flex", flex_direction="row", flex_wrap="wrap", gap=24)):
            # Controls
            with me.box(style=PANEL_STYLE):
                with me.box():
                    reference_uploader(
                        preview_url=state.reference_image_preview_url,
                        uploader_generation=state.uploader_generation,
                        on_upload=on_upload,
                        on_clear=on_clear,
                    )

                with me.box():
                    me.text("2. Refine Your Prompt", type="headline-6")
                    me.textarea(
                        label="Prompt",
                        placeholder="Describe the image you want to create...",
                        value=state.prompt,
                        on_input=on_input_prompt,
                        rows=10,
                        style=me.Style(width="100%"),
                    )

                generate_button(state)

            # Output
            with me.box(style=PANEL_STYLE):
                result_panel(derive_render_state(state))


def generate_button(state: PageState):
    disabled = state.is_loading or not stylizer_service.has_reference_image(state)
    with me.content_button(
        on_click=on_click_generate,
        type="raised",
        disabled=disabled,
        style=me.Style(width="100%"),
    ):
        with me.box(
            style=me.Style(
                display="flex",
                flex_direction="row",
                align_items="center",
                justify_content="center",
                gap=8,
            )
        ):
            if state.is_loading:
                me.progress_spinner(diameter=20, stroke_width=3)
                me.text("Generating...")
            else:
                me.icon("auto_awesome")
                me.text("Generate Image")


# --- Event Handlers ---

def on_upload(e: me.UploadEvent):
    state = me.state(PageState)
    stylizer_service.select_reference_image(state, e.files[0], config.MAX_UPLOAD_BYTES)
    yield


def on_clear(e: me.ClickEvent):  # pylint: disable=unused-argument
    """Clears the reference image."""
    stylizer_service.clear_reference_image(me.state(PageState))
    yield


def on_input_prompt(e: me.InputEvent):
    stylizer_service.update_prompt(me.state(PageState), e.value)


@track_click(element_id="stylizer_generate_button")
def on_click_generate(e: me.ClickEvent):  # pylint: disable=unused-argument
    """Image stylizer generate request handler."""
    state = me.state(PageState)
    yield from stylizer_service.generate_image(state, generator)
    yield
