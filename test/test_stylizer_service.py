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

import base64
import io
import os
import struct
import sys
import zlib
from dataclasses import dataclass

import pytest
from PIL import Image

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from common.error_handling import GenerationError, ReferenceImageError
from common.utils import split_data_url
from config.default import DEFAULT_PROMPT
from models.render_state import Failed, Idle, Loading, Succeeded, derive_render_state
from services import stylizer_service

MAX_BYTES = 4 * 1024 * 1024


@dataclass
class FakePageState:
    """Mirrors the fields of state.stylizer_state.PageState."""

    prompt: str = DEFAULT_PROMPT
    reference_image_name: str = ""
    reference_image_mime_type: str = ""
    reference_image_size: int = 0
    reference_image_preview_url: str = ""
    uploader_generation: int = 0
    is_loading: bool = False
    error_message: str = ""
    generated_image_url: str = ""
    generated_resolution: str = ""


class FakeUpload(io.BytesIO):
    """Stands in for mesop's UploadedFile."""

    def __init__(self, data: bytes, name="photo.png", mime_type="image/png", size=None):
        super().__init__(data)
        self.name = name
        self.mime_type = mime_type
        self.size = len(data) if size is None else size


class UnreadableUpload(FakeUpload):
    def getvalue(self):
        raise OSError("disk went away")


class FakeGenerator:
    def __init__(self, state, result="AAAA", error=None):
        self.state = state
        self.result = result
        self.error = error
        self.calls = []
        self.loading_during_call = None

    def edit_image_with_reference(self, prompt, image_data, mime_type):
        self.calls.append((prompt, image_data, mime_type))
        self.loading_during_call = self.state.is_loading
        if self.error:
            raise self.error
        return self.result


def png_bytes(width=8, height=4):
    img = Image.new('RGB', (width, height), color='pink')
    byte_io = io.BytesIO()
    img.save(byte_io, 'PNG')
    return byte_io.getvalue()


def png_declaring_size(width, height):
    """Builds a minimal PNG whose header claims the given dimensions."""
    def chunk(kind, data):
        return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))

    header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + chunk(b"IHDR", header)
        + chunk(b"IDAT", zlib.compress(b"\x00"))
        + chunk(b"IEND", b"")
    )


def run(steps):
    for _ in steps:
        pass


def state_with_reference(preview_url="data:image/png;base64,AAAA"):
    state = FakePageState()
    state.reference_image_preview_url = preview_url
    state.reference_image_mime_type = "image/png"
    return state


# --- select reference image ---

def test_oversized_file_is_rejected_without_touching_image():
    state = FakePageState()
    upload = FakeUpload(b"tiny", size=MAX_BYTES + 1)

    assert not stylizer_service.select_reference_image(state, upload, MAX_BYTES)

    assert state.error_message == "File is too large. Please upload an image under 4MB."
    assert state.reference_image_preview_url == ""


def test_oversized_file_keeps_previous_image():
    state = state_with_reference("data:image/png;base64,OLD=")

    stylizer_service.select_reference_image(state, FakeUpload(b"x", size=MAX_BYTES + 1), MAX_BYTES)

    assert state.reference_image_preview_url == "data:image/png;base64,OLD="


def test_file_at_limit_is_accepted_and_round_trips():
    data = bytes(range(256)) * (MAX_BYTES // 256)
    state = FakePageState(error_message="stale error")

    assert stylizer_service.select_reference_image(
        state, FakeUpload(data, name="big.jpg", mime_type="image/jpeg"), MAX_BYTES
    )

    mime_type, payload = split_data_url(state.reference_image_preview_url)
    assert mime_type == "image/jpeg"
    assert base64.b64decode(payload) == data
    assert state.reference_image_name == "big.jpg"
    assert state.reference_image_size == MAX_BYTES
    assert state.error_message == ""


def test_missing_mime_type_falls_back_to_octet_stream():
    state = FakePageState()
    stylizer_service.select_reference_image(state, FakeUpload(b"abc", mime_type=""), MAX_BYTES)
    assert state.reference_image_preview_url.startswith("data:application/octet-stream;base64,")


def test_unreadable_file_sets_read_error_and_keeps_previous_image():
    state = state_with_reference("data:image/png;base64,OLD=")

    assert not stylizer_service.select_reference_image(state, UnreadableUpload(b"abc"), MAX_BYTES)

    assert state.error_message == stylizer_service.FILE_READ_FAILED_MESSAGE
    assert state.reference_image_preview_url == "data:image/png;base64,OLD="


# --- clear / prompt ---

def test_clear_removes_image_and_resets_uploader():
    state = FakePageState()
    stylizer_service.select_reference_image(state, FakeUpload(b"abc"), MAX_BYTES)

    stylizer_service.clear_reference_image(state)

    assert not stylizer_service.has_reference_image(state)
    assert state.reference_image_name == ""
    assert state.uploader_generation == 1


def test_update_prompt_replaces_text():
    state = FakePageState()
    stylizer_service.update_prompt(state, "")
    assert state.prompt == ""
    stylizer_service.update_prompt(state, "a cat in a hat")
    assert state.prompt == "a cat in a hat"


# --- generate ---

def test_generate_without_reference_image_makes_no_call():
    state = FakePageState()
    generator = FakeGenerator(state)

    steps = list(stylizer_service.generate_image(state, generator))

    assert steps == []
    assert state.error_message == stylizer_service.MISSING_REFERENCE_MESSAGE
    assert generator.calls == []
    assert not state.is_loading


def test_generate_passes_prompt_payload_and_mime_type():
    state = state_with_reference("data:image/png;base64,AAAA")
    state.prompt = "make it pop"
    generator = FakeGenerator(state)

    run(stylizer_service.generate_image(state, generator))

    assert generator.calls == [("make it pop", "AAAA", "image/png")]


def test_generate_labels_result_as_jpeg():
    state = state_with_reference()
    generator = FakeGenerator(state, result="QUJD")

    run(stylizer_service.generate_image(state, generator))

    assert state.generated_image_url == "data:image/jpeg;base64,QUJD"
    assert state.error_message == ""
    assert state.generated_resolution == ""


def test_generate_records_resolution_of_decodable_result():
    state = state_with_reference()
    result = base64.b64encode(png_bytes(16, 9)).decode("ascii")

    run(stylizer_service.generate_image(state, FakeGenerator(state, result=result)))

    assert state.generated_resolution == "16x9"


def test_loading_flag_spans_the_whole_attempt():
    state = state_with_reference()
    state.generated_image_url = "data:image/jpeg;base64,OLD="
    state.error_message = "old error"
    generator = FakeGenerator(state)

    steps = stylizer_service.generate_image(state, generator)
    next(steps)
    assert state.is_loading
    assert state.error_message == ""
    assert state.generated_image_url == ""
    assert isinstance(derive_render_state(state), Loading)

    run(steps)
    assert generator.loading_during_call is True
    assert not state.is_loading


@pytest.mark.parametrize(
    "preview_url, message",
    [
        ("data:image/png;base64AAAA", "Invalid image data URL format."),
        ("data:image/png;base64,AA,AA", "Invalid image data URL format."),
        ("data:image/png,AAAA", "Could not determine image MIME type."),
        ("data:;base64,AAAA", "Could not determine image MIME type."),
    ],
)
def test_malformed_preview_fails_before_any_call(preview_url, message):
    state = state_with_reference(preview_url)
    generator = FakeGenerator(state)

    run(stylizer_service.generate_image(state, generator))

    assert state.error_message == message
    assert generator.calls == []
    assert not state.is_loading
    assert state.generated_image_url == ""


def test_client_error_message_is_surfaced():
    state = state_with_reference()
    excerpt = "x" * 100
    generator = FakeGenerator(
        state,
        error=GenerationError(f'Gemini API Error: API returned text instead of an image: "{excerpt}..."'),
    )

    run(stylizer_service.generate_image(state, generator))

    assert excerpt in state.error_message
    assert state.generated_image_url == ""
    assert not state.is_loading
    assert derive_render_state(state) == Failed(message=state.error_message)


def test_error_without_message_becomes_unknown_error():
    state = state_with_reference()

    run(stylizer_service.generate_image(state, FakeGenerator(state, error=RuntimeError())))

    assert state.error_message == stylizer_service.UNKNOWN_ERROR_MESSAGE


def test_cleared_image_blocks_generation_regardless_of_prompt():
    state = FakePageState()
    stylizer_service.select_reference_image(state, FakeUpload(png_bytes()), MAX_BYTES)
    stylizer_service.update_prompt(state, "something completely different")
    stylizer_service.clear_reference_image(state)
    generator = FakeGenerator(state)

    run(stylizer_service.generate_image(state, generator))

    assert state.error_message == stylizer_service.MISSING_REFERENCE_MESSAGE
    assert generator.calls == []


# --- render state ---

def test_render_state_variants():
    state = FakePageState()
    assert derive_render_state(state) == Idle()

    state.generated_image_url = "data:image/jpeg;base64,AAAA"
    state.generated_resolution = "8x4"
    assert derive_render_state(state) == Succeeded(image_url="data:image/jpeg;base64,AAAA", resolution="8x4")

    state.error_message = "boom"
    assert derive_render_state(state) == Failed(message="boom")

    state.is_loading = True
    assert derive_render_state(state) == Loading()


def test_size_limit_message_follows_configured_limit():
    state = FakePageState()

    stylizer_service.select_reference_image(state, FakeUpload(b"x", size=3 * 1024 * 1024), 2 * 1024 * 1024)

    assert state.error_message == "File is too large. Please upload an image under 2MB."


def test_encode_reference_image_raises_reference_image_errors():
    with pytest.raises(ReferenceImageError, match="File is too large"):
        stylizer_service.encode_reference_image(FakeUpload(b"x", size=MAX_BYTES + 1), MAX_BYTES)
    with pytest.raises(ReferenceImageError, match="Failed to read the image file"):
        stylizer_service.encode_reference_image(UnreadableUpload(b"abc"), MAX_BYTES)


def test_oversized_result_header_still_counts_as_success():
    state = state_with_reference()
    result = base64.b64encode(png_declaring_size(30000, 30000)).decode("ascii")

    run(stylizer_service.generate_image(state, FakeGenerator(state, result=result)))

    assert state.error_message == ""
    assert state.generated_image_url == f"data:image/jpeg;base64,{result}"
    assert state.generated_resolution == ""
    assert isinstance(derive_render_state(state), Succeeded)
