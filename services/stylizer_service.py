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
"""Operations behind the stylizer page.

Each function takes the page state object and mutates it in place. They do
not touch Mesop directly so they can run against any object with the same
fields as `state.stylizer_state.PageState`.
"""

import logging
from typing import Iterator

from common.error_handling import ReferenceImageError
from common.utils import (
    create_data_url,
    create_display_url,
    get_image_dimensions_from_base64,
    split_data_url,
)
from models.gemini import ImageGenerator

logger = logging.getLogger(__name__)

MISSING_REFERENCE_MESSAGE = "Please upload a reference image first."
FILE_READ_FAILED_MESSAGE = "Failed to read the image file."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


def file_too_large_message(max_bytes: int) -> str:
    return f"File is too large. Please upload an image under {max_bytes / (1024 * 1024):g}MB."


def has_reference_image(state) -> bool:
    return bool(state.reference_image_preview_url)


def encode_reference_image(file, max_bytes: int) -> str:
    """Checks the size of an uploaded file and encodes it as a data URL.

    Raises:
        ReferenceImageError: If the file is too large or cannot be read.
    """
    if file.size > max_bytes:
        logger.warning(f"Rejected reference image {file.name}: {file.size} bytes")
        raise ReferenceImageError(file_too_large_message(max_bytes))

    try:
        return create_data_url(file.mime_type, file.getvalue())
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read reference image {file.name}: {e}")
        raise ReferenceImageError(FILE_READ_FAILED_MESSAGE) from e


def select_reference_image(state, file, max_bytes: int) -> bool:
    """Validates and encodes an uploaded file as the current reference image.

    Args:
        state: The page state.
        file: Uploaded file exposing name, mime_type, size and getvalue().
        max_bytes: Largest accepted file size.

    Returns:
        True if the reference image was replaced.
    """
    try:
        preview_url = encode_reference_image(file, max_bytes)
    except ReferenceImageError as e:
        state.error_message = e.message
        return False

    state.reference_image_name = file.name
    state.reference_image_mime_type = file.mime_type
    state.reference_image_size = file.size
    state.reference_image_preview_url = preview_url
    state.error_message = ""
    logger.info(f"Selected reference image {file.name} ({file.mime_type}, {file.size} bytes)")
    return True


def clear_reference_image(state):
    """Drops the reference image and resets the uploader."""
    state.reference_image_name = ""
    state.reference_image_mime_type = ""
    state.reference_image_size = 0
    state.reference_image_preview_url = ""
    # A new uploader key forces a fresh file input, so the same file can be picked again
    state.uploader_generation += 1


def update_prompt(state, value: str):
    state.prompt = value


def generate_image(state, generator: ImageGenerator) -> Iterator[None]:
    """Runs one generation attempt, yielding whenever the UI should refresh.

    The first yield happens with the loading flag set; the last with it
    cleared. Nothing is yielded when no reference image is present.
    """
    if not has_reference_image(state):
        state.error_message = MISSING_REFERENCE_MESSAGE
        return

    state.is_loading = True
    state.error_message = ""
    state.generated_image_url = ""
    state.generated_resolution = ""
    yield

    try:
        mime_type, base64_data = split_data_url(state.reference_image_preview_url)
        result_base64 = generator.edit_image_with_reference(
            state.prompt, base64_data, mime_type
        )
        dimensions = get_image_dimensions_from_base64(result_base64)
        if dimensions:
            state.generated_resolution = f"{dimensions[0]}x{dimensions[1]}"
        # Result is assigned last; an error and a result are never both set
        state.generated_image_url = create_display_url(result_base64)
    except ReferenceImageError as e:
        logger.error(f"Reference image rejected: {e.message}")
        state.error_message = e.message
    except Exception as e:
        logger.error(f"Image generation failed: {e}")
        state.error_message = str(e) or UNKNOWN_ERROR_MESSAGE
    finally:
        state.is_loading = False
        yield
