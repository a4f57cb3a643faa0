# Copyright 2025 Google LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import base64
import binascii
import io
import re

from absl import logging
from PIL import Image

from common.error_handling import ReferenceImageError

FALLBACK_MIME_TYPE = "application/octet-stream"

_MIME_TYPE_PATTERN = re.compile(r":(.*?);")


def create_data_url(mime_type: str | None, data: bytes) -> str:
    """Encodes raw bytes as a base64 data URL.

    Args:
        mime_type: The MIME type for the header. Falls back to
            application/octet-stream when empty.
        data: The raw file contents.

    Returns:
        A string of the form data:<mime>;base64,<payload>.
    """
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type or FALLBACK_MIME_TYPE};base64,{encoded}"


def create_display_url(base64_payload: str, mime_type: str = "image/jpeg") -> str:
    """Wraps a base64 payload returned by the model into a displayable data URL."""
    return f"data:{mime_type};base64,{base64_payload}"


def split_data_url(data_url: str) -> tuple[str, str]:
    """Splits a data URL into its MIME type and base64 payload.

    Args:
        data_url: A string like data:image/png;base64,AAAA

    Returns:
        A tuple (mime_type, payload).

    Raises:
        ReferenceImageError: If the URL does not have exactly one comma, or
            the header carries no MIME type.
    """
    parts = data_url.split(",")
    if len(parts) != 2:
        raise ReferenceImageError("Invalid image data URL format.")
    header, payload = parts

    match = _MIME_TYPE_PATTERN.search(header)
    if not match or not match.group(1):
        raise ReferenceImageError("Could not determine image MIME type.")
    return match.group(1), payload


def get_image_dimensions_from_base64(base64_string: str) -> tuple[int, int] | None:
    """Retrieves the width and height of an image from a base64 encoded string.

    Args:
        base64_string: The base64 encoded image data.

    Returns:
        A tuple (width, height) if successful, or None if an error occurs.
    """
    try:
        # Remove the data URL prefix if it exists.
        if base64_string.startswith("data:"):
            parts = base64_string.split(",")
            if len(parts) > 1:
                base64_string = parts[1]

        image_data = base64.b64decode(base64_string)
        image_stream = io.BytesIO(image_data)
        with Image.open(image_stream) as img:
            width, height = img.size
        return width, height
    except (binascii.Error, ValueError, OSError, Image.DecompressionBombError) as e:
        logging.info(f"App: Error getting image dimensions: {e}")
        return None
