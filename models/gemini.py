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
"""Gemini image editing conditioned on a reference image."""

import base64
from typing import Protocol

from google import genai
from google.genai import types

from common.analytics import get_logger, track_model_call
from common.error_handling import ConfigurationError, GenerationError
from config.default import Default
from config.gemini_image_models import (
    GeminiImageModelConfig,
    get_gemini_image_model_config,
)
from models.requests import ImageEditRequest

logger = get_logger(__name__)

# Length of the model's text reply quoted back when no image was returned
TEXT_EXCERPT_LENGTH = 100


class ImageGenerator(Protocol):
    """Anything that can turn a prompt plus reference image into a new image."""

    def edit_image_with_reference(
        self, prompt: str, image_data: str, mime_type: str
    ) -> str:
        ...


def extract_image_payload(response: types.GenerateContentResponse) -> str:
    """Returns the first inline image of the first candidate as base64.

    Raises:
        GenerationError: If the response holds text only, or nothing at all.
    """
    candidates = response.candidates or []
    if candidates and candidates[0].content and candidates[0].content.parts:
        for part in candidates[0].content.parts:
            if part.inline_data and part.inline_data.data:
                return base64.b64encode(part.inline_data.data).decode("ascii")

    text_response = response.text
    if text_response:
        raise GenerationError(
            f'API returned text instead of an image: "{text_response[:TEXT_EXCERPT_LENGTH]}..."'
        )
    raise GenerationError(
        "No image was generated in the API response. The response may have been blocked or empty."
    )


class GeminiImageEditor:
    """Sends one generate_content call per edit; no retries, no caching."""

    def __init__(self, client: genai.Client, model_name: str):
        model_config = get_gemini_image_model_config(model_name)
        if not model_config:
            raise ConfigurationError(f"Unsupported Gemini image model: {model_name}")
        self._client = client
        self.model_config: GeminiImageModelConfig = model_config

    @classmethod
    def from_config(cls, cfg: Default) -> "GeminiImageEditor":
        """Builds an editor from configuration, failing fast without a key."""
        if not cfg.API_KEY:
            raise ConfigurationError("API_KEY environment variable is not set.")
        client = genai.Client(api_key=cfg.API_KEY)
        return cls(client, cfg.GEMINI_IMAGE_GEN_MODEL)

    def edit_image_with_reference(
        self, prompt: str, image_data: str, mime_type: str
    ) -> str:
        """Generates a new image from a prompt and a base64 reference image.

        Args:
            prompt: Free-text description of the desired output.
            image_data: Base64 payload of the reference image, without header.
            mime_type: MIME type of the reference image.

        Returns:
            The base64 payload of the first generated image.

        Raises:
            GenerationError: On any failure, with a message prefixed by
                "Gemini API Error: ".
        """
        model_name = self.model_config.model_name
        try:
            request = ImageEditRequest(
                prompt=prompt, image_data=image_data, mime_type=mime_type
            )
            contents = types.Content(
                role="user",
                parts=[
                    types.Part.from_bytes(
                        data=request.image_bytes(), mime_type=request.mime_type
                    ),
                    types.Part.from_text(text=request.prompt),
                ],
            )
            logger.info(
                f"Requesting image edit from {model_name} ({request.mime_type}, prompt length {len(request.prompt)})"
            )
            with track_model_call(
                model_name, mime_type=request.mime_type, prompt_length=len(request.prompt)
            ):
                response = self._client.models.generate_content(
                    model=model_name,
                    contents=contents,
                    config=types.GenerateContentConfig(
                        response_modalities=self.model_config.response_modalities,
                    ),
                )
                return extract_image_payload(response)
        except Exception as e:
            logger.error(f"Error calling Gemini API: {e}")
            message = str(e)
            if not message:
                raise GenerationError(
                    "An unknown error occurred while communicating with the Gemini API."
                ) from e
            raise GenerationError(f"Gemini API Error: {message}") from e
