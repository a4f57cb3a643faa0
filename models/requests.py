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
import binascii

from pydantic import BaseModel, Field


class ImageEditRequest(BaseModel):
    """
    Defines the contract for a reference-conditioned image edit request.
    This schema is used by the UI to call the model layer.
    """

    prompt: str
    image_data: str = Field(..., min_length=1)  # base64 payload, no data URL header
    mime_type: str = Field(..., min_length=1)

    def image_bytes(self) -> bytes:
        """Decodes the base64 payload. Raises ValueError on malformed input."""
        try:
            return base64.b64decode(self.image_data, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Reference image is not valid base64: {e}") from e
