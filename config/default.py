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

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv(override=True)

DEFAULT_PROMPT = (
    "A beautiful young woman with long dark hair, featuring the exact facial features and "
    "structure from the reference image. She is wearing a loose-fitting, oversized orange linen "
    "button-down shirt with the top buttons open, and matching wide-leg pink linen trousers. She "
    "is seated gracefully on a dark wooden backless stool, facing slightly towards the camera. "
    "Her left leg is bent at the knee with her foot flat on the floor, and her right leg is "
    "crossed over her left. Her left arm is casually draped over her right knee, with her fingers "
    "gently intertwined, and her right arm is resting by her side, with her hand on her lap. She "
    "has a subtle, engaging gaze directly at the viewer. The background is a plain, textured, dark "
    "olive green or earthy brown wall, creating a simple, studio-like setting. The lighting is soft "
    "and diffused from the front-side, highlighting her features and the texture of her clothing, "
    "creating gentle shadows and even illumination. The photo is a realistic, high-resolution "
    "three-quarter body shot, with a slightly off-center composition and a soft background blur "
    "as if taken with a 85mm prime lens at f/2.8."
)

ACCEPTED_IMAGE_TYPES = ["image/png", "image/jpeg", "image/webp"]


@dataclass
class Default:
    """Defaults class"""

    # Gemini
    API_KEY: str | None = field(
        default_factory=lambda: os.environ.get("API_KEY") or os.environ.get("GEMINI_API_KEY")
    )
    GEMINI_IMAGE_GEN_MODEL: str = os.environ.get(
        "GEMINI_IMAGE_GEN_MODEL", "gemini-2.5-flash-image-preview"
    )

    # Uploads
    MAX_UPLOAD_BYTES: int = int(os.environ.get("MAX_UPLOAD_BYTES", 4 * 1024 * 1024))

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
