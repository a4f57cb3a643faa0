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
"""AI Image Stylizer entry point. Run with `mesop main.py`."""

from common.analytics import configure_logging
from config.default import Default

configure_logging(Default().LOG_LEVEL)

# Importing the page builds the Gemini client and registers the route
from pages import stylizer  # noqa: E402,F401  pylint: disable=wrong-import-position,unused-import
