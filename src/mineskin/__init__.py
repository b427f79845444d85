# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

"""Python client for the MineSkin skin generation API.

Example:
    ```python
    from mineskin import GenerateOptions, MineSkinClient, Variant

    with MineSkinClient(api_key="...", user_agent="MyApp/1.0") as client:
        response = client.generate_url(
            "https://example.com/skin.png",
            GenerateOptions(variant=Variant.CLASSIC),
        )
        print(response.skin.texture.data.value)
    ```

For endpoints not wrapped by `MineSkinClient`, use `RequestHandler` directly
with a response constructor such as `MineSkinResponse.from_json`.
"""

from .client import MineSkinClient
from .config import ClientIdentity
from .exceptions import (
    MineSkinError,
    MineSkinParseError,
    MineSkinRequestError,
    MineSkinTransportError,
)
from .headers import lowercase_headers
from .models import (
    GenerateOptions,
    JobInfo,
    SkinInfo,
    SkinTexture,
    Variant,
    Visibility,
)
from .request import RequestHandler
from .responses import GenerateResponse, JobResponse, SkinResponse
from .types import MineSkinResponse, ResponseConstructor

__version__ = "0.1.0"

__all__ = [
    # Client
    "MineSkinClient",
    "RequestHandler",
    "ClientIdentity",
    # Errors
    "MineSkinError",
    "MineSkinParseError",
    "MineSkinRequestError",
    "MineSkinTransportError",
    # Response types
    "GenerateResponse",
    "JobResponse",
    "MineSkinResponse",
    "ResponseConstructor",
    "SkinResponse",
    # Models
    "GenerateOptions",
    "JobInfo",
    "SkinInfo",
    "SkinTexture",
    "Variant",
    "Visibility",
    # Helpers
    "lowercase_headers",
]
