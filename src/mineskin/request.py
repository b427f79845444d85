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

"""Request transport and response classification.

`RequestHandler` sends exactly one HTTP request per call and turns the
response into a typed result through a caller-supplied constructor. Outcomes
are classified into three failure classes:

- `MineSkinTransportError`: the exchange itself failed
- `MineSkinParseError`: the body is not a JSON object
- `MineSkinRequestError`: the API reported a failure
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import IO, Any, TypeVar

import httpx
from pydantic import ValidationError

from .config import DEFAULT_TIMEOUT_MS, ClientIdentity
from .exceptions import MineSkinParseError, MineSkinRequestError, MineSkinTransportError
from .headers import lowercase_headers
from .multipart import content_type, encode_multipart, new_boundary
from .types import MineSkinResponse, ResponseConstructor

T = TypeVar("T")
R = TypeVar("R", bound=MineSkinResponse[Any])

# httpx adds these to every request unless removed from the client.
_HTTPX_DEFAULT_HEADERS = ("User-Agent", "Accept")


class RequestHandler:
    """Issues GET, JSON POST and multipart POST requests.

    The handler holds one `httpx.Client` whose connection pool is shared by
    all calls, so a single handler can be used from several threads.

    Example:
        ```python
        handler = RequestHandler(user_agent="MyApp/1.0", api_key="...")
        response = handler.get_json(
            "https://api.mineskin.org/v2/skins/<uuid>", SkinInfo, SkinResponse.from_json
        )
        print(response.parsed.texture.url)
        ```
    """

    def __init__(
        self,
        user_agent: str | None = None,
        api_key: str | None = None,
        timeout: int = DEFAULT_TIMEOUT_MS,
        *,
        follow_redirects: bool | None = None,
        logger: logging.Logger | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the request handler.

        Args:
            user_agent: User-Agent header value, omitted when None
            api_key: API key sent as a Bearer token, omitted when None
            timeout: Connect timeout in milliseconds
            follow_redirects: Whether to follow redirects; defaults to following
                them only when a user agent is set
            logger: Logger for request and parse failure diagnostics
            transport: Optional httpx transport, mainly for testing
        """
        self.identity = ClientIdentity(
            user_agent=user_agent,
            api_key=api_key,
            timeout=timeout,
            follow_redirects=follow_redirects,
        )
        self._logger = logger or logging.getLogger(__name__)
        self._client = httpx.Client(
            timeout=httpx.Timeout(None, connect=self.identity.connect_timeout),
            follow_redirects=self.identity.redirects_enabled,
            transport=transport,
        )
        for name in _HTTPX_DEFAULT_HEADERS:
            if name in self._client.headers:
                del self._client.headers[name]

    @property
    def api_key(self) -> str | None:
        return self.identity.api_key

    @property
    def user_agent(self) -> str | None:
        return self.identity.user_agent

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> RequestHandler:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def get_json(
        self,
        url: str,
        payload_type: type[T],
        constructor: ResponseConstructor[T, R],
    ) -> R:
        """Send a GET request.

        Raises:
            MineSkinTransportError: If the request could not be completed
            MineSkinParseError: If the response body is not a JSON object
            MineSkinRequestError: If the API reports a failure
        """
        response = self._send("GET", url, headers=self.identity.identity_headers())
        return self._wrap_response(response, payload_type, constructor)

    def post_json(
        self,
        url: str,
        data: Mapping[str, Any],
        payload_type: type[T],
        constructor: ResponseConstructor[T, R],
    ) -> R:
        """Send a POST request with a JSON body.

        Raises:
            MineSkinTransportError: If the request could not be completed
            MineSkinParseError: If the response body is not a JSON object
            MineSkinRequestError: If the API reports a failure
        """
        headers = self.identity.identity_headers()
        headers["Content-Type"] = "application/json"
        response = self._send("POST", url, headers=headers, content=json.dumps(data).encode())
        return self._wrap_response(response, payload_type, constructor)

    def post_form_data_file(
        self,
        url: str,
        key: str,
        filename: str,
        content: bytes | IO[bytes],
        data: Mapping[str, str] | None,
        payload_type: type[T],
        constructor: ResponseConstructor[T, R],
    ) -> R:
        """Upload a file as multipart/form-data.

        Args:
            url: Target URL
            key: Form field name of the file part
            filename: Filename reported to the server
            content: File bytes or a binary file object, read in full
            data: Extra string form fields
            payload_type: Payload type handed to the constructor
            constructor: Builds the typed result

        Raises:
            MineSkinTransportError: If the request could not be completed
            MineSkinParseError: If the response body is not a JSON object
            MineSkinRequestError: If the API reports a failure
            TypeError: If a file object returns text instead of bytes
        """
        if not isinstance(content, bytes | bytearray):
            content = content.read()
            if not isinstance(content, bytes | bytearray):
                raise TypeError("content must be bytes or a binary file")

        boundary = new_boundary()
        body = encode_multipart(boundary, key, filename, bytes(content), data)

        headers = self.identity.identity_headers()
        headers["Content-Type"] = content_type(boundary)
        response = self._send("POST", url, headers=headers, content=body)
        return self._wrap_response(response, payload_type, constructor)

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        self._logger.debug("%s %s", method, url)
        try:
            return self._client.request(method, url, **kwargs)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise MineSkinTransportError(f"{method} {url} failed: {e}", url=url) from e

    def _wrap_response(
        self,
        response: httpx.Response,
        payload_type: type[T],
        constructor: ResponseConstructor[T, R],
    ) -> R:
        raw_body = response.text
        try:
            body = json.loads(raw_body)
        except ValueError as e:
            self._logger.warning("Failed to parse response body: %s", raw_body, exc_info=True)
            raise MineSkinParseError(
                "Failed to parse response", status=response.status_code, raw_body=raw_body
            ) from e

        if not isinstance(body, dict):
            self._logger.warning("Response body is not a JSON object: %s", raw_body)
            raise MineSkinParseError(
                "Response body is not a JSON object",
                status=response.status_code,
                raw_body=raw_body,
            )

        headers = lowercase_headers(response.headers.multi_items())
        try:
            wrapped = constructor(response.status_code, headers, body, payload_type)
        except ValidationError as e:
            self._logger.warning("Unexpected response payload: %s", raw_body, exc_info=True)
            raise MineSkinParseError(
                f"Unexpected response payload: {e}",
                status=response.status_code,
                raw_body=raw_body,
            ) from e

        if not wrapped.success:
            raise MineSkinRequestError(wrapped.error or "Request Failed", wrapped)
        return wrapped
