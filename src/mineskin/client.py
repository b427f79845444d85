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

"""HTTP client for the MineSkin API.

This module provides a thin wrapper around `RequestHandler` with one method
per API endpoint. Each method returns the endpoint's response type, or raises
one of the `MineSkinError` subclasses.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Any
from urllib.parse import quote

import httpx

from .config import DEFAULT_TIMEOUT_MS
from .models import GenerateOptions, JobInfo, SkinInfo
from .request import RequestHandler
from .responses import GenerateResponse, JobResponse, SkinResponse

DEFAULT_API_URL = "https://api.mineskin.org"
DEFAULT_USER_AGENT = "mineskin-python-client"
DEFAULT_FILENAME = "skin.png"

API_KEY_ENV = "MINESKIN_API_KEY"


class MineSkinClient:
    """HTTP client for the MineSkin API.

    Example:
        ```python
        with MineSkinClient(api_key="...", user_agent="MyApp/1.0") as client:
            # Generate a skin from a local image
            response = client.generate_upload("skin.png")
            print(response.skin.texture.data.value)

            # Generate a skin from an image URL
            options = GenerateOptions(variant=Variant.SLIM, name="my-skin")
            response = client.generate_url("https://example.com/skin.png", options)
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        user_agent: str | None = DEFAULT_USER_AGENT,
        base_url: str = DEFAULT_API_URL,
        timeout: int = DEFAULT_TIMEOUT_MS,
        follow_redirects: bool | None = None,
        logger: logging.Logger | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the MineSkin client.

        Args:
            api_key: MineSkin API key; falls back to the MINESKIN_API_KEY
                environment variable
            user_agent: User-Agent header identifying your application
            base_url: Base URL of the MineSkin API
            timeout: Connect timeout in milliseconds
            follow_redirects: Whether to follow redirects (default: only when
                a user agent is set)
            logger: Logger passed on to the request handler
            transport: Optional httpx transport, mainly for testing
        """
        self._base_url = base_url.rstrip("/")
        self._logger = logger or logging.getLogger(__name__)
        self._requests = RequestHandler(
            user_agent=user_agent,
            api_key=api_key if api_key is not None else os.environ.get(API_KEY_ENV),
            timeout=timeout,
            follow_redirects=follow_redirects,
            logger=self._logger,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        """Base URL of the MineSkin API."""
        return self._base_url

    @property
    def request_handler(self) -> RequestHandler:
        """The underlying request handler, for endpoints not wrapped here."""
        return self._requests

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._requests.close()

    def __enter__(self) -> MineSkinClient:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    # =========================================================================
    # Generate endpoints
    # =========================================================================

    def generate_upload(
        self,
        file: str | Path | bytes | IO[bytes],
        options: GenerateOptions | None = None,
        filename: str | None = None,
    ) -> GenerateResponse:
        """Generate a skin from an image file.

        Args:
            file: Path to a PNG image, raw image bytes or a binary file object
            options: Optional generation options
            filename: Filename sent with the upload (default: the file's name,
                or "skin.png")

        Returns:
            GenerateResponse with the generated skin

        Raises:
            FileNotFoundError: If ``file`` is a path that doesn't exist
            MineSkinError: If the request fails
        """
        form = options.to_form() if options is not None else {}
        url = self._url("/v2/generate")

        if isinstance(file, str | Path):
            path = Path(file)
            if not path.exists():
                raise FileNotFoundError(f"Image file not found: {path}")
            with open(path, "rb") as f:
                return self._requests.post_form_data_file(
                    url, "file", filename or path.name, f, form,
                    SkinInfo, GenerateResponse.from_json,
                )

        if filename is None:
            name = getattr(file, "name", None)
            filename = Path(name).name if isinstance(name, str) else DEFAULT_FILENAME
        return self._requests.post_form_data_file(
            url, "file", filename, file, form, SkinInfo, GenerateResponse.from_json
        )

    def generate_url(
        self,
        url: str,
        options: GenerateOptions | None = None,
    ) -> GenerateResponse:
        """Generate a skin from an image URL.

        Args:
            url: Publicly reachable URL of a skin image
            options: Optional generation options

        Returns:
            GenerateResponse with the generated skin
        """
        data: dict[str, Any] = {"url": url}
        if options is not None:
            data.update(options.to_json())
        return self._requests.post_json(
            self._url("/v2/generate"), data, SkinInfo, GenerateResponse.from_json
        )

    # =========================================================================
    # Skin and queue endpoints
    # =========================================================================

    def get_skin(self, uuid: str) -> SkinResponse:
        """Get a generated skin by its UUID.

        Args:
            uuid: The skin UUID

        Returns:
            SkinResponse with the skin
        """
        return self._requests.get_json(
            self._url(f"/v2/skins/{quote(uuid, safe='')}"), SkinInfo, SkinResponse.from_json
        )

    def get_job(self, job_id: str) -> JobResponse:
        """Get the status of a queued generation job.

        Args:
            job_id: The job ID

        Returns:
            JobResponse with the job status, and the skin once completed
        """
        self._logger.debug("Polling job %s", job_id)
        return self._requests.get_json(
            self._url(f"/v2/queue/{quote(job_id, safe='')}"), JobInfo, JobResponse.from_json
        )
