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

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .types import MineSkinResponse


class MineSkinError(Exception):
    """Base exception for all MineSkin client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MineSkinTransportError(MineSkinError):
    """The HTTP exchange could not be completed (timeout, connection error)."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class MineSkinParseError(MineSkinError):
    """A response was received but its body is not a usable JSON object."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        raw_body: str | None = None,
    ):
        super().__init__(message)
        self.status = status
        self.raw_body = raw_body


class MineSkinRequestError(MineSkinError):
    """The API answered, but reported that the request failed."""

    def __init__(self, message: str, response: MineSkinResponse[Any]):
        super().__init__(message)
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status

    @property
    def error_code(self) -> str | None:
        return self.response.error_code
