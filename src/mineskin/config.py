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

"""Client identity shared by every request."""

from dataclasses import dataclass

DEFAULT_TIMEOUT_MS = 10_000


@dataclass(frozen=True)
class ClientIdentity:
    """Identity and transport settings for a request handler.

    Attributes:
        user_agent: Value of the User-Agent header, or None to send none
        api_key: MineSkin API key, or None for anonymous requests
        timeout: Connect timeout in milliseconds
        follow_redirects: Whether to follow redirects. None keeps the default
            of following them only when a user agent is configured.
    """

    user_agent: str | None = None
    api_key: str | None = None
    timeout: int = DEFAULT_TIMEOUT_MS
    follow_redirects: bool | None = None

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        # Blank keys would produce a bare "Bearer " header.
        if self.api_key is not None and not self.api_key.strip():
            object.__setattr__(self, "api_key", None)

    @property
    def connect_timeout(self) -> float:
        """Connect timeout in seconds."""
        return self.timeout / 1000

    @property
    def redirects_enabled(self) -> bool:
        if self.follow_redirects is not None:
            return self.follow_redirects
        return self.user_agent is not None

    def identity_headers(self) -> dict[str, str]:
        """Headers attached to every outgoing request."""
        headers: dict[str, str] = {}
        if self.user_agent is not None:
            headers["User-Agent"] = self.user_agent
        if self.api_key is not None:
            headers["Authorization"] = f"Bearer {self.api_key}"
            headers["Accept"] = "application/json"
        return headers
