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

"""Endpoint-specific response types."""

from __future__ import annotations

from typing import Any

from attrs import define as _attrs_define

from .models import JobInfo, SkinInfo
from .types import MineSkinResponse


@_attrs_define(frozen=True)
class SkinResponse(MineSkinResponse[SkinInfo]):
    """Response carrying a single skin under the ``skin`` key."""

    payload_key = "skin"

    @property
    def skin(self) -> SkinInfo | None:
        return self.parsed


@_attrs_define(frozen=True)
class GenerateResponse(SkinResponse):
    """Response of a generate request.

    Attributes:
        rate_limit: Rate limit details reported with the response
    """

    rate_limit: dict[str, Any] | None = None

    @classmethod
    def _extra_fields(cls, body: dict[str, Any], success: bool) -> dict[str, Any]:
        rate_limit = body.get("rateLimit")
        return {"rate_limit": rate_limit if isinstance(rate_limit, dict) else None}


@_attrs_define(frozen=True)
class JobResponse(MineSkinResponse[JobInfo]):
    """Response carrying a generation job and, once finished, its skin."""

    payload_key = "job"

    skin: SkinInfo | None = None

    @property
    def job(self) -> JobInfo | None:
        return self.parsed

    @classmethod
    def _extra_fields(cls, body: dict[str, Any], success: bool) -> dict[str, Any]:
        skin = body.get("skin")
        if not success or not isinstance(skin, dict):
            return {"skin": None}
        return {"skin": SkinInfo.model_validate(skin)}
