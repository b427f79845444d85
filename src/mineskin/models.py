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

"""Request options and payload models for the MineSkin API."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Variant(str, Enum):
    """Skin model variant."""

    AUTO = "auto"
    CLASSIC = "classic"
    SLIM = "slim"


class Visibility(str, Enum):
    """Visibility of a generated skin."""

    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"


class GenerateOptions(BaseModel):
    """Options for skin generation."""

    name: str | None = Field(
        default=None,
        description="Name of the generated skin",
    )
    variant: Variant | None = Field(
        default=None,
        description="Skin model variant",
    )
    visibility: Visibility | None = Field(
        default=None,
        description="Visibility of the generated skin",
    )

    def to_json(self) -> dict[str, Any]:
        """Options as a JSON request fragment, without unset values."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_form(self) -> dict[str, str]:
        """Options as multipart form fields, without unset values."""
        return {key: str(value) for key, value in self.to_json().items()}


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class TextureData(_ApiModel):
    value: str
    signature: str | None = None


class TextureUrls(_ApiModel):
    skin: str | None = None


class SkinTexture(_ApiModel):
    """Signed texture property of a skin."""

    data: TextureData
    url: str | None = None
    urls: TextureUrls | None = None
    hash: str | None = None


class SkinInfo(_ApiModel):
    """A generated skin."""

    uuid: str
    short_id: str | None = None
    name: str | None = None
    variant: Variant | None = None
    visibility: Visibility | None = None
    texture: SkinTexture
    generator: str | None = None
    views: int | None = None
    duplicate: bool | None = None


class JobInfo(_ApiModel):
    """A queued generation job."""

    id: str
    status: str
    timestamp: int | None = None
    result: str | None = None

    @property
    def is_done(self) -> bool:
        return self.status in ("completed", "failed")
