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

"""Typed response wrapper shared by all endpoints."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Protocol, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

T = TypeVar("T")
R = TypeVar("R", bound="MineSkinResponse[Any]", covariant=True)


@_attrs_define(frozen=True)
class MineSkinResponse(Generic[T]):
    """Result of one request to the MineSkin API.

    Attributes:
        status: HTTP status code
        headers: Response headers, lower-cased, repeated values joined with ", "
        body: The parsed JSON object
        success: Whether the API reports the request as successful
        parsed: Payload deserialized from the body, None on failure
        error: Error text reported by the API, if any
        error_code: Machine readable error code, if any
        messages: Informational messages included in the body
        warnings: Warnings included in the body
    """

    status: int
    headers: dict[str, str]
    body: dict[str, Any]
    success: bool
    parsed: T | None = None
    error: str | None = None
    error_code: str | None = None
    messages: list[str] = _attrs_field(factory=list)
    warnings: list[str] = _attrs_field(factory=list)

    # Key of the body holding the payload; None deserializes the whole body.
    payload_key: ClassVar[str | None] = None

    @classmethod
    def from_json(
        cls,
        status: int,
        headers: dict[str, str],
        body: dict[str, Any],
        payload_type: type[T],
    ):
        """Default result constructor.

        Raises:
            pydantic.ValidationError: If the payload does not match ``payload_type``
        """
        success = is_success(status, body)
        parsed = cls._parse_payload(body, payload_type) if success else None
        return cls(
            status=status,
            headers=headers,
            body=body,
            success=success,
            parsed=parsed,
            error=error_text(body, success),
            error_code=error_code(body),
            messages=_texts(body.get("messages")),
            warnings=_texts(body.get("warnings")),
            **cls._extra_fields(body, success),
        )

    @classmethod
    def _parse_payload(cls, body: dict[str, Any], payload_type: type[T]) -> T | None:
        data = body if cls.payload_key is None else body.get(cls.payload_key)
        if data is None:
            return None
        if hasattr(payload_type, "model_validate"):
            return payload_type.model_validate(data)  # type: ignore[attr-defined]
        return payload_type(data)  # type: ignore[call-arg]

    @classmethod
    def _extra_fields(cls, body: dict[str, Any], success: bool) -> dict[str, Any]:
        """Additional constructor arguments for subclasses."""
        return {}

    def header(self, name: str) -> str | None:
        """Look up a response header, ignoring case."""
        return self.headers.get(name.lower())

    def get_error_or_message(self) -> str | None:
        if self.error:
            return self.error
        return self.messages[0] if self.messages else None


class ResponseConstructor(Protocol[T, R]):
    """Builds a typed result from a parsed response."""

    def __call__(
        self,
        status: int,
        headers: dict[str, str],
        body: dict[str, Any],
        payload_type: type[T],
    ) -> R: ...


def is_success(status: int, body: dict[str, Any]) -> bool:
    """Decide whether a parsed response represents success.

    An explicit boolean ``success`` field wins, then a non-empty ``error``
    or ``errors`` field, then the status code.
    """
    flag = body.get("success")
    if isinstance(flag, bool):
        return flag
    if body.get("error") or body.get("errors"):
        return False
    return 200 <= status < 300


def error_text(body: dict[str, Any], success: bool) -> str | None:
    error = body.get("error")
    if isinstance(error, str) and error:
        return error
    if not success:
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    first = _first_error(body)
    if first is not None and first.get("message"):
        return str(first["message"])
    return None


def error_code(body: dict[str, Any]) -> str | None:
    code = body.get("errorCode")
    if code is not None:
        return str(code)
    first = _first_error(body)
    if first is not None and first.get("code") is not None:
        return str(first["code"])
    return None


def _first_error(body: dict[str, Any]) -> dict[str, Any] | None:
    errors = body.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        return errors[0]
    return None


def _texts(items: Any) -> list[str]:
    """Flatten a list of strings or ``{"message": ...}`` objects."""
    if not isinstance(items, list):
        return []
    texts = []
    for item in items:
        if isinstance(item, dict):
            if item.get("message"):
                texts.append(str(item["message"]))
        elif item is not None:
            texts.append(str(item))
    return texts
