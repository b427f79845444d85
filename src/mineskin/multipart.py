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

"""multipart/form-data encoding for file uploads.

The body is assembled by hand rather than through httpx's ``files=`` support
so that the part layout is fixed: extra string fields first, then a single
``application/octet-stream`` file part, then the closing boundary.
"""

import uuid
from collections.abc import Mapping

BOUNDARY_PREFIX = "mineskin-"
CRLF = b"\r\n"


def new_boundary() -> str:
    """Generate a boundary token unique to one request."""
    return f"{BOUNDARY_PREFIX}{uuid.uuid4().hex}"


def content_type(boundary: str) -> str:
    return f"multipart/form-data; boundary={boundary}"


def encode_multipart(
    boundary: str,
    key: str,
    filename: str,
    content: bytes,
    fields: Mapping[str, str] | None = None,
) -> bytes:
    """Encode a multipart body with one file part and optional string fields.

    Args:
        boundary: Boundary token, see `new_boundary`
        key: Form field name of the file part
        filename: Filename reported for the file part
        content: Raw file bytes, copied into the body unchanged
        fields: Extra string fields, each encoded as its own part

    Returns:
        The complete request body
    """
    delimiter = f"--{boundary}".encode()
    body = bytearray()

    for name, value in (fields or {}).items():
        body += delimiter + CRLF
        body += f'Content-Disposition: form-data; name="{name}"'.encode() + CRLF + CRLF
        body += str(value).encode() + CRLF

    body += delimiter + CRLF
    body += (
        f'Content-Disposition: form-data; name="{key}"; filename="{filename}"'.encode() + CRLF
    )
    body += b"Content-Type: application/octet-stream" + CRLF + CRLF
    body += content
    body += CRLF + delimiter + b"--" + CRLF
    return bytes(body)
