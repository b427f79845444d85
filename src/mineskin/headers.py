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

"""Response header normalization."""

from collections.abc import Iterable, Mapping, Sequence

HeaderInput = Mapping[str, str | Sequence[str]] | Iterable[tuple[str, str]]


def lowercase_headers(headers: HeaderInput) -> dict[str, str]:
    """Normalize a header multimap into a flat dictionary.

    Header names are lower-cased and repeated values are joined with ", " in
    the order they were received.

    Args:
        headers: Mapping of name to a value or list of values, or an iterable
            of (name, value) pairs such as ``httpx.Headers.multi_items()``

    Returns:
        Dictionary of lower-cased header name to joined value
    """
    if isinstance(headers, Mapping):
        pairs: list[tuple[str, str]] = []
        for name, value in headers.items():
            if isinstance(value, str):
                pairs.append((name, value))
            else:
                pairs.extend((name, v) for v in value)
    else:
        pairs = list(headers)

    grouped: dict[str, list[str]] = {}
    for name, value in pairs:
        grouped.setdefault(name.lower(), []).append(value)

    return {name: ", ".join(values) for name, values in grouped.items()}
