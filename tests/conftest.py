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

"""Shared fixtures for MineSkin client tests."""

import pytest


@pytest.fixture
def skin_json():
    return {
        "uuid": "6d3f6b0c1a2b4c5d8e9f0a1b2c3d4e5f",
        "shortId": "abc123",
        "name": "test-skin",
        "variant": "classic",
        "visibility": "public",
        "texture": {
            "data": {"value": "dGV4dHVyZS12YWx1ZQ==", "signature": "c2lnbmF0dXJl"},
            "url": "https://textures.minecraft.net/texture/0123abcd",
            "hash": "0123abcd",
        },
        "generator": "mineskin-1",
        "views": 3,
        "duplicate": False,
    }


@pytest.fixture
def generate_json(skin_json):
    return {
        "success": True,
        "skin": skin_json,
        "rateLimit": {"next": {"relative": 0}, "limit": {"limit": 20, "remaining": 19}},
        "messages": [{"code": "skin_generated", "message": "Skin generated"}],
        "warnings": [],
    }


@pytest.fixture(autouse=True)
def no_api_key_env(monkeypatch):
    """Keep a developer's MINESKIN_API_KEY out of the tests."""
    monkeypatch.delenv("MINESKIN_API_KEY", raising=False)
