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

"""Tests for the mineskin CLI."""

import json

import httpx
import pytest
import respx
from click.testing import CliRunner

from mineskin.cli.main import main

API_URL = "https://api.mineskin.test"


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(main, ["--api-key", "test-key", "--api-url", API_URL, *args])


class TestCli:
    @respx.mock
    def test_skin(self, runner, skin_json):
        respx.get(f"{API_URL}/v2/skins/abc").mock(
            return_value=httpx.Response(200, json={"success": True, "skin": skin_json})
        )

        result = invoke(runner, "skin", "abc")

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["shortId"] == "abc123"

    @respx.mock
    def test_generate_url_with_options(self, runner, generate_json):
        route = respx.post(f"{API_URL}/v2/generate").mock(
            return_value=httpx.Response(200, json=generate_json)
        )

        result = invoke(
            runner, "generate-url", "https://example.com/skin.png", "--variant", "slim"
        )

        assert result.exit_code == 0, result.output
        assert json.loads(route.calls.last.request.content) == {
            "url": "https://example.com/skin.png",
            "variant": "slim",
        }

    @respx.mock
    def test_generate_file(self, runner, generate_json, tmp_path):
        image = tmp_path / "skin.png"
        image.write_bytes(b"\x89PNG")
        route = respx.post(f"{API_URL}/v2/generate").mock(
            return_value=httpx.Response(200, json=generate_json)
        )

        result = invoke(runner, "generate", str(image), "--visibility", "private")

        assert result.exit_code == 0, result.output
        body = route.calls.last.request.content
        assert b'name="visibility"\r\n\r\nprivate\r\n' in body

    @respx.mock
    def test_job(self, runner):
        respx.get(f"{API_URL}/v2/queue/job-1").mock(
            return_value=httpx.Response(
                200, json={"success": True, "job": {"id": "job-1", "status": "processing"}}
            )
        )

        result = invoke(runner, "job", "job-1")

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["status"] == "processing"

    @respx.mock
    def test_api_error_exits_non_zero(self, runner):
        respx.get(f"{API_URL}/v2/skins/missing").mock(
            return_value=httpx.Response(
                404,
                json={
                    "success": False,
                    "errors": [{"code": "skin_not_found", "message": "Skin not found"}],
                },
            )
        )

        result = invoke(runner, "skin", "missing")

        assert result.exit_code == 1
        assert "Skin not found" in result.output
        assert "skin_not_found" in result.output

    @respx.mock
    def test_connection_error_exits_non_zero(self, runner):
        respx.get(f"{API_URL}/v2/skins/abc").mock(
            side_effect=httpx.ConnectError("Connection refused")
        )

        result = invoke(runner, "skin", "abc")

        assert result.exit_code == 1
        assert "Connection refused" in result.output

    def test_invalid_variant_rejected(self, runner):
        result = invoke(runner, "generate-url", "https://example.com/skin.png", "--variant", "x")
        assert result.exit_code == 2

    def test_zero_timeout_rejected(self, runner):
        result = invoke(runner, "--timeout", "0", "skin", "abc")
        assert result.exit_code == 2
        assert "--timeout" in result.output

    @respx.mock
    def test_settings_from_dotenv_file(self, runner, skin_json, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text(
            "MINESKIN_API_KEY=dotenv-key\n"
            "MINESKIN_API_URL=https://dotenv.mineskin.test\n"
            "MINESKIN_USER_AGENT=FromDotenv/1.0\n"
        )
        route = respx.get("https://dotenv.mineskin.test/v2/skins/abc").mock(
            return_value=httpx.Response(200, json={"success": True, "skin": skin_json})
        )

        # Listing the variables in env makes the runner restore them afterwards
        result = runner.invoke(
            main,
            ["skin", "abc"],
            env={
                "MINESKIN_API_KEY": None,
                "MINESKIN_API_URL": None,
                "MINESKIN_USER_AGENT": None,
            },
        )

        assert result.exit_code == 0, result.output
        assert route.called
        request = route.calls.last.request
        assert request.headers["User-Agent"] == "FromDotenv/1.0"
        assert request.headers["Authorization"] == "Bearer dotenv-key"

    @respx.mock
    def test_command_line_overrides_dotenv_file(self, runner, skin_json, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("MINESKIN_API_URL=https://dotenv.mineskin.test\n")
        route = respx.get(f"{API_URL}/v2/skins/abc").mock(
            return_value=httpx.Response(200, json={"success": True, "skin": skin_json})
        )

        result = runner.invoke(
            main,
            ["--api-url", API_URL, "skin", "abc"],
            env={"MINESKIN_API_URL": None},
        )

        assert result.exit_code == 0, result.output
        assert route.called
