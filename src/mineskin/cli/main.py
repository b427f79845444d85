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

"""Main CLI entry point for the MineSkin client."""

from __future__ import annotations

import json
import logging
import os
import sys

import click
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel

from ..client import DEFAULT_API_URL, DEFAULT_USER_AGENT, MineSkinClient
from ..config import DEFAULT_TIMEOUT_MS
from ..exceptions import MineSkinError, MineSkinRequestError
from ..models import GenerateOptions, Variant, Visibility


def _generate_options(name, variant, visibility) -> GenerateOptions:
    return GenerateOptions(
        name=name,
        variant=Variant(variant) if variant else None,
        visibility=Visibility(visibility) if visibility else None,
    )


def _echo_payload(payload: BaseModel | None) -> None:
    if payload is None:
        click.echo("{}")
        return
    click.echo(json.dumps(payload.model_dump(mode="json", by_alias=True), indent=2))


def _fail(error: MineSkinError) -> None:
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, MineSkinRequestError):
        click.echo(f"  status: {error.status}", err=True)
        if error.error_code:
            click.echo(f"  code: {error.error_code}", err=True)
    sys.exit(1)


generate_option_decorators = [
    click.option("--name", default=None, help="Name of the generated skin"),
    click.option(
        "--variant",
        type=click.Choice([v.value for v in Variant]),
        default=None,
        help="Skin model variant",
    ),
    click.option(
        "--visibility",
        type=click.Choice([v.value for v in Visibility]),
        default=None,
        help="Visibility of the generated skin",
    ),
]


def generate_options(func):
    for decorator in reversed(generate_option_decorators):
        func = decorator(func)
    return func


@click.group()
@click.version_option(package_name="mineskin-client")
@click.option(
    "--api-key",
    envvar="MINESKIN_API_KEY",
    default=None,
    help="MineSkin API key",
)
@click.option(
    "--user-agent",
    envvar="MINESKIN_USER_AGENT",
    default=None,
    help=f"User-Agent sent with every request [default: {DEFAULT_USER_AGENT}]",
)
@click.option(
    "--api-url",
    envvar="MINESKIN_API_URL",
    default=None,
    help=f"Base URL of the MineSkin API [default: {DEFAULT_API_URL}]",
)
@click.option(
    "--timeout",
    default=DEFAULT_TIMEOUT_MS,
    type=click.IntRange(min=1),
    help="Connect timeout in milliseconds",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, api_key, user_agent, api_url, timeout, verbose):
    """MineSkin client CLI."""
    # Options are parsed before this runs, so values from .env are resolved here
    load_dotenv(find_dotenv(usecwd=True))
    api_key = api_key or os.environ.get("MINESKIN_API_KEY")
    user_agent = user_agent or os.environ.get("MINESKIN_USER_AGENT", DEFAULT_USER_AGENT)
    api_url = api_url or os.environ.get("MINESKIN_API_URL", DEFAULT_API_URL)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    client = MineSkinClient(
        api_key=api_key,
        user_agent=user_agent,
        base_url=api_url,
        timeout=timeout,
    )
    ctx.obj = ctx.with_resource(client)


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@generate_options
@click.pass_obj
def generate(client: MineSkinClient, file, name, variant, visibility):
    """Generate a skin from a local image FILE."""
    try:
        response = client.generate_upload(file, _generate_options(name, variant, visibility))
    except MineSkinError as e:
        _fail(e)
    _echo_payload(response.skin)


@main.command("generate-url")
@click.argument("url")
@generate_options
@click.pass_obj
def generate_url(client: MineSkinClient, url, name, variant, visibility):
    """Generate a skin from an image URL."""
    try:
        response = client.generate_url(url, _generate_options(name, variant, visibility))
    except MineSkinError as e:
        _fail(e)
    _echo_payload(response.skin)


@main.command()
@click.argument("uuid")
@click.pass_obj
def skin(client: MineSkinClient, uuid):
    """Show a generated skin by UUID."""
    try:
        response = client.get_skin(uuid)
    except MineSkinError as e:
        _fail(e)
    _echo_payload(response.skin)


@main.command()
@click.argument("job_id")
@click.pass_obj
def job(client: MineSkinClient, job_id):
    """Show the status of a generation job."""
    try:
        response = client.get_job(job_id)
    except MineSkinError as e:
        _fail(e)
    _echo_payload(response.job)
    if response.skin is not None:
        _echo_payload(response.skin)


if __name__ == "__main__":
    main()
