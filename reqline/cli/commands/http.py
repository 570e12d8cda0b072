"""
HTTP Commands.

The get and post commands. Each invocation sends exactly one request and
renders the response: status line, headers and body.
"""

import asyncio
from typing import List, Optional

import httpx
import typer
from rich.console import Console
from rich.text import Text

from reqline.core.config import get_app_config
from reqline.core.exceptions import ApplicationError
from reqline.core.logging import get_logger, log_with_source
from reqline.request import (
    Method,
    RequestBody,
    RequestDispatcher,
    build_body,
    create_http_client,
    parse_key_value,
    parse_url,
)
from reqline.response import ResponseRenderer, negotiate

logger = get_logger(__name__)

console = Console()
err_console = Console(stderr=True)


def build_client() -> httpx.AsyncClient:
    """Create the HTTP client for this invocation from http.yaml."""
    return create_http_client(user_agent=get_app_config().http.user_agent)


def _fail(error: ApplicationError) -> typer.Exit:
    """Report an error on stderr and return the exit to raise."""
    log_with_source(logger, "cli", "debug", "Command failed", code=error.code)
    err_console.print(Text(f"Error: {error.message}", style="red"), soft_wrap=True)
    return typer.Exit(1)


def get(
    url: str = typer.Argument(..., help="Absolute http(s) URL to request"),
) -> None:
    """
    Send a GET request and print the response.

    Examples:
        reqline get https://httpbin.org/get
    """
    try:
        target = parse_url(url)
    except ApplicationError as e:
        raise _fail(e)

    asyncio.run(_send(Method.GET, target, None))


def post(
    url: str = typer.Argument(..., help="Absolute http(s) URL to request"),
    body: Optional[List[str]] = typer.Argument(
        None,
        help="Body fields as key=value, sent as a JSON object",
        show_default=False,
    ),
) -> None:
    """
    Send a POST request with a JSON body and print the response.

    Body fields are given as key=value tokens and sent as one JSON object.

    Examples:
        reqline post https://httpbin.org/post
        reqline post https://httpbin.org/post name=alice role=admin
    """
    try:
        target = parse_url(url)
        payload = build_body(parse_key_value(token) for token in body or [])
    except ApplicationError as e:
        raise _fail(e)

    asyncio.run(_send(Method.POST, target, payload))


async def _send(method: Method, url: httpx.URL, body: RequestBody | None) -> None:
    """Dispatch the request and render the response to stdout."""
    rendering = get_app_config().rendering
    renderer = ResponseRenderer(
        console,
        indent=rendering.json_indent,
        sort_keys=rendering.sort_keys,
    )

    async with build_client() as client:
        try:
            response = await RequestDispatcher(client).dispatch(method, url, body)
        except ApplicationError as e:
            raise _fail(e)

    try:
        renderer.render(response, negotiate(response.headers))
    except ApplicationError as e:
        raise _fail(e)

    log_with_source(
        logger,
        "cli",
        "info",
        "Response rendered",
        method=method.value,
        status_code=response.status_code,
    )
