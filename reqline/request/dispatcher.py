"""
Request Dispatcher.

Sends exactly one HTTP request per invocation and returns a
ResponseDescriptor. Any status code counts as a response; only failures
below HTTP (DNS, connect, read) raise, plus a body whose Content-Encoding
cannot be decompressed.
"""

import enum

import httpx

from reqline.core.exceptions import DecodeError, InvalidUrlError, TransportError
from reqline.core.logging import get_logger, log_with_source
from reqline.request.body import RequestBody
from reqline.response.models import ResponseDescriptor

logger = get_logger(__name__)

SUPPORTED_SCHEMES = frozenset({"http", "https"})


class Method(str, enum.Enum):
    """HTTP methods the CLI can send."""

    GET = "GET"
    POST = "POST"


def parse_url(text: str) -> httpx.URL:
    """
    Parse a command-line URL argument.

    Raises:
        InvalidUrlError: If the text is not an absolute http(s) URL with a host
    """
    try:
        url = httpx.URL(text)
    except httpx.InvalidURL as e:
        raise InvalidUrlError(text, str(e)) from e

    if not url.scheme:
        raise InvalidUrlError(text, "missing scheme (expected http:// or https://)")
    if url.scheme not in SUPPORTED_SCHEMES:
        raise InvalidUrlError(text, f"unsupported scheme '{url.scheme}'")
    if not url.host:
        raise InvalidUrlError(text, "missing host")
    return url


def create_http_client(
    user_agent: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create the HTTP client for one invocation.

    No timeout is applied and redirects are not followed.

    Args:
        user_agent: Value for the User-Agent header. httpx default if None.
        transport: Alternative transport, e.g. httpx.MockTransport in tests.
    """
    headers = {"User-Agent": user_agent} if user_agent else None
    return httpx.AsyncClient(
        headers=headers,
        timeout=None,
        follow_redirects=False,
        transport=transport,
    )


class RequestDispatcher:
    """
    Builds and sends a single request.

    Usage:
        async with create_http_client() as client:
            dispatcher = RequestDispatcher(client)
            response = await dispatcher.dispatch(Method.POST, url, {"name": "x"})
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def dispatch(
        self,
        method: Method,
        url: httpx.URL | str,
        body: RequestBody | None = None,
    ) -> ResponseDescriptor:
        """
        Send the request and read the full response.

        Args:
            method: GET (no body) or POST (JSON body)
            url: Absolute target URL
            body: Fields for the JSON object sent with POST

        Returns:
            ResponseDescriptor for the received response, whatever its status

        Raises:
            ValueError: If a body is given with GET
            TransportError: If no HTTP response was received
            DecodeError: If the body does not match its Content-Encoding
        """
        method = Method(method)
        kwargs: dict = {}
        if method is Method.GET:
            if body:
                raise ValueError("GET requests cannot carry a body")
        else:
            kwargs["json"] = dict(body or {})

        log_with_source(
            logger,
            "cli",
            "debug",
            "HTTP request",
            method=method.value,
            url=str(url),
            body_fields=len(body or {}),
        )

        try:
            response = await self._client.request(method.value, url, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "cli",
                "error",
                "HTTP request failed",
                method=method.value,
                url=str(url),
                error=str(e) or type(e).__name__,
            )
            if isinstance(e, httpx.DecodingError):
                raise DecodeError(
                    "content-encoding",
                    f"Response body could not be decompressed: {e}",
                ) from e
            raise TransportError(str(url), e) from e

        log_with_source(
            logger,
            "cli",
            "debug",
            "HTTP response",
            method=method.value,
            url=str(url),
            status_code=response.status_code,
            headers=len(response.headers),
            body_bytes=len(response.content),
        )

        return ResponseDescriptor.from_httpx(response)
