"""
Content Negotiation.

Reads the Content-Type header of a response and parses it into a MediaType.
Response headers are untrusted input: anything that does not parse as a
media type yields None and the body is rendered raw.

Grammar (RFC 9110, section 8.3.1):
    media-type = type "/" subtype *( OWS ";" OWS parameter )
    parameter  = token "=" ( token / quoted-string )
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from reqline.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

CONTENT_TYPE = "content-type"
JSON_ESSENCE = "application/json"

_TOKEN = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+"
_QUOTED_STRING = r'"(?:[^"\\\x00-\x08\x0a-\x1f\x7f]|\\[\t\x20-\x7e\x80-\xff])*"'

_MEDIA_TYPE_RE = re.compile(rf"\s*({_TOKEN})/({_TOKEN})\s*")
_PARAMETER_RE = re.compile(rf";\s*(?:({_TOKEN})=({_TOKEN}|{_QUOTED_STRING}))?\s*")


@dataclass(frozen=True)
class MediaType:
    """A parsed media type such as ``application/json; charset=utf-8``."""

    type: str
    subtype: str
    parameters: dict[str, str] = field(default_factory=dict)

    @property
    def essence(self) -> str:
        """``type/subtype`` without parameters, lowercased."""
        return f"{self.type}/{self.subtype}"

    @property
    def charset(self) -> str | None:
        return self.parameters.get("charset")

    @property
    def is_json(self) -> bool:
        return self.essence == JSON_ESSENCE


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return re.sub(r"\\(.)", r"\1", value[1:-1])
    return value


def parse_media_type(value: str) -> MediaType | None:
    """
    Parse a Content-Type header value.

    Type, subtype, parameter names and the charset value are lowercased.
    Returns None if the value is not a valid media type.
    """
    match = _MEDIA_TYPE_RE.match(value)
    if match is None:
        return None

    type_, subtype = match.group(1).lower(), match.group(2).lower()
    parameters: dict[str, str] = {}
    position = match.end()

    while position < len(value):
        param = _PARAMETER_RE.match(value, position)
        if param is None:
            return None
        position = param.end()
        name, raw_value = param.group(1), param.group(2)
        if name is None:
            # empty parameter, e.g. "text/plain;"
            continue
        name = name.lower()
        param_value = _unquote(raw_value)
        if name == "charset":
            param_value = param_value.lower()
        parameters.setdefault(name, param_value)

    return MediaType(type=type_, subtype=subtype, parameters=parameters)


def negotiate(headers: Iterable[tuple[str, str]]) -> MediaType | None:
    """
    Determine the declared media type of a response.

    Uses the first Content-Type header. Returns None when it is absent or
    unparsable.
    """
    for name, value in headers:
        if name.lower() != CONTENT_TYPE:
            continue
        media_type = parse_media_type(value)
        if media_type is None:
            log_with_source(
                logger,
                "internal",
                "debug",
                "Unparsable Content-Type, rendering raw",
                content_type=value,
            )
        return media_type
    return None
