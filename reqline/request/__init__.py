"""
Request construction and dispatch.

Turns key=value tokens into a JSON body and sends exactly one request.
"""

from reqline.request.body import RequestBody, build_body
from reqline.request.dispatcher import (
    Method,
    RequestDispatcher,
    create_http_client,
    parse_url,
)
from reqline.request.keyvalue import KeyValue, parse_key_value

__all__ = [
    "KeyValue",
    "Method",
    "RequestBody",
    "RequestDispatcher",
    "build_body",
    "create_http_client",
    "parse_key_value",
    "parse_url",
]
