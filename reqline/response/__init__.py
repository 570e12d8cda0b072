"""
Response handling.

Content negotiation and terminal rendering of received responses.
"""

from reqline.response.models import ResponseDescriptor
from reqline.response.negotiation import MediaType, negotiate, parse_media_type
from reqline.response.renderer import ResponseRenderer, decode_body, format_json

__all__ = [
    "MediaType",
    "ResponseDescriptor",
    "ResponseRenderer",
    "decode_body",
    "format_json",
    "negotiate",
    "parse_media_type",
]
