"""
Response model.

ResponseDescriptor is a transport-independent snapshot of one HTTP
response: everything the renderer needs, nothing it does not.
"""

from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class ResponseDescriptor:
    """Status, headers and raw body of a received response."""

    protocol_version: str
    status_code: int
    headers: tuple[tuple[str, str], ...]
    body: bytes
    reason_phrase: str = ""

    @property
    def status_line(self) -> str:
        """Status line as shown to the user, e.g. ``HTTP/1.1 200 OK``."""
        parts = [self.protocol_version, str(self.status_code)]
        if self.reason_phrase:
            parts.append(self.reason_phrase)
        return " ".join(parts)

    def get_header(self, name: str) -> str | None:
        """Return the first header value matching ``name`` case-insensitively."""
        wanted = name.lower()
        for header_name, value in self.headers:
            if header_name.lower() == wanted:
                return value
        return None

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "ResponseDescriptor":
        """Build a descriptor from a fully read httpx response."""
        # .raw keeps header names as sent; .multi_items() lowercases them
        encoding = response.headers.encoding
        return cls(
            protocol_version=response.http_version,
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            headers=tuple(
                (name.decode(encoding), value.decode(encoding))
                for name, value in response.headers.raw
            ),
            body=response.content,
        )
