"""
Response Renderer.

Writes a response to the terminal in three sections, each followed by a
blank line:

    HTTP/1.1 200 OK

    Content-Type: application/json
    X-Test: 1

    {
      "ok": true
    }

JSON bodies are pretty-printed. Everything else is written unchanged, with
one exception: a body that does not end in a newline gets one, so the
blank separator line always stands on its own. Header values are written
as received, tabs and control characters included.
"""

import json

from rich.console import Console
from rich.highlighter import JSONHighlighter
from rich.text import Text

from reqline.core.exceptions import DecodeError
from reqline.core.logging import get_logger, log_with_source
from reqline.response.models import ResponseDescriptor
from reqline.response.negotiation import MediaType

logger = get_logger(__name__)

DEFAULT_CHARSET = "utf-8"
DEFAULT_INDENT = 2


def decode_body(body: bytes, media_type: MediaType | None) -> str:
    """
    Decode a response body using the declared charset, UTF-8 otherwise.

    Raises:
        DecodeError: If the charset is unknown or the bytes do not decode
    """
    encoding = (media_type.charset if media_type else None) or DEFAULT_CHARSET
    try:
        return body.decode(encoding)
    except LookupError as e:
        raise DecodeError(encoding, f"Unknown response charset '{encoding}'") from e
    except UnicodeDecodeError as e:
        raise DecodeError(encoding) from e


def format_json(text: str, indent: int = DEFAULT_INDENT, sort_keys: bool = False) -> str | None:
    """Pretty-print JSON text. Returns None if the text is not valid JSON."""
    try:
        obj = json.loads(text)
    except (ValueError, RecursionError):
        return None
    return json.dumps(obj, indent=indent, sort_keys=sort_keys, ensure_ascii=False)


class ResponseRenderer:
    """
    Renders a ResponseDescriptor to a Rich console.

    Styling only appears when the console is a terminal. Header values and
    raw bodies bypass Rich so their characters reach the output untouched.
    """

    def __init__(
        self,
        console: Console,
        indent: int = DEFAULT_INDENT,
        sort_keys: bool = False,
    ) -> None:
        self.console = console
        self.indent = indent
        self.sort_keys = sort_keys
        self._json_highlighter = JSONHighlighter()

    def render(self, response: ResponseDescriptor, media_type: MediaType | None) -> None:
        """
        Render status line, headers and body in that order.

        Raises:
            DecodeError: If the body is not text. Status and headers are
                already written at that point.
        """
        self.render_status(response)
        self.render_headers(response)
        self.render_body(response, media_type)

    def render_status(self, response: ResponseDescriptor) -> None:
        self.console.print(Text(response.status_line, style="bold blue"), soft_wrap=True)
        self.console.print()

    def render_headers(self, response: ResponseDescriptor) -> None:
        for name, value in response.headers:
            self.console.print(Text(name, style="cyan"), end="", soft_wrap=True)
            self._write(f": {value}\n")
        self.console.print()

    def render_body(self, response: ResponseDescriptor, media_type: MediaType | None) -> None:
        text = decode_body(response.body, media_type)

        if media_type is not None and media_type.is_json:
            pretty = format_json(text, indent=self.indent, sort_keys=self.sort_keys)
            if pretty is not None:
                self.console.print(self._json_highlighter(Text(pretty)), soft_wrap=True)
                self.console.print()
                return
            log_with_source(
                logger,
                "internal",
                "debug",
                "Declared JSON body did not parse, rendering raw",
                body_length=len(text),
            )

        self._write(text if text.endswith("\n") else text + "\n")
        self.console.print()

    def _write(self, text: str) -> None:
        # Text() expands tabs and strips control codes such as \r
        file = self.console.file
        file.write(text)
        file.flush()
