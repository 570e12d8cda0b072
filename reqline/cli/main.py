"""
CLI Application.

Usage:
    reqline --help
    reqline get https://httpbin.org/get
    reqline post https://httpbin.org/post name=alice role=admin
    reqline -v get https://httpbin.org/status/404
    reqline --debug post https://httpbin.org/post a=1
    reqline version

Options:
    --verbose, -v     Enable verbose output (INFO level logging on stderr)
    --debug, -d       Enable debug mode (DEBUG level logging on stderr)
    --help            Show help message
"""

import typer
from rich.console import Console

from reqline.cli.commands import get, post, version
from reqline.core.logging import setup_logging

app = typer.Typer(
    name="reqline",
    help="Send GET/POST requests and render the response in the terminal.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

err_console = Console(stderr=True)

app.command(name="get")(get)
app.command(name="post")(post)
app.command(name="version")(version)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    reqline - HTTP requests from the command line.

    Prints the status line, headers and body of the response.
    JSON bodies are pretty-printed.
    """
    if debug:
        setup_logging(level="DEBUG", format_type="console")
        err_console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
