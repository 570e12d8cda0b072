"""
System Commands.

Information about the installed client.
"""

from rich.console import Console

from reqline.core.config import get_app_config

console = Console()


def version() -> None:
    """
    Display version information.
    """
    application = get_app_config().application
    console.print(f"{application.name} [bold]{application.version}[/bold]")
