"""
CLI Commands.

Organized by feature area.
"""

from reqline.cli.commands.http import get, post
from reqline.cli.commands.system import version

__all__ = [
    "get",
    "post",
    "version",
]
