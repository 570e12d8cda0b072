"""Allow ``python -m reqline``."""

from reqline.cli.main import run

run()
