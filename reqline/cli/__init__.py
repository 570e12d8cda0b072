"""
Command-line interface.

Typer application with Rich output. The rendered response goes to stdout,
errors and logs go to stderr.
"""
