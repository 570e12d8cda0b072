"""
reqline - a small HTTP client for the terminal.

- core/: Configuration, logging, exceptions
- request/: key=value parsing, body building, request dispatch
- response/: Response model, content negotiation, rendering
- cli/: Command-line interface (Typer + Rich)
"""
