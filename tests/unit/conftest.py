"""
Unit Test Fixtures.

Fixtures for unit tests - the network is never touched.
"""

import io
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from reqline.response.models import ResponseDescriptor


# =============================================================================
# Console Fixtures
# =============================================================================


@pytest.fixture
def output() -> io.StringIO:
    """Buffer receiving everything a test console prints."""
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """
    Non-terminal Rich console writing into the output buffer.

    No colors and no wrapping, so assertions see plain text.
    """
    return Console(file=output, force_terminal=False, color_system=None, width=80)


# =============================================================================
# Response Fixtures
# =============================================================================


@pytest.fixture
def make_response():
    """
    Factory for ResponseDescriptor instances.

    Usage:
        def test_render(make_response):
            response = make_response(body=b"hello")
    """

    def _make(
        status_code: int = 200,
        headers: list[tuple[str, str]] | None = None,
        body: bytes = b"",
        reason_phrase: str = "OK",
        protocol_version: str = "HTTP/1.1",
    ) -> ResponseDescriptor:
        return ResponseDescriptor(
            protocol_version=protocol_version,
            status_code=status_code,
            headers=tuple(headers or []),
            body=body,
            reason_phrase=reason_phrase,
        )

    return _make


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.logger", mock_logger):
                # Test code that logs
                mock_logger.debug.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
