"""Shared pytest fixtures and configuration."""

import logging
from pathlib import Path

import httpx
import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "source"


@pytest.fixture
def logger():
    """A propagating logger so caplog sees every record."""
    test_logger = logging.getLogger("tests.tldwatch")
    test_logger.setLevel(logging.DEBUG)
    return test_logger


@pytest.fixture
def tlds_txt():
    """Content of the baseline TLD list fixture."""
    return (FIXTURES_DIR / "tlds.txt").read_text(encoding="utf-8")


@pytest.fixture
def sqlite_file(tmp_path):
    """Path of a database that does not exist yet."""
    return tmp_path / "db.sqlite"


def make_transport(content: str | bytes, status_code: int = 200) -> httpx.MockTransport:
    """Build a transport that answers every request with ``content``."""
    if isinstance(content, str):
        content = content.encode("utf-8")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status_code,
            headers={"content-type": "text/plain; charset=utf-8"},
            content=content,
        )

    return httpx.MockTransport(handler)


def make_failing_transport(exc_type: type[httpx.TransportError]) -> httpx.MockTransport:
    """Build a transport that raises ``exc_type`` for every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type("simulated failure", request=request)

    return httpx.MockTransport(handler)


@pytest.fixture
def transport_for():
    """Factory fixture: ``transport_for(content, status_code=200)``."""
    return make_transport


@pytest.fixture
def failing_transport():
    """Factory fixture: ``failing_transport(httpx.ReadTimeout)``."""
    return make_failing_transport


@pytest.fixture
def tlds_new_txt():
    """Content of the TLD list fixture with one TLD added."""
    return (FIXTURES_DIR / "tlds-new-content.txt").read_text(encoding="utf-8")
