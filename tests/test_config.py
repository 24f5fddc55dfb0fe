"""Tests for configuration module."""

import json
import logging

from tldwatch.config import (
    DEFAULT_SQLITE_FILE,
    REQUEST_TIMEOUT,
    TLD_LIST_URL,
    debug_from_env,
    get_sqlite_file,
    getenv,
    setup_logging,
)


def test_tld_list_url_defined():
    """Test that the TLD list URL points at IANA over HTTPS."""
    assert TLD_LIST_URL.startswith("https://data.iana.org/")
    assert TLD_LIST_URL.endswith(".txt")


def test_request_timeout():
    assert REQUEST_TIMEOUT == 10.0


def test_getenv_fallback(monkeypatch):
    """Test that unset and empty variables both use the fallback."""
    monkeypatch.delenv("TLDWATCH_TEST_VAR", raising=False)
    assert getenv("TLDWATCH_TEST_VAR", "fallback") == "fallback"

    monkeypatch.setenv("TLDWATCH_TEST_VAR", "")
    assert getenv("TLDWATCH_TEST_VAR", "fallback") == "fallback"

    monkeypatch.setenv("TLDWATCH_TEST_VAR", "value")
    assert getenv("TLDWATCH_TEST_VAR", "fallback") == "value"


def test_get_sqlite_file(monkeypatch):
    """Test the SQLITE_FILE override and its default."""
    monkeypatch.delenv("SQLITE_FILE", raising=False)
    assert get_sqlite_file() == DEFAULT_SQLITE_FILE

    monkeypatch.setenv("SQLITE_FILE", "/var/lib/tldwatch/tlds.sqlite")
    assert get_sqlite_file() == "/var/lib/tldwatch/tlds.sqlite"


def test_debug_from_env_requires_literal_true(monkeypatch):
    """Test that only DEBUG=true turns debug on."""
    monkeypatch.delenv("DEBUG", raising=False)
    assert debug_from_env() is False

    for value in ["1", "TRUE", "True", "yes", " true"]:
        monkeypatch.setenv("DEBUG", value)
        assert debug_from_env() is False

    monkeypatch.setenv("DEBUG", "true")
    assert debug_from_env() is True


def test_setup_logging_levels():
    """Test that debug switches the logger to DEBUG."""
    assert setup_logging().level == logging.INFO
    assert setup_logging(debug=True).level == logging.DEBUG


def test_setup_logging_does_not_stack_handlers():
    """Test that repeated setup keeps a single handler."""
    setup_logging()
    logger = setup_logging()

    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_setup_logging_writes_json_to_stderr(capsys):
    """Test that records are written to stderr as JSON with extra fields."""
    logger = setup_logging()

    logger.info("failed to exec insert statement", extra={"tld": "com", "err": "boom"})
    logger.debug("hidden at INFO")

    captured = capsys.readouterr()
    assert captured.out == ""

    lines = captured.err.strip().splitlines()
    assert len(lines) == 1

    record = json.loads(lines[0])
    assert record["message"] == "failed to exec insert statement"
    assert record["levelname"] == "INFO"
    assert record["tld"] == "com"
    assert record["err"] == "boom"
