"""Tests for the contextual logging helpers."""

import logging

import pytest

from mcp_jira.logging_config import (
    ContextualLogger,
    get_log_context,
    log_operation,
    mask_sensitive,
    setup_logger,
)


@pytest.fixture
def test_logger():
    logger = setup_logger("mcp-jira-test", level="DEBUG")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def test_setup_logger_returns_contextual_logger(test_logger):
    assert isinstance(test_logger, ContextualLogger)
    assert test_logger.level == logging.DEBUG
    assert test_logger.propagate is False


def test_setup_logger_replaces_handlers(test_logger):
    setup_logger("mcp-jira-test", level="DEBUG")

    assert len(test_logger.handlers) == 1


def test_setup_logger_file_handler(tmp_path):
    logger = setup_logger("mcp-jira-file", log_to_file=True, log_dir=str(tmp_path))
    try:
        logger.info("written to file")
        for handler in logger.handlers:
            handler.flush()
        content = (tmp_path / "mcp-jira-file.log").read_text()
        assert "written to file" in content
        assert "no-context" in content
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


def test_log_operation_sets_and_restores_context(test_logger):
    assert get_log_context() == {}

    with log_operation(test_logger, "create_issue", project="PROJ") as op:
        context = get_log_context()
        assert context["operation"] == "create_issue"
        assert context["project"] == "PROJ"
        assert context["trace_id"] == op.trace_id

    assert get_log_context() == {}


def test_log_operation_logs_failure(test_logger, caplog):
    test_logger.propagate = True
    with caplog.at_level(logging.ERROR, logger="mcp-jira-test"):
        with pytest.raises(RuntimeError):
            with log_operation(test_logger, "search_issues"):
                raise RuntimeError("boom")

    assert "Operation failed: search_issues" in caplog.text
    assert "boom" in caplog.text
    assert get_log_context() == {}


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "<empty>"),
        ("", "<empty>"),
        ("short", "*****"),
        ("abcdefghijkl", "********ijkl"),
    ],
)
def test_mask_sensitive(value, expected):
    assert mask_sensitive(value) == expected
