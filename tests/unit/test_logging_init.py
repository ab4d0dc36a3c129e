from __future__ import annotations

import logging
from io import StringIO

from sales_pivot.logging.init import (
    SUMMARY_LEVEL,
    LabeledFormatter,
    get_logger,
    log_summary,
    setup_logging,
)


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()
    assert logger.name == "sales_pivot"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_setup_logging_is_idempotent():
    first = setup_logging()
    second = setup_logging()
    assert first is second
    assert len(second.handlers) == 1
    assert get_logger() is first


def test_labeled_prefixes():
    captured = StringIO()
    logger = logging.getLogger("test_sales_pivot_labels")
    logger.setLevel(logging.INFO)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    handler = logging.StreamHandler(captured)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(SUMMARY_LEVEL, "file=x rows=1")

    lines = captured.getvalue().strip().splitlines()
    assert lines == [
        "INFO Test info message",
        "WARN Test warning message",
        "ERROR Test error message",
        "SUMMARY file=x rows=1",
    ]


def test_log_summary_goes_to_stdout(capsys):
    log_summary("file=a.xlsx rows=0")
    assert "SUMMARY file=a.xlsx rows=0" in capsys.readouterr().out


def test_child_module_debug_visible_after_debug_level(capsys):
    setup_logging()
    child = logging.getLogger("sales_pivot.services.aggregator")
    child.debug("hidden")
    setup_logging(logging.DEBUG)
    child.debug("shown")
    out = capsys.readouterr().out
    assert "DEBUG shown" in out
    assert "hidden" not in out


def test_setup_logging_level_applies_to_logger_and_handler():
    logger = setup_logging(logging.DEBUG)
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG
    assert setup_logging(logging.INFO) is logger
    assert logger.level == logging.INFO
    assert logger.handlers[0].level == logging.INFO


def test_setup_logging_without_level_keeps_current_level():
    logger = setup_logging(logging.DEBUG)
    setup_logging()
    get_logger()
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG
