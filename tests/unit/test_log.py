"""Unit tests for functions defined in src/log.py."""

import logging

from rich.logging import RichHandler

from log import DEFAULT_LOG_LEVEL, get_logger, set_verbose


def test_get_logger() -> None:
    """Check the function to retrieve logger."""
    logger_name = "foo"
    logger = get_logger(logger_name)
    assert logger is not None
    assert logger.name == logger_name

    # at least one handler need to be set
    assert len(logger.handlers) >= 1
    assert isinstance(logger.handlers[0], RichHandler)
    assert logger.propagate is False
    assert logger.level == DEFAULT_LOG_LEVEL


def test_logger_does_not_write_to_stdout(capsys) -> None:
    """Check that log records never end up on stdout."""
    logger = get_logger("bar")
    logger.error("something went wrong")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "something went wrong" in captured.err


def test_set_verbose() -> None:
    """Check that verbosity is switched for all project loggers."""
    logger = get_logger("baz")

    set_verbose(True)
    assert logger.level == logging.DEBUG

    set_verbose(False)
    assert logger.level == DEFAULT_LOG_LEVEL
