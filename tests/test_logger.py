""" Tests for the logging classes """

import logging

from randomreddit.logger import RandomRedditFormatter, RandomRedditLogger


def make_record(level: int) -> logging.LogRecord:
    return logging.LogRecord("random-reddit", level, __file__, 1, "GET %s", ("/r/aww",), None)


def test_formatter_colors_level():
    """ Tests that the level name is wrapped in its color """
    output = RandomRedditFormatter().format(make_record(logging.WARNING))
    assert "\x1b[33mWARNING\x1b[0m" in output
    assert output.endswith("GET /r/aww")

def test_formatter_without_color():
    """ Tests that no escape sequences are written without color """
    output = RandomRedditFormatter(use_color=False).format(make_record(logging.ERROR))
    assert "\x1b[" not in output
    assert "[random-reddit][ERROR]: GET /r/aww" in output

def test_formatter_keeps_record_intact():
    """ Tests that formatting does not change the record seen by other handlers """
    record = make_record(logging.DEBUG)
    RandomRedditFormatter().format(record)
    assert record.levelname == "DEBUG"

def test_logger_defaults_to_warning(capsys):
    """ Tests that the logger is quiet below WARNING by default """
    logger = RandomRedditLogger(use_color=False)
    logger.debug("hidden")
    logger.warning("shown")
    captured = capsys.readouterr()
    assert "hidden" not in captured.err
    assert "[WARNING]: shown" in captured.err
