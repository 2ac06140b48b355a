import logging
import sys

import pytest

from statstar.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(saved_level)
    for handler in saved_handlers:
        logger.addHandler(handler)


def test_console_handler_writes_to_stderr(package_logger, capsys):
    logger = setup_logging(level=logging.INFO)
    assert logger is package_logger
    assert [h.stream for h in logger.handlers] == [sys.stderr]

    logging.getLogger("statstar.engine.points").info("hello")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "statstar.engine.points - INFO - hello" in captured.err


def test_repeated_setup_does_not_stack_handlers(package_logger):
    setup_logging()
    setup_logging(level=logging.DEBUG)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_log_file_receives_records(package_logger, tmp_path):
    target = tmp_path / "statstar.log"
    setup_logging(level=logging.DEBUG, log_file=str(target))
    assert len(package_logger.handlers) == 2

    logging.getLogger("statstar.render.svg").warning("written")
    for handler in package_logger.handlers:
        handler.flush()
    text = target.read_text(encoding="utf-8")
    assert "Logging initialized at DEBUG." in text
    assert "statstar.render.svg - WARNING - written" in text
