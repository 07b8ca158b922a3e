import io
import logging

import pytest

from measura.logging_utils import LOGGER_NAME, setup_logging


@pytest.fixture()
def measura_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def own_handlers(logger):
    return [h for h in logger.handlers if getattr(h, "_measura_handler", False)]


def test_records_are_formatted(measura_logger):
    stream = io.StringIO()
    setup_logging("INFO", stream)
    logging.getLogger("measura.units.loader").info("hello %s", "world")

    line = stream.getvalue().strip()
    assert line.endswith("| INFO     | measura.units.loader | hello world")


def test_no_duplicate_handlers(measura_logger):
    setup_logging("INFO", io.StringIO())
    setup_logging("DEBUG", io.StringIO())
    assert len(own_handlers(measura_logger)) == 1
    assert measura_logger.level == logging.DEBUG


def test_repeat_call_redirects_stream(measura_logger):
    first, second = io.StringIO(), io.StringIO()
    setup_logging("WARNING", first)
    setup_logging("WARNING", second)
    logging.getLogger("measura").warning("moved")
    assert first.getvalue() == ""
    assert "moved" in second.getvalue()


def test_level_filters_records(measura_logger):
    stream = io.StringIO()
    setup_logging("ERROR", stream)
    logging.getLogger("measura.service").warning("quiet")
    assert stream.getvalue() == ""


def test_unknown_level_falls_back_to_warning(measura_logger):
    logger = setup_logging("verbose", io.StringIO())
    assert logger.level == logging.WARNING
