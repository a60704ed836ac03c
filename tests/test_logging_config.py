import logging

from rebaseview.logging_config import setup_logging


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logging_does_not_duplicate_handlers():
    logger = setup_logging(level=logging.DEBUG)
    setup_logging(level=logging.DEBUG)
    try:
        assert logger.name == "rebaseview"
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
    finally:
        _close_handlers(logger)


def test_setup_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "viewer.log"
    logger = setup_logging(level=logging.INFO, log_file=str(log_file))
    try:
        logging.getLogger("rebaseview.controller.drawing").info("rebuilt 3 primitives")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "rebaseview.controller.drawing - INFO - rebuilt 3 primitives" in text
    finally:
        _close_handlers(logger)
