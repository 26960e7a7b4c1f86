import logging

from electrostatics.logging_config import setup_logging


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging()
    logger = setup_logging(level=logging.DEBUG)

    assert logger is logging.getLogger("electrostatics")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    setup_logging()


def test_field_warning_reaches_package_logger(caplog):
    setup_logging()
    with caplog.at_level(logging.WARNING, logger="electrostatics"):
        logging.getLogger("electrostatics.core.field").warning("coincides")
    assert "coincides" in caplog.text
