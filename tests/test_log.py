import logging

from rich.logging import RichHandler

from askai.log import setup_logging


def test_setup_logging_is_idempotent() -> None:
    logger = setup_logging("DEBUG")
    setup_logging("DEBUG")
    handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG
    assert logging.getLogger("askai.domain.services").getEffectiveLevel() == logging.DEBUG
