import logging

from rich.logging import RichHandler


FORMAT = "%(name)s: %(message)s"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger("askai")
    logger.setLevel(level)
    # Safe to call more than once, e.g. under uvicorn --reload.
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter(FORMAT, datefmt="[%X]"))
        logger.addHandler(handler)
    return logger
