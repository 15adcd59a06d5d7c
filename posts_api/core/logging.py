from __future__ import annotations
import logging, sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "posts_api"

def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the ``posts_api`` logger tree."""
    logger = logging.getLogger("posts_api")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
    return logger
