"""Logging setup"""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the ``sdh_inventory`` logger once with a console handler"""
    global _configured
    logger = logging.getLogger("sdh_inventory")
    logger.setLevel(level.upper())
    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True
    return logger
