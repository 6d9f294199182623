"""Logging helpers for the cart offer service."""

import logging


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stream handler to the package logger if none is present.

    uvicorn configures only its own loggers.
    """
    logger = logging.getLogger("cart_offer")
    logger.setLevel(level.upper())
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)
    return logger
