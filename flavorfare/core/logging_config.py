"""
Logging setup for the API.

``setup_logging`` attaches a single console handler to the root logger.
Modules log through ``logging.getLogger(__name__)``.
"""
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Does nothing if the root logger already has handlers, so repeated
    imports of the app (e.g. under pytest) don't stack handlers.

    Args:
        level: Logging level name, case insensitive. Unknown names fall back to INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(console_handler)
