"""
Logging configuration for the user records backend.

``setup_logging`` attaches a single console handler to the root logger.
Modules log through ``logging.getLogger(__name__)`` and never configure
handlers themselves.
"""

# Standard library imports
import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        # Already configured (tests, uvicorn, repeated create_application calls)
        return

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
