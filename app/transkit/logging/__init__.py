"""Structured logging for transkit.

Public API:
    - configure_logging(): Opt-in output setup for host applications
    - get_module_logger(): Get a logger for the calling module

Importing transkit never configures logging.

Example:
    from transkit.logging import get_module_logger

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from transkit.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
