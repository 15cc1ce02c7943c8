"""Structlog loggers for transkit modules and opt-in output configuration.

transkit is a library: importing it never touches the host's structlog or
stdlib logging setup. Modules obtain lazy loggers through
``get_module_logger()``; they resolve the active structlog configuration on
first use, so whatever the host configures (before or after importing
transkit) applies to transkit events too.

Hosts without their own setup can call ``configure_logging()`` once at
startup:

    from transkit.logging import configure_logging

    configure_logging(log_level="DEBUG")
"""

import inspect
import logging
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from transkit.configuration import Settings, settings as app_settings


def build_processors(is_production: bool) -> List[Processor]:
    """Processor chain used by ``configure_logging``.

    Args:
        is_production: JSON output when True, console rendering otherwise.
    """
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger for a host application.

    Args:
        settings: Settings to read LOG_LEVEL and production mode from.
            Defaults to the process-wide ``transkit.configuration.settings``.
        log_level: Override for the log level (DEBUG, INFO, WARNING, ...).
        is_production: Override for production mode (JSON vs console output).

    Returns:
        A logger using the new configuration.
    """
    settings = settings or app_settings
    prod_mode = is_production if is_production is not None else settings.is_production
    structlog.configure(
        processors=build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


def get_module_logger() -> Any:
    """Return a lazy logger bound to the calling module.

    Example:
        # In transkit/i18n/registry.py
        logger = get_module_logger()
        # context: {"component": "registry", "module_path": "transkit.i18n.registry"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return structlog.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.get_logger(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
