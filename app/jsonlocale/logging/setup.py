"""Structlog configuration for the jsonlocale package.

Log records are routed through the standard library logger named
``jsonlocale`` so host applications can raise, lower or silence the
library's output with ``logging.getLogger("jsonlocale")``. The package
wraps that logger with its own processor chain and never touches the
global structlog configuration, which belongs to the host application.

Usage:
    from jsonlocale.logging import configure_logging, get_module_logger

    # Optional: switch level or renderer for the package logger
    configure_logging(log_level="DEBUG")

    # In a library module
    logger = get_module_logger()
    logger.info("catalog_built", language="de")

Dependencies:
    - jsonlocale.configuration.Settings
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger

from jsonlocale.configuration import settings

PACKAGE_LOGGER_NAME = "jsonlocale"
PACKAGE_HANDLER_NAME = "jsonlocale"
SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List:
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
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
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _package_logger(level: int) -> logging.Logger:
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    if not any(
        handler.get_name() == PACKAGE_HANDLER_NAME
        for handler in package_logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.set_name(PACKAGE_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
    package_logger.propagate = False
    return package_logger


# Shared by every logger bound from the package logger; replaced in place.
_processors: List = []


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure the package logger.

    Sets the level of the ``jsonlocale`` stdlib logger and the renderer of
    the package processor chain: console output in development, JSON lines
    in production. Under pytest the logger is silenced. The global structlog
    configuration is left untouched.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ...). Defaults to
            settings.LOG_LEVEL.
        is_production: JSON rendering when True. Defaults to
            settings.is_production.

    Returns:
        The package logger

    Example:
        logger = configure_logging(log_level="DEBUG", is_production=False)
    """
    prod_mode = is_production if is_production is not None else settings.is_production
    _processors[:] = _build_processors(prod_mode)

    if _is_test_environment():
        _package_logger(SILENT)
    else:
        level_name = (log_level or settings.LOG_LEVEL).upper()
        _package_logger(getattr(logging, level_name, logging.INFO))
    return logger


logger: BoundLogger = structlog.wrap_logger(
    logging.getLogger(PACKAGE_LOGGER_NAME),
    processors=_processors,
    wrapper_class=structlog.stdlib.BoundLogger,
)
configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds ``component`` (last dotted part of the module name) and
    ``module_path`` (the full module name).

    Returns:
        Logger instance with module context

    Example:
        # In jsonlocale/i18n/cache.py
        logger = get_module_logger()
        # context: {"component": "cache", "module_path": "jsonlocale.i18n.cache"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
