"""Loguru configuration for the registry, aggregator and CLI.

Log records go to stderr so CLI tables on stdout stay clean. Records are
colorized text on an interactive terminal with LOG_FORMAT=console and JSON
lines otherwise. The same decision drives the structlog renderer in
stamp_system.utils.logging.
"""

import sys
from loguru import logger

from stamp_system.config.settings import settings

DEFAULT_COMPONENT = "stamp_system"


def use_console_output() -> bool:
    """True when stderr is a terminal and settings.log_format is "console"."""
    return sys.stderr.isatty() and settings.log_format.lower() == "console"


def configure_logging() -> None:
    """
    Install the single loguru sink.

    Records logged without a bound component are tagged with
    DEFAULT_COMPONENT so the console format always resolves.
    """
    logger.remove()
    logger.configure(extra={"component": DEFAULT_COMPONENT})
    level = settings.log_level.upper()

    if use_console_output():
        logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[component]}</cyan> | <level>{message}</level>",
            level=level,
            colorize=True,
        )
    else:
        logger.add(
            sys.stderr,
            format="{message}",
            level=level,
            serialize=True,
            diagnose=False,  # no variable values in tracebacks
        )


def get_logger(component: str):
    """
    Get a logger bound to a component name.

    Example:
        >>> log = get_logger("pipeline.evm_stamps")
        >>> log.info("Checking EVM stamps")
    """
    return logger.bind(component=component)


configure_logging()

__all__ = ["logger", "get_logger", "configure_logging", "use_console_output"]
