import logging
import sys

from ..config.LogConfig import LogConfig

# Handler installed by configure_logging; replaced on reconfiguration
_HANDLER: logging.Handler | None = None


def configure_logging(log_config: LogConfig | None = None) -> logging.Logger:
    """Configure the ``halgen`` package logger.

    Attaches a single stderr handler to the package logger and leaves the
    root logger alone. Calling it again swaps the handler instead of
    stacking a second one.

    Args:
        log_config: Level and format to apply. Defaults to LogConfig().

    Returns:
        The configured package logger
    """
    global _HANDLER
    if log_config is None:
        log_config = LogConfig()

    package_logger = logging.getLogger("halgen")
    package_logger.setLevel(log_config.level)

    if _HANDLER is not None:
        package_logger.removeHandler(_HANDLER)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_config.format))
    package_logger.addHandler(handler)
    _HANDLER = handler

    return package_logger
