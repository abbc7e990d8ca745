import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``halgen`` package logger.

    Records propagate to the handler installed by configure_logging.
    """
    return logging.getLogger(f"halgen.{name}")
