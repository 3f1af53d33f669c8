"""Loggers for the multimaps library.

Every component logs through a child of the ``multimaps`` logger
(``multimaps.map``, ``multimaps.config``, ``multimaps.factory``). Nothing is
attached to that logger until :func:`configure_logging` is called, so
records otherwise reach whatever the application configured on the root
logger.

Example:
    >>> import logging
    >>> from multimaps.logging import configure_logging
    >>> configure_logging(level=logging.DEBUG)
"""

import logging
from typing import Optional


MULTIMAPS_ROOT_LOGGER = "multimaps"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str = "") -> logging.Logger:
    """Get the logger of a library component, or the ``multimaps`` logger."""
    if not name:
        return logging.getLogger(MULTIMAPS_ROOT_LOGGER)
    return logging.getLogger(f"{MULTIMAPS_ROOT_LOGGER}.{name}")


def configure_logging(
    level: int = logging.INFO,
    format_string: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Set the level of the ``multimaps`` logger and give it a handler.

    The handler (a ``StreamHandler`` when none is passed) is only attached
    if the logger has no handlers yet; calling this again just updates the
    level.

    Args:
        level: Logging level for the logger and the new handler.
        format_string: Format used by the new handler.
        handler: Optional handler to attach instead of a StreamHandler.

    Returns:
        The ``multimaps`` logger.
    """
    logger = get_logger()
    logger.setLevel(level)

    if not logger.handlers:
        if handler is None:
            handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(handler)

    return logger


def set_level(level: int, component: str = "") -> None:
    """Set the level of one component's logger, or of the ``multimaps`` logger."""
    get_logger(component).setLevel(level)


def _library_loggers():
    yield get_logger()
    prefix = f"{MULTIMAPS_ROOT_LOGGER}."
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        # loggerDict also holds PlaceHolder entries for intermediate names
        if name.startswith(prefix) and isinstance(logger, logging.Logger):
            yield logger


def disable() -> None:
    """Silence the ``multimaps`` logger and every component logger under it."""
    for logger in _library_loggers():
        logger.disabled = True


def enable() -> None:
    """Undo :func:`disable`."""
    for logger in _library_loggers():
        logger.disabled = False
