"""Logging utility for gcjshift"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('gcjshift')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str, *args, logger: logging.Logger = LOGGER) -> bool:
    """
    Logs a warning the first time a given message template is seen.

    Repeats are keyed on the unformatted template, so a warning raised from
    a hot loop with varying arguments is still only emitted once.

    Args:
        warning:
            The message template, %-style

        *args:
            Arguments for the template

        logger:
            (Default gcjshift.LOGGER) The logger to emit through

    Returns:
        True if the warning was emitted, False if it was suppressed
    """
    if warning in _WARNINGS:
        return False

    logger.warning(warning, *args)
    _WARNINGS.add(warning)
    return True
