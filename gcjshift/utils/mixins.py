"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional

from gcjshift.utils.logging import warn_once


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives a class its own logger, named after the defining module and class
    (e.g. gcjshift.engine.OffsetEngine), so it inherits the package handler.
    """
    logger: logging.Logger

    def __init__(self, logstr: Optional[str] = None):
        _class = self.__class__
        name = f'{_class.__module__}.{_class.__qualname__}'
        if logstr:
            name += f'.{logstr}'

        self.logger = logging.getLogger(name)

    def warn_once(self, msg: str, *args) -> bool:
        """Logs a warning only once per message, across all instances"""
        return warn_once(msg, *args, logger=self.logger)
