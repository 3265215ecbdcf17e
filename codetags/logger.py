"""
codetags logger

The library only obtains its logger, handlers and formatting are left to the
application that embeds it.
"""

import logging

logger_name: str = "codetags"


def get_logger() -> logging.Logger:
    _logger = logging.getLogger(logger_name)
    return _logger
