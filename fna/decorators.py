# -*- coding: utf-8 -*-
import logging
import time

from decorator import decorator

from . import logs

LOGGER = logs.get_logger(__name__)


@decorator
def trace(func, logger=LOGGER, *a, **kw):
    """
    Logs how long the decorated function took, at debug level.
    Exceptions are not caught, the elapsed time is logged either way.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return func(*a, **kw)

    start = time.perf_counter()
    try:
        return func(*a, **kw)
    finally:
        logger.debug(f'[{func.__qualname__}] took {(time.perf_counter() - start) * 1000:.3f}ms')
