# -*- coding: utf-8 -*-
import inspect
import logging
import sys
import threading
from typing import Dict, Optional

from . import config

LOGGER_FORMAT = config.get('logger.format', '%(asctime)s %(levelname)-7s %(name)s:%(lineno)-4d - %(message)s')
LOGGER_FORMATTER = logging.Formatter(LOGGER_FORMAT)


class Loggers:
    def __init__(self) -> None:
        self._levels: Dict[str, str] = {
            'root': 'INFO',
            **{
                logger_name: logger_config.get('level') if isinstance(logger_config, dict) else logger_config
                for logger_name, logger_config in (config.get('logging', {}) or {}).items()
            }
        }
        self._handler = logging.StreamHandler(sys.stdout)
        self._handler.setFormatter(LOGGER_FORMATTER)
        self._loggers: Dict[str, logging.Logger] = {}
        self._lock = threading.Lock()

    def _get_level(self, name: str):
        while True:
            level = self._levels.get(name)
            if level:
                return level
            end = name.rfind('.')
            if end <= 0:
                return self._levels.get('root') or 'INFO'
            name = name[:end]

    def _get_logger(self, name: str, level: Optional[str] = None):
        _logger = logging.getLogger(name)
        _logger.setLevel(level or self._get_level(name))
        _logger.handlers.clear()
        _logger.addHandler(self._handler)
        _logger.propagate = False
        return _logger

    def get_logger(self, name: str, level: Optional[str] = None):
        logger = self._loggers.get(name)
        if logger is not None:
            if level:
                logger.setLevel(level)
            return logger
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = self._loggers[name] = self._get_logger(name, level)
        return logger

    def update_level(self, name: str, level):
        self._levels[name] = level
        for _name, _logger in self._loggers.items():
            if _name == name or _name.startswith(f"{name}."):
                _logger.setLevel(level)


_LOGGERS = Loggers()


def get_logger(name=None, level=None):
    if name is None:
        name = inspect.currentframe().f_back.f_globals['__name__']
    return _LOGGERS.get_logger(name, level)


def update_level(name: str, level):
    _LOGGERS.update_level(name, level)
