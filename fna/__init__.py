# -*- coding: utf-8 -*-
from . import \
    callbacks, \
    config, \
    decorators, \
    exceptions, \
    invoker, \
    logs, \
    modules
from .exceptions import InvalidArgumentShapeError, InvalidCallbackError, InvalidParameterError, MissingParameterError
from .invoker import Wrapper, invoke, wrap

__version__ = '1.0.0'
