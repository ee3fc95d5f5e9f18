# -*- coding: utf-8 -*-
import enum
from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterable, List, Optional, Tuple

from . import callbacks, logs
from .callbacks import Parameter
from .decorators import trace
from .exceptions import InvalidArgumentShapeError, MissingParameterError

LOGGER = logs.get_logger(__name__)


class ArgumentsType(enum.IntEnum):
    MIXED = -1
    LIST = 0
    DICT = 1


def _entries(arguments) -> List[Tuple[Optional[str], Any]]:
    """(name, value) pairs, name is None for positional entries"""
    if arguments is None:
        return []
    if isinstance(arguments, Mapping):
        return [(key if isinstance(key, str) else None, value) for key, value in arguments.items()]
    if isinstance(arguments, Sequence) and not isinstance(arguments, (str, bytes, bytearray)):
        return [(None, value) for value in arguments]
    raise TypeError(f'Unsupported arguments type: {type(arguments)}')


def _get_type(entries: List[Tuple[Optional[str], Any]]) -> ArgumentsType:
    n_named = sum(1 for name, _ in entries if name is not None)
    if n_named == 0:
        return ArgumentsType.LIST
    if n_named == len(entries):
        return ArgumentsType.DICT
    return ArgumentsType.MIXED


def get_arguments_type(arguments) -> ArgumentsType:
    return _get_type(_entries(arguments))


def prepare_arguments(parameters: Iterable[Parameter], arguments) -> Tuple[list, Dict[str, Any]]:
    """
    Builds the call arguments for `parameters` out of a list or a dict.

    A list is passed through as is. A dict is ordered by parameter position,
    omitted parameters fall back to their defaults; keyword-only parameters
    end up in the returned kwargs.

    :raise InvalidArgumentShapeError: named and positional entries are mixed
    :raise MissingParameterError: a parameter without default is omitted from a dict
    """
    entries = _entries(arguments)
    arguments_type = _get_type(entries)

    if arguments_type == ArgumentsType.LIST:
        return [value for _, value in entries], {}

    if arguments_type == ArgumentsType.MIXED:
        raise InvalidArgumentShapeError()

    named = dict(entries)
    args, kwargs = [], {}
    for parameter in sorted(parameters, key=lambda p: p.position):
        if parameter.name in named:
            value = named[parameter.name]
        elif parameter.has_default:
            value = parameter.default
        else:
            raise MissingParameterError(parameter.name, parameter.position)

        if parameter.keyword_only:
            kwargs[parameter.name] = value
        else:
            args.append(value)
    return args, kwargs


class Wrapper(object):
    """
    Calls a callback with arguments given as a list, or as a dict keyed by parameter name:

        >>> def foo(a, b, c='c'):
        ...     return a, b, c
        >>> Wrapper(foo)({'b': 'b', 'a': 'a'})
        ('a', 'b', 'c')
    """

    def __init__(self, callback) -> None:
        super().__init__()
        self._callback = callbacks.resolve(callback)
        LOGGER.debug(
            f"[wrapper] {self._callback.name} ({self._callback.kind}), "
            f"parameters: {[p.name for p in self._callback.parameters]}"
        )

    @property
    def callback(self):
        return self._callback.handle

    @property
    def kind(self) -> callbacks.Kind:
        return self._callback.kind

    @property
    def name(self) -> str:
        return self._callback.name

    @property
    def parameters(self) -> Tuple[Parameter, ...]:
        return self._callback.parameters

    def prepare_arguments(self, arguments=None) -> Tuple[list, Dict[str, Any]]:
        return prepare_arguments(self._callback.parameters, arguments)

    @trace
    def __call__(self, arguments=None):
        args, kwargs = self.prepare_arguments(arguments)
        return self._callback.handle(*args, **kwargs)

    def invoke(self, arguments=None):
        return self(arguments)

    def __repr__(self) -> str:
        return f"Wrapper({self._callback.name}, {self._callback.kind})"


def wrap(callback) -> Wrapper:
    return callback if isinstance(callback, Wrapper) else Wrapper(callback)


def invoke(callback, arguments=None):
    return wrap(callback)(arguments)
