# -*- coding: utf-8 -*-
"""
Resolves anything invocable into a callable handle and its formal parameters.

Supported shapes:
    - functions and builtins: `foo`, `"package.module.foo"`, `"len"`
    - closures: `lambda a: a`, nested functions
    - methods: `obj.foo`, `(obj, "foo")`, `(Class, "classmethod")`, `("package.module.Class", "classmethod")`
    - static methods: `"package.module.Class::bar"`, `(Class, "bar")`
    - invokable objects: instances defining `__call__`
    - classes, as constructors
"""
import enum
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Tuple

from . import modules
from .exceptions import InvalidCallbackError

SCOPE_SEPARATOR = '::'


class Kind(enum.Enum):
    FUNCTION = 'function'
    CLOSURE = 'closure'
    METHOD = 'method'
    STATIC_METHOD = 'static method'
    INVOKABLE_OBJECT = 'invokable object'
    CLASS = 'class'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Parameter:
    name: str
    position: int
    has_default: bool = False
    default: Any = None
    keyword_only: bool = False


@dataclass(frozen=True)
class Callback:
    handle: Callable
    kind: Kind
    name: str
    parameters: Tuple[Parameter, ...]


def is_callable(candidate) -> bool:
    try:
        resolve(candidate)
        return True
    except InvalidCallbackError:
        return False


def resolve(candidate) -> Callback:
    handle, kind = _classify(candidate)
    return Callback(handle, kind, modules.fqdn(handle), get_parameters(handle))


def get_parameters(handle: Callable) -> Tuple[Parameter, ...]:
    try:
        signature = inspect.signature(handle)
    except Exception as e:
        raise InvalidCallbackError() from e

    parameters = []
    for param in signature.parameters.values():
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        has_default = param.default is not inspect.Parameter.empty
        parameters.append(Parameter(
            name=param.name,
            position=len(parameters),
            has_default=has_default,
            default=param.default if has_default else None,
            keyword_only=param.kind == inspect.Parameter.KEYWORD_ONLY,
        ))
    return tuple(parameters)


def _classify(candidate) -> Tuple[Callable, Kind]:
    if isinstance(candidate, str):
        return _classify_reference(candidate)

    if isinstance(candidate, (tuple, list)):
        if len(candidate) != 2 or not isinstance(candidate[1], str):
            raise InvalidCallbackError()
        return _classify_method(*candidate)

    if inspect.isclass(candidate):
        return candidate, Kind.CLASS

    if inspect.ismethod(candidate):
        return candidate, Kind.METHOD

    if inspect.isfunction(candidate):
        if candidate.__name__ == '<lambda>' or '<locals>' in candidate.__qualname__:
            return candidate, Kind.CLOSURE
        return candidate, Kind.FUNCTION

    if inspect.isbuiltin(candidate):
        return candidate, Kind.FUNCTION

    if callable(candidate):
        return candidate, Kind.INVOKABLE_OBJECT

    raise InvalidCallbackError()


def _classify_reference(reference: str) -> Tuple[Callable, Kind]:
    if SCOPE_SEPARATOR in reference:
        type_name, method_name = reference.split(SCOPE_SEPARATOR, 1)
        target = _import(type_name)
        if not inspect.isclass(target):
            raise InvalidCallbackError()
        handle, _ = _classify_method(target, method_name)
        return handle, Kind.STATIC_METHOD

    target = _import(reference)
    if isinstance(target, str):
        raise InvalidCallbackError()
    return _classify(target)


def _classify_method(target, method_name: str) -> Tuple[Callable, Kind]:
    if isinstance(target, str):
        target = _import(target)
        if not inspect.isclass(target):
            raise InvalidCallbackError()

    try:
        handle = getattr(target, method_name, None)
        static = inspect.getattr_static(target, method_name, None) if inspect.isclass(target) else None
    except Exception as e:
        raise InvalidCallbackError() from e
    if handle is None or not callable(handle):
        raise InvalidCallbackError()

    if isinstance(static, staticmethod):
        return handle, Kind.STATIC_METHOD
    # unbound instance methods, `self` cannot be filled
    if inspect.isclass(target) and (inspect.isfunction(handle) or inspect.ismethoddescriptor(handle)):
        raise InvalidCallbackError()
    return handle, Kind.METHOD


def _import(reference: str):
    try:
        return modules.import_object(reference)
    except Exception as e:
        raise InvalidCallbackError() from e
