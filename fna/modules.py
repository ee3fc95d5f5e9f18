# -*- coding: utf-8 -*-
import builtins
import functools
import importlib
import os

import regex

TYPE_MODULE = type(os)

P_IDENTIFIERS = r'[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*'
P_REFERENCE = regex.compile(rf'^(?P<path>{P_IDENTIFIERS})(?::(?P<qualname>{P_IDENTIFIERS}))?$')


def fqdn(obj):
    if isinstance(obj, TYPE_MODULE):
        return obj.__name__

    target = obj if hasattr(obj, '__qualname__') else obj.__class__
    mod = getattr(target, '__module__', None)
    if mod in ('builtins', '__builtin__'):
        mod = None
    name = getattr(target, '__qualname__', None) or getattr(target, '__name__', None)

    return '.'.join(filter(None, [mod, name]))


def import_object(reference: str):
    """
    Resolves a textual reference to the object it names.

    Accepted forms:
        `package.module.attr.attr`, the longest importable prefix is the module
        `package.module:attr.attr`, explicit module / qualname split
        `name`, a builtin

    Raises `ImportError` if no module matches, `AttributeError` if the module lacks the attribute.
    """
    m = P_REFERENCE.match(reference or '')
    if m is None:
        raise ImportError(f"Invalid reference: {reference!r}")

    path, qualname = m.group('path'), m.group('qualname')
    if qualname is not None:
        return _getattr(importlib.import_module(path), qualname)

    parts = path.split('.')
    for i in range(len(parts), 0, -1):
        module_name = '.'.join(parts[:i])
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            if e.name is not None and not (module_name == e.name or module_name.startswith(f"{e.name}.")):
                raise
            continue
        return _getattr(module, '.'.join(parts[i:]))

    if len(parts) == 1 and hasattr(builtins, path):
        return getattr(builtins, path)
    raise ImportError(f"No module found for: {reference!r}")


def _getattr(obj, qualname: str):
    if not qualname:
        return obj
    return functools.reduce(getattr, qualname.split('.'), obj)
