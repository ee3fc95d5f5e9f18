import pytest

from fna import Wrapper, invoke, invoker, wrap
from fna.callbacks import Kind, Parameter
from fna.exceptions import InvalidArgumentShapeError, InvalidCallbackError, InvalidParameterError, MissingParameterError
from fna.invoker import ArgumentsType


class CallbackCollection:
    def __init__(self):
        self.calls = []

    def foo(self, a, b, c='with default value'):
        self.calls.append((a, b, c))
        return a, b, c

    @staticmethod
    def bar(a, b, c='with default value'):
        return a, b, c

    def __call__(self, a, b, c='with default value'):
        self.calls.append((a, b, c))
        return a, b, c


class Point:
    def __init__(self, x, y=0):
        self.x = x
        self.y = y


def foo(a, b, c):
    return a, b, c


def abc(a, b, c='D'):
    return a, b, c


def keyword_only(a, *, b, c=3):
    return a, b, c


def positional_only(a, b, /):
    return a, b


def nothing():
    return 'nothing'


@pytest.mark.parametrize('arguments, expected', [
    ([1, 2, 3], ArgumentsType.LIST),
    ((1, 2, 3), ArgumentsType.LIST),
    ({'one': 1, 'two': '2', 'three': '3'}, ArgumentsType.DICT),
    ({'one': '1', 0: '2', 'three': '3'}, ArgumentsType.MIXED),
    ({0: '2', 'one': '1'}, ArgumentsType.MIXED),
    ({0: 'a', 1: 'b'}, ArgumentsType.LIST),
    ([], ArgumentsType.LIST),
    ({}, ArgumentsType.LIST),
    (None, ArgumentsType.LIST),
])
def test_get_arguments_type(arguments, expected):
    assert invoker.get_arguments_type(arguments) == expected


@pytest.mark.parametrize('arguments', ['abc', b'abc', 42, {1, 2}])
def test_unsupported_arguments(arguments):
    with pytest.raises(TypeError):
        invoker.get_arguments_type(arguments)


def test_prepare_arguments_from_dict():
    parameters = (Parameter('a', 0), Parameter('b', 1), Parameter('c', 2, True, 'D'))
    assert invoker.prepare_arguments(parameters, {'b': 'B', 'a': 'A'}) == (['A', 'B', 'D'], {})


def test_prepare_arguments_returns_list_unmodified():
    parameters = (Parameter('a', 0),)
    assert invoker.prepare_arguments(parameters, ['foo', 'baz', 42]) == (['foo', 'baz', 42], {})


def test_prepare_arguments_mixed():
    with pytest.raises(InvalidArgumentShapeError, match='^Unable to handle mixed arrays$'):
        invoker.prepare_arguments((), {'a': 'a', 0: 'b'})


def test_invoke_without_parameters():
    assert Wrapper(nothing)([]) == 'nothing'
    assert Wrapper(nothing)() == 'nothing'
    assert Wrapper(nothing)({}) == 'nothing'


def test_succeeds_for_param_list():
    obj = CallbackCollection()
    Wrapper(obj)(['a', 'b', 'c'])
    assert obj.calls == [('a', 'b', 'c')]


def test_succeeds_for_param_map():
    obj = CallbackCollection()
    Wrapper(obj)({'c': 'c', 'a': 'a', 'b': 'b'})
    assert obj.calls == [('a', 'b', 'c')]


def test_list_and_dict_dispatch_alike():
    wrapper = Wrapper(foo)
    assert wrapper({'a': 'a', 'b': 'b', 'c': 'c'}) == wrapper(['a', 'b', 'c']) == ('a', 'b', 'c')


def test_succeeds_for_default_values():
    obj = CallbackCollection()
    Wrapper(obj)({'b': 'b', 'a': 'a'})
    assert obj.calls == [('a', 'b', 'with default value')]
    assert Wrapper(abc)({'b': 'B', 'a': 'A'}) == ('A', 'B', 'D')


@pytest.mark.parametrize('arguments', [
    {'a': 'a', 0: 'b', 1: 'c'},
    {0: 'a', 'b': 'b'},
    {0: 'a', 1: 'b', 'c': 'c'},
])
def test_fails_for_mixed_arguments(arguments):
    obj = CallbackCollection()
    with pytest.raises(InvalidArgumentShapeError, match='^Unable to handle mixed arrays$'):
        Wrapper(obj)(arguments)
    assert obj.calls == []


def test_fails_for_missing_argument():
    obj = CallbackCollection()
    with pytest.raises(MissingParameterError, match="^Missing parameter 'a' on position 0$") as e:
        Wrapper(obj)({'b': 'b'})
    assert e.value.name == 'a'
    assert e.value.position == 0
    assert obj.calls == []


def test_fails_for_missing_argument_in_the_middle():
    with pytest.raises(InvalidParameterError, match="^Missing parameter 'b' on position 1$"):
        Wrapper((CallbackCollection(), 'foo'))({'a': 'a', 'c': 'c'})


def test_none_is_a_value():
    assert Wrapper(abc)({'a': None, 'b': None, 'c': None}) == (None, None, None)


def test_unknown_names_are_ignored():
    assert Wrapper(foo)({'a': 1, 'b': 2, 'c': 3, 'd': 4}) == (1, 2, 3)


def test_list_is_passed_through():
    wrapper = Wrapper(lambda *args: args)
    assert wrapper.parameters == ()
    assert wrapper([3, 1, 2, 5]) == (3, 1, 2, 5)
    assert wrapper({0: 'x', 1: 'y'}) == ('x', 'y')


def test_arity_errors_come_from_the_callback():
    with pytest.raises(TypeError):
        Wrapper(foo)(['a'])
    with pytest.raises(TypeError):
        Wrapper(foo)()


def test_callback_errors_propagate():
    def boom(a):
        raise KeyError(a)

    with pytest.raises(KeyError):
        Wrapper(boom)({'a': 'a'})


def test_keyword_only_parameters():
    wrapper = Wrapper(keyword_only)
    assert wrapper.prepare_arguments({'b': 2, 'a': 1}) == ([1], {'b': 2, 'c': 3})
    assert wrapper({'b': 2, 'a': 1}) == (1, 2, 3)
    with pytest.raises(MissingParameterError, match="^Missing parameter 'b' on position 1$"):
        wrapper({'a': 1})


def test_positional_only_parameters():
    assert Wrapper(positional_only)({'b': 2, 'a': 1}) == (1, 2)


def test_static_method_by_reference():
    wrapper = Wrapper(f'{__name__}.CallbackCollection::bar')
    assert wrapper.kind == Kind.STATIC_METHOD
    assert wrapper({'b': 2, 'a': 1}) == (1, 2, 'with default value')


def test_class():
    point = Wrapper(Point)({'x': 1})
    assert (point.x, point.y) == (1, 0)


def test_reusable():
    wrapper = Wrapper(abc)
    parameters = wrapper.parameters
    arguments = {'b': 'B', 'a': 'A'}
    assert wrapper.prepare_arguments(arguments) == wrapper.prepare_arguments(arguments)
    assert wrapper(arguments) == wrapper.invoke(arguments) == ('A', 'B', 'D')
    assert wrapper(['x', 'y']) == ('x', 'y', 'D')
    assert wrapper.parameters == parameters


@pytest.mark.parametrize('callback', [True, None, ('fna',), 'nonexistingfunction', (object(), 'nonexistingmethod')])
def test_constructor_fails_for_invalid_callback(callback):
    with pytest.raises(InvalidCallbackError, match='^Invalid callback$'):
        Wrapper(callback)


def test_properties():
    wrapper = Wrapper(foo)
    assert wrapper.callback is foo
    assert wrapper.kind == Kind.FUNCTION
    assert wrapper.name == f'{__name__}.foo'
    assert [p.name for p in wrapper.parameters] == ['a', 'b', 'c']
    assert repr(wrapper) == f'Wrapper({__name__}.foo, function)'


def test_wrap_and_invoke():
    wrapper = wrap(foo)
    assert wrap(wrapper) is wrapper
    assert invoke(foo, {'c': 3, 'b': 2, 'a': 1}) == (1, 2, 3)
    assert invoke(wrapper, [1, 2, 3]) == (1, 2, 3)
    assert invoke(nothing) == 'nothing'
