"""Assertions that apply to any value."""
from __future__ import annotations

from typing import Any, Callable, Optional, Type, TypeVar

from chainassert.carrier import Assert, append_name, expected, expected_message
from chainassert.models import AssertionFailure
from chainassert.show import show

T = TypeVar("T")
P = TypeVar("P")


def is_equal_to(assert_: Assert[Any], value: Any) -> None:
    """Asserts the value is equal to the expected one, using ``==``."""

    def check(actual: Any) -> None:
        if actual == value:
            return
        expected(assert_, f":{show(value)} but was:{show(actual)}", expected=value, actual=actual)

    assert_.given(check)


def is_not_equal_to(assert_: Assert[Any], value: Any) -> None:
    """Asserts the value is not equal to the expected one, using ``!=``."""

    def check(actual: Any) -> None:
        if actual != value:
            return
        expected(assert_, f"to not be equal to:{show(value)}")

    assert_.given(check)


def is_same_as(assert_: Assert[Any], value: Any) -> None:
    """Asserts the value is the same object as the expected one."""

    def check(actual: Any) -> None:
        if actual is value:
            return
        expected(assert_, f":{show(value)} and:{show(actual)} to refer to the same object")

    assert_.given(check)


def is_none(assert_: Assert[Any]) -> None:
    def check(actual: Any) -> None:
        if actual is None:
            return
        expected(assert_, f"to be null but was:{show(actual)}")

    assert_.given(check)


def is_not_none(
    assert_: Assert[Optional[T]],
    fn: Optional[Callable[[Assert[T]], None]] = None,
) -> Assert[T]:
    """Asserts the value is not None and returns a carrier for it.

    ``fn``, when given, runs against the returned carrier, so nested
    assertions are skipped if the value was None.
    """

    def check(actual: Optional[T]) -> T:
        if actual is None:
            raise AssertionFailure(expected_message(assert_, "to not be null"))
        return actual

    result: Assert[T] = assert_.transform(check)
    if fn is not None:
        fn(result)
    return result


def is_instance_of(assert_: Assert[Any], cls: Type[T]) -> Assert[T]:
    """Asserts the value is an instance of ``cls`` and returns a carrier for it."""

    def check(actual: Any) -> T:
        if isinstance(actual, cls):
            return actual
        raise AssertionFailure(
            expected_message(
                assert_,
                f"to be instance of:{show(cls.__qualname__)} "
                f"but had class:{show(type(actual).__qualname__)}",
            )
        )

    return assert_.transform(check)


def prop(assert_: Assert[T], name: str, getter: Callable[[T], P]) -> Assert[P]:
    """Returns a carrier for a property of the value, named ``<name>.<prop>``."""
    return assert_.transform(getter, name=append_name(assert_, name))


def type_of(assert_: Assert[Any]) -> Assert[type]:
    """Returns a carrier for the value's class."""
    return prop(assert_, "class", type)
