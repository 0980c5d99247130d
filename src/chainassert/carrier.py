"""Assertion carriers: a value under test, or the error that poisoned it.

An :class:`Assert` is either a :class:`ValueAssert` holding the actual value
or a :class:`FailingAssert` holding the error raised by an earlier step.
Every operation on a failing carrier forwards its original error without
running any caller code, so a long chain written against a value that is
already invalid reports only the first failure.

Custom assertions are plain functions built on :meth:`Assert.given` and
:meth:`Assert.transform`::

    def is_ten(assert_: Assert[int]) -> None:
        def check(actual: int) -> None:
            if actual == 10:
                return
            expected(assert_, f"to be 10 but was:{show(actual)}")

        assert_.given(check)
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar

from chainassert.failure import fail, notify_failure, soft_assertions
from chainassert.models import NONE
from chainassert.show import show

T = TypeVar("T")
R = TypeVar("R")


class Assert(ABC, Generic[T]):
    """An assertion on an actual value with an optional display name.

    ``context`` is the value this carrier was derived from, when there is
    one. It is used only to make failure messages point at the parent
    object.
    """

    def __init__(self, name: Optional[str], context: Any) -> None:
        self._name = name
        self._context = context

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def context(self) -> Any:
        return self._context

    @property
    @abstractmethod
    def is_failing(self) -> bool:
        """True when an earlier step in the chain failed."""

    @abstractmethod
    def assert_that(self, actual: R, name: Any = NONE) -> "Assert[R]":
        """Assert on a derived value, keeping this carrier's name by default.

        On a failing carrier the result is failing too, with the same error.
        """

    @abstractmethod
    def transform(self, fn: Callable[[T], R], name: Any = NONE) -> "Assert[R]":
        """Map the actual value to a new carrier.

        If ``fn`` raises, the error is reported and a failing carrier holding
        it is returned. On a failing carrier ``fn`` is never called.
        """

    @abstractmethod
    def given(self, fn: Callable[[T], None]) -> None:
        """Run assertion logic against the actual value.

        Errors raised by ``fn`` are reported rather than propagated, so they
        are collected by an active soft scope. Does nothing on a failing
        carrier.
        """

    @abstractmethod
    def unwrap(self) -> T:
        """Return the actual value, or re-raise the error that poisoned it."""

    def all(self, fn: Callable[["Assert[T]"], None]) -> None:
        """Run every assertion in ``fn`` against this carrier, then report.

        ::

            def checks(a: Assert[str]) -> None:
                is_instance_of(a, str)
                is_not_equal_to(a, "")

            assert_that("test", name="test").all(checks)
        """
        with soft_assertions():
            fn(self)

    def _resolve_name(self, name: Any) -> Optional[str]:
        return self._name if name is NONE else name


class ValueAssert(Assert[T]):
    """A carrier holding the actual value."""

    def __init__(self, value: T, name: Optional[str] = None, context: Any = None) -> None:
        super().__init__(name, context)
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    @property
    def is_failing(self) -> bool:
        return False

    def assert_that(self, actual: R, name: Any = NONE) -> Assert[R]:
        if self._context is not None or self._value is actual:
            context = self._context
        else:
            context = self._value
        return ValueAssert(actual, self._resolve_name(name), context)

    def transform(self, fn: Callable[[T], R], name: Any = NONE) -> Assert[R]:
        try:
            result = fn(self._value)
        except Exception as e:
            notify_failure(e)
            return FailingAssert(e, self._resolve_name(name), self._context)
        return self.assert_that(result, name)

    def given(self, fn: Callable[[T], None]) -> None:
        try:
            fn(self._value)
        except Exception as e:
            notify_failure(e)

    def unwrap(self) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"ValueAssert(value={self._value!r}, name={self._name!r})"


class FailingAssert(Assert[T]):
    """A carrier poisoned by an earlier failure."""

    def __init__(self, error: BaseException, name: Optional[str] = None, context: Any = None) -> None:
        super().__init__(name, context)
        self._error = error

    @property
    def error(self) -> BaseException:
        return self._error

    @property
    def is_failing(self) -> bool:
        return True

    def assert_that(self, actual: R, name: Any = NONE) -> Assert[R]:
        return FailingAssert(self._error, self._resolve_name(name), self._context)

    def transform(self, fn: Callable[[T], R], name: Any = NONE) -> Assert[R]:
        return FailingAssert(self._error, self._resolve_name(name), self._context)

    def given(self, fn: Callable[[T], None]) -> None:
        return None

    def unwrap(self) -> T:
        raise self._error

    def __repr__(self) -> str:
        return f"FailingAssert(error={self._error!r}, name={self._name!r})"


def expected_message(assert_: Assert[Any], message: str) -> str:
    """Word a failure as ``expected [name]:message (context)``.

    Messages starting with ``:`` are joined without a space, so
    ``expected_message(a, ":<2> but was:<3>")`` reads
    ``expected [a]:<2> but was:<3>``.
    """
    label = f" [{assert_.name}]" if assert_.name else ""
    space = "" if message.startswith(":") else " "
    instance = f" ({show(assert_.context, '')})" if assert_.context is not None else ""
    return f"expected{label}{space}{message}{instance}"


def expected(
    assert_: Assert[Any],
    message: str,
    expected: Any = NONE,
    actual: Any = NONE,
) -> None:
    """Report a failure worded by :func:`expected_message`."""
    fail(expected_message(assert_, message), expected=expected, actual=actual)


def append_name(assert_: Assert[Any], name: str, separator: str = ".") -> str:
    """Extend the carrier's name with ``name``, e.g. ``user`` -> ``user.email``."""
    if assert_.name:
        return f"{assert_.name}{separator}{name}"
    return name
