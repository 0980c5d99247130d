"""Assertions on the outcome of running a block of code."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from chainassert.carrier import Assert, ValueAssert
from chainassert.failure import fail
from chainassert.show import show, show_error

T = TypeVar("T")


class AssertBlock(ABC, Generic[T]):
    """The captured outcome of a block: the value it returned or the error it raised.

    Only one of the three methods is meant to be called. Calling the one
    that does not match the outcome reports exactly one failure.
    """

    @abstractmethod
    def thrown_error(self, fn: Callable[[Assert[BaseException]], None]) -> None:
        """Run ``fn`` against the raised error, or fail if the block returned."""

    @abstractmethod
    def returned_value(self, fn: Callable[[Assert[T]], None]) -> None:
        """Run ``fn`` against the returned value, or fail if the block raised."""

    @abstractmethod
    def does_not_throw_any_exception(self) -> None:
        """Fail if the block raised."""


class ValueBlock(AssertBlock[T]):
    def __init__(self, value: T) -> None:
        self._value = value

    def thrown_error(self, fn: Callable[[Assert[BaseException]], None]) -> None:
        fail(f"expected exception but was:{show(self._value)}")

    def returned_value(self, fn: Callable[[Assert[T]], None]) -> None:
        fn(ValueAssert(self._value))

    def does_not_throw_any_exception(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"ValueBlock({self._value!r})"


class ErrorBlock(AssertBlock[T]):
    def __init__(self, error: BaseException) -> None:
        self._error = error

    def thrown_error(self, fn: Callable[[Assert[BaseException]], None]) -> None:
        fn(ValueAssert(self._error))

    def returned_value(self, fn: Callable[[Assert[T]], None]) -> None:
        fail(f"expected value but threw:{show_error(self._error)}")

    def does_not_throw_any_exception(self) -> None:
        fail(f"expected to not throw an exception but threw:{show_error(self._error)}")

    def __repr__(self) -> str:
        return f"ErrorBlock({self._error!r})"
