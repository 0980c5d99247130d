"""Assertions on raised exceptions.

An exception's message is ``str(error)``. Its cause is the explicit
``__cause__`` (``raise ... from ...``), falling back to the implicit
``__context__`` unless the context was suppressed.
"""
from __future__ import annotations

from typing import Optional

from chainassert.assertions.values import is_equal_to, is_none, is_not_none, prop, type_of
from chainassert.carrier import Assert


def error_cause(error: BaseException) -> Optional[BaseException]:
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__


def error_root_cause(error: BaseException) -> BaseException:
    seen = {id(error)}
    current = error
    while True:
        parent = error_cause(current)
        if parent is None or id(parent) in seen:
            return current
        seen.add(id(parent))
        current = parent


def message(assert_: Assert[BaseException]) -> Assert[str]:
    """Returns a carrier on the exception's message."""
    return prop(assert_, "message", str)


def cause(assert_: Assert[BaseException]) -> Assert[Optional[BaseException]]:
    """Returns a carrier on the exception's cause."""
    return prop(assert_, "cause", error_cause)


def root_cause(assert_: Assert[BaseException]) -> Assert[BaseException]:
    """Returns a carrier on the exception's root cause."""
    return prop(assert_, "root_cause", error_root_cause)


def has_message(assert_: Assert[BaseException], expected_message: str) -> None:
    """Asserts the exception has the expected message."""
    is_equal_to(message(assert_), expected_message)


def has_cause(assert_: Assert[BaseException], expected_cause: BaseException) -> None:
    """Asserts the exception's cause is similar to the expected one, checking type and message."""

    def check(actual: Assert[BaseException]) -> None:
        is_equal_to(type_of(actual), type(expected_cause))
        has_message(actual, str(expected_cause))

    is_not_none(cause(assert_), check)


def has_no_cause(assert_: Assert[BaseException]) -> None:
    is_none(cause(assert_))


def has_root_cause(assert_: Assert[BaseException], expected_cause: BaseException) -> None:
    """Asserts the exception's root cause is similar to the expected one, checking type and message."""

    def check(actual: Assert[BaseException]) -> None:
        is_equal_to(type_of(actual), type(expected_cause))
        has_message(actual, str(expected_cause))

    root_cause(assert_).all(check)
