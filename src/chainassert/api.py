"""Entry points for writing assertions."""
from __future__ import annotations

from typing import Callable, Optional, TypeVar

from chainassert.block import AssertBlock, ErrorBlock, ValueBlock
from chainassert.carrier import Assert, ValueAssert
from chainassert.failure import run_soft, soft_assertions

T = TypeVar("T")


def assert_that(actual: T, name: Optional[str] = None) -> Assert[T]:
    """Start an assertion chain on ``actual``.

    Example:
        >>> assert_that(True, name="flag").unwrap()
        True
    """
    return ValueAssert(actual, name)


def assert_block(fn: Callable[[], T]) -> AssertBlock[T]:
    """Run ``fn`` once and capture whether it returned or raised.

    ::

        assert_block(lambda: 1 + 1).returned_value(lambda a: is_equal_to(a, 2))
        assert_block(explode).thrown_error(lambda a: has_message(a, "boom"))

    Failures reported while ``fn`` runs are collected and raised together
    once it finishes.
    """

    def capture() -> AssertBlock[T]:
        try:
            return ValueBlock(fn())
        except Exception as e:
            return ErrorBlock(e)

    return run_soft(capture)


def assert_all(fn: Callable[[], None]) -> None:
    """Run every assertion in ``fn`` and report all failures together.

    Raises:
        AssertionError: The single failure when one was reported, or a
            MultipleFailuresError listing all of them in order.
    """
    with soft_assertions():
        fn()


def catch(fn: Callable[[], object]) -> Optional[Exception]:
    """Return the exception raised by ``fn``, or None if it returned.

    Does not take part in failure reporting.
    """
    try:
        fn()
    except Exception as e:
        return e
    return None
