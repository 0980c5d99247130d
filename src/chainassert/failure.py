"""Failure context stack and soft failure collection.

Every reported failure goes through :func:`notify_failure`. With no soft
scope active the failure is raised on the spot (hard mode). Inside a soft
scope it is appended to the scope's :class:`SoftFailure` collector and
raised together with its siblings when the scope exits.

The current collector lives in a :class:`contextvars.ContextVar`, so every
thread has its own stack. Asyncio tasks and executor workers copy the
variable when they are created, so one started inside a soft scope reports
into that scope while it is open. Once the scope exits its collector is
closed and later failures from such a task are raised where they occur.
Scopes are pushed and popped with the variable's reset token, which
restores the enclosing collector on every exit path.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Iterator, List, Optional, Tuple, TypeVar

from chainassert.models import NONE, AssertionFailure, MultipleFailuresError

logger = logging.getLogger("chainassert.failure")

T = TypeVar("T")


class SoftFailure:
    """Collects failures reported while its scope is current."""

    def __init__(self) -> None:
        self._failures: List[BaseException] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        """True once the owning scope has exited."""
        return self._closed

    def close(self) -> None:
        self._closed = True

    @property
    def failures(self) -> Tuple[BaseException, ...]:
        return tuple(self._failures)

    def fail(self, error: BaseException) -> None:
        self._failures.append(error)
        logger.debug(
            "Collected assertion failure #%d: %s",
            len(self._failures),
            type(error).__name__,
        )

    def combined(self) -> Optional[BaseException]:
        """The single error this collector resolves to, if any.

        Returns:
            None when nothing was collected, the collected error itself when
            there is exactly one, otherwise a MultipleFailuresError holding
            all of them in occurrence order.
        """
        if not self._failures:
            return None
        if len(self._failures) == 1:
            return self._failures[0]
        return MultipleFailuresError(self._failures)

    def resolve(self) -> None:
        """Report the combined failure to whatever context is now current."""
        error = self.combined()
        if error is not None:
            notify_failure(error)

    def __len__(self) -> int:
        return len(self._failures)

    def __repr__(self) -> str:
        return f"SoftFailure(failures={len(self._failures)})"


_current: ContextVar[Optional[SoftFailure]] = ContextVar(
    "chainassert_current_collector", default=None
)


def current_collector() -> Optional[SoftFailure]:
    """The collector of the innermost active soft scope, or None."""
    collector = _current.get()
    if collector is None or collector.closed:
        return None
    return collector


def notify_failure(error: BaseException) -> None:
    """Report a failure.

    Raises:
        BaseException: ``error`` itself when no soft scope is active, or
            when the inherited scope has already exited.
    """
    collector = current_collector()
    if collector is None:
        raise error
    collector.fail(error)


def fail(message: str, expected: Any = NONE, actual: Any = NONE) -> None:
    """Report an AssertionFailure with the given message.

    Returns normally inside a soft scope, raises otherwise.
    """
    notify_failure(AssertionFailure(message, expected=expected, actual=actual))


@contextmanager
def soft_assertions() -> Iterator[SoftFailure]:
    """Collect every failure reported in the block and raise them together.

    If the block itself raises, that exception propagates unchanged and the
    failures collected so far are dropped.
    """
    collector = SoftFailure()
    token = _current.set(collector)
    logger.debug("Entered soft assertion scope")
    try:
        yield collector
    finally:
        collector.close()
        _current.reset(token)
    logger.debug("Leaving soft assertion scope with %d failure(s)", len(collector))
    collector.resolve()


def run_soft(fn: Callable[[], T]) -> T:
    """Call ``fn`` inside a soft scope and return its result."""
    with soft_assertions():
        result = fn()
    return result
