"""Unit tests for the failure context stack and soft failure collector."""
import asyncio
import logging
import threading

import pytest

from chainassert.failure import (
    SoftFailure,
    current_collector,
    fail,
    notify_failure,
    run_soft,
    soft_assertions,
)
from chainassert.models import AssertionFailure, MultipleFailuresError


# ---------------------------------------------------------------------------
# Hard mode
# ---------------------------------------------------------------------------


class TestHardMode:
    """Without a soft scope, failures are raised where they are reported."""

    def test_no_collector_by_default(self):
        assert current_collector() is None

    def test_notify_failure_raises_the_error_itself(self):
        error = AssertionFailure("boom")
        with pytest.raises(AssertionFailure) as exc_info:
            notify_failure(error)
        assert exc_info.value is error

    def test_fail_raises_assertion_failure(self):
        with pytest.raises(AssertionFailure, match="^nope$") as exc_info:
            fail("nope", expected=1, actual=2)
        assert exc_info.value.expected == 1
        assert exc_info.value.actual == 2


# ---------------------------------------------------------------------------
# SoftFailure
# ---------------------------------------------------------------------------


class TestSoftFailure:
    """Tests for the collector itself."""

    def test_collects_in_order(self):
        collector = SoftFailure()
        first, second = AssertionFailure("a"), AssertionFailure("b")
        collector.fail(first)
        collector.fail(second)
        assert collector.failures == (first, second)
        assert len(collector) == 2

    def test_failures_is_a_copy(self):
        collector = SoftFailure()
        collector.fail(AssertionFailure("a"))
        snapshot = collector.failures
        collector.fail(AssertionFailure("b"))
        assert len(snapshot) == 1

    def test_combined_empty(self):
        assert SoftFailure().combined() is None

    def test_combined_single_is_unchanged(self):
        collector = SoftFailure()
        error = AssertionFailure("only")
        collector.fail(error)
        assert collector.combined() is error

    def test_combined_many(self):
        collector = SoftFailure()
        collector.fail(AssertionFailure("a"))
        collector.fail(AssertionFailure("b"))
        combined = collector.combined()
        assert isinstance(combined, MultipleFailuresError)
        assert [str(e) for e in combined.failures] == ["a", "b"]

    def test_resolve_empty_is_noop(self):
        SoftFailure().resolve()

    def test_scope_closes_collector_on_exit(self):
        with soft_assertions() as collector:
            assert not collector.closed
        assert collector.closed

    def test_closed_collector_is_not_current(self):
        with soft_assertions() as collector:
            collector.close()
            assert current_collector() is None
            with pytest.raises(AssertionFailure, match="^after close$"):
                fail("after close")
        assert collector.failures == ()


# ---------------------------------------------------------------------------
# soft_assertions scope
# ---------------------------------------------------------------------------


class TestSoftAssertions:
    """Tests for the soft scope context manager."""

    def test_no_failures_returns_normally(self):
        with soft_assertions() as collector:
            assert current_collector() is collector
        assert current_collector() is None

    def test_failures_do_not_raise_inside_scope(self, calls):
        with pytest.raises(MultipleFailuresError):
            with soft_assertions():
                fail("a")
                calls.append("after a")
                fail("b")
                calls.append("after b")
        assert calls == ["after a", "after b"]

    def test_single_failure_raised_unchanged(self):
        with pytest.raises(AssertionFailure) as exc_info:
            with soft_assertions():
                fail("only")
        assert type(exc_info.value) is AssertionFailure
        assert str(exc_info.value) == "only"

    def test_many_failures_raised_as_one(self):
        with pytest.raises(MultipleFailuresError) as exc_info:
            with soft_assertions():
                fail("a")
                fail("b")
        message = str(exc_info.value)
        assert message.index("a") < message.index("b")
        assert len(exc_info.value.failures) == 2

    def test_unrelated_exception_propagates_and_drops_failures(self):
        with pytest.raises(KeyError):
            with soft_assertions():
                fail("collected")
                raise KeyError("bug")
        assert current_collector() is None

    def test_unrelated_exception_restores_outer_collector(self):
        with soft_assertions() as outer:
            with pytest.raises(ValueError):
                with soft_assertions():
                    fail("inner")
                    raise ValueError("bug")
            assert current_collector() is outer
            assert outer.failures == ()

    def test_nested_scope_reports_into_outer_as_one_entry(self):
        with pytest.raises(MultipleFailuresError) as exc_info:
            with soft_assertions() as outer:
                with soft_assertions():
                    fail("a")
                    fail("b")
                assert len(outer) == 1
                fail("c")
        outer_failures = exc_info.value.failures
        assert len(outer_failures) == 2
        assert isinstance(outer_failures[0], MultipleFailuresError)
        assert str(outer_failures[1]) == "c"

    def test_nested_single_failure_passes_through_outer(self):
        with pytest.raises(AssertionFailure, match="^inner$"):
            with soft_assertions():
                with soft_assertions():
                    fail("inner")

    def test_logs_collection_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="chainassert.failure")
        with pytest.raises(AssertionFailure):
            with soft_assertions():
                fail("x")
        assert "Collected assertion failure #1" in caplog.text


class TestRunSoft:
    """Tests for the functional form of the soft scope."""

    def test_returns_result(self):
        assert run_soft(lambda: 42) == 42

    def test_raises_collected(self):
        with pytest.raises(AssertionFailure, match="^x$"):
            run_soft(lambda: fail("x"))


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------


class TestIsolation:
    """Threads and tasks never report into a scope they do not belong to."""

    def test_threads_do_not_share_collector(self):
        seen = []

        def worker():
            seen.append(current_collector())
            with pytest.raises(AssertionFailure):
                fail("from thread")

        with soft_assertions() as collector:
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()
            assert collector.failures == ()
        assert seen == [None]

    def test_tasks_do_not_share_collector(self):
        async def soft_task(label):
            with soft_assertions() as collector:
                fail(label)
                await asyncio.sleep(0)
                fail(label)
                return collector.failures

        async def main():
            first, second = await asyncio.gather(
                _swallow(soft_task("a")), _swallow(soft_task("b"))
            )
            return first, second

        first, second = asyncio.run(main())
        assert [str(e) for e in first.failures] == ["a", "a"]
        assert [str(e) for e in second.failures] == ["b", "b"]

    def test_task_reports_into_open_scope(self):
        async def early():
            fail("early")

        async def main():
            with pytest.raises(AssertionFailure, match="^early$"):
                with soft_assertions():
                    await asyncio.ensure_future(early())

        asyncio.run(main())

    def test_task_outliving_scope_raises_late_failure(self):
        async def late():
            await asyncio.sleep(0.01)
            fail("late failure")

        async def main():
            with soft_assertions() as collector:
                task = asyncio.ensure_future(late())
            with pytest.raises(AssertionFailure, match="^late failure$"):
                await task
            assert collector.failures == ()

        asyncio.run(main())


async def _swallow(coro):
    try:
        await coro
    except MultipleFailuresError as e:
        return e
    raise AssertionError("expected MultipleFailuresError")
