"""
chainassert: Fluent assertions with soft failure aggregation.

This library wraps an actual value (or the outcome of running a block of
code) in an assertion carrier and lets callers chain readable assertions
against it. Inside a soft scope every failure is collected and reported
together when the scope exits.

Example:
    >>> from chainassert import assert_that, assert_all
    >>> from chainassert.assertions import is_equal_to
    >>> is_equal_to(assert_that(1 + 1, name="sum"), 2)
    >>> assert_all(lambda: is_equal_to(assert_that("a"), "a"))

Failure Reporting Notes:
    With no soft scope active, the first failure is raised immediately as an
    ``AssertionFailure`` (an ``AssertionError`` subclass, so pytest renders
    it natively). ``assert_all``, ``Assert.all`` and ``soft_assertions``
    collect failures instead and raise:

        - nothing, when no assertion failed;
        - the one failure unchanged, when exactly one failed;
        - one ``MultipleFailuresError`` listing every failure in order.

    A nested scope's combined failure counts as a single entry of the
    enclosing scope. Each thread and asyncio task has its own stack of
    scopes.
"""

__version__ = "0.4.0"

# Failure signals
from chainassert.models import (
    NONE,
    AssertionFailure,
    ChainAssertError,
    FailureRecord,
    FailureReport,
    MultipleFailuresError,
)

# Failure context
from chainassert.failure import (
    SoftFailure,
    current_collector,
    fail,
    notify_failure,
    run_soft,
    soft_assertions,
)

# Assertion carriers
from chainassert.carrier import (
    Assert,
    FailingAssert,
    ValueAssert,
    append_name,
    expected,
    expected_message,
)

# Block assertions
from chainassert.block import AssertBlock, ErrorBlock, ValueBlock

# Entry points
from chainassert.api import assert_all, assert_block, assert_that, catch

# Formatting
from chainassert.show import show, show_error

__all__ = [
    # Version
    "__version__",
    # Failure signals
    "NONE",
    "AssertionFailure",
    "ChainAssertError",
    "FailureRecord",
    "FailureReport",
    "MultipleFailuresError",
    # Failure context
    "SoftFailure",
    "current_collector",
    "fail",
    "notify_failure",
    "run_soft",
    "soft_assertions",
    # Assertion carriers
    "Assert",
    "FailingAssert",
    "ValueAssert",
    "append_name",
    "expected",
    "expected_message",
    # Block assertions
    "AssertBlock",
    "ErrorBlock",
    "ValueBlock",
    # Entry points
    "assert_all",
    "assert_block",
    "assert_that",
    "catch",
    # Formatting
    "show",
    "show_error",
]
