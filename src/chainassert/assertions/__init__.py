"""Assertion functions built on the chainassert carrier.

Usage:
    from chainassert import assert_that
    from chainassert.assertions import has_message, is_equal_to

    is_equal_to(assert_that(1 + 1), 2)
"""
from chainassert.assertions.exception import (
    cause,
    has_cause,
    has_message,
    has_no_cause,
    has_root_cause,
    message,
    root_cause,
)
from chainassert.assertions.values import (
    is_equal_to,
    is_instance_of,
    is_none,
    is_not_equal_to,
    is_not_none,
    is_same_as,
    prop,
    type_of,
)

__all__ = [
    "cause",
    "has_cause",
    "has_message",
    "has_no_cause",
    "has_root_cause",
    "is_equal_to",
    "is_instance_of",
    "is_none",
    "is_not_equal_to",
    "is_not_none",
    "is_same_as",
    "message",
    "prop",
    "root_cause",
    "type_of",
]
