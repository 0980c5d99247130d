"""Human-readable rendering of values and errors for failure messages."""
from __future__ import annotations

import traceback
from typing import Any, FrozenSet

from chainassert.models import ChainAssertError

DEFAULT_WRAP = "<>"

# Rendered in place of a container already being displayed.
_RECURSION_MARKERS = ((list, "[...]"), (tuple, "(...)"), (dict, "{...}"))


def show(value: Any, wrap: str = DEFAULT_WRAP) -> str:
    """Render a value for a failure message.

    Args:
        value: Any value.
        wrap: Two characters placed around the rendering. Pass ``""`` to
            disable wrapping.

    Returns:
        ``None`` as ``null``; strings and bytes quoted; lists, tuples, sets
        and dicts with their items rendered recursively; anything else by
        ``repr``.

    Raises:
        ChainAssertError: If ``wrap`` is neither empty nor two characters.
    """
    if wrap and len(wrap) != 2:
        raise ChainAssertError(f"wrap must be empty or two characters; got {wrap!r}")
    text = _display(value, frozenset())
    if not wrap:
        return text
    return f"{wrap[0]}{text}{wrap[1]}"


def _display(value: Any, seen: FrozenSet[int]) -> str:
    if value is None:
        return "null"
    if isinstance(value, (str, bytes, bytearray)):
        return repr(value)
    if not isinstance(value, (dict, list, tuple, set, frozenset)):
        return repr(value)
    if id(value) in seen:
        return next((m for kind, m in _RECURSION_MARKERS if isinstance(value, kind)), "{...}")
    seen = seen | {id(value)}
    if isinstance(value, dict):
        items = ", ".join(f"{_display(k, seen)}: {_display(v, seen)}" for k, v in value.items())
        return "{" + items + "}"
    if isinstance(value, list):
        return "[" + ", ".join(_display(item, seen) for item in value) + "]"
    if isinstance(value, tuple):
        inner = ", ".join(_display(item, seen) for item in value)
        return f"({inner},)" if len(value) == 1 else f"({inner})"
    if not value:
        return "set()" if isinstance(value, set) else "frozenset()"
    items = sorted(_display(item, seen) for item in value)
    return "{" + ", ".join(items) + "}"


def show_error(error: BaseException) -> str:
    """Render an error with its traceback when it has one."""
    if error.__traceback__ is None:
        return show(error)
    return "".join(
        traceback.format_exception(type(error), error, error.__traceback__)
    ).rstrip()
