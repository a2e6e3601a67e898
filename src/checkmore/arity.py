"""Arity helpers for two-argument predicates."""

import functools
import inspect
from typing import Any, Callable

from checkmore.types import ArityError


def curry2(fn: Callable[[Any, Any], Any], strict: bool = False) -> Callable[..., Any]:
    """Allow a two-argument function to be called as f(a, b) or f(a)(b).

    The call form is decided by the number of arguments at call time, not by
    the declared signature of ``fn``.

    Args:
        fn: Function of two positional arguments
        strict: If True, more than two arguments raise ArityError.
            Otherwise arguments past the second are ignored and the call
            returns fn(a, b) rather than a partial, so a trailing message
            string never turns a predicate call into a truthy function.

    Returns:
        The curried function. It keeps ``fn``'s name and reports ``arity == 2``.
    """

    @functools.wraps(fn)
    def curried(*args: Any) -> Any:
        if not args:
            raise ArityError(f"Curried function {fn.__name__} called without arguments")
        if strict and len(args) > 2:
            raise ArityError(
                f"Curried function {fn.__name__} called with too many arguments {len(args)}"
            )
        if len(args) >= 2:
            return fn(args[0], args[1])

        first = args[0]

        def second(b: Any) -> Any:
            return fn(first, b)

        second.__name__ = f"{fn.__name__}_partial"
        return second

    curried.arity = 2  # type: ignore[attr-defined]
    return curried


def positional_capacity(fn: Callable[..., Any]) -> int | None:
    """Return how many positional arguments ``fn`` accepts.

    Returns None when the callable takes ``*args`` or its signature cannot be
    inspected (some builtins).
    """
    declared = getattr(fn, "arity", None)
    if isinstance(declared, int):
        return declared

    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count
