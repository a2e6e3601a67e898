"""Argument guards for plain functions.

    double = defend(lambda x: x * 2, check.number, "x should be a number")
    double(5)       # 10
    double("five")  # ValidationFailure: Argument 1: 'five' does not pass predicate: ...

The guard spec alternates predicates and optional messages. Each predicate
checks the next positional argument; messages never consume an argument.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable

from checkmore.types import ConfigurationError, Predicate, ValidationFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuardClause:
    """One predicate from a guard spec and the message that follows it."""

    predicate: Predicate
    message: str | None = None


def build_guard_spec(entries: tuple[Any, ...] | list[Any]) -> list[GuardClause]:
    """Resolve a guard spec into clauses, one per predicate.

    Entries that are not callable are skipped; a non-empty string right
    after a predicate becomes that predicate's message.
    """
    if not isinstance(entries, (list, tuple)):
        raise ConfigurationError("expected list of predicates")

    clauses: list[GuardClause] = []
    for k, entry in enumerate(entries):
        if not callable(entry):
            continue
        following = entries[k + 1] if k + 1 < len(entries) else None
        message = following if isinstance(following, str) and following else None
        clauses.append(GuardClause(entry, message))
    return clauses


def defend(fn: Callable[..., Any], *guard_spec: Any) -> Callable[..., Any]:
    """Wrap ``fn`` so its positional arguments are checked before each call.

    Args:
        fn: Function to guard
        *guard_spec: Predicates, each optionally followed by a message

    Returns:
        The guarded function

    Raises:
        ConfigurationError: If ``fn`` is not callable
    """
    if not callable(fn):
        raise ConfigurationError("expected a function")
    clauses = build_guard_spec(guard_spec)

    @functools.wraps(fn)
    def guarded(*args: Any, **kwargs: Any) -> Any:
        for j, clause in enumerate(clauses):
            value = args[j] if j < len(args) else None
            if not clause.predicate(value):
                msg = f"Argument {j + 1}: {value!r} does not pass predicate"
                if clause.message:
                    msg += f": {clause.message}"
                logger.debug("Guard on %s rejected call: %s", getattr(fn, "__name__", fn), msg)
                raise ValidationFailure(msg)
        return fn(*args, **kwargs)

    return guarded
