"""Combinators that build new predicates from existing ones.

- or_: any alternative passes; an alternative that raises counts as False
- and_: every branch passes; exceptions propagate
- not_modifier: logical negation
- then: run a function only when a condition holds
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from checkmore.arity import positional_capacity
from checkmore.types import ConfigurationError, Predicate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BranchResult:
    """Outcome of evaluating one combinator branch.

    Attributes:
        value: The branch result, coerced to bool (False when the branch raised)
        error: The exception the branch raised, if any
    """

    value: bool
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _evaluate(branch: Any, args: tuple[Any, ...]) -> bool:
    if callable(branch):
        return bool(branch(*args))
    return bool(branch)


def _combined_capacity(predicates: tuple[Any, ...]) -> int | None:
    """Largest positional capacity among the callable branches.

    None when any branch takes ``*args`` or cannot be inspected.
    """
    capacity = 0
    for branch in predicates:
        if not callable(branch):
            continue
        branch_capacity = positional_capacity(branch)
        if branch_capacity is None:
            return None
        capacity = max(capacity, branch_capacity)
    return capacity


def safe_invoke(branch: Any, args: tuple[Any, ...]) -> BranchResult:
    """Evaluate a branch, capturing any exception it raises."""
    try:
        return BranchResult(_evaluate(branch, args))
    except Exception as e:
        return BranchResult(False, e)


def or_(*predicates: Any) -> Predicate:
    """Combine predicates into one that passes if any of them passes.

    Non-callable arguments are treated as constants. Branches are evaluated
    left to right and evaluation stops at the first truthy one.

    Raises:
        ConfigurationError: If no predicates are given
    """
    if not predicates:
        raise ConfigurationError("empty list of arguments to or")

    def or_check(*args: Any) -> bool:
        for branch in predicates:
            result = safe_invoke(branch, args)
            if not result.ok:
                logger.debug(
                    "or branch %r raised %s, treating as false",
                    branch,
                    result.error,
                )
                continue
            if result.value:
                return True
        return False

    or_check.arity = _combined_capacity(predicates)  # type: ignore[attr-defined]
    return or_check


def and_(*predicates: Any) -> Predicate:
    """Combine predicates into one that passes only if all of them pass.

    Raises:
        ConfigurationError: If no predicates are given
    """
    if not predicates:
        raise ConfigurationError("empty list of arguments to and")

    def and_check(*args: Any) -> bool:
        for branch in predicates:
            if not _evaluate(branch, args):
                return False
        return True

    and_check.arity = _combined_capacity(predicates)  # type: ignore[attr-defined]
    return and_check


def not_modifier(predicate: Predicate) -> Predicate:
    """Negate ``predicate``."""

    def negated(*args: Any) -> bool:
        return not predicate(*args)

    return negated


def then(condition: Any, fn: Callable[..., Any]) -> Callable[..., Any]:
    """Return a function that calls ``fn`` only if ``condition`` holds.

    ``condition`` may be a predicate (called with the same arguments) or a
    plain value.
    """

    def conditional(*args: Any) -> Any:
        ok = condition(*args) if callable(condition) else condition
        if ok:
            return fn(*args)
        return None

    return conditional
