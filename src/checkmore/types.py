"""Core types for the checkmore predicate registry.

This module defines the foundational types shared by every layer:
- Errors: CheckError and its ConfigurationError / ValidationFailure branches
- Predicate: the callable contract every check satisfies
- PredicateEntry: the four behavioral variants registered under one name
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

Predicate = Callable[..., Any]


class CheckError(Exception):
    """Base class for all checkmore errors."""


class ConfigurationError(CheckError):
    """Raised when the engine is misused.

    Examples: registering a non-callable, an empty combinator argument list,
    non-mapping arguments to a structural validator.
    """


class ArityError(ConfigurationError):
    """Raised when a curried primitive receives the wrong number of arguments."""


class ValidationFailure(CheckError):
    """Raised by verify variants and by defended functions.

    Attributes:
        message: Caller-supplied reason, or a generated default
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Variant(Enum):
    """The four behavioral views of a registered predicate."""

    BASE = "base"
    MAYBE = "maybe"
    VERIFY = "verify"
    NOT = "not"


class PredicateCategory(Enum):
    """Categories for organizing predicates in documentation."""

    TYPE = "type"
    NUMBER = "number"
    STRING = "string"
    COLLECTION = "collection"
    LOGIC = "logic"
    CUSTOM = "custom"


@dataclass(frozen=True)
class PredicateEntry:
    """A registered predicate and its derived variants.

    Attributes:
        name: Name the predicate is registered under
        base: The predicate itself, unchanged
        maybe: Returns True for a missing or None first argument
        verify: Raises ValidationFailure when the predicate returns False
        negated: Logical negation of the predicate
        category: Category for documentation organization
        description: Human-readable description
    """

    name: str
    base: Predicate
    maybe: Predicate
    verify: Callable[..., None]
    negated: Predicate
    category: PredicateCategory = PredicateCategory.CUSTOM
    description: str = ""

    def variant(self, kind: Variant) -> Callable[..., Any]:
        """Return the callable for one of the four views."""
        if kind is Variant.BASE:
            return self.base
        if kind is Variant.MAYBE:
            return self.maybe
        if kind is Variant.VERIFY:
            return self.verify
        return self.negated

    def to_dict(self) -> dict[str, Any]:
        """Export for the documentation listing."""
        return {
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
        }
