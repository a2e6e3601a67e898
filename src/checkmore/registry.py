"""Predicate registry for checkmore.

Every predicate is registered once under a name and becomes available in
four forms:
- base: the predicate itself
- maybe: passes for a missing or None value, otherwise delegates
- verify: raises ValidationFailure when the predicate returns False
- not: the negation of the predicate
"""

import logging
from typing import Any

from checkmore.arity import positional_capacity
from checkmore.combinators import not_modifier
from checkmore.config import CheckConfig
from checkmore.types import (
    ConfigurationError,
    Predicate,
    PredicateCategory,
    PredicateEntry,
    ValidationFailure,
    Variant,
)

logger = logging.getLogger(__name__)


def _unempty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def maybe_modifier(predicate: Predicate) -> Predicate:
    """Return True for a missing or None first argument, else delegate."""

    def maybe(*args: Any) -> Any:
        if not args or args[0] is None:
            return True
        return predicate(*args)

    return maybe


def verify_modifier(predicate: Predicate, default_message: str) -> Predicate:
    """Raise ValidationFailure when ``predicate`` returns exactly False.

    The last argument is the failure message whenever it is a non-empty
    string, so a failing ``verify.lower_case("ABC")`` reports ``"ABC"``.
    Arguments past the predicate's positional capacity are not passed to it:
    ``verify.string(x, "expected a name")`` calls ``string(x)``.
    """
    capacity = positional_capacity(predicate)

    def verify(*args: Any) -> None:
        message = args[-1] if args else None
        call_args = args
        if capacity is not None and len(args) > capacity:
            call_args = args[:capacity]

        if predicate(*call_args) is False:
            raise ValidationFailure(
                message if _unempty_string(message) else default_message
            )

    return verify


def _resolve_name(fn: Predicate, name: str | None) -> str:
    if _unempty_string(name):
        return name  # type: ignore[return-value]
    own_name = getattr(fn, "__name__", "")
    if isinstance(own_name, str) and own_name.isidentifier():
        return own_name
    raise ConfigurationError(f"predicate function missing name: {fn!r}")


def _first_doc_line(fn: Predicate) -> str:
    doc = getattr(fn, "__doc__", None) or ""
    lines = doc.strip().splitlines()
    return lines[0].strip() if lines else ""


class PredicateRegistry:
    """Registry of named predicates.

    Registration is protective: re-registering a name keeps the first
    predicate in every namespace. This applies to builtins (registered at
    import) and to application predicates alike.

    Example:
        PredicateRegistry.register(is_port, "port")

        PredicateRegistry.variant("port", Variant.VERIFY)(8080)
    """

    _entries: dict[str, PredicateEntry] = {}
    _config: CheckConfig = CheckConfig()

    @classmethod
    def configure(cls, config: CheckConfig) -> None:
        """Apply a configuration to the registry."""
        cls._config = config

    @classmethod
    def register(
        cls,
        fn: Predicate,
        name: str | None = None,
        *,
        category: PredicateCategory = PredicateCategory.CUSTOM,
        description: str = "",
    ) -> PredicateEntry:
        """Register a predicate and its derived variants.

        Idempotent - re-registering a bound name is a no-op.

        Args:
            fn: The predicate
            name: Name to register under; defaults to ``fn.__name__``
            category: Category for documentation
            description: Human-readable description; defaults to the first
                docstring line

        Returns:
            The entry bound to the name (the existing one for duplicates)

        Raises:
            ConfigurationError: If ``fn`` is not callable or no name can be resolved
        """
        if not callable(fn):
            raise ConfigurationError("expected predicate function")
        resolved = _resolve_name(fn, name)

        candidate = PredicateEntry(
            name=resolved,
            base=fn,
            maybe=maybe_modifier(fn),
            verify=verify_modifier(fn, f"{resolved} failed"),
            negated=not_modifier(fn),
            category=category,
            description=description or _first_doc_line(fn),
        )
        # setdefault is an atomic check-and-set for dicts
        entry = cls._entries.setdefault(resolved, candidate)
        if entry is candidate:
            logger.debug("Registered predicate '%s'", resolved)
        else:
            log = logger.warning if cls._config.warn_on_duplicate else logger.debug
            log("Predicate '%s' is already registered, ignoring", resolved)
        return entry

    @classmethod
    def get(cls, name: str) -> PredicateEntry:
        """Get a registered predicate entry by name.

        Raises:
            ValueError: If the predicate is not registered
        """
        if name not in cls._entries:
            raise ValueError(
                f"Predicate '{name}' is not registered. "
                "Register it with mixin() before use."
            )
        return cls._entries[name]

    @classmethod
    def variant(cls, name: str, kind: Variant) -> Any:
        """Get one of the four views of a registered predicate."""
        return cls.get(name).variant(kind)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a predicate is registered."""
        return name in cls._entries

    @classmethod
    def list_registered(cls) -> list[str]:
        """List all registered predicate names."""
        return sorted(cls._entries.keys())

    @classmethod
    def list_by_category(cls, category: PredicateCategory) -> list[PredicateEntry]:
        """List predicates in a specific category."""
        return [e for e in cls._entries.values() if e.category == category]

    @classmethod
    def export_documentation(cls) -> dict[str, Any]:
        """Export the registry, organized by category."""
        by_category: dict[str, list[dict[str, Any]]] = {}
        for entry in cls._entries.values():
            by_category.setdefault(entry.category.value, []).append(entry.to_dict())

        return {
            "predicates": {name: e.to_dict() for name, e in cls._entries.items()},
            "byCategory": by_category,
        }

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations. Primarily for testing."""
        cls._entries.clear()


def mixin(fn: Any, name: Any = None) -> PredicateEntry:
    """Register a predicate, accepting ``(fn, name)`` or ``(name, fn)``.

    Compatibility form of PredicateRegistry.register.
    """
    if isinstance(fn, str) and callable(name):
        fn, name = name, fn
    return PredicateRegistry.register(fn, name)
