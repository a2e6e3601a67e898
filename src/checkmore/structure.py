"""Structural validation over nested mappings.

A predicate tree maps property names to predicates or to nested trees:

    {"port": check.port, "owner": {"email": check.email}}

Trees are resolved into Leaf/Branch nodes before traversal, so the walk
never has to guess what an entry is.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from checkmore.types import ConfigurationError, Predicate


@dataclass(frozen=True)
class Leaf:
    """A tree node holding a predicate."""

    predicate: Predicate


@dataclass(frozen=True)
class Branch:
    """A tree node holding named children, in declaration order."""

    children: dict[str, "Node"] = field(default_factory=dict)


Node = Union[Leaf, Branch]


def build_tree(predicates: Mapping[str, Any], strict: bool = False) -> Branch:
    """Resolve a predicate mapping into a Branch.

    Args:
        predicates: Mapping of property name to predicate or nested mapping
        strict: If True, an entry that is neither callable nor a mapping
            raises ConfigurationError. Otherwise such entries are dropped.

    Returns:
        The resolved root branch
    """
    children: dict[str, Node] = {}
    for prop, entry in predicates.items():
        if callable(entry):
            children[prop] = Leaf(entry)
        elif isinstance(entry, Mapping):
            children[prop] = build_tree(entry, strict=strict)
        elif strict:
            raise ConfigurationError(
                f"not a predicate function for {prop} but {entry!r}"
            )
    return Branch(children)


def _value_of(values: Any, prop: str) -> Any:
    if values is None:
        return None
    if isinstance(values, Mapping):
        return values.get(prop)
    return getattr(values, prop, None)


def _apply(values: Any, node: Branch) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for prop, child in node.children.items():
        value = _value_of(values, prop)
        if isinstance(child, Leaf):
            result[prop] = child.predicate(value)
        else:
            result[prop] = _apply(value, child)
    return result


def map_(values: Any, predicates: Mapping[str, Any] | Branch) -> dict[str, Any]:
    """Apply a predicate tree to a value tree.

    Properties of ``values`` not named in ``predicates`` are ignored.

    Example:
        map_({"a": {"b": 5}}, {"a": {"b": is_number}})  # {"a": {"b": True}}
    """
    tree = predicates if isinstance(predicates, Branch) else build_tree(predicates)
    return _apply(values, tree)


def every(results: Mapping[str, Any]) -> bool:
    """Reduce a result tree to one boolean.

    A leaf that is exactly False, or a nested mapping that reduces to False,
    fails the tree. An empty tree passes. All leaves are visited.
    """
    outcomes = [
        every(value) if isinstance(value, Mapping) else value is not False
        for value in results.values()
    ]
    return all(outcomes)


def all_(obj: Any, predicates: Any) -> bool:
    """Check that ``obj`` passes every rule in ``predicates``.

    Example:
        all_({"foo": "foo"}, {"foo": is_string})

    Raises:
        ConfigurationError: If either argument is not a mapping, or a rule is
            not a predicate function
    """
    if not isinstance(obj, Mapping):
        raise ConfigurationError("missing object to check")
    if not isinstance(predicates, Mapping):
        raise ConfigurationError("missing predicates object")
    tree = build_tree(predicates, strict=True)
    return every(map_(obj, tree))


def schema(predicates: Any, obj: Any) -> bool:
    """Check ``obj`` against ``predicates``; ``all_`` with arguments reversed."""
    return all_(obj, predicates)
