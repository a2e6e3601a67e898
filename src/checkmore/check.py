"""The ``check`` facade.

Attribute access reads through to the PredicateRegistry:

    check.port(8080)                    # base
    check.maybe.port(None)              # True
    check.verify.port(70000, "bad port")  # raises ValidationFailure
    check.not_.port(70000)              # True

``not``, ``or`` and ``and`` are Python keywords, so they are reachable as
``check.not_``, ``check.or_``, ``check.and_`` and by item or getattr lookup.
"""

from collections.abc import Iterator
from typing import Any

from checkmore.arity import curry2
from checkmore.combinators import and_, or_, then
from checkmore.defend import defend
from checkmore.registry import PredicateRegistry, mixin
from checkmore.structure import all_, every, map_, schema
from checkmore.types import Variant

_KEYWORD_OPERATIONS = {"or": or_, "and": and_}


class Namespace:
    """Read-only view of one variant of every registered predicate."""

    def __init__(self, kind: Variant):
        self._kind = kind

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    def __getitem__(self, name: str) -> Any:
        try:
            return PredicateRegistry.variant(name, self._kind)
        except ValueError as e:
            raise AttributeError(str(e)) from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and PredicateRegistry.is_registered(name)

    def __iter__(self) -> Iterator[str]:
        return iter(PredicateRegistry.list_registered())

    def __dir__(self) -> list[str]:
        return PredicateRegistry.list_registered()

    def __repr__(self) -> str:
        return f"<checkmore {self._kind.value} namespace>"


class Check(Namespace):
    """Base namespace plus the maybe/verify/not views and the engine operations."""

    every = staticmethod(every)
    map = staticmethod(map_)
    all = staticmethod(all_)
    schema = staticmethod(curry2(schema))
    or_ = staticmethod(or_)
    and_ = staticmethod(and_)
    mixin = staticmethod(mixin)
    then = staticmethod(then)
    defend = staticmethod(defend)
    curry2 = staticmethod(curry2)

    def __init__(self) -> None:
        super().__init__(Variant.BASE)
        self.maybe = Namespace(Variant.MAYBE)
        self.verify = Namespace(Variant.VERIFY)
        self.not_ = Namespace(Variant.NOT)

    def __getitem__(self, name: str) -> Any:
        if name == "not":
            return self.not_
        if name in _KEYWORD_OPERATIONS:
            return _KEYWORD_OPERATIONS[name]
        return super().__getitem__(name)

    def __dir__(self) -> list[str]:
        operations = [
            "maybe", "verify", "not_", "every", "map", "all", "schema", "or_", "and_",
            "mixin", "then", "defend", "curry2",
        ]
        return sorted(set(operations) | set(super().__dir__()))


check = Check()
