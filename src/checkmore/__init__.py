"""checkmore - named, composable runtime predicates.

This module provides:
- check: facade over the registry (check.port, check.maybe.port, ...)
- PredicateRegistry: named predicates with maybe/verify/not variants
- Combinators: or_, and_, not_modifier, then
- Structural validation: every, map_, all_, schema
- defend: argument guards for plain functions

Usage:
    from checkmore import check

    check.schema({"port": check.port}, {"port": 8080})  # True
    check.verify.unempty_string(name, "name is required")
"""

from checkmore.arity import curry2, positional_capacity
from checkmore.check import Check, Namespace, check
from checkmore.combinators import BranchResult, and_, not_modifier, or_, safe_invoke, then
from checkmore.config import CheckConfig
from checkmore.defend import GuardClause, build_guard_spec, defend
from checkmore.predicates import register_all_builtins
from checkmore.registry import PredicateRegistry, maybe_modifier, mixin, verify_modifier
from checkmore.structure import Branch, Leaf, all_, build_tree, every, map_, schema
from checkmore.types import (
    ArityError,
    CheckError,
    ConfigurationError,
    Predicate,
    PredicateCategory,
    PredicateEntry,
    ValidationFailure,
    Variant,
)

__all__ = [
    # Facade
    "Check",
    "Namespace",
    "check",
    # Types
    "ArityError",
    "CheckError",
    "ConfigurationError",
    "Predicate",
    "PredicateCategory",
    "PredicateEntry",
    "ValidationFailure",
    "Variant",
    # Registry
    "PredicateRegistry",
    "maybe_modifier",
    "mixin",
    "verify_modifier",
    # Combinators
    "BranchResult",
    "and_",
    "not_modifier",
    "or_",
    "safe_invoke",
    "then",
    # Structure
    "Branch",
    "Leaf",
    "all_",
    "build_tree",
    "every",
    "map_",
    "schema",
    # Guards
    "GuardClause",
    "build_guard_spec",
    "defend",
    # Setup
    "CheckConfig",
    "curry2",
    "positional_capacity",
    "register_all_builtins",
]

_config = CheckConfig.from_env()
PredicateRegistry.configure(_config)
if _config.autoload_builtins:
    register_all_builtins()
