"""Built-in leaf predicates."""

from checkmore.predicates.builtins import register_all_builtins

__all__ = ["register_all_builtins"]
