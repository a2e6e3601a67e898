"""Tests for argument guards."""

import pytest

from checkmore import check
from checkmore.defend import GuardClause, build_guard_spec, defend
from checkmore.types import ConfigurationError, ValidationFailure


def is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_string(value):
    return isinstance(value, str)


def add(a, b):
    return a + b


# =============================================================================
# build_guard_spec tests
# =============================================================================


class TestBuildGuardSpec:
    def test_pairs_predicates_with_messages(self):
        clauses = build_guard_spec((is_number, "a number", is_string))
        assert clauses == [
            GuardClause(is_number, "a number"),
            GuardClause(is_string, None),
        ]

    def test_empty_message_is_ignored(self):
        assert build_guard_spec((is_number, "")) == [GuardClause(is_number, None)]

    def test_leading_message_is_skipped(self):
        clauses = build_guard_spec(("stray", is_number))
        assert clauses == [GuardClause(is_number, None)]

    def test_non_string_entries_are_skipped(self):
        clauses = build_guard_spec((is_number, 42, is_string))
        assert clauses == [GuardClause(is_number, None), GuardClause(is_string, None)]

    def test_rejects_non_sequence(self):
        with pytest.raises(ConfigurationError):
            build_guard_spec(is_number)


# =============================================================================
# defend tests
# =============================================================================


class TestDefend:
    def test_calls_function_when_arguments_pass(self):
        double = defend(lambda x: x * 2, check.number)
        assert double(5) == 10

    def test_rejects_failing_argument(self):
        double = defend(lambda x: x * 2, check.number)
        with pytest.raises(ValidationFailure, match="Argument 1: 'five' does not pass predicate"):
            double("five")

    def test_appends_message(self):
        double = defend(lambda x: x * 2, check.number, "x should be a number")
        with pytest.raises(ValidationFailure, match="x should be a number"):
            double("five")

    def test_reports_argument_position(self):
        guarded = defend(add, is_number, "a", is_number, "b")
        assert guarded(1, 2) == 3
        with pytest.raises(ValidationFailure, match="^Argument 2: 'x' does not pass predicate: b$"):
            guarded(1, "x")

    def test_messages_do_not_consume_arguments(self):
        guarded = defend(add, is_string, "first", is_string, "second")
        assert guarded("a", "b") == "ab"

    def test_message_in_predicate_position_is_skipped(self):
        guarded = defend(add, "leading note", is_number, is_number)
        assert guarded(1, 2) == 3
        with pytest.raises(ValidationFailure, match="Argument 1"):
            guarded("1", 2)

    def test_missing_argument_is_checked_as_none(self):
        guarded = defend(lambda *args: len(args), is_number, is_number)
        with pytest.raises(ValidationFailure, match="Argument 2: None"):
            guarded(1)

    def test_maybe_predicate_allows_missing_argument(self):
        guarded = defend(lambda *args: len(args), is_number, check.maybe.number)
        assert guarded(1) == 1

    def test_extra_arguments_are_not_checked(self):
        guarded = defend(lambda *args: args, is_number)
        assert guarded(1, "two", None) == (1, "two", None)

    def test_keyword_arguments_are_passed_through(self):
        guarded = defend(lambda a, scale=1: a * scale, is_number)
        assert guarded(3, scale=2) == 6

    def test_no_predicates(self):
        assert defend(add)(1, 2) == 3

    def test_keeps_function_metadata(self):
        assert defend(add, is_number).__name__ == "add"

    def test_rejects_non_callable(self):
        with pytest.raises(ConfigurationError, match="expected a function"):
            defend("not a function", is_number)

    def test_predicate_exceptions_propagate(self):
        def boom(value):
            raise RuntimeError("broken predicate")

        with pytest.raises(RuntimeError, match="broken predicate"):
            defend(add, boom)(1, 2)
