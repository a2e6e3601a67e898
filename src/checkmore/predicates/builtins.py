"""Built-in predicates for checkmore.

This module registers all built-in predicates with the PredicateRegistry.
checkmore calls register_all_builtins() on import unless
CHECKMORE_AUTOLOAD_BUILTINS is turned off.

Categories:
- Type: nulled, defined, fn, string, object, array, number, bool, date, ...
- Number: positive, negative, zero, int_number, unit, port, ...
- String: unempty_string, lower_case, email, semver, commit_id, web_url, ...
- Collection: empty, unempty, has, index, length, one_of, array_of, ...
- Logic: same, equal, raises, or, and, all, schema
"""

import inspect
import math
import numbers
import re
from collections.abc import Mapping, Sized
from datetime import date
from typing import Any, Callable

from checkmore.arity import curry2
from checkmore.combinators import and_, or_
from checkmore.registry import PredicateRegistry
from checkmore.structure import all_, schema
from checkmore.types import ConfigurationError, PredicateCategory, ValidationFailure

SEMVER_PATTERN = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+$")

EMAIL_PATTERN = re.compile(r"^.+@.+\..+$")

HEX_RGB_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")

# Full git SHA commit id, e.g. 3b819803cdf2225ca1338beb17e0c506fdeedefc
COMMIT_ID_PATTERN = re.compile(r"^[0-9a-f]{40}$")

# Short id as shown by `git log --oneline`
SHORT_COMMIT_ID_PATTERN = re.compile(r"^[0-9a-f]{7}$")

MAX_PORT = 65535
MAX_SYSTEM_PORT = 1024


def register_all_builtins() -> None:
    """Register all built-in predicates with the PredicateRegistry."""
    _register_type_predicates()
    _register_number_predicates()
    _register_string_predicates()
    _register_collection_predicates()
    _register_logic_predicates()


def _register_table(
    category: PredicateCategory, table: dict[str, Callable[..., Any]]
) -> None:
    for name, fn in table.items():
        PredicateRegistry.register(fn, name, category=category)


# -----------------------------------------------------------------------------
# Type Predicates
# -----------------------------------------------------------------------------


def _is_null(value: Any) -> bool:
    """Returns true if value is None."""
    return value is None


def _is_defined(value: Any) -> bool:
    """Returns true if value is not None."""
    return value is not None


def _is_fn(value: Any) -> bool:
    """Returns true if value is callable."""
    return callable(value)


def _is_string(value: Any) -> bool:
    """Returns true if value is a string."""
    return isinstance(value, str)


def _is_object(value: Any) -> bool:
    """Returns true if value is a mapping."""
    return isinstance(value, Mapping)


def _is_array(value: Any) -> bool:
    """Returns true if value is a list or tuple."""
    return isinstance(value, (list, tuple))


def _is_number(value: Any) -> bool:
    """Returns true if value is a finite real number (booleans excluded)."""
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _is_bool(value: Any) -> bool:
    """Returns true if value is True or False."""
    return isinstance(value, bool)


def _is_date(value: Any) -> bool:
    """Returns true if value is a date or datetime."""
    return isinstance(value, date)


def _is_regexp(value: Any) -> bool:
    """Returns true if value is a compiled regular expression."""
    return isinstance(value, re.Pattern)


def _is_error(value: Any) -> bool:
    """Returns true if value is an exception instance."""
    return isinstance(value, BaseException)


def _is_promise(value: Any) -> bool:
    """Returns true if value can be awaited."""
    return inspect.isawaitable(value)


def _is_primitive(value: Any) -> bool:
    """Returns true for numbers, booleans, strings and bytes."""
    return isinstance(value, (int, float, bool, str, bytes))


def _instance(value: Any, cls: type) -> bool:
    """Returns true if value is an instance of cls."""
    return isinstance(value, cls)


def _is_type(expected_type: str, value: Any) -> bool:
    """Returns true if the type name of value matches expected_type."""
    return type(value).__name__ == expected_type


def _register_type_predicates() -> None:
    _register_table(
        PredicateCategory.TYPE,
        {
            "nulled": _is_null,
            "defined": _is_defined,
            "fn": _is_fn,
            "string": _is_string,
            "object": _is_object,
            "array": _is_array,
            "number": _is_number,
            "bool": _is_bool,
            "date": _is_date,
            "valid_date": _is_date,
            "regexp": _is_regexp,
            "error": _is_error,
            "promise": _is_promise,
            "primitive": _is_primitive,
            "instance": _instance,
            "type": curry2(_is_type),
        },
    )


# -----------------------------------------------------------------------------
# Number Predicates
# -----------------------------------------------------------------------------


def _positive_number(value: Any) -> bool:
    """Returns true if value is a number greater than 0."""
    return _is_number(value) and value > 0


def _negative_number(value: Any) -> bool:
    """Returns true if value is a number less than 0."""
    return _is_number(value) and value < 0


def _is_zero(value: Any) -> bool:
    """Returns true if value is the number 0."""
    return _is_number(value) and value == 0


def _is_integer(value: Any) -> bool:
    """Returns true if value is a number without a fractional part."""
    return _is_number(value) and value % 1 == 0


def _is_float(value: Any) -> bool:
    """Returns true if value is a number with a fractional part."""
    return _is_number(value) and value % 1 != 0


def _is_bit(value: Any) -> bool:
    """Returns true if value is 0 or 1."""
    return _is_number(value) and value in (0, 1)


def _is_unit(value: Any) -> bool:
    """Returns true if 0 <= value <= 1."""
    return _is_number(value) and 0.0 <= value <= 1.0


def _found(index: Any) -> bool:
    """Returns true if index is a valid search result (not -1)."""
    return _is_number(index) and index >= 0


def _is_port(value: Any) -> bool:
    """Returns true if value is a valid port number."""
    return _positive_number(value) and value <= MAX_PORT


def _is_system_port(value: Any) -> bool:
    """Returns true if value is a system port number (1-1024)."""
    return _positive_number(value) and value <= MAX_SYSTEM_PORT


def _is_user_port(value: Any) -> bool:
    """Returns true if value is a user port number (1025-65535)."""
    return _is_port(value) and value > MAX_SYSTEM_PORT


def _register_number_predicates() -> None:
    _register_table(
        PredicateCategory.NUMBER,
        {
            "positive_number": _positive_number,
            "negative_number": _negative_number,
            "positive": _positive_number,
            "negative": _negative_number,
            "zero": _is_zero,
            "int_number": _is_integer,
            "float_number": _is_float,
            "bit": _is_bit,
            "unit": _is_unit,
            "found": _found,
            "port": _is_port,
            "system_port": _is_system_port,
            "user_port": _is_user_port,
        },
    )


# -----------------------------------------------------------------------------
# String Predicates
# -----------------------------------------------------------------------------


def _unempty_string(value: Any) -> bool:
    """Returns true if value is a non-empty string."""
    return isinstance(value, str) and value != ""


def _empty_string(value: Any) -> bool:
    """Returns true if value is ''."""
    return isinstance(value, str) and value == ""


def _lower_case(value: Any) -> bool:
    """Returns true if the string is already lower case."""
    return isinstance(value, str) and value.lower() == value


def _starts_with(prefix: Any, value: Any) -> bool:
    """Returns true if value starts with prefix."""
    return isinstance(prefix, str) and isinstance(value, str) and value.startswith(prefix)


def _contains(where: Any, what: Any) -> bool:
    """Returns true if what is an item of a list or a substring of a string."""
    if isinstance(where, (list, tuple)):
        return what in where
    if isinstance(where, str):
        if not isinstance(what, str):
            raise ConfigurationError(
                f"Contains in string should search for string also {what!r}"
            )
        return what in where
    return False


def _matches(pattern: re.Pattern[str], value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def _is_email(value: Any) -> bool:
    """Really simple email sanity check."""
    return _matches(EMAIL_PATTERN, value)


def _is_semver(value: Any) -> bool:
    """Returns true for an exact major.minor.patch version."""
    return _unempty_string(value) and _matches(SEMVER_PATTERN, value)


def _is_git(value: Any) -> bool:
    """Returns true for urls of the format git@..."""
    return _unempty_string(value) and value.startswith("git@")


def _is_hex_rgb(value: Any) -> bool:
    """Returns true if value is a hex RGB color between #000 and #FFFFFF."""
    return _matches(HEX_RGB_PATTERN, value)


def _is_commit_id(value: Any) -> bool:
    """Returns true if value is a 40 character SHA commit id."""
    return _matches(COMMIT_ID_PATTERN, value)


def _is_short_commit_id(value: Any) -> bool:
    """Returns true if value is a 7 character short SHA commit id."""
    return _matches(SHORT_COMMIT_ID_PATTERN, value)


def _is_http(value: Any) -> bool:
    """Returns true if value is an http:// url."""
    return _starts_with("http://", value)


def _is_https(value: Any) -> bool:
    """Returns true if value is an https:// url."""
    return _starts_with("https://", value)


def _is_web_url(value: Any) -> bool:
    """Returns true if value is an http:// or https:// url."""
    return _is_http(value) or _is_https(value)


def _register_string_predicates() -> None:
    _register_table(
        PredicateCategory.STRING,
        {
            "unempty_string": _unempty_string,
            "empty_string": _empty_string,
            "lower_case": _lower_case,
            "starts_with": _starts_with,
            "contains": _contains,
            "email": _is_email,
            "semver": _is_semver,
            "git": _is_git,
            "hex_rgb": _is_hex_rgb,
            "commit_id": _is_commit_id,
            "short_commit_id": _is_short_commit_id,
            "web_url": _is_web_url,
            "url": _is_web_url,
            "http": _is_http,
            "https": _is_https,
            "secure": _is_https,
        },
    )


# -----------------------------------------------------------------------------
# Collection Predicates
# -----------------------------------------------------------------------------


def _empty(value: Any) -> bool:
    """Returns true if value is an empty string, list, tuple or mapping."""
    return isinstance(value, Sized) and len(value) == 0


def _unempty(value: Any) -> bool:
    """Returns true if value has items, or has no length at all."""
    if isinstance(value, Sized):
        return len(value) > 0
    return True


def _is_empty_object(value: Any) -> bool:
    """Returns true if value is an empty mapping."""
    return isinstance(value, Mapping) and len(value) == 0


def _unempty_array(value: Any) -> bool:
    """Returns true if value is a list or tuple with at least one item."""
    return _is_array(value) and len(value) > 0


def _has(obj: Any, prop: Any) -> bool:
    """Returns true if obj has a non-None value for prop."""
    if obj is None or not _unempty_string(prop):
        return False
    if isinstance(obj, Mapping):
        return obj.get(prop) is not None
    return getattr(obj, prop, None) is not None


def _is_index(seq: Any, k: Any) -> bool:
    """Returns true if k is a valid index into seq."""
    return (
        isinstance(seq, Sized)
        and isinstance(k, int)
        and not isinstance(k, bool)
        and 0 <= k < len(seq)
    )


def _has_length(value: Any, k: Any) -> bool:
    """Returns true if the list or string has exactly k items."""
    if _is_number(value) and not _is_number(k):
        return _has_length(k, value)
    return isinstance(value, (list, tuple, str)) and len(value) == k


def _same_length(a: Any, b: Any) -> bool:
    """Returns true if a and b have the same type and length."""
    return (
        type(a) is type(b)
        and isinstance(a, Sized)
        and len(a) == len(b)
    )


def _all_same(items: Any) -> bool:
    """Returns true if all items in the list are the same object."""
    if not _is_array(items):
        return False
    if not items:
        return True
    first = items[0]
    return all(item is first for item in items)


def _one_of(items: Any, value: Any) -> bool:
    """Returns true if value is in the list."""
    if not _is_array(items):
        raise ValidationFailure("expected an array")
    return value in items


def _array_of(rule: Callable[[Any], Any], items: Any) -> bool:
    """Returns true if each item in the list passes rule."""
    return _is_array(items) and all(rule(item) for item in items)


def _bad_items(rule: Callable[[Any], Any], items: Any) -> list[Any]:
    """Returns the items that do not pass rule."""
    if not _is_array(items):
        raise ValidationFailure("expected array to find bad items")
    return [item for item in items if not rule(item)]


def _array_of_strings(items: Any, check_lower_case: Any = False) -> bool:
    """Returns true if the list only has strings, optionally all lower case."""
    valid = _is_array(items) and all(_is_string(item) for item in items)
    if valid and check_lower_case is True:
        return all(_lower_case(item) for item in items)
    return valid


def _array_of_arrays_of_strings(items: Any, check_lower_case: Any = False) -> bool:
    """Returns true if the list holds only lists of strings."""
    return _is_array(items) and all(
        _array_of_strings(inner, check_lower_case) for inner in items
    )


def _register_collection_predicates() -> None:
    _register_table(
        PredicateCategory.COLLECTION,
        {
            "empty": _empty,
            "unempty": _unempty,
            "empty_object": _is_empty_object,
            "unempty_array": _unempty_array,
            "has": _has,
            "index": _is_index,
            "length": curry2(_has_length),
            "same_length": _same_length,
            "all_same": _all_same,
            "one_of": curry2(_one_of, strict=True),
            "array_of": _array_of,
            "bad_items": _bad_items,
            "array_of_strings": _array_of_strings,
            "array_of_arrays_of_strings": _array_of_arrays_of_strings,
        },
    )


# -----------------------------------------------------------------------------
# Logic Predicates
# -----------------------------------------------------------------------------


def _same(a: Any, b: Any) -> bool:
    """Returns true if a and b are the same object."""
    return a is b


def _equal(a: Any, b: Any) -> bool:
    """Returns true if a == b."""
    return a == b


def _raises(fn: Any, error_validator: Any = None) -> bool:
    """Returns true if calling fn raises, optionally checking the error."""
    if not callable(fn):
        raise ValidationFailure("expected function that raises")
    try:
        fn()
    except Exception as err:
        if error_validator is None:
            return True
        if callable(error_validator):
            return bool(error_validator(err))
        return False
    return False


def _register_logic_predicates() -> None:
    _register_table(
        PredicateCategory.LOGIC,
        {
            "same": _same,
            "equal": curry2(_equal),
            "raises": _raises,
            "or": or_,
            "and": and_,
            "all": all_,
            "schema": curry2(schema),
        },
    )
