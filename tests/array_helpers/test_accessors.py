"""Tests for key and path based accessors."""
import random
import threading
from collections import OrderedDict, defaultdict

import pytest

from arrayforge import (
    InvalidArgumentError,
    get,
    get_array,
    get_array_path,
    get_first,
    get_path,
    get_random,
)
from arrayforge.array_helpers.accessors import _thread_random


NESTED = {"a": {"b": {"c": 5}}, "items": [{"id": 7}, {"id": 8}], "text": "xyz"}


# get_first

def test_get_first_returns_default_for_empty_mapping():
    """Verify an empty array yields the default."""
    assert get_first({}, "d") == "d"
    assert get_first([], 5) == 5


def test_get_first_returns_first_inserted_value():
    """Verify insertion order, not key order, decides the first value."""
    assert get_first({"a": 1, "b": 2}) == 1
    assert get_first({"b": 2, "a": 1}) == 2
    assert get_first(OrderedDict([(5, "five"), (0, "zero")])) == "five"


def test_get_first_returns_stored_falsy_value():
    """Verify a stored None or False is returned instead of the default."""
    assert get_first([None], "d") is None
    assert get_first({"x": False}, "d") is False


# get

def test_get_returns_value_or_default():
    """Verify existing keys return their value and missing ones the default."""
    assert get({"a": 1}, "a", 99) == 1
    assert get({"a": 1}, "b", 99) == 99
    assert get({"a": 1}, "b") is None


@pytest.mark.parametrize("stored", [None, 0, False, "", [], {}])
def test_get_treats_falsy_values_as_present(stored):
    """Verify presence means the key exists, whatever the value."""
    assert get({"a": stored}, "a", 99) is stored


def test_get_reads_sequence_positions():
    """Verify sequences are addressed by position, including numeric strings."""
    assert get([10, 20], 1) == 20
    assert get((10, 20), "1") == 20
    assert get([10, 20], -1, "d") == "d"
    assert get([10, 20], 2, "d") == "d"


def test_get_matches_integer_keys_with_numeric_strings():
    """Verify "1" also finds the integer key 1 in a mapping."""
    assert get({1: "x"}, "1") == "x"
    assert get({"01": "y"}, 1, "d") == "d"


def test_get_matches_string_keys_with_integers():
    """Verify an integer also finds its canonical string key, as in JSON objects."""
    assert get({"1": "x"}, 1) == "x"
    assert get({"-2": "y"}, -2) == "y"
    assert get({"01": "z"}, 1, "d") == "d"
    assert get({"1": "x"}, True, "d") == "d"


def test_get_does_not_insert_into_defaultdict():
    """Verify lookups never mutate a defaultdict argument."""
    data = defaultdict(list)

    assert get(data, "missing") is None
    assert "missing" not in data


def test_get_ignores_unhashable_keys():
    """Verify an unhashable key is simply missing from a mapping."""
    assert get({"a": 1}, ["a"], "d") == "d"


@pytest.mark.parametrize("not_an_array", ["abc", 5, None, {1, 2}])
def test_get_rejects_non_array_input(not_an_array):
    """Verify non-array input raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match="must be a mapping"):
        get(not_an_array, 0)


def test_invalid_argument_error_is_a_type_error():
    """Verify callers catching TypeError also catch invalid input."""
    with pytest.raises(TypeError):
        get("abc", 0)


# get_array

def test_get_array_keeps_request_order_and_fills_none():
    """Verify requested keys appear in order, missing ones mapped to None."""
    result = get_array({"a": 1, "b": None}, "b", "c", "a")

    assert result == {"b": None, "c": None, "a": 1}
    assert list(result) == ["b", "c", "a"]


def test_get_array_without_keys_returns_empty_dict():
    """Verify no requested keys gives an empty result."""
    assert get_array({"a": 1}) == {}


def test_get_array_rejects_unhashable_key():
    """Verify unhashable keys cannot become result keys."""
    with pytest.raises(InvalidArgumentError, match="must be hashable"):
        get_array({"a": 1}, ["a"])


# get_path

def test_get_path_descends_nested_mappings():
    """Verify a full path resolves to the nested value."""
    assert get_path(NESTED, "a/b/c") == 5
    assert get_path(NESTED, "a/b") == {"c": 5}


def test_get_path_returns_default_on_missing_segment():
    """Verify the first missing segment short-circuits to the default."""
    assert get_path({"a": {}}, "a/x", -1) == -1
    assert get_path(NESTED, "x/b/c") is None


def test_get_path_descends_through_sequences():
    """Verify numeric segments address sequence positions."""
    assert get_path(NESTED, "items/1/id") == 8
    assert get_path(NESTED, "items/2/id", "d") == "d"


def test_get_path_does_not_descend_into_scalars():
    """Verify strings and numbers have no children."""
    assert get_path(NESTED, "text/0", "d") == "d"
    assert get_path(NESTED, "a/b/c/d", "d") == "d"


def test_get_path_uses_custom_separator():
    """Verify a custom separator splits the path."""
    assert get_path(NESTED, "a.b.c", separator=".") == 5
    assert get_path({"a/b": 1}, "a/b", separator="|") == 1


def test_get_path_returns_stored_none():
    """Verify a path ending on a stored None yields None, not the default."""
    assert get_path({"a": {"b": None}}, "a/b", "d") is None


def test_get_path_rejects_non_string_path():
    """Verify paths must be strings."""
    with pytest.raises(InvalidArgumentError, match="path must be a string"):
        get_path(NESTED, ["a", "b"])


def test_get_path_rejects_empty_separator():
    """Verify an empty separator is refused."""
    with pytest.raises(InvalidArgumentError, match="separator"):
        get_path(NESTED, "a", separator="")


# get_array_path

def test_get_array_path_resolves_each_path():
    """Verify every path maps to its value or None."""
    result = get_array_path(NESTED, "a/b/c", "a/x", "items/0/id")

    assert result == {"a/b/c": 5, "a/x": None, "items/0/id": 7}
    assert list(result) == ["a/b/c", "a/x", "items/0/id"]


# get_random

def test_get_random_returns_none_for_empty_array():
    """Verify an empty array yields None."""
    assert get_random({}) is None
    assert get_random([]) is None


def test_get_random_returns_only_existing_values():
    """Verify chosen values come from the array's values, not its keys."""
    data = {"a": 1, "b": 2, "c": 3}
    rng = random.Random(42)

    picks = {get_random(data, rng) for _ in range(200)}

    assert picks == {1, 2, 3}


def test_get_random_with_same_seed_is_reproducible():
    """Verify an explicitly passed generator drives the choice."""
    data = list(range(100))
    first = [get_random(data, random.Random(7)) for _ in range(5)]
    second = [get_random(data, random.Random(7)) for _ in range(5)]

    assert first == second


def test_get_random_uses_default_generator():
    """Verify calling without a generator works."""
    assert get_random(["only"]) == "only"


def test_each_thread_gets_its_own_generator():
    """Verify the default generator is private to the calling thread."""
    generators = []

    def collect():
        generators.append(_thread_random())

    threads = [threading.Thread(target=collect) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(generators) == 2
    assert generators[0] is not generators[1]
    assert _thread_random() is _thread_random()
