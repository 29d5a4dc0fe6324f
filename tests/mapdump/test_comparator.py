# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import pytest

from mapdump.comparator import less_than, sort_keys
from mapdump.kinds import CustomText


class Tag(CustomText):
    def __init__(self, text):
        self.text = text

    def to_text(self):
        return self.text


def first():
    pass


def second():
    pass


@pytest.mark.parametrize(
    "a, b",
    [
        ("a", "b"),
        (1, 2),
        (10, 9),  # textual, not numeric
        (1, "a"),
        ("1", "a"),
        (Tag("a"), "b"),
        ("a", Tag("b")),
        (None, "x"),
    ],
)
def test_less_than(a, b):
    assert less_than(a, b)
    assert not less_than(b, a)


def test_equal_text_is_ordered_by_kind():
    assert less_than(123, "123")
    assert not less_than("123", 123)


def test_callables_are_ordered_by_definition():
    assert less_than(first, second)
    assert not less_than(second, first)


def test_kinds_without_text_are_ordered_by_tag():
    # "callable" < "container" < "other" < "scalar" < "text"
    assert less_than(first, {})
    assert less_than({}, object())
    assert less_than(object(), 1)


@pytest.mark.parametrize(
    "a, b",
    [
        ("a", "a"),
        (object(), object()),
        ((1,), (2,)),
        (len, print),  # builtins have no source position
    ],
)
def test_unordered(a, b):
    assert not less_than(a, b)
    assert not less_than(b, a)


def test_sort_keys():
    assert sort_keys(["c", 2, "a", "2", 1], less_than) == [1, 2, "2", "a", "c"]


def test_sort_keys_keeps_order_of_unordered_keys():
    x = object()
    y = object()
    assert sort_keys([y, "b", x, "a"], less_than) == [y, x, "a", "b"]


def test_sort_keys_without_comparator():
    keys = {"b": 1, "a": 2}.keys()
    assert sort_keys(keys, None) == ["b", "a"]


def test_sort_keys_with_custom_comparator():
    assert sort_keys([1, 3, 2], lambda a, b: a > b) == [3, 2, 1]
