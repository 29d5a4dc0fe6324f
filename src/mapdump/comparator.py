# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Default ordering of keys within a container."""

import functools
from collections.abc import Callable, Iterable

from mapdump.kinds import Kind, kind_of, text_form


type Comparator = Callable[[object, object], bool]


def _source_position(func: object) -> tuple[str, int] | None:
    code = getattr(func, "__code__", None)
    if code is None:
        return None
    return code.co_filename, code.co_firstlineno


def less_than(a: object, b: object) -> bool:
    """Returns True if key a should be listed before key b.

    Keys are ordered by their textual forms if both have one, then by kind tag,
    and callables by where they are defined. Anything else is unordered, so this
    is a partial order: for some pairs, neither a < b nor b < a.
    """
    text_a = text_form(a)
    text_b = text_form(b)
    if text_a is not None and text_b is not None and text_a != text_b:
        return text_a < text_b

    kind_a = kind_of(a)
    kind_b = kind_of(b)
    if kind_a is not kind_b:
        return kind_a.value < kind_b.value

    if kind_a is Kind.CALLABLE:
        pos_a = _source_position(a)
        pos_b = _source_position(b)
        if pos_a is not None and pos_b is not None:
            return pos_a < pos_b

    return False


def sort_keys(keys: Iterable[object], comparator: Comparator | None) -> list[object]:
    """Sorts keys once with the given less-than comparator.

    The sort is stable, so keys that the comparator considers unordered relative
    to each other stay in the order in which keys yielded them. If comparator is
    None, that order is used as is.
    """
    keys = list(keys)
    if comparator is None:
        return keys

    def compare(a, b):
        if comparator(a, b):
            return -1
        if comparator(b, a):
            return 1
        return 0

    return sorted(keys, key=functools.cmp_to_key(compare))
