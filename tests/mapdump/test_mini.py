# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

from mapdump import mini
from mapdump.kinds import CustomText
from tests.pytest_fixtures import lines


class Labelled(dict, CustomText):
    def to_text(self):
        return "label"


def test_iteration_order():
    value = {"b": 1, "a": {"x": "y"}, 3: None}
    assert mini.dump(value, "m") == lines(
        "m = {",
        '  "b" = 1,',
        '  "a" = {',
        '    "x" = "y",',
        "  },",
        "  3 = None,",
        "}",
    )


def test_unnamed():
    assert mini.dump({}) == lines("<top_level> = {", "}")


def test_repeats():
    shared = {}
    value = {"one": shared, "two": shared}
    value["self"] = value

    assert mini.dump(value, "v") == lines(
        "v = {",
        '  "one" = {',
        "  },",
        '  "two" = {',
        '    * already shown -> v."one"',
        "  },",
        '  "self" = {',
        "    * already shown -> v",
        "  },",
        "}",
    )


def test_custom_text():
    assert mini.dump({"l": Labelled(n=1)}, "c") == lines(
        "c = {",
        '  "l" = {',
        '    "n" = 1,',
        '    <to_text() = "label">',
        "  },",
        "}",
    )


def test_not_a_mapping():
    assert mini.dump(5, "x") == lines(
        "Error in mini.dump()",
        "Argument: value(x) must be a Mapping (got: int)",
    )
