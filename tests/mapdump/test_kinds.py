# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import collections
import fractions
import types

import pytest

from mapdump.kinds import (
    CustomText,
    Kind,
    generic_text,
    has_custom_text,
    kind_of,
    metadata_keys,
    text_form,
)


class Named(CustomText):
    def to_text(self):
        return "named"


class Plugin(dict):
    version = 2

    def load(self):
        pass


@pytest.mark.parametrize(
    "value, kind",
    [
        ({}, Kind.CONTAINER),
        (collections.OrderedDict(), Kind.CONTAINER),
        (types.MappingProxyType({}), Kind.CONTAINER),
        (Plugin(), Kind.CONTAINER),
        ("", Kind.TEXT),
        ("text", Kind.TEXT),
        (None, Kind.SCALAR),
        (True, Kind.SCALAR),
        (0, Kind.SCALAR),
        (1.5, Kind.SCALAR),
        (2j, Kind.SCALAR),
        (fractions.Fraction(1, 3), Kind.SCALAR),
        (len, Kind.CALLABLE),
        (lambda: None, Kind.CALLABLE),
        (Named, Kind.CALLABLE),
        ([], Kind.OTHER),
        ((1, 2), Kind.OTHER),
        (object(), Kind.OTHER),
        (Named(), Kind.OTHER),
    ],
)
def test_kind_of(value, kind):
    assert kind_of(value) is kind


def test_kind_is_its_tag():
    assert Kind.CALLABLE == "callable"
    assert str(Kind.OTHER) == "other"


def test_custom_text():
    assert has_custom_text(Named())
    assert not has_custom_text(Named)
    assert not has_custom_text("named")


def test_registered_custom_text():
    class Legacy:
        def to_text(self):
            return "legacy"

    CustomText.register(Legacy)
    assert has_custom_text(Legacy())
    assert text_form(Legacy()) == "legacy"


@pytest.mark.parametrize(
    "value, text",
    [
        ("abc", "abc"),
        (12, "12"),
        (None, "None"),
        (False, "False"),
        (Named(), "named"),
        (object(), None),
        ({}, None),
        (len, None),
    ],
)
def test_text_form(value, text):
    assert text_form(value) == text


def test_generic_text():
    assert generic_text(7) == "7"
    assert generic_text("a") == "'a'"
    assert generic_text([1]) == "[1]"
    assert generic_text(Named()) == "named"


def test_generic_text_of_broken_repr():
    class Broken:
        def __repr__(self):
            raise ValueError("boom")

    assert generic_text(Broken()) == "<repr() error: boom>"


def test_metadata_keys():
    assert sorted(metadata_keys(Plugin())) == ["load", "version"]


@pytest.mark.parametrize("value", [{}, types.MappingProxyType({})])
def test_builtin_containers_have_no_metadata(value):
    assert metadata_keys(value) == []
