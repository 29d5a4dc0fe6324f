# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Classification of values for rendering.

Every value that Dumper encounters falls into exactly one Kind, and each Kind has
a single rendering rule. Independently of its Kind, a value may implement the
CustomText capability, which supplies a textual form of its own.
"""

import abc
import enum
from collections.abc import Mapping
from numbers import Number


class Kind(str, enum.Enum):
    """Kind tags. These are what ignore_key_kinds and ignore_value_kinds contain.

    Since Kind derives from str, plain strings such as "callable" can be used in
    their place.
    """

    CONTAINER = "container"
    TEXT = "text"
    SCALAR = "scalar"
    CALLABLE = "callable"
    OTHER = "other"

    def __str__(self):
        return self.value


class CustomText(abc.ABC):
    """Capability of producing a custom textual form.

    Implement it by deriving from this class, or by registering a class that has
    a to_text() method with CustomText.register().
    """

    @abc.abstractmethod
    def to_text(self) -> str:
        raise NotImplementedError


def kind_of(value: object) -> Kind:
    match value:
        case Mapping():
            return Kind.CONTAINER
        case str():
            return Kind.TEXT
        case None | Number():
            return Kind.SCALAR
        case _ if callable(value):
            return Kind.CALLABLE
        case _:
            return Kind.OTHER


def has_custom_text(value: object) -> bool:
    return isinstance(value, CustomText)


def custom_text(value: CustomText) -> str:
    return str(value.to_text())


def text_form(value: object) -> str | None:
    """Returns the textual form that keys are ordered by, or None if value
    doesn't have one.
    """
    if has_custom_text(value):
        return custom_text(value)
    match kind_of(value):
        case Kind.TEXT:
            return value
        case Kind.SCALAR:
            return str(value)
        case _:
            return None


def generic_text(value: object) -> str:
    """Textual form used for values and keys that have no dedicated rendering."""
    if has_custom_text(value):
        return custom_text(value)
    if kind_of(value) is Kind.SCALAR:
        return str(value)
    try:
        return repr(value)
    except Exception as exc:
        try:
            return f"<repr() error: {exc}>"
        except Exception:
            return "<repr() error>"


# Names that every class gets from the class statement itself.
_CLASS_HOUSEKEEPING = frozenset(
    {
        "__module__",
        "__qualname__",
        "__doc__",
        "__dict__",
        "__weakref__",
        "__slots__",
        "__annotations__",
        "__annotate__",
        "__annotate_func__",
        "__annotations_cache__",
        "__firstlineno__",
        "__static_attributes__",
        "__orig_bases__",
        "__parameters__",
        "__abstractmethods__",
        "_abc_impl",
    }
)


def metadata_keys(value: object) -> list[str]:
    """Names of the behavior record attached to value, i.e. the attributes that
    its class defines on its own. Builtin classes have no such record.
    """
    cls = type(value)
    if cls.__module__ == "builtins":
        return []
    return [name for name in vars(cls) if name not in _CLASS_HOUSEKEEPING]
