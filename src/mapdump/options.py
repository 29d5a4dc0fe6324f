# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Rendering options, their validation, and the process-wide defaults.

Every Dumper carries its own copy of all options as plain attributes. The copy
is taken from the defaults object when the Dumper is created, so changing a
default only affects Dumpers created afterwards::

    mapdump.options.set_default("max_depth", 3)
    mapdump.new().dump(value)  # uses max_depth=3
"""

import copy
import dataclasses
from collections.abc import Callable, Collection
from typing import Any

from mapdump.comparator import Comparator, less_than


INHERIT = "inherit"
"""Value of insert_indent_custom_text that makes it follow insert_indent."""


@dataclasses.dataclass(eq=False)
class DumpOptions:
    indent_unit: str = "  "
    """Indentation added for every nesting level."""

    insert_indent: bool | None = True
    """Whether line breaks in text values are followed by indentation that aligns
    continuation lines with the first one."""

    insert_indent_custom_text: bool | None | str = INHERIT
    """Same as insert_indent, but for the custom text of the container itself.
    INHERIT uses the value of insert_indent."""

    max_depth: int = -1
    """Containers whose key path (the name followed by the keys leading to them)
    is longer than max_depth are not expanded, so 0 expands nothing and 1 only
    the top level container. -1 means unlimited."""

    max_items_per_container: int = -1
    """Maximum number of entries rendered per container. -1 means unlimited."""

    show_custom_text: bool | None = True
    """Whether containers implementing CustomText also show their to_text()."""

    show_metadata: bool | None = False
    """Whether containers list the names of their behavior record (the attributes
    defined by their class)."""

    ignore_key_kinds: Collection | None = dataclasses.field(default_factory=set)
    """Kind tags of keys whose entries are skipped. Can also be a mapping from kind
    tag to a flag, in which case only kinds with a truthy flag are skipped."""

    ignore_value_kinds: Collection | None = dataclasses.field(default_factory=set)
    """Kind tags of values whose entries are skipped; same format as above."""

    key_filter: Callable[[object], bool] | None = None
    """If not None, only entries for which key_filter(key) is truthy are shown."""

    value_filter: Callable[[object], bool] | None = None
    """If not None, only entries for which value_filter(value) is truthy are shown."""

    top_level_name: str = "<top_level>"
    """Name used in key paths when dump() is called without a name."""

    strict_mode: bool | None = False
    """If true, errors are raised instead of being logged."""

    on_value_dumped: Callable[..., Any] | None = None
    """If not None, invoked for every rendered entry as
    on_value_dumped(key, value, key_text, value_text, path). The return value is
    ignored."""

    key_formatter: Callable[[object, str], object] | None = None
    """If not None, key_formatter(key, key_text) replaces the rendered key."""

    value_formatter: Callable[[object, str], object] | None = None
    """If not None, value_formatter(value, value_text) replaces the rendered value."""

    comparator: Comparator | None = less_than
    """Less-than predicate used to order the keys of every container. If None,
    keys are shown in iteration order."""

    logger: Any = None
    """Object with error(text) and debug(text) methods. If None, mapdump.common.log
    is used."""

    verbose_level: int = 0
    """0 disables debug logging, 1 logs the progress of dump(), 2 and above also
    logs details of every container."""


OPTION_NAMES = tuple(f.name for f in dataclasses.fields(DumpOptions))


def copy_options(source: DumpOptions, target: object) -> None:
    """Copies every option from source to target, field by field. Mutable
    collections are copied as well, so that source and target don't share them.
    """
    for name in OPTION_NAMES:
        value = getattr(source, name)
        if isinstance(value, (set, list, dict)):
            value = copy.copy(value)
        setattr(target, name, value)


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _is_optional_bool(value):
    return value is None or isinstance(value, bool)


def _is_optional_bool_or_inherit(value):
    return _is_optional_bool(value) or (isinstance(value, str) and value == INHERIT)


def _is_optional_kinds(value):
    return value is None or (
        isinstance(value, Collection) and not isinstance(value, (str, bytes))
    )


def _is_optional_callable(value):
    return value is None or callable(value)


# fmt: off
checks = {
    # Option                        Expected                            Test
    # ======                        ========                            ====
    "indent_unit":                  ("str",                             lambda v: isinstance(v, str)),
    "insert_indent":                ("bool or None",                    _is_optional_bool),
    "insert_indent_custom_text":    ('bool, None or "inherit"',         _is_optional_bool_or_inherit),
    "max_depth":                    ("int",                             _is_int),
    "max_items_per_container":      ("int",                             _is_int),
    "show_custom_text":             ("bool or None",                    _is_optional_bool),
    "show_metadata":                ("bool or None",                    _is_optional_bool),
    "ignore_key_kinds":             ("collection of kinds or None",     _is_optional_kinds),
    "ignore_value_kinds":           ("collection of kinds or None",     _is_optional_kinds),
    "key_filter":                   ("callable or None",                _is_optional_callable),
    "value_filter":                 ("callable or None",                _is_optional_callable),
    "strict_mode":                  ("bool or None",                    _is_optional_bool),
    "top_level_name":               ("str",                             lambda v: isinstance(v, str)),
    "on_value_dumped":              ("callable or None",                _is_optional_callable),
    "key_formatter":                ("callable or None",                _is_optional_callable),
    "value_formatter":              ("callable or None",                _is_optional_callable),
    "comparator":                   ("callable or None",                _is_optional_callable),
    "verbose_level":                ("int",                             _is_int),
}
# fmt: on


def kind_name(value: object) -> str:
    return "None" if value is None else type(value).__name__


def check_option(options: object, name: str) -> str | None:
    """Returns the description of the problem with the named option, or None if
    its value is acceptable.
    """
    expected, test = checks[name]
    value = getattr(options, name, None)
    if test(value):
        return None
    return "Option: {0} must be {1} (got: {2})".format(name, expected, kind_name(value))


def check_options(options: object) -> list[str]:
    """Checks every option except verbose_level and logger, and returns the list
    of problems found, in declaration order.
    """
    problems = []
    for name in checks:
        if name == "verbose_level":
            continue
        problem = check_option(options, name)
        if problem is not None:
            problems.append(problem)
    return problems


defaults = DumpOptions()
"""The process-wide default options. Dumpers snapshot these when created."""


def _known(name: str) -> str:
    if name not in OPTION_NAMES:
        raise AttributeError("Unknown option: {0}".format(name))
    return name


def get_default(name: str) -> object:
    return getattr(defaults, _known(name))


def set_default(name: str, value: object) -> None:
    setattr(defaults, _known(name), value)


def reset_defaults() -> None:
    """Restores the factory defaults."""
    copy_options(DumpOptions(), defaults)
