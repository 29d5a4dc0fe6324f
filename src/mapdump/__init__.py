# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Renders nested mappings, including cyclic ones, as indented text for debugging.

    import mapdump
    print(mapdump.dump(value, "value"))

    dumper = mapdump.new()
    dumper.max_depth = 2
    print(dumper.dump(value, "value"))

See describe() for the list of options.
"""

__all__ = [
    "ArgumentTypeError",
    "CallerMisuseError",
    "CustomText",
    "DumpError",
    "DumpOptions",
    "Dumper",
    "INHERIT",
    "Kind",
    "OptionValidationError",
    "describe",
    "dump",
    "get_default",
    "new",
    "reset_defaults",
    "set_default",
]

__version__ = "1.1.3"


from mapdump.errors import (  # noqa
    ArgumentTypeError,
    CallerMisuseError,
    DumpError,
    OptionValidationError,
)
from mapdump.kinds import CustomText, Kind  # noqa
from mapdump.options import (  # noqa
    INHERIT,
    DumpOptions,
    get_default,
    reset_defaults,
    set_default,
)
from mapdump.dumper import Dumper, dump, new  # noqa
from mapdump.common import log  # noqa

log.to_file()


HELP = """mapdump {0}

Options
=======
Every option is an attribute of mapdump.options.defaults, and of every Dumper.
Dumpers copy the defaults when they are created; use set_default() to change
the defaults, or assign to the attributes of a Dumper to change only that one.

indent_unit: str
    Indentation added for every nesting level.
insert_indent: bool
    Whether line breaks in text values are followed by indentation that aligns
    continuation lines with the first one. Turn it off to copy text verbatim.
insert_indent_custom_text: bool or "inherit"
    Same as insert_indent, for the to_text() of containers. "inherit" uses
    the value of insert_indent.
max_depth: int
    Containers with more than max_depth segments in their key path, counting
    the name, show a placeholder instead; 1 expands only the top level.
    -1 means unlimited.
max_items_per_container: int
    Maximum number of entries shown per container. -1 means unlimited.
show_custom_text: bool
    Whether containers implementing CustomText also show their to_text().
show_metadata: bool
    Whether containers list the attributes defined by their class.
ignore_key_kinds: collection of Kind
    Kinds of keys whose entries are not shown, e.g. {{"callable"}}.
ignore_value_kinds: collection of Kind
    Kinds of values whose entries are not shown.
key_filter: key -> bool, or None
    Only entries for which it returns true are shown.
value_filter: value -> bool, or None
    Only entries for which it returns true are shown.
top_level_name: str
    Name used in key paths when dump() is called without a name.
strict_mode: bool
    Raise errors instead of logging them.
on_value_dumped: (key, value, key_text, value_text, path) -> None, or None
    Called for every entry shown.
key_formatter: (key, key_text) -> str, or None
    Replaces the rendered key.
value_formatter: (value, value_text) -> str, or None
    Replaces the rendered value.
comparator: (a, b) -> bool, or None
    Less-than predicate ordering the keys of each container.
logger: object with error(text) and debug(text), or None
    Where errors and debug messages go; mapdump.common.log if None.
verbose_level: int
    0 for no debug logging, 1 for progress, 2 for details.

Functions
=========
dump(value[, name]) -> str or None
    Renders value with the default options.
new([logger[, verbose_level]]) -> Dumper
    Creates a Dumper with its own copy of the default options.
Dumper.dump(value[, name]) -> str or None
    Renders value with the options of this Dumper.
""".format(
    __version__
)


def describe() -> str:
    """Returns the description of all options and functions."""
    return HELP
