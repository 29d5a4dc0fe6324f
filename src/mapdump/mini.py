# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""A minimal variant of Dumper without options, for quick use::

    from mapdump import mini
    print(mini.dump(value, "value"))

Entries are listed in iteration order, and repeated containers are reported
without telling cycles from shared references. Errors are returned as text rather
than logged or raised.
"""

from mapdump import paths
from mapdump.kinds import Kind, custom_text, generic_text, has_custom_text, kind_of
from mapdump.options import kind_name


INDENT_UNIT = "  "

TOP_LEVEL_NAME = "<top_level>"


def dump(value, name=None) -> str:
    if kind_of(value) is not Kind.CONTAINER:
        return "\n".join(
            [
                "Error in mini.dump()",
                "Argument: value({0}) must be a Mapping (got: {1})".format(
                    name, kind_name(value)
                ),
            ]
        )

    if name is None or name == "":
        name = TOP_LEVEL_NAME
    name = str(name)

    lines = [name + " = {"]
    lines += _inner_dump(value, [name], INDENT_UNIT, {})
    lines.append("}")
    return "\n".join(lines)


def _inner_dump(container, path, indent, visited):
    seen = visited.get(id(container))
    if seen is not None:
        return [indent + "* already shown -> " + paths.join(seen[1])]
    visited[id(container)] = (container, path)

    lines = []
    for key, value in container.items():
        key_text = '"' + key + '"' if isinstance(key, str) else generic_text(key)
        match kind_of(value):
            case Kind.CONTAINER:
                lines.append(indent + key_text + " = {")
                lines += _inner_dump(
                    value,
                    paths.extend(path, key_text),
                    indent + INDENT_UNIT,
                    visited,
                )
                lines.append(indent + "},")
            case Kind.TEXT:
                lines.append(indent + key_text + ' = "' + value + '",')
            case _:
                lines.append(indent + key_text + " = " + generic_text(value) + ",")

    if has_custom_text(container):
        lines.append(indent + '<to_text() = "' + custom_text(container) + '">')

    return lines
