# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Recursive rendering of container graphs.

A rendered graph looks like this::

    my_map = {
      123 = 123,
      "123" = 123,
      "inner" = {
        "func" = <function f at 0x7f0c2e1b4e00>,
        "multi_line" = "line 1
                        line 2",
        "self" = {
          * already shown (cyclical reference) -> my_map."inner"
        },
        "tail" = {
        },
      },
      "shared" = {
        * already shown (shared reference) -> my_map."inner"."tail"
      },
    }

Keys that are strings are quoted, which distinguishes them from other keys with
the same textual form.
"""

from collections.abc import Mapping

from mapdump import options, paths
from mapdump.common import log
from mapdump.common.buffer import Buffer
from mapdump.comparator import sort_keys
from mapdump.errors import ArgumentTypeError, CallerMisuseError, OptionValidationError
from mapdump.kinds import (
    Kind,
    custom_text,
    generic_text,
    has_custom_text,
    kind_of,
    metadata_keys,
)
from mapdump.options import DumpOptions


ERROR_HEADER = "Error in Dumper.dump()"

DEPTH_LIMIT = "( depth limit reached )"

AND_MORE = "=== AND MORE ==="

CYCLICAL_REFERENCE = "cyclical reference"

SHARED_REFERENCE = "shared reference"

CUSTOM_TEXT_PREFIX = '<to_text()> = "'

METADATA_HEADER = "<metadata> = {"


def _describe(value):
    return "{0} at {1:#x}".format(type(value).__name__, id(value))


def _reindent(text: str, indent: str) -> str:
    return text.replace("\n", "\n" + indent)


def _is_ignored(kinds, kind: Kind) -> bool:
    if not kinds:
        return False
    if isinstance(kinds, Mapping):
        return bool(kinds.get(kind) or kinds.get(kind.value))
    return kind in kinds or kind.value in kinds


class Dumper(DumpOptions):
    """Renders containers as text. All options of DumpOptions are attributes of
    the Dumper, and can be changed freely between calls to dump().
    """

    def __init__(self, logger=None, verbose_level=None):
        options.copy_options(options.defaults, self)
        if logger is not None:
            self.logger = logger
        if verbose_level is not None:
            self.verbose_level = verbose_level

    def dump(self, value=None, name=None):
        """Renders value, which must be a Mapping, and everything reachable from it.

        name is used for the first line of the output and as the first segment of
        the paths in repeat lines. Returns the rendered text, or None if options or
        arguments are invalid and strict_mode is off - in that case, the problem has
        already been reported via logger.error().
        """
        if not callable(getattr(self, "dump", None)) or not callable(
            getattr(self, "_inner_dump", None)
        ):
            raise CallerMisuseError(
                ERROR_HEADER
                + "\ndump() must be called on a Dumper instance (got: {0})".format(
                    options.kind_name(self)
                )
            )

        if self.logger is None:
            self.logger = log
        for method in ("error", "debug"):
            if not callable(getattr(self.logger, method, None)):
                raise OptionValidationError(
                    ERROR_HEADER
                    + "\nOption: logger must have callable {0}() (got: {1})".format(
                        method, options.kind_name(self.logger)
                    )
                )

        # Debug logging depends on verbose_level, so it is checked before anything
        # else is, and its failure is reported without debug logging.
        problem = options.check_option(self, "verbose_level")
        if problem is not None:
            return self._fail(OptionValidationError, [ERROR_HEADER, problem], False)

        self._log_debug(
            1, "dump() called -> value: {0}, name: {1!r}".format(_describe(value), name)
        )

        problems = options.check_options(self)
        if problems:
            return self._fail(OptionValidationError, [ERROR_HEADER] + problems)

        if kind_of(value) is not Kind.CONTAINER:
            name_part = "({0})".format(name) if name is not None and name != "" else ""
            return self._fail(
                ArgumentTypeError,
                [
                    ERROR_HEADER,
                    "Argument: value{0} must be a Mapping (got: {1})".format(
                        name_part, options.kind_name(value)
                    ),
                ],
            )

        buffer = Buffer()
        if name is not None and name != "":
            name = str(name)
            buffer.append_line(name + " = {")
        else:
            buffer.append_line("{")
            name = str(self.top_level_name)

        self._inner_dump(buffer, value, [name], self.indent_unit, {})
        buffer.append("}")

        self._log_debug(1, "dump() finished.")
        return buffer.render()

    def _inner_dump(self, buffer, container, path, indent, visited):
        """Renders the entries of container into buffer, one per line, followed by
        its custom text and metadata if enabled.

        path is the list of rendered keys leading to container from the root, and
        visited maps id() of every container rendered so far to that container and
        its path.
        """
        self._log_debug(2, "_inner_dump() called -> path: " + paths.join(path))

        if self.max_depth >= 0 and len(path) > self.max_depth:
            buffer.append_line(indent + DEPTH_LIMIT)
            self._log_debug(
                1, "Depth limit reached, not expanding -> path: " + paths.join(path)
            )
            return

        seen = visited.get(id(container))
        if seen is not None:
            _, seen_path = seen
            if paths.is_prefix(seen_path, path):
                relation = CYCLICAL_REFERENCE
            else:
                relation = SHARED_REFERENCE
            buffer.append_line(
                "{0}* already shown ({1}) -> {2}".format(
                    indent, relation, paths.join(seen_path)
                )
            )
            self._log_debug(
                2,
                "Found {0}, not expanding -> first seen at: {1}, now at: {2}".format(
                    relation, paths.join(seen_path), paths.join(path)
                ),
            )
            return

        # Must be marked before descending, so that a container that contains
        # itself is detected on the very next call.
        visited[id(container)] = (container, path)

        keys = sort_keys(container.keys(), self.comparator)

        count = 0
        for key in keys:
            if self.max_items_per_container >= 0 and count >= self.max_items_per_container:
                buffer.append_line(indent + AND_MORE)
                self._log_debug(
                    1, "Item limit reached, skipping the rest -> path: " + paths.join(path)
                )
                break

            value = container[key]
            if not self._accepts(key, value):
                continue
            count += 1
            self._dump_entry(buffer, key, value, path, indent, visited)

        if self.show_custom_text and has_custom_text(container):
            text = custom_text(container)
            insert_indent = self.insert_indent_custom_text
            if insert_indent == options.INHERIT:
                insert_indent = self.insert_indent
            if insert_indent:
                text = _reindent(text, indent + " " * len(CUSTOM_TEXT_PREFIX))
            buffer.append_line(indent + CUSTOM_TEXT_PREFIX + text + '"')

        if self.show_metadata:
            names = metadata_keys(container)
            if names:
                buffer.append_line(indent + METADATA_HEADER)
                for name in sort_keys(names, self.comparator):
                    buffer.append_line(indent + self.indent_unit + str(name) + " : present")
                buffer.append_line(indent + "}")

        self._log_debug(2, "_inner_dump() finished -> path: " + paths.join(path))

    def _accepts(self, key, value):
        if _is_ignored(self.ignore_key_kinds, kind_of(key)):
            self._log_debug(
                1,
                "Skipped by ignore_key_kinds -> key: {0}, kind: {1}".format(
                    generic_text(key), kind_of(key)
                ),
            )
            return False
        if _is_ignored(self.ignore_value_kinds, kind_of(value)):
            self._log_debug(
                1,
                "Skipped by ignore_value_kinds -> value: {0}, kind: {1}".format(
                    _describe(value), kind_of(value)
                ),
            )
            return False
        if self.key_filter is not None and not self.key_filter(key):
            self._log_debug(1, "Skipped by key_filter -> key: " + generic_text(key))
            return False
        if self.value_filter is not None and not self.value_filter(value):
            self._log_debug(1, "Skipped by value_filter -> value: " + _describe(value))
            return False
        return True

    def _dump_entry(self, buffer, key, value, path, indent, visited):
        if isinstance(key, str):
            key_text = '"' + key + '"'
        else:
            key_text = generic_text(key)

        kind = kind_of(value)
        if kind is Kind.CONTAINER:
            key_text = self._format_key(key, key_text)
            key_path = paths.extend(path, key_text)

            nested = Buffer()
            nested.append_line("{")
            self._inner_dump(
                nested, value, key_path, indent + self.indent_unit, visited
            )
            nested.append(indent + "}")

            value_text = self._format_value(value, nested.render())
            self._call_hook(key, value, key_text, value_text, key_path)
            buffer.append_line(indent + key_text + " = " + value_text + ",")

        elif kind is Kind.TEXT or has_custom_text(value):
            if kind is Kind.TEXT:
                value_text = value
            else:
                value_text = custom_text(value)
                key_text = "to_text([" + key_text + "])"
            key_text = self._format_key(key, key_text)
            prefix = key_text + " = "

            if self.insert_indent:
                # Continuation lines start right after the opening quote.
                value_text = _reindent(value_text, indent + " " * (len(prefix) + 1))
            value_text = self._format_value(value, '"' + value_text + '"')

            self._call_hook(
                key, value, key_text, value_text, paths.extend(path, key_text)
            )
            buffer.append_line(indent + prefix + value_text + ",")

        else:
            key_text = self._format_key(key, key_text)
            value_text = self._format_value(value, generic_text(value))
            self._call_hook(
                key, value, key_text, value_text, paths.extend(path, key_text)
            )
            buffer.append_line(indent + key_text + " = " + value_text + ",")

    def _format(self, formatter, what, data, text):
        if formatter is None:
            return text
        formatted = str(formatter(data, text))
        if formatted != text:
            self._log_debug(
                2,
                "{0}_formatter changed the {0} -> {1} => {2}".format(
                    what, text, formatted
                ),
            )
        return formatted

    def _format_key(self, key, key_text):
        return self._format(self.key_formatter, "key", key, key_text)

    def _format_value(self, value, value_text):
        return self._format(self.value_formatter, "value", value, value_text)

    def _call_hook(self, key, value, key_text, value_text, path):
        if self.on_value_dumped is not None:
            self.on_value_dumped(key, value, key_text, value_text, path)

    def _log_debug(self, level, text):
        if self.verbose_level >= level:
            self.logger.debug(text)

    def _fail(self, error_type, lines, log_debug=True):
        message = "\n".join(lines)
        if self.strict_mode:
            if log_debug:
                self._log_debug(1, "dump() failed; raising since strict_mode is on.")
            raise error_type(message)
        self.logger.error(message)
        if log_debug:
            self._log_debug(1, "dump() failed -> returning None.")
        return None


def new(logger=None, verbose_level=None) -> Dumper:
    """Creates a Dumper with the current default options, optionally overriding
    logger and verbose_level.
    """
    return Dumper(logger, verbose_level)


def dump(value, name=None):
    """Renders value using the current default options."""
    return Dumper().dump(value, name)
