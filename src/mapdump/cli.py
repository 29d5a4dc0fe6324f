# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import io
import json
import sys

import mapdump
from mapdump.common import log
from mapdump.common import options as log_options
from mapdump.errors import DumpError


TARGET = "<filename> | -"

HELP = """mapdump {0}
Renders a JSON document as indented text.

Usage: mapdump [--name <name>] [--indent <width>]
               [--max-depth <depth>] [--max-items <count>]
               [--no-insert-indent] [--strict] [--verbose <level>]
               [--log-dir <path>] [--log-stderr]
               {1}

Use - as the filename to read the document from stdin.
""".format(
    mapdump.__version__, TARGET
)


class Options:
    """Values of the command line switches. None means "not specified", in which
    case the default option of the Dumper is used.
    """

    def __init__(self):
        self.target = None
        self.name = None
        self.indent = None
        self.max_depth = None
        self.max_items = None
        self.insert_indent = None
        self.strict = None
        self.verbose = None


def in_range(parser, start, stop):
    def parse(s):
        n = parser(s)
        if start is not None and n < start:
            raise ValueError("must be >= {0}".format(start))
        if stop is not None and n >= stop:
            raise ValueError("must be < {0}".format(stop))
        return n

    return parse


count = in_range(int, -1, None)

width = in_range(int, 0, None)


def print_help_and_exit(switch, it, options):
    print(HELP, file=sys.stderr)
    sys.exit(0)


def print_version_and_exit(switch, it, options):
    print(mapdump.__version__)
    sys.exit(0)


def set_arg(varname, parser=(lambda x: x)):
    def do(arg, it, options):
        value = parser(next(it))
        setattr(options, varname, value)

    return do


def set_const(varname, value):
    def do(arg, it, options):
        setattr(options, varname, value)

    return do


def set_log_dir():
    def do(arg, it, options):
        log_options.log_dir = next(it)

    return do


def set_log_stderr():
    def do(arg, it, options):
        log.stderr_levels |= set(log.LEVELS)

    return do


def set_target():
    def do(arg, it, options):
        options.target = arg

    return do


# fmt: off
switches = [
    # Switch                    Placeholder         Action                                  Required
    # ======                    ===========         ======                                  ========
    (("-?", "-h", "--help"),    None,               print_help_and_exit,                    False),
    (("-V", "--version"),       None,               print_version_and_exit,                 False),
    ("--name",                  "<name>",           set_arg("name"),                        False),
    ("--indent",                "<width>",          set_arg("indent", width),               False),
    ("--max-depth",             "<depth>",          set_arg("max_depth", count),            False),
    ("--max-items",             "<count>",          set_arg("max_items", count),            False),
    ("--no-insert-indent",      None,               set_const("insert_indent", False),      False),
    ("--strict",                None,               set_const("strict", True),              False),
    ("--verbose",               "<level>",          set_arg("verbose", width),              False),
    ("--log-dir",               "<path>",           set_log_dir(),                          False),
    ("--log-stderr",            None,               set_log_stderr(),                       False),

    # The "" entry corresponds to the positional argument, i.e. the one not preceded
    # by any switch name.
    ("",                        "<filename>",       set_target(),                           True),
]
# fmt: on


def parse(args, options):
    seen = set()
    it = iter(args)

    while True:
        try:
            arg = next(it)
        except StopIteration:
            raise ValueError("missing target: " + TARGET)

        switch = arg if arg.startswith("-") and arg != "-" else ""
        for i, (sw, placeholder, action, _) in enumerate(switches):
            if not isinstance(sw, tuple):
                sw = (sw,)
            if switch in sw:
                break
        else:
            raise ValueError("unrecognized switch " + switch)

        if i in seen:
            raise ValueError("duplicate switch " + switch)
        else:
            seen.add(i)

        try:
            action(arg, it, options)
        except StopIteration:
            assert placeholder is not None
            raise ValueError("{0}: missing {1}".format(switch, placeholder))
        except Exception as exc:
            raise ValueError("invalid {0} {1}: {2}".format(switch, placeholder, exc))

        if options.target is not None:
            break

    for i, (sw, placeholder, _, required) in enumerate(switches):
        if not required or i in seen:
            continue
        if isinstance(sw, tuple):
            sw = sw[0]
        message = "missing required {0}".format(sw)
        if placeholder is not None:
            message += " " + placeholder
        raise ValueError(message)

    rest = list(it)
    if rest:
        raise ValueError("unexpected arguments after target: " + " ".join(rest))

    return options


def make_dumper(options):
    dumper = mapdump.new()
    if options.indent is not None:
        dumper.indent_unit = " " * options.indent
    if options.max_depth is not None:
        dumper.max_depth = options.max_depth
    if options.max_items is not None:
        dumper.max_items_per_container = options.max_items
    if options.insert_indent is not None:
        dumper.insert_indent = options.insert_indent
    if options.strict is not None:
        dumper.strict_mode = options.strict
    if options.verbose is not None:
        dumper.verbose_level = options.verbose
    return dumper


def load(target, stdin=None):
    if target == "-":
        return json.load(stdin if stdin is not None else sys.stdin)
    with io.open(target, "r", encoding="utf-8") as f:
        return json.load(f)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    options = Options()
    try:
        parse(argv, options)
    except Exception as ex:
        print(HELP + "\nError: " + str(ex), file=sys.stderr)
        return 2

    log.to_file(prefix="mapdump.cli")
    log.info("mapdump.cli arguments: {0!r}", argv)

    try:
        document = load(options.target)
    except (OSError, ValueError) as ex:
        log.exception("Failed to load {0!r}", options.target, level="info")
        print("Error: cannot load {0}: {1}".format(options.target, ex), file=sys.stderr)
        return 1

    dumper = make_dumper(options)
    try:
        text = dumper.dump(document, options.name)
    except DumpError as ex:
        print(str(ex), file=sys.stderr)
        return 1

    if text is None:
        return 1
    print(text)
    return 0
