# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Leveled logging for mapdump.

The module itself satisfies the logger contract that Dumper expects - it has
error(text) and debug(text) - and is what every Dumper falls back to when no
logger was given to it::

    from mapdump.common import log
    log.info("{0} is {1!r}", name, value)
"""

import functools
import io
import os
import platform
import sys
import threading
import time
import traceback

import mapdump
from mapdump.common import options


LEVELS = ("debug", "info", "warning", "error")
"""Logging levels, lowest to highest importance.
"""

stderr = sys.__stderr__

stderr_levels = {"warning", "error"}
"""What should be logged to stderr.
"""

file_levels = set(LEVELS)
"""What should be logged to file, when it is not None.
"""

file = None
"""If not None, which file to log to.

This can be automatically set by to_file().
"""

timestamp_format = "09.3f"
"""Format spec used for timestamps. Can be changed to dial precision up or down.
"""


_lock = threading.Lock()
_start = time.monotonic()


def timestamp():
    """Seconds elapsed since this module was imported."""
    return time.monotonic() - _start


def write(level, text):
    assert level in LEVELS

    format_string = "{0}+{1:" + timestamp_format + "}: "
    prefix = format_string.format(level[0].upper(), timestamp())

    indent = "\n" + (" " * len(prefix))
    output = indent.join(text.split("\n"))
    output = prefix + output + "\n\n"

    with _lock:
        if level in stderr_levels:
            try:
                stderr.write(output)
            except Exception:
                pass

        if file and level in file_levels:
            try:
                file.write(output)
                file.flush()
            except Exception:
                pass

    return text


def write_format(level, format_string, *args, **kwargs):
    # Plain text is written as is, so that callers passing rendered output
    # don't need to escape braces in it.
    if not args and not kwargs:
        return write(level, str(format_string))
    try:
        text = format_string.format(*args, **kwargs)
    except Exception:
        exception()
        raise
    return write(level, text)


debug = functools.partial(write_format, "debug")
info = functools.partial(write_format, "info")
warning = functools.partial(write_format, "warning")


def error(*args, **kwargs):
    """Logs an error.

    Returns the output wrapped in AssertionError. Thus, the following::

        raise log.error(...)

    has the same effect as::

        log.error(...)
        assert False, ...
    """
    return AssertionError(write_format("error", *args, **kwargs))


def exception(format_string="", *args, **kwargs):
    """Logs an exception with full traceback.

    If format_string is specified, it is formatted with str.format(*args, **kwargs),
    and prepended to the exception traceback on a separate line.

    If exc_info is specified, the exception it describes will be logged. Otherwise,
    sys.exc_info() - i.e. the exception being handled currently - will be logged.

    If level is specified, the exception will be logged as a message of that level.
    The default is "error".

    Returns the exception object, for convenient re-raising::

        try:
            ...
        except Exception:
            raise log.exception()  # log it and re-raise
    """

    level = kwargs.pop("level", "error")
    exc_info = kwargs.pop("exc_info", sys.exc_info())

    if format_string:
        format_string += "\n\n"
    format_string += "{exception}"

    exception = "".join(traceback.format_exception(*exc_info))
    write_format(level, format_string, *args, exception=exception, **kwargs)

    return exc_info[1]


def to_file(filename=None, prefix="mapdump"):
    """Starts logging all levels to a file.

    If filename is None, the file is created in options.log_dir and named after
    prefix and the current process ID. Does nothing if a file is already open, or
    if neither filename nor options.log_dir is set.
    """
    global file
    if file is not None:
        return

    if filename is None:
        if options.log_dir is None:
            return
        filename = "{0}/{1}-{2}.log".format(options.log_dir, prefix, os.getpid())

    file = io.open(filename, "w", encoding="utf-8")

    info(
        "{0} {1}\n{2} {3} ({4}-bit)\nmapdump {5}",
        platform.platform(),
        platform.machine(),
        platform.python_implementation(),
        platform.python_version(),
        64 if sys.maxsize > 2 ** 32 else 32,
        mapdump.__version__,
    )


def close_file():
    global file
    with _lock:
        if file is not None:
            file.close()
            file = None
