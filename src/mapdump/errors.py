# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.


class DumpError(Exception):
    """Base class for errors reported by Dumper.dump().

    Whether these are raised or only logged depends on the strict_mode option of
    the Dumper that reports them, except for CallerMisuseError, which is always
    raised.
    """


class ArgumentTypeError(DumpError, TypeError):
    """The value passed to dump() is not a container."""


class OptionValidationError(DumpError, ValueError):
    """One or more options of the Dumper have a value of the wrong kind.

    The message lists every offending option, one per line.
    """


class CallerMisuseError(DumpError):
    """dump() was invoked without a properly bound Dumper - for example, as
    Dumper.dump(value) rather than Dumper().dump(value).

    This is a programming error rather than a data condition, so it is raised
    regardless of strict_mode.
    """
