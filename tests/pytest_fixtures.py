# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import io

import pytest

import mapdump
from mapdump import options
from mapdump.common import log


class RecordingLogger:
    """Logger that keeps every message instead of printing it."""

    def __init__(self):
        self.errors = []
        self.debugs = []

    def error(self, text):
        self.errors.append(text)

    def debug(self, text):
        self.debugs.append(text)


@pytest.fixture(autouse=True)
def pristine_defaults():
    options.reset_defaults()
    yield
    options.reset_defaults()


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def dumper(logger):
    return mapdump.new(logger)


@pytest.fixture
def log_stderr(monkeypatch):
    """Captures what mapdump.common.log writes to stderr."""
    stream = io.StringIO()
    monkeypatch.setattr(log, "stderr", stream)
    return stream


def lines(*items):
    return "\n".join(items)
