# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import os.path
import runpy

import mapdump
from mapdump.common import log


SETUP_PY = os.path.join(os.path.dirname(os.path.dirname(__file__)), "setup.py")


def test_version_is_read_without_import(monkeypatch):
    monkeypatch.setattr(log, "file", None)
    setup = runpy.run_path(SETUP_PY, run_name="setup")
    assert setup["get_version"]() == mapdump.__version__
    assert log.file is None
