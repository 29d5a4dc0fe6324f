# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""mapdump tests
"""

import pytest

# This is only imported to ensure that the module is actually installed and the
# timeout setting in pytest.ini is active, since otherwise a regression in cycle
# detection would make tests hang indefinitely.
import pytest_timeout  # noqa

# We want pytest to rewrite asserts (for better error messages) in the test helpers.
pytest.register_assert_rewrite("tests.pytest_fixtures")
