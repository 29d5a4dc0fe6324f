#!/usr/bin/env python

# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import os
import os.path
import re
import setuptools


ROOT = os.path.dirname(os.path.abspath(__file__))


def get_version():
    # Importing mapdump would open its log file when MAPDUMP_LOG_DIR is set.
    with open(os.path.join(ROOT, "src", "mapdump", "__init__.py"), "r") as fh:
        match = re.search(r'^__version__ = "([^"]+)"', fh.read(), re.MULTILINE)
    return match.group(1)


with open(os.path.join(ROOT, "DESCRIPTION.md"), "r") as fh:
    long_description = fh.read()


if __name__ == "__main__":
    setuptools.setup(
        name="mapdump",
        version=get_version(),
        description="Renders nested, possibly cyclic mappings as indented text for debugging",  # noqa
        long_description=long_description,
        long_description_content_type="text/markdown",
        license="MIT",
        python_requires=">=3.12",
        classifiers=[
            "Development Status :: 5 - Production/Stable",
            "Programming Language :: Python :: 3.12",
            "Programming Language :: Python :: 3.13",
            "Topic :: Software Development :: Debuggers",
            "Operating System :: OS Independent",
            "License :: OSI Approved :: MIT License",
        ],
        package_dir={"": "src"},
        packages=setuptools.find_packages(where="src", include=["mapdump*"]),
        extras_require={
            "tests": ["pytest", "pytest-timeout", "setuptools"],
        },
        entry_points={
            "console_scripts": ["mapdump = mapdump.cli:main"],
        },
    )
