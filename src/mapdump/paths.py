# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Key paths: the rendered key texts leading from the root container to a node."""

from collections.abc import Sequence


type Path = list[str]


def extend(path: Sequence[str], key_text: str) -> Path:
    """Returns a copy of path with key_text appended; path itself is unchanged."""
    return [*path, key_text]


def is_prefix(prefix: Sequence[str], path: Sequence[str]) -> bool:
    """Whether path starts with all of prefix, i.e. whether the node at prefix is
    the node at path or one of its ancestors.
    """
    if len(prefix) > len(path):
        return False
    return all(a == b for a, b in zip(prefix, path))


def join(path: Sequence[str]) -> str:
    return ".".join(path)
