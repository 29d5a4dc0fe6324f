# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import io


class Buffer:
    """Append-only text accumulator."""

    output: io.StringIO

    def __init__(self):
        self.output = io.StringIO()

    def __str__(self) -> str:
        return self.render()

    def append(self, text: str) -> "Buffer":
        self.output.write(str(text))
        return self

    def append_line(self, text: str = "") -> "Buffer":
        self.output.write(str(text))
        self.output.write("\n")
        return self

    def render(self) -> str:
        return self.output.getvalue()
