"""Level decoder for plain whitespace-indented trees."""

from __future__ import annotations

from dependency_tree.decoder.base import BaseLevelDecoder


class IndentLevelDecoder(BaseLevelDecoder):
    """Each ``width`` leading spaces are one level."""

    name = "indent"

    def __init__(self, width: int = 2):
        if width < 1:
            raise ValueError(f"Indent width must be positive, got {width}")
        self.width = width

    def decode_level(self, line: str) -> int:
        expanded = line.expandtabs(self.width)
        return self.count_prefix(expanded, " ") // self.width
