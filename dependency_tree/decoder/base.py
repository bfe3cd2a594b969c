"""Abstract base level decoder."""

from __future__ import annotations

import abc


class BaseLevelDecoder(abc.ABC):
    """Base class for rules that turn a line's leading text into a tree depth."""

    name: str

    @abc.abstractmethod
    def decode_level(self, line: str) -> int:
        """Return the 0-based depth of a single tree line."""

    @staticmethod
    def count_prefix(line: str, charset: str) -> int:
        """Count leading characters of ``line`` that belong to ``charset``."""
        count = 0
        for ch in line:
            if ch not in charset:
                break
            count += 1
        return count
