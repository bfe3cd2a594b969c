"""Exceptions raised while parsing a dependency tree."""

from __future__ import annotations


class DependencyTreeError(Exception):
    """Base class for dependency tree parse failures."""


class MalformedLineError(DependencyTreeError, ValueError):
    """A coordinate line does not split into 4, 5 or 6 colon-separated parts."""

    def __init__(self, line: str, part_count: int):
        self.line = line
        self.part_count = part_count
        super().__init__(
            f"Format of the dependency line '{line}' is incorrect. "
            f"Found {part_count} instead of 4, 5 or 6"
        )


class StackUnderflowError(DependencyTreeError, ValueError):
    """A level decrease asked to close more parent frames than are open."""

    def __init__(self, line_number: int, requested: int, available: int):
        self.line_number = line_number
        self.requested = requested
        self.available = available
        super().__init__(
            f"Line {line_number} closes {requested} level(s) "
            f"but only {available} parent level(s) are open"
        )


class LevelJumpError(DependencyTreeError, ValueError):
    """Depth increased by more than one level on a single line (strict mode)."""

    def __init__(self, line_number: int, jump: int):
        self.line_number = line_number
        self.jump = jump
        super().__init__(
            f"Line {line_number} descends {jump} levels at once; "
            f"dependency trees descend one level per line"
        )
