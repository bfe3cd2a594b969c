"""Dependency tree parser: rebuilds flattened and leveled dependencies from tree text."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from types import MappingProxyType

from dependency_tree.decoder import BaseLevelDecoder, MavenLevelDecoder, decode_line
from dependency_tree.errors import LevelJumpError, StackUnderflowError
from dependency_tree.models import ComponentData, ParseResult

logger = logging.getLogger(__name__)


@dataclass
class _ParentFrame:
    """An open ancestor whose children are still being collected."""
    owner_name: str
    children: list[str] = field(default_factory=list)


class DependencyTreeParser:
    """Parse dependency tree lines into a ``ParseResult``.

    The parser keeps no state between calls, so one instance can be shared.
    """

    def __init__(
        self,
        level_decoder: BaseLevelDecoder | None = None,
        strict_descent: bool = False,
    ):
        self.level_decoder = level_decoder or MavenLevelDecoder()
        self.strict_descent = strict_descent

    def parse(self, lines: Iterable[str]) -> ParseResult:
        flattened: dict[str, set[str]] = {}
        leveled: list[set[ComponentData]] = []

        previous_level = 0
        previous_name: str | None = None
        stack: list[_ParentFrame] = []

        for i, line in enumerate(lines):
            level, component = decode_line(line, self.level_decoder)
            self._record_level(leveled, level, component)

            if i == 0:
                # First child of the implicit root; nothing to attach it to yet.
                previous_name = component.name
                continue

            jump = level - previous_level
            if jump < 0:
                if -jump > len(stack):
                    raise StackUnderflowError(i + 1, -jump, len(stack))
                for _ in range(-jump):
                    self._flush(stack.pop(), flattened)
            elif jump > 0:
                if jump > 1:
                    if self.strict_descent:
                        raise LevelJumpError(i + 1, jump)
                    logger.warning(
                        "Line %d descends %d levels at once; treating it as one level. "
                        "Maven trees deeper than three levels decode this way "
                        "under the two-characters-per-level rule",
                        i + 1, jump,
                    )
                stack.append(_ParentFrame(owner_name=previous_name))

            # Every open ancestor depends on this component, not only the direct parent.
            for frame in stack:
                frame.children.append(component.name)

            previous_level = level
            previous_name = component.name

        while stack:
            self._flush(stack.pop(), flattened)

        logger.debug(
            "Parsed %d level(s), %d component(s) with dependencies",
            len(leveled), len(flattened),
        )
        return ParseResult(
            flattened_dependencies=MappingProxyType(
                {name: frozenset(deps) for name, deps in flattened.items()}
            ),
            leveled_dependencies=tuple(frozenset(level_set) for level_set in leveled),
        )

    @staticmethod
    def _record_level(
        leveled: list[set[ComponentData]],
        level: int,
        component: ComponentData,
    ) -> None:
        while len(leveled) <= level:
            leveled.append(set())
        leveled[level].add(component)

    @staticmethod
    def _flush(frame: _ParentFrame, flattened: dict[str, set[str]]) -> None:
        logger.debug("Closing %s with %d dependency line(s)", frame.owner_name, len(frame.children))
        flattened.setdefault(frame.owner_name, set()).update(frame.children)


def parse(
    lines: Iterable[str],
    level_decoder: BaseLevelDecoder | None = None,
    strict_descent: bool = False,
) -> ParseResult:
    """Parse dependency tree lines with a one-off ``DependencyTreeParser``."""
    return DependencyTreeParser(level_decoder, strict_descent).parse(lines)
