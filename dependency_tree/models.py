"""Data models for the dependency tree parser."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType


@dataclass(frozen=True)
class ComponentData:
    """One node of the dependency tree, identified by name and version."""
    name: str
    version: str

    @property
    def coordinate(self) -> str:
        return f"{self.name}:{self.version}"


@dataclass(frozen=True)
class ParseResult:
    """Output of a parse: flattened relation plus per-level component sets.

    Read-only once built; not hashable since the relation is a mapping.
    """
    flattened_dependencies: Mapping[str, frozenset[str]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    leveled_dependencies: tuple[frozenset[ComponentData], ...] = ()

    __hash__ = None  # type: ignore[assignment]

    @property
    def depth(self) -> int:
        return len(self.leveled_dependencies)

    @property
    def components(self) -> frozenset[ComponentData]:
        return frozenset().union(*self.leveled_dependencies)

    def dependencies_of(self, name: str) -> frozenset[str]:
        return self.flattened_dependencies.get(name, frozenset())

    def depends_on(self, name: str, other: str) -> bool:
        """True when ``name`` depends, directly or transitively, on ``other``."""
        return other in self.dependencies_of(name)


@dataclass
class ParserConfig:
    """Configuration for reading and parsing a dependency tree."""
    tree_file: Path | None = None
    level_decoder: str = "maven"
    indent_width: int = 2
    strict_descent: bool = False
    skip_blank_lines: bool = True
