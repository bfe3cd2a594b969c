"""dependency-tree: parse build-tool dependency tree reports."""

from __future__ import annotations

from dependency_tree.errors import (
    DependencyTreeError,
    LevelJumpError,
    MalformedLineError,
    StackUnderflowError,
)
from dependency_tree.models import ComponentData, ParseResult, ParserConfig
from dependency_tree.parser import DependencyTreeParser, parse

__version__ = "0.1.0"

__all__ = [
    "ComponentData",
    "DependencyTreeError",
    "DependencyTreeParser",
    "LevelJumpError",
    "MalformedLineError",
    "ParseResult",
    "ParserConfig",
    "StackUnderflowError",
    "parse",
]
