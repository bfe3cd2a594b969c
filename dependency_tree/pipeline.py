"""Read -> decode -> parse orchestration driven by a ParserConfig."""

from __future__ import annotations

from collections.abc import Iterable

from dependency_tree.decoder import get_level_decoder
from dependency_tree.models import ParseResult, ParserConfig
from dependency_tree.parser import DependencyTreeParser
from dependency_tree.reader import read_tree_lines


def run_parse(config: ParserConfig, lines: Iterable[str] | None = None) -> ParseResult:
    """Parse ``lines``, or the configured tree file when no lines are given."""
    if lines is None:
        if config.tree_file is None:
            raise ValueError("No dependency tree lines given and no tree_file configured")
        lines = read_tree_lines(config.tree_file, skip_blank_lines=config.skip_blank_lines)

    decoder = get_level_decoder(config.level_decoder, indent_width=config.indent_width)
    parser = DependencyTreeParser(level_decoder=decoder, strict_descent=config.strict_descent)
    return parser.parse(lines)
