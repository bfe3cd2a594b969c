"""Tests for config-driven parsing."""

from pathlib import Path

import pytest

from dependency_tree.errors import LevelJumpError
from dependency_tree.models import ParserConfig
from dependency_tree.pipeline import run_parse

FIXTURES = Path(__file__).parent / "fixtures"


def test_run_parse_from_file():
    result = run_parse(ParserConfig(tree_file=FIXTURES / "portal.tree"))
    assert result.depth == 4
    assert result.depends_on("auth", "bcprov")


def test_run_parse_with_indent_decoder():
    config = ParserConfig(tree_file=FIXTURES / "indented.tree", level_decoder="indent")
    result = run_parse(config)
    assert result.depends_on("app", "util")


def test_run_parse_with_lines():
    result = run_parse(ParserConfig(), lines=["g:a:jar:1", "+- g:b:jar:1"])
    assert result.depends_on("a", "b")


def test_run_parse_strict():
    config = ParserConfig(strict_descent=True)
    with pytest.raises(LevelJumpError):
        run_parse(config, lines=["g:a:jar:1", "+- g:b:jar:1", "|  |  +- g:c:jar:1"])


def test_run_parse_without_input():
    with pytest.raises(ValueError, match="no tree_file"):
        run_parse(ParserConfig())


def test_run_parse_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_parse(ParserConfig(tree_file=tmp_path / "missing.tree"))
