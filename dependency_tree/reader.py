"""Read dependency tree report files."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_tree_lines(path: Path, skip_blank_lines: bool = True) -> list[str]:
    """Return the lines of a dependency tree report, without line terminators."""
    text = Path(path).read_text(encoding="utf-8")
    lines = [line.rstrip() for line in text.splitlines()]
    if skip_blank_lines:
        lines = [line for line in lines if line]
    logger.debug("Read %d tree line(s) from %s", len(lines), path)
    return lines
