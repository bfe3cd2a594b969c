"""Serialize a ParseResult to JSON."""

from __future__ import annotations

import json
from pathlib import Path

from dependency_tree.models import ParseResult


def result_to_dict(result: ParseResult) -> dict:
    """Build a JSON-ready dict with deterministic ordering."""
    return {
        "depth": result.depth,
        "leveled_dependencies": [
            [
                {"name": c.name, "version": c.version}
                for c in sorted(level_set, key=lambda c: (c.name, c.version))
            ]
            for level_set in result.leveled_dependencies
        ],
        "flattened_dependencies": {
            name: sorted(deps)
            for name, deps in sorted(result.flattened_dependencies.items())
        },
    }


def write_json(result: ParseResult, path: Path) -> Path:
    """Write the result as indented JSON and return the path."""
    path = Path(path)
    path.write_text(
        json.dumps(result_to_dict(result), indent=2) + "\n",
        encoding="utf-8",
    )
    return path
