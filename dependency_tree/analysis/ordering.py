"""Resolution ordering derived from leveled dependencies."""

from __future__ import annotations

from collections.abc import Iterable

from dependency_tree.models import ComponentData, ParseResult


def _walk_levels(levels: Iterable[frozenset[ComponentData]]) -> list[ComponentData]:
    seen: set[ComponentData] = set()
    order: list[ComponentData] = []
    for level_set in levels:
        for component in sorted(level_set, key=lambda c: (c.name, c.version)):
            if component in seen:
                continue
            seen.add(component)
            order.append(component)
    return order


def bootstrap_order(result: ParseResult) -> list[ComponentData]:
    """Components level by level, shallowest first.

    Within a level components are sorted by (name, version). A component
    seen at several depths is listed once, at its shallowest depth.
    """
    return _walk_levels(result.leveled_dependencies)


def load_order(result: ParseResult) -> list[ComponentData]:
    """Components deepest first, so each one's dependencies come before it."""
    return _walk_levels(reversed(result.leveled_dependencies))


def dependents_of(result: ParseResult, name: str) -> set[str]:
    """Names of every component that depends on ``name``."""
    return {
        owner
        for owner, deps in result.flattened_dependencies.items()
        if name in deps
    }
