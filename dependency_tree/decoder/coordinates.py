"""Component identity decoding from colon-separated coordinates."""

from __future__ import annotations

from dependency_tree.decoder.base import BaseLevelDecoder
from dependency_tree.errors import MalformedLineError
from dependency_tree.models import ComponentData


def parse_coordinate(line: str) -> ComponentData:
    """Return the component named by a dependency line.

    Accepted shapes (the tree prefix stays glued to the group ID):
        <group>:<artifact>:<type>:<version>
        <group>:<artifact>:<type>:<version>:<scope>
        <group>:<artifact>:<type>:<classifier>:<version>:<scope>
    Duplicate markers such as ``(g:a:jar:1.0:compile - omitted for duplicate)``
    fall into the 5-part shape and decode to the same identity.
    """
    parts = line.split(":")
    if len(parts) in (4, 5):
        return ComponentData(parts[1], parts[3])
    if len(parts) == 6:
        return ComponentData(parts[1], parts[4])
    raise MalformedLineError(line, len(parts))


def decode_line(line: str, level_decoder: BaseLevelDecoder) -> tuple[int, ComponentData]:
    """Decode one line into ``(level, component)``."""
    return level_decoder.decode_level(line), parse_coordinate(line)
