"""Level decoder registry and line decoding helpers."""

from __future__ import annotations

from dependency_tree.decoder.base import BaseLevelDecoder
from dependency_tree.decoder.coordinates import decode_line, parse_coordinate
from dependency_tree.decoder.indent_decoder import IndentLevelDecoder
from dependency_tree.decoder.maven_decoder import MavenLevelDecoder

_DECODERS: dict[str, type[BaseLevelDecoder]] = {
    MavenLevelDecoder.name: MavenLevelDecoder,
    IndentLevelDecoder.name: IndentLevelDecoder,
}

DECODER_NAMES = tuple(_DECODERS)


def get_level_decoder(name: str = "maven", indent_width: int = 2) -> BaseLevelDecoder:
    """Build the level decoder registered under ``name``."""
    try:
        decoder_cls = _DECODERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown level decoder {name!r}; expected one of {', '.join(DECODER_NAMES)}"
        ) from None
    if decoder_cls is IndentLevelDecoder:
        return IndentLevelDecoder(width=indent_width)
    return decoder_cls()


__all__ = [
    "BaseLevelDecoder",
    "DECODER_NAMES",
    "IndentLevelDecoder",
    "MavenLevelDecoder",
    "decode_line",
    "get_level_decoder",
    "parse_coordinate",
]
