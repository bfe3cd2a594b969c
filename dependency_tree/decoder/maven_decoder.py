"""Level decoder for Maven ``dependency:tree`` text output."""

from __future__ import annotations

from dependency_tree.decoder.base import BaseLevelDecoder

# Characters the tree renderer uses to draw branches.
_TREE_CHARS = "+ \\|"


class MavenLevelDecoder(BaseLevelDecoder):
    """Decode depth from Maven's ``+-``, ``\\-`` and ``|`` branch prefixes.

    Maven draws three characters per level (``+- ``, ``|  ``), so one
    level is a single prefix character (the dash stops the count) and
    deeper levels are the prefix length halved.
    """

    name = "maven"

    def decode_level(self, line: str) -> int:
        indent = self.count_prefix(line, _TREE_CHARS)
        return indent if indent <= 1 else indent // 2
