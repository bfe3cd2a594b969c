"""Tests for line decoding: depth rules and coordinate parsing."""

import pytest

from dependency_tree.decoder import (
    IndentLevelDecoder,
    MavenLevelDecoder,
    decode_line,
    get_level_decoder,
    parse_coordinate,
)
from dependency_tree.errors import MalformedLineError
from dependency_tree.models import ComponentData


class TestMavenLevelDecoder:
    @pytest.mark.parametrize("line, expected", [
        ("org.example:portal:jar:1.0.0", 0),
        ("+- org.example:auth:jar:2.1.0:compile", 1),
        ("\\- org.example:auth:jar:2.1.0:compile", 1),
        ("|  +- org.example:crypto:jar:1.4.0:compile", 2),
        ("   \\- org.example:crypto:jar:1.4.0:compile", 2),
        ("|  |  \\- org.bouncycastle:bcprov:jar:1.70:compile", 3),
    ])
    def test_levels(self, line, expected):
        assert MavenLevelDecoder().decode_level(line) == expected

    def test_single_prefix_char_is_level_one(self):
        assert MavenLevelDecoder().decode_level(" g:a:jar:1") == 1

    def test_halving_rule_applies_beyond_depth_three(self):
        # 10 prefix characters halve to 5, not 4
        assert MavenLevelDecoder().decode_level("|  |  |  +- g:a:jar:1") == 5

    def test_empty_line(self):
        assert MavenLevelDecoder().decode_level("") == 0


class TestIndentLevelDecoder:
    def test_width_two(self):
        decoder = IndentLevelDecoder()
        assert decoder.decode_level("g:a:jar:1") == 0
        assert decoder.decode_level("  g:a:jar:1") == 1
        assert decoder.decode_level("    g:a:jar:1") == 2

    def test_custom_width(self):
        assert IndentLevelDecoder(width=4).decode_level("        g:a:jar:1") == 2

    def test_tabs_expand_to_one_level(self):
        assert IndentLevelDecoder(width=4).decode_level("\tg:a:jar:1") == 1

    def test_rejects_non_positive_width(self):
        with pytest.raises(ValueError, match="positive"):
            IndentLevelDecoder(width=0)


class TestRegistry:
    def test_default_is_maven(self):
        assert isinstance(get_level_decoder(), MavenLevelDecoder)

    def test_indent_width_passed_through(self):
        decoder = get_level_decoder("indent", indent_width=3)
        assert isinstance(decoder, IndentLevelDecoder)
        assert decoder.width == 3

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown level decoder"):
            get_level_decoder("gradle")


class TestParseCoordinate:
    def test_four_parts(self):
        assert parse_coordinate("org.example:portal:jar:1.0.0") == ComponentData("portal", "1.0.0")

    def test_five_parts_with_scope(self):
        c = parse_coordinate("+- org.example:auth:jar:2.1.0:compile")
        assert c == ComponentData("auth", "2.1.0")

    def test_six_parts_with_classifier(self):
        c = parse_coordinate("\\- org.example:native:jar:linux-x86_64:3.0.0:compile")
        assert c == ComponentData("native", "3.0.0")

    def test_omitted_duplicate_marker(self):
        c = parse_coordinate("|  \\- (org.example:crypto:jar:1.4.0:compile - omitted for duplicate)")
        assert c == ComponentData("crypto", "1.4.0")

    @pytest.mark.parametrize("line, count", [
        ("org.example:auth:2.1.0", 3),
        ("a:b:c:d:e:f:g", 7),
        ("", 1),
    ])
    def test_malformed(self, line, count):
        with pytest.raises(MalformedLineError) as exc_info:
            parse_coordinate(line)
        assert exc_info.value.line == line
        assert exc_info.value.part_count == count
        assert "instead of 4, 5 or 6" in str(exc_info.value)

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            parse_coordinate("nope")


def test_decode_line():
    level, component = decode_line("|  +- g:crypto:jar:1.4.0:compile", MavenLevelDecoder())
    assert level == 2
    assert component == ComponentData("crypto", "1.4.0")
    assert component.coordinate == "crypto:1.4.0"
