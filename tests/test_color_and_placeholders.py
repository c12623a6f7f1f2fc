"""
Unit tests for color translation and placeholder substitution.
"""

from configurable_gui import PlaceholderUtil
from configurable_gui.color import parse_color, strip_color, translate_color_codes


class TestColor:
    """Test & color code translation."""

    def test_legacy_codes(self) -> None:
        assert translate_color_codes("&aGreen &LBold") == "§aGreen §lBold"

    def test_hex_codes(self) -> None:
        assert translate_color_codes("&#FF8800Orange") == "§x§f§f§8§8§0§0Orange"

    def test_non_codes_untouched(self) -> None:
        assert translate_color_codes("Tom & Jerry &z") == "Tom & Jerry &z"

    def test_parse_color_list_and_none(self) -> None:
        assert parse_color(["&1a", "b"]) == ["§1a", "b"]
        assert parse_color(None) is None
        assert parse_color("&r") == "§r"

    def test_strip_color(self) -> None:
        assert strip_color(translate_color_codes("&c&lWarn&r!")) == "Warn!"
        assert strip_color(None) is None


class TestPlaceholderUtil:
    """Test placeholder substitution."""

    def test_apply_string(self) -> None:
        util = PlaceholderUtil().add("{player}", "Alex").add("{level}", 3)
        assert util.apply("{player} is level {level}") == "Alex is level 3"

    def test_apply_list(self) -> None:
        util = PlaceholderUtil.of({"{x}": "1"})
        assert util.apply(["{x}", "y"]) == ["1", "y"]

    def test_apply_none(self) -> None:
        assert PlaceholderUtil().apply(None) is None

    def test_re_adding_replaces_value(self) -> None:
        util = PlaceholderUtil.of({"{a}": "1", "{b}": "2"})
        util.add("{a}", "3")
        assert [p.placeholder for p in util.placeholders] == ["{a}", "{b}"]
        assert util.apply("{a}{b}") == "32"

    def test_applied_in_order(self) -> None:
        util = PlaceholderUtil.of({"{outer}": "{inner}", "{inner}": "done"})
        assert util.apply("{outer}") == "done"
